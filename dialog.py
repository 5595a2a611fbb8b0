import logging
import sys
from tkinter import Tk, StringVar, TclError, ttk
from tkinter import font as tkfont


MAX_USERNAME_LENGTH = 32
FONT_FAMILY = "Segoe UI"

logger = logging.getLogger(__name__)


def init_gui() -> Tk:
	try:
		root = Tk()
	except TclError as e:
		logger.error("Unable to initialize GUI window. %s", e)
		sys.exit(1)
	try:
		for name in ("TkDefaultFont", "TkTextFont"):
			tkfont.nametofont(name).configure(family=FONT_FAMILY)
	except TclError as e:
		logger.error("Unable to set font. %s", e)
		root.destroy()
		sys.exit(1)
	return root


class UsernameDialog:
	"""Modal prompt that only returns once a non-empty username is entered.

	Escape or closing the window cancels, in which case ask() returns None.
	"""

	def __init__(self, root: Tk):
		self.root = root
		self.root.title("Please Enter Your Username")
		self.root.geometry("300x200")
		self.root.resizable(False, False)

		self.username_var = StringVar(value="")
		self._cancelled = False

		self._build_ui()

		self.root.protocol("WM_DELETE_WINDOW", self._on_close)
		self.root.bind("<Escape>", self._on_esc)
		self.root.bind("<Return>", self._on_enter)

	def _build_ui(self) -> None:
		root = self.root
		pad = {"padx": 10, "pady": 10}

		row = ttk.Frame(root)
		row.pack(fill="x", **pad)
		(ttk.Label(row, text="Username: ")).pack(side="left")
		limit = (root.register(self._within_limit), "%P")
		self.entry = ttk.Entry(row, textvariable=self.username_var, validate="key", validatecommand=limit)
		self.entry.pack(side="left", fill="x", expand=True)
		self.entry.focus_set()

		footer = ttk.Frame(root)
		footer.pack(fill="x", side="bottom", **pad)
		self.btn_ok = ttk.Button(footer, text="Ok", command=self._on_ok)
		self.btn_ok.pack(side="right")

	def _within_limit(self, proposed: str) -> bool:
		return len(proposed) <= MAX_USERNAME_LENGTH

	def _accept(self) -> None:
		if not self.username_var.get():
			# Stay on screen until something is typed
			self.root.bell()
			self.entry.focus_set()
			return
		self.root.quit()

	def _on_ok(self) -> None:
		logger.debug("User accepted with OK button")
		self._accept()

	def _on_enter(self, evt=None) -> None:
		logger.debug("User accepted with ENTER key")
		self._accept()

	def _on_esc(self, evt=None) -> None:
		logger.debug("User terminated with ESC key")
		self._cancelled = True
		self.root.quit()

	def _on_close(self) -> None:
		logger.debug("User terminated by closing window")
		self._cancelled = True
		self.root.quit()

	def ask(self) -> str | None:
		self.root.mainloop()
		username = None if self._cancelled else self.username_var.get()
		try:
			self.root.destroy()
		except TclError:
			pass
		return username
