import configparser
import logging
import os
import sys
from dataclasses import dataclass
from pathlib import Path


APP_NAME = "AppTimer"
SECTION = "AppTimer"
CONFIG_FILENAME = "settings.ini"
OUTPUT_FILENAME = "AppTimer.csv"

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Config:
	app_path: str
	output_path: Path

	@property
	def argv(self) -> list[str]:
		return split_command(self.app_path)


def _home_dir() -> Path | None:
	try:
		return Path.home()
	except (RuntimeError, KeyError):
		return None


def app_data_dir() -> Path:
	"""Per-user directory holding settings.ini and the log file.

	Falls back to the current directory when the home directory is unknown.
	"""
	home = _home_dir()
	if home is None:
		return Path(".")
	if os.name == "nt":
		return home / "AppData" / "Roaming" / APP_NAME
	return home / ".config" / APP_NAME


def default_output_path() -> Path:
	home = _home_dir()
	if home is None:
		return Path(OUTPUT_FILENAME)
	return home / "Desktop" / OUTPUT_FILENAME


def default_app_path(config_path: Path) -> str:
	# Opens the settings file itself so a first run shows the user what to edit
	if os.name == "nt":
		return f"C:\\Windows\\system32\\notepad.exe {config_path}"
	if sys.platform == "darwin":
		return f"open -t {config_path}"
	return f"xdg-open {config_path}"


def split_command(app_path: str) -> list[str]:
	"""Split a configured command line on single spaces.

	The first token is the executable, the rest are its arguments. Quoted
	arguments containing spaces are not supported.
	"""
	return app_path.split(" ")


def _new_parser() -> configparser.ConfigParser:
	return configparser.ConfigParser(interpolation=None)


def write_defaults(path: Path) -> None:
	parser = _new_parser()
	parser[SECTION] = {
		"app_path": default_app_path(path),
		"output_path": str(default_output_path()),
	}
	path.parent.mkdir(parents=True, exist_ok=True)
	with open(path, "w", encoding="utf-8") as f:
		parser.write(f)


def load_or_create(path: Path) -> Config:
	"""Load the configuration at ``path``, writing defaults first if absent.

	Exits the process with status 1 when the file cannot be created, read or
	parsed, or lacks the [AppTimer] section or one of its keys.
	"""
	path = Path(path)
	if not path.is_file():
		try:
			write_defaults(path)
		except OSError as e:
			logger.error("Failed to create default configuration file %s: %s", path, e)
			sys.exit(1)
		logger.info("Created default configuration at %s", path)

	parser = _new_parser()
	try:
		with open(path, "r", encoding="utf-8-sig") as f:
			parser.read_file(f)
	except OSError as e:
		logger.error("Failed to read configuration file %s: %s", path, e)
		sys.exit(1)
	except (configparser.Error, UnicodeDecodeError) as e:
		logger.error("Failed to parse configuration file %s: %s", path, e)
		sys.exit(1)

	try:
		app_path = parser.get(SECTION, "app_path")
		output_path = parser.get(SECTION, "output_path")
	except configparser.Error as e:
		logger.error("Invalid configuration file %s: %s", path, e)
		sys.exit(1)

	logger.debug("Loaded configuration from %s", path)
	return Config(app_path=app_path, output_path=Path(output_path))
