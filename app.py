import logging
import sys
from pathlib import Path
from typing import Callable

import launcher
import runlog
import settings
from runlog import RunRecord
from settings import Config


LOG_FILENAME = "AppTimer.log"
LOG_FORMAT = "[%(asctime)s] [%(levelname)s] %(name)s: %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"

logger = logging.getLogger(settings.APP_NAME)


def setup_logging(log_path: Path) -> logging.Logger:
	"""Send DEBUG and above to both the console and ``log_path`` (append mode)."""
	formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATEFMT)

	file_handler = logging.FileHandler(log_path, mode="a", encoding="utf-8")
	file_handler.setLevel(logging.DEBUG)
	file_handler.setFormatter(formatter)

	console_handler = logging.StreamHandler(sys.stderr)
	console_handler.setLevel(logging.DEBUG)
	console_handler.setFormatter(formatter)

	root_logger = logging.getLogger()
	root_logger.setLevel(logging.DEBUG)
	root_logger.addHandler(file_handler)
	root_logger.addHandler(console_handler)
	return logger


def run_session(config: Config, ask_username: Callable[[], str | None]) -> RunRecord:
	"""Prompt, run the configured application and append the timed record.

	A cancelled prompt exits with status 0 without touching the output file.
	"""
	username = ask_username()
	if username is None:
		logger.debug("No username entered, exiting")
		sys.exit(0)

	start, end = launcher.run(config)
	record = RunRecord(start=start, end=end, username=username)
	runlog.append(config.output_path, record)
	logger.info(
		"Recorded %ds of %s for %s in %s",
		record.elapsed_seconds,
		config.argv[0],
		username,
		config.output_path,
	)
	return record


def _ask_with_dialog() -> str | None:
	from dialog import UsernameDialog, init_gui

	root = init_gui()
	return UsernameDialog(root).ask()


def main() -> None:
	app_dir = settings.app_data_dir()
	try:
		app_dir.mkdir(parents=True, exist_ok=True)
		setup_logging(app_dir / LOG_FILENAME)
	except OSError as e:
		print(f"Unable to set up {app_dir}: {e}", file=sys.stderr)
		sys.exit(1)

	config = settings.load_or_create(app_dir / settings.CONFIG_FILENAME)
	run_session(config, _ask_with_dialog)
	sys.exit(0)


if __name__ == "__main__":
	main()
