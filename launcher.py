import logging
import subprocess
import sys
from datetime import datetime

import psutil

from settings import Config


logger = logging.getLogger(__name__)


def _now() -> datetime:
	return datetime.now().astimezone()


def run(config: Config) -> tuple[datetime, datetime]:
	"""Launch the configured command and block until it exits.

	Returns the local timestamps taken right before the spawn and right after
	the child returned. The child's own exit status is only logged; failing to
	spawn it exits the process with status 1.
	"""
	argv = config.argv
	start = _now()
	try:
		proc = psutil.Popen(
			argv,
			stdin=subprocess.DEVNULL,
			stdout=subprocess.DEVNULL,
			stderr=subprocess.DEVNULL,
		)
	except OSError as e:
		logger.error("Failed to spawn subprocess %r: %s", config.app_path, e)
		sys.exit(1)
	logger.debug("Spawned %s (pid %d)", argv[0], proc.pid)
	code = proc.wait()
	end = _now()
	logger.debug("Process %d exited with code %s", proc.pid, code)
	return start, end
