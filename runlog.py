import csv
import io
import logging
import sys
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path


HEADER = ("startTimestamp", "endTimestamp", "elapsedSeconds", "username")

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RunRecord:
	"""One completed run. Timestamps are written as Unix epoch seconds."""

	start: datetime
	end: datetime
	username: str

	@property
	def elapsed_seconds(self) -> int:
		# Truncated, never rounded
		return int((self.end - self.start).total_seconds())

	def as_row(self) -> list[str]:
		return [
			str(int(self.start.timestamp())),
			str(int(self.end.timestamp())),
			str(self.elapsed_seconds),
			self.username,
		]


def format_rows(record: RunRecord, with_header: bool) -> str:
	buf = io.StringIO()
	writer = csv.writer(buf, lineterminator="\n")
	if with_header:
		writer.writerow(HEADER)
	writer.writerow(record.as_row())
	return buf.getvalue()


def append(output_path: Path, record: RunRecord) -> None:
	"""Append ``record`` to the CSV at ``output_path``.

	The header is written only when the file did not exist before this call.
	Any failure exits the process with status 1.
	"""
	output_path = Path(output_path)
	write_header = not output_path.is_file()
	try:
		data = format_rows(record, write_header)
	except csv.Error as e:
		logger.error("Failed to write result to CSV. %s", e)
		sys.exit(1)
	try:
		with open(output_path, "a", encoding="utf-8", newline="") as f:
			f.write(data)
	except OSError as e:
		logger.error("Failed to write output file %s. %s", output_path, e)
		sys.exit(1)
	logger.debug("Appended run to %s (header=%s)", output_path, write_header)
