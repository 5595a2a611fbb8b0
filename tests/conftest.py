import sys
from datetime import datetime, timedelta, timezone

import pytest

from runlog import RunRecord
from settings import Config


@pytest.fixture
def home(tmp_path, monkeypatch):
	"""Point the home directory at a scratch folder."""
	monkeypatch.setenv("HOME", str(tmp_path))
	monkeypatch.setenv("USERPROFILE", str(tmp_path))
	return tmp_path


@pytest.fixture
def python_script(tmp_path):
	"""Write a small Python script and return a command line running it."""

	def make(body: str, name: str = "child.py") -> str:
		script = tmp_path / name
		script.write_text(body, encoding="utf-8")
		return f"{sys.executable} {script}"

	return make


@pytest.fixture
def config_for(tmp_path):
	def make(app_path: str) -> Config:
		return Config(app_path=app_path, output_path=tmp_path / "out" / "AppTimer.csv")

	return make


@pytest.fixture
def make_record():
	"""Build a record that started at 2024-03-01 09:30:00 UTC."""

	def make(username: str = "alice", seconds: float = 2.0) -> RunRecord:
		start = datetime(2024, 3, 1, 9, 30, 0, tzinfo=timezone.utc)
		return RunRecord(start=start, end=start + timedelta(seconds=seconds), username=username)

	return make
