from datetime import datetime

import pytest

from coursetransfer import DataLoader, TransferReporter


SAMPLE_PROGRAMS = """Program: ProgramA
CS101
PHY100
Program: ProgramB
MATH201
CS101
Program: ProgramC
ART100
"""

FIXED_TIME = datetime(2026, 10, 16, 9, 5, 7)


class RecordingDisplay:
    """Stands in for TerminalDisplay and keeps messages instead of printing."""

    def __init__(self):
        self.messages = []

    def _record(self, kind, message):
        self.messages.append((kind, message))

    def print_status(self, message):
        self._record("status", message)

    def print_success(self, message):
        self._record("success", message)

    def print_warning(self, message):
        self._record("warning", message)

    def print_error(self, message):
        self._record("error", message)

    def print_summary(self, courses, counts):
        self._record("summary", dict(counts))

    def of_kind(self, kind):
        return [m for k, m in self.messages if k == kind]


@pytest.fixture
def data_dir(tmp_path):
    d = tmp_path / "data"
    d.mkdir()
    (d / "coursesToTransfer.txt").write_text("CS101\nMATH201\nCS101\n", encoding="utf-8")
    (d / "completedCourses.txt").write_text("ART100\n", encoding="utf-8")
    (d / "programs.txt").write_text(SAMPLE_PROGRAMS, encoding="utf-8")
    return d


@pytest.fixture
def output_dir(tmp_path):
    d = tmp_path / "out"
    d.mkdir()
    return d


@pytest.fixture
def display():
    return RecordingDisplay()


@pytest.fixture
def reporter(data_dir, output_dir, display):
    return TransferReporter(
        DataLoader(data_dir),
        output_dir=output_dir,
        display=display,
        clock=lambda: FIXED_TIME,
    )
