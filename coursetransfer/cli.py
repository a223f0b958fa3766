"""
Command-Line Interface for the transfer report.

There are no flags or prompts: the input file names are fixed.

ENTRY POINTS:
-------------
1. main(): courses from coursesToTransfer.txt
2. main_completed_courses(): courses from completedCourses.txt

Both read degree programs from programs.txt and write the report to
./reports/ under the current directory.

NOTE: Don't run this file directly. Run from the repository root:
    python3 -m coursetransfer
"""

from .config import COURSES_TO_TRANSFER_FILE, COMPLETED_COURSES_FILE
from .reporter import TransferReporter
from .ui import TerminalDisplay


def _run(courses_filename: str) -> int:
    """Run one report and turn the result into a process exit status."""
    TerminalDisplay.print_header("COURSE TRANSFER REPORT")
    result = TransferReporter().run(courses_filename=courses_filename)
    return 0 if result.succeeded else 1


def main() -> int:
    """Generate a report for the courses in coursesToTransfer.txt."""
    return _run(COURSES_TO_TRANSFER_FILE)


def main_completed_courses() -> int:
    """Generate a report for the courses in completedCourses.txt."""
    return _run(COMPLETED_COURSES_FILE)

