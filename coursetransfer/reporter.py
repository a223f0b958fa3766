"""
Transfer Reporter - Main Orchestrator.

This module contains the TransferReporter class that connects the
parsing/counting layer to the output layer.

NOTE: Don't run this file directly. Run from the repository root:
    python3 -m coursetransfer
"""

from datetime import datetime
from pathlib import Path
from typing import Optional

from .config import COURSES_TO_TRANSFER_FILE, PROGRAMS_FILE
from .data import DataLoader, DegreeProgramParser, parse_course_list
from .engines import count_transfers
from .models import ProgramCatalogParseError, ReportRunResult, TransferReport
from .ui import TerminalDisplay, TextReportWriter


class TransferReporter:
    """
    Main interface for generating a transfer report.

    ═══════════════════════════════════════════════════════════════════════════
    ROLE: ORCHESTRATOR
    ═══════════════════════════════════════════════════════════════════════════

    A run is a straight line:

        read course list -> read programs -> count -> write report

    Every stage below this class raises on failure. This class is the one
    boundary where failures are caught: the message is printed and the run
    returns a ReportRunResult with `error` set instead of crashing.

    - Input failure (missing file, unreadable file, malformed programs.txt):
      the run stops before anything is counted or written.
    - Write failure: the counts are kept in the result, but no report_path.

    ═══════════════════════════════════════════════════════════════════════════

    USAGE:
        reporter = TransferReporter()
        result = reporter.run()
        if result.succeeded:
            print(result.report_path)

        # Tests and tools can point it somewhere else
        reporter = TransferReporter(DataLoader(tmp_dir), output_dir=tmp_dir)
    """

    def __init__(self, loader: Optional[DataLoader] = None, output_dir: Optional[Path] = None,
                 display=None, clock=datetime.now):
        self.loader = loader or DataLoader()
        self.writer = TextReportWriter(output_dir)
        self.display = display or TerminalDisplay()
        self.clock = clock

    def run(self, courses_filename: str = COURSES_TO_TRANSFER_FILE,
            programs_filename: str = PROGRAMS_FILE) -> ReportRunResult:
        """
        Generate one transfer report.

        Args:
            courses_filename: Course list to read from the data directory
            programs_filename: Degree program catalog to read from the data directory

        Returns:
            ReportRunResult describing what was computed and where it was saved
        """
        result = ReportRunResult()

        # STEP 1: Course list
        try:
            result.courses = self.load_courses(courses_filename)
        except (OSError, ValueError) as e:
            return self._fail(result, f"Error accessing file: {e}")

        # STEP 2: Degree programs
        try:
            result.catalog = self.load_programs(programs_filename)
        except ProgramCatalogParseError as e:
            return self._fail(result, f"Invalid degree program file {programs_filename}: {e}")
        except (OSError, ValueError) as e:
            return self._fail(result, f"Error accessing file: {e}")

        # STEP 3: Count
        self.display.print_status(
            "Generating a count of how many courses will transfer to each degree program..."
        )
        result.counts = count_transfers(result.courses, result.catalog)

        # STEP 4: Report
        self.display.print_status("Generating Course Transfer Report...")
        report = TransferReport(
            generated_on=self.clock(),
            courses=result.courses,
            counts=result.counts,
        )
        try:
            result.report_path = self.writer.write(report)
        except OSError as e:
            return self._fail(result, f"Could not write report: {e}")

        self.display.print_summary(result.courses, result.counts)
        self.display.print_success(f"Report saved to {result.report_path}")
        return result

    def load_courses(self, filename: str) -> set:
        """Read and parse a course list file."""
        self.display.print_status(f"Reading file: {filename}")
        lines = self.loader.read_lines(filename)
        self.display.print_status("Generating course transfer list...")
        return parse_course_list(lines)

    def load_programs(self, filename: str) -> dict:
        """Read and parse the degree program catalog."""
        self.display.print_status(f"Reading file: {filename}")
        lines = self.loader.read_lines(filename)
        self.display.print_status("Generating degree program catalog...")

        parser = DegreeProgramParser()
        catalog = parser.parse(lines)
        for name in parser.duplicate_names:
            self.display.print_warning(
                f"Degree program '{name}' is listed more than once; using its last section"
            )
        return catalog

    def _fail(self, result: ReportRunResult, message: str) -> ReportRunResult:
        self.display.print_error(message)
        result.error = message
        return result
