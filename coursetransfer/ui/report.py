"""
Text Report Writer.

This module renders the transfer report as plain text and saves it to the
`reports` directory. It is the file-based counterpart of TerminalDisplay.

OUTPUT FORMAT:
--------------
    Generated Transfer Report
    Generated On: 2026-10-16T14:03:27.512034

    Courses to Transfer: [CS101, MATH201]

    Transferable Course Count by Degree Program:

    ProgramA: 1
    ProgramB: 2
"""

from datetime import datetime
from pathlib import Path
from typing import Optional

from ..config import (
    REPORTS_DIR_NAME,
    REPORT_FILENAME_PREFIX,
    REPORT_ENCODING,
    REPORT_HEADER,
)
from ..models import TransferReport


def render_course_set(courses: set) -> str:
    """Render courses as "[A, B, C]", sorted so the output is stable."""
    return "[" + ", ".join(sorted(courses)) + "]"


def format_report(counts: dict, courses: set, generated_on: Optional[datetime] = None) -> str:
    """
    Build the report text.

    Args:
        counts: {program_name: transfer count}
        courses: The student's course set
        generated_on: Timestamp to print (defaults to now, local time)

    Returns:
        Report text, programs sorted by name
    """
    if generated_on is None:
        generated_on = datetime.now()

    lines = [
        REPORT_HEADER,
        f"Generated On: {generated_on.isoformat()}",
        "",
        f"Courses to Transfer: {render_course_set(courses)}",
        "",
        "Transferable Course Count by Degree Program:",
        "",
    ]
    for program_name in sorted(counts):
        lines.append(f"{program_name}: {counts[program_name]}")

    return "\n".join(lines) + "\n"


def report_filename(generated_on: datetime) -> str:
    """File name for a report, e.g. GeneratedTransferReport-140327.txt."""
    return f"{REPORT_FILENAME_PREFIX}-{generated_on:%H%M%S}.txt"


def write_report(report_text: str, generated_on: datetime, base_dir: Optional[Path] = None) -> Path:
    """
    Save report text under <base_dir>/reports/.

    The reports directory (and any missing parents) is created if needed.
    An existing report with the same name is overwritten.

    Args:
        report_text: Text produced by format_report()
        generated_on: Timestamp used to name the file
        base_dir: Directory to write under (defaults to the current directory)

    Returns:
        Path of the written file

    Raises:
        OSError: The directory or file could not be written
    """
    if base_dir is None:
        base_dir = Path.cwd()

    reports_dir = Path(base_dir) / REPORTS_DIR_NAME
    reports_dir.mkdir(parents=True, exist_ok=True)

    filepath = reports_dir / report_filename(generated_on)
    with open(filepath, "w", encoding=REPORT_ENCODING) as f:
        f.write(report_text)
    return filepath


class TextReportWriter:
    """
    Writes TransferReport objects to disk.

    Usage:
        writer = TextReportWriter()
        path = writer.write(TransferReport(datetime.now(), courses, counts))
    """

    def __init__(self, base_dir: Optional[Path] = None):
        self.base_dir = base_dir

    def render(self, report: TransferReport) -> str:
        return format_report(report.counts, report.courses, report.generated_on)

    def write(self, report: TransferReport) -> Path:
        return write_report(self.render(report), report.generated_on, self.base_dir)
