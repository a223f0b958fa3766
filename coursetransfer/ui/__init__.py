"""
User Interface module.

This package contains the output side of the system: terminal messages
and the text report file.

To add a new output (e.g., CSV, HTML), create a new module in this package
next to report.py.
"""

from .terminal import TerminalDisplay
from .report import (
    TextReportWriter,
    format_report,
    report_filename,
    write_report,
)

__all__ = [
    "TerminalDisplay",
    "TextReportWriter",
    "format_report",
    "report_filename",
    "write_report",
]
