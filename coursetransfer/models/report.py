"""
Report data models.

Contains the TransferReport that gets written to disk and the
ReportRunResult returned by the orchestrator after a run.
"""

from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Optional


@dataclass
class TransferReport:
    """
    Everything needed to render one transfer report.

    Example:
        generated_on: 2026-10-16 14:03:27
        courses: {"CS101", "MATH201"}
        counts: {"ProgramA": 1, "ProgramB": 2}
    """
    generated_on: datetime
    courses: set
    counts: dict


@dataclass
class ReportRunResult:
    """
    Outcome of a single report run.

    The orchestrator never lets an exception escape. Instead, whatever was
    computed before the failure is kept here and `error` holds the message.

    Stages that never ran leave their fields empty:
    - input failure: courses/catalog may be empty, no counts, no report_path
    - write failure: counts are filled in, report_path is None
    """
    courses: set = field(default_factory=set)
    catalog: dict = field(default_factory=dict)
    counts: dict = field(default_factory=dict)
    report_path: Optional[Path] = None
    error: Optional[str] = None

    @property
    def succeeded(self) -> bool:
        return self.error is None and self.report_path is not None
