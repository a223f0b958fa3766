"""
Data models for the transfer report.

This package contains the dataclasses and the parse error used throughout
the system. These serve as "contracts" between the parsers, the counter
and the report writer.
"""

from .program import DegreeProgram, ProgramCatalogParseError
from .report import TransferReport, ReportRunResult

__all__ = [
    # Program models
    "DegreeProgram",
    "ProgramCatalogParseError",
    # Report models
    "TransferReport",
    "ReportRunResult",
]
