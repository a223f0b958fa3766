"""
Configuration constants for the transfer report.

This module contains all configuration values and constants used throughout
the report pipeline. Centralizing these makes it easy to adjust file names
and formats when the input data changes.
"""

from pathlib import Path

# =============================================================================
# FILE PATHS
# =============================================================================

# Bundled input files live inside the package (see package-data in pyproject.toml)
PACKAGE_DIR = Path(__file__).parent
DATA_DIR = PACKAGE_DIR / "data_files"

# Input files bundled in DATA_DIR
COURSES_TO_TRANSFER_FILE = "coursesToTransfer.txt"
COMPLETED_COURSES_FILE = "completedCourses.txt"
PROGRAMS_FILE = "programs.txt"


# =============================================================================
# DEGREE PROGRAM FORMAT
# =============================================================================
# programs.txt is a sequence of sections. A section starts with a marker line,
# e.g. "Program: Computer Science", and every line after it (until the next
# marker) is a course that program accepts.
#
# The program name is a positional slice of the marker line, NOT a split on
# ":". Anything before character 8 is ignored.

PROGRAM_MARKER = "Program"
PROGRAM_NAME_OFFSET = 8


# =============================================================================
# REPORT OUTPUT
# =============================================================================

# Reports are written to <cwd>/reports/
REPORTS_DIR_NAME = "reports"
REPORT_FILENAME_PREFIX = "GeneratedTransferReport"
REPORT_ENCODING = "utf-8"

REPORT_HEADER = "Generated Transfer Report"
