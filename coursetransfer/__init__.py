"""
Course Transfer Report Package
==============================

Counts how many of a student's courses each degree program accepts in
transfer, and writes the result to a timestamped text report.

ARCHITECTURE OVERVIEW
---------------------

┌─────────────────────────────────────────────────────────────────────────┐
│                         ALGORITHM LAYER                                 │
│          (Pure logic - returns data or raises, NO printing)             │
│                                                                         │
│  ┌─────────────┐  ┌──────────────────────┐  ┌───────────────────────┐   │
│  │ DataLoader  │  │ parse_course_list    │  │ count_transfers       │   │
│  │  (I/O)      │  │ DegreeProgramParser  │  │ (set matching)        │   │
│  └─────────────┘  └──────────────────────┘  └───────────────────────┘   │
└─────────────────────────────────────────────────────────────────────────┘
                                   │
                                   │ Returns sets / dicts
                                   ▼
┌─────────────────────────────────────────────────────────────────────────┐
│                      PRESENTATION LAYER                                 │
│                                                                         │
│  ┌──────────────────────────┐   ┌──────────────────────────────────┐    │
│  │ TerminalDisplay          │   │ TextReportWriter                 │    │
│  │ (progress, errors)       │   │ (reports/GeneratedTransfer...)   │    │
│  └──────────────────────────┘   └──────────────────────────────────┘    │
└─────────────────────────────────────────────────────────────────────────┘
                                   ▲
                                   │
┌─────────────────────────────────────────────────────────────────────────┐
│                     TransferReporter                                    │
│      (Orchestrator - catches failures, returns ReportRunResult)         │
└─────────────────────────────────────────────────────────────────────────┘

PACKAGE STRUCTURE
-----------------

coursetransfer/
├── __init__.py          # This file - main exports
├── __main__.py          # python -m coursetransfer
├── config.py            # File names, marker format, report format
├── data_files/          # Bundled coursesToTransfer.txt, completedCourses.txt, programs.txt
├── reporter.py          # TransferReporter orchestrator
├── cli.py               # Entry points
│
├── models/              # Data classes
│   ├── program.py       # DegreeProgram, ProgramCatalogParseError
│   └── report.py        # TransferReport, ReportRunResult
│
├── data/                # Input loading and parsing
│   ├── loader.py        # DataLoader
│   └── parser.py        # parse_course_list, DegreeProgramParser
│
├── engines/
│   └── transfer_count.py # count_transfers
│
└── ui/
    ├── terminal.py      # TerminalDisplay
    └── report.py        # TextReportWriter, format_report

USAGE
-----

    from coursetransfer import TransferReporter

    result = TransferReporter().run()
    print(result.counts)

Running from command line:

    python -m coursetransfer

"""

# Version
__version__ = "1.0.0"

# Main exports
from .reporter import TransferReporter
from .cli import main, main_completed_courses

# Model exports
from .models import (
    DegreeProgram,
    ProgramCatalogParseError,
    TransferReport,
    ReportRunResult,
)

# Engine exports
from .engines import count_transfers, best_programs

# Data exports
from .data import (
    DataLoader,
    DegreeProgramParser,
    parse_course_list,
    parse_degree_programs,
)

# UI exports
from .ui import (
    TerminalDisplay,
    TextReportWriter,
    format_report,
    report_filename,
    write_report,
)

# Configuration exports
from .config import (
    DATA_DIR,
    COURSES_TO_TRANSFER_FILE,
    COMPLETED_COURSES_FILE,
    PROGRAMS_FILE,
    PROGRAM_MARKER,
    PROGRAM_NAME_OFFSET,
    REPORTS_DIR_NAME,
)

__all__ = [
    # Version
    "__version__",
    # Main entry points
    "TransferReporter",
    "main",
    "main_completed_courses",
    # Models
    "DegreeProgram",
    "ProgramCatalogParseError",
    "TransferReport",
    "ReportRunResult",
    # Engines
    "count_transfers",
    "best_programs",
    # Data
    "DataLoader",
    "DegreeProgramParser",
    "parse_course_list",
    "parse_degree_programs",
    # UI
    "TerminalDisplay",
    "TextReportWriter",
    "format_report",
    "report_filename",
    "write_report",
    # Config
    "DATA_DIR",
    "COURSES_TO_TRANSFER_FILE",
    "COMPLETED_COURSES_FILE",
    "PROGRAMS_FILE",
    "PROGRAM_MARKER",
    "PROGRAM_NAME_OFFSET",
    "REPORTS_DIR_NAME",
]
