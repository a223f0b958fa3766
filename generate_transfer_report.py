"""
Course Transfer Report - SCRIPT WRAPPER
=======================================

Convenience script for running the report without installing the package.

USAGE:
------

Option 1 - Run as module:
    python -m coursetransfer

Option 2 - Run this file:
    python generate_transfer_report.py

Option 3 - Import in code:
    from coursetransfer import TransferReporter

    result = TransferReporter().run()

For more information, see coursetransfer/__init__.py
"""

import sys

from coursetransfer.cli import main

if __name__ == "__main__":
    sys.exit(main())
