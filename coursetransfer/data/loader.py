"""
Input file loading.

This module handles opening the bundled input files. It knows WHERE the
files live and how to read them; what the lines mean is the parser's job.
"""

from pathlib import Path
from typing import Optional

from ..config import DATA_DIR


class DataLoader:
    """
    Reads the bundled input files line by line.

    DATA SOURCES (all under coursetransfer/data_files/):
    - coursesToTransfer.txt: courses the student wants to transfer
    - completedCourses.txt: alternate course list used by the
      "completed courses" entry point
    - programs.txt: degree programs and the courses each one accepts

    Usage:
        loader = DataLoader()
        lines = loader.read_lines("programs.txt")
    """

    def __init__(self, data_dir: Optional[Path] = None):
        self.data_dir = Path(data_dir) if data_dir is not None else DATA_DIR

    def path_for(self, filename: str) -> Path:
        """Full path of a bundled input file."""
        return self.data_dir / filename

    def read_lines(self, filename: str) -> list:
        """
        Read a bundled input file fully into memory.

        Line terminators (\\n or \\r\\n) and a leading UTF-8 byte order mark
        are removed; nothing else about the line is touched.

        Args:
            filename: File name relative to the data directory

        Returns:
            List of lines in file order

        Raises:
            FileNotFoundError: The file does not exist
            OSError: The file exists but cannot be read
        """
        filepath = self.path_for(filename)
        if not filepath.is_file():
            raise FileNotFoundError(f"No input file found: {filepath}")
        with open(filepath, "r", encoding="utf-8-sig") as f:
            return [line.rstrip("\r\n") for line in f]

