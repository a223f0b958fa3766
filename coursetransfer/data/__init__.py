"""
Data loading and parsing module.

This package handles all input file I/O and parsing.
"""

from .loader import DataLoader
from .parser import (
    DegreeProgramParser,
    parse_course_list,
    parse_degree_programs,
)

__all__ = [
    "DataLoader",
    "DegreeProgramParser",
    "parse_course_list",
    "parse_degree_programs",
]
