"""
Degree program data models.

Contains the DegreeProgram dataclass and the parse error raised when the
program catalog file is malformed.
"""

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class DegreeProgram:
    """
    A degree program and the courses it accepts in transfer.

    The catalog itself is kept as a plain {name: set of course codes} dict
    because that is what the counter and the report need. DegreeProgram is
    the unit the parser builds one section at a time.

    Attributes:
        name: Program name as sliced from the marker line (e.g., "Computer Science")
        courses: Set of course codes accepted by this program (e.g., {"CS101"})
    """
    name: str
    courses: set = field(default_factory=set)


class ProgramCatalogParseError(ValueError):
    """
    Raised when programs.txt cannot be turned into a catalog.

    The common case is a course line appearing before any "Program" marker
    line, which leaves the course without a program to belong to.
    """

    def __init__(self, message: str, line_number: Optional[int] = None):
        self.line_number = line_number
        if line_number is not None:
            message = f"line {line_number}: {message}"
        super().__init__(message)
