"""
Course list and degree program parsing.

This module turns the raw lines of the two input files into the in-memory
collections the counter works on:

    coursesToTransfer.txt  ->  {"CS101", "MATH201", ...}
    programs.txt           ->  {"ProgramA": {"CS101", ...}, ...}
"""

from ..config import PROGRAM_MARKER, PROGRAM_NAME_OFFSET
from ..models import DegreeProgram, ProgramCatalogParseError


def parse_course_list(lines) -> set:
    """
    Build the set of courses from a one-course-per-line file.

    Lines are taken verbatim; there is no validation of the course code
    format. Duplicate lines collapse to a single entry and blank lines are
    skipped.
    """
    return {line for line in lines if line}


def is_program_marker(line: str) -> bool:
    """True if this line starts a new degree program section."""
    return PROGRAM_MARKER in line


def program_name_from_marker(line: str) -> str:
    """
    Extract the program name from a marker line.

    The name is everything from PROGRAM_NAME_OFFSET to the end of the line,
    with surrounding whitespace removed:

        "Program: Computer Science"  ->  "Computer Science"
    """
    return line[PROGRAM_NAME_OFFSET:].strip()


class DegreeProgramParser:
    """
    Parses programs.txt into a catalog of {program name: set of courses}.

    FILE FORMAT:
    ------------
        Program: Computer Science
        CS101
        MATH201
        Program: Physics
        PHY100

    A marker line begins a new section. Every following non-blank line,
    up to the next marker or the end of the file, is a course for that
    program.

    FLUSHING:
    ---------
    The section being built is stored in the catalog when the next marker
    line is reached AND at the end of input. Without the final flush the
    last program in the file would be lost.

    MALFORMED INPUT:
    ----------------
    A course line before the first marker has no program to belong to and
    raises ProgramCatalogParseError, as does a marker line with no name.

    DUPLICATE PROGRAMS:
    -------------------
    If a program name appears twice, the later section replaces the earlier
    one. The names are collected in `duplicate_names` so the caller can warn.
    """

    def __init__(self):
        self.duplicate_names = []

    def parse(self, lines) -> dict:
        """
        Parse catalog lines.

        Returns:
            {program_name: set of course codes}

        Raises:
            ProgramCatalogParseError: course before first marker, or empty name
        """
        self.duplicate_names = []
        catalog = {}
        current = None

        for line_number, line in enumerate(lines, 1):
            if is_program_marker(line):
                if current is not None:
                    self._flush(catalog, current)

                name = program_name_from_marker(line)
                if not name:
                    raise ProgramCatalogParseError(
                        f"program marker without a program name: {line!r}", line_number
                    )
                current = DegreeProgram(name=name)
                continue

            if not line:
                continue

            if current is None:
                raise ProgramCatalogParseError(
                    f"course {line!r} appears before the first '{PROGRAM_MARKER}' line",
                    line_number,
                )

            current.courses.add(line)

        if current is not None:
            self._flush(catalog, current)

        return catalog

    def _flush(self, catalog: dict, program: DegreeProgram):
        """Store a finished section in the catalog."""
        if program.name in catalog:
            self.duplicate_names.append(program.name)
        catalog[program.name] = program.courses


def parse_degree_programs(lines) -> dict:
    """Parse catalog lines into {program name: set of courses}."""
    return DegreeProgramParser().parse(lines)
