"""
Transfer Count Engine.

This module computes how many of the student's courses each degree
program accepts.
"""


def count_transfers(courses: set, catalog: dict) -> dict:
    """
    Count the student's courses accepted by each degree program.

    EXAMPLE:
    --------
        courses = {"CS101", "MATH201"}
        catalog = {
            "ProgramA": {"CS101", "PHY100"},
            "ProgramB": {"MATH201", "CS101"},
        }
        -> {"ProgramA": 1, "ProgramB": 2}

    Every program in the catalog is started at 0 so that programs with no
    matching courses still show up in the report. Both sides are sets, so
    each program's count is the size of its intersection with `courses`;
    a course cannot be counted twice for the same program.

    Args:
        courses: Course codes the student wants to transfer
        catalog: {program_name: set of accepted course codes}

    Returns:
        {program_name: number of accepted courses}
    """
    counts = {program_name: 0 for program_name in catalog}

    for course in courses:
        for program_name, program_courses in catalog.items():
            # Exact string match only, "CS101" != "cs101"
            if course in program_courses:
                counts[program_name] += 1

    return counts


def best_programs(counts: dict) -> list:
    """
    Programs with the highest transfer count, sorted by name.

    Returns an empty list when there are no programs or nothing transfers.
    """
    if not counts:
        return []
    top = max(counts.values())
    if top == 0:
        return []
    return sorted(name for name, count in counts.items() if count == top)
