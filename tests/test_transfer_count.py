from coursetransfer import best_programs, count_transfers


CATALOG = {
    "ProgramA": {"CS101", "PHY100"},
    "ProgramB": {"MATH201", "CS101"},
}


def test_counts_per_program():
    counts = count_transfers({"CS101", "MATH201"}, CATALOG)
    assert counts == {"ProgramA": 1, "ProgramB": 2}


def test_empty_course_list_gives_zero_everywhere():
    assert count_transfers(set(), CATALOG) == {"ProgramA": 0, "ProgramB": 0}


def test_every_program_present_and_no_extra_keys():
    catalog = dict(CATALOG, ProgramC=set())
    counts = count_transfers({"NOPE999"}, catalog)
    assert set(counts) == set(catalog)
    assert all(count == 0 for count in counts.values())


def test_empty_catalog():
    assert count_transfers({"CS101"}, {}) == {}


def test_count_matches_intersection_size():
    courses = {"A", "B", "C", "D"}
    catalog = {
        "P1": {"A", "B", "X"},
        "P2": {"X", "Y"},
        "P3": {"A", "B", "C", "D", "E"},
    }
    counts = count_transfers(courses, catalog)
    for name, program_courses in catalog.items():
        assert counts[name] == len(courses & program_courses)


def test_exact_string_match():
    counts = count_transfers({"cs101", "CS101 "}, {"P": {"CS101"}})
    assert counts == {"P": 0}


def test_deterministic():
    courses = {"CS101", "MATH201", "PHY100"}
    assert count_transfers(courses, CATALOG) == count_transfers(set(courses), dict(CATALOG))


def test_best_programs():
    assert best_programs({"B": 2, "A": 2, "C": 1}) == ["A", "B"]


def test_best_programs_nothing_transfers():
    assert best_programs({"A": 0, "B": 0}) == []
    assert best_programs({}) == []
