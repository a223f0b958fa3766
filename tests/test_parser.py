import pytest

from coursetransfer import (
    DegreeProgramParser,
    ProgramCatalogParseError,
    parse_course_list,
    parse_degree_programs,
)
from coursetransfer.data.parser import is_program_marker, program_name_from_marker


class TestCourseList:

    def test_one_course_per_line(self):
        assert parse_course_list(["CS101", "MATH201"]) == {"CS101", "MATH201"}

    def test_duplicates_collapse(self):
        courses = parse_course_list(["CS101", "CS101", "CS101"])
        assert courses == {"CS101"}

    def test_empty_input(self):
        assert parse_course_list([]) == set()

    def test_blank_lines_skipped(self):
        assert parse_course_list(["", "CS101", ""]) == {"CS101"}

    def test_lines_taken_verbatim(self):
        courses = parse_course_list(["cs 101 ", "CS101"])
        assert courses == {"cs 101 ", "CS101"}

    def test_parsing_twice_gives_equal_sets(self):
        lines = ["B", "A", "C", "A"]
        assert parse_course_list(lines) == parse_course_list(list(reversed(lines)))


class TestProgramMarker:

    def test_marker_detection(self):
        assert is_program_marker("Program: Nursing")
        assert is_program_marker("Degree Program listing")
        assert not is_program_marker("program: lowercase")
        assert not is_program_marker("CS101")

    def test_name_is_positional_slice(self):
        assert program_name_from_marker("Program: Computer Science") == "Computer Science"

    def test_name_ignores_first_eight_characters(self):
        # Not a split on ":" - the first 8 characters are dropped whatever they are
        assert program_name_from_marker("ProgramXYNursing") == "YNursing"
        assert program_name_from_marker("Program Math: Applied") == "Math: Applied"


class TestDegreePrograms:

    def test_sections(self):
        lines = ["Program: X", "C1", "C2", "Program: Y", "C1"]
        assert parse_degree_programs(lines) == {"X": {"C1", "C2"}, "Y": {"C1"}}

    def test_last_section_flushed_without_trailing_marker(self):
        catalog = parse_degree_programs(["Program: Only", "C1", "C2"])
        assert catalog == {"Only": {"C1", "C2"}}

    def test_program_without_courses_kept(self):
        catalog = parse_degree_programs(["Program: Empty", "Program: Full", "C1"])
        assert catalog == {"Empty": set(), "Full": {"C1"}}

    def test_trailing_empty_program_kept(self):
        catalog = parse_degree_programs(["Program: A", "C1", "Program: B"])
        assert catalog == {"A": {"C1"}, "B": set()}

    def test_duplicate_courses_collapse(self):
        catalog = parse_degree_programs(["Program: A", "C1", "C1", "", "C1"])
        assert catalog == {"A": {"C1"}}

    def test_empty_input(self):
        assert parse_degree_programs([]) == {}

    def test_course_before_first_marker_fails(self):
        with pytest.raises(ProgramCatalogParseError) as exc_info:
            parse_degree_programs(["CS101", "Program: A", "C1"])
        assert exc_info.value.line_number == 1
        assert "CS101" in str(exc_info.value)

    def test_leading_blank_lines_allowed(self):
        assert parse_degree_programs(["", "Program: A", "C1"]) == {"A": {"C1"}}

    def test_marker_without_name_fails(self):
        with pytest.raises(ProgramCatalogParseError) as exc_info:
            parse_degree_programs(["Program: A", "C1", "Program"])
        assert exc_info.value.line_number == 3

    def test_parse_error_is_value_error(self):
        with pytest.raises(ValueError):
            parse_degree_programs(["orphan"])

    def test_duplicate_program_last_section_wins(self):
        parser = DegreeProgramParser()
        catalog = parser.parse(["Program: A", "C1", "Program: B", "C2", "Program: A", "C3"])
        assert catalog == {"A": {"C3"}, "B": {"C2"}}
        assert parser.duplicate_names == ["A"]

    def test_parser_resets_between_runs(self):
        parser = DegreeProgramParser()
        parser.parse(["Program: A", "Program: A"])
        parser.parse(["Program: A"])
        assert parser.duplicate_names == []
