import io

import pytest

from app.menu import format_detail, format_listing, format_load_result, run_menu
from catalog.catalog import CourseCatalog, CourseDetail, LoadResult, PrereqInfo


def _run(catalog, *lines, default_file=None):
    """Feed lines to the menu and return everything it printed."""
    stdin = io.StringIO("".join(f"{line}\n" for line in lines))
    stdout = io.StringIO()
    run_menu(catalog, stdin=stdin, stdout=stdout, default_file=default_file)
    return stdout.getvalue()


class TestFormatting:
    """Test the text renderers."""

    def test_load_result_without_skips(self):
        text = format_load_result(LoadResult(loaded=3, skipped=0, source="c.csv"))
        assert text == 'Loaded 3 course(s).\nFile "c.csv" loaded successfully.'

    def test_load_result_with_skips(self):
        text = format_load_result(LoadResult(loaded=2, skipped=1, source="c.csv"))
        assert "(1 line(s) skipped for format issues)" in text

    def test_detail_without_prereqs(self):
        detail = CourseDetail(number="CSCI100", title="Intro", prereqs=[])
        assert format_detail(detail).splitlines()[-1] == "Prerequisites: None"

    def test_detail_with_prereqs(self):
        detail = CourseDetail(
            number="MATH201",
            title="Discrete Mathematics",
            prereqs=[
                PrereqInfo(number="MATH101"),
                PrereqInfo(number="CSCI100", title="Intro"),
            ],
        )
        assert format_detail(detail).splitlines()[1:] == [
            "MATH201: Discrete Mathematics",
            "Prerequisites:",
            "  - MATH101 (title not found in file)",
            "  - CSCI100: Intro",
        ]

    def test_listing(self, sample_rows):
        cat = CourseCatalog()
        cat.load(sample_rows)
        lines = format_listing(cat.list_all()).splitlines()
        assert lines[3:6] == [
            "CSCI100, Introduction to Computer Science",
            "CSCI200, Data Structures",
            "MATH201, Discrete Mathematics",
        ]
        assert lines[-1] == "Total: 3 course(s)"


class TestMenuLoop:
    """Test the interactive loop end to end."""

    def test_exit(self):
        assert "Goodbye!" in _run(CourseCatalog(), "9")

    def test_end_of_input(self):
        assert "Input stream closed. Exiting." in _run(CourseCatalog())

    def test_invalid_choice(self):
        out = _run(CourseCatalog(), "7", "9")
        assert "Invalid selection. Please enter 1, 2, 3, or 9." in out

    def test_queries_before_load(self):
        out = _run(CourseCatalog(), "2", "3", "CSCI100", "9")
        assert out.count("Please load data first (Option 1).") == 2

    def test_load_then_list_then_describe(self, sample_csv):
        out = _run(CourseCatalog(), "1", str(sample_csv), "2", "3", "math201", "9")
        assert "Loaded 3 course(s)." in out
        assert "CSCI200, Data Structures" in out
        assert "MATH201: Discrete Mathematics" in out
        assert "  - MATH101 (title not found in file)" in out
        assert "  - CSCI100: Introduction to Computer Science" in out

    def test_blank_filename_rejected(self):
        out = _run(CourseCatalog(), "1", "", "9")
        assert "Error: filename cannot be empty." in out

    def test_blank_filename_uses_default(self, sample_csv):
        catalog = CourseCatalog()
        out = _run(catalog, "1", "", "9", default_file=sample_csv)
        assert catalog.is_loaded
        assert f'File "{sample_csv}" loaded successfully.' in out

    def test_missing_file_keeps_running(self, tmp_path):
        out = _run(CourseCatalog(), "1", str(tmp_path / "nope.csv"), "9")
        assert "Could not open file" in out
        assert "Goodbye!" in out

    @pytest.mark.parametrize("query, expected", [
        ("   ", "Error: course number cannot be empty."),
        ("phys100", 'Course "PHYS100" was not found.'),
    ])
    def test_describe_errors(self, sample_csv, query, expected):
        out = _run(CourseCatalog(), "1", str(sample_csv), "3", query, "9")
        assert expected in out
