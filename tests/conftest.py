import pytest


@pytest.fixture
def sample_lines():
    """The three-course example file, one CSV line per course."""
    return [
        "CSCI100,Introduction to Computer Science",
        "CSCI200,Data Structures,CSCI100",
        "MATH201,Discrete Mathematics,MATH101,CSCI100",
    ]


@pytest.fixture
def sample_rows(sample_lines):
    """sample_lines already split and trimmed."""
    return [[field.strip() for field in line.split(",")] for line in sample_lines]


@pytest.fixture
def sample_csv(tmp_path, sample_lines):
    """sample_lines written to a CSV file."""
    path = tmp_path / "courses.csv"
    path.write_text("\n".join(sample_lines) + "\n", encoding="utf-8")
    return path
