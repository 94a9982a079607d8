"""
Row source: turns a delimited course file into trimmed field rows.

Expected line format (titles must not contain the delimiter):
    CSCI100,Introduction to Computer Science
    CSCI200,Data Structures,CSCI100
    MATH201,Discrete Mathematics,MATH101,CSCI100

Blank lines are dropped here and never reach the catalog. Everything else is
passed through as-is; deciding whether a row is well-formed is the catalog's
job, so it can report skipped rows by line number.
"""

from collections.abc import Iterable
from pathlib import Path
from typing import NamedTuple

from catalog.errors import SourceUnavailable
from store.course_store import normalize_number

__all__ = ["Row", "normalize_number", "parse_lines", "read_rows", "split_line"]


class Row(NamedTuple):
    line_number: int
    fields: list[str]


def split_line(line: str, delimiter: str = ",") -> list[str]:
    """
    Split on delimiter and trim every field.

    A single trailing delimiter does not open an empty field, so "CSCI100,"
    is one field rather than a course with a blank title.
    """
    if not delimiter:
        raise ValueError("delimiter must not be empty")
    parts = line.split(delimiter)
    if len(parts) > 1 and parts[-1] == "":
        parts.pop()
    return [field.strip() for field in parts]


def parse_lines(lines: Iterable[str], delimiter: str = ",") -> list[Row]:
    rows = []
    for line_number, line in enumerate(lines, start=1):
        trimmed = line.strip()
        if not trimmed:
            continue
        rows.append(Row(line_number, split_line(trimmed, delimiter)))
    return rows


def read_rows(path: str | Path, delimiter: str = ",", encoding: str = "utf-8-sig") -> list[Row]:
    """
    Read the whole file and return its non-blank rows.

    The file is read eagerly so an unreadable source is reported before the
    caller touches any state. utf-8-sig strips the BOM spreadsheet exports add.
    """
    path = Path(path)
    try:
        text = path.read_text(encoding=encoding)
    except (OSError, UnicodeDecodeError) as exc:
        reason = getattr(exc, "strerror", None) or exc.__class__.__name__
        raise SourceUnavailable(path, reason) from exc
    return parse_lines(text.splitlines(), delimiter)
