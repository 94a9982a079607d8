"""
Course catalog: loads parsed rows into the ordered store and answers queries.

The catalog owns two structures, rebuilt together on every load pass:
    _store   CourseStore, number → Course, ordered by number
    _titles  dict, number → title, used to name prerequisites

By default a load clears both before reading any row, so a pass that ends with
zero valid rows leaves the catalog empty and unloaded, even if an earlier load
had succeeded. preserve_on_failure=True builds into fresh structures instead
and only swaps them in once the pass succeeds.

Public API:
    CourseCatalog.load(rows, source)       → LoadResult
    CourseCatalog.load_file(path, delim)   → LoadResult
    CourseCatalog.list_all()               → CourseListing
    CourseCatalog.describe(raw_number)     → CourseDetail
"""

import logging
from collections.abc import Iterable, Sequence
from pathlib import Path

from pydantic import BaseModel, computed_field

from catalog.errors import CourseNotFound, EmptyQueryKey, NoValidRecords, NotLoaded
from etl.rows import Row, read_rows
from store.course_store import Course, CourseStore, normalize_number

log = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Result models
# ---------------------------------------------------------------------------

class LoadResult(BaseModel):
    loaded: int
    skipped: int
    source: str


class CourseSummary(BaseModel):
    number: str
    title: str


class CourseListing(BaseModel):
    courses: list[CourseSummary]
    total: int


class PrereqInfo(BaseModel):
    number: str
    title: str | None = None   # None when the number was never loaded

    @computed_field
    @property
    def resolved(self) -> bool:
        return self.title is not None


class CourseDetail(BaseModel):
    number: str
    title: str
    prereqs: list[PrereqInfo]

    @computed_field
    @property
    def has_prereqs(self) -> bool:
        return bool(self.prereqs)


# ---------------------------------------------------------------------------
# Catalog
# ---------------------------------------------------------------------------

def _unpack(row: Row | Sequence[str], position: int) -> tuple[int, Sequence[str]]:
    """Accept Row tuples from etl.rows or bare field lists (numbered by position)."""
    if isinstance(row, Row):
        return row.line_number, row.fields
    return position, row


def _is_blank(fields: Sequence[str]) -> bool:
    return len(fields) == 0 or (len(fields) == 1 and not fields[0].strip())


class CourseCatalog:
    def __init__(self, preserve_on_failure: bool = False):
        self.preserve_on_failure = preserve_on_failure
        self._store = CourseStore()
        self._titles: dict[str, str] = {}
        self._loaded = False
        self._source: str | None = None

    @property
    def is_loaded(self) -> bool:
        return self._loaded

    @property
    def source(self) -> str | None:
        """Identifier of the last successful load, e.g. its file path."""
        return self._source

    def __len__(self) -> int:
        return self._store.size()

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------

    def load(self, rows: Iterable[Row | Sequence[str]], source: str = "<rows>") -> LoadResult:
        """
        Replace the catalog contents with the given rows.

        Rows with fewer than two fields (or a blank course number) are skipped
        with a warning; blank rows are ignored without being counted. Later rows
        win over earlier rows with the same course number.

        Raises NoValidRecords if not a single row could be loaded.
        """
        if self.preserve_on_failure:
            store, titles = CourseStore(), {}
        else:
            self._store.clear()
            self._titles.clear()
            self._loaded = False
            self._source = None
            store, titles = self._store, self._titles

        loaded = skipped = 0
        for position, row in enumerate(rows, start=1):
            line_number, fields = _unpack(row, position)
            if _is_blank(fields):
                continue

            number = normalize_number(fields[0])
            if len(fields) < 2 or not number:
                log.warning(
                    "Skipping line %d: expected at least course number and title.",
                    line_number,
                )
                skipped += 1
                continue

            prereqs = tuple(
                p for p in (normalize_number(f) for f in fields[2:]) if p
            )
            course = Course(number=number, title=fields[1], prereqs=prereqs)
            store.insert_or_update(course)
            titles[course.number] = course.title
            loaded += 1

        if loaded == 0:
            log.warning("No valid course records in %s (%d skipped).", source, skipped)
            raise NoValidRecords(source)

        self._store, self._titles = store, titles
        self._loaded = True
        self._source = source

        log.info(
            "Loaded %d course(s) from %s (%d line(s) skipped, %d distinct).",
            loaded, source, skipped, store.size(),
        )
        return LoadResult(loaded=loaded, skipped=skipped, source=source)

    def load_file(self, path: str | Path, delimiter: str = ",") -> LoadResult:
        """Read path and load it; SourceUnavailable leaves the catalog untouched."""
        rows = read_rows(path, delimiter=delimiter)
        return self.load(rows, source=str(path))

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def _require_loaded(self) -> None:
        if not self._loaded:
            raise NotLoaded()

    def list_all(self) -> CourseListing:
        self._require_loaded()
        courses = [CourseSummary(number=c.number, title=c.title) for c in self._store]
        return CourseListing(courses=courses, total=len(courses))

    def describe(self, raw_number: str) -> CourseDetail:
        self._require_loaded()
        number = normalize_number(raw_number)
        if not number:
            raise EmptyQueryKey()

        course = self._store.find(number)
        if course is None:
            log.debug("Lookup miss: %s", number)
            raise CourseNotFound(number)

        prereqs = [PrereqInfo(number=p, title=self._titles.get(p)) for p in course.prereqs]
        return CourseDetail(number=course.number, title=course.title, prereqs=prereqs)
