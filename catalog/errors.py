"""
Catalog error taxonomy.

Every failure a caller can act on derives from CatalogError, so the menu and
the API can render one specific message per outcome. Malformed rows and
unresolved prerequisites are not exceptions: they are counted in LoadResult
and flagged on PrereqInfo respectively.
"""

from pathlib import Path


class CatalogError(Exception):
    """Base class for every catalog failure."""


class SourceUnavailable(CatalogError):
    def __init__(self, source: str | Path, reason: str | None = None):
        self.source = str(source)
        self.reason = reason
        message = f'Error: Could not open file "{self.source}".'
        if reason:
            message += f" ({reason})"
        super().__init__(message)


class NoValidRecords(CatalogError):
    def __init__(self, source: str):
        self.source = source
        super().__init__(
            f'Error: No valid course records were loaded from "{source}".'
        )


class NotLoaded(CatalogError):
    def __init__(self):
        super().__init__("Please load data first (Option 1).")


class EmptyQueryKey(CatalogError):
    def __init__(self):
        super().__init__("Error: course number cannot be empty.")


class CourseNotFound(CatalogError):
    def __init__(self, number: str):
        self.number = number
        super().__init__(
            f'Course "{number}" was not found. '
            "Be sure you typed the correct course number (e.g., CSCI200)."
        )
