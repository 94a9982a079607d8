"""
Console menu: the interactive advising assistant.

    python -m app.menu

Options:
    1  load course data from a file
    2  print every course, sorted by course number
    3  print one course's title and prerequisites
    9  exit
"""

import sys
from pathlib import Path
from typing import TextIO

from app.logging_setup import setup_logging
from catalog.catalog import CourseCatalog, CourseDetail, CourseListing, LoadResult
from catalog.config import SETTINGS
from catalog.errors import CatalogError

RULE = "-" * 41
BANNER = "=" * 61

MENU = (
    "================= ABCU Advising Assistance =================\n"
    "1. Load data structure from file\n"
    "2. Print an alphanumeric list of all courses\n"
    "3. Print course information (title and prerequisites)\n"
    "9. Exit\n"
    f"{BANNER}\n"
    "Enter your choice (1, 2, 3, or 9): "
)


# ---------------------------------------------------------------------------
# Formatting
# ---------------------------------------------------------------------------

def format_load_result(result: LoadResult) -> str:
    text = f"Loaded {result.loaded} course(s)"
    if result.skipped:
        text += f" ({result.skipped} line(s) skipped for format issues)"
    return text + f'.\nFile "{result.source}" loaded successfully.'


def format_listing(listing: CourseListing) -> str:
    lines = ["", "ABCU Computer Science Course List (sorted)", RULE]
    lines += [f"{c.number}, {c.title}" for c in listing.courses]
    lines += [RULE, f"Total: {listing.total} course(s)"]
    return "\n".join(lines)


def format_detail(detail: CourseDetail) -> str:
    lines = ["", f"{detail.number}: {detail.title}"]
    if not detail.has_prereqs:
        lines.append("Prerequisites: None")
        return "\n".join(lines)

    lines.append("Prerequisites:")
    for p in detail.prereqs:
        if p.resolved:
            lines.append(f"  - {p.number}: {p.title}")
        else:
            lines.append(f"  - {p.number} (title not found in file)")
    return "\n".join(lines)


# ---------------------------------------------------------------------------
# Menu loop
# ---------------------------------------------------------------------------

def run_menu(
    catalog: CourseCatalog,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
    default_file: Path | None = None,
    delimiter: str = ",",
) -> None:
    """Drive the menu until the user picks 9 or input runs out."""
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout

    def say(text: str = "", end: str = "\n") -> None:
        print(text, end=end, file=stdout, flush=True)

    def ask(prompt: str) -> str | None:
        say(prompt, end="")
        line = stdin.readline()
        return line.strip() if line else None

    while True:
        choice = ask(MENU)
        if choice is None:
            say("\nInput stream closed. Exiting.")
            return

        try:
            if choice == "1":
                hint = f" [{default_file}]" if default_file else ""
                fname = ask(f"Enter the course data filename (e.g., courses.csv){hint}: ")
                if not fname:
                    if default_file is None:
                        say("Error: filename cannot be empty.\n")
                        continue
                    fname = str(default_file)
                say(format_load_result(catalog.load_file(fname, delimiter=delimiter)) + "\n")

            elif choice == "2":
                say(format_listing(catalog.list_all()) + "\n")

            elif choice == "3":
                number = ask("Enter a course number to look up (e.g., CSCI200): ")
                say(format_detail(catalog.describe(number or "")) + "\n")

            elif choice == "9":
                say("Goodbye!")
                return

            else:
                say("Invalid selection. Please enter 1, 2, 3, or 9.\n")

        except CatalogError as exc:
            say(f"{exc}\n")


def main() -> None:
    setup_logging(SETTINGS.log_dir)
    catalog = CourseCatalog(preserve_on_failure=SETTINGS.preserve_on_failure)
    default_file = SETTINGS.courses_file if SETTINGS.courses_file.exists() else None
    run_menu(catalog, default_file=default_file, delimiter=SETTINGS.delimiter)


if __name__ == "__main__":
    main()
