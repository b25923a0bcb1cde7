from __future__ import annotations

import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, Optional

from rich.console import Console
from rich.markup import escape

from courseplanner.hash_table import CourseHashTable
from courseplanner.model import CourseRecord
from courseplanner.parse import LoadResult, load_course_data, trim


console = Console()

RULE = "-" * 50

# optional sign + ASCII digits; str.isdigit() also accepts "²" which int() rejects
_CHOICE_RE = re.compile(r"[+-]?[0-9]+")

MENU = (
    "\n[bold]Menu Options:[/]\n"
    "1. Load data structure\n"
    "2. Print course list\n"
    "3. Print course information\n"
    "9. Exit\n"
)


@dataclass
class Session:
    """
    State of one interactive run: the active table and whether option 1
    has succeeded at least once.
    """

    table: CourseHashTable = field(default_factory=CourseHashTable)
    data_loaded: bool = False


def _println(msg: str = "") -> None:
    console.print(msg, highlight=False, emoji=False)


def _prompt(msg: str) -> str:
    return console.input(msg)


# ---------------------------------------------------------------------------
# Formatting (plain lines, reused by cli.py)
# ---------------------------------------------------------------------------


def sort_courses(records: Iterable[CourseRecord]) -> list[CourseRecord]:
    return sorted(records, key=lambda r: r.course_id)


def format_course_list(records: Iterable[CourseRecord]) -> list[str]:
    """
    Sorted "ID: Title" lines framed by rules, or the empty message.
    """
    courses = sort_courses(records)
    if not courses:
        return ["No courses available."]

    lines = ["Course List (Sorted Alphanumerically):", RULE]
    for c in courses:
        lines.append(f"{c.course_id}: {c.title}")
    lines.append(RULE)
    return lines


def format_course_details(record: CourseRecord) -> list[str]:
    lines = [
        "Course Details:",
        RULE,
        f"Course Number: {record.course_id}",
        f"Course Title: {record.title}",
    ]
    if record.prerequisites:
        lines.append("Prerequisites:")
        lines.extend(f"  - {p}" for p in record.prerequisites)
    else:
        lines.append("Prerequisites: None")
    lines.append(RULE)
    return lines


def format_load_result(result: LoadResult) -> list[str]:
    lines = [str(issue) for issue in result.issues]
    if result.opened:
        lines.append(f"Data loaded successfully. ({result.loaded} courses)")
    else:
        lines.append(f"Error: {result.error}")
        lines.append("Failed to load data.")
    return lines


def _print_lines(lines: Iterable[str]) -> None:
    for line in lines:
        _println(escape(line))


# ---------------------------------------------------------------------------
# Menu flows
# ---------------------------------------------------------------------------


def _read_choice() -> int:
    """
    Read a menu number, re-prompting until the input starts with one.

    Like reading an int from a stream: "-1" is a number (an invalid option
    later), "3abc" reads as 3, "abc" or "²" is rejected.
    """
    m = _CHOICE_RE.match(_prompt("\nEnter your choice: ").strip())
    while m is None:
        m = _CHOICE_RE.match(_prompt("Invalid input. Please enter a number: ").strip())
    return int(m.group(0))


def load_into_session(session: Session, path: str | Path) -> LoadResult:
    result = load_course_data(path, session.table)
    if result.opened:
        session.data_loaded = True
    return result


def _flow_load(session: Session) -> None:
    filename = trim(_prompt("Enter the full path to the file: "))
    if not filename:
        _println("Error: Filename cannot be empty.")
        return

    _print_lines(format_load_result(load_into_session(session, filename)))


def _flow_list(session: Session) -> None:
    _println()
    _print_lines(format_course_list(session.table.enumerate_all()))


def _flow_show(session: Session) -> None:
    course_id = trim(_prompt("Enter course number: "))
    if not course_id:
        _println("Error: Course number cannot be empty.")
        return

    course = session.table.search(course_id)
    if course is None:
        _println(f"Course '{escape(course_id)}' not found!")
        return

    _println()
    _print_lines(format_course_details(course))


def run_interactive(session: Optional[Session] = None) -> int:
    """
    Menu loop. Returns the process exit status (0) once the user exits.
    """
    if session is None:
        session = Session()

    _println("\nWelcome to the course planner.")

    while True:
        _println(MENU)
        try:
            choice = _read_choice()
        except EOFError:
            choice = 9

        if choice == 9:
            _println("Thank you for using the course planner!")
            return 0

        try:
            if choice == 1:
                _flow_load(session)
            elif choice in (2, 3):
                if not session.data_loaded:
                    _println("Please load data first (Option 1).")
                elif choice == 2:
                    _flow_list(session)
                else:
                    _flow_show(session)
            else:
                _println("Invalid option. Please try again.")
        except Exception as e:
            # a broken action must not end the session
            _println(f"An error occurred: {escape(str(e))}")
            _println("Please try again.")
