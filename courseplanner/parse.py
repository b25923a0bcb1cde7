"""
Parsing (catalog text file -> CourseHashTable).

File format, one course per line:

    course_number,title[,prerequisite]*

- fields are separated by commas (no escaping)
- whitespace around every field is trimmed
- empty prerequisite fields are dropped
- blank lines are skipped

Bad lines never abort a load. Each one is recorded as a LineIssue and the
next line is read. Only a file that cannot be opened fails the whole load.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from courseplanner.hash_table import CourseHashTable
from courseplanner.model import CourseRecord


# characters trimmed from every field (same set for file content and prompts)
WHITESPACE = " \t\n\r"


class LineError(ValueError):
    """A single catalog line could not be turned into a CourseRecord."""


@dataclass
class LineIssue:
    line_number: int
    message: str

    def __str__(self) -> str:
        return self.message


@dataclass
class LoadResult:
    """
    Outcome of one load_course_data() pass.

    opened is False only if the file itself could not be read; in that case
    error holds the reason and nothing was inserted.
    """

    path: Path
    opened: bool
    loaded: int = 0
    issues: List[LineIssue] = field(default_factory=list)
    error: Optional[str] = None


def trim(text: str) -> str:
    return text.strip(WHITESPACE)


# ---------------------------------------------------------------------------
# Line parsing
# ---------------------------------------------------------------------------


def parse_course_line(line: str) -> CourseRecord:
    """
    Parse exactly one non-blank catalog line.

    Raises LineError if nothing follows the first comma or if the course
    number or title is empty after trimming.
    """
    parts = line.split(",")

    # "CSCI100" and "CSCI100," both lack a title field; "CSCI100, " has an empty one
    if len(parts) < 2 or (len(parts) == 2 and not parts[1]):
        raise LineError("Invalid format")

    course_id = trim(parts[0])
    title = trim(parts[1])
    if not course_id or not title:
        raise LineError("Empty course number or title")

    prerequisites = [p for p in (trim(x) for x in parts[2:]) if p]
    return CourseRecord(course_id=course_id, title=title, prerequisites=tuple(prerequisites))


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def load_course_data(path: str | Path, table: CourseHashTable) -> LoadResult:
    """
    Read a catalog file and insert every valid, first-seen course into table.

    A course number seen earlier in the same file is reported as a duplicate
    and skipped. Records already in table from earlier loads are not checked.
    """
    file_path = Path(path)

    # undecodable bytes only damage their own line; only "\n" ends a line
    try:
        lines = file_path.read_bytes().decode("utf-8", errors="replace").split("\n")
    except OSError as e:
        return LoadResult(path=file_path, opened=False, error=f"Unable to open file {file_path} ({e})")

    result = LoadResult(path=file_path, opened=True)
    seen: set[str] = set()

    for line_number, line in enumerate(lines, start=1):
        if not trim(line):
            continue

        try:
            record = parse_course_line(line)
        except LineError as e:
            result.issues.append(LineIssue(line_number, f"Error: {e} at line {line_number}"))
            continue

        if record.course_id in seen:
            result.issues.append(
                LineIssue(line_number, f"Warning: Duplicate course number {record.course_id} at line {line_number}")
            )
            continue

        table.insert(record)
        seen.add(record.course_id)
        result.loaded += 1

    return result
