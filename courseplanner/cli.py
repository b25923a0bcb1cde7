"""
CLI (Command Line Interface).

Quick terminal commands on top of the same hash table the menu uses:

    courseplanner list <file>
    courseplanner show <file> <course_id>
    courseplanner stats <file>
    courseplanner interactive [--file <file>]

Running `courseplanner` without a command opens the interactive menu.
All commands accept --buckets N (hash table size, default 179).

Note:
- The interactive UI lives in courseplanner/interactive.py
- This CLI prints plain text (no rich formatting)
"""

from __future__ import annotations

import argparse
from pathlib import Path

from courseplanner.hash_table import DEFAULT_BUCKET_COUNT, CourseHashTable, InvalidConfiguration
from courseplanner.interactive import (
    Session,
    format_course_details,
    format_course_list,
    load_into_session,
    run_interactive,
)
from courseplanner.parse import LoadResult, load_course_data


PACKAGE_DIR = Path(__file__).resolve().parent
SAMPLE_DATA_PATH = PACKAGE_DIR / "data" / "sample_courses.csv"


def _load(path: str, buckets: int) -> tuple[CourseHashTable, LoadResult]:
    """
    Build a table and load path into it, printing line issues as we go.
    """
    table = CourseHashTable(buckets)
    result = load_course_data(path, table)
    for issue in result.issues:
        print(issue)
    if not result.opened:
        print(f"Error: {result.error}")
    return table, result


def _cmd_list(args: argparse.Namespace) -> int:
    table, result = _load(args.file, args.buckets)
    if not result.opened:
        return 1

    for line in format_course_list(table.enumerate_all()):
        print(line)
    return 0


def _cmd_show(args: argparse.Namespace) -> int:
    course_id = (args.course_id or "").strip()
    if not course_id:
        print("Please provide a course number.")
        return 1

    table, result = _load(args.file, args.buckets)
    if not result.opened:
        return 1

    course = table.search(course_id)
    if course is None:
        print(f"Course '{course_id}' not found!")
        return 1

    for line in format_course_details(course):
        print(line)
    return 0


def _cmd_stats(args: argparse.Namespace) -> int:
    """
    Print how the loaded courses are spread over the buckets.
    """
    table, result = _load(args.file, args.buckets)
    if not result.opened:
        return 1

    sizes = table.bucket_sizes()
    used = sum(1 for n in sizes if n)
    print(f"Courses: {len(table)}")
    print(f"Buckets: {table.bucket_count} (used: {used})")
    print(f"Longest chain: {max(sizes)}")
    print(f"Rejected lines: {len(result.issues)}")
    return 0


def _cmd_interactive(args: argparse.Namespace) -> int:
    session = Session(table=CourseHashTable(args.buckets))

    preload = getattr(args, "file", None)
    if preload:
        result = load_into_session(session, preload)
        for issue in result.issues:
            print(issue)
        if not result.opened:
            print(f"Error: {result.error}")

    return run_interactive(session)


def build_parser() -> argparse.ArgumentParser:
    """
    Build the argparse CLI parser with sub-commands.
    """
    parser = argparse.ArgumentParser(prog="courseplanner", description="Course planner (hash table catalog)")
    parser.add_argument(
        "--buckets",
        type=int,
        default=DEFAULT_BUCKET_COUNT,
        help=f"Number of hash table buckets (default {DEFAULT_BUCKET_COUNT})",
    )
    sub = parser.add_subparsers(dest="command")

    p_list = sub.add_parser("list", help="Print all courses sorted by course number")
    p_list.add_argument("file", type=str, help=f"Catalog file (e.g. {SAMPLE_DATA_PATH.name})")

    p_show = sub.add_parser("show", help="Print one course with its prerequisites")
    p_show.add_argument("file", type=str, help="Catalog file")
    p_show.add_argument("course_id", type=str, help="Course number (e.g. CSCI300)")

    p_stats = sub.add_parser("stats", help="Show hash table bucket usage for a catalog")
    p_stats.add_argument("file", type=str, help="Catalog file")

    p_inter = sub.add_parser("interactive", help="Interactive menu mode")
    p_inter.add_argument("--file", type=str, default=None, help="Catalog file to load on start")

    return parser


def main(argv: list[str] | None = None) -> None:
    """
    CLI entry point. Parses args, dispatches to command handlers,
    and exits via SystemExit with a return code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    # fail early on a bad table size instead of inside a command
    try:
        CourseHashTable(args.buckets)
    except InvalidConfiguration as e:
        print(f"Error: {e}")
        raise SystemExit(2)

    if args.command == "list":
        raise SystemExit(_cmd_list(args))
    if args.command == "show":
        raise SystemExit(_cmd_show(args))
    if args.command == "stats":
        raise SystemExit(_cmd_stats(args))
    if args.command in (None, "interactive"):
        raise SystemExit(_cmd_interactive(args))

    raise SystemExit(2)
