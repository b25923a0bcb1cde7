"""
Tests for CLI entry points.

These tests focus on:
- exit codes of the non-interactive commands
- plain-text output of list / show / stats against temporary catalog files
- rejecting an invalid --buckets value before any command runs
"""

import io
import tempfile
import unittest
from contextlib import redirect_stdout
from pathlib import Path
from unittest import mock

from courseplanner import cli
from courseplanner.cli import SAMPLE_DATA_PATH, main


CATALOG = "CS201, Data Structures, CS101\nCS101, Intro to CS\nBROKEN\n"


class TestCLI(unittest.TestCase):
    def run_main(self, argv: list) -> tuple:
        buf = io.StringIO()
        with redirect_stdout(buf), self.assertRaises(SystemExit) as ctx:
            main(argv)
        return ctx.exception.code, buf.getvalue()

    def write_catalog(self, d: str) -> str:
        p = Path(d) / "courses.csv"
        p.write_text(CATALOG, encoding="utf-8")
        return str(p)

    def test_list_prints_sorted_courses_and_issues(self) -> None:
        with tempfile.TemporaryDirectory() as d:
            code, out = self.run_main(["list", self.write_catalog(d)])
        self.assertEqual(code, 0)
        self.assertIn("Error: Invalid format at line 3", out)
        self.assertLess(out.index("CS101: Intro to CS"), out.index("CS201: Data Structures"))

    def test_list_missing_file_exits_nonzero(self) -> None:
        with tempfile.TemporaryDirectory() as d:
            code, out = self.run_main(["list", str(Path(d) / "missing.csv")])
        self.assertNotEqual(code, 0)
        self.assertIn("Unable to open file", out)

    def test_show_found_and_not_found(self) -> None:
        with tempfile.TemporaryDirectory() as d:
            path = self.write_catalog(d)
            code, out = self.run_main(["show", path, "CS201"])
            self.assertEqual(code, 0)
            self.assertIn("Course Title: Data Structures", out)
            self.assertIn("  - CS101", out)

            code, out = self.run_main(["show", path, "CS999"])
            self.assertEqual(code, 1)
            self.assertIn("Course 'CS999' not found!", out)

    def test_show_requires_course_id(self) -> None:
        with tempfile.TemporaryDirectory() as d:
            code, _ = self.run_main(["show", self.write_catalog(d), "  "])
        self.assertNotEqual(code, 0)

    def test_stats_with_single_bucket(self) -> None:
        with tempfile.TemporaryDirectory() as d:
            code, out = self.run_main(["--buckets", "1", "stats", self.write_catalog(d)])
        self.assertEqual(code, 0)
        self.assertIn("Courses: 2", out)
        self.assertIn("Buckets: 1 (used: 1)", out)
        self.assertIn("Longest chain: 2", out)
        self.assertIn("Rejected lines: 1", out)

    def test_zero_buckets_is_rejected(self) -> None:
        code, out = self.run_main(["--buckets", "0", "list", str(SAMPLE_DATA_PATH)])
        self.assertEqual(code, 2)
        self.assertIn("greater than 0", out)

    def test_sample_catalog_loads_cleanly(self) -> None:
        code, out = self.run_main(["list", str(SAMPLE_DATA_PATH)])
        self.assertEqual(code, 0)
        self.assertNotIn("Error", out)
        self.assertIn("CSCI100: Introduction to Computer Science", out)
        self.assertIn("MATH201: Discrete Mathematics", out)

    def test_interactive_preloads_file(self) -> None:
        with mock.patch.object(cli, "run_interactive", return_value=0) as run:
            code, _ = self.run_main(["interactive", "--file", str(SAMPLE_DATA_PATH)])
        self.assertEqual(code, 0)
        session = run.call_args[0][0]
        self.assertTrue(session.data_loaded)
        self.assertIsNotNone(session.table.search("CSCI300"))

    def test_no_command_starts_interactive(self) -> None:
        with mock.patch.object(cli, "run_interactive", return_value=0) as run:
            code, _ = self.run_main([])
        self.assertEqual(code, 0)
        run.assert_called_once()
        self.assertFalse(run.call_args[0][0].data_loaded)


if __name__ == "__main__":
    unittest.main()
