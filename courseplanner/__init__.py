"""
Course planner: load a course catalog into a chained hash table,
look courses up and print a sorted listing.
"""

from pathlib import Path

__version__ = (Path(__file__).resolve().parent / "VERSION").read_text(encoding="utf-8").strip()
