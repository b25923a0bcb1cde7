"""
Central data model used across the project.

A CourseRecord is one line of the course catalog file:

    CSCI300,Introduction to Algorithms,CSCI200,MATH201

Records are frozen so that the hash table, the ingestion layer and the UI
can hand them around by value without worrying about shared mutation.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Tuple


@dataclass(frozen=True)
class CourseRecord:
    """
    Represents one course as read from the catalog file.

    Prerequisites are stored in file order. They are expected to be course
    numbers of other records, but nothing checks that they exist.
    """

    course_id: str
    title: str
    prerequisites: Tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        # accept any iterable (lists from parsing / tests), store a tuple
        if not isinstance(self.prerequisites, tuple):
            object.__setattr__(self, "prerequisites", tuple(self.prerequisites))
