"""
Hash table for course records (separate chaining).

The table owns a fixed number of buckets. Each bucket is a plain list that
acts as the chain for every course number hashing to that index:

- insert puts a record at the head of its chain
- search walks the chain head-to-tail and returns the first match
- enumerate_all visits bucket 0..n-1, each chain head-to-tail

Key uniqueness is NOT enforced here. Inserting the same course number twice
keeps both records; search then returns the newer one. Callers that need
unique keys (see parse.load_course_data) have to check before inserting.

The table never resizes, so bucket placement is stable for its whole life.
"""

from __future__ import annotations

import copy as _copy
from typing import Iterator, List, Optional

from courseplanner.model import CourseRecord


DEFAULT_BUCKET_COUNT = 179

_UINT32_MASK = 0xFFFFFFFF


class InvalidConfiguration(ValueError):
    """Raised when a table is constructed with an unusable bucket count."""


def hash_course_id(course_id: str, bucket_count: int) -> int:
    """
    Polynomial rolling hash (base 31) over the UTF-8 bytes of course_id.

    The accumulator is reduced modulo bucket_count after every byte and
    wraps like a 32-bit unsigned integer, which only matters for tables
    with more than about 2**27 buckets.
    """
    h = 0
    for b in course_id.encode("utf-8"):
        h = ((h * 31 + b) & _UINT32_MASK) % bucket_count
    return h


def _validate_bucket_count(bucket_count: object) -> int:
    # bool is an int subclass; reject it explicitly
    if isinstance(bucket_count, bool) or not isinstance(bucket_count, int):
        raise InvalidConfiguration(f"Hash table size must be an integer, got {bucket_count!r}")
    if bucket_count <= 0:
        raise InvalidConfiguration("Hash table size must be greater than 0")
    return bucket_count


class CourseHashTable:
    """
    Fixed-size chained hash table keyed by CourseRecord.course_id.
    """

    def __init__(self, bucket_count: int = DEFAULT_BUCKET_COUNT) -> None:
        self._bucket_count = _validate_bucket_count(bucket_count)
        # chains are stored oldest-first so insert is an append;
        # "head of chain" is therefore the END of each list
        self._buckets: List[List[CourseRecord]] = [[] for _ in range(self._bucket_count)]

    @property
    def bucket_count(self) -> int:
        return self._bucket_count

    def _index(self, course_id: str) -> int:
        return hash_course_id(course_id, self._bucket_count)

    # ------------------------------------------------------------------
    # Core operations
    # ------------------------------------------------------------------

    def insert(self, record: CourseRecord) -> None:
        """
        Put record at the head of its chain. Always succeeds, even for a
        course number that is already stored.
        """
        self._buckets[self._index(record.course_id)].append(record)

    def search(self, course_id: str) -> Optional[CourseRecord]:
        """
        Return the most recently inserted record with this exact course
        number, or None.
        """
        for record in reversed(self._buckets[self._index(course_id)]):
            if record.course_id == course_id:
                return record
        return None

    def enumerate_all(self) -> List[CourseRecord]:
        """
        Return every stored record in bucket order (newest first inside a
        bucket). The order is an implementation detail: sort if you need one.
        """
        out: List[CourseRecord] = []
        for chain in self._buckets:
            out.extend(reversed(chain))
        return out

    def clear(self) -> None:
        for chain in self._buckets:
            chain.clear()

    # ------------------------------------------------------------------
    # Copy / assignment
    # ------------------------------------------------------------------

    def copy(self) -> "CourseHashTable":
        """
        Independent table of the same size holding the same records.
        """
        clone = CourseHashTable(self._bucket_count)
        clone._buckets = [list(chain) for chain in self._buckets]
        return clone

    # records are frozen, so copying the chains is already a deep copy
    def __copy__(self) -> "CourseHashTable":
        return self.copy()

    def __deepcopy__(self, memo: dict) -> "CourseHashTable":
        clone = CourseHashTable(self._bucket_count)
        clone._buckets = _copy.deepcopy(self._buckets, memo)
        return clone

    def assign(self, other: "CourseHashTable") -> "CourseHashTable":
        """
        Replace this table's contents (and size) with a copy of other's.
        Assigning a table to itself changes nothing.
        """
        if other is self:
            return self
        self.clear()
        self._bucket_count = other._bucket_count
        self._buckets = [list(chain) for chain in other._buckets]
        return self

    # ------------------------------------------------------------------
    # Python protocol helpers
    # ------------------------------------------------------------------

    def __len__(self) -> int:
        return sum(len(chain) for chain in self._buckets)

    def __iter__(self) -> Iterator[CourseRecord]:
        return iter(self.enumerate_all())

    def __contains__(self, course_id: object) -> bool:
        return isinstance(course_id, str) and self.search(course_id) is not None

    def bucket_sizes(self) -> List[int]:
        """
        Chain length per bucket (diagnostics only).
        """
        return [len(chain) for chain in self._buckets]

    def __repr__(self) -> str:
        return f"CourseHashTable(bucket_count={self._bucket_count}, records={len(self)})"
