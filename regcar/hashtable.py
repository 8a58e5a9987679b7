"""Fixed-size chained hash table whose buckets stay sorted by key."""

from __future__ import annotations

from bisect import bisect_left
from dataclasses import dataclass
from typing import Callable, Iterator, Optional

HashFunction = Callable[[str, int], int]


def sum_hash(key: str, size: int) -> int:
    """Sum of the character codes of ``key``, reduced modulo ``size``."""
    return sum(ord(ch) for ch in key) % size


def shift_hash(key: str, size: int) -> int:
    """Sum of character codes each shifted left by its index mod 8, modulo ``size``."""
    total = sum(ord(ch) << (i % 8) for i, ch in enumerate(key))
    return abs(total) % size


@dataclass
class Entry:
    """A key and the record position it points to."""

    key: str
    position: int


class DuplicateKeyError(KeyError):
    """Raised when inserting a key that is already present."""


def _fold(key: str) -> str:
    return key.lower()


class HashTable:
    """Hash table with a fixed number of buckets.

    Keys within a bucket are kept in ascending order, compared without
    regard to case; two keys differing only in case count as the same key.
    """

    def __init__(self, size: int = 53, hash_function: HashFunction = shift_hash) -> None:
        if size <= 0:
            raise ValueError("table size must be positive")
        self.size = size
        self.hash_function = hash_function
        self._buckets: list[list[Entry]] = [[] for _ in range(size)]

    def bucket_of(self, key: str) -> int:
        """Index of the bucket that ``key`` belongs to."""
        return self.hash_function(key, self.size) % self.size

    def _locate(self, key: str) -> tuple[list[Entry], int, bool]:
        bucket = self._buckets[self.bucket_of(key)]
        folded = _fold(key)
        index = bisect_left(bucket, folded, key=lambda e: _fold(e.key))
        found = index < len(bucket) and _fold(bucket[index].key) == folded
        return bucket, index, found

    def insert(self, key: str, position: int) -> None:
        """Add ``key`` pointing at ``position``; raise DuplicateKeyError if present."""
        bucket, index, found = self._locate(key)
        if found:
            raise DuplicateKeyError(key)
        bucket.insert(index, Entry(key, position))

    def find(self, key: str) -> Optional[Entry]:
        """Return the entry for ``key``, or None if it is absent."""
        bucket, index, found = self._locate(key)
        return bucket[index] if found else None

    def remove(self, key: str) -> Entry:
        """Remove and return the entry for ``key``; raise KeyError if absent."""
        bucket, index, found = self._locate(key)
        if not found:
            raise KeyError(key)
        return bucket.pop(index)

    def clear(self) -> None:
        """Drop every entry."""
        for bucket in self._buckets:
            bucket.clear()

    def bucket(self, index: int) -> tuple[Entry, ...]:
        """Entries of bucket ``index``, in key order."""
        return tuple(self._buckets[index])

    def is_empty(self) -> bool:
        return not any(self._buckets)

    def largest_bucket(self) -> Optional[int]:
        """Index of the fullest non-empty bucket (first on ties), or None."""
        best: Optional[int] = None
        for i, bucket in enumerate(self._buckets):
            if bucket and (best is None or len(bucket) > len(self._buckets[best])):
                best = i
        return best

    def smallest_bucket(self) -> Optional[int]:
        """Index of the least full non-empty bucket (first on ties), or None."""
        best: Optional[int] = None
        for i, bucket in enumerate(self._buckets):
            if bucket and (best is None or len(bucket) < len(self._buckets[best])):
                best = i
        return best

    def describe(self) -> str:
        """Human-readable dump of the non-empty buckets and their entries."""
        largest = self.largest_bucket()
        smallest = self.smallest_bucket()
        lines = [
            f"Largest bucket: {-1 if largest is None else largest}",
            f"Smallest bucket: {-1 if smallest is None else smallest}",
            "--------------------",
        ]
        for i, bucket in enumerate(self._buckets):
            if not bucket:
                continue
            lines.append(f"BUCKET {i}: {len(bucket)} entries")
            lines.append("--------------------")
            for entry in bucket:
                lines.append(f"Key: {entry.key}")
                lines.append(f"Position: {entry.position}")
                lines.append("--------------------")
        return "\n".join(lines)

    def __len__(self) -> int:
        return sum(len(bucket) for bucket in self._buckets)

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self.find(key) is not None

    def __iter__(self) -> Iterator[Entry]:
        for bucket in self._buckets:
            yield from bucket