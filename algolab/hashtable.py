"""A separately chained hash table with pluggable comparison and hashing."""

from __future__ import annotations

from functools import cmp_to_key
from typing import Any, Callable, Iterator, Optional

TABLE_SIZE = 10007
MAX_WORD_LENGTH = 100

_ULONG_MASK = (1 << 64) - 1

Compare = Callable[[Any, Any], int]
HashFunction = Callable[[Any], int]


def _raw_bytes(text: str) -> bytes:
    return text.encode("utf-8", "surrogateescape")


def _ascii_lower(byte: int) -> int:
    return byte + 32 if 0x41 <= byte <= 0x5A else byte


def key_compare(a: str, b: str) -> int:
    """Compare two strings ignoring ASCII case; negative, zero or positive."""
    for x, y in zip(_raw_bytes(a), _raw_bytes(b)):
        diff = _ascii_lower(x) - _ascii_lower(y)
        if diff:
            return diff
    raw_a, raw_b = _raw_bytes(a), _raw_bytes(b)
    if len(raw_a) > len(raw_b):
        return _ascii_lower(raw_a[len(raw_b)])
    if len(raw_b) > len(raw_a):
        return -_ascii_lower(raw_b[len(raw_a)])
    return 0


def hash_string(key: str) -> int:
    """djb2 hash of a string, case-sensitive, as a 64-bit unsigned value."""
    value = 5381
    for byte in _raw_bytes(key):
        char = byte - 256 if byte >= 128 else byte
        value = (value * 33 + char) & _ULONG_MASK
    return value


def compare_ints(a: int, b: int) -> int:
    """Compare two integers; negative, zero or positive."""
    return a - b


def hash_int(key: int) -> int:
    """Hash an integer to itself as a 64-bit unsigned value."""
    return key & _ULONG_MASK


class HashTable:
    """Hash table of key/value pairs using a given comparison and hash function.

    A key whose value is ``None`` counts as absent, as ``get`` cannot tell
    the two apart.
    """

    def __init__(self, compare: Compare = key_compare, hash_function: HashFunction = hash_string) -> None:
        self.compare = compare
        self.hash_function = hash_function
        self._buckets: list[list[list[Any]]] = [[] for _ in range(TABLE_SIZE)]

    def _bucket(self, key: Any) -> list[list[Any]]:
        return self._buckets[self.hash_function(key) % TABLE_SIZE]

    def put(self, key: Any, value: Any) -> None:
        """Insert ``key`` with ``value``, replacing the value of an equal key."""
        bucket = self._bucket(key)
        for entry in bucket:
            if self.compare(key, entry[0]) == 0:
                entry[1] = value
                return
        bucket.insert(0, [key, value])

    def get(self, key: Any) -> Any:
        """Return the value stored for ``key``, or ``None``."""
        for stored_key, value in self._bucket(key):
            if self.compare(key, stored_key) == 0:
                return value
        return None

    def __contains__(self, key: Any) -> bool:
        return self.get(key) is not None

    def remove(self, key: Any) -> bool:
        """Remove ``key``; return whether it was present."""
        bucket = self._bucket(key)
        for position, (stored_key, _) in enumerate(bucket):
            if self.compare(key, stored_key) == 0:
                del bucket[position]
                return True
        return False

    def __len__(self) -> int:
        return sum(len(bucket) for bucket in self._buckets)

    def __iter__(self) -> Iterator[Any]:
        for bucket in self._buckets:
            for stored_key, _ in bucket:
                yield stored_key

    def keys(self) -> list[Any]:
        """All keys, in bucket order."""
        return list(self)

    def items(self) -> list[tuple[Any, Any]]:
        """All key/value pairs, in bucket order."""
        return [(key, value) for bucket in self._buckets for key, value in bucket]

    def sorted_counts(self) -> list[tuple[Any, int]]:
        """Pairs ordered by descending value, then by key ignoring case."""

        def order(left: tuple[Any, int], right: tuple[Any, int]) -> int:
            if left[1] != right[1]:
                return right[1] - left[1]
            return key_compare(left[0], right[0])

        return sorted(self.items(), key=cmp_to_key(order))

    def format_sorted(self) -> str:
        """Render the table as a word/count listing, skipping counts below 1."""
        if len(self) == 0:
            return "Hash table is empty.\n"
        lines = ["Word\t\tCount\n", "-------------------------\n"]
        lines.extend(f"{key}\t\t{value}\n" for key, value in self.sorted_counts() if value >= 1)
        return "".join(lines)

    def __repr__(self) -> str:
        return f"HashTable({dict(self.items())!r})"


def _first_key(table: HashTable) -> Optional[Any]:
    return next(iter(table), None)