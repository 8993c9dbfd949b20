"""Sort CSV records with merge sort or quick sort."""

from __future__ import annotations

import enum
import math
import re
import struct
import sys
import time
from dataclasses import dataclass
from operator import attrgetter
from typing import Any, Callable, Iterable, MutableSequence, Optional, TextIO

Key = Optional[Callable[[Any], Any]]

NAME_LIMIT = 99

_INT_RE = re.compile(r"\s*([+-]?\d+)")
_FLOAT_RE = re.compile(
    r"\s*([+-]?(?:\d+\.?\d*(?:[eE][+-]?\d+)?|\.\d+(?:[eE][+-]?\d+)?|inf(?:inity)?|nan))",
    re.IGNORECASE,
)


def _atoi(text: str) -> int:
    """Parse a leading integer, giving 0 when there is none."""
    match = _INT_RE.match(text)
    return int(match.group(1)) if match else 0


def _to_float32(value: float) -> float:
    try:
        return struct.unpack("f", struct.pack("f", value))[0]
    except OverflowError:
        return math.copysign(math.inf, value)


def _strtof(text: str) -> float:
    """Parse a leading single-precision float, giving 0.0 when there is none."""
    match = _FLOAT_RE.match(text)
    return _to_float32(float(match.group(1))) if match else 0.0


@dataclass
class Record:
    """One line of the records file."""

    id: int = 0
    name: str = ""
    integer_num: int = 0
    float_num: float = 0.0

    @classmethod
    def from_line(cls, line: str) -> "Record":
        """Parse ``id,name,integer,float``; empty fields are skipped as separators."""
        line = line.split("\n", 1)[0]
        tokens = [token for token in line.split(",") if token]
        record = cls()
        if len(tokens) > 0:
            record.id = _atoi(tokens[0])
        if len(tokens) > 1:
            record.name = tokens[1][:NAME_LIMIT]
        if len(tokens) > 2:
            record.integer_num = _atoi(tokens[2])
        if len(tokens) > 3:
            record.float_num = _strtof(tokens[3].lstrip(" "))
        return record

    def to_line(self) -> str:
        """Format the record as an output line, without the newline."""
        return f"{self.id},{self.name},{self.integer_num},{self.float_num:.2f}"


class SortField(enum.IntEnum):
    """Which record field to sort by."""

    NAME = 1
    INTEGER = 2
    FLOAT = 3

    @property
    def key(self) -> Callable[[Record], Any]:
        return {
            SortField.NAME: attrgetter("name"),
            SortField.INTEGER: attrgetter("integer_num"),
            SortField.FLOAT: attrgetter("float_num"),
        }[self]


class SortAlgorithm(enum.IntEnum):
    """Which sorting algorithm to use."""

    MERGE = 1
    QUICK = 2


def _key_value(key: Key, value: Any) -> Any:
    """Return the value compared for ``value``: ``key(value)``, or the value itself."""
    return value if key is None else key(value)


def swap(items: MutableSequence[Any], i: int, j: int) -> None:
    """Exchange two elements of a sequence in place."""
    items[i], items[j] = items[j], items[i]


def median_of_three(items: MutableSequence[Any], low: int, high: int, key: Key = None) -> int:
    """Move the median of first, middle and last element to ``high`` and return ``high``."""
    mid = low + (high - low) // 2
    if _key_value(key, items[low]) > _key_value(key, items[mid]):
        swap(items, low, mid)
    if _key_value(key, items[low]) > _key_value(key, items[high]):
        swap(items, low, high)
    if _key_value(key, items[mid]) > _key_value(key, items[high]):
        swap(items, mid, high)
    swap(items, mid, high)
    return high


def partition(items: MutableSequence[Any], low: int, high: int, key: Key = None) -> int:
    """Hoare partition of ``items[low:high+1]``; return the split index."""
    pivot_index = median_of_three(items, low, high, key)
    i = low - 1
    j = high + 1
    while True:
        # The pivot is whatever currently sits at pivot_index.
        i += 1
        while _key_value(key, items[i]) < _key_value(key, items[pivot_index]):
            i += 1
        j -= 1
        while _key_value(key, items[j]) > _key_value(key, items[pivot_index]):
            j -= 1
        if i >= j:
            return j
        swap(items, i, j)


def quick_sort(items: MutableSequence[Any], key: Key = None) -> None:
    """Sort ``items`` in place with quick sort."""
    if len(items) <= 1:
        return
    pending = [(0, len(items) - 1)]
    while pending:
        low, high = pending.pop()
        if low < high:
            split = partition(items, low, high, key)
            pending.append((split + 1, high))
            pending.append((low, split))


def _merge(items: MutableSequence[Any], key: Key, left: int, mid: int, right: int) -> None:
    left_part = items[left : mid + 1]
    right_part = items[mid + 1 : right + 1]
    i = j = 0
    k = left
    while i < len(left_part) and j < len(right_part):
        if not _key_value(key, left_part[i]) > _key_value(key, right_part[j]):
            items[k] = left_part[i]
            i += 1
        else:
            items[k] = right_part[j]
            j += 1
        k += 1
    for value in left_part[i:] + right_part[j:]:
        items[k] = value
        k += 1


def _merge_sort(items: MutableSequence[Any], key: Key, left: int, right: int) -> None:
    if left >= right:
        return
    mid = left + (right - left) // 2
    _merge_sort(items, key, left, mid)
    _merge_sort(items, key, mid + 1, right)
    _merge(items, key, left, mid, right)


def merge_sort(items: MutableSequence[Any], key: Key = None) -> None:
    """Sort ``items`` in place with a stable merge sort."""
    if len(items) > 1:
        _merge_sort(items, key, 0, len(items) - 1)


def read_records(lines: Iterable[str]) -> list[Record]:
    """Parse every non-blank line into a record."""
    return [Record.from_line(line) for line in lines if line.strip("\r\n")]


def sort_records(infile: Iterable[str], outfile: TextIO, field: int, algorithm: int) -> list[Record]:
    """Read records, sort them by ``field`` with ``algorithm`` and write them out."""
    field = SortField(field)
    algorithm = SortAlgorithm(algorithm)
    records = read_records(infile)

    sorter = merge_sort if algorithm is SortAlgorithm.MERGE else quick_sort
    start = time.perf_counter()
    sorter(records, field.key)
    sort_time = time.perf_counter() - start
    print(f"Sorting completed in {sort_time:.2f} seconds.")

    start = time.perf_counter()
    for record in records:
        outfile.write(record.to_line() + "\n")
    print_time = time.perf_counter() - start
    print(f"Printing completed in {print_time:.2f} seconds.")
    print(f"Tot: {sort_time + print_time:.2f} seconds.")
    return records


def main(argv: Optional[list[str]] = None) -> int:
    """Command line: <input> <output> <field 1-3> <algorithm 1-2>."""
    args = sys.argv[1:] if argv is None else argv
    if len(args) != 4:
        print("Invalid arguments!")
        return 1
    input_path, output_path, field_arg, algorithm_arg = args
    field = _atoi(field_arg)
    algorithm = _atoi(algorithm_arg)
    if field not in set(SortField):
        print("Insufficient arguments!")
        return 1
    if algorithm not in set(SortAlgorithm):
        print("Algorithm does not exist!")
        return 1

    try:
        infile = open(input_path, encoding="utf-8")
    except OSError as exc:
        print(f"Error opening input file: {exc.strerror}", file=sys.stderr)
        return 1
    with infile:
        try:
            outfile = open(output_path, "w", encoding="utf-8")
        except OSError as exc:
            print(f"Error opening output file: {exc.strerror}", file=sys.stderr)
            return 1
        with outfile:
            sort_records(infile, outfile, field, algorithm)
    print("Files sorted!")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())