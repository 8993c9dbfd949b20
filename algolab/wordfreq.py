"""Find the most frequent word of at least a given length in a text file."""

from __future__ import annotations

import re
import sys
import time
from typing import Iterable, Optional, Union

from algolab.hashtable import MAX_WORD_LENGTH, HashTable, hash_string, key_compare

_TOKEN_LIMIT = MAX_WORD_LENGTH - 1
_KEPT_BYTE = 0xE2
_INT_RE = re.compile(r"\s*([+-]?\d+)")


def _atoi(text: str) -> int:
    match = _INT_RE.match(text)
    return int(match.group(1)) if match else 0


def _normalize_bytes(token: bytes) -> str:
    kept = bytearray()
    for byte in token:
        if 0x41 <= byte <= 0x5A:
            byte += 32
        if byte == _KEPT_BYTE:
            kept.append(byte)
            continue
        if not 0x61 <= byte <= 0x7A:
            break
        kept.append(byte)
    return kept.decode("utf-8", "surrogateescape")


def normalize_word(word: str) -> str:
    """Lower-case a word and cut it at the first byte that is not a letter.

    The byte 0xE2 (the lead byte of typographic quotes) is kept as is; it
    appears in the result as a lone surrogate escape.
    """
    return _normalize_bytes(word.encode("utf-8", "surrogateescape"))


def _tokens(lines: Iterable[Union[str, bytes]]) -> Iterable[bytes]:
    for line in lines:
        data = line if isinstance(line, bytes) else line.encode("utf-8", "surrogateescape")
        for token in data.split():
            for start in range(0, len(token), _TOKEN_LIMIT):
                yield token[start : start + _TOKEN_LIMIT]


def count_words(lines: Iterable[Union[str, bytes]], min_length: int) -> HashTable:
    """Count normalised words whose length in bytes is at least ``min_length``."""
    table = HashTable(key_compare, hash_string)
    for token in _tokens(lines):
        word = _normalize_bytes(token)
        if len(word.encode("utf-8", "surrogateescape")) >= min_length:
            count = table.get(word)
            table.put(word, 1 if count is None else count + 1)
    return table


def most_frequent(table: HashTable) -> Optional[tuple[str, int]]:
    """Return the first word, in table order, with the highest count, or ``None``."""
    best: Optional[tuple[str, int]] = None
    max_count = 0
    for word, count in table.items():
        if count is not None and count > max_count:
            max_count = count
            best = (word, count)
    return best


def _display(word: str) -> str:
    return word.encode("utf-8", "surrogateescape").decode("utf-8", "replace")


def process_file(path: str, min_length: int) -> Optional[tuple[str, int]]:
    """Report the most frequent word of at least ``min_length`` bytes in a file."""
    with open(path, "rb") as handle:
        table = count_words(handle, min_length)

    start = time.perf_counter()
    result = most_frequent(table)
    elapsed = time.perf_counter() - start

    if result is not None:
        word, count = result
        print(
            f"La parola piu' frequente di lunghezza almeno {min_length} e': "
            f"'{_display(word)}' con {count} occorrenze"
        )
    else:
        print("Nessuna parola soddisfa il criterio.")
    print(f"\nAlgorithm ended in {elapsed:.2f} seconds.")
    return result


def main(argv: Optional[list[str]] = None) -> int:
    """Command line: <file> <minimum word length>."""
    args = sys.argv[1:] if argv is None else argv
    if len(args) != 2:
        print("Incorrect number of arguments!")
        return 1
    path, length_arg = args
    min_length = _atoi(length_arg)
    if min_length <= 0:
        print("Incorrect lenght!")
        return 1
    try:
        with open(path, "rb"):
            pass
    except OSError:
        print("File doesn't exist!")
        return 1
    process_file(path, min_length)
    print("ALL DONE!")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())