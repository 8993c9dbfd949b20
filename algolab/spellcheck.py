"""Correct the words of a text with the closest word of a dictionary."""

from __future__ import annotations

import string
import sys
import time
from dataclasses import dataclass
from typing import Iterable, Iterator, Optional, Sequence, TextIO

from algolab.editdistance import edit_distance_dyn

INT_MAX = 2**31 - 1

_KEPT = frozenset(string.ascii_letters + string.digits + " ")
_ASCII_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


class EmptyFileError(ValueError):
    """Raised when the dictionary or the text to correct is empty."""


@dataclass(frozen=True)
class Correction:
    """A word of the text, its closest dictionary word and their distance."""

    word: str
    correction: Optional[str]
    distance: int


def _strip_newline(line: str) -> str:
    return line.split("\n", 1)[0]


def delete_punct(line: str) -> str:
    """Keep only ASCII letters, digits and spaces."""
    return "".join(c for c in line if c in _KEPT)


def load_dictionary(lines: Iterable[str]) -> list[str]:
    """Read one word per line, lower-cased; raise if there are none."""
    words = [_strip_newline(line).translate(_ASCII_LOWER) for line in lines]
    if not words:
        raise EmptyFileError("File dizionario vuoto!")
    return words


def best_match(word: str, words: Iterable[str]) -> Correction:
    """Find the first dictionary word with the smallest distance to ``word``."""
    best: Optional[str] = None
    minimum = INT_MAX
    for candidate in words:
        result = edit_distance_dyn(candidate, word)
        if result < minimum:
            minimum = result
            best = candidate
    return Correction(word, best, minimum)


def _tokens(lines: Iterable[str]) -> Iterator[str]:
    for line in lines:
        cleaned = delete_punct(_strip_newline(line))
        for token in cleaned.split(" "):
            if token:
                yield token.translate(_ASCII_LOWER)


def correct_lines(words: Sequence[str], lines: Iterable[str]) -> Iterator[Correction]:
    """Yield a correction for every word of every line."""
    for token in _tokens(lines):
        yield best_match(token, words)


def correct_file(dictionary_path: str, correctme_path: str, out: Optional[TextIO] = None) -> list[Correction]:
    """Correct the words of one file against a dictionary file and report them."""
    out = sys.stdout if out is None else out
    with open(dictionary_path, encoding="utf-8", errors="surrogateescape") as handle:
        words = load_dictionary(handle)
    with open(correctme_path, encoding="utf-8", errors="surrogateescape") as handle:
        lines = handle.readlines()
    if not lines:
        raise EmptyFileError("File da correggere vuoto!")

    out.write("Parola trovata\t\tParola corretta\t\tEdit Distance\n")
    out.write("-" * 66 + "\n")

    corrections = []
    start = time.perf_counter()
    for token in _tokens(lines):
        out.write("\n\n")
        out.write(f"Parola da correggere: {token}\n")
        correction = best_match(token, words)
        shown = correction.correction if correction.correction is not None else "(null)"
        out.write(f"{token}\t\t{shown}\t\t{correction.distance}\n")
        corrections.append(correction)
    elapsed = time.perf_counter() - start
    out.write(f"\nEdit distance completed in: {elapsed:.2f} secs")
    return corrections


def main(argv: Optional[list[str]] = None) -> int:
    """Command line: <dictionary> <file to correct>."""
    args = sys.argv[1:] if argv is None else argv
    if len(args) < 2:
        print("Argomenti non validi!")
        return 1
    dictionary_path, correctme_path = args[0], args[1]
    for path, message in (
        (dictionary_path, "Il primo file non esiste!"),
        (correctme_path, "Il secondo file non esiste!"),
    ):
        try:
            with open(path, "rb"):
                pass
        except OSError:
            print(message)
            return 1
    try:
        correct_file(dictionary_path, correctme_path)
    except EmptyFileError as exc:
        print(exc)
        return 1
    print("\nALL DONE!")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())