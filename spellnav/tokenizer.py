"""Word tokenization and normalization for the misspelling navigator.

Tokens start with a letter or digit and continue with letters, digits or
apostrophes. Offsets are Python string indices into the scanned text.
"""
from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Final

APOSTROPHES: Final[str] = "'’"
HYPHEN: Final[str] = "-"


@dataclass(frozen=True)
class Token:
    text: str
    start: int
    end: int  # exclusive


def is_word_start(ch: str) -> bool:
    return ch.isalnum()


def is_word_char(ch: str) -> bool:
    return ch.isalnum() or ch in APOSTROPHES


def is_edge_keep(ch: str) -> bool:
    """Characters that survive edge stripping: letters, apostrophes and hyphens."""
    return ch.isalpha() or ch in APOSTROPHES or ch == HYPHEN


def iter_tokens(text: str) -> Iterator[Token]:
    """Yield word tokens in document order.

    The generator is lazy; calling it again restarts the scan from the
    beginning of ``text``.
    """

    i = 0
    n = len(text)
    while i < n:
        if not is_word_start(text[i]):
            i += 1
            continue
        start = i
        i += 1
        while i < n and is_word_char(text[i]):
            i += 1
        yield Token(text=text[start:i], start=start, end=i)


def is_excluded(word: str) -> bool:
    """Acronyms and anything with a digit are never treated as misspellings."""
    if word.upper() == word:
        return True
    return any(ch.isdigit() for ch in word)


def edge_lengths(raw: str) -> tuple[int, int]:
    """Return how many characters to drop from the start and end of ``raw``."""
    leading = 0
    while leading < len(raw) and not is_edge_keep(raw[leading]):
        leading += 1
    if leading == len(raw):
        return leading, 0
    trailing = 0
    while not is_edge_keep(raw[len(raw) - 1 - trailing]):
        trailing += 1
    return leading, trailing


def strip_edge_punct(raw: str) -> str:
    leading, trailing = edge_lengths(raw)
    return raw[leading : len(raw) - trailing]


def normalize_word(raw: str) -> str:
    """Lowercased, edge-stripped key used for custom and ignore set lookups."""
    return strip_edge_punct(raw).lower()


__all__ = [
    "Token",
    "edge_lengths",
    "is_edge_keep",
    "is_excluded",
    "is_word_char",
    "is_word_start",
    "iter_tokens",
    "normalize_word",
    "strip_edge_punct",
]
