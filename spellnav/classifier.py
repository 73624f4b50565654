"""Decide whether a word should be flagged as misspelled."""
from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from .tokenizer import is_excluded, normalize_word, strip_edge_punct


class SpellChecker(Protocol):
    """The two dictionary calls the navigator relies on (``enchant.Dict`` fits)."""

    def check(self, word: str) -> bool: ...

    def suggest(self, word: str) -> Sequence[str]: ...


class WordClassifier:
    """Classify words against a checker, the custom words and the ignore set.

    ``custom`` and ``ignored`` are shared with the owner and read on every
    call; ``checker`` may be ``None`` while no dictionary is loaded, in which
    case nothing is ever flagged.
    """

    def __init__(
        self,
        checker: SpellChecker | None,
        custom: set[str],
        ignored: set[str],
    ) -> None:
        self.checker = checker
        self.custom = custom
        self.ignored = ignored

    def is_known(self, word: str) -> bool:
        norm = normalize_word(word)
        return norm in self.custom or norm in self.ignored

    def is_misspelled(self, raw: str) -> bool:
        checker = self.checker
        if checker is None:
            return False
        if is_excluded(raw):
            return False
        clean = strip_edge_punct(raw)
        if not clean:
            return False
        if self.is_known(clean):
            return False
        return not checker.check(clean)
