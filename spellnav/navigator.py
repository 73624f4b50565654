"""Select, correct or skip the next misspelled word in the cursor's paragraph.

:class:`MisspellingNavigator` owns the custom dictionary and the transient
ignore set. It keeps no other state between calls: every action re-reads the
selection from the buffer it is given.

The primary action works in one of three ways:

* a misspelled word is selected and the dictionary has a suggestion: replace
  it with the first suggestion, cased like the original, and leave the
  replacement selected;
* a misspelled word is selected and there are no suggestions: ignore the word
  for the rest of this paragraph and collapse the selection to its end;
* otherwise scan the paragraph and select the first flagged word, or, when
  the paragraph is clean, empty the ignore set and park the cursor at the end
  of its line.
"""
from __future__ import annotations

import contextlib
import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Literal

from .buffer import EditorBuffer, Position
from .casing import apply_case
from .classifier import SpellChecker, WordClassifier
from .paragraph import locate_paragraph, read_paragraph
from .tokenizer import edge_lengths, iter_tokens, normalize_word

logger = logging.getLogger(__name__)

Outcome = Literal["corrected", "ignored", "found", "clean", "no_paragraph"]
AddWordStatus = Literal["added", "empty_selection", "not_a_word", "already_present"]


@dataclass(frozen=True)
class TrimmedSelection:
    start: Position
    end: Position
    word: str


@dataclass(frozen=True)
class AddWordResult:
    status: AddWordStatus
    word: str = ""

    @property
    def ok(self) -> bool:
        return self.status == "added"

    @property
    def message(self) -> str:
        if self.status == "empty_selection":
            return "Select a word, then press Alt+; to add it."
        if self.status == "not_a_word":
            return "That selection doesn't look like a word."
        if self.status == "already_present":
            return f'"{self.word}" is already in your custom dictionary.'
        return f'Added "{self.word}" to custom dictionary.'


def clean_word_list(words: Iterable[object]) -> list[str]:
    """Lowercase, strip and de-duplicate ``words``, keeping first occurrences."""
    result: list[str] = []
    seen: set[str] = set()
    for word in words:
        if not isinstance(word, str):
            continue
        norm = word.strip().lower()
        if not norm or norm in seen:
            continue
        seen.add(norm)
        result.append(norm)
    return result


def trim_selection(text: str, start: Position) -> TrimmedSelection:
    """Shrink a selection starting at ``start`` to its word characters."""
    leading, trailing = edge_lengths(text)
    word = text[leading : len(text) - trailing]
    new_start = start.advanced(text[:leading])
    return TrimmedSelection(new_start, new_start.advanced(word), word)


class MisspellingNavigator:
    def __init__(
        self,
        checker: SpellChecker | None = None,
        custom_words: Iterable[str] = (),
        persist: Callable[[list[str]], None] | None = None,
    ) -> None:
        self._custom_words = clean_word_list(custom_words)
        self.custom = set(self._custom_words)
        self.ignored: set[str] = set()
        self._persist = persist
        self.classifier = WordClassifier(checker, self.custom, self.ignored)

    # ---------- Dictionary ----------

    @property
    def checker(self) -> SpellChecker | None:
        return self.classifier.checker

    def set_checker(self, checker: SpellChecker | None) -> None:
        # Swap the reference only; a checker is never mutated while in use.
        self.classifier.checker = checker

    def is_misspelled(self, word: str) -> bool:
        return self.classifier.is_misspelled(word)

    # ---------- Primary action ----------

    def primary_action(self, buffer: EditorBuffer) -> Outcome:
        selected = buffer.get_selected_text()
        if selected and selected.strip():
            sel_from, sel_to = buffer.get_selection()
            trimmed = trim_selection(selected, sel_from)
            if trimmed.word and self.is_misspelled(trimmed.word):
                return self._act_on_selection(buffer, trimmed, sel_to)
        return self.select_next(buffer)

    def _act_on_selection(
        self, buffer: EditorBuffer, trimmed: TrimmedSelection, sel_to: Position
    ) -> Outcome:
        checker = self.checker
        suggestions = list(checker.suggest(trimmed.word)) if checker else []
        if suggestions:
            replacement = apply_case(suggestions[0], trimmed.word)
            buffer.set_selection(trimmed.start, trimmed.end)
            buffer.replace_selection(replacement)
            after = trimmed.start.advanced(replacement)
            buffer.set_selection(trimmed.start, after)
            self._reveal(buffer, trimmed.start, after)
            logger.debug("Replaced %r with %r", trimmed.word, replacement)
            return "corrected"

        # No suggestion: skip the word for this paragraph. The next call scans.
        self.ignored.add(normalize_word(trimmed.word))
        buffer.set_selection(sel_to, sel_to)
        logger.debug("No suggestions for %r; ignoring until paragraph is clean", trimmed.word)
        return "ignored"

    def select_next(self, buffer: EditorBuffer) -> Outcome:
        """Select the first flagged word of the cursor's paragraph."""
        cursor = buffer.get_cursor()
        bounds = locate_paragraph(buffer, cursor.line)
        if bounds is None:
            return "no_paragraph"

        paragraph = read_paragraph(buffer, bounds)
        for token in iter_tokens(paragraph.text):
            if not self.is_misspelled(token.text):
                continue
            start = paragraph.position_at(token.start)
            end = paragraph.position_at(token.end)
            buffer.set_selection(start, end)
            self._reveal(buffer, start, end)
            return "found"

        if self.ignored:
            self.ignored.clear()
        line_end = Position(cursor.line, len(buffer.get_line(cursor.line)))
        buffer.set_selection(line_end, line_end)
        return "clean"

    @staticmethod
    def _reveal(buffer: EditorBuffer, start: Position, end: Position) -> None:
        # Scrolling is cosmetic; a failure must not undo the selection.
        with contextlib.suppress(Exception):
            buffer.scroll_into_view(start, end)

    # ---------- Custom dictionary ----------

    @property
    def custom_words(self) -> list[str]:
        return list(self._custom_words)

    def add_selection_to_custom(self, buffer: EditorBuffer) -> AddWordResult:
        selected = buffer.get_selected_text()
        if not selected or not selected.strip():
            return AddWordResult("empty_selection")
        sel_from, _sel_to = buffer.get_selection()
        word = trim_selection(selected, sel_from).word
        return self.add_custom_word(word)

    def add_custom_word(self, word: str) -> AddWordResult:
        norm = normalize_word(word)
        if not norm:
            return AddWordResult("not_a_word", word)
        if norm in self.custom:
            return AddWordResult("already_present", word)
        self.custom.add(norm)
        self._custom_words.append(norm)
        self._save_custom_words()
        logger.info("Added %r to custom dictionary", norm)
        return AddWordResult("added", word)

    def replace_custom_words(self, words: Iterable[str]) -> list[str]:
        """Replace the whole custom dictionary, e.g. from the settings editor."""
        self._custom_words = clean_word_list(words)
        # Mutate in place: the classifier holds the same set object.
        self.custom.clear()
        self.custom.update(self._custom_words)
        self._save_custom_words()
        return self.custom_words

    def clear_custom_words(self) -> None:
        self.replace_custom_words(())

    def _save_custom_words(self) -> None:
        if self._persist is not None:
            self._persist(self.custom_words)

    # ---------- Lifecycle ----------

    def shutdown(self) -> None:
        self.set_checker(None)
        self.ignored.clear()
