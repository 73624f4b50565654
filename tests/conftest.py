from __future__ import annotations

import pytest

from spellnav.buffer import Position


class FakeBuffer:
    """In-memory stand-in for the editor: a list of lines plus a selection."""

    def __init__(self, text: str, cursor: Position | None = None):
        self.lines = text.split("\n")
        self.anchor = self.head = cursor or Position(0, 0)
        self.scrolled: list[tuple[Position, Position]] = []
        self.scroll_error: Exception | None = None

    @property
    def content(self) -> str:
        return "\n".join(self.lines)

    def _offset(self, pos: Position) -> int:
        return sum(len(line) + 1 for line in self.lines[: pos.line]) + pos.column

    def get_cursor(self) -> Position:
        return self.head

    def get_selection(self) -> tuple[Position, Position]:
        return min(self.anchor, self.head), max(self.anchor, self.head)

    def get_selected_text(self) -> str:
        start, end = self.get_selection()
        return self.content[self._offset(start) : self._offset(end)]

    def set_selection(self, start: Position, end: Position) -> None:
        self.anchor, self.head = start, end

    def get_line(self, line: int) -> str:
        return self.lines[line]

    def last_line(self) -> int:
        return len(self.lines) - 1

    def replace_selection(self, text: str) -> None:
        start, end = self.get_selection()
        before = self.lines[start.line][: start.column]
        after = self.lines[end.line][end.column :]
        self.lines[start.line : end.line + 1] = (before + text + after).split("\n")
        self.anchor = self.head = start.advanced(text)

    def scroll_into_view(self, start: Position, end: Position) -> None:
        if self.scroll_error is not None:
            raise self.scroll_error
        self.scrolled.append((start, end))

    def select(self, start: tuple[int, int], end: tuple[int, int]) -> FakeBuffer:
        self.set_selection(Position(*start), Position(*end))
        return self


class FakeChecker:
    def __init__(self, misspelled=(), suggestions=None):
        self.misspelled = set(misspelled)
        self.suggestions = dict(suggestions or {})
        self.checked: list[str] = []

    def check(self, word: str) -> bool:
        self.checked.append(word)
        return word not in self.misspelled

    def suggest(self, word: str) -> list[str]:
        return list(self.suggestions.get(word, []))


@pytest.fixture
def make_buffer():
    def factory(text: str, line: int = 0, column: int = 0) -> FakeBuffer:
        return FakeBuffer(text, Position(line, column))

    return factory


@pytest.fixture
def make_checker():
    return FakeChecker
