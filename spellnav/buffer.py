"""Host buffer interface consumed by the navigator."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol


@dataclass(frozen=True, order=True)
class Position:
    line: int  # 0-based
    column: int  # Python string index within the line

    def advanced(self, text: str) -> Position:
        """Return the position reached after ``text`` is laid down from here."""
        newlines = text.count("\n")
        if not newlines:
            return Position(self.line, self.column + len(text))
        return Position(self.line + newlines, len(text) - text.rfind("\n") - 1)


class EditorBuffer(Protocol):
    def get_cursor(self) -> Position: ...

    def get_selection(self) -> tuple[Position, Position]:
        """Return the selection as an ordered ``(from, to)`` pair.

        With nothing selected both ends equal the cursor.
        """
        ...

    def get_selected_text(self) -> str: ...

    def set_selection(self, start: Position, end: Position) -> None: ...

    def get_line(self, line: int) -> str: ...

    def last_line(self) -> int: ...

    def replace_selection(self, text: str) -> None: ...

    def scroll_into_view(self, start: Position, end: Position) -> None: ...
