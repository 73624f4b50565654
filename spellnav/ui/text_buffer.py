"""A :class:`spellnav.buffer.EditorBuffer` over a ``tkinter.Text`` widget."""
from __future__ import annotations

import tkinter as tk

from ..buffer import Position
from ..utils import column_to_tk, split_tkindex, tk_to_column, tkindex


class TkTextBuffer:
    def __init__(self, text: tk.Text) -> None:
        self.text = text

    def _index(self, pos: Position) -> str:
        return tkindex(pos.line, column_to_tk(self.get_line(pos.line), pos.column))

    def _position(self, index: str) -> Position:
        line, units = split_tkindex(self.text.index(index))
        return Position(line, tk_to_column(self.get_line(line), units))

    def get_line(self, line: int) -> str:
        return self.text.get(f"{line + 1}.0", f"{line + 1}.end")

    def last_line(self) -> int:
        return split_tkindex(self.text.index("end-1c"))[0]

    def get_cursor(self) -> Position:
        return self._position(tk.INSERT)

    def get_selection(self) -> tuple[Position, Position]:
        try:
            return self._position(tk.SEL_FIRST), self._position(tk.SEL_LAST)
        except tk.TclError:
            cursor = self.get_cursor()
            return cursor, cursor

    def get_selected_text(self) -> str:
        try:
            return self.text.get(tk.SEL_FIRST, tk.SEL_LAST)
        except tk.TclError:
            return ""

    def set_selection(self, start: Position, end: Position) -> None:
        start_idx = self._index(start)
        end_idx = self._index(end)
        self.text.tag_remove(tk.SEL, "1.0", tk.END)
        if start != end:
            self.text.tag_add(tk.SEL, start_idx, end_idx)
        self.text.mark_set(tk.INSERT, end_idx)

    def replace_selection(self, text: str) -> None:
        # One undo step for the delete and the insert.
        self.text.edit_separator()
        try:
            first = self.text.index(tk.SEL_FIRST)
            self.text.delete(tk.SEL_FIRST, tk.SEL_LAST)
        except tk.TclError:
            first = self.text.index(tk.INSERT)
        self.text.insert(first, text)
        self.text.edit_separator()

    def scroll_into_view(self, start: Position, end: Position) -> None:
        self.text.see(self._index(end))
        self.text.see(self._index(start))
