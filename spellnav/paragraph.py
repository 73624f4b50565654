"""Paragraph bounds detection and paragraph text assembly."""
from __future__ import annotations

from bisect import bisect_right
from dataclasses import dataclass

from .buffer import EditorBuffer, Position


@dataclass(frozen=True)
class ParagraphBounds:
    start_line: int
    end_line: int  # inclusive


@dataclass(frozen=True)
class ParagraphText:
    """Lines of a paragraph joined with ``\\n`` plus the data to map offsets back."""

    start_line: int
    lines: tuple[str, ...]
    text: str
    line_starts: tuple[int, ...]

    @classmethod
    def from_lines(cls, start_line: int, lines: list[str]) -> ParagraphText:
        starts: list[int] = []
        acc = 0
        for line in lines:
            starts.append(acc)
            acc += len(line) + 1
        return cls(
            start_line=start_line,
            lines=tuple(lines),
            text="\n".join(lines),
            line_starts=tuple(starts),
        )

    def position_at(self, offset: int) -> Position:
        """Map an offset in :attr:`text` to a buffer position.

        Each joining newline takes one offset unit and no column.
        """

        index = max(0, bisect_right(self.line_starts, offset) - 1)
        return Position(self.start_line + index, offset - self.line_starts[index])


def _is_blank(buffer: EditorBuffer, line: int) -> bool:
    return buffer.get_line(line).strip() == ""


def locate_paragraph(buffer: EditorBuffer, cursor_line: int) -> ParagraphBounds | None:
    """Return the blank-line-delimited block around ``cursor_line``.

    A cursor sitting on a blank line has no paragraph.
    """

    last = buffer.last_line()

    start = cursor_line
    while start > 0 and not _is_blank(buffer, start):
        start -= 1
    if _is_blank(buffer, start):
        start += 1

    end = cursor_line
    while end <= last and not _is_blank(buffer, end):
        end += 1
    end -= 1

    if start > end or start < 0 or end > last:
        return None
    return ParagraphBounds(start, end)


def read_paragraph(buffer: EditorBuffer, bounds: ParagraphBounds) -> ParagraphText:
    lines = [buffer.get_line(i) for i in range(bounds.start_line, bounds.end_line + 1)]
    return ParagraphText.from_lines(bounds.start_line, lines)
