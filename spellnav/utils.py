from __future__ import annotations


def _utf16_units(text: str) -> int:
    return len(text.encode("utf-16-le")) // 2


def column_to_tk(line_text: str, column: int) -> int:
    """Convert a Python-string column to a Tk column counted in UTF-16 code units."""

    if column <= 0:
        return 0
    return _utf16_units(line_text[:column])


def tk_to_column(line_text: str, units: int) -> int:
    """Inverse of :func:`column_to_tk`; clamps to the end of the line."""

    if units <= 0:
        return 0
    seen = 0
    for idx, ch in enumerate(line_text):
        if seen >= units:
            return idx
        seen += 2 if ord(ch) > 0xFFFF else 1
    return len(line_text)


def tkindex(line: int, tk_column: int) -> str:
    """Format a 0-based line and a Tk column as a Tk ``"line.col"`` index."""

    return f"{line + 1}.{tk_column}"


def split_tkindex(index: str) -> tuple[int, int]:
    """Parse a Tk ``"line.col"`` index into a 0-based line and a Tk column."""

    line_str, col_str = index.split(".")
    return int(line_str) - 1, int(col_str)
