from __future__ import annotations

from .tokenizer import APOSTROPHES, HYPHEN


def _is_title(word: str) -> bool:
    if not word or not word[0].isupper():
        return False
    return all(ch.islower() or ch in APOSTROPHES or ch == HYPHEN for ch in word[1:])


def apply_case(suggestion: str, original: str) -> str:
    """Give ``suggestion`` the casing pattern of ``original``.

    All-caps and all-lowercase originals force the suggestion to match, a
    title-case original capitalizes only the first letter, and mixed case
    leaves the dictionary's casing alone.
    """

    if original == original.upper():
        return suggestion.upper()
    if _is_title(original):
        return suggestion[:1].upper() + suggestion[1:].lower()
    if original == original.lower():
        return suggestion.lower()
    return suggestion
