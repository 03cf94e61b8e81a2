"""Character-level edits and searches on strings."""

from __future__ import annotations

from typing import Optional


def _require_char(value: str, name: str) -> None:
    if len(value) != 1:
        raise ValueError(f"{name} must be a single character, got {value!r}")


def delete_char(sentence: str, position: int) -> str:
    """Return ``sentence`` without the character at the 0-based ``position``.

    Raises IndexError unless ``0 <= position < len(sentence)``.
    """
    if not 0 <= position < len(sentence):
        raise IndexError(f"invalid position {position}")
    return sentence[:position] + sentence[position + 1:]


def insert_char(sentence: str, char: str, position: int) -> str:
    """Return ``sentence`` with ``char`` inserted at the 0-based ``position``.

    Raises IndexError unless ``0 <= position <= len(sentence)``.
    """
    _require_char(char, "char")
    if not 0 <= position <= len(sentence):
        raise IndexError(f"invalid position {position}")
    return sentence[:position] + char + sentence[position:]


def replace_char(sentence: str, old: str, new: str) -> str:
    """Return ``sentence`` with every ``old`` character replaced by ``new``."""
    _require_char(old, "old")
    _require_char(new, "new")
    return sentence.replace(old, new)


def find_pattern(line: str, pattern: str) -> Optional[int]:
    """Return the index of the first occurrence of ``pattern`` in ``line``, or None."""
    index = line.find(pattern)
    return None if index < 0 else index


def substring(text: str, start: int, length: Optional[int] = None) -> str:
    """Return up to ``length`` characters of ``text`` beginning at ``start``.

    A missing or negative ``length`` takes the rest of the text. Raises
    IndexError if ``start`` is negative or past the end of ``text``.
    """
    if not 0 <= start <= len(text):
        raise IndexError(f"start {start} out of range")
    if length is None or length < 0:
        return text[start:]
    return text[start:start + length]