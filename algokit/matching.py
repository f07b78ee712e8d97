"""Brute-force substring search."""

from __future__ import annotations

from collections.abc import Sequence

__all__ = ["find_pattern"]


def find_pattern(text: Sequence, pattern: Sequence) -> list[int]:
    """Return every index where ``pattern`` occurs in ``text``, overlaps included.

    An empty pattern matches at every position from 0 to ``len(text)``.
    """
    width = len(pattern)
    return [i for i in range(len(text) - width + 1) if text[i : i + width] == pattern]