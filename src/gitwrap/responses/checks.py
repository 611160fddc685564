"""Argument checks shared by the response accessors."""

from __future__ import annotations

from collections import Counter
from typing import Sequence


class ResponseIndexError(IndexError):
    """Raised when an indexed accessor is asked for a position outside its list."""


def check_index_in_range(items: Sequence[object], index: int, what: str = "index") -> None:
    """Raise ResponseIndexError unless ``0 <= index < len(items)``.

    Negative indexes are rejected rather than counted from the end.
    """
    if isinstance(index, bool) or not isinstance(index, int):
        raise ResponseIndexError(f"{what} must be an int, got {type(index).__name__}")
    if index < 0 or index >= len(items):
        raise ResponseIndexError(
            f"{what} {index} is out of range (size {len(items)})"
        )


def unordered_equal(left: Sequence[object], right: Sequence[object]) -> bool:
    """Multiset comparison: same items, same multiplicities, any order."""
    if len(left) != len(right):
        return False
    return Counter(left) == Counter(right)
