"""Swapping two values and sorting three."""

from __future__ import annotations

from typing import Tuple


def swap(a: int, b: int) -> Tuple[int, int]:
    """Return the two values in exchanged order."""
    return b, a


def sort3(a: int, b: int, c: int) -> Tuple[int, int, int]:
    """Return three values in non-decreasing order."""
    if a > b:
        a, b = swap(a, b)
    if b > c:
        if a > c:
            a, c = swap(a, c)
        b, c = swap(b, c)
    return a, b, c