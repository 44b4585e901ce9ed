"""Counting distinct words in a text, ignoring letter case."""

from __future__ import annotations

import re

_WORD = re.compile(r"[A-Za-z]+")


def different_words_count(text: str) -> int:
    """Number of distinct case-insensitive words made of ASCII letters."""
    return len({word.lower() for word in _WORD.findall(text)})