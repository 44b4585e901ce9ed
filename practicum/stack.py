"""A stack of integers."""

from __future__ import annotations

from typing import List


class Stack:
    """Last-in first-out storage of integers."""

    __slots__ = ("_values",)

    def __init__(self) -> None:
        self._values: List[int] = []

    def push(self, value: int) -> None:
        self._values.append(value)

    def pop(self) -> bool:
        """Remove the top value; False if the stack was already empty."""
        if not self._values:
            return False
        self._values.pop()
        return True

    def top(self) -> int:
        """The top value, or 0 when the stack is empty."""
        return self._values[-1] if self._values else 0

    def empty(self) -> bool:
        return not self._values

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"Stack({self._values!r})"