"""A bidirectional cursor over a sequence that refuses to leave its bounds."""

from __future__ import annotations

from typing import Any, Optional, Sequence


class StrictIterator:
    """A position in a sequence, between its first item and one past its last.

    Moving beyond either end, or reading at the end, raises IndexError.
    A cursor made without a sequence is uninitialised and every
    operation on it raises RuntimeError.
    """

    __slots__ = ("_sequence", "_current", "_last", "_initialized")

    def __init__(self, sequence: Optional[Sequence[Any]] = None, position: int = 0) -> None:
        self._initialized = sequence is not None
        self._sequence = sequence
        self._last = len(sequence) if sequence is not None else 0
        if self._initialized and not 0 <= position <= self._last:
            raise IndexError(f"position {position} is outside [0, {self._last}]")
        self._current = position if self._initialized else 0

    def _check_init(self) -> None:
        if not self._initialized:
            raise RuntimeError("Using uninitialized iterator")

    def advance(self) -> "StrictIterator":
        """Move one step forward and return the cursor."""
        self._check_init()
        if self._current == self._last:
            raise IndexError("Out of range (right)")
        self._current += 1
        return self

    def retreat(self) -> "StrictIterator":
        """Move one step back and return the cursor."""
        self._check_init()
        if self._current == 0:
            raise IndexError("Out of range (left)")
        self._current -= 1
        return self

    def get(self) -> Any:
        """The item at the cursor."""
        self._check_init()
        if self._current == self._last:
            raise IndexError("Dereferencing end of sequence")
        return self._sequence[self._current]

    def base(self) -> int:
        """The index the cursor stands at."""
        self._check_init()
        return self._current

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, StrictIterator):
            return NotImplemented
        return (
            self._initialized == other._initialized
            and self._sequence is other._sequence
            and self._current == other._current
            and self._last == other._last
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        if not self._initialized:
            return "StrictIterator()"
        return f"StrictIterator(position={self._current}, end={self._last})"


def make_strict(sequence: Sequence[Any], position: int = 0) -> StrictIterator:
    """A strict cursor over ``sequence`` standing at ``position``."""
    return StrictIterator(sequence, position)