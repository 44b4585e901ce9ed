"""A container holding either a value, a raised error, or nothing at all."""

from __future__ import annotations

from typing import Any, Callable, Generic, TypeVar

T = TypeVar("T")

_EMPTY: Any = object()


class _ThrownValue(Exception):
    """Carries a failure payload that is not itself an exception."""

    def __init__(self, value: Any) -> None:
        super().__init__(value)
        self.value = value


class Try(Generic[T]):
    """The outcome of a computation: a value, an error, or neither.

    ``Try(value)`` holds a value, ``Try()`` holds nothing and
    ``Try.failure(error)`` holds an error that is raised again on access.
    A Try cannot be copied.
    """

    __slots__ = ("_value", "_error")

    def __init__(self, value: Any = _EMPTY) -> None:
        self._value = value
        self._error: BaseException | None = None

    @classmethod
    def failure(cls, error: Any) -> "Try[T]":
        """A failed Try holding ``error``.

        An exception class is instantiated; a payload that is not an
        exception is wrapped so that it can be raised, with the payload
        as the exception's only argument.
        """
        result = cls()
        if isinstance(error, type) and issubclass(error, BaseException):
            error = error()
        elif not isinstance(error, BaseException):
            error = _ThrownValue(error)
        result._error = error
        return result

    def is_failed(self) -> bool:
        """True if the Try holds an error."""
        return self._error is not None

    def value(self) -> T:
        """The held value; raises the held error, or RuntimeError if empty."""
        if self._error is not None:
            raise self._error
        if self._value is _EMPTY:
            raise RuntimeError("Object is empty")
        return self._value

    def throw(self) -> None:
        """Raise the held error, or RuntimeError if there is none."""
        if self._error is not None:
            raise self._error
        raise RuntimeError("No exception")

    def __copy__(self) -> "Try[T]":
        raise TypeError("a Try cannot be copied")

    def __deepcopy__(self, memo: dict) -> "Try[T]":
        raise TypeError("a Try cannot be copied")

    def __repr__(self) -> str:
        if self._error is not None:
            return f"Try.failure({self._error!r})"
        if self._value is _EMPTY:
            return "Try()"
        return f"Try({self._value!r})"


def try_run(func: Callable[..., T], *args: Any, **kwargs: Any) -> Try[T]:
    """Call ``func`` and capture its result or the exception it raises."""
    try:
        result = func(*args, **kwargs)
    except Exception as error:
        return Try.failure(error)
    return Try(result)