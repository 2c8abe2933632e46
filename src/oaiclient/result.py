"""Result type returned by every API call.

A call either succeeds with ``Ok(value)`` or fails with ``Err(status_code)``.
Nothing is raised for API-level failures; callers branch on ``is_ok()``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, TypeVar, Union

T = TypeVar("T")
U = TypeVar("U")
E = TypeVar("E")
F = TypeVar("F")


class ResultError(ValueError):
    """Raised when unwrapping an ``Err``."""

    def __init__(self, message: str, error: Any) -> None:
        super().__init__(message)
        self.error = error


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """Successful call holding the decoded response."""

    value: T

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False

    def unwrap(self) -> T:
        """Return the value."""
        return self.value

    def expect(self, message: str) -> T:
        """Return the value (``message`` is only used by ``Err``)."""
        return self.value

    def unwrap_or(self, default: T) -> T:
        return self.value

    def unwrap_or_else(self, fn: Callable[[Any], T]) -> T:
        return self.value

    def map(self, fn: Callable[[T], U]) -> Result[U, E]:
        """Transform the success value."""
        return Ok(fn(self.value))

    def map_err(self, fn: Callable[[E], F]) -> Result[T, F]:
        return self  # type: ignore[return-value]

    def and_then(self, fn: Callable[[T], Result[U, E]]) -> Result[U, E]:
        """Chain another call that returns a Result."""
        return fn(self.value)

    def or_else(self, fn: Callable[[E], Result[T, F]]) -> Result[T, F]:
        return self  # type: ignore[return-value]

    def __repr__(self) -> str:
        return f"Ok({self.value!r})"


@dataclass(frozen=True, slots=True)
class Err(Generic[E]):
    """Failed call holding the error value (an HTTP status code)."""

    error: E

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True

    def unwrap(self) -> Any:
        """Raise ResultError. Check is_ok() first."""
        raise ResultError(f"Called unwrap on Err: {self.error}", self.error)

    def expect(self, message: str) -> Any:
        """Raise ResultError with ``message`` and the error value."""
        raise ResultError(f"{message}: {self.error}", self.error)

    def unwrap_or(self, default: T) -> T:
        return default

    def unwrap_or_else(self, fn: Callable[[E], T]) -> T:
        return fn(self.error)

    def map(self, fn: Callable[[T], U]) -> Result[U, E]:
        return self  # type: ignore[return-value]

    def map_err(self, fn: Callable[[E], F]) -> Result[T, F]:
        """Transform the error value."""
        return Err(fn(self.error))

    def and_then(self, fn: Callable[[T], Result[U, E]]) -> Result[U, E]:
        return self  # type: ignore[return-value]

    def or_else(self, fn: Callable[[E], Result[T, F]]) -> Result[T, F]:
        """Recover from the error with another Result-returning call."""
        return fn(self.error)

    def __repr__(self) -> str:
        return f"Err({self.error!r})"


Result = Union[Ok[T], Err[E]]
