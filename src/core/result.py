"""Result type for chaining fallible steps without exceptions.

Provides a Result[T, E] tagged union with two variants, Success and Failure.
Steps are composed with ``bind``: a Success feeds its value into the next
step, a Failure skips every remaining step and carries its error to the end.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import reduce
from typing import Callable, Generic, TypeVar, Union

T = TypeVar("T")
E = TypeVar("E")
U = TypeVar("U")


class UnwrapError(ValueError):
    """Raised when a result is read through the accessor of the other variant."""


@dataclass(frozen=True, slots=True)
class Success(Generic[T]):
    """Successful result containing a value."""

    value: T

    def is_success(self) -> bool:
        return True

    def is_failure(self) -> bool:
        return False

    is_ok = is_success
    is_err = is_failure

    @property
    def error(self) -> E:  # type: ignore[type-var]
        raise UnwrapError(f"Success has no error (value: {self.value!r})")

    def unwrap(self) -> T:
        return self.value

    def unwrap_err(self) -> E:  # type: ignore[type-var]
        return self.error

    def unwrap_or(self, default: T) -> T:
        return self.value

    def bind(self, fn: Callable[[T], Result[U, E]]) -> Result[U, E]:  # type: ignore[type-var]
        return fn(self.value)

    def map(self, fn: Callable[[T], U]) -> Result[U, E]:  # type: ignore[type-var]
        return Success(fn(self.value))

    def map_err(self, fn: Callable[[E], U]) -> Result[T, U]:  # type: ignore[type-var]
        return self  # type: ignore[return-value]


@dataclass(frozen=True, slots=True)
class Failure(Generic[E]):
    """Error result containing an error value."""

    error: E

    def is_success(self) -> bool:
        return False

    def is_failure(self) -> bool:
        return True

    is_ok = is_success
    is_err = is_failure

    @property
    def value(self) -> T:  # type: ignore[type-var]
        raise UnwrapError(f"Failure has no value (error: {self.error!r})")

    def unwrap(self) -> T:  # type: ignore[type-var]
        raise UnwrapError(f"Called unwrap on Failure: {self.error}")

    def unwrap_err(self) -> E:
        return self.error

    def unwrap_or(self, default: T) -> T:  # type: ignore[type-var]
        return default

    def bind(self, fn: Callable[[T], Result[U, E]]) -> Result[U, E]:  # type: ignore[type-var]
        # The error object itself travels on; the step is never called.
        return Failure(self.error)  # type: ignore[return-value]

    def map(self, fn: Callable[[T], U]) -> Result[U, E]:  # type: ignore[type-var]
        return Failure(self.error)  # type: ignore[return-value]

    def map_err(self, fn: Callable[[E], U]) -> Result[T, U]:  # type: ignore[type-var]
        return Failure(fn(self.error))  # type: ignore[return-value]


Result = Union[Success[T], Failure[E]]


def chain(initial: Result, *steps: Callable[[object], Result]) -> Result:
    """Bind each step in order, stopping at the first failure.

    ``chain(r, f1, f2)`` is the same as ``r.bind(f1).bind(f2)``.
    """
    return reduce(lambda acc, step: acc.bind(step), steps, initial)
