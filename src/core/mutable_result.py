"""Result variant whose success payload is edited in place.

Unlike Success/Failure, a MutableResult never changes type along a chain.
The success payload lives in a Cell that is shared between shallow copies of
the same result, so a mutation made through one copy is seen by all of them.
Use ``detached()`` when each holder needs its own payload.
"""

from __future__ import annotations

import copy
from typing import Any, Callable, Generic, Optional, TypeVar

from src.core.result import Failure, Result, Success, UnwrapError

T = TypeVar("T")
E = TypeVar("E")


class Cell(Generic[T]):
    """Mutable holder for a success payload."""

    __slots__ = ("contents",)

    def __init__(self, contents: T) -> None:
        self.contents = contents

    def set(self, contents: T) -> None:
        self.contents = contents

    def __repr__(self) -> str:
        return f"Cell({self.contents!r})"


class MutableResult(Generic[T, E]):
    """Success with a shared mutable cell, or Failure with an error.

    Usage:
        draft = MutableResult.success(0)
        draft.in_place_bind(lambda c: c.set(c.contents + 5))
        draft.in_place_bind(lambda c: c.set(c.contents * 2))
        draft.value  # 10

    Not thread-safe: callers sharing copies across threads must synchronize.
    """

    __slots__ = ("_cell", "_error", "_is_success")

    def __init__(
        self, cell: Optional[Cell[T]], error: Optional[E], is_success: bool
    ) -> None:
        self._cell = cell
        self._error = error
        self._is_success = is_success

    @classmethod
    def success(cls, value: T) -> MutableResult[T, E]:
        """Deep-copy ``value`` into a new cell.

        Raises TypeError when ``value`` cannot be deep-copied (locks, open
        files, sockets). Wrap such objects in a copyable holder first.
        """
        return cls(Cell(copy.deepcopy(value)), None, True)

    @classmethod
    def failure(cls, error: E) -> MutableResult[T, E]:
        return cls(None, error, False)

    def is_success(self) -> bool:
        return self._is_success

    def is_failure(self) -> bool:
        return not self._is_success

    @property
    def value(self) -> T:
        if not self._is_success or self._cell is None:
            raise UnwrapError(f"Failure has no value (error: {self._error!r})")
        return self._cell.contents

    @property
    def error(self) -> E:
        if self._is_success:
            raise UnwrapError("Success has no error")
        return self._error  # type: ignore[return-value]

    def in_place_bind(self, fn: Callable[[Cell[T]], Any]) -> MutableResult[T, E]:
        """Hand the payload cell to ``fn`` for editing.

        ``fn`` may mutate ``cell.contents`` or replace it with ``cell.set``;
        its return value is ignored. Does nothing on a failure.
        """
        if self._is_success and self._cell is not None:
            fn(self._cell)
        return self

    def read_only_bind(self, fn: Callable[[T], Any]) -> MutableResult[T, E]:
        """Pass the payload to ``fn`` for inspection; its return is ignored."""
        if self._is_success and self._cell is not None:
            fn(self._cell.contents)
        return self

    def shares_payload_with(self, other: MutableResult[T, E]) -> bool:
        return self._cell is not None and self._cell is other._cell

    def detached(self) -> MutableResult[T, E]:
        """Return a copy with its own payload cell."""
        if self._is_success and self._cell is not None:
            return MutableResult.success(self._cell.contents)
        return MutableResult.failure(self._error)  # type: ignore[arg-type]

    def to_result(self) -> Result[T, E]:
        """Snapshot into an immutable Success or Failure.

        Deep-copies the payload, with the same TypeError as ``success``.
        """
        if self._is_success and self._cell is not None:
            return Success(copy.deepcopy(self._cell.contents))
        return Failure(self._error)

    def __copy__(self) -> MutableResult[T, E]:
        return MutableResult(self._cell, self._error, self._is_success)

    def __deepcopy__(self, memo: dict[int, Any]) -> MutableResult[T, E]:
        return self.detached()

    def __repr__(self) -> str:
        if self._is_success:
            return f"MutableResult.success({self._cell.contents!r})"  # type: ignore[union-attr]
        return f"MutableResult.failure({self._error!r})"
