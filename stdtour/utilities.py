"""Call counting, type checks, separated formatting, transactional requests and duration rounding."""

from __future__ import annotations

import math
import sys
from types import TracebackType
from typing import Any, Callable, Generic, TextIO, TypeVar

R = TypeVar("R")


class CountCalls(Generic[R]):
    """Wrap a callable and count how often it is called."""

    def __init__(self, callback: Callable[..., R]) -> None:
        self._callback = callback
        self._calls = 0

    def __call__(self, *args: Any, **kwargs: Any) -> R:
        self._calls += 1
        return self._callback(*args, **kwargs)

    def count(self) -> int:
        """Return the number of calls so far."""
        return self._calls


def is_homogeneous(*args: Any) -> bool:
    """Return whether all arguments have exactly the same type as the first.

    At least one argument is required.
    """
    if not args:
        raise TypeError("is_homogeneous() needs at least one argument")
    first_type = type(args[0])
    return all(type(arg) is first_type for arg in args[1:])


def format_with_sep(first: Any, *args: Any, sep: Any = " ") -> str:
    """Join the string forms of all arguments with ``sep``."""
    separator = str(sep)
    return str(first) + "".join(f"{separator}{arg}" for arg in args)


class Request:
    """A unit of work that commits on normal exit and rolls back on an exception."""

    def __init__(self, name: str, log: TextIO | None = None) -> None:
        self.name = name
        self._log = log

    def _write(self, text: str) -> None:
        out = self._log if self._log is not None else sys.stdout
        out.write(text)

    def __enter__(self) -> Request:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> bool:
        if exc_type is None:
            self.commit()
        else:
            self.rollback()
        return False

    def commit(self) -> None:
        self._write(f"  commit() for {self.name}\n")

    def rollback(self) -> None:
        self._write(f"  rollback() for {self.name}\n")


def duration_abs(seconds: float) -> float:
    """Return the magnitude of a duration."""
    return abs(seconds)


def duration_trunc(seconds: float) -> int:
    """Convert to whole seconds, truncating toward zero."""
    return math.trunc(seconds)


def duration_floor(seconds: float) -> int:
    """Convert to whole seconds, rounding toward negative infinity."""
    return math.floor(seconds)


def duration_ceil(seconds: float) -> int:
    """Convert to whole seconds, rounding toward positive infinity."""
    return math.ceil(seconds)


def duration_round(seconds: float) -> int:
    """Convert to the nearest whole second; halfway cases go to the even second."""
    floor = math.floor(seconds)
    ceil = math.ceil(seconds)
    below = seconds - floor
    above = ceil - seconds
    if below < above:
        return floor
    if above < below:
        return ceil
    return floor if floor % 2 == 0 else ceil