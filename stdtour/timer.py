"""A stopwatch that reports the time elapsed between readings."""

from __future__ import annotations

import sys
import time
from typing import Callable, TextIO


class Timer:
    """Measures milliseconds between consecutive readings of a clock.

    The clock is any callable returning seconds as a float; by default a
    monotonic clock.
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic) -> None:
        self._clock = clock
        self._last = clock()

    def diff(self) -> float:
        """Return milliseconds since the previous reading and restart the timer."""
        now = self._clock()
        elapsed = (now - self._last) * 1000.0
        self._last = now
        return elapsed

    def print_diff(self, msg: str = "Timer diff: ", file: TextIO | None = None) -> float:
        """Print ``msg`` followed by the elapsed milliseconds; return that value."""
        elapsed = self.diff()
        out = file if file is not None else sys.stdout
        print(f"{msg}{elapsed}ms", file=out)
        return elapsed