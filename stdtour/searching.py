"""Subsequence search with naive, Boyer-Moore and Horspool strategies."""

from __future__ import annotations

import string
import sys
import time
from typing import Any, Callable, Hashable, Sequence, TextIO

from stdtour.numeric import parse_int_lenient


def build_text(max_run: int) -> str:
    """Return ``a b ... z aa bb ... zz ...`` up to runs of ``max_run`` letters, unseparated."""
    return "".join(
        letter * run
        for run in range(1, max_run + 1)
        for letter in string.ascii_lowercase
    )


def build_int_sequence(max_run: int) -> list[int]:
    """Return ``0 1 ... 9 0 0 1 1 ...`` up to runs of ``max_run`` equal digits."""
    return [
        digit
        for run in range(1, max_run + 1)
        for digit in range(10)
        for _ in range(run)
    ]


def _matches_at(haystack: Sequence[Any], needle: Sequence[Any], start: int) -> bool:
    return all(haystack[start + k] == item for k, item in enumerate(needle))


def naive_search(haystack: Sequence[Any], needle: Sequence[Any]) -> int:
    """Return the first position of ``needle`` in ``haystack``, or ``len(haystack)``."""
    m = len(needle)
    n = len(haystack)
    if m == 0:
        return 0
    for start in range(n - m + 1):
        if _matches_at(haystack, needle, start):
            return start
    return n


def _good_suffix_shifts(pattern: Sequence[Hashable]) -> list[int]:
    m = len(pattern)
    shift = [0] * (m + 1)
    border = [0] * (m + 1)
    i, j = m, m + 1
    border[i] = j
    while i > 0:
        while j <= m and pattern[i - 1] != pattern[j - 1]:
            if shift[j] == 0:
                shift[j] = j - i
            j = border[j]
        i -= 1
        j -= 1
        border[i] = j
    j = border[0]
    for i in range(m + 1):
        if shift[i] == 0:
            shift[i] = j
        if i == j:
            j = border[j]
    return shift


class BoyerMooreSearcher:
    """Reusable Boyer-Moore searcher using bad-character and good-suffix rules."""

    def __init__(self, needle: Sequence[Hashable]) -> None:
        self._needle = tuple(needle)
        self._last = {item: pos for pos, item in enumerate(self._needle)}
        self._shift = _good_suffix_shifts(self._needle)

    def __call__(self, haystack: Sequence[Hashable]) -> tuple[int, int]:
        """Return the ``(start, end)`` of the first match, or ``(len, len)``."""
        needle = self._needle
        m = len(needle)
        n = len(haystack)
        if m == 0:
            return 0, 0
        start = 0
        while start <= n - m:
            j = m - 1
            while j >= 0 and needle[j] == haystack[start + j]:
                j -= 1
            if j < 0:
                return start, start + m
            bad_char = j - self._last.get(haystack[start + j], -1)
            start += max(self._shift[j + 1], bad_char)
        return n, n


class HorspoolSearcher:
    """Reusable Boyer-Moore-Horspool searcher."""

    def __init__(self, needle: Sequence[Hashable]) -> None:
        self._needle = tuple(needle)
        m = len(self._needle)
        self._table = {item: m - 1 - pos for pos, item in enumerate(self._needle[:-1])}

    def __call__(self, haystack: Sequence[Hashable]) -> tuple[int, int]:
        """Return the ``(start, end)`` of the first match, or ``(len, len)``."""
        needle = self._needle
        m = len(needle)
        n = len(haystack)
        if m == 0:
            return 0, 0
        start = 0
        while start <= n - m:
            if _matches_at(haystack, needle, start):
                return start, start + m
            start += self._table.get(haystack[start + m - 1], m)
        return n, n


def _str_find(haystack: Sequence[Any], needle: Sequence[Any]) -> int:
    assert isinstance(haystack, str) and isinstance(needle, str)
    found = haystack.find(needle)
    return len(haystack) if found < 0 else found


def run_measurements(
    haystack: Sequence[Hashable],
    needle: Sequence[Hashable],
    rounds: int = 5,
    file: TextIO | None = None,
) -> dict[str, list[float]]:
    """Time each search strategy ``rounds`` times, print results and return durations in ms."""
    if rounds < 1:
        raise ValueError("rounds must be at least 1")
    out = file if file is not None else sys.stdout
    bm = BoyerMooreSearcher(needle)
    bmh = HorspoolSearcher(needle)

    strategies: list[tuple[str, Callable[[], int]]] = []
    if isinstance(haystack, str) and isinstance(needle, str):
        strategies.append(("find()", lambda: _str_find(haystack, needle)))
    strategies += [
        ("search()", lambda: naive_search(haystack, needle)),
        ("search(def)", lambda: naive_search(haystack, needle)),
        ("search(bm)", lambda: BoyerMooreSearcher(needle)(haystack)[0]),
        ("search(bmh)", lambda: HorspoolSearcher(needle)(haystack)[0]),
        ("bm()", lambda: bm(haystack)[0]),
        ("bmh()", lambda: bmh(haystack)[0]),
    ]

    durations: dict[str, list[float]] = {name: [] for name, _ in strategies}
    for _ in range(rounds):
        for name, search in strategies:
            start = time.perf_counter()
            index = search()
            durations[name].append((time.perf_counter() - start) * 1000.0)
            print(f"idx: {index}", file=out)

    result = dict(sorted(durations.items()))
    for name, values in result.items():
        listed = "".join(f"{value} " for value in values)
        print(f"\n{name}: {listed}ms", file=out)
        print(f"  avg: {sum(values) / len(values)}ms", file=out)
    return result


def main(argv: Sequence[str] | None = None) -> int:
    """Search a long generated text (or int sequence with ``--ints``) and time it."""
    args = list(sys.argv[1:] if argv is None else argv)
    use_ints = "--ints" in args
    args = [arg for arg in args if arg != "--ints"]
    max_run = 1000
    if args:
        parsed = parse_int_lenient(args[0])
        max_run = parsed if parsed is not None else 0
    max_run = max(max_run, 0)
    if use_ints:
        numbers = build_int_sequence(max_run)
        sub = [4] * max_run
        print(
            f"search sequence of {max_run} ints in vector with {len(numbers)} ints"
        )
        run_measurements(numbers, sub)
    else:
        text = build_text(max_run)
        substr = "k" * max_run
        print(
            f"search substring of {max_run} chars in string with {len(text)} chars"
        )
        run_measurements(text, substr)
    return 0