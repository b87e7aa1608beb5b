"""Folds, scans, clamping, integer parsing and float formatting helpers."""

from __future__ import annotations

import itertools
import operator
import re
from decimal import Decimal
from typing import Any, Callable, Iterable, Sequence

_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1

_STRICT_INT = re.compile(r"-?[0-9]+")
_LENIENT_INT = re.compile(r"[ \t\n\v\f\r]*([+-]?[0-9]+)")


def _identity(value: Any) -> Any:
    return value


def repeated_sequence(num: int) -> list[int]:
    """Return ``num`` repetitions of the sequence 1 2 3 4."""
    return [1, 2, 3, 4] * max(num, 0)


def accumulate(
    values: Iterable[Any],
    initial: Any = 0,
    op: Callable[[Any, Any], Any] = operator.add,
) -> Any:
    """Fold ``values`` from the left, starting from ``initial``."""
    result = initial
    for value in values:
        result = op(result, value)
    return result


def squared_sum(values: Iterable[Any], initial: Any = 0) -> Any:
    """Add the square of every value to ``initial``."""
    return accumulate(values, initial, lambda total, value: total + value * value)


def inclusive_scan(
    values: Iterable[Any],
    op: Callable[[Any, Any], Any] = operator.add,
    initial: Any = None,
) -> list[Any]:
    """Return the running results, each including the current element."""
    if initial is None:
        return list(itertools.accumulate(values, op))
    return list(itertools.accumulate(values, op, initial=initial))[1:]


def exclusive_scan(
    values: Iterable[Any],
    initial: Any,
    op: Callable[[Any, Any], Any] = operator.add,
) -> list[Any]:
    """Return the running results, each excluding the current element."""
    return list(itertools.accumulate(values, op, initial=initial))[:-1]


def transform_reduce(
    values: Iterable[Any],
    initial: Any = 0,
    reduce_op: Callable[[Any, Any], Any] = operator.add,
    transform: Callable[[Any], Any] = _identity,
) -> Any:
    """Transform every value and fold the results into ``initial``."""
    return accumulate((transform(value) for value in values), initial, reduce_op)


def transform_reduce_pairs(
    first: Sequence[Any],
    second: Sequence[Any],
    initial: Any = 0,
    reduce_op: Callable[[Any, Any], Any] = operator.add,
    transform: Callable[[Any, Any], Any] = operator.mul,
) -> Any:
    """Combine corresponding elements of two ranges and fold the results.

    The first range sets the length; the second must be at least as long.
    """
    if len(second) < len(first):
        raise ValueError("the second range is shorter than the first")
    pairs = zip(first, second)
    return accumulate((transform(a, b) for a, b in pairs), initial, reduce_op)


def transform_inclusive_scan(
    values: Iterable[Any],
    op: Callable[[Any, Any], Any] = operator.add,
    transform: Callable[[Any], Any] = _identity,
    initial: Any = None,
) -> list[Any]:
    """Inclusive scan over the transformed values."""
    return inclusive_scan((transform(value) for value in values), op, initial)


def transform_exclusive_scan(
    values: Iterable[Any],
    initial: Any,
    op: Callable[[Any, Any], Any] = operator.add,
    transform: Callable[[Any], Any] = _identity,
) -> list[Any]:
    """Exclusive scan over the transformed values."""
    return exclusive_scan((transform(value) for value in values), initial, op)


def clamp(value: Any, low: Any, high: Any) -> Any:
    """Limit ``value`` to the range from ``low`` to ``high``."""
    if high < low:
        raise ValueError("clamp bounds are reversed")
    if value < low:
        return low
    if high < value:
        return high
    return value


def _as_int(digits: str) -> int | None:
    number = int(digits)
    return number if _INT_MIN <= number <= _INT_MAX else None


def parse_int_prefix(text: str) -> int | None:
    """Read a decimal int from the very start of ``text``.

    No leading whitespace or plus sign is accepted; reading stops at the first
    non-digit. Returns ``None`` when no digits start the text or the number does
    not fit a 32-bit int.
    """
    match = _STRICT_INT.match(text)
    if match is None:
        return None
    return _as_int(match.group())


def parse_int_lenient(text: str) -> int | None:
    """Read a decimal int after optional whitespace and sign.

    Reading stops at the first non-digit. Returns ``None`` when no number is
    found or it does not fit a 32-bit int.
    """
    match = _LENIENT_INT.match(text)
    if match is None:
        return None
    return _as_int(match.group(1))


def _shortest_text(value: float) -> str:
    if value != value:
        return "nan"
    if value in (float("inf"), float("-inf")):
        return "inf" if value > 0 else "-inf"
    sign, digit_tuple, exponent = Decimal(repr(value)).normalize().as_tuple()
    digits = "".join(map(str, digit_tuple))
    assert isinstance(exponent, int)
    if digits == "0":
        exponent = 0
    count = len(digits)
    if exponent >= 0:
        fixed = digits + "0" * exponent
    elif -exponent < count:
        fixed = f"{digits[:count + exponent]}.{digits[count + exponent:]}"
    else:
        fixed = "0." + "0" * (-exponent - count) + digits
    mantissa = digits[0] + (f".{digits[1:]}" if count > 1 else "")
    sci_exp = exponent + count - 1
    scientific = f"{mantissa}e{'-' if sci_exp < 0 else '+'}{abs(sci_exp):02d}"
    text = fixed if len(fixed) <= len(scientific) else scientific
    return ("-" if sign else "") + text


def float_roundtrip(value: float) -> tuple[str, float]:
    """Write ``value`` as its shortest exact text and read it back.

    Returns the text and the value read back. Raises ``ValueError`` if the
    value read back differs.
    """
    text = _shortest_text(value)
    back = float(text)
    if back != value and not (back != back and value != value):
        raise ValueError(f"{value!r} did not survive the round trip via {text!r}")
    return text, back


def _hexfloat(value: float) -> str:
    text = float.hex(value)
    if "p" not in text:
        return text
    mantissa, exponent = text.split("p")
    if "." in mantissa:
        mantissa = mantissa.rstrip("0").rstrip(".")
    return f"{mantissa}p{exponent}"


def describe_float(value: float) -> str:
    """Show ``value`` in default decimal and in hexadecimal float notation."""
    return f"dec: {value:6g}  hex: {_hexfloat(value)}"


def for_each_n(items: Iterable[Any], n: int, op: Callable[[Any], Any]) -> None:
    """Call ``op`` on the first ``n`` elements of ``items``.

    Raises ``IndexError`` if ``items`` holds fewer than ``n`` elements.
    """
    if n <= 0:
        return
    visited = 0
    for item in itertools.islice(items, n):
        op(item)
        visited += 1
    if visited < n:
        raise IndexError(f"only {visited} elements, {n} requested")


def last_five(items: Iterable[Any]) -> str:
    """Describe the size of ``items`` and list at most its last five elements."""
    values = items if isinstance(items, Sequence) else list(items)
    size = len(values)
    parts = [f"{size} elems: "]
    if size > 5:
        parts.append("... ")
        values = values[size - 5:]
    parts.extend(f"{value} " for value in values)
    return "".join(parts)


def every_second(items: Iterable[Any]) -> list[Any]:
    """Return the elements at even positions."""
    return list(items)[::2]