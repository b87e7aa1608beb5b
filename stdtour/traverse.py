"""Apply operations to every element of a container."""

from __future__ import annotations

from typing import Any, Callable, Iterable, MutableSequence


def traverse(container: Iterable[Any], op: Callable[[Any], Any]) -> None:
    """Call ``op`` on each element of ``container`` from front to back."""
    for item in container:
        op(item)


def traverse_reverse(container: Any, op: Callable[[Any], Any]) -> None:
    """Call ``op`` on each element of ``container`` from back to front."""
    for item in reversed(container):
        op(item)


def transform(container: MutableSequence[Any], func: Callable[[Any], Any]) -> None:
    """Replace every element of ``container`` in place with ``func(element)``."""
    new_values = [func(item) for item in container]
    for position, value in enumerate(new_values):
        container[position] = value