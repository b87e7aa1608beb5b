"""Time common operations on a collection of geometric objects."""

from __future__ import annotations

import random
import sys
import time
from typing import Callable, Sequence, TextIO

from stdtour.geometry import Circle, Coord, GeoObj, Line, Polygon

_STEPS = (
    ("a", "init_coll()"),
    ("b", "clean_coll()"),
    ("c", "iterate()"),
    ("d", "iterate_down()"),
    ("e", "shuffle_and_mod()"),
    ("f", "sort_coll()"),
    ("g", "copy_coll()"),
    ("h", "clone_all()"),
    ("i", "ALL"),
)


def init_coll(num: int) -> list[GeoObj]:
    """Build ``num // 3`` triples of a line, a circle and a square polygon."""
    coll: list[GeoObj] = []
    for i in range(1, num // 3 + 1):
        coll.append(Line(f"Line{i}", Coord(i, i), Coord(100 * i, 100 * i)))
        coll.append(Circle(f"Circle{i}", Coord(10 * i, 10 * i), i))
        coll.append(
            Polygon(
                f"Polygon{i}",
                [Coord(i, i), Coord(i, -i), Coord(-i, -i), Coord(-i, i)],
            )
        )
    return coll


def iterate(coll: Sequence[GeoObj]) -> int:
    """Count the objects that have an empty name."""
    return sum(1 for obj in coll if not obj.name)


def iterate_down(coll: Sequence[GeoObj]) -> int:
    """Sum the number of points over all polygons."""
    return sum(obj.num_points() for obj in coll if isinstance(obj, Polygon))


def shuffle_and_mod(coll: list[GeoObj], seed: int | None = 0) -> None:
    """Shuffle ``coll`` in place and move every object up by one."""
    random.Random(seed).shuffle(coll)
    for obj in coll:
        obj.move(Coord(0, 1))


def sort_coll(coll: list[GeoObj]) -> None:
    """Sort ``coll`` in place by name."""
    coll.sort(key=lambda obj: obj.name)


def copy_coll(coll: Sequence[GeoObj]) -> list[GeoObj]:
    """Return a new list that refers to the same objects."""
    return list(coll)


def clone_all(coll: Sequence[GeoObj]) -> list[GeoObj]:
    """Return independent copies of every object."""
    return [obj.clone() for obj in coll]


def clean_coll(coll: list[GeoObj]) -> None:
    """Remove every object from ``coll``."""
    coll.clear()


def _timed(func: Callable[[], object]) -> tuple[float, object]:
    start = time.perf_counter()
    result = func()
    return (time.perf_counter() - start) * 1000.0, result


def run_benchmark(
    num: int = 10000, loops: int = 10, file: TextIO | None = None
) -> dict[str, float]:
    """Run every step ``loops`` times; print timings and return mean milliseconds per step."""
    if loops < 1:
        raise ValueError("loops must be at least 1")
    out = file if file is not None else sys.stdout
    totals = {name: 0.0 for _, name in _STEPS}
    print("*" * 47, file=out)
    for _ in range(loops):
        d_init, coll = _timed(lambda: init_coll(num))
        print(f"**** init_coll():       {d_init} ms", file=out)
        d_shuffle, _ = _timed(lambda: shuffle_and_mod(coll))
        print(f"**** shuffle_and_mod(): {d_shuffle} ms", file=out)
        d_sort, _ = _timed(lambda: sort_coll(coll))
        print(f"**** sort_coll():       {d_sort} ms", file=out)
        d_copy, _ = _timed(lambda: copy_coll(coll))
        print(f"**** copy_coll():       {d_copy} ms", file=out)
        d_iter, num_empty = _timed(lambda: iterate(coll))
        print(f"**** iterate():         {d_iter} ms", file=out)
        print(f"                        {num_empty} empty names", file=out)
        d_down, num_points = _timed(lambda: iterate_down(coll))
        print(f"**** iterate_down():    {d_down} ms", file=out)
        print(f"                        {num_points} points", file=out)
        d_clone, _ = _timed(lambda: clone_all(coll))
        print(f"**** clone_all():       {d_clone} ms", file=out)
        d_clean, _ = _timed(lambda: clean_coll(coll))
        print(f"**** clean_coll():      {d_clean} ms", file=out)
        step_times = {
            "init_coll()": d_init,
            "clean_coll()": d_clean,
            "iterate()": d_iter,
            "iterate_down()": d_down,
            "shuffle_and_mod()": d_shuffle,
            "sort_coll()": d_sort,
            "copy_coll()": d_copy,
            "clone_all()": d_clone,
        }
        step_times["ALL"] = sum(step_times.values())
        for name, value in step_times.items():
            totals[name] += value
    print("*" * 47, file=out)
    averages = {name: totals[name] / loops for _, name in _STEPS}
    for key, name in _STEPS:
        label = f"{key}: {name}:"
        print(f"  {label:<22}{averages[name]}ms", file=out)
    return averages


def main(argv: Sequence[str] | None = None) -> int:
    """Run the benchmark; the optional argument is the number of objects."""
    args = list(sys.argv[1:] if argv is None else argv)
    num = 10000
    if args:
        try:
            num = int(args[0])
        except ValueError:
            print(f"invalid number of objects: {args[0]!r}", file=sys.stderr)
            return 1
    run_benchmark(num, 10)
    return 0