"""Geometric objects that can be moved, drawn and cloned."""

from __future__ import annotations

import copy
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Iterable, TextIO

MAX_POLYGON_POINTS = 100


@dataclass(frozen=True)
class Coord:
    """An integer point or offset in the plane."""

    x: int = 0
    y: int = 0

    def __add__(self, other: Coord) -> Coord:
        if not isinstance(other, Coord):
            return NotImplemented
        return Coord(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Coord) -> Coord:
        if not isinstance(other, Coord):
            return NotImplemented
        return Coord(self.x - other.x, self.y - other.y)

    def __neg__(self) -> Coord:
        return Coord(-self.x, -self.y)

    def __str__(self) -> str:
        return f"({self.x},{self.y})"


class GeoObj(ABC):
    """Base class of all named geometric objects."""

    def __init__(self, name: str = "") -> None:
        self.name = name

    def _label(self, kind: str) -> str:
        return f"{kind} '{self.name}'" if self.name else kind

    @abstractmethod
    def move(self, offset: Coord) -> None:
        """Shift the object by ``offset``."""

    @abstractmethod
    def describe(self) -> str:
        """Return the one-line text that ``draw`` prints."""

    def draw(self, file: TextIO | None = None) -> None:
        """Print the description of the object."""
        print(self.describe(), file=file)

    def clone(self) -> GeoObj:
        """Return an independent copy of the object."""
        return copy.deepcopy(self)

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.describe()}>"


class Line(GeoObj):
    """A line segment between two points."""

    def __init__(self, name: str, start: Coord, end: Coord) -> None:
        super().__init__(name)
        self.start = start
        self.end = end

    def move(self, offset: Coord) -> None:
        self.start += offset
        self.end += offset

    def describe(self) -> str:
        return f"{self._label('line')} from {self.start} to {self.end}"


class Circle(GeoObj):
    """A circle given by its center and radius."""

    def __init__(self, name: str, center: Coord, radius: int) -> None:
        super().__init__(name)
        self.center = center
        self.radius = radius

    def move(self, offset: Coord) -> None:
        self.center += offset

    def describe(self) -> str:
        return f"{self._label('circle')} at {self.center} with radius {self.radius}"


class Polygon(GeoObj):
    """A polygon over at most a hundred points."""

    def __init__(self, name: str, points: Iterable[Coord]) -> None:
        super().__init__(name)
        self.points = list(points)
        if len(self.points) > MAX_POLYGON_POINTS:
            raise ValueError(
                f"a polygon holds at most {MAX_POLYGON_POINTS} points, "
                f"got {len(self.points)}"
            )

    def move(self, offset: Coord) -> None:
        self.points = [point + offset for point in self.points]

    def describe(self) -> str:
        over = "".join(f" {point}" for point in self.points)
        return f"{self._label('polygon')} over{over}"

    def num_points(self) -> int:
        return len(self.points)


class Rectangle(GeoObj):
    """An axis-aligned rectangle given by two corners."""

    def __init__(self, name: str, start: Coord, end: Coord) -> None:
        super().__init__(name)
        self.start = start
        self.end = end

    def move(self, offset: Coord) -> None:
        self.start += offset
        self.end += offset

    def describe(self) -> str:
        return f"{self._label('rectangle')} from {self.start} to {self.end}"


def create_figure() -> list[GeoObj]:
    """Return a small figure of one line, one circle and one rectangle."""
    return [
        Line("", Coord(1, 2), Coord(3, 4)),
        Circle("", Coord(5, 5), 2),
        Rectangle("", Coord(3, 3), Coord(6, 4)),
    ]