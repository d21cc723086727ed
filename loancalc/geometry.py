"""Plane geometry used by the graph view.

Points live either in model space (months × balance, rate × payment) or in
device space (canvas pixels, y growing downward); ``AffineTransform`` maps
one to the other.
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, Iterator, Tuple

EPSILON = 1e-6


@dataclass(frozen=True, eq=False)
class Point:
    x: float
    y: float

    def __add__(self, other: "Point") -> "Point":
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Point") -> "Point":
        return Point(self.x - other.x, self.y - other.y)

    def __mul__(self, k: float) -> "Point":
        return Point(k * self.x, k * self.y)

    __rmul__ = __mul__

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Point):
            return NotImplemented
        return self.distance_to(other) < EPSILON

    __hash__ = None

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def dot(self, other: "Point") -> float:
        return self.x * other.x + self.y * other.y

    def norm(self) -> float:
        return math.hypot(self.x, self.y)

    def distance_to(self, other: "Point") -> float:
        return (self - other).norm()


@dataclass(frozen=True)
class Line:
    start: Point
    end: Point

    def length(self) -> float:
        return self.start.distance_to(self.end)


@dataclass(frozen=True)
class PolyLine:
    points: Tuple[Point, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "points", tuple(self.points))
        if not self.points:
            raise ValueError("PolyLine needs at least one point")

    @classmethod
    def from_pairs(cls, pairs: Iterable[Tuple[float, float]]) -> "PolyLine":
        return cls(tuple(Point(float(x), float(y)) for x, y in pairs))

    def __len__(self) -> int:
        return len(self.points)

    def __iter__(self) -> Iterator[Point]:
        return iter(self.points)

    def segments(self) -> list[Line]:
        """Consecutive point pairs; a single-point polyline has none."""
        return [Line(p, q) for p, q in zip(self.points, self.points[1:])]

    def max_x(self) -> float:
        return max(p.x for p in self.points)

    def max_y(self) -> float:
        return max(p.y for p in self.points)


@dataclass(frozen=True)
class AffineTransform:
    """``(x, y) -> (a*x + b, c*y + d)``."""

    a: float
    b: float
    c: float
    d: float

    @classmethod
    def for_viewport(cls, xmax: float, ymax: float, width: float, height: float) -> "AffineTransform":
        """Map ``[0, xmax] x [0, ymax]`` onto a ``width`` x ``height`` canvas.

        Model y grows upward while canvas y grows downward, so ``(0, ymax)``
        lands on the top-left corner and ``(xmax, 0)`` on the bottom-right.
        Non-positive bounds give the zero map.
        """
        if xmax <= 0 or ymax <= 0:
            return cls(0.0, 0.0, 0.0, 0.0)
        return cls(width / xmax, 0.0, -height / ymax, float(height))

    def apply(self, p: Point) -> Point:
        return Point(self.a * p.x + self.b, self.c * p.y + self.d)

    def apply_line(self, line: Line) -> Line:
        return Line(self.apply(line.start), self.apply(line.end))

    def apply_polyline(self, poly: PolyLine) -> PolyLine:
        return PolyLine(tuple(self.apply(p) for p in poly))
