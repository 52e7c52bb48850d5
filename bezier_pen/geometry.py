"""
2D point arithmetic shared by the curve model, the evaluator and the
interaction controller.
"""
from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Point:
    """
    An immutable 2D point in canvas space (origin bottom-left, y up).
    Doubles as a displacement vector for handle offsets and drag deltas.
    """
    x: float
    y: float

    def __add__(self, other: Point) -> Point:
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Point) -> Point:
        return Point(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> Point:
        return Point(self.x * scalar, self.y * scalar)

    def __rmul__(self, scalar: float) -> Point:
        return self * scalar

    def __truediv__(self, scalar: float) -> Point:
        return Point(self.x / scalar, self.y / scalar)

    def length(self) -> float:
        """Distance from the origin."""
        return math.hypot(self.x, self.y)


def distance(a: Point, b: Point) -> float:
    """Euclidean distance between two points."""
    return (b - a).length()


def reflect(point: Point, center: Point) -> Point:
    """
    Point reflection of ``point`` through ``center``.

    A handle reflected through its anchor stays on the same line and at the
    same distance, on the opposite side.
    """
    return center + (center - point)


def within_box(a: Point, b: Point, half_size: float) -> bool:
    """True if ``b`` lies in the axis-aligned square of half-width ``half_size`` around ``a``."""
    return abs(a.x - b.x) <= half_size and abs(a.y - b.y) <= half_size
