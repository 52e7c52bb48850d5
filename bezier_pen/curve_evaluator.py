"""
Turns a pair of anchors into a sampled cubic Bézier polyline.
"""
from typing import Iterator, Tuple

from .anchor import Anchor
from .config import CURVE_SEGMENTS
from .geometry import Point


def cubic_bezier(p0: Point, p1: Point, p2: Point, p3: Point, t: float) -> Point:
    u = 1 - t
    return u**3 * p0 + 3 * u**2 * t * p1 + 3 * u * t**2 * p2 + t**3 * p3


def resolve_control_points(start: Anchor, end: Anchor) -> Tuple[Point, Point, Point, Point]:
    """
    Returns (p0, p1, p2, p3) for the segment from ``start`` to ``end``.

    Missing handles default to the thirds of the straight chord, so a segment
    between two handle-less anchors is a straight line.
    """
    p0, p3 = start.position, end.position
    chord_third = (p3 - p0) / 3
    p1 = start.outgoing_handle if start.has_outgoing_handle else p0 + chord_third
    p2 = end.incoming_handle if end.has_incoming_handle else p3 - chord_third
    return p0, p1, p2, p3


class BezierSegment:
    """
    A lazily sampled cubic Bézier curve.

    Iterating yields ``samples + 1`` points for t evenly spaced over [0, 1],
    endpoints included. Every iteration starts over from t = 0.
    """

    def __init__(self, p0: Point, p1: Point, p2: Point, p3: Point, samples: int = CURVE_SEGMENTS):
        if samples < 1:
            raise ValueError(f"samples must be at least 1, got {samples}")
        self.control_points = (p0, p1, p2, p3)
        self.samples = samples

    @classmethod
    def between(cls, start: Anchor, end: Anchor, samples: int = CURVE_SEGMENTS) -> 'BezierSegment':
        """Builds the segment joining two consecutive anchors."""
        return cls(*resolve_control_points(start, end), samples=samples)

    def point_at(self, t: float) -> Point:
        return cubic_bezier(*self.control_points, t)

    def __iter__(self) -> Iterator[Point]:
        for step in range(self.samples + 1):
            yield self.point_at(step / self.samples)

    def __len__(self):
        return self.samples + 1
