"""
Drawable geometry for one frame, read from the curve model.
"""
from dataclasses import dataclass
from typing import Tuple

from .config import CURVE_SEGMENTS
from .curve_evaluator import BezierSegment
from .curve_model import CurveModel
from .geometry import Point


@dataclass(frozen=True)
class FrameGeometry:
    """Everything the canvas needs to draw, in canvas space."""

    polylines: Tuple[BezierSegment, ...]
    anchors: Tuple[Point, ...]
    handles: Tuple[Point, ...]
    guides: Tuple[Tuple[Point, Point], ...]


def build_frame(model: CurveModel, samples: int = CURVE_SEGMENTS) -> FrameGeometry:
    if samples < 1:
        raise ValueError(f"samples must be at least 1, got {samples}")
    return FrameGeometry(
        polylines=tuple(BezierSegment.between(start, end, samples) for start, end in model.segments()),
        anchors=tuple(model.anchor_positions()),
        handles=tuple(model.handle_positions()),
        guides=tuple(model.handle_guides()),
    )
