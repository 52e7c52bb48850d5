"""Tests for bezier_pen.curve_model and bezier_pen.frame."""
import pytest

from bezier_pen.anchor import Anchor
from bezier_pen.curve_model import CurveModel
from bezier_pen.frame import build_frame
from bezier_pen.geometry import Point


@pytest.fixture
def model():
    m = CurveModel()
    m.append_at_end(Anchor(Point(0, 0), outgoing_handle=Point(0, 50)))
    m.append_at_end(Anchor(Point(100, 0), incoming_handle=Point(100, -50), outgoing_handle=Point(100, 50)))
    m.append_at_start(Anchor(Point(-100, 0)))
    return m


def test_append_order(model):
    assert model.anchor_positions() == [Point(-100, 0), Point(0, 0), Point(100, 0)]
    assert model.front.position == Point(-100, 0)
    assert model.back.position == Point(100, 0)
    assert len(model) == 3


def test_segments_are_adjacent_pairs(model):
    segments = model.segments()
    assert len(segments) == 2
    assert segments[0] == (model[0], model[1])
    assert segments[1] == (model[1], model[2])


@pytest.mark.parametrize("count", [0, 1])
def test_short_paths_have_no_segments(count):
    m = CurveModel()
    for i in range(count):
        m.append_at_end(Anchor(Point(i, i)))
    assert m.segments() == []
    assert build_frame(m).polylines == ()


def test_handle_views(model):
    assert model.handle_positions() == [Point(0, 50), Point(100, -50), Point(100, 50)]
    assert model.handle_guides() == [
        (Point(0, 0), Point(0, 50)),
        (Point(100, 0), Point(100, -50)),
        (Point(100, 0), Point(100, 50)),
    ]


def test_clear(model):
    model.clear()
    assert model.is_empty()
    assert model.segments() == []


def test_build_frame(model):
    frame = build_frame(model, samples=10)
    assert len(frame.polylines) == 2
    assert all(len(list(segment)) == 11 for segment in frame.polylines)
    assert frame.anchors == tuple(model.anchor_positions())
    assert frame.handles == tuple(model.handle_positions())
    assert len(frame.guides) == 3


def test_build_frame_empty_path():
    frame = build_frame(CurveModel())
    assert frame.polylines == frame.anchors == frame.handles == frame.guides == ()


def test_build_frame_rejects_zero_samples(model):
    with pytest.raises(ValueError):
        build_frame(model, samples=0)
