"""Tests for bezier_pen.mirroring and Anchor handle bookkeeping."""
import pytest

from bezier_pen.anchor import Anchor
from bezier_pen.geometry import Point
from bezier_pen.mirroring import mirror_missing_handle, set_incoming_handle, set_outgoing_handle


def test_outgoing_only_gets_mirrored_incoming():
    anchor = Anchor(Point(5, 5), outgoing_handle=Point(5, 55))
    mirror_missing_handle(anchor)
    assert anchor.has_incoming_handle
    assert anchor.incoming_handle == Point(5, -45)
    assert anchor.outgoing_handle == Point(5, 55)


def test_incoming_only_gets_mirrored_outgoing():
    anchor = Anchor(Point(0, 0), incoming_handle=Point(-10, 20))
    mirror_missing_handle(anchor)
    assert anchor.has_outgoing_handle
    assert anchor.outgoing_handle == Point(10, -20)


def test_both_handles_is_noop():
    anchor = Anchor(Point(0, 0), incoming_handle=Point(1, 1), outgoing_handle=Point(7, 3))
    mirror_missing_handle(anchor)
    assert anchor.incoming_handle == Point(1, 1)
    assert anchor.outgoing_handle == Point(7, 3)


def test_no_handles_is_noop():
    anchor = Anchor(Point(2, 2))
    mirror_missing_handle(anchor)
    assert not anchor.has_incoming_handle
    assert not anchor.has_outgoing_handle


def test_set_outgoing_mirrors_existing_incoming():
    anchor = Anchor(Point(10, 10), incoming_handle=Point(10, 0), outgoing_handle=Point(10, 20))
    set_outgoing_handle(anchor, Point(30, 15))
    assert anchor.outgoing_handle == Point(30, 15)
    assert anchor.incoming_handle == Point(-10, 5)
    assert anchor.incoming_handle == 2 * anchor.position - Point(30, 15)


def test_set_outgoing_leaves_missing_incoming_absent():
    anchor = Anchor(Point(10, 10), outgoing_handle=Point(10, 20))
    set_outgoing_handle(anchor, Point(30, 15))
    assert anchor.outgoing_handle == Point(30, 15)
    assert not anchor.has_incoming_handle


def test_set_incoming_always_mirrors_and_enables_outgoing():
    anchor = Anchor(Point(10, 10), incoming_handle=Point(10, 0))
    assert not anchor.has_outgoing_handle
    set_incoming_handle(anchor, Point(0, 10))
    assert anchor.incoming_handle == Point(0, 10)
    assert anchor.has_outgoing_handle
    assert anchor.outgoing_handle == Point(20, 10)


def test_translate_moves_only_present_handles():
    anchor = Anchor(Point(0, 0), outgoing_handle=Point(0, 50))
    anchor.translate(Point(3, -4))
    assert anchor.position == Point(3, -4)
    assert anchor.outgoing_handle == Point(3, 46)
    assert anchor.handles() == [Point(3, 46)]


@pytest.mark.parametrize("incoming, outgoing, count", [
    (None, None, 0),
    (Point(1, 1), None, 1),
    (None, Point(1, 1), 1),
    (Point(1, 1), Point(2, 2), 2),
])
def test_handles_lists_present_handles(incoming, outgoing, count):
    anchor = Anchor(Point(0, 0), incoming_handle=incoming, outgoing_handle=outgoing)
    assert len(anchor.handles()) == count


def test_clone_is_independent_of_original():
    original = Anchor(Point(0, 0), outgoing_handle=Point(0, 50))
    copy = original.clone()
    assert copy is not original
    assert (copy.position, copy.outgoing_handle) == (Point(0, 0), Point(0, 50))
    assert copy.has_outgoing_handle and not copy.has_incoming_handle

    copy.translate(Point(10, 10))
    mirror_missing_handle(copy)
    assert original.position == Point(0, 0)
    assert original.outgoing_handle == Point(0, 50)
    assert not original.has_incoming_handle
