"""
Keeps an anchor's two tangent handles colinear through the anchor.
"""
import logging

from .anchor import Anchor
from .geometry import Point, reflect

logger = logging.getLogger(__name__)


def mirror_missing_handle(anchor: Anchor):
    """
    Gives a one-handled anchor its opposite handle.

    The new handle is the point reflection of the existing one through the
    anchor position, which makes the curve pass through the anchor smoothly.
    Anchors with both or neither handle are left untouched.
    """
    if anchor.has_incoming_handle and not anchor.has_outgoing_handle:
        anchor.outgoing_handle = reflect(anchor.incoming_handle, anchor.position)
        anchor.has_outgoing_handle = True
    elif anchor.has_outgoing_handle and not anchor.has_incoming_handle:
        anchor.incoming_handle = reflect(anchor.outgoing_handle, anchor.position)
        anchor.has_incoming_handle = True
    else:
        return
    logger.debug("Mirrored handles of %r", anchor)


def set_outgoing_handle(anchor: Anchor, handle: Point):
    """
    Moves the outgoing handle, dragging the incoming one along only if the
    anchor already has it.
    """
    anchor.outgoing_handle = handle
    if anchor.has_incoming_handle:
        anchor.incoming_handle = reflect(handle, anchor.position)


def set_incoming_handle(anchor: Anchor, handle: Point):
    """
    Moves the incoming handle and always mirrors it onto the outgoing side,
    enabling the outgoing handle if it was absent.
    """
    anchor.incoming_handle = handle
    anchor.outgoing_handle = reflect(handle, anchor.position)
    anchor.has_outgoing_handle = True
