"""
Represents a single anchor of the Bézier path.
"""
from typing import List, Optional

from .geometry import Point


class Anchor:
    """
    A point on the path plus up to two tangent handles.

    The incoming handle shapes the segment arriving from the previous anchor,
    the outgoing handle shapes the segment leaving toward the next one.
    Handle coordinates only mean something while the matching flag is set.
    """

    def __init__(self, position: Point,
                 incoming_handle: Optional[Point] = None,
                 outgoing_handle: Optional[Point] = None):
        """
        Initializes a new Anchor.

        Args:
            position: Where the curve passes through.
            incoming_handle: Absolute position of the incoming handle, if any.
            outgoing_handle: Absolute position of the outgoing handle, if any.
        """
        self.position = position
        self.has_incoming_handle = incoming_handle is not None
        self.incoming_handle = incoming_handle if incoming_handle is not None else position
        self.has_outgoing_handle = outgoing_handle is not None
        self.outgoing_handle = outgoing_handle if outgoing_handle is not None else position

    def handles(self) -> List[Point]:
        """Positions of the handles that are present, incoming first."""
        present = []
        if self.has_incoming_handle:
            present.append(self.incoming_handle)
        if self.has_outgoing_handle:
            present.append(self.outgoing_handle)
        return present

    def translate(self, delta: Point):
        """Moves the anchor and its present handles rigidly by ``delta``."""
        self.position = self.position + delta
        if self.has_incoming_handle:
            self.incoming_handle = self.incoming_handle + delta
        if self.has_outgoing_handle:
            self.outgoing_handle = self.outgoing_handle + delta

    def clone(self) -> 'Anchor':
        """Creates a copy of this anchor that can be edited independently."""
        new_anchor = Anchor(self.position)
        new_anchor.has_incoming_handle = self.has_incoming_handle
        new_anchor.incoming_handle = self.incoming_handle
        new_anchor.has_outgoing_handle = self.has_outgoing_handle
        new_anchor.outgoing_handle = self.outgoing_handle
        return new_anchor

    def __repr__(self):
        return (f"Anchor(position={self.position!r}, "
                f"incoming={self.incoming_handle if self.has_incoming_handle else None!r}, "
                f"outgoing={self.outgoing_handle if self.has_outgoing_handle else None!r})")
