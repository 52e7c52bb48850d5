"""
Holds the ordered anchors that make up the Bézier path.
"""
import logging
from typing import Iterator, List, Tuple

from .anchor import Anchor
from .geometry import Point

logger = logging.getLogger(__name__)


class CurveModel:
    """
    The ordered sequence of anchors. The front is the start of the curve,
    the back is its end. Anchors only ever join at either end and are only
    removed all at once.
    """

    def __init__(self):
        self.anchors: List[Anchor] = []

    def __len__(self):
        return len(self.anchors)

    def __iter__(self) -> Iterator[Anchor]:
        return iter(self.anchors)

    def __getitem__(self, index: int) -> Anchor:
        return self.anchors[index]

    def is_empty(self) -> bool:
        return not self.anchors

    @property
    def front(self) -> Anchor:
        return self.anchors[0]

    @property
    def back(self) -> Anchor:
        return self.anchors[-1]

    def append_at_end(self, anchor: Anchor):
        """Adds an anchor after the current end of the path."""
        self.anchors.append(anchor)
        logger.debug("Appended %r at end (%d anchors)", anchor, len(self.anchors))

    def append_at_start(self, anchor: Anchor):
        """Adds an anchor before the current start of the path."""
        self.anchors.insert(0, anchor)
        logger.debug("Prepended %r at start (%d anchors)", anchor, len(self.anchors))

    def clear(self):
        """Removes all anchors."""
        self.anchors.clear()
        logger.debug("Cleared all anchors")

    def segments(self) -> List[Tuple[Anchor, Anchor]]:
        """Consecutive anchor pairs; empty while the path has fewer than two anchors."""
        return list(zip(self.anchors, self.anchors[1:]))

    def anchor_positions(self) -> List[Point]:
        return [anchor.position for anchor in self.anchors]

    def handle_positions(self) -> List[Point]:
        return [handle for anchor in self.anchors for handle in anchor.handles()]

    def handle_guides(self) -> List[Tuple[Point, Point]]:
        """(anchor position, handle position) pairs for every present handle."""
        return [(anchor.position, handle) for anchor in self.anchors for handle in anchor.handles()]
