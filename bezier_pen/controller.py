"""
Interprets pointer and keyboard events against the curve model.
"""
import enum
import logging
from dataclasses import dataclass, field
from typing import FrozenSet, Optional

from .anchor import Anchor
from .config import DEFAULT_HANDLE_OFFSET, DEFAULT_WINDOW_HEIGHT, HANDLE_RADIUS, NODE_RADIUS
from .curve_model import CurveModel
from .geometry import Point, distance, within_box
from .mirroring import mirror_missing_handle, set_incoming_handle, set_outgoing_handle

logger = logging.getLogger(__name__)


class DragState(enum.Enum):
    DRAGGING_ANCHOR = "dragging_anchor"
    DRAGGING_OUTGOING_HANDLE = "dragging_outgoing_handle"
    DRAGGING_INCOMING_HANDLE = "dragging_incoming_handle"


@dataclass
class Selection:
    """
    Three independent drag slots, each an index into the model's anchors.
    Any combination may be active at once; none active means idle.
    """

    anchor: Optional[int] = None
    outgoing: Optional[int] = None
    incoming: Optional[int] = None

    def clear(self):
        self.anchor = None
        self.outgoing = None
        self.incoming = None

    def is_idle(self) -> bool:
        return self.anchor is None and self.outgoing is None and self.incoming is None

    def shift(self, offset: int):
        """Keeps live slots on the same anchors after anchors were inserted at the front."""
        if self.anchor is not None:
            self.anchor += offset
        if self.outgoing is not None:
            self.outgoing += offset
        if self.incoming is not None:
            self.incoming += offset

    def states(self) -> FrozenSet[DragState]:
        active = set()
        if self.anchor is not None:
            active.add(DragState.DRAGGING_ANCHOR)
        if self.outgoing is not None:
            active.add(DragState.DRAGGING_OUTGOING_HANDLE)
        if self.incoming is not None:
            active.add(DragState.DRAGGING_INCOMING_HANDLE)
        return frozenset(active)


@dataclass
class EditorSession:
    """All state of one editing session: the path, the drag slots and the canvas height."""

    model: CurveModel = field(default_factory=CurveModel)
    selection: Selection = field(default_factory=Selection)
    window_height: float = DEFAULT_WINDOW_HEIGHT


class PenController:
    """
    The pen tool. Press places or grabs, move drags, release lets go.

    Input coordinates have their origin at the top-left of the window;
    everything stored in the model is in canvas space (origin bottom-left).
    """

    def __init__(self, session: Optional[EditorSession] = None,
                 node_radius: float = NODE_RADIUS,
                 handle_radius: float = HANDLE_RADIUS):
        self.session = session if session is not None else EditorSession()
        self.node_radius = node_radius
        self.handle_radius = handle_radius

    @property
    def model(self) -> CurveModel:
        return self.session.model

    @property
    def selection(self) -> Selection:
        return self.session.selection

    def resize(self, window_height: float):
        self.session.window_height = window_height

    def to_canvas(self, screen_x: float, screen_y: float) -> Point:
        return Point(float(screen_x), self.session.window_height - screen_y)

    # --- Event handlers ---

    def on_press(self, screen_x: float, screen_y: float):
        mouse = self.to_canvas(screen_x, screen_y)
        logger.debug("Press at %r", mouse)

        self._select_anchor_at(mouse)
        self._select_handles_at(mouse)

        if not self._on_existing_point(mouse):
            self._add_anchor(mouse)

    def on_release(self):
        self.selection.clear()

    def on_move(self, screen_x: float, screen_y: float):
        if self.selection.is_idle():
            return
        mouse = self.to_canvas(screen_x, screen_y)

        if self.selection.anchor is not None:
            anchor = self.model[self.selection.anchor]
            anchor.translate(mouse - anchor.position)
        if self.selection.outgoing is not None:
            set_outgoing_handle(self.model[self.selection.outgoing], mouse)
        if self.selection.incoming is not None:
            set_incoming_handle(self.model[self.selection.incoming], mouse)

    def on_clear_command(self):
        self.model.clear()
        self.selection.clear()
        logger.info("Path cleared")

    # --- Hit-testing ---

    def _hits_anchor(self, anchor: Anchor, point: Point) -> bool:
        return distance(anchor.position, point) <= self.node_radius

    def _hits_handle(self, handle: Point, point: Point) -> bool:
        return within_box(handle, point, self.handle_radius)

    def _select_anchor_at(self, point: Point):
        for i, anchor in enumerate(self.model):
            if self._hits_anchor(anchor, point):
                self.selection.anchor = i
                break

    def _select_handles_at(self, point: Point):
        # No early exit: a later handle in path order overrides an earlier one.
        for i, anchor in enumerate(self.model):
            if anchor.has_outgoing_handle and self._hits_handle(anchor.outgoing_handle, point):
                self.selection.outgoing = i
            if anchor.has_incoming_handle and self._hits_handle(anchor.incoming_handle, point):
                self.selection.incoming = i

    def _on_existing_point(self, point: Point) -> bool:
        for anchor in self.model:
            if distance(anchor.position, point) < self.node_radius:
                return True
            if any(self._hits_handle(handle, point) for handle in anchor.handles()):
                return True
        return False

    # --- Editing ---

    def _add_anchor(self, point: Point):
        # Both handle slots start at the same spot; the flags decide which one is live.
        default_handle = point + Point(0.0, DEFAULT_HANDLE_OFFSET)
        new_anchor = Anchor(point, outgoing_handle=default_handle)
        new_anchor.incoming_handle = default_handle

        if self.model.is_empty():
            self.model.append_at_end(new_anchor)
            logger.info("Started path at %r", point)
            return

        dist_to_start = distance(self.model.front.position, point)
        dist_to_end = distance(self.model.back.position, point)

        if dist_to_start > dist_to_end:
            new_anchor.has_incoming_handle = False
            new_anchor.has_outgoing_handle = True
            self.model.append_at_end(new_anchor)
            intermediate = self.model[-2]
            logger.info("Extended path end to %r", point)
        else:
            new_anchor.has_incoming_handle = True
            new_anchor.has_outgoing_handle = False
            self.model.append_at_start(new_anchor)
            self.selection.shift(1)
            intermediate = self.model[1]
            logger.info("Extended path start to %r", point)

        if len(self.model) > 2:
            mirror_missing_handle(intermediate)
