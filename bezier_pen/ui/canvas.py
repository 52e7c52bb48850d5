"""
Canvas widget for drawing and interacting with the Bézier path.
"""
from typing import Optional

from PySide6.QtWidgets import QWidget, QSizePolicy
from PySide6.QtGui import QPainter, QPen, QColor, QMouseEvent, QPolygonF
from PySide6.QtCore import Qt, QPointF, QRectF, Signal

from .. import config
from ..controller import PenController
from ..frame import FrameGeometry, build_frame
from ..geometry import Point


class Canvas(QWidget):
    """
    The drawing area of the pen tool.
    Forwards mouse input to the controller and paints the frame geometry.
    """
    anchorCountChanged = Signal(int)

    def __init__(self, controller: PenController, parent: Optional[QWidget] = None):
        super().__init__(parent)
        self.controller = controller
        self.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Expanding)
        self.setFocusPolicy(Qt.FocusPolicy.StrongFocus)
        self.setMouseTracking(True)

        # --- Display Settings ---
        self.samples = config.CURVE_SEGMENTS

    def paintEvent(self, event):
        frame = build_frame(self.controller.model, self.samples)
        painter = QPainter(self)
        try:
            painter.setRenderHint(QPainter.RenderHint.Antialiasing)
            painter.fillRect(self.rect(), QColor(config.BACKGROUND_COLOR))
            self._draw_curve(painter, frame)
            self._draw_anchors(painter, frame)
            self._draw_handles(painter, frame)
            self._draw_guides(painter, frame)
        finally:
            painter.end()

    def resizeEvent(self, event):
        super().resizeEvent(event)
        self.controller.resize(self.height())

    def mousePressEvent(self, event: QMouseEvent):
        if event.button() != Qt.MouseButton.LeftButton:
            return
        pos = event.position()
        self.controller.on_press(pos.x(), pos.y())
        self.anchorCountChanged.emit(len(self.controller.model))
        self.update()

    def mouseMoveEvent(self, event: QMouseEvent):
        if self.controller.selection.is_idle():
            return
        pos = event.position()
        self.controller.on_move(pos.x(), pos.y())
        self.update()

    def mouseReleaseEvent(self, event: QMouseEvent):
        if event.button() == Qt.MouseButton.LeftButton:
            self.controller.on_release()

    def clear_path(self):
        self.controller.on_clear_command()
        self.anchorCountChanged.emit(0)
        self.update()

    def set_samples(self, value: int):
        self.samples = max(config.MIN_CURVE_SEGMENTS, int(value))
        self.update()

    def to_screen(self, point: Point) -> QPointF:
        """Canvas space (origin bottom-left) to widget coordinates (origin top-left)."""
        return QPointF(point.x, self.height() - point.y)

    def _draw_curve(self, painter, frame: FrameGeometry):
        painter.setPen(QPen(QColor(config.CURVE_COLOR), config.CURVE_LINE_WIDTH))
        for segment in frame.polylines:
            painter.drawPolyline(QPolygonF([self.to_screen(p) for p in segment]))

    def _draw_anchors(self, painter, frame: FrameGeometry):
        size = config.NODE_RADIUS
        painter.setPen(Qt.PenStyle.NoPen)
        painter.setBrush(QColor(config.ANCHOR_COLOR))
        for position in frame.anchors:
            center = self.to_screen(position)
            painter.drawRect(QRectF(center.x() - size / 2, center.y() - size / 2, size, size))

    def _draw_handles(self, painter, frame: FrameGeometry):
        radius = config.HANDLE_RADIUS / 2
        painter.setPen(Qt.PenStyle.NoPen)
        painter.setBrush(QColor(config.HANDLE_COLOR))
        for handle in frame.handles:
            painter.drawEllipse(self.to_screen(handle), radius, radius)

    def _draw_guides(self, painter, frame: FrameGeometry):
        painter.setPen(QPen(QColor(config.GUIDE_COLOR), config.GUIDE_LINE_WIDTH, Qt.PenStyle.DotLine))
        for anchor, handle in frame.guides:
            painter.drawLine(self.to_screen(anchor), self.to_screen(handle))
