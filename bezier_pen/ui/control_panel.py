# Top control panel widget with the quality slider, clear button and counters.

from PySide6.QtWidgets import (
    QFrame, QHBoxLayout, QLabel, QSlider, QPushButton, QSizePolicy
)
from PySide6.QtCore import Qt

from .. import config


class ControlPanel(QFrame):
    """
    The top control panel with the widgets that drive the canvas
    without touching the curve itself.
    """

    def __init__(self, samples: int = config.CURVE_SEGMENTS, parent=None):
        super().__init__(parent)
        self.setStyleSheet("background-color: #333; color: white; padding: 5px;")
        self.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Fixed)

        layout = QHBoxLayout(self)

        self.samples_label = QLabel(f"Quality: {samples} segments")
        self.samples_slider = QSlider(Qt.Orientation.Horizontal)
        self.samples_slider.setRange(config.MIN_CURVE_SEGMENTS, config.MAX_CURVE_SEGMENTS)
        self.samples_slider.setValue(samples)
        self.samples_slider.setFixedWidth(150)

        self.clear_button = QPushButton("Clear")
        self.clear_button.setFixedWidth(120)

        self.anchor_count_label = QLabel("Anchors: 0")

        layout.addWidget(self.samples_label)
        layout.addWidget(self.samples_slider)
        layout.addSpacing(20)
        layout.addWidget(self.clear_button)
        layout.addSpacing(20)
        layout.addWidget(self.anchor_count_label)
        layout.addStretch()
