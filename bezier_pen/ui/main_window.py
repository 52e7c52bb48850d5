"""
Main application window that brings all UI components together.
"""
from PySide6.QtWidgets import QWidget, QVBoxLayout, QMessageBox, QMenuBar
from PySide6.QtGui import QKeySequence
from PySide6.QtCore import Qt

from .. import __version__, config
from ..controller import EditorSession, PenController
from .canvas import Canvas
from .control_panel import ControlPanel


class MainWindow(QWidget):
    """
    The main window of the application, which wires the control panel
    and the canvas to a single editing session.
    """

    def __init__(self, width: int = config.DEFAULT_WINDOW_WIDTH,
                 height: int = config.DEFAULT_WINDOW_HEIGHT,
                 samples: int = config.CURVE_SEGMENTS):
        super().__init__()
        self.setWindowTitle(f"{config.WINDOW_TITLE} - v{__version__}")
        self.resize(width, height)

        self.session = EditorSession(window_height=height)
        self.controller = PenController(self.session)

        self._init_ui(samples)
        self._connect_signals()

    def _init_ui(self, samples):
        """Initializes the user interface and layout."""
        main_layout = QVBoxLayout(self)
        main_layout.setContentsMargins(0, 0, 0, 0)
        main_layout.setSpacing(0)

        self.canvas = Canvas(self.controller)
        self.canvas.set_samples(samples)
        self.control_panel = ControlPanel(samples)

        self.menu_bar = QMenuBar(self)
        self._create_menus()

        main_layout.addWidget(self.menu_bar)
        main_layout.addWidget(self.control_panel)
        main_layout.addWidget(self.canvas)

    def _create_menus(self):
        # File Menu
        file_menu = self.menu_bar.addMenu("&File")

        clear_action = file_menu.addAction("&Clear Path")
        clear_action.setShortcut(QKeySequence("Ctrl+E"))
        clear_action.triggered.connect(self.canvas.clear_path)

        file_menu.addSeparator()

        exit_action = file_menu.addAction("E&xit")
        exit_action.setShortcut(QKeySequence("Alt+F4"))
        exit_action.triggered.connect(self.close)

        # Help Menu
        help_menu = self.menu_bar.addMenu("&Help")

        keybinds_action = help_menu.addAction("View &Keybinds")
        keybinds_action.triggered.connect(self.show_keybinds_dialog)

    def show_keybinds_dialog(self):
        keybind_text = (
            "<b>Mouse:</b><br>"
            "&nbsp;&nbsp;Click empty space: Add anchor at the nearer end<br>"
            "&nbsp;&nbsp;Drag anchor: Move anchor with its handles<br>"
            "&nbsp;&nbsp;Drag handle: Move handle, opposite handle follows<br>"
            "<br><b>Keys:</b><br>"
            "&nbsp;&nbsp;E: Clear path<br>"
        )
        QMessageBox.information(self, "Keybinds", keybind_text)

    def _connect_signals(self):
        """Connects widget signals to their corresponding slots."""
        self.control_panel.samples_slider.valueChanged.connect(self.set_samples)
        self.control_panel.clear_button.clicked.connect(self.canvas.clear_path)
        self.canvas.anchorCountChanged.connect(
            lambda count: self.control_panel.anchor_count_label.setText(f"Anchors: {count}")
        )

    def keyPressEvent(self, event):
        """Handles global keyboard shortcuts."""
        if event.key() == Qt.Key.Key_E:
            self.canvas.clear_path()
        else:
            super().keyPressEvent(event)

    def set_samples(self, value):
        """Sets the number of line segments per curve segment."""
        self.canvas.set_samples(value)
        self.control_panel.samples_label.setText(f"Quality: {value} segments")
