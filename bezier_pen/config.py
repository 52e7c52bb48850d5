"""
Configuration
=============
Central registry for the editor's tunable constants.

Exports:
    NODE_RADIUS (float): Anchor hit-test radius and marker size, in pixels.
    HANDLE_RADIUS (float): Half-width of the handle hit box and marker size, in pixels.
    DEFAULT_HANDLE_OFFSET (float): Vertical offset of a new anchor's outgoing handle.
    CURVE_SEGMENTS (int): Line segments per Bézier segment when tessellating.
"""

# Hit-testing
NODE_RADIUS: float = 10.0
HANDLE_RADIUS: float = 10.0

# New anchors get an outgoing handle this far above them
DEFAULT_HANDLE_OFFSET: float = 50.0

# Tessellation
CURVE_SEGMENTS: int = 200
MIN_CURVE_SEGMENTS: int = 1
MAX_CURVE_SEGMENTS: int = 400

# Window
WINDOW_TITLE: str = "A Spline Tool"
DEFAULT_WINDOW_WIDTH: int = 800
DEFAULT_WINDOW_HEIGHT: int = 600

# Colors (Qt color strings)
BACKGROUND_COLOR: str = "#ffffff"
CURVE_COLOR: str = "#000000"
ANCHOR_COLOR: str = "#0000ff"
HANDLE_COLOR: str = "#000000"
GUIDE_COLOR: str = "#00ffff"
CURVE_LINE_WIDTH: float = 2.0
GUIDE_LINE_WIDTH: float = 1.0

# Logging
LOGGER_NAME: str = "bezier_pen"
LOG_FORMAT: str = "%(asctime)s %(levelname)-7s [%(name)s] %(message)s"
LOG_DATE_FORMAT: str = "%H:%M:%S"
