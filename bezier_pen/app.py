"""
Command-line entry point: parses the window size and starts the Qt application.
"""
import argparse
import logging
import sys
from typing import List, Optional

from . import __version__, config
from .logging_config import setup_logging

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bezier-pen",
        description="Click to place anchors, drag anchors and handles to shape the curve.",
    )
    parser.add_argument("width", nargs="?", type=int, default=config.DEFAULT_WINDOW_WIDTH,
                        help="window width in pixels")
    parser.add_argument("height", nargs="?", type=int, default=config.DEFAULT_WINDOW_HEIGHT,
                        help="window height in pixels")
    parser.add_argument("--samples", type=int, default=config.CURVE_SEGMENTS,
                        help="line segments per curve segment")
    parser.add_argument("--log-level", default="INFO",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                        help="logging verbosity")
    parser.add_argument("--log-file", default=None, help="also write logs to this file")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.width <= 0 or args.height <= 0:
        parser.error("width and height must be positive")
    if args.samples < config.MIN_CURVE_SEGMENTS:
        parser.error(f"--samples must be at least {config.MIN_CURVE_SEGMENTS}")
    return args


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    setup_logging(args.log_level, args.log_file)

    # Qt is only needed once we actually open a window
    from PySide6.QtWidgets import QApplication
    from .ui.main_window import MainWindow

    app = QApplication(sys.argv[:1])
    editor = MainWindow(args.width, args.height, args.samples)
    editor.show()
    logger.info("Opened %dx%d editor window", args.width, args.height)
    return app.exec()
