"""
Main entry point for the Bézier pen tool.
"""
import sys

from bezier_pen.app import main


if __name__ == "__main__":
    sys.exit(main())
