"""
Interactive cubic Bézier pen tool.
"""
__version__ = "1.0.0"
