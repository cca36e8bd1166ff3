"""
paranormal - animate how dominant edges spread across an image.
"""

from .grid import Grid, InvalidDimensions, View
from .pipeline import process

__all__ = ["Grid", "InvalidDimensions", "View", "process"]
