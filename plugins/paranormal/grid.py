"""
Clamped Grid and View

A Grid is a rectangular, row-major buffer of cells. Every coordinate
lookup is clamped to the valid range (replicate-border semantics), so
neighborhood code never needs its own bounds checks.

A View is a read-only window anchored on one cell of a Grid. Transforms
passed to Grid.map() receive a View and read neighbors by relative
offset:

    gray = color.map(lambda v: sum(v[0, 0]))
"""

import numpy as np


class InvalidDimensions(ValueError):
    """Raised when a grid would have zero area or a mismatched buffer."""


class Grid:
    """Immutable rectangular buffer with clamped (x, y) access."""

    __slots__ = ("width", "height", "_data")

    def __init__(self, width, height, data):
        """
        Args:
            width: Number of columns (>= 1)
            height: Number of rows (>= 1)
            data: Row-major cells, len(data) == width * height
        """
        data = tuple(data)
        if width <= 0 or height <= 0:
            raise InvalidDimensions(
                f"Grid must be at least 1x1, got {width}x{height}"
            )
        if len(data) != width * height:
            raise InvalidDimensions(
                f"Buffer holds {len(data)} cells, expected "
                f"{width}x{height} = {width * height}"
            )
        self.width = width
        self.height = height
        self._data = data

    @classmethod
    def from_raster(cls, raster):
        """Build a grid of (r, g, b) int cells from an (H, W, 3) raster."""
        arr = np.asarray(raster)
        if arr.ndim != 3 or arr.shape[2] != 3:
            raise InvalidDimensions(
                f"Expected an (H, W, 3) RGB raster, got shape {arr.shape}"
            )
        height, width = arr.shape[:2]
        pixels = arr.reshape(-1, 3).tolist()
        return cls(width, height, [tuple(int(c) for c in px) for px in pixels])

    def to_raster(self):
        """Return a read-only (H, W, 3) uint8 array from a grid of RGB cells."""
        arr = np.empty((self.height, self.width, 3), dtype=np.uint8)
        for y in range(self.height):
            for x in range(self.width):
                arr[y, x] = self.get(x, y)
        arr.flags.writeable = False
        return arr

    @property
    def shape(self):
        return (self.width, self.height)

    def get(self, x, y):
        """Cell at (x, y), with both coordinates clamped into the grid."""
        x = min(max(x, 0), self.width - 1)
        y = min(max(y, 0), self.height - 1)
        return self._data[y * self.width + x]

    def __getitem__(self, xy):
        x, y = xy
        return self.get(x, y)

    def map(self, f):
        """New grid of the same shape with f(view) for every cell.

        f is called once per cell in row-major order with a View anchored
        on that cell. The source grid is never written; results go into a
        fresh buffer.
        """
        data = [
            f(View(self, x, y))
            for y in range(self.height)
            for x in range(self.width)
        ]
        return Grid(self.width, self.height, data)

    def __eq__(self, other):
        if not isinstance(other, Grid):
            return NotImplemented
        return self.shape == other.shape and self._data == other._data

    def __repr__(self):
        return f"Grid({self.width}x{self.height})"


def _offset(base, delta):
    # Negative offsets saturate at zero; the grid clamps the upper side.
    if delta < 0:
        return max(base + delta, 0)
    return base + delta


class View:
    """Read-only window over a grid, anchored at (x, y)."""

    __slots__ = ("_grid", "x", "y")

    def __init__(self, grid, x, y):
        self._grid = grid
        self.x = x
        self.y = y

    def get(self, dx, dy):
        """Neighbor at relative offset (dx, dy)."""
        return self._grid.get(_offset(self.x, dx), _offset(self.y, dy))

    def __getitem__(self, dxdy):
        dx, dy = dxdy
        return self.get(dx, dy)
