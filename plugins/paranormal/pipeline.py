"""
Image -> Frames Pipeline

    from paranormal.pipeline import process
    frames = process(rgb)  # rgb: (H, W, 3) uint8

Every returned frame has the input's height and width. The first frame
is the unpropagated edge field; the last is the fixed point.
"""

from .colormaps import DEFAULT_ANGLE_CLASS
from .gradient import edge_field
from .grid import Grid
from .propagation import EdgeFlow


def build_engine(raster, angle_class=DEFAULT_ANGLE_CLASS):
    """raster -> edge field -> EdgeFlow engine, ready to run or step."""
    return EdgeFlow(edge_field(Grid.from_raster(raster)), angle_class)


def process(raster, angle_class=DEFAULT_ANGLE_CLASS):
    """Turn an RGB raster into the ordered list of propagation frames."""
    return build_engine(raster, angle_class).run()
