"""
Edge Direction Colormap

Maps an (angle, magnitude) cell to an RGB color:
  - Hue:        gradient direction, folded by the angle class
  - Saturation: always full
  - Lightness:  magnitude / 2 (black where there is no edge)

The angle class sets which directions share a hue. With 360 every
direction is distinct, with 180 opposite directions collide (1D
barcodes), with 90 quarter turns collide (2D barcodes).
"""

import math

DEFAULT_ANGLE_CLASS = 180.0


def _hue_to_channel(p, q, t):
    if t < 0.0:
        t += 1.0
    elif t > 1.0:
        t -= 1.0
    if t < 1.0 / 6.0:
        return p + (q - p) * 6.0 * t
    if t < 0.5:
        return q
    if t < 2.0 / 3.0:
        return p + (q - p) * (2.0 / 3.0 - t) * 6.0
    return p


def _to_byte(value):
    # Round half away from zero, then saturate.
    return min(max(int(math.floor(value * 255.0 + 0.5)), 0), 255)


def hsl_to_rgb(h, s, l):
    """Convert HSL to an (r, g, b) byte tuple. h in degrees, s/l in [0,1]."""
    if s == 0.0:
        v = _to_byte(l)
        return (v, v, v)
    h = h / 360.0
    q = l * (1.0 + s) if l < 0.5 else l + s - l * s
    p = 2.0 * l - q
    return (
        _to_byte(_hue_to_channel(p, q, h + 1.0 / 3.0)),
        _to_byte(_hue_to_channel(p, q, h)),
        _to_byte(_hue_to_channel(p, q, h - 1.0 / 3.0)),
    )


def check_angle_class(angle_class):
    if not angle_class > 0:
        raise ValueError(f"angle_class must be positive, got {angle_class!r}")
    return float(angle_class)


def angle_hue(angle, angle_class=DEFAULT_ANGLE_CLASS):
    """Hue in degrees [0, 360) for a gradient angle in radians."""
    return (((2.0 + angle / math.pi) * (360.0 / angle_class)) % 2.0) * 180.0


def edge_color(angle, magnitude, angle_class=DEFAULT_ANGLE_CLASS):
    return hsl_to_rgb(angle_hue(angle, angle_class), 1.0, magnitude / 2.0)


def colorize(field, angle_class=DEFAULT_ANGLE_CLASS):
    """Map an (angle, magnitude) grid to a grid of RGB byte tuples."""
    angle_class = check_angle_class(angle_class)

    def _cell(v):
        angle, magnitude = v[0, 0]
        return edge_color(angle, magnitude, angle_class)

    return field.map(_cell)


def render_frame(field, angle_class=DEFAULT_ANGLE_CLASS):
    """Render an (angle, magnitude) grid to a read-only (H, W, 3) uint8 frame."""
    return colorize(field, angle_class).to_raster()
