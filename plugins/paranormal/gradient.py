"""
Grayscale, Sobel Gradient and Angle/Magnitude Stages

Each stage maps one grid to a brand-new grid:

    color (r, g, b) -> intensity r+g+b -> (gx, gy) -> (angle, magnitude)

Border cells read their neighbors through the grid's clamp, so edges get
no special treatment.
"""

import math

COLOR_MAXABS = 255
GRAYSCALE_MAXABS = COLOR_MAXABS * 3
# Loose bound (not the true Sobel maximum); magnitudes can exceed 1.0.
SOBEL_MAXABS_MAG = GRAYSCALE_MAXABS * 3


def grayscale(color):
    """Sum the three channels of every cell (range [0, 765])."""
    def _intensity(v):
        r, g, b = v[0, 0]
        return r + g + b
    return color.map(_intensity)


def _sobel_cell(v):
    gx = (-(v[-1, -1] + 2 * v[-1, 0] + v[-1, 1])
          + (v[1, -1] + 2 * v[1, 0] + v[1, 1]))
    gy = (-(v[-1, -1] + 2 * v[0, -1] + v[1, -1])
          + (v[-1, 1] + 2 * v[0, 1] + v[1, 1]))
    return (gx, gy)


def sobel(intensity):
    """3x3 Sobel operator over an intensity grid -> (gx, gy) grid."""
    return intensity.map(_sobel_cell)


def _angle_magnitude_cell(v):
    gx, gy = v[0, 0]
    return (
        math.atan2(gy, gx),
        math.sqrt(gx * gx + gy * gy) / SOBEL_MAXABS_MAG,
    )


def angle_magnitude(gradient):
    """(gx, gy) grid -> (angle in (-pi, pi], normalized magnitude) grid."""
    return gradient.map(_angle_magnitude_cell)


def edge_field(color):
    """Run all three stages on a color grid."""
    return angle_magnitude(sobel(grayscale(color)))
