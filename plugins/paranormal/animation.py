"""
Image decode / animation encode

The pipeline itself works on in-memory rasters only. These helpers sit
on either side of it: load_raster() decodes any Pillow-readable image to
an (H, W, 3) uint8 array, and save_animation() writes the frame list as
an animated PNG or GIF.
"""

import os

import numpy as np
from PIL import Image

from .presets import FRAME_DELAY_MS

_FORMATS = {
    ".png": "PNG",
    ".apng": "PNG",
    ".gif": "GIF",
}


def load_raster(path):
    """Decode an image file to an RGB (H, W, 3) uint8 array (alpha dropped)."""
    with Image.open(path) as img:
        return np.array(img.convert("RGB"))


def save_animation(frames, path, delay_ms=FRAME_DELAY_MS, loop=0):
    """
    Write frames as an animation.

    Args:
        frames: Sequence of (H, W, 3) uint8 arrays, all the same size
        path: Output path; .png/.apng gives APNG, .gif gives GIF
        delay_ms: Display time of each frame in milliseconds
        loop: Number of plays, 0 for forever

    Returns:
        The path written
    """
    if not frames:
        raise ValueError("Cannot write an animation with no frames")
    ext = os.path.splitext(path)[1].lower()
    fmt = _FORMATS.get(ext)
    if fmt is None:
        raise ValueError(f"Unsupported animation format: {ext!r}. "
                         f"Use one of {', '.join(sorted(_FORMATS))}")

    images = [Image.fromarray(np.array(f, dtype=np.uint8))
              for f in frames]
    images[0].save(
        path,
        format=fmt,
        save_all=True,
        append_images=images[1:],
        duration=delay_ms,
        loop=loop,
    )
    return path
