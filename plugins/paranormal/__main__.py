"""
paranormal - Edge Propagation Animator

Usage:
    python -m paranormal IMAGE [preset] [--angle-class N] [--output FILE]
                               [--delay MS] [--view]

Examples:
    python -m paranormal photo.jpg
    python -m paranormal barcode.png barcode_1d --output barcode.gif
    python -m paranormal qr.png barcode_2d --view
    python -m paranormal photo.jpg --angle-class 45 --delay 50

Presets:
    direction   - 360: every edge direction has its own hue
    barcode_1d  - 180: opposite directions share a hue (default)
    barcode_2d  - 90:  quarter turns share a hue

Output is an animated PNG (.png/.apng) or GIF (.gif); default out.png.
Use --list to see all available presets.

Propagation runs in pure Python, one cell at a time, and the number of
frames grows with the image size. A 64x64 image takes a few seconds;
large photos can take many minutes, so downscale them first.
"""

import os
import sys
import time

from .animation import load_raster, save_animation
from .pipeline import build_engine
from .presets import (
    DEFAULT_PRESET, FRAME_DELAY_MS, PRESET_ORDER, angle_class_for,
    list_presets,
)


def render(image_path, angle_class, output, delay_ms):
    """Load, propagate to the fixed point, save. Returns the frames."""
    raster = load_raster(image_path)
    h, w = raster.shape[:2]
    print(f"  {os.path.basename(image_path)}: {w}x{h}, "
          f"angle class {angle_class:g}")

    start = time.time()
    engine = build_engine(raster, angle_class)
    print("  propagating", end="", flush=True)
    frames = []
    for frame in engine.frames():
        frames.append(frame)
        print(".", end="", flush=True)
    elapsed = time.time() - start
    print(f" {len(frames)} frames in {elapsed:.1f}s")

    save_animation(frames, output, delay_ms=delay_ms)
    print(f"  saved: {output}")
    return frames


def main(argv=None):
    image_path = None
    preset = DEFAULT_PRESET
    angle_class = None
    output = "out.png"
    delay_ms = FRAME_DELAY_MS
    view = False

    args = sys.argv[1:] if argv is None else list(argv)
    i = 0
    while i < len(args):
        arg = args[i]
        if arg == "--angle-class" and i + 1 < len(args):
            angle_class = float(args[i + 1])
            i += 2
        elif arg == "--output" and i + 1 < len(args):
            output = args[i + 1]
            i += 2
        elif arg == "--delay" and i + 1 < len(args):
            delay_ms = int(args[i + 1])
            i += 2
        elif arg == "--view":
            view = True
            i += 1
        elif arg == "--list":
            print("\nAvailable presets:")
            for key, name, desc in list_presets():
                print(f"    {key:16s} {name:20s} {desc}")
            print()
            return
        elif arg in ("--help", "-h"):
            print(__doc__)
            return
        elif arg in PRESET_ORDER:
            preset = arg
            i += 1
        elif image_path is None and not arg.startswith("-"):
            image_path = arg
            i += 1
        else:
            print(f"Unknown argument: {arg}")
            print(f"Use --help for usage")
            return

    if image_path is None:
        print("No input image given")
        print(f"Use --help for usage")
        return
    if angle_class is None:
        angle_class = angle_class_for(preset)

    viewer_cls = None
    if view:
        # Check before rendering so a missing pygame fails fast
        try:
            from .viewer import FrameViewer as viewer_cls
        except ImportError as e:
            print(f"Cannot open viewer: {e}")
            print("Install the viewer extra: pip install paranormal[viewer]")
            return

    print(f"Rendering edge propagation ({preset})")
    frames = render(image_path, angle_class, output, delay_ms)

    if viewer_cls is not None:
        viewer_cls(frames, delay_ms=delay_ms,
                   title=f"paranormal - {os.path.basename(image_path)}").run()


if __name__ == "__main__":
    main()
