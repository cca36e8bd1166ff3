"""
Angle Class Presets

Each preset picks how gradient directions fold onto hues. The
"angle_class" value is the angular period (degrees) after which a
direction repeats the same color.
"""

PRESETS = {
    "direction": {
        "name": "Full Direction",
        "description": "Every edge direction gets its own hue",
        "angle_class": 360.0,
    },
    "barcode_1d": {
        "name": "1D Barcode",
        "description": "Opposite directions share a hue",
        "angle_class": 180.0,
    },
    "barcode_2d": {
        "name": "2D Barcode",
        "description": "Quarter-turn symmetric directions share a hue",
        "angle_class": 90.0,
    },
}

PRESET_ORDER = ["direction", "barcode_1d", "barcode_2d"]

DEFAULT_PRESET = "barcode_1d"

FRAME_DELAY_MS = 100  # 1/10 s per frame


def get_preset(name):
    """Get a preset by name. Returns None if not found."""
    return PRESETS.get(name)


def list_presets():
    """Return list of (key, name, description) for all presets."""
    return [(k, PRESETS[k]["name"], PRESETS[k]["description"])
            for k in PRESET_ORDER]


def angle_class_for(name):
    """Angle class of a named preset; raises ValueError when unknown."""
    preset = get_preset(name)
    if preset is None:
        raise ValueError(f"Unknown preset: {name!r}. "
                         f"Available: {', '.join(PRESET_ORDER)}")
    return preset["angle_class"]
