"""
Colour Map Presets

Each preset defines a small set of key colours and an IDW exponent known
to produce a useful colour texture. Entries are (position, colour) with
position in [0,1]^2 and colour as (r, g, b) or (r, g, b, weight) bytes.
"""

import colorsys

import numpy as np

from .color_map import ColorMap, DEFAULT_IDW_EXPONENT

PRESETS = {
    "corners": {
        "name": "RGB Corners",
        "description": "Primary colours in three corners, white in the fourth",
        "idw_exponent": 2.0,
        "entries": [
            ((0.0, 0.0), (255, 0, 0)),
            ((1.0, 0.0), (0, 255, 0)),
            ((0.0, 1.0), (0, 0, 255)),
            ((1.0, 1.0), (255, 255, 255)),
        ],
    },
    "sunset": {
        "name": "Sunset",
        "description": "Warm orange to violet diagonal with a soft gold centre",
        "idw_exponent": 2.0,
        "entries": [
            ((0.0, 0.0), (40, 10, 70)),
            ((0.5, 0.5), (255, 190, 60), 160),
            ((1.0, 1.0), (255, 90, 30)),
            ((0.0, 1.0), (190, 40, 90)),
            ((1.0, 0.0), (90, 30, 120)),
        ],
    },
    "ocean": {
        "name": "Ocean",
        "description": "Deep blue to cyan to foam white",
        "idw_exponent": 1.5,
        "entries": [
            ((0.0, 0.0), (0, 2, 15)),
            ((0.3, 0.7), (5, 20, 80)),
            ((0.6, 0.4), (10, 80, 160)),
            ((0.9, 0.9), (40, 180, 220)),
            ((1.0, 0.0), (200, 250, 255)),
        ],
    },
    "stained_glass": {
        "name": "Stained Glass",
        "description": "High exponent, nearly a voronoi diagram",
        "idw_exponent": 24.0,
        "entries": [
            ((0.15, 0.20), (220, 40, 60)),
            ((0.70, 0.15), (250, 200, 40)),
            ((0.45, 0.50), (40, 160, 90)),
            ((0.85, 0.75), (60, 90, 220)),
            ((0.20, 0.85), (150, 60, 200)),
        ],
    },
    "neon": {
        "name": "Neon",
        "description": "Dark field with two bright, low-weight glows",
        "idw_exponent": 3.0,
        "entries": [
            ((0.5, 0.5), (5, 2, 8)),
            ((0.2, 0.3), (30, 220, 140), 96),
            ((0.8, 0.7), (255, 50, 90), 96),
        ],
    },
}

PRESET_ORDER = ["corners", "sunset", "ocean", "stained_glass", "neon"]


def get_preset(name):
    """Get a preset definition by name. Returns None if not found."""
    return PRESETS.get(name)


def build_preset(name):
    """Build a fresh ColorMap from a preset.

    Raises:
        KeyError: if no preset has that name
    """
    preset = PRESETS[name]
    cmap = ColorMap(idw_exponent=preset["idw_exponent"])
    for item in preset["entries"]:
        position, rgb = item[0], item[1]
        weight = item[2] if len(item) > 2 else 255
        cmap.add(position, tuple(rgb) + (weight,))
    return cmap


def list_presets():
    """Return list of (key, name, description) for presets."""
    return [(k, PRESETS[k]["name"], PRESETS[k]["description"])
            for k in PRESET_ORDER if k in PRESETS]


def random_color_map(count, rng=None, idw_exponent=DEFAULT_IDW_EXPONENT):
    """Build a colour map with random positions and random HSV colours.

    Args:
        count: number of entries
        rng: numpy Generator (or seed) for reproducible maps
        idw_exponent: falloff exponent of the result

    Returns:
        ColorMap with count opaque entries
    """
    rng = np.random.default_rng(rng)
    cmap = ColorMap(idw_exponent=idw_exponent)
    for _ in range(count):
        pos = rng.uniform(0.0, 1.0, size=2)
        r, g, b = colorsys.hsv_to_rgb(*rng.uniform(0.0, 1.0, size=3))
        cmap.add((float(pos[0]), float(pos[1])),
                 (int(round(r * 255)), int(round(g * 255)), int(round(b * 255))))
    return cmap
