"""
CPU Texture Materialization

Evaluates a ColorMap over a pixel grid, producing an (H, W, 4) uint8
image. Pixel (x, y) samples position (x / (W - 1), y / (H - 1)), so
the corners of the image are exactly the corners of the map.

Also provides the reverse lookup used by the colour conversion pass:
an image whose R and G channels are coordinates on the colour texture
is turned into real colours by sampling that texture.
"""

import numpy as np
from scipy.ndimage import map_coordinates

from .entry import CHANNEL_SCALE
from .errors import OutOfRangeError
from .idw import colors_at, entry_arrays

# Debug overlay radii, in map units
DEBUG_KEY_RADIUS = 0.01
DEBUG_RING_RADIUS = 0.015


def texture_positions(width, height):
    """(height, width, 2) grid of sample positions in [0,1]^2."""
    if width < 2 or height < 2:
        raise OutOfRangeError(
            f"Texture must be at least 2x2, got {width}x{height}.")
    xs = np.arange(width, dtype=np.float64) / (width - 1)
    ys = np.arange(height, dtype=np.float64) / (height - 1)
    grid_x, grid_y = np.meshgrid(xs, ys)
    return np.stack((grid_x, grid_y), axis=-1)


def colors_to_uint8(colors):
    """Normalized float colours to bytes, round(clamp01(c) * 255). NaN -> 0."""
    out = np.nan_to_num(np.asarray(colors, dtype=np.float64), nan=0.0)
    np.clip(out, 0.0, 1.0, out=out)
    return np.rint(out * CHANNEL_SCALE).astype(np.uint8)


def fill_texture(color_map, width, height, draw_debug_info=False):
    """Render a colour map to an (height, width, 4) uint8 RGBA array.

    Args:
        color_map: ColorMap to render
        width, height: texture size, at least 2x2
        draw_debug_info: paint each key's colour in a small disc around it
            and a black ring around that

    Returns:
        (H, W, 4) uint8 array
    """
    positions = texture_positions(width, height)
    texture = colors_to_uint8(colors_at(color_map, positions))

    if draw_debug_info and len(color_map) > 0:
        entry_pos, _, _ = entry_arrays(color_map)
        diff = positions[..., np.newaxis, :] - entry_pos
        dist = np.sqrt(np.einsum("...i,...i->...", diff, diff))
        nearest = np.argmin(dist, axis=-1)
        nearest_dist = np.take_along_axis(dist, nearest[..., np.newaxis], axis=-1)[..., 0]

        key_colors = np.array([entry.color for entry in color_map], dtype=np.uint8)
        in_key = nearest_dist < DEBUG_KEY_RADIUS
        in_ring = (~in_key) & (nearest_dist < DEBUG_RING_RADIUS)
        texture[in_key] = key_colors[nearest[in_key]]
        texture[in_ring] = (0, 0, 0, 255)

    return texture


def convert_colors(image, texture):
    """Replace each pixel's (R, G) coordinates by the texture colour there.

    Args:
        image: (H, W, C>=2) float array in [0, 1]. R is the X coordinate
            and G the Y coordinate on the texture. Other channels are
            ignored.
        texture: (TH, TW, 3 or 4) uint8 texture from fill_texture

    Returns:
        (H, W, 3) float32 RGB in [0, 1]
    """
    image = np.asarray(image, dtype=np.float64)
    texture = np.asarray(texture)
    th, tw = texture.shape[:2]
    coord_x = np.clip(image[..., 0], 0.0, 1.0) * (tw - 1)
    coord_y = np.clip(image[..., 1], 0.0, 1.0) * (th - 1)

    out = np.empty(image.shape[:2] + (3,), dtype=np.float32)
    for c in range(3):
        channel = texture[..., c].astype(np.float32) / CHANNEL_SCALE
        # Bilinear, clamped at the texture edge
        out[..., c] = map_coordinates(channel, [coord_y, coord_x],
                                      order=1, mode="nearest")
    return out
