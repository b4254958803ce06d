"""
Inverse Distance Weighted Colour Evaluation

For a query position q and entries e_i at positions p_i:

    d2_i = |p_i - q|^2 + eps
    d2_i = d2_i ** (exponent / 2)      (only when exponent != 2)
    d2_i = d2_i + eps
    w_i  = (1 / d2_i) * (weight_i / 255)
    colour = sum(w_i * rgb_i) / sum(w_i)

The external GPU kernel runs this exact formula, including the second
eps, so CPU and GPU results agree. The empty map evaluates to opaque
magenta so a missing map is obvious on screen. If every weight is zero
the result is NaN; that is accepted, not raised.
"""

import math
import numpy as np

from .entry import CHANNEL_SCALE, POSITION_SCALE

EPSILON = 1e-5
EMPTY_COLOR = (1.0, 0.0, 1.0, 1.0)


def color_at(color_map, position):
    """Interpolated colour at a position in [0,1]^2.

    The alpha of the result is always 1 (weights are not opacity), except
    for the NaN produced by an all-zero-weight map.

    Args:
        color_map: ColorMap to evaluate
        position: (x, y) query position

    Returns:
        (r, g, b, a) floats in [0, 1]
    """
    if len(color_map) == 0:
        return EMPTY_COLOR

    qx, qy = position
    exponent = color_map.idw_exponent
    half_exponent = exponent * 0.5

    num_r = num_g = num_b = num_a = 0.0
    denominator = 0.0
    for entry in color_map:
        ex, ey = entry.position
        d_sq = (ex - qx) ** 2 + (ey - qy) ** 2 + EPSILON
        if exponent != 2:
            d_sq = d_sq ** half_exponent
        d_sq += EPSILON

        weight = (1.0 / d_sq) * (entry.weight / CHANNEL_SCALE)
        num_r += weight * (entry.r / CHANNEL_SCALE)
        num_g += weight * (entry.g / CHANNEL_SCALE)
        num_b += weight * (entry.b / CHANNEL_SCALE)
        num_a += weight
        denominator += weight

    if denominator == 0.0:
        return (math.nan, math.nan, math.nan, math.nan)
    return (num_r / denominator, num_g / denominator,
            num_b / denominator, num_a / denominator)


def entry_arrays(color_map):
    """Decode a map's entries into float arrays.

    Returns:
        positions (N, 2), rgb (N, 3) and weights (N,), all float64 in [0, 1]
    """
    raw = np.array([entry.raw for entry in color_map], dtype=np.float64).reshape(-1, 6)
    positions = raw[:, 0:2] / POSITION_SCALE
    rgb = raw[:, 2:5] / CHANNEL_SCALE
    weights = raw[:, 5] / CHANNEL_SCALE
    return positions, rgb, weights


def idw_weights(entry_positions, entry_weights, positions, exponent):
    """Per-entry IDW weights for an array of query positions.

    Args:
        entry_positions: (N, 2) decoded entry positions
        entry_weights: (N,) weight channel in [0, 1]
        positions: (..., 2) query positions
        exponent: IDW falloff exponent

    Returns:
        (..., N) weights
    """
    diff = positions[..., np.newaxis, :] - entry_positions
    d_sq = np.einsum("...i,...i->...", diff, diff) + EPSILON
    if exponent != 2:
        d_sq = np.power(d_sq, exponent * 0.5)
    d_sq += EPSILON
    return (1.0 / d_sq) * entry_weights


def colors_at(color_map, positions):
    """Vectorized color_at over any array of positions.

    Args:
        color_map: ColorMap to evaluate
        positions: array-like of shape (..., 2)

    Returns:
        float64 array of shape (..., 4)
    """
    positions = np.asarray(positions, dtype=np.float64)
    out_shape = positions.shape[:-1] + (4,)
    if len(color_map) == 0:
        return np.broadcast_to(np.array(EMPTY_COLOR), out_shape).copy()

    entry_pos, rgb, weights = entry_arrays(color_map)
    w = idw_weights(entry_pos, weights, positions, color_map.idw_exponent)

    out = np.empty(out_shape, dtype=np.float64)
    denominator = w.sum(axis=-1)
    with np.errstate(invalid="ignore", divide="ignore"):
        out[..., :3] = (w @ rgb) / denominator[..., np.newaxis]
        out[..., 3] = denominator / denominator
    return out


def to_color32(color):
    """Convert a normalized colour to bytes: round(clamp01(c) * 255).

    NaN channels become 0.
    """
    out = []
    for c in color:
        if math.isnan(c):
            out.append(0)
            continue
        c = min(1.0, max(0.0, c))
        out.append(int(round(c * CHANNEL_SCALE)))
    return tuple(out)
