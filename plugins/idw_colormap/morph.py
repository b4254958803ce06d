"""
Colour Map Copying and Morphing

Both operations come in two calling styles sharing one implementation:

    result = morph(map_a, map_b, t)           # allocates a new ColorMap
    morph_into(map_a, map_b, t, result)       # clears and refills result

The second style lets a per-frame caller reuse the same output map. The
output container may never be one of the inputs.
"""

import logging
import math

from .color_map import ColorMap
from .entry import ColorMapEntry, dequantize_position
from .errors import AliasError, OutOfRangeError
from .idw import color_at, to_color32

logger = logging.getLogger(__name__)


class MorphWorkspace:
    """Scratch key sets for one morph call.

    Keys are raw (x, y) positions held in insertion-ordered dicts, so the
    order of emitted entries is deterministic: keys of map A first, then
    keys only found in map B. A workspace is reused across calls by a
    single owner only; concurrent callers each need their own.
    """

    def __init__(self):
        self.keys_a = {}
        self.keys_b = {}
        self.keys = {}

    def clear(self):
        self.keys_a.clear()
        self.keys_b.clear()
        self.keys.clear()

    def collect(self, map_a, map_b, t):
        """Fill the key sets for interpolation parameter t."""
        self.clear()
        # A's contribution vanishes at t == 1, B's at t == 0
        if t < 1:
            for entry in map_a:
                self.keys_a[entry.raw_position] = None
        if t > 0:
            for entry in map_b:
                self.keys_b[entry.raw_position] = None
        self.keys.update(self.keys_a)
        self.keys.update(self.keys_b)
        return self.keys


# --- Deep copy ---

def _copy(source, dest):
    dest.clear()
    dest.idw_exponent = source.idw_exponent
    dest.extend(source)
    return dest


def deep_copy(source, dest=None):
    """Create a completely independent copy of a colour map.

    Args:
        source: ColorMap to copy
        dest: optional ColorMap to clear and fill instead of allocating

    Raises:
        AliasError: if dest is source
    """
    if dest is source:
        raise AliasError(
            "The given output container ColorMap is the same as the input "
            "ColorMap, this is not supported.")
    if dest is None:
        dest = ColorMap()
    return _copy(source, dest)


def deep_copy_into(source, dest):
    """Clear dest and fill it with a copy of source."""
    if dest is None:
        raise TypeError("deep_copy_into requires an output ColorMap")
    return deep_copy(source, dest)


# --- Morph ---

def _lerp(a, b, t):
    return (1.0 - t) * a + t * b


def _morph(map_a, map_b, t, dest, workspace):
    keys = workspace.collect(map_a, map_b, t)
    in_a = workspace.keys_a
    in_b = workspace.keys_b

    dest.clear()
    # Linearly interpolating an exponent is questionable, but smooth enough
    dest.idw_exponent = _lerp(map_a.idw_exponent, map_b.idw_exponent, t)

    for raw_pos in keys:
        x, y = raw_pos
        pos = (dequantize_position(x), dequantize_position(y))
        # At t == 0 or t == 1 only the surviving map is evaluated
        if t == 0.0:
            res = list(color_at(map_a, pos))
        elif t == 1.0:
            res = list(color_at(map_b, pos))
        else:
            color_a = color_at(map_a, pos)
            color_b = color_at(map_b, pos)
            res = [_lerp(ca, cb, t) for ca, cb in zip(color_a, color_b)]
        # A key present in only one map would leave a blob behind that is
        # in neither source map, so fade its weight in or out.
        if raw_pos not in in_a:
            res[3] = t
        elif raw_pos not in in_b:
            res[3] = 1.0 - t
        r, g, b, weight = to_color32(res)
        dest.append(ColorMapEntry.from_raw(x, y, r, g, b, weight))

    logger.debug("Morphed %d + %d keys into %d at t=%.3f",
                 len(in_a), len(in_b), len(dest), t)
    return dest


def morph(map_a, map_b, t, dest=None, workspace=None):
    """Morph from map_a to map_b for t in [0, 1].

    Only the key colours are linearly interpolated. Every key of either
    map is evaluated against both full maps, so the rest of the field
    changes smoothly rather than linearly.

    Args:
        map_a: ColorMap at t = 0
        map_b: ColorMap at t = 1
        t: interpolation parameter in [0, 1]
        dest: optional ColorMap to clear and fill instead of allocating
        workspace: optional MorphWorkspace to reuse for the key sets

    Returns:
        The morphed ColorMap (dest if given)

    Raises:
        AliasError: if dest is map_a or map_b
        OutOfRangeError: if t is outside [0, 1]
    """
    if dest is not None and (dest is map_a or dest is map_b):
        raise AliasError(
            "The given output container ColorMap is the same as one of the "
            "input ColorMaps. This is not supported.")
    t = float(t)
    if math.isnan(t) or t < 0 or t > 1:
        raise OutOfRangeError(
            f"Interpolation is only supported on [0,1], but got {t} instead.")
    if dest is None:
        dest = ColorMap()
    if workspace is None:
        workspace = MorphWorkspace()
    return _morph(map_a, map_b, t, dest, workspace)


def morph_into(map_a, map_b, t, dest, workspace=None):
    """Clear dest and fill it with the morph of map_a and map_b at t."""
    if dest is None:
        raise TypeError("morph_into requires an output ColorMap")
    return morph(map_a, map_b, t, dest, workspace)
