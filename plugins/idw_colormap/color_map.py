"""
Colour Map Container

A ColorMap is a 2D square colour field defined by smooth gradients
between key colours at given positions. It is a plain ordered list of
ColorMapEntry values plus one IDW falloff exponent.

Having multiple entries at the same position gives undefined results.
The container has no internal locking; the owner guarantees a single
writer.
"""

import logging
import math

from .entry import ColorMapEntry
from .errors import EmptyFieldError, OutOfRangeError
from .idw import color_at as _color_at

logger = logging.getLogger(__name__)

DEFAULT_IDW_EXPONENT = 2.0
MIN_IDW_EXPONENT = 0.0
MAX_IDW_EXPONENT = 32.0


def clamp_exponent(value):
    """Clamp an IDW exponent to [0, 32]. NaN is rejected."""
    value = float(value)
    if math.isnan(value):
        raise OutOfRangeError("IDW exponent must be a number, got NaN.")
    clamped = max(MIN_IDW_EXPONENT, min(MAX_IDW_EXPONENT, value))
    if clamped != value:
        logger.warning("IDW exponent %s outside [%s, %s], clamped to %s",
                       value, MIN_IDW_EXPONENT, MAX_IDW_EXPONENT, clamped)
    return clamped


class ColorMap:
    """Ordered, duplicate-permitting collection of colour map entries.

    The IDW exponent controls the speed of colour fall-off. An exponent
    of 1 diffuses very quickly, while 32 looks nearly like a voronoi
    diagram.

    Examples:
        >>> cmap = ColorMap()
        >>> cmap.add((0, 0), (255, 0, 0))
        >>> cmap.add((1, 1), (0, 0, 255))
        >>> cmap.color_at((0.5, 0.5))
        (0.5, 0.0, 0.5, 1.0)
    """

    def __init__(self, entries=(), idw_exponent=DEFAULT_IDW_EXPONENT):
        self._entries = []
        self.idw_exponent = idw_exponent
        self.extend(entries)

    @property
    def idw_exponent(self):
        return self._idw_exponent

    @idw_exponent.setter
    def idw_exponent(self, value):
        self._idw_exponent = clamp_exponent(value)

    # --- List operations ---

    def __len__(self):
        return len(self._entries)

    def __iter__(self):
        return iter(self._entries)

    def __contains__(self, entry):
        return entry in self._entries

    def __getitem__(self, index):
        return self._entries[index]

    def __setitem__(self, index, entry):
        self._entries[index] = _check_entry(entry)

    def __eq__(self, other):
        if not isinstance(other, ColorMap):
            return NotImplemented
        return (self._idw_exponent == other._idw_exponent
                and self._entries == other._entries)

    __hash__ = None

    def __repr__(self):
        plural = "" if len(self) == 1 else "s"
        return (f"ColorMap({len(self)} colour{plural}, "
                f"idw_exponent={self._idw_exponent})")

    def append(self, entry):
        self._entries.append(_check_entry(entry))

    def add(self, position, color):
        """Append a new entry built from a float position and byte colour."""
        self._entries.append(ColorMapEntry(position, color))

    def extend(self, entries):
        for entry in entries:
            self.append(entry)

    def insert(self, index, entry):
        self._entries.insert(index, _check_entry(entry))

    def pop(self, index=-1):
        """Remove and return the entry at index."""
        return self._entries.pop(index)

    def remove(self, entry):
        """Remove the first entry equal to the given one (weight ignored)."""
        self._entries.remove(entry)

    def index(self, entry):
        return self._entries.index(entry)

    def clear(self):
        self._entries.clear()

    # --- Structural operations ---

    def transpose(self):
        """Swap the X and Y position of every key in this map, in place."""
        self._entries = [entry.transposed() for entry in self._entries]

    def nearest(self, position):
        """Return the index of the entry nearest to position.

        Ties go to the first entry found.

        Raises:
            EmptyFieldError: if the map has no entries
        """
        if not self._entries:
            raise EmptyFieldError("Empty ColorMap has no nearest point.")
        px, py = position
        best_dist_sq = math.inf
        best_index = -1
        for i, entry in enumerate(self._entries):
            ex, ey = entry.position
            dist_sq = (px - ex) ** 2 + (py - ey) ** 2
            if dist_sq < best_dist_sq:
                best_dist_sq = dist_sq
                best_index = i
        return best_index

    def color_at(self, position):
        """Interpolated (r, g, b, a) in [0, 1] at position. See idw.color_at."""
        return _color_at(self, position)


def _check_entry(entry):
    if not isinstance(entry, ColorMapEntry):
        raise TypeError(f"Expected ColorMapEntry, got {type(entry).__name__}")
    return entry
