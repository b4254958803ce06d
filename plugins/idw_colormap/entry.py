"""
Quantized Colour Map Entries

A ColorMapEntry is one key colour on the [0,1]^2 colour map. It is stored
in the compact form shared with editors and GPU evaluators:

  - position: two unsigned 16-bit fractions (value = raw / 65535)
  - colour:   r, g, b as unsigned bytes
  - weight:   an unsigned byte scaling the entry's influence (not opacity)

Positions are quantized with round(c * 65535), so decoding loses at most
half a step per axis.
"""

import math
import numbers

from .errors import OutOfRangeError

POSITION_SCALE = 65535
CHANNEL_SCALE = 255


def quantize_position(value):
    """Quantize one coordinate in [0, 1] to its raw 16-bit value.

    Raises:
        OutOfRangeError: if value is outside [0, 1] or NaN
    """
    value = float(value)
    if not 0.0 <= value <= 1.0:
        raise OutOfRangeError(f"Coordinate {value!r} must be in the [0,1]-range.")
    return int(round(value * POSITION_SCALE))


def dequantize_position(raw):
    """Decode a raw 16-bit coordinate back to [0, 1]."""
    return raw / POSITION_SCALE


def _check_raw(name, value, limit):
    if not isinstance(value, numbers.Integral):
        if (not isinstance(value, numbers.Real) or math.isnan(value)
                or not float(value).is_integer()):
            raise OutOfRangeError(f"{name}={value!r} must be an integer value.")
    value = int(value)
    if not 0 <= value <= limit:
        raise OutOfRangeError(f"{name}={value} must be in [0, {limit}].")
    return value


class ColorMapEntry:
    """Immutable key colour at a quantized position.

    Equality and hashing use (x, y, r, g, b). Two entries that differ only
    in weight compare equal.

    Examples:
        >>> e = ColorMapEntry((0.25, 1.0), (255, 0, 0))
        >>> e.raw
        (16384, 65535, 255, 0, 0, 255)
        >>> position, color = e
    """

    __slots__ = ("_x", "_y", "_r", "_g", "_b", "_weight")

    def __init__(self, position, color):
        """Create an entry from a float position and a byte colour.

        Args:
            position: (x, y), each in [0, 1]
            color: (r, g, b) or (r, g, b, weight), each in 0..255.
                Weight defaults to 255.
        """
        px, py = position
        if not (0.0 <= px <= 1.0 and 0.0 <= py <= 1.0):
            raise OutOfRangeError(
                f"Both coordinates of {tuple(position)} must be in the [0,1]-range."
            )
        r, g, b, weight = _split_color(color)
        self._init(quantize_position(px), quantize_position(py), r, g, b, weight)

    def _init(self, x, y, r, g, b, weight):
        setter = object.__setattr__
        setter(self, "_x", x)
        setter(self, "_y", y)
        setter(self, "_r", r)
        setter(self, "_g", g)
        setter(self, "_b", b)
        setter(self, "_weight", weight)

    @classmethod
    def from_raw(cls, x, y, r, g, b, weight=CHANNEL_SCALE):
        """Build an entry straight from its stored representation."""
        entry = cls.__new__(cls)
        entry._init(
            _check_raw("x", x, POSITION_SCALE),
            _check_raw("y", y, POSITION_SCALE),
            _check_raw("r", r, CHANNEL_SCALE),
            _check_raw("g", g, CHANNEL_SCALE),
            _check_raw("b", b, CHANNEL_SCALE),
            _check_raw("weight", weight, CHANNEL_SCALE),
        )
        return entry

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name):
        raise AttributeError(f"{type(self).__name__} is immutable")

    # --- Raw fields ---

    @property
    def x(self):
        return self._x

    @property
    def y(self):
        return self._y

    @property
    def r(self):
        return self._r

    @property
    def g(self):
        return self._g

    @property
    def b(self):
        return self._b

    @property
    def weight(self):
        return self._weight

    @property
    def raw(self):
        """(x, y, r, g, b, weight) exactly as stored."""
        return (self._x, self._y, self._r, self._g, self._b, self._weight)

    @property
    def raw_position(self):
        return (self._x, self._y)

    # --- Decoded views ---

    @property
    def position(self):
        """The [0,1]^2 position of this entry."""
        return (dequantize_position(self._x), dequantize_position(self._y))

    @property
    def color(self):
        """(r, g, b, weight) in bytes. The last channel is the weight."""
        return (self._r, self._g, self._b, self._weight)

    @property
    def rgb(self):
        return (self._r, self._g, self._b)

    def with_color(self, color):
        """Return a copy of this entry with a different colour."""
        r, g, b, weight = _split_color(color)
        entry = ColorMapEntry.__new__(ColorMapEntry)
        entry._init(self._x, self._y, r, g, b, weight)
        return entry

    def transposed(self):
        """Return a copy with the x and y axes swapped."""
        entry = ColorMapEntry.__new__(ColorMapEntry)
        entry._init(self._y, self._x, self._r, self._g, self._b, self._weight)
        return entry

    def __iter__(self):
        yield self.position
        yield self.color

    def __eq__(self, other):
        if not isinstance(other, ColorMapEntry):
            return NotImplemented
        return (self._x, self._y, self._r, self._g, self._b) == \
            (other._x, other._y, other._r, other._g, other._b)

    def __hash__(self):
        return hash((self._x, self._y, self._r, self._g, self._b))

    def __repr__(self):
        x, y = self.position
        return (f"ColorMapEntry(position=({x:.5f}, {y:.5f}), "
                f"color={self.color})")

    def __reduce__(self):
        return (ColorMapEntry.from_raw, self.raw)


def _split_color(color):
    """Validate a 3- or 4-channel byte colour, returning (r, g, b, weight)."""
    channels = tuple(color)
    if len(channels) == 3:
        channels = channels + (CHANNEL_SCALE,)
    elif len(channels) != 4:
        raise OutOfRangeError(f"Colour {channels!r} must have 3 or 4 channels.")
    return tuple(_check_raw(name, value, CHANNEL_SCALE)
                 for name, value in zip(("r", "g", "b", "weight"), channels))
