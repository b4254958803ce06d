"""
Tests for quantized colour map entries.

Verifies:
1. Position quantization bound and rounding rule
2. Range checks on positions and channels
3. Equality ignores weight
4. Value semantics (immutability, with_color, transposed)
"""

import numpy as np
import pytest

from idw_colormap.entry import (
    ColorMapEntry, quantize_position, dequantize_position, POSITION_SCALE,
)
from idw_colormap.errors import OutOfRangeError


def test_fractional_channels_rejected():
    with pytest.raises(OutOfRangeError):
        ColorMapEntry((0, 0), (np.float32(1.5), 0, 0))
    with pytest.raises(OutOfRangeError):
        ColorMapEntry((0, 0), (0, 0, 0, float("nan")))
    with pytest.raises(OutOfRangeError):
        ColorMapEntry.from_raw(1.7, 0, 0, 0, 0)
    with pytest.raises(OutOfRangeError):
        ColorMapEntry((0, 0), ("7", 0, 0))
    entry = ColorMapEntry((0, 0), (np.float32(2.0), np.uint8(200), 3.0))
    assert entry.raw == (0, 0, 2, 200, 3, 255)


def test_quantization_round_trip_bound():
    """Decoded positions stay within one step of the input."""
    for p in np.linspace(0.0, 1.0, 1001):
        decoded = dequantize_position(quantize_position(p))
        assert abs(decoded - p) <= 1.0 / POSITION_SCALE, f"Too much loss at {p}"


def test_quantization_rounds_to_nearest():
    assert quantize_position(0.0) == 0
    assert quantize_position(1.0) == 65535
    assert quantize_position(0.25) == 16384  # 16383.75 rounds up
    e = ColorMapEntry((0.25, 1.0), (1, 2, 3))
    assert e.raw_position == (16384, 65535)


def test_position_out_of_range_rejected():
    for pos in [(-0.001, 0.5), (0.5, 1.001), (2.0, 2.0), (float("nan"), 0.0)]:
        with pytest.raises(OutOfRangeError):
            ColorMapEntry(pos, (0, 0, 0))


def test_out_of_range_is_a_value_error():
    with pytest.raises(ValueError):
        ColorMapEntry((1.5, 0), (0, 0, 0))


def test_channel_range_checked():
    with pytest.raises(OutOfRangeError):
        ColorMapEntry((0, 0), (256, 0, 0))
    with pytest.raises(OutOfRangeError):
        ColorMapEntry((0, 0), (0, 0, 0, -1))
    with pytest.raises(OutOfRangeError):
        ColorMapEntry((0, 0), (0, 0))
    with pytest.raises(OutOfRangeError):
        ColorMapEntry.from_raw(65536, 0, 0, 0, 0)


def test_weight_defaults_to_opaque():
    e = ColorMapEntry((0.5, 0.5), (10, 20, 30))
    assert e.color == (10, 20, 30, 255)
    assert e.rgb == (10, 20, 30)
    assert e.weight == 255


def test_equality_ignores_weight():
    a = ColorMapEntry((0.5, 0.5), (10, 20, 30, 255))
    b = ColorMapEntry((0.5, 0.5), (10, 20, 30, 7))
    c = ColorMapEntry((0.5, 0.5), (10, 20, 31, 255))
    assert a == b, "Entries differing only in weight should be equal"
    assert hash(a) == hash(b)
    assert a != c
    assert len({a, b, c}) == 2


def test_decode_and_unpack():
    e = ColorMapEntry.from_raw(65535, 0, 1, 2, 3, 4)
    assert e.position == (1.0, 0.0)
    position, color = e
    assert position == (1.0, 0.0)
    assert color == (1, 2, 3, 4)


def test_entries_are_immutable():
    e = ColorMapEntry((0.1, 0.2), (1, 2, 3))
    with pytest.raises(AttributeError):
        e.r = 5
    with pytest.raises(AttributeError):
        e._x = 5


def test_with_color_keeps_raw_position():
    e = ColorMapEntry((0.123456, 0.654321), (1, 2, 3))
    f = e.with_color((9, 8, 7, 6))
    assert f.raw_position == e.raw_position
    assert f.color == (9, 8, 7, 6)
    assert e.color == (1, 2, 3, 255), "Original must be unchanged"


def test_transposed_swaps_raw_axes():
    e = ColorMapEntry.from_raw(100, 60000, 1, 2, 3, 4)
    t = e.transposed()
    assert t.raw == (60000, 100, 1, 2, 3, 4)
    assert t.transposed().raw == e.raw
