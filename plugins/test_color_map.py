"""
Tests for the ColorMap container: list operations, exponent clamping,
nearest-key lookup and transposition.
"""

import logging

import pytest

from idw_colormap.color_map import ColorMap, DEFAULT_IDW_EXPONENT
from idw_colormap.entry import ColorMapEntry
from idw_colormap.errors import EmptyFieldError, OutOfRangeError


def _sample_map():
    cmap = ColorMap()
    cmap.add((0.0, 0.0), (255, 0, 0))
    cmap.add((1.0, 0.25), (0, 255, 0, 128))
    cmap.add((0.3, 0.9), (0, 0, 255))
    return cmap


def test_defaults():
    cmap = ColorMap()
    assert len(cmap) == 0
    assert cmap.idw_exponent == DEFAULT_IDW_EXPONENT == 2.0


def test_list_operations_preserve_insertion_order():
    cmap = ColorMap()
    a = ColorMapEntry((0.1, 0.1), (1, 1, 1))
    b = ColorMapEntry((0.2, 0.2), (2, 2, 2))
    c = ColorMapEntry((0.3, 0.3), (3, 3, 3))
    cmap.append(a)
    cmap.append(c)
    cmap.insert(1, b)
    assert list(cmap) == [a, b, c]
    assert cmap[1] == b
    assert cmap.index(c) == 2
    assert b in cmap

    cmap[0] = c
    assert list(cmap) == [c, b, c], "Duplicates are allowed"

    assert cmap.pop(1) == b
    cmap.remove(c)
    assert list(cmap) == [c]
    cmap.clear()
    assert len(cmap) == 0


def test_remove_by_value_ignores_weight():
    cmap = ColorMap()
    cmap.add((0.5, 0.5), (1, 2, 3, 10))
    cmap.remove(ColorMapEntry((0.5, 0.5), (1, 2, 3, 200)))
    assert len(cmap) == 0


def test_only_entries_accepted():
    cmap = ColorMap()
    with pytest.raises(TypeError):
        cmap.append(((0, 0), (1, 2, 3)))


def test_exponent_clamped_to_range(caplog):
    cmap = ColorMap()
    with caplog.at_level(logging.WARNING, logger="idw_colormap"):
        cmap.idw_exponent = 40
    assert cmap.idw_exponent == 32.0
    assert "clamped" in caplog.text

    cmap.idw_exponent = -3
    assert cmap.idw_exponent == 0.0
    cmap.idw_exponent = 7.5
    assert cmap.idw_exponent == 7.5
    assert ColorMap(idw_exponent=100).idw_exponent == 32.0


def test_exponent_nan_rejected():
    with pytest.raises(OutOfRangeError):
        ColorMap(idw_exponent=float("nan"))


def test_nearest():
    cmap = _sample_map()
    assert cmap.nearest((0.05, 0.0)) == 0
    assert cmap.nearest((0.9, 0.3)) == 1
    assert cmap.nearest((0.3, 0.8)) == 2


def test_nearest_on_empty_map_raises():
    with pytest.raises(EmptyFieldError):
        ColorMap().nearest((0.5, 0.5))


def test_transpose_swaps_axes():
    cmap = _sample_map()
    before = [e.raw for e in cmap]
    cmap.transpose()
    after = [e.raw for e in cmap]
    for (x, y, *rest), (tx, ty, *trest) in zip(before, after):
        assert (tx, ty) == (y, x)
        assert rest == trest, "Colours must be unchanged"


def test_transpose_is_an_involution():
    cmap = _sample_map()
    before = [e.raw for e in cmap]
    cmap.transpose()
    cmap.transpose()
    assert [e.raw for e in cmap] == before


def test_equality():
    assert _sample_map() == _sample_map()
    other = _sample_map()
    other.idw_exponent = 3
    assert _sample_map() != other
