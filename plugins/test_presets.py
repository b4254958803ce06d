"""
Tests for presets, random maps and the command line entry point.
"""

import logging
import os

import pytest

from idw_colormap.__main__ import main, snap
from idw_colormap.color_map import ColorMap
from idw_colormap import __main__ as cli
from idw_colormap.config import DEFAULT_PRESET, DEFAULT_TEXTURE_SIZE, ColorMapSettings
from idw_colormap.presets import (
    PRESET_ORDER, PRESETS, build_preset, get_preset, list_presets, random_color_map,
)


def test_every_preset_builds():
    assert set(PRESET_ORDER) == set(PRESETS)
    for key in PRESET_ORDER:
        cmap = build_preset(key)
        assert isinstance(cmap, ColorMap)
        assert len(cmap) == len(PRESETS[key]["entries"])
        assert cmap.idw_exponent == PRESETS[key]["idw_exponent"]


def test_build_preset_returns_fresh_maps():
    a = build_preset("sunset")
    b = build_preset("sunset")
    assert a == b and a is not b


def test_preset_lookup():
    assert get_preset("nope") is None
    assert get_preset("ocean")["name"] == "Ocean"
    with pytest.raises(KeyError):
        build_preset("nope")
    assert [k for k, _, _ in list_presets()] == PRESET_ORDER


def test_random_color_map_is_reproducible():
    a = random_color_map(12, rng=7)
    b = random_color_map(12, rng=7)
    assert len(a) == 12
    assert [e.raw for e in a] == [e.raw for e in b]
    assert all(e.weight == 255 for e in a)


def test_cli_list(capsys):
    assert main(["--list"]) == 0
    out = capsys.readouterr().out
    for key in PRESET_ORDER:
        assert key in out


def test_cli_rejects_bad_arguments(capsys):
    assert main(["--bogus"]) == 2
    assert main(["sunset", "--morph", "nope", "--snap"]) == 2
    assert main(["sunset", "--morph", "ocean", "--t", "1.5", "--snap"]) == 2


def test_snap_writes_png(tmp_path):
    settings = ColorMapSettings(preset="sunset", texture_size=16, draw_debug_info=True)
    path = snap(settings, other="ocean", t=0.5, out_dir=str(tmp_path))
    assert os.path.exists(path)
    assert path.endswith("colormap_sunset_ocean_0.50.png")


def test_cli_defaults_match_settings(monkeypatch):
    seen = {}
    monkeypatch.setattr(cli, "snap", lambda settings, other, t: seen.update(settings=settings))
    try:
        assert main(["--snap"]) == 0
    finally:
        logger = logging.getLogger("idw_colormap")
        for handler in logger.handlers:
            handler.close()
        logger.handlers.clear()
        logger.setLevel(logging.NOTSET)
    settings = seen["settings"]
    assert settings.preset == DEFAULT_PRESET == ColorMapSettings().preset
    assert settings.texture_size == DEFAULT_TEXTURE_SIZE == ColorMapSettings().texture_size
