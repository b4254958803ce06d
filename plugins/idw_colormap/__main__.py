"""
IDW Colour Map - Entry Point

Usage:
    python -m idw_colormap [preset] [--size N] [--morph OTHER] [--t T]
                           [--snap] [--debug] [--verbose] [--list]

Examples:
    python -m idw_colormap
    python -m idw_colormap sunset --snap
    python -m idw_colormap sunset --morph ocean --t 0.5 --snap
    python -m idw_colormap stained_glass --size 512 --debug --snap

Without --snap a pygame preview window opens, animating the morph
between the two presets (SPACE flips direction).

Use --list to see all available presets.
"""

import logging
import os
import sys

import numpy as np

from .config import DEFAULT_PRESET, DEFAULT_TEXTURE_SIZE, ColorMapSettings
from .logging_config import setup_logging
from .morph import morph
from .presets import PRESET_ORDER, build_preset, list_presets
from .texture import fill_texture


def snap(settings, other=None, t=0.0, out_dir=None):
    """Headless mode: render one texture, save PNG, exit."""
    from PIL import Image

    cmap = build_preset(settings.preset)
    label = settings.preset
    if other is not None:
        cmap = morph(cmap, build_preset(other), t)
        label = f"{settings.preset}_{other}_{t:.2f}"

    rgba = fill_texture(cmap, settings.texture_size, settings.texture_size,
                        draw_debug_info=settings.draw_debug_info)

    screenshots_dir = out_dir or os.path.join(os.getcwd(), "screenshots")
    os.makedirs(screenshots_dir, exist_ok=True)
    path = os.path.join(screenshots_dir, f"colormap_{label}.png")
    # Row 0 is y = 0; flip so +Y points up in the image
    Image.fromarray(np.ascontiguousarray(rgba[::-1])).save(path)
    print(f" saved: {path}")
    return path


def main(argv=None):
    preset = DEFAULT_PRESET
    other = None
    t = 0.0
    size = DEFAULT_TEXTURE_SIZE
    do_snap = False
    debug = False
    level = logging.INFO

    args = sys.argv[1:] if argv is None else list(argv)
    i = 0
    while i < len(args):
        arg = args[i]
        if arg == "--size" and i + 1 < len(args):
            size = int(args[i + 1])
            i += 2
        elif arg == "--morph" and i + 1 < len(args):
            other = args[i + 1]
            i += 2
        elif arg == "--t" and i + 1 < len(args):
            t = float(args[i + 1])
            i += 2
        elif arg == "--snap":
            do_snap = True
            i += 1
        elif arg == "--debug":
            debug = True
            i += 1
        elif arg == "--verbose":
            level = logging.DEBUG
            i += 1
        elif arg == "--list":
            print("\nAvailable presets:")
            for key, name, desc in list_presets():
                print(f"    {key:16s} {name:16s} {desc}")
            print()
            return 0
        elif arg in ("--help", "-h"):
            print(__doc__)
            return 0
        elif arg in PRESET_ORDER:
            preset = arg
            i += 1
        else:
            print(f"Unknown argument: {arg}")
            print("Use --list to see available presets")
            return 2

    if other is not None and other not in PRESET_ORDER:
        print(f"Unknown preset: {other}")
        return 2
    if not 0.0 <= t <= 1.0:
        print(f"--t must be in [0,1], got {t}")
        return 2

    settings = ColorMapSettings(preset=preset, texture_size=size,
                                draw_debug_info=debug,
                                log_level=logging.getLevelName(level))
    setup_logging(settings.log_level)

    if do_snap:
        print(f"Headless snap mode: {preset} @ {size}x{size}")
        snap(settings, other, t)
        return 0

    from .viewer import Viewer

    print("Starting Colour Map Viewer")
    print(f"  Preset: {preset}")
    print(f"  Morph to: {other or preset}")
    print(f"  Texture: {size}x{size}")
    print()

    viewer = Viewer(settings, other=other)
    viewer.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
