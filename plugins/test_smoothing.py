#!/usr/bin/env python3
"""
Test script for smoothed morph animation.

Verifies:
1. SmoothedParameter drift behavior
2. MorphAnimator drives morph_into from a smoothed t
3. MorphAnimator range checks and output reuse
"""

import pytest

from idw_colormap.errors import OutOfRangeError
from idw_colormap.morph import morph
from idw_colormap.presets import build_preset
from idw_colormap.smoothing import SmoothedParameter, MorphAnimator


def test_smoothed_parameter():
    """Test EMA drift over time."""
    print("Testing SmoothedParameter...")
    sp = SmoothedParameter(0.15, time_constant=2.0)
    sp.set_target(0.30)

    # After 1 frame at 60fps
    sp.update(1/60)
    val_1frame = sp.get_value()
    assert abs(val_1frame - 0.15) < 0.01, f"Should barely move after 1 frame: {val_1frame}"

    # After ~5 seconds (300 frames)
    for _ in range(299):
        sp.update(1/60)
    val_5s = sp.get_value()
    assert abs(val_5s - 0.30) < 0.02, f"Should be near target after 5s: {val_5s}"

    # Test snap
    sp.snap(0.5)
    assert sp.get_value() == 0.5, "Snap should set value immediately"
    assert sp.target == 0.5, "Snap should set target too"

    # Non-positive dt is ignored
    sp.set_target(1.0)
    sp.update(0.0)
    assert sp.get_value() == 0.5, "Zero dt should not move the value"

    print("  ✓ SmoothedParameter working correctly")


def test_smoothed_parameter_rejects_bad_time_constant():
    with pytest.raises(OutOfRangeError):
        SmoothedParameter(0.0, time_constant=0.0)


def test_morph_animator():
    """Test the animated morph converges and reuses its output map."""
    print("Testing MorphAnimator...")
    a = build_preset("sunset")
    b = build_preset("ocean")
    anim = MorphAnimator(a, b, time_constant=0.5)
    output = anim.color_map

    # Starts exactly at A
    assert anim.t == 0.0
    assert [e.raw for e in output] == [e.raw for e in morph(a, b, 0.0)]

    anim.set_target(1.0)
    assert anim.target == 1.0
    for _ in range(300):
        anim.update(1/60)
    assert anim.t > 0.99, f"Should be near target after 5s: {anim.t}"
    assert anim.color_map is output, "Output map should be reused every frame"

    expected = morph(a, b, anim.t)
    assert [e.raw for e in output] == [e.raw for e in expected]

    # Snap lands exactly on B
    anim.snap(1.0)
    assert [e.raw for e in output] == [e.raw for e in morph(a, b, 1.0)]

    print("  ✓ MorphAnimator working correctly")


def test_morph_animator_range_checks():
    anim = MorphAnimator(build_preset("corners"), build_preset("neon"))
    with pytest.raises(OutOfRangeError):
        anim.set_target(1.5)
    with pytest.raises(OutOfRangeError):
        anim.snap(-0.1)
    with pytest.raises(OutOfRangeError):
        MorphAnimator(build_preset("corners"), build_preset("neon"), t=2.0)


if __name__ == "__main__":
    print("\n=== Testing Smoothed Morph Animation ===\n")

    test_smoothed_parameter()
    test_morph_animator()

    print("\n✓ All tests passed!\n")
