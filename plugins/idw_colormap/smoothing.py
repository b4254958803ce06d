"""
EMA-Smoothed Colour Map Morphing

Provides two pieces for animating between colour maps:

1. SmoothedParameter - EMA wrapper for any numeric parameter with time-constant drift
2. MorphAnimator - drives a morph between two maps from a smoothed t

All smoothing is frame-rate independent via delta-time integration.
"""

import math

from .color_map import ColorMap
from .errors import OutOfRangeError
from .morph import MorphWorkspace, morph_into


class SmoothedParameter:
    """EMA wrapper for a single numeric parameter.

    Provides frame-rate-independent exponential moving average smoothing
    with configurable time constant. Slider changes drift organically
    over 2-3 seconds instead of snapping instantly.

    Time constant controls the "feel":
    - tau=2.0s: dreamy drift
    - tau=0.5s: responsive but smooth
    - tau=5.0s: very slow drift
    """

    def __init__(self, initial_value, time_constant=2.0):
        """Initialize smoothed parameter.

        Args:
            initial_value: Starting value (both current and target)
            time_constant: Time in seconds to reach ~63% of target (tau)
        """
        if time_constant <= 0:
            raise OutOfRangeError(f"time_constant must be positive, got {time_constant}")
        self.target = initial_value
        self.current = initial_value
        self.tau = time_constant

    def set_target(self, new_target):
        """Set new target value to drift toward."""
        self.target = new_target

    def update(self, dt):
        """Advance EMA by delta-time (called each frame).

        Uses frame-rate-independent exponential smoothing:
        alpha = 1 - exp(-dt / tau)
        current += alpha * (target - current)

        Args:
            dt: Time elapsed in seconds since last update
        """
        if dt <= 0:
            return
        alpha = 1.0 - math.exp(-dt / self.tau)
        self.current += alpha * (self.target - self.current)

    def get_value(self):
        """Get current smoothed value."""
        return self.current

    def snap(self, value):
        """Immediately set both target and current (for reset)."""
        self.target = value
        self.current = value


class MorphAnimator:
    """Animates a morph from map_a to map_b.

    Owns its output ColorMap and MorphWorkspace, so each update refills
    the same map instead of allocating. The source maps are read on every
    update; edits to them show up on the next frame. The output map must
    not be handed back in as a source.

    Example:
        anim = MorphAnimator(sunset, ocean, time_constant=1.0)
        anim.set_target(1.0)
        while running:
            anim.update(dt)
            packet = encode(anim.color_map)
    """

    def __init__(self, map_a, map_b, time_constant=2.0, t=0.0):
        self.map_a = map_a
        self.map_b = map_b
        self.color_map = ColorMap()
        self._workspace = MorphWorkspace()
        self._t = SmoothedParameter(_check_t(t), time_constant)
        self._refresh()

    @property
    def t(self):
        """Current (smoothed) interpolation parameter."""
        return self._t.get_value()

    @property
    def target(self):
        return self._t.target

    def set_target(self, t):
        """Set the t to drift toward, in [0, 1]."""
        self._t.set_target(_check_t(t))

    def snap(self, t):
        """Jump straight to t and re-morph."""
        self._t.snap(_check_t(t))
        self._refresh()
        return self.color_map

    def update(self, dt):
        """Advance the smoothed t by dt seconds and re-morph.

        Returns:
            The owned output ColorMap
        """
        self._t.update(dt)
        self._refresh()
        return self.color_map

    def _refresh(self):
        # EMA can overshoot by rounding; keep t inside the morph domain
        t = min(1.0, max(0.0, self._t.get_value()))
        morph_into(self.map_a, self.map_b, t, self.color_map, self._workspace)


def _check_t(t):
    t = float(t)
    if math.isnan(t) or t < 0 or t > 1:
        raise OutOfRangeError(f"t must be in [0,1], got {t}")
    return t
