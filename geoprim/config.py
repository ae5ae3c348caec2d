"""Library configuration constants."""

from __future__ import annotations
import math

# Numeric
PI = math.pi
DEFAULT_TOLERANCE = 1e-9

# Axis labels, indexed by geoprim.types.Axis
AXIS_NAMES = ("x", "y", "z", "w")

# Easing - back (overshoot) curves
EASE_BACK_C1 = 1.70158
EASE_BACK_C2 = EASE_BACK_C1 * 1.525
EASE_BACK_C3 = EASE_BACK_C1 + 1.0

# Easing - elastic curves (angular frequency for in/out and for inout)
EASE_ELASTIC_C4 = (2.0 * PI) / 3.0
EASE_ELASTIC_C5 = (2.0 * PI) / 4.5

# Easing - bounce curves
EASE_BOUNCE_N1 = 7.5625
EASE_BOUNCE_D1 = 2.75

# Easing - exponential curves: base ** (scale * t - scale)
EASE_EXPO_BASE = 2.0
EASE_EXPO_SCALE = 10.0

# Logging is silent unless a caller turns it on
LOG_ENABLED = False
