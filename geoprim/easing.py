"""Easing curves - pure functions over a normalized progress value.

Every curve maps 0 to 0 and 1 to 1; back and elastic curves overshoot in
between. The input is not clamped. ``*_inout`` curves switch branches at
t = 0.5 and are continuous there.
"""

from __future__ import annotations
import math
from enum import Enum
from typing import Callable, Dict, Union

from . import math_utils
from .config import (
    PI,
    EASE_BACK_C1, EASE_BACK_C2, EASE_BACK_C3,
    EASE_ELASTIC_C4, EASE_ELASTIC_C5,
    EASE_BOUNCE_N1, EASE_BOUNCE_D1,
    EASE_EXPO_BASE, EASE_EXPO_SCALE,
)
from .logging import log

EaseFunc = Callable[[float], float]


# Polynomial family helpers

def _poly_in(t: float, n: int) -> float:
    return t ** n


def _poly_out(t: float, n: int) -> float:
    return 1 - (1 - t) ** n


def _poly_inout(t: float, n: int) -> float:
    if t < 0.5:
        return 2 ** (n - 1) * t ** n
    return 1 - (-2 * t + 2) ** n / 2


def linear(t: float) -> float:
    return t


def step(t: float) -> float:
    """Jump from 0 to 1 at the midpoint (nearest of the two ends)."""
    return 0.0 if t < 0.5 else 1.0


# Sine

def sine_in(t: float) -> float:
    return 1 - math.cos(t * PI / 2)


def sine_out(t: float) -> float:
    return math.sin(t * PI / 2)


def sine_inout(t: float) -> float:
    return -(math.cos(PI * t) - 1) / 2


# Polynomials, degree 2 to 8

def quad_in(t: float) -> float:
    return _poly_in(t, 2)


def quad_out(t: float) -> float:
    return _poly_out(t, 2)


def quad_inout(t: float) -> float:
    return _poly_inout(t, 2)


def cubic_in(t: float) -> float:
    return _poly_in(t, 3)


def cubic_out(t: float) -> float:
    return _poly_out(t, 3)


def cubic_inout(t: float) -> float:
    return _poly_inout(t, 3)


def quart_in(t: float) -> float:
    return _poly_in(t, 4)


def quart_out(t: float) -> float:
    return _poly_out(t, 4)


def quart_inout(t: float) -> float:
    return _poly_inout(t, 4)


def quint_in(t: float) -> float:
    return _poly_in(t, 5)


def quint_out(t: float) -> float:
    return _poly_out(t, 5)


def quint_inout(t: float) -> float:
    return _poly_inout(t, 5)


def sext_in(t: float) -> float:
    return _poly_in(t, 6)


def sext_out(t: float) -> float:
    return _poly_out(t, 6)


def sext_inout(t: float) -> float:
    return _poly_inout(t, 6)


def sept_in(t: float) -> float:
    return _poly_in(t, 7)


def sept_out(t: float) -> float:
    return _poly_out(t, 7)


def sept_inout(t: float) -> float:
    return _poly_inout(t, 7)


def oct_in(t: float) -> float:
    return _poly_in(t, 8)


def oct_out(t: float) -> float:
    return _poly_out(t, 8)


def oct_inout(t: float) -> float:
    return _poly_inout(t, 8)


# Exponential

def expo_in(t: float) -> float:
    if t == 0:
        return 0.0
    return EASE_EXPO_BASE ** (EASE_EXPO_SCALE * t - EASE_EXPO_SCALE)


def expo_out(t: float) -> float:
    if t == 1:
        return 1.0
    return 1 - EASE_EXPO_BASE ** (-EASE_EXPO_SCALE * t)


def expo_inout(t: float) -> float:
    if t == 0:
        return 0.0
    if t == 1:
        return 1.0
    if t < 0.5:
        return EASE_EXPO_BASE ** (2 * EASE_EXPO_SCALE * t - EASE_EXPO_SCALE) / 2
    return (2 - EASE_EXPO_BASE ** (-2 * EASE_EXPO_SCALE * t + EASE_EXPO_SCALE)) / 2


# Circular

def circ_in(t: float) -> float:
    return 1 - math.sqrt(1 - t * t)


def circ_out(t: float) -> float:
    v = t - 1
    return math.sqrt(1 - v * v)


def circ_inout(t: float) -> float:
    if t < 0.5:
        v = 2 * t
        return (1 - math.sqrt(1 - v * v)) / 2
    v = -2 * t + 2
    return (math.sqrt(1 - v * v) + 1) / 2


# Back (overshoot)

def back_in(t: float) -> float:
    return EASE_BACK_C3 * t * t * t - EASE_BACK_C1 * t * t


def back_out(t: float) -> float:
    v = t - 1
    return 1 + EASE_BACK_C3 * v * v * v + EASE_BACK_C1 * v * v


def back_inout(t: float) -> float:
    if t < 0.5:
        v = 2 * t
        return v * v * ((EASE_BACK_C2 + 1) * v - EASE_BACK_C2) / 2
    v = 2 * t - 2
    return (v * v * ((EASE_BACK_C2 + 1) * v + EASE_BACK_C2) + 2) / 2


# Elastic

def elastic_in(t: float) -> float:
    if t == 0:
        return 0.0
    if t == 1:
        return 1.0
    return -(2 ** (10 * t - 10)) * math.sin((t * 10 - 10.75) * EASE_ELASTIC_C4)


def elastic_out(t: float) -> float:
    if t == 0:
        return 0.0
    if t == 1:
        return 1.0
    return 2 ** (-10 * t) * math.sin((t * 10 - 0.75) * EASE_ELASTIC_C4) + 1


def elastic_inout(t: float) -> float:
    if t == 0:
        return 0.0
    if t == 1:
        return 1.0
    if t < 0.5:
        return -(2 ** (20 * t - 10) * math.sin((20 * t - 11.125) * EASE_ELASTIC_C5)) / 2
    return 2 ** (-20 * t + 10) * math.sin((20 * t - 11.125) * EASE_ELASTIC_C5) / 2 + 1


# Bounce

def bounce_out(t: float) -> float:
    n1 = EASE_BOUNCE_N1
    d1 = EASE_BOUNCE_D1
    if t < 1 / d1:
        return n1 * t * t
    if t < 2 / d1:
        t -= 1.5 / d1
        return n1 * t * t + 0.75
    if t < 2.5 / d1:
        t -= 2.25 / d1
        return n1 * t * t + 0.9375
    t -= 2.625 / d1
    return n1 * t * t + 0.984375


def bounce_in(t: float) -> float:
    return 1 - bounce_out(1 - t)


def bounce_inout(t: float) -> float:
    if t < 0.5:
        return (1 - bounce_out(1 - 2 * t)) / 2
    return (1 + bounce_out(2 * t - 1)) / 2


class EaseType(Enum):
    """Names of the available easing curves."""
    LINEAR = "linear"
    STEP = "step"
    SINE_IN = "sine_in"
    SINE_OUT = "sine_out"
    SINE_INOUT = "sine_inout"
    QUAD_IN = "quad_in"
    QUAD_OUT = "quad_out"
    QUAD_INOUT = "quad_inout"
    CUBIC_IN = "cubic_in"
    CUBIC_OUT = "cubic_out"
    CUBIC_INOUT = "cubic_inout"
    QUART_IN = "quart_in"
    QUART_OUT = "quart_out"
    QUART_INOUT = "quart_inout"
    QUINT_IN = "quint_in"
    QUINT_OUT = "quint_out"
    QUINT_INOUT = "quint_inout"
    SEXT_IN = "sext_in"
    SEXT_OUT = "sext_out"
    SEXT_INOUT = "sext_inout"
    SEPT_IN = "sept_in"
    SEPT_OUT = "sept_out"
    SEPT_INOUT = "sept_inout"
    OCT_IN = "oct_in"
    OCT_OUT = "oct_out"
    OCT_INOUT = "oct_inout"
    EXPO_IN = "expo_in"
    EXPO_OUT = "expo_out"
    EXPO_INOUT = "expo_inout"
    CIRC_IN = "circ_in"
    CIRC_OUT = "circ_out"
    CIRC_INOUT = "circ_inout"
    BACK_IN = "back_in"
    BACK_OUT = "back_out"
    BACK_INOUT = "back_inout"
    ELASTIC_IN = "elastic_in"
    ELASTIC_OUT = "elastic_out"
    ELASTIC_INOUT = "elastic_inout"
    BOUNCE_IN = "bounce_in"
    BOUNCE_OUT = "bounce_out"
    BOUNCE_INOUT = "bounce_inout"


EASINGS: Dict[str, EaseFunc] = {
    "linear": linear,
    "step": step,
    "sine_in": sine_in,
    "sine_out": sine_out,
    "sine_inout": sine_inout,
    "quad_in": quad_in,
    "quad_out": quad_out,
    "quad_inout": quad_inout,
    "cubic_in": cubic_in,
    "cubic_out": cubic_out,
    "cubic_inout": cubic_inout,
    "quart_in": quart_in,
    "quart_out": quart_out,
    "quart_inout": quart_inout,
    "quint_in": quint_in,
    "quint_out": quint_out,
    "quint_inout": quint_inout,
    "sext_in": sext_in,
    "sext_out": sext_out,
    "sext_inout": sext_inout,
    "sept_in": sept_in,
    "sept_out": sept_out,
    "sept_inout": sept_inout,
    "oct_in": oct_in,
    "oct_out": oct_out,
    "oct_inout": oct_inout,
    "expo_in": expo_in,
    "expo_out": expo_out,
    "expo_inout": expo_inout,
    "circ_in": circ_in,
    "circ_out": circ_out,
    "circ_inout": circ_inout,
    "back_in": back_in,
    "back_out": back_out,
    "back_inout": back_inout,
    "elastic_in": elastic_in,
    "elastic_out": elastic_out,
    "elastic_inout": elastic_inout,
    "bounce_in": bounce_in,
    "bounce_out": bounce_out,
    "bounce_inout": bounce_inout,
}


def get_easing(name: Union[str, EaseType]) -> EaseFunc:
    """Look up an easing curve by name or EaseType."""
    key = name.value if isinstance(name, EaseType) else name
    try:
        return EASINGS[key]
    except KeyError:
        log(f"[EASE][ERR] Unknown easing {key!r}")
        raise


def ease(name: Union[str, EaseType], t: float) -> float:
    """Evaluate a named easing curve at t."""
    return get_easing(name)(t)


def interpolate(
    a: float,
    b: float,
    t: float,
    easing: Union[str, EaseType, EaseFunc] = EaseType.LINEAR
) -> float:
    """Ease t, then interpolate from a to b (not clamped)."""
    fn = easing if callable(easing) else get_easing(easing)
    return math_utils.interpolate(a, b, fn(t))
