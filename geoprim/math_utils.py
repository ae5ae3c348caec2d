"""Pure math utilities - no external dependencies."""

from __future__ import annotations
import math
from typing import Iterable, List

from .config import DEFAULT_TOLERANCE


def clamp(v: float, a: float, b: float) -> float:
    """Clamp value v to range [a, b]."""
    return a if v < a else b if v > b else v


def interpolate(a: float, b: float, t: float) -> float:
    """Linear interpolation from a to b by factor t (not clamped)."""
    return a + (b - a) * t


def lerp(a: float, b: float, t: float) -> float:
    """Linear interpolation from a to b by factor t (clamped to [0, 1])."""
    t = clamp(t, 0.0, 1.0)
    return a + (b - a) * t


def inverse_lerp(a: float, b: float, value: float) -> float:
    """Factor t such that interpolate(a, b, t) == value."""
    return (value - a) / (b - a)


def is_close(a: float, b: float, tolerance: float = DEFAULT_TOLERANCE) -> bool:
    """Float comparison with combined relative/absolute tolerance."""
    return math.isclose(a, b, rel_tol=tolerance, abs_tol=tolerance)


def pad_or_truncate(values: Iterable[float], size: int, fill: float = 0) -> List[float]:
    """Resize a component sequence: drop trailing values or pad with fill."""
    out = list(values)[:size]
    out.extend([fill] * (size - len(out)))
    return out
