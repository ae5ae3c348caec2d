"""Raylib interop - converts geoprim values to and from raylib structs.

Works with either raylibpy or python-raylib; install one through the
``raylib`` extra. Raylib structs are float32, so values read back may
differ from the originals in the last bits.
"""

from __future__ import annotations
import ctypes
from typing import Any

from .vectors import Vector2
from .shapes.rect import Rect
from .shapes.ball import Circle
from .logging import log

# Try to import raylib
try:
    import raylibpy as rl
    RL_VERSION = "raylibpy"
except ImportError:
    import raylib as rl
    RL_VERSION = "python-raylib"


class _CTypesRect(ctypes.Structure):
    """Fallback Rectangle structure for ctypes."""
    _fields_ = [
        ("x", ctypes.c_float),
        ("y", ctypes.c_float),
        ("width", ctypes.c_float),
        ("height", ctypes.c_float),
    ]


class _CTypesVec2(ctypes.Structure):
    """Fallback Vector2 structure for ctypes."""
    _fields_ = [
        ("x", ctypes.c_float),
        ("y", ctypes.c_float),
    ]


def make_rect(rect: Rect) -> Any:
    """Create a raylib Rectangle from a Rect."""
    x, y, w, h = float(rect.x), float(rect.y), float(rect.width), float(rect.height)
    if hasattr(rl, 'Rectangle'):
        try:
            return rl.Rectangle(x, y, w, h)
        except TypeError as e:
            log(f"[RL] Rectangle constructor rejected args: {e!r}")
    if hasattr(rl, 'ffi'):
        r = rl.ffi.new("Rectangle *")
        r[0].x = x
        r[0].y = y
        r[0].width = w
        r[0].height = h
        return r[0]
    return _CTypesRect(x, y, w, h)


def make_vec2(vector: Vector2) -> Any:
    """Create a raylib Vector2 from a Vector2."""
    x, y = float(vector.x), float(vector.y)
    if hasattr(rl, 'Vector2'):
        try:
            return rl.Vector2(x, y)
        except TypeError as e:
            log(f"[RL] Vector2 constructor rejected args: {e!r}")
    if hasattr(rl, 'ffi'):
        v = rl.ffi.new("Vector2 *")
        v[0].x = x
        v[0].y = y
        return v[0]
    return _CTypesVec2(x, y)


def rect_from_rl(rl_rect: Any) -> Rect:
    """Read any Rectangle-like struct (x, y, width, height) into a Rect."""
    return Rect(float(rl_rect.x), float(rl_rect.y), float(rl_rect.width), float(rl_rect.height))


def vec2_from_rl(rl_vec: Any) -> Vector2:
    """Read any Vector2-like struct (x, y) into a Vector2."""
    return Vector2(float(rl_vec.x), float(rl_vec.y))


def circle_args(circle: Circle) -> tuple:
    """(center Vector2, radius) pair as raylib's circle functions take them."""
    return make_vec2(circle.center), float(circle.radius)


__all__ = [
    'rl',
    'RL_VERSION',
    'make_rect',
    'make_vec2',
    'rect_from_rl',
    'vec2_from_rl',
    'circle_args',
]
