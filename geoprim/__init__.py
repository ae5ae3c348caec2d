"""geoprim - vectors, bounding shapes and easing curves.

Raylib interop lives in geoprim.rl_compat and is imported on demand.
"""

from .types import Axis
from .vectors import VectorBase, Vector2, Vector3, Vector4
from .shapes import (
    BoxBase,
    Rect, Rect2D, Rect3D, Rect4D,
    Area2D, Area3D, Area4D,
    Bounds2D, Bounds3D, Bounds4D,
    BallBase, Circle, Sphere, HyperSphere,
    LineBase, Line2D, Line3D, Line4D,
)
from .conversions import CONVERSIONS, convert
from .easing import EaseType, EASINGS, ease, get_easing
from .logging import get_logger, set_enabled

__version__ = "0.1.0"

__all__ = [
    'Axis',
    'VectorBase',
    'Vector2',
    'Vector3',
    'Vector4',
    'BoxBase',
    'Rect',
    'Rect2D',
    'Rect3D',
    'Rect4D',
    'Area2D',
    'Area3D',
    'Area4D',
    'Bounds2D',
    'Bounds3D',
    'Bounds4D',
    'BallBase',
    'Circle',
    'Sphere',
    'HyperSphere',
    'LineBase',
    'Line2D',
    'Line3D',
    'Line4D',
    'CONVERSIONS',
    'convert',
    'EaseType',
    'EASINGS',
    'ease',
    'get_easing',
    'get_logger',
    'set_enabled',
]
