"""Shape records for geoprim."""

from .box import BoxBase
from .rect import RectBase, Rect, Rect2D, Rect3D, Rect4D
from .area import AreaBase, Area2D, Area3D, Area4D
from .bounds import BoundsBase, Bounds2D, Bounds3D, Bounds4D
from .ball import BallBase, Circle, Sphere, HyperSphere
from .line import LineBase, Line2D, Line3D, Line4D

__all__ = [
    'BoxBase',
    'RectBase',
    'Rect',
    'Rect2D',
    'Rect3D',
    'Rect4D',
    'AreaBase',
    'Area2D',
    'Area3D',
    'Area4D',
    'BoundsBase',
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
]
