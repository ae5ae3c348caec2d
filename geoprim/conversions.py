"""Explicit conversions between shape representations and dimensions.

Every legal conversion is a named function listed in CONVERSIONS, keyed by
(source type, target type). Narrowing drops trailing axes; widening pads
the new axes with zero on every stored field. Conversions that change both
representation and dimension first change the dimension, then the
representation.
"""

from __future__ import annotations
from typing import Any, Callable, Dict, Tuple, Type

from .math_utils import pad_or_truncate
from .vectors import VectorBase
from .logging import log
from .shapes.box import BoxBase
from .shapes.rect import RectBase, Rect, Rect3D, Rect4D
from .shapes.area import AreaBase, Area2D, Area3D, Area4D
from .shapes.bounds import BoundsBase, Bounds2D, Bounds3D, Bounds4D
from .shapes.ball import BallBase, Circle, Sphere, HyperSphere
from .shapes.line import LineBase, Line2D, Line3D, Line4D

Converter = Callable[[Any], Any]

_RECTS: Dict[int, Type[RectBase]] = {2: Rect, 3: Rect3D, 4: Rect4D}
_AREAS: Dict[int, Type[AreaBase]] = {2: Area2D, 3: Area3D, 4: Area4D}
_BOUNDS: Dict[int, Type[BoundsBase]] = {2: Bounds2D, 3: Bounds3D, 4: Bounds4D}
_BALLS: Dict[int, Type[BallBase]] = {2: Circle, 3: Sphere, 4: HyperSphere}
_LINES: Dict[int, Type[LineBase]] = {2: Line2D, 3: Line3D, 4: Line4D}

_FAMILIES = (
    (RectBase, _RECTS),
    (AreaBase, _AREAS),
    (BoundsBase, _BOUNDS),
    (BallBase, _BALLS),
    (LineBase, _LINES),
)


def _lookup(table: Dict[int, type], dimension: int) -> Any:
    try:
        return table[dimension]
    except KeyError:
        raise IndexError(f"unsupported dimension: {dimension!r}") from None


def rect_type(dimension: int) -> Type[RectBase]:
    return _lookup(_RECTS, dimension)


def area_type(dimension: int) -> Type[AreaBase]:
    return _lookup(_AREAS, dimension)


def bounds_type(dimension: int) -> Type[BoundsBase]:
    return _lookup(_BOUNDS, dimension)


def ball_type(dimension: int) -> Type[BallBase]:
    return _lookup(_BALLS, dimension)


def line_type(dimension: int) -> Type[LineBase]:
    return _lookup(_LINES, dimension)


def same_kind(cls: type, dimension: int) -> type:
    """The type of the same shape kind in another dimension."""
    for base, table in _FAMILIES:
        if issubclass(cls, base):
            return _lookup(table, dimension)
    raise TypeError(f"{cls.__name__} is not a geoprim shape")


# ----------------------------------------------------------------------
# Building blocks
# ----------------------------------------------------------------------

def _resized(vector: VectorBase, target: Type[VectorBase]) -> VectorBase:
    return target(*pad_or_truncate(vector.to_tuple(), target.dimension()))


def _rect_to_area(rect: RectBase, target: Type[AreaBase]) -> AreaBase:
    return target(rect.get_position(), rect.get_max_corner())


def _area_to_rect(area: AreaBase, target: Type[RectBase]) -> RectBase:
    return target.new_vectors(area.lower_left, area.upper_right - area.lower_left)


def _bounds_to_area(bounds: BoundsBase, target: Type[AreaBase]) -> AreaBase:
    return target(bounds.center - bounds.extents, bounds.center + bounds.extents)


def _area_to_bounds(area: AreaBase, target: Type[BoundsBase]) -> BoundsBase:
    return target(area.get_center(), (area.upper_right - area.lower_left) / 2)


def _rect_to_bounds(rect: RectBase, target: Type[BoundsBase]) -> BoundsBase:
    return target(rect.get_center(), rect.get_size() / 2)


def _bounds_to_rect(bounds: BoundsBase, target: Type[RectBase]) -> RectBase:
    return target.new_vectors(bounds.center - bounds.extents, bounds.extents + bounds.extents)


def _resize_rect(rect: RectBase, target: Type[RectBase]) -> RectBase:
    return target.new_vectors(_resized(rect.get_position(), target.VECTOR), _resized(rect.get_size(), target.VECTOR))


def _resize_area(area: AreaBase, target: Type[AreaBase]) -> AreaBase:
    return target(_resized(area.lower_left, target.VECTOR), _resized(area.upper_right, target.VECTOR))


def _resize_bounds(bounds: BoundsBase, target: Type[BoundsBase]) -> BoundsBase:
    return target(_resized(bounds.center, target.VECTOR), _resized(bounds.extents, target.VECTOR))


def _resize_ball(ball: BallBase, target: Type[BallBase]) -> BallBase:
    return target(_resized(ball.center, target.VECTOR), ball.radius)


def _resize_line(line: LineBase, target: Type[LineBase]) -> LineBase:
    return target(_resized(line.start, target.VECTOR), _resized(line.end, target.VECTOR))


def _ball_to_bounds(ball: BallBase, target: Type[BoundsBase]) -> BoundsBase:
    return target(ball.center.copy(), target.VECTOR(*([ball.radius] * target.DIMENSION)))


def _ball_to_area(ball: BallBase, target: Type[AreaBase]) -> AreaBase:
    r = target.VECTOR(*([ball.radius] * target.DIMENSION))
    return target(ball.center - r, ball.center + r)


def _ball_to_rect(ball: BallBase, target: Type[RectBase]) -> RectBase:
    r = target.VECTOR(*([ball.radius] * target.DIMENSION))
    return target.new_vectors(ball.center - r, r + r)


def _box_to_ball(box: BoxBase, target: Type[BallBase]) -> BallBase:
    """Inscribed ball: centered on the box, radius half the smallest side."""
    return target(box.get_center(), min(box.get_size().to_tuple()) / 2)


def _line_to_area(line: LineBase, target: Type[AreaBase]) -> AreaBase:
    vector = target.VECTOR
    return target(vector.min(line.start, line.end), vector.max(line.start, line.end))


def _chain(first: Converter, second: Converter) -> Converter:
    """Dimension change followed by a representation change."""
    def converter(value: Any) -> Any:
        return second(first(value))
    converter.__name__ = f"{first.__name__}_then_{second.__name__}"
    return converter


# ----------------------------------------------------------------------
# Representation changes within a dimension
# ----------------------------------------------------------------------

def rect2d_to_area2d(rect: Rect) -> Area2D:
    return _rect_to_area(rect, Area2D)


def rect3d_to_area3d(rect: Rect3D) -> Area3D:
    return _rect_to_area(rect, Area3D)


def rect4d_to_area4d(rect: Rect4D) -> Area4D:
    return _rect_to_area(rect, Area4D)


def area2d_to_rect2d(area: Area2D) -> Rect:
    return _area_to_rect(area, Rect)


def area3d_to_rect3d(area: Area3D) -> Rect3D:
    return _area_to_rect(area, Rect3D)


def area4d_to_rect4d(area: Area4D) -> Rect4D:
    return _area_to_rect(area, Rect4D)


def bounds2d_to_area2d(bounds: Bounds2D) -> Area2D:
    return _bounds_to_area(bounds, Area2D)


def bounds3d_to_area3d(bounds: Bounds3D) -> Area3D:
    return _bounds_to_area(bounds, Area3D)


def bounds4d_to_area4d(bounds: Bounds4D) -> Area4D:
    return _bounds_to_area(bounds, Area4D)


def area2d_to_bounds2d(area: Area2D) -> Bounds2D:
    return _area_to_bounds(area, Bounds2D)


def area3d_to_bounds3d(area: Area3D) -> Bounds3D:
    return _area_to_bounds(area, Bounds3D)


def area4d_to_bounds4d(area: Area4D) -> Bounds4D:
    return _area_to_bounds(area, Bounds4D)


def rect2d_to_bounds2d(rect: Rect) -> Bounds2D:
    return _rect_to_bounds(rect, Bounds2D)


def rect3d_to_bounds3d(rect: Rect3D) -> Bounds3D:
    return _rect_to_bounds(rect, Bounds3D)


def rect4d_to_bounds4d(rect: Rect4D) -> Bounds4D:
    return _rect_to_bounds(rect, Bounds4D)


def bounds2d_to_rect2d(bounds: Bounds2D) -> Rect:
    return _bounds_to_rect(bounds, Rect)


def bounds3d_to_rect3d(bounds: Bounds3D) -> Rect3D:
    return _bounds_to_rect(bounds, Rect3D)


def bounds4d_to_rect4d(bounds: Bounds4D) -> Rect4D:
    return _bounds_to_rect(bounds, Rect4D)


# ----------------------------------------------------------------------
# Dimension changes within a representation
# ----------------------------------------------------------------------

def rect2d_to_rect3d(rect: Rect) -> Rect3D:
    return _resize_rect(rect, Rect3D)


def rect2d_to_rect4d(rect: Rect) -> Rect4D:
    return _resize_rect(rect, Rect4D)


def rect3d_to_rect2d(rect: Rect3D) -> Rect:
    return _resize_rect(rect, Rect)


def rect3d_to_rect4d(rect: Rect3D) -> Rect4D:
    return _resize_rect(rect, Rect4D)


def rect4d_to_rect2d(rect: Rect4D) -> Rect:
    return _resize_rect(rect, Rect)


def rect4d_to_rect3d(rect: Rect4D) -> Rect3D:
    return _resize_rect(rect, Rect3D)


def area2d_to_area3d(area: Area2D) -> Area3D:
    return _resize_area(area, Area3D)


def area2d_to_area4d(area: Area2D) -> Area4D:
    return _resize_area(area, Area4D)


def area3d_to_area2d(area: Area3D) -> Area2D:
    return _resize_area(area, Area2D)


def area3d_to_area4d(area: Area3D) -> Area4D:
    return _resize_area(area, Area4D)


def area4d_to_area2d(area: Area4D) -> Area2D:
    return _resize_area(area, Area2D)


def area4d_to_area3d(area: Area4D) -> Area3D:
    return _resize_area(area, Area3D)


def bounds2d_to_bounds3d(bounds: Bounds2D) -> Bounds3D:
    return _resize_bounds(bounds, Bounds3D)


def bounds2d_to_bounds4d(bounds: Bounds2D) -> Bounds4D:
    return _resize_bounds(bounds, Bounds4D)


def bounds3d_to_bounds2d(bounds: Bounds3D) -> Bounds2D:
    return _resize_bounds(bounds, Bounds2D)


def bounds3d_to_bounds4d(bounds: Bounds3D) -> Bounds4D:
    return _resize_bounds(bounds, Bounds4D)


def bounds4d_to_bounds2d(bounds: Bounds4D) -> Bounds2D:
    return _resize_bounds(bounds, Bounds2D)


def bounds4d_to_bounds3d(bounds: Bounds4D) -> Bounds3D:
    return _resize_bounds(bounds, Bounds3D)


# ----------------------------------------------------------------------
# Balls
# ----------------------------------------------------------------------

def circle_to_sphere(circle: Circle) -> Sphere:
    return _resize_ball(circle, Sphere)


def circle_to_hypersphere(circle: Circle) -> HyperSphere:
    return _resize_ball(circle, HyperSphere)


def sphere_to_circle(sphere: Sphere) -> Circle:
    return _resize_ball(sphere, Circle)


def sphere_to_hypersphere(sphere: Sphere) -> HyperSphere:
    return _resize_ball(sphere, HyperSphere)


def hypersphere_to_circle(hypersphere: HyperSphere) -> Circle:
    return _resize_ball(hypersphere, Circle)


def hypersphere_to_sphere(hypersphere: HyperSphere) -> Sphere:
    return _resize_ball(hypersphere, Sphere)


def circle_to_bounds2d(circle: Circle) -> Bounds2D:
    return _ball_to_bounds(circle, Bounds2D)


def sphere_to_bounds3d(sphere: Sphere) -> Bounds3D:
    return _ball_to_bounds(sphere, Bounds3D)


def hypersphere_to_bounds4d(hypersphere: HyperSphere) -> Bounds4D:
    return _ball_to_bounds(hypersphere, Bounds4D)


def circle_to_area2d(circle: Circle) -> Area2D:
    return _ball_to_area(circle, Area2D)


def sphere_to_area3d(sphere: Sphere) -> Area3D:
    return _ball_to_area(sphere, Area3D)


def hypersphere_to_area4d(hypersphere: HyperSphere) -> Area4D:
    return _ball_to_area(hypersphere, Area4D)


def circle_to_rect2d(circle: Circle) -> Rect:
    return _ball_to_rect(circle, Rect)


def sphere_to_rect3d(sphere: Sphere) -> Rect3D:
    return _ball_to_rect(sphere, Rect3D)


def hypersphere_to_rect4d(hypersphere: HyperSphere) -> Rect4D:
    return _ball_to_rect(hypersphere, Rect4D)


def rect2d_to_circle(rect: Rect) -> Circle:
    return _box_to_ball(rect, Circle)


def area2d_to_circle(area: Area2D) -> Circle:
    return _box_to_ball(area, Circle)


def bounds2d_to_circle(bounds: Bounds2D) -> Circle:
    return _box_to_ball(bounds, Circle)


def rect3d_to_sphere(rect: Rect3D) -> Sphere:
    return _box_to_ball(rect, Sphere)


def area3d_to_sphere(area: Area3D) -> Sphere:
    return _box_to_ball(area, Sphere)


def bounds3d_to_sphere(bounds: Bounds3D) -> Sphere:
    return _box_to_ball(bounds, Sphere)


def rect4d_to_hypersphere(rect: Rect4D) -> HyperSphere:
    return _box_to_ball(rect, HyperSphere)


def area4d_to_hypersphere(area: Area4D) -> HyperSphere:
    return _box_to_ball(area, HyperSphere)


def bounds4d_to_hypersphere(bounds: Bounds4D) -> HyperSphere:
    return _box_to_ball(bounds, HyperSphere)


# ----------------------------------------------------------------------
# Lines
# ----------------------------------------------------------------------

def line2d_to_line3d(line: Line2D) -> Line3D:
    return _resize_line(line, Line3D)


def line2d_to_line4d(line: Line2D) -> Line4D:
    return _resize_line(line, Line4D)


def line3d_to_line2d(line: Line3D) -> Line2D:
    return _resize_line(line, Line2D)


def line3d_to_line4d(line: Line3D) -> Line4D:
    return _resize_line(line, Line4D)


def line4d_to_line2d(line: Line4D) -> Line2D:
    return _resize_line(line, Line2D)


def line4d_to_line3d(line: Line4D) -> Line3D:
    return _resize_line(line, Line3D)


def line2d_to_area2d(line: Line2D) -> Area2D:
    return _line_to_area(line, Area2D)


def line3d_to_area3d(line: Line3D) -> Area3D:
    return _line_to_area(line, Area3D)


def line4d_to_area4d(line: Line4D) -> Area4D:
    return _line_to_area(line, Area4D)


# ----------------------------------------------------------------------
# Table
# ----------------------------------------------------------------------

CONVERSIONS: Dict[Tuple[type, type], Converter] = {
    # 2D representation changes
    (Rect, Area2D): rect2d_to_area2d,
    (Rect, Bounds2D): rect2d_to_bounds2d,
    (Area2D, Rect): area2d_to_rect2d,
    (Area2D, Bounds2D): area2d_to_bounds2d,
    (Bounds2D, Rect): bounds2d_to_rect2d,
    (Bounds2D, Area2D): bounds2d_to_area2d,
    # 3D representation changes
    (Rect3D, Area3D): rect3d_to_area3d,
    (Rect3D, Bounds3D): rect3d_to_bounds3d,
    (Area3D, Rect3D): area3d_to_rect3d,
    (Area3D, Bounds3D): area3d_to_bounds3d,
    (Bounds3D, Rect3D): bounds3d_to_rect3d,
    (Bounds3D, Area3D): bounds3d_to_area3d,
    # 4D representation changes
    (Rect4D, Area4D): rect4d_to_area4d,
    (Rect4D, Bounds4D): rect4d_to_bounds4d,
    (Area4D, Rect4D): area4d_to_rect4d,
    (Area4D, Bounds4D): area4d_to_bounds4d,
    (Bounds4D, Rect4D): bounds4d_to_rect4d,
    (Bounds4D, Area4D): bounds4d_to_area4d,
    # Rect dimension changes
    (Rect, Rect3D): rect2d_to_rect3d,
    (Rect, Rect4D): rect2d_to_rect4d,
    (Rect3D, Rect): rect3d_to_rect2d,
    (Rect3D, Rect4D): rect3d_to_rect4d,
    (Rect4D, Rect): rect4d_to_rect2d,
    (Rect4D, Rect3D): rect4d_to_rect3d,
    # Area dimension changes
    (Area2D, Area3D): area2d_to_area3d,
    (Area2D, Area4D): area2d_to_area4d,
    (Area3D, Area2D): area3d_to_area2d,
    (Area3D, Area4D): area3d_to_area4d,
    (Area4D, Area2D): area4d_to_area2d,
    (Area4D, Area3D): area4d_to_area3d,
    # Bounds dimension changes
    (Bounds2D, Bounds3D): bounds2d_to_bounds3d,
    (Bounds2D, Bounds4D): bounds2d_to_bounds4d,
    (Bounds3D, Bounds2D): bounds3d_to_bounds2d,
    (Bounds3D, Bounds4D): bounds3d_to_bounds4d,
    (Bounds4D, Bounds2D): bounds4d_to_bounds2d,
    (Bounds4D, Bounds3D): bounds4d_to_bounds3d,
    # Rect across dimensions
    (Rect, Area3D): _chain(rect2d_to_rect3d, rect3d_to_area3d),
    (Rect, Area4D): _chain(rect2d_to_rect4d, rect4d_to_area4d),
    (Rect, Bounds3D): _chain(rect2d_to_rect3d, rect3d_to_bounds3d),
    (Rect, Bounds4D): _chain(rect2d_to_rect4d, rect4d_to_bounds4d),
    (Rect3D, Area2D): _chain(rect3d_to_rect2d, rect2d_to_area2d),
    (Rect3D, Area4D): _chain(rect3d_to_rect4d, rect4d_to_area4d),
    (Rect3D, Bounds2D): _chain(rect3d_to_rect2d, rect2d_to_bounds2d),
    (Rect3D, Bounds4D): _chain(rect3d_to_rect4d, rect4d_to_bounds4d),
    (Rect4D, Area2D): _chain(rect4d_to_rect2d, rect2d_to_area2d),
    (Rect4D, Area3D): _chain(rect4d_to_rect3d, rect3d_to_area3d),
    (Rect4D, Bounds2D): _chain(rect4d_to_rect2d, rect2d_to_bounds2d),
    (Rect4D, Bounds3D): _chain(rect4d_to_rect3d, rect3d_to_bounds3d),
    # Area across dimensions
    (Area2D, Rect3D): _chain(area2d_to_area3d, area3d_to_rect3d),
    (Area2D, Rect4D): _chain(area2d_to_area4d, area4d_to_rect4d),
    (Area2D, Bounds3D): _chain(area2d_to_area3d, area3d_to_bounds3d),
    (Area2D, Bounds4D): _chain(area2d_to_area4d, area4d_to_bounds4d),
    (Area3D, Rect): _chain(area3d_to_area2d, area2d_to_rect2d),
    (Area3D, Rect4D): _chain(area3d_to_area4d, area4d_to_rect4d),
    (Area3D, Bounds2D): _chain(area3d_to_area2d, area2d_to_bounds2d),
    (Area3D, Bounds4D): _chain(area3d_to_area4d, area4d_to_bounds4d),
    (Area4D, Rect): _chain(area4d_to_area2d, area2d_to_rect2d),
    (Area4D, Rect3D): _chain(area4d_to_area3d, area3d_to_rect3d),
    (Area4D, Bounds2D): _chain(area4d_to_area2d, area2d_to_bounds2d),
    (Area4D, Bounds3D): _chain(area4d_to_area3d, area3d_to_bounds3d),
    # Bounds across dimensions
    (Bounds2D, Rect3D): _chain(bounds2d_to_bounds3d, bounds3d_to_rect3d),
    (Bounds2D, Rect4D): _chain(bounds2d_to_bounds4d, bounds4d_to_rect4d),
    (Bounds2D, Area3D): _chain(bounds2d_to_bounds3d, bounds3d_to_area3d),
    (Bounds2D, Area4D): _chain(bounds2d_to_bounds4d, bounds4d_to_area4d),
    (Bounds3D, Rect): _chain(bounds3d_to_bounds2d, bounds2d_to_rect2d),
    (Bounds3D, Rect4D): _chain(bounds3d_to_bounds4d, bounds4d_to_rect4d),
    (Bounds3D, Area2D): _chain(bounds3d_to_bounds2d, bounds2d_to_area2d),
    (Bounds3D, Area4D): _chain(bounds3d_to_bounds4d, bounds4d_to_area4d),
    (Bounds4D, Rect): _chain(bounds4d_to_bounds2d, bounds2d_to_rect2d),
    (Bounds4D, Rect3D): _chain(bounds4d_to_bounds3d, bounds3d_to_rect3d),
    (Bounds4D, Area2D): _chain(bounds4d_to_bounds2d, bounds2d_to_area2d),
    (Bounds4D, Area3D): _chain(bounds4d_to_bounds3d, bounds3d_to_area3d),
    # Balls across dimensions
    (Circle, Sphere): circle_to_sphere,
    (Circle, HyperSphere): circle_to_hypersphere,
    (Sphere, Circle): sphere_to_circle,
    (Sphere, HyperSphere): sphere_to_hypersphere,
    (HyperSphere, Circle): hypersphere_to_circle,
    (HyperSphere, Sphere): hypersphere_to_sphere,
    # Balls to their bounding boxes
    (Circle, Bounds2D): circle_to_bounds2d,
    (Circle, Area2D): circle_to_area2d,
    (Circle, Rect): circle_to_rect2d,
    (Sphere, Bounds3D): sphere_to_bounds3d,
    (Sphere, Area3D): sphere_to_area3d,
    (Sphere, Rect3D): sphere_to_rect3d,
    (HyperSphere, Bounds4D): hypersphere_to_bounds4d,
    (HyperSphere, Area4D): hypersphere_to_area4d,
    (HyperSphere, Rect4D): hypersphere_to_rect4d,
    # Boxes to their inscribed balls
    (Rect, Circle): rect2d_to_circle,
    (Area2D, Circle): area2d_to_circle,
    (Bounds2D, Circle): bounds2d_to_circle,
    (Rect3D, Sphere): rect3d_to_sphere,
    (Area3D, Sphere): area3d_to_sphere,
    (Bounds3D, Sphere): bounds3d_to_sphere,
    (Rect4D, HyperSphere): rect4d_to_hypersphere,
    (Area4D, HyperSphere): area4d_to_hypersphere,
    (Bounds4D, HyperSphere): bounds4d_to_hypersphere,
    # Lines
    (Line2D, Line3D): line2d_to_line3d,
    (Line2D, Line4D): line2d_to_line4d,
    (Line3D, Line2D): line3d_to_line2d,
    (Line3D, Line4D): line3d_to_line4d,
    (Line4D, Line2D): line4d_to_line2d,
    (Line4D, Line3D): line4d_to_line3d,
    (Line2D, Area2D): line2d_to_area2d,
    (Line3D, Area3D): line3d_to_area3d,
    (Line4D, Area4D): line4d_to_area4d,
}


def get_converter(source: type, target: type) -> Converter:
    """Look up the conversion function for an ordered pair of types."""
    try:
        return CONVERSIONS[(source, target)]
    except KeyError:
        log(f"[CONV][ERR] No conversion from {source.__name__} to {target.__name__}")
        raise TypeError(f"cannot convert {source.__name__} to {target.__name__}") from None


def convert(value: Any, target: type) -> Any:
    """Convert a shape to another type, always producing a fresh value."""
    source = type(value)
    if source is target:
        return value.copy()
    return get_converter(source, target)(value)
