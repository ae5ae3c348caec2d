"""Shared behaviour of the axis-aligned box representations.

Rect, Area and Bounds each store a box differently. Subclasses provide the
six per-axis primitives (min, max and size getters/setters) plus center
access; everything else here is written against those primitives, so the
predicates agree whichever representation is involved.
"""

from __future__ import annotations
from typing import TYPE_CHECKING, Any, Type, TypeVar

from ..config import AXIS_NAMES
from ..types import Axis
from ..vectors import VectorBase
from ..logging import log
from ..math_utils import clamp

if TYPE_CHECKING:
    from .ball import BallBase, Circle, Sphere, HyperSphere

B = TypeVar("B", bound="BoxBase")


class BoxBase:
    """Axis-aligned box of a fixed dimension."""

    DIMENSION: int = 0
    VECTOR: Type[VectorBase] = VectorBase

    # ------------------------------------------------------------------
    # Primitives implemented by each representation
    # ------------------------------------------------------------------

    def get_min(self, axis: int) -> Any:
        raise NotImplementedError

    def set_min(self, axis: int, value: Any) -> None:
        raise NotImplementedError

    def get_max(self, axis: int) -> Any:
        raise NotImplementedError

    def set_max(self, axis: int, value: Any) -> None:
        raise NotImplementedError

    def get_axis_size(self, axis: int) -> Any:
        raise NotImplementedError

    def set_axis_size(self, axis: int, value: Any) -> None:
        raise NotImplementedError

    def get_center(self) -> VectorBase:
        raise NotImplementedError

    def set_center(self, center: VectorBase) -> None:
        raise NotImplementedError

    def copy(self: B) -> B:
        raise NotImplementedError

    def contains(self, point: VectorBase) -> bool:
        raise NotImplementedError

    # ------------------------------------------------------------------
    # Derived accessors
    # ------------------------------------------------------------------

    def _axis(self, axis: int) -> int:
        if isinstance(axis, int) and 0 <= axis < self.DIMENSION:
            return int(axis)
        log(f"[BOX][ERR] Axis {axis!r} out of range for {type(self).__name__}")
        axes = ", ".join(AXIS_NAMES[:self.DIMENSION])
        raise IndexError(f"{type(self).__name__} has no axis {axis!r} (axes: {axes})")

    def _axes(self) -> range:
        return range(self.DIMENSION)

    def get_min_corner(self) -> VectorBase:
        return self.VECTOR(*(self.get_min(a) for a in self._axes()))

    def get_max_corner(self) -> VectorBase:
        return self.VECTOR(*(self.get_max(a) for a in self._axes()))

    def get_size(self) -> VectorBase:
        return self.VECTOR(*(self.get_axis_size(a) for a in self._axes()))

    def set_size(self, size: VectorBase) -> None:
        """Set the size on every axis using this representation's resize rule."""
        for a in self._axes():
            self.set_axis_size(a, size[a])

    def volume(self) -> Any:
        """Product of the (signed) sizes; the area for 2D boxes."""
        result = 1
        for a in self._axes():
            result = result * self.get_axis_size(a)
        return result

    # ------------------------------------------------------------------
    # Predicates
    # ------------------------------------------------------------------

    def _contains_inclusive(self, point: VectorBase) -> bool:
        for a in self._axes():
            if not (point[a] >= self.get_min(a) and point[a] <= self.get_max(a)):
                return False
        return True

    def _contains_exclusive(self, point: VectorBase) -> bool:
        for a in self._axes():
            if not (self.get_min(a) < point[a] and self.get_max(a) > point[a]):
                return False
        return True

    def overlaps(self, other: BoxBase) -> bool:
        """Separating-axis test; boxes that only touch do not overlap."""
        if type(other) is not type(self):
            raise TypeError(f"{type(self).__name__}.overlaps expects {type(self).__name__}, got {type(other).__name__}")
        for a in self._axes():
            if not (self.get_min(a) < other.get_max(a) and self.get_max(a) > other.get_min(a)):
                return False
        return True

    def _overlaps_converted(self, other: BoxBase) -> bool:
        if other.DIMENSION != self.DIMENSION:
            raise TypeError(f"cannot test {type(self).__name__} against {type(other).__name__}")
        from ..conversions import convert
        return self.overlaps(convert(other, type(self)))

    def overlaps_rect(self, rect: BoxBase) -> bool:
        return self._overlaps_converted(rect)

    def overlaps_area(self, area: BoxBase) -> bool:
        return self._overlaps_converted(area)

    def overlaps_bounds(self, bounds: BoxBase) -> bool:
        return self._overlaps_converted(bounds)

    def overlaps_ball(self, ball: BallBase) -> bool:
        """Clamp the ball center into the box and compare squared distance."""
        if ball.DIMENSION != self.DIMENSION:
            raise TypeError(f"cannot test {type(self).__name__} against {type(ball).__name__}")
        distance_squared = 0
        for a in self._axes():
            c = ball.center[a]
            nearest = clamp(c, self.get_min(a), self.get_max(a))
            d = nearest - c
            distance_squared = distance_squared + d * d
        return distance_squared <= ball.radius * ball.radius

    # ------------------------------------------------------------------
    # Growth
    # ------------------------------------------------------------------

    def encapsulate(self, point: VectorBase) -> None:
        """Grow the box in place so it contains point."""
        for a in self._axes():
            lo = self.get_min(a)
            hi = self.get_max(a)
            if point[a] < lo:
                lo = point[a]
            if point[a] > hi:
                hi = point[a]
            self._set_span(a, lo, hi)

    def union(self: B, other: BoxBase) -> B:
        """Smallest box of this type covering both boxes."""
        from ..conversions import convert
        other = convert(other, type(self))
        result = self.copy()
        for a in self._axes():
            lo = min(self.get_min(a), other.get_min(a))
            hi = max(self.get_max(a), other.get_max(a))
            result._set_span(a, lo, hi)
        return result

    def _set_span(self, axis: int, lo: Any, hi: Any) -> None:
        """Place the box exactly on [lo, hi] along an axis."""
        raise NotImplementedError

    # ------------------------------------------------------------------
    # Conversions
    # ------------------------------------------------------------------

    def to_rect(self) -> BoxBase:
        from ..conversions import convert, rect_type
        return convert(self, rect_type(self.DIMENSION))

    def to_area(self) -> BoxBase:
        from ..conversions import convert, area_type
        return convert(self, area_type(self.DIMENSION))

    def to_bounds(self) -> BoxBase:
        from ..conversions import convert, bounds_type
        return convert(self, bounds_type(self.DIMENSION))

    def _to_dimension(self, dimension: int) -> BoxBase:
        from ..conversions import convert, same_kind
        return convert(self, same_kind(type(self), dimension))

    def to_2d(self) -> BoxBase:
        """Same representation in 2D (extra axes dropped)."""
        return self._to_dimension(2)

    def to_3d(self) -> BoxBase:
        return self._to_dimension(3)

    def to_4d(self) -> BoxBase:
        return self._to_dimension(4)

    @classmethod
    def _from_any(cls: Type[B], box: Any) -> B:
        from ..conversions import convert
        return convert(box, cls)

    @classmethod
    def from_rect(cls: Type[B], rect: BoxBase) -> B:
        return cls._from_any(rect)

    @classmethod
    def from_area(cls: Type[B], area: BoxBase) -> B:
        return cls._from_any(area)

    @classmethod
    def from_bounds(cls: Type[B], bounds: BoxBase) -> B:
        return cls._from_any(bounds)


class _PlanarAxes:
    """Named accessors for the x and y axes."""

    def get_x_min(self) -> Any:
        return self.get_min(Axis.X)

    def set_x_min(self, x_min: Any) -> None:
        self.set_min(Axis.X, x_min)

    def get_x_max(self) -> Any:
        return self.get_max(Axis.X)

    def set_x_max(self, x_max: Any) -> None:
        self.set_max(Axis.X, x_max)

    def get_y_min(self) -> Any:
        return self.get_min(Axis.Y)

    def set_y_min(self, y_min: Any) -> None:
        self.set_min(Axis.Y, y_min)

    def get_y_max(self) -> Any:
        return self.get_max(Axis.Y)

    def set_y_max(self, y_max: Any) -> None:
        self.set_max(Axis.Y, y_max)

    def get_width(self) -> Any:
        return self.get_axis_size(Axis.X)

    def set_width(self, width: Any) -> None:
        self.set_axis_size(Axis.X, width)

    def get_height(self) -> Any:
        return self.get_axis_size(Axis.Y)

    def set_height(self, height: Any) -> None:
        self.set_axis_size(Axis.Y, height)


class _SpatialAxes(_PlanarAxes):
    """Adds the z axis."""

    def get_z_min(self) -> Any:
        return self.get_min(Axis.Z)

    def set_z_min(self, z_min: Any) -> None:
        self.set_min(Axis.Z, z_min)

    def get_z_max(self) -> Any:
        return self.get_max(Axis.Z)

    def set_z_max(self, z_max: Any) -> None:
        self.set_max(Axis.Z, z_max)

    def get_depth(self) -> Any:
        return self.get_axis_size(Axis.Z)

    def set_depth(self, depth: Any) -> None:
        self.set_axis_size(Axis.Z, depth)


class _HyperAxes(_SpatialAxes):
    """Adds the w axis; its size is called span."""

    def get_w_min(self) -> Any:
        return self.get_min(Axis.W)

    def set_w_min(self, w_min: Any) -> None:
        self.set_min(Axis.W, w_min)

    def get_w_max(self) -> Any:
        return self.get_max(Axis.W)

    def set_w_max(self, w_max: Any) -> None:
        self.set_max(Axis.W, w_max)

    def get_span(self) -> Any:
        return self.get_axis_size(Axis.W)

    def set_span(self, span: Any) -> None:
        self.set_axis_size(Axis.W, span)


class Axes2D(_PlanarAxes):
    def overlaps_circle(self, circle: Circle) -> bool:
        return self.overlaps_ball(circle)


class Axes3D(_SpatialAxes):
    def overlaps_sphere(self, sphere: Sphere) -> bool:
        return self.overlaps_ball(sphere)


class Axes4D(_HyperAxes):
    def overlaps_hypersphere(self, hypersphere: HyperSphere) -> bool:
        return self.overlaps_ball(hypersphere)
