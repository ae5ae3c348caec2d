"""Ball shapes - Circle, Sphere and HyperSphere.

A ball is a center and a radius. The radius is not validated: distance
tests square it, while diameter and the measure setters keep its sign.
"""

from __future__ import annotations
import math
from dataclasses import dataclass, field
from typing import Any, Type, TypeVar

from ..config import PI
from ..types import Number
from ..vectors import Vector2, Vector3, Vector4, VectorBase
from .box import BoxBase

S = TypeVar("S", bound="BallBase")


def _cbrt(v: float) -> float:
    """Real cube root, keeping the sign of v."""
    return math.copysign(abs(v) ** (1.0 / 3.0), v)


class BallBase:
    """Center + radius region of a fixed dimension."""

    DIMENSION: int = 0
    VECTOR: Type[VectorBase] = VectorBase

    center: VectorBase
    radius: Number

    def __post_init__(self) -> None:
        self.center = self.center.copy()

    @classmethod
    def new(cls: Type[S], *values: Any) -> S:
        """Build from center components followed by the radius."""
        n = cls.DIMENSION
        if len(values) != n + 1:
            raise ValueError(f"{cls.__name__}.new expects {n + 1} values, got {len(values)}")
        return cls(cls.VECTOR(*values[:n]), values[n])

    @classmethod
    def new_vector(cls: Type[S], center: VectorBase, radius: Number) -> S:
        return cls(center, radius)

    def set(self, *values: Any) -> None:
        n = self.DIMENSION
        if len(values) != n + 1:
            raise ValueError(f"{type(self).__name__}.set expects {n + 1} values, got {len(values)}")
        self.center.set(*values[:n])
        self.radius = values[n]

    def copy(self: S) -> S:
        return type(self)(self.center, self.radius)

    def get_center(self) -> VectorBase:
        return self.center.copy()

    def set_center(self, center: VectorBase) -> None:
        self.center = center.copy()

    def get_diameter(self) -> Any:
        return self.radius + self.radius

    def set_diameter(self, diameter: Any) -> None:
        self.radius = diameter / 2

    def contains(self, point: VectorBase) -> bool:
        """Inclusive: points exactly on the surface are inside."""
        distance_squared = (point - self.center).sqr_magnitude()
        return distance_squared <= self.radius * self.radius

    def overlaps(self, other: BallBase) -> bool:
        """Strict: balls that only touch do not overlap."""
        if type(other) is not type(self):
            raise TypeError(f"{type(self).__name__}.overlaps expects {type(self).__name__}, got {type(other).__name__}")
        distance_squared = (other.center - self.center).sqr_magnitude()
        radius_sum = self.radius + other.radius
        return distance_squared < radius_sum * radius_sum

    def overlaps_box(self, box: BoxBase) -> bool:
        return box.overlaps_ball(self)

    def overlaps_rect(self, rect: BoxBase) -> bool:
        return self.overlaps_box(rect)

    def overlaps_area(self, area: BoxBase) -> bool:
        return self.overlaps_box(area)

    def overlaps_bounds(self, bounds: BoxBase) -> bool:
        return self.overlaps_box(bounds)

    # Conversions

    def to_bounds(self) -> BoxBase:
        """Bounding box as Bounds: extent equal to the radius on every axis."""
        from ..conversions import convert, bounds_type
        return convert(self, bounds_type(self.DIMENSION))

    def to_area(self) -> BoxBase:
        from ..conversions import convert, area_type
        return convert(self, area_type(self.DIMENSION))

    def to_rect(self) -> BoxBase:
        from ..conversions import convert, rect_type
        return convert(self, rect_type(self.DIMENSION))

    @classmethod
    def from_box(cls: Type[S], box: BoxBase) -> S:
        """Inscribed ball of a same-dimension box."""
        from ..conversions import convert
        return convert(box, cls)

    def _to_dimension(self, dimension: int) -> BallBase:
        from ..conversions import convert, ball_type
        return convert(self, ball_type(dimension))

    def to_2d(self) -> Circle:
        return self._to_dimension(2)

    def to_3d(self) -> Sphere:
        return self._to_dimension(3)

    def to_4d(self) -> HyperSphere:
        return self._to_dimension(4)


@dataclass
class Circle(BallBase):
    """2D ball."""
    center: Vector2 = field(default_factory=Vector2)
    radius: Number = 0

    DIMENSION = 2
    VECTOR = Vector2

    def get_circumference(self) -> float:
        return self.radius * 2 * PI

    def set_circumference(self, circumference: float) -> None:
        self.radius = circumference / (2 * PI)

    def get_area(self) -> float:
        return self.radius * self.radius * PI

    def set_area(self, area: float) -> None:
        self.radius = math.sqrt(area / PI)


@dataclass
class Sphere(BallBase):
    """3D ball."""
    center: Vector3 = field(default_factory=Vector3)
    radius: Number = 0

    DIMENSION = 3
    VECTOR = Vector3

    def get_surface_area(self) -> float:
        return 4 * PI * self.radius * self.radius

    def set_surface_area(self, surface_area: float) -> None:
        self.radius = math.sqrt(surface_area / (4 * PI))

    def get_volume(self) -> float:
        return 4 / 3 * PI * self.radius * self.radius * self.radius

    def set_volume(self, volume: float) -> None:
        self.radius = _cbrt(3 * volume / (4 * PI))


@dataclass
class HyperSphere(BallBase):
    """4D ball."""
    center: Vector4 = field(default_factory=Vector4)
    radius: Number = 0

    DIMENSION = 4
    VECTOR = Vector4

    def get_surface_volume(self) -> float:
        """Three-dimensional measure of the boundary: 2 pi^2 r^3."""
        return 2 * PI * PI * self.radius * self.radius * self.radius

    def set_surface_volume(self, surface_volume: float) -> None:
        self.radius = _cbrt(surface_volume / (2 * PI * PI))

    def get_volume(self) -> float:
        """Four-dimensional content: pi^2 / 2 r^4."""
        r2 = self.radius * self.radius
        return PI * PI / 2 * r2 * r2

    def set_volume(self, volume: float) -> None:
        self.radius = math.sqrt(math.sqrt(2 * volume / (PI * PI)))
