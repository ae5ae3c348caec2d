"""Bounds - a box stored as its center plus per-axis half-extents.

Containment is strict here: a point on the boundary is outside, unlike
Rect and Area.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Type, TypeVar

from ..vectors import Vector2, Vector3, Vector4, VectorBase
from .box import BoxBase, Axes2D, Axes3D, Axes4D

Bd = TypeVar("Bd", bound="BoundsBase")


class BoundsBase(BoxBase):
    """Center + extents storage. Width along an axis is twice its extent."""

    center: VectorBase
    extents: VectorBase

    def __post_init__(self) -> None:
        self.center = self.center.copy()
        self.extents = self.extents.copy()

    @classmethod
    def new(cls: Type[Bd], *values: Any) -> Bd:
        """Build from center components followed by extent components."""
        n = cls.DIMENSION
        if len(values) != 2 * n:
            raise ValueError(f"{cls.__name__}.new expects {2 * n} values, got {len(values)}")
        return cls(cls.VECTOR(*values[:n]), cls.VECTOR(*values[n:]))

    @classmethod
    def new_vectors(cls: Type[Bd], center: VectorBase, extents: VectorBase) -> Bd:
        return cls(center, extents)

    def set(self, *values: Any) -> None:
        n = self.DIMENSION
        if len(values) != 2 * n:
            raise ValueError(f"{type(self).__name__}.set expects {2 * n} values, got {len(values)}")
        self.center.set(*values[:n])
        self.extents.set(*values[n:])

    def set_vectors(self, center: VectorBase, extents: VectorBase) -> None:
        self.center = center.copy()
        self.extents = extents.copy()

    def copy(self: Bd) -> Bd:
        return type(self)(self.center, self.extents)

    def get_extents(self) -> VectorBase:
        return self.extents.copy()

    def set_extents(self, extents: VectorBase) -> None:
        self.extents = extents.copy()

    def get_min(self, axis: int) -> Any:
        a = self._axis(axis)
        return self.center[a] - self.extents[a]

    def set_min(self, axis: int, value: Any) -> None:
        """Move the center so the min edge lands on value; extents are kept."""
        a = self._axis(axis)
        self.center[a] = value + self.extents[a]

    def get_max(self, axis: int) -> Any:
        a = self._axis(axis)
        return self.center[a] + self.extents[a]

    def set_max(self, axis: int, value: Any) -> None:
        a = self._axis(axis)
        self.center[a] = value - self.extents[a]

    def get_axis_size(self, axis: int) -> Any:
        a = self._axis(axis)
        return self.extents[a] + self.extents[a]

    def set_axis_size(self, axis: int, value: Any) -> None:
        """Change the extent about the unchanged center."""
        a = self._axis(axis)
        current = self.extents[a] + self.extents[a]
        half_delta = (current - value) / 2
        self.extents[a] = self.extents[a] - half_delta

    def set_size(self, size: VectorBase) -> None:
        half_delta = (self.get_size() - size) / 2
        self.extents -= half_delta

    def get_center(self) -> VectorBase:
        return self.center.copy()

    def set_center(self, center: VectorBase) -> None:
        self.center = center.copy()

    def _set_span(self, axis: int, lo: Any, hi: Any) -> None:
        a = self._axis(axis)
        self.center[a] = (lo + hi) / 2
        self.extents[a] = (hi - lo) / 2

    def contains(self, point: VectorBase) -> bool:
        """Strict test: points on the boundary are outside."""
        return self._contains_exclusive(point)


@dataclass
class Bounds2D(Axes2D, BoundsBase):
    """2D bounds around a center."""
    center: Vector2 = field(default_factory=Vector2)
    extents: Vector2 = field(default_factory=Vector2)

    DIMENSION = 2
    VECTOR = Vector2


@dataclass
class Bounds3D(Axes3D, BoundsBase):
    """3D bounds around a center."""
    center: Vector3 = field(default_factory=Vector3)
    extents: Vector3 = field(default_factory=Vector3)

    DIMENSION = 3
    VECTOR = Vector3


@dataclass
class Bounds4D(Axes4D, BoundsBase):
    """4D bounds around a center."""
    center: Vector4 = field(default_factory=Vector4)
    extents: Vector4 = field(default_factory=Vector4)

    DIMENSION = 4
    VECTOR = Vector4
