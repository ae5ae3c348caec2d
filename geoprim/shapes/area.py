"""Area - a box stored as its lower-left and upper-right corners.

No ordering is enforced between the corners, so sizes derived as
upper - lower may be negative. Size setters resize about the center.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Type, TypeVar

from ..vectors import Vector2, Vector3, Vector4, VectorBase
from .box import BoxBase, Axes2D, Axes3D, Axes4D

A = TypeVar("A", bound="AreaBase")


class AreaBase(BoxBase):
    """Min corner + max corner storage."""

    lower_left: VectorBase
    upper_right: VectorBase

    def __post_init__(self) -> None:
        self.lower_left = self.lower_left.copy()
        self.upper_right = self.upper_right.copy()

    @classmethod
    def new(cls: Type[A], *values: Any) -> A:
        """Build from lower-left components followed by upper-right ones."""
        n = cls.DIMENSION
        if len(values) != 2 * n:
            raise ValueError(f"{cls.__name__}.new expects {2 * n} values, got {len(values)}")
        return cls(cls.VECTOR(*values[:n]), cls.VECTOR(*values[n:]))

    @classmethod
    def new_vectors(cls: Type[A], lower_left: VectorBase, upper_right: VectorBase) -> A:
        return cls(lower_left, upper_right)

    def set(self, *values: Any) -> None:
        n = self.DIMENSION
        if len(values) != 2 * n:
            raise ValueError(f"{type(self).__name__}.set expects {2 * n} values, got {len(values)}")
        self.lower_left.set(*values[:n])
        self.upper_right.set(*values[n:])

    def set_vectors(self, lower_left: VectorBase, upper_right: VectorBase) -> None:
        self.lower_left = lower_left.copy()
        self.upper_right = upper_right.copy()

    def copy(self: A) -> A:
        return type(self)(self.lower_left, self.upper_right)

    def get_min(self, axis: int) -> Any:
        return self.lower_left[self._axis(axis)]

    def set_min(self, axis: int, value: Any) -> None:
        self.lower_left[self._axis(axis)] = value

    def get_max(self, axis: int) -> Any:
        return self.upper_right[self._axis(axis)]

    def set_max(self, axis: int, value: Any) -> None:
        self.upper_right[self._axis(axis)] = value

    def get_axis_size(self, axis: int) -> Any:
        a = self._axis(axis)
        return self.upper_right[a] - self.lower_left[a]

    def set_axis_size(self, axis: int, value: Any) -> None:
        """Resize about the center: half the change goes to each side."""
        a = self._axis(axis)
        current = self.upper_right[a] - self.lower_left[a]
        half_delta = (current - value) / 2
        self.lower_left[a] = self.lower_left[a] + half_delta
        self.upper_right[a] = self.upper_right[a] - half_delta

    def set_size(self, size: VectorBase) -> None:
        half_delta = (self.get_size() - size) / 2
        self.lower_left += half_delta
        self.upper_right -= half_delta

    def get_center(self) -> VectorBase:
        return (self.lower_left + self.upper_right) / 2

    def set_center(self, center: VectorBase) -> None:
        """Translate both corners so the center lands on center."""
        delta = center - self.get_center()
        self.lower_left += delta
        self.upper_right += delta

    def _set_span(self, axis: int, lo: Any, hi: Any) -> None:
        a = self._axis(axis)
        self.lower_left[a] = lo
        self.upper_right[a] = hi

    def contains(self, point: VectorBase) -> bool:
        """Inclusive test: points on the edge are inside."""
        return self._contains_inclusive(point)


@dataclass
class Area2D(Axes2D, AreaBase):
    """2D area between two corners."""
    lower_left: Vector2 = field(default_factory=Vector2)
    upper_right: Vector2 = field(default_factory=Vector2)

    DIMENSION = 2
    VECTOR = Vector2


@dataclass
class Area3D(Axes3D, AreaBase):
    """3D area between two corners."""
    lower_left: Vector3 = field(default_factory=Vector3)
    upper_right: Vector3 = field(default_factory=Vector3)

    DIMENSION = 3
    VECTOR = Vector3


@dataclass
class Area4D(Axes4D, AreaBase):
    """4D area between two corners."""
    lower_left: Vector4 = field(default_factory=Vector4)
    upper_right: Vector4 = field(default_factory=Vector4)

    DIMENSION = 4
    VECTOR = Vector4
