"""Rect - a box stored as an origin corner plus a per-axis size."""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Tuple, Type, TypeVar

from ..types import Number
from ..vectors import Vector2, Vector3, Vector4, VectorBase
from .box import BoxBase, Axes2D, Axes3D, Axes4D

R = TypeVar("R", bound="RectBase")


class RectBase(BoxBase):
    """Origin + size storage. The max corner is origin + size."""

    _POSITION_FIELDS: Tuple[str, ...] = ()
    _SIZE_FIELDS: Tuple[str, ...] = ()

    @classmethod
    def new(cls: Type[R], *values: Any) -> R:
        return cls(*values)

    @classmethod
    def new_vectors(cls: Type[R], position: VectorBase, size: VectorBase) -> R:
        return cls(*position.to_tuple(), *size.to_tuple())

    def set(self, *values: Any) -> None:
        """Overwrite origin then size components in place."""
        fields = self._POSITION_FIELDS + self._SIZE_FIELDS
        if len(values) != len(fields):
            raise ValueError(f"{type(self).__name__}.set expects {len(fields)} values, got {len(values)}")
        for name, value in zip(fields, values):
            setattr(self, name, value)

    def set_vectors(self, position: VectorBase, size: VectorBase) -> None:
        self.set_position(position)
        self.set_size(size)

    def copy(self: R) -> R:
        return type(self)(*(getattr(self, name) for name in self._POSITION_FIELDS + self._SIZE_FIELDS))

    def get_position(self) -> VectorBase:
        return self.VECTOR(*(getattr(self, name) for name in self._POSITION_FIELDS))

    def set_position(self, position: VectorBase) -> None:
        for name, value in zip(self._POSITION_FIELDS, position.to_tuple()):
            setattr(self, name, value)

    def get_min(self, axis: int) -> Any:
        return getattr(self, self._POSITION_FIELDS[self._axis(axis)])

    def set_min(self, axis: int, value: Any) -> None:
        """Move the origin along an axis; the size is kept."""
        setattr(self, self._POSITION_FIELDS[self._axis(axis)], value)

    def get_max(self, axis: int) -> Any:
        a = self._axis(axis)
        return getattr(self, self._POSITION_FIELDS[a]) + getattr(self, self._SIZE_FIELDS[a])

    def set_max(self, axis: int, value: Any) -> None:
        """Change the size so the max corner lands on value."""
        a = self._axis(axis)
        setattr(self, self._SIZE_FIELDS[a], value - getattr(self, self._POSITION_FIELDS[a]))

    def get_axis_size(self, axis: int) -> Any:
        return getattr(self, self._SIZE_FIELDS[self._axis(axis)])

    def set_axis_size(self, axis: int, value: Any) -> None:
        setattr(self, self._SIZE_FIELDS[self._axis(axis)], value)

    def get_center(self) -> VectorBase:
        return self.VECTOR(*(
            getattr(self, p) + getattr(self, s) / 2
            for p, s in zip(self._POSITION_FIELDS, self._SIZE_FIELDS)
        ))

    def set_center(self, center: VectorBase) -> None:
        """Move the origin so the box is centered on center; size is kept."""
        for a, (p, s) in enumerate(zip(self._POSITION_FIELDS, self._SIZE_FIELDS)):
            setattr(self, p, center[a] - getattr(self, s) / 2)

    def _set_span(self, axis: int, lo: Any, hi: Any) -> None:
        a = self._axis(axis)
        setattr(self, self._POSITION_FIELDS[a], lo)
        setattr(self, self._SIZE_FIELDS[a], hi - lo)

    def contains(self, point: VectorBase) -> bool:
        """Inclusive test: points on the edge are inside."""
        return self._contains_inclusive(point)


@dataclass
class Rect(Axes2D, RectBase):
    """2D rectangle: origin (x, y) and size (width, height)."""
    x: Number = 0
    y: Number = 0
    width: Number = 0
    height: Number = 0

    DIMENSION = 2
    VECTOR = Vector2
    _POSITION_FIELDS = ("x", "y")
    _SIZE_FIELDS = ("width", "height")


Rect2D = Rect


@dataclass
class Rect3D(Axes3D, RectBase):
    """3D box: origin (x, y, z) and size (width, height, depth)."""
    x: Number = 0
    y: Number = 0
    z: Number = 0
    width: Number = 0
    height: Number = 0
    depth: Number = 0

    DIMENSION = 3
    VECTOR = Vector3
    _POSITION_FIELDS = ("x", "y", "z")
    _SIZE_FIELDS = ("width", "height", "depth")


@dataclass
class Rect4D(Axes4D, RectBase):
    """4D box: origin (x, y, z, w) and size (width, height, depth, span)."""
    x: Number = 0
    y: Number = 0
    z: Number = 0
    w: Number = 0
    width: Number = 0
    height: Number = 0
    depth: Number = 0
    span: Number = 0

    DIMENSION = 4
    VECTOR = Vector4
    _POSITION_FIELDS = ("x", "y", "z", "w")
    _SIZE_FIELDS = ("width", "height", "depth", "span")
