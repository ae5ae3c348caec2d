"""Line segments in 2, 3 and 4 dimensions."""

from __future__ import annotations
import math
from dataclasses import dataclass, field
from typing import Any, Optional, Type, TypeVar

from ..vectors import Vector2, Vector3, Vector4, VectorBase
from ..logging import log
from .box import BoxBase

L = TypeVar("L", bound="LineBase")


class LineBase:
    """Start/end segment. Length and direction derive from end - start."""

    DIMENSION: int = 0
    VECTOR: Type[VectorBase] = VectorBase

    start: VectorBase
    end: VectorBase

    def __post_init__(self) -> None:
        self.start = self.start.copy()
        self.end = self.end.copy()

    @classmethod
    def new(cls: Type[L], *values: Any) -> L:
        """Build from start components followed by end components."""
        n = cls.DIMENSION
        if len(values) != 2 * n:
            raise ValueError(f"{cls.__name__}.new expects {2 * n} values, got {len(values)}")
        return cls(cls.VECTOR(*values[:n]), cls.VECTOR(*values[n:]))

    @classmethod
    def new_vectors(cls: Type[L], start: VectorBase, end: VectorBase) -> L:
        return cls(start, end)

    def set(self, *values: Any) -> None:
        n = self.DIMENSION
        if len(values) != 2 * n:
            raise ValueError(f"{type(self).__name__}.set expects {2 * n} values, got {len(values)}")
        self.start.set(*values[:n])
        self.end.set(*values[n:])

    def set_vectors(self, start: VectorBase, end: VectorBase) -> None:
        self.start = start.copy()
        self.end = end.copy()

    def copy(self: L) -> L:
        return type(self)(self.start, self.end)

    def get_delta(self) -> VectorBase:
        return self.end - self.start

    def set_delta(self, delta: VectorBase) -> None:
        self.end = self.start + delta

    def get_length(self) -> float:
        return self.get_delta().magnitude()

    def set_length(self, length: float) -> None:
        """Keep start and direction, move end."""
        self.end = self.start + self.get_direction() * length

    def get_sqr_length(self) -> Any:
        return self.get_delta().sqr_magnitude()

    def set_sqr_length(self, sqr_length: float) -> None:
        self.set_length(math.sqrt(sqr_length))

    def get_direction(self) -> VectorBase:
        """Unit direction. A degenerate segment raises ZeroDivisionError."""
        delta = self.get_delta()
        if delta.sqr_magnitude() == 0:
            log(f"[LINE] {type(self).__name__} is degenerate, direction undefined")
        return delta.normalized()

    def set_direction(self, direction: VectorBase) -> None:
        """Keep start and length, point along direction (expected unit length)."""
        length = self.get_length()
        self.end = self.start + direction * length

    def get_center(self) -> VectorBase:
        return (self.start + self.end) / 2

    def set_center(self, center: VectorBase) -> None:
        """Translate the segment so its midpoint is center."""
        half_delta = self.get_delta() / 2
        self.start = center - half_delta
        self.end = center + half_delta

    def point_at(self, t: float) -> VectorBase:
        """start + (end - start) * t."""
        return self.start + self.get_delta() * t

    def to_area(self) -> BoxBase:
        """Bounding area of the two endpoints."""
        from ..conversions import convert, area_type
        return convert(self, area_type(self.DIMENSION))

    def _to_dimension(self, dimension: int) -> LineBase:
        from ..conversions import convert, line_type
        return convert(self, line_type(dimension))

    def to_2d(self) -> Line2D:
        return self._to_dimension(2)

    def to_3d(self) -> Line3D:
        return self._to_dimension(3)

    def to_4d(self) -> Line4D:
        return self._to_dimension(4)


@dataclass
class Line2D(LineBase):
    """2D segment with exact segment-segment intersection."""
    start: Vector2 = field(default_factory=Vector2)
    end: Vector2 = field(default_factory=Vector2)

    DIMENSION = 2
    VECTOR = Vector2

    def intersects(self, other: Line2D) -> Optional[Vector2]:
        """Intersection point of two segments, or None.

        Rejects on the x/y bounding intervals first, then solves
        p1 + alpha * (p2 - p1) = p3 + beta * (p4 - p3), comparing the
        numerators against the shared denominator by sign so nothing is
        divided until an intersection is certain. Parallel segments,
        collinear overlapping ones included, report None.
        """
        p1 = self.start
        p2 = self.end
        p3 = other.start
        p4 = other.end

        # x bounding intervals
        ax = p2.x - p1.x
        bx = p3.x - p4.x
        if ax < 0:
            x1lo, x1hi = p2.x, p1.x
        else:
            x1lo, x1hi = p1.x, p2.x
        if bx > 0:
            if x1hi < p4.x or p3.x < x1lo:
                return None
        else:
            if x1hi < p3.x or p4.x < x1lo:
                return None

        # y bounding intervals
        ay = p2.y - p1.y
        by = p3.y - p4.y
        if ay < 0:
            y1lo, y1hi = p2.y, p1.y
        else:
            y1lo, y1hi = p1.y, p2.y
        if by > 0:
            if y1hi < p4.y or p3.y < y1lo:
                return None
        else:
            if y1hi < p3.y or p4.y < y1lo:
                return None

        cx = p1.x - p3.x
        cy = p1.y - p3.y
        d = by * cx - bx * cy  # alpha numerator
        f = ay * bx - ax * by  # shared denominator

        # alpha in [0, 1]
        if f > 0:
            if d < 0 or d > f:
                return None
        else:
            if d > 0 or d < f:
                return None

        e = ax * cy - ay * cx  # beta numerator

        # beta in [0, 1]
        if f > 0:
            if e < 0 or e > f:
                return None
        else:
            if e > 0 or e < f:
                return None

        # parallel, collinear included
        if f == 0:
            return None

        return Vector2(p1.x + d * ax / f, p1.y + d * ay / f)


@dataclass
class Line3D(LineBase):
    """3D segment."""
    start: Vector3 = field(default_factory=Vector3)
    end: Vector3 = field(default_factory=Vector3)

    DIMENSION = 3
    VECTOR = Vector3


@dataclass
class Line4D(LineBase):
    """4D segment."""
    start: Vector4 = field(default_factory=Vector4)
    end: Vector4 = field(default_factory=Vector4)

    DIMENSION = 4
    VECTOR = Vector4
