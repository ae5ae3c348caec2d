"""Fixed-size vectors in 2, 3 and 4 dimensions.

Vectors are mutable value records: arithmetic returns fresh vectors, the
in-place operators and setters mutate the receiver only.
"""

from __future__ import annotations
import math
from dataclasses import dataclass
from typing import Any, Callable, Iterable, Iterator, List, Tuple, Type, TypeVar

from .config import DEFAULT_TOLERANCE
from .types import Number
from .math_utils import pad_or_truncate
from .logging import log

V = TypeVar("V", bound="VectorBase")


class VectorBase:
    """Componentwise behaviour shared by Vector2, Vector3 and Vector4."""

    _FIELDS: Tuple[str, ...] = ()

    # ------------------------------------------------------------------
    # Construction and component access
    # ------------------------------------------------------------------

    @classmethod
    def dimension(cls) -> int:
        """Number of components."""
        return len(cls._FIELDS)

    @classmethod
    def from_iterable(cls: Type[V], values: Iterable[Any]) -> V:
        """Build a vector from the first N items of an iterable."""
        items: List[Any] = []
        for value in values:
            items.append(value)
            if len(items) == len(cls._FIELDS):
                return cls(*items)
        log(f"[VEC][ERR] {cls.__name__}.from_iterable got {len(items)} items")
        raise ValueError(f"{cls.__name__} needs at least {len(cls._FIELDS)} elements, got {len(items)}")

    @classmethod
    def from_column(cls: Type[V], column: Iterable[Iterable[Any]]) -> V:
        """Build a vector from a column matrix [[x], [y], ...]."""
        return cls.from_iterable(row[0] for row in column)

    @classmethod
    def zero(cls: Type[V]) -> V:
        return cls(*([0] * len(cls._FIELDS)))

    @classmethod
    def one(cls: Type[V]) -> V:
        return cls(*([1] * len(cls._FIELDS)))

    def set(self, *components: Any) -> None:
        """Overwrite every component in place."""
        if len(components) != len(self._FIELDS):
            raise ValueError(f"{type(self).__name__}.set expects {len(self._FIELDS)} components, got {len(components)}")
        for name, value in zip(self._FIELDS, components):
            setattr(self, name, value)

    def copy(self: V) -> V:
        """Create an independent copy of this vector."""
        return type(self)(*self.to_tuple())

    def _check_index(self, index: int) -> str:
        if isinstance(index, int) and 0 <= index < len(self._FIELDS):
            return self._FIELDS[index]
        log(f"[VEC][ERR] Index {index!r} out of range for {type(self).__name__}")
        raise IndexError(f"{type(self).__name__} index out of range: {index!r}")

    def __getitem__(self, index: int) -> Any:
        return getattr(self, self._check_index(index))

    def __setitem__(self, index: int, value: Any) -> None:
        setattr(self, self._check_index(index), value)

    def __iter__(self) -> Iterator[Any]:
        return iter(self.to_tuple())

    def __len__(self) -> int:
        return len(self._FIELDS)

    def to_tuple(self) -> Tuple[Any, ...]:
        return tuple(getattr(self, name) for name in self._FIELDS)

    def to_list(self) -> List[Any]:
        return list(self.to_tuple())

    def to_column(self) -> List[List[Any]]:
        """Column matrix form [[x], [y], ...]."""
        return [[value] for value in self.to_tuple()]

    # ------------------------------------------------------------------
    # Arithmetic
    # ------------------------------------------------------------------

    def _map(self: V, fn: Callable[[Any], Any]) -> V:
        return type(self)(*(fn(a) for a in self.to_tuple()))

    def _zip(self: V, other: VectorBase, fn: Callable[[Any, Any], Any]) -> V:
        if type(other) is not type(self):
            raise TypeError(f"cannot combine {type(self).__name__} with {type(other).__name__}")
        return type(self)(*(fn(a, b) for a, b in zip(self.to_tuple(), other.to_tuple())))

    def _combine(self: V, other: Any, fn: Callable[[Any, Any], Any]) -> V:
        """Apply fn componentwise against a vector or broadcast a scalar."""
        if isinstance(other, VectorBase):
            return self._zip(other, fn)
        return self._map(lambda a: fn(a, other))

    def _assign(self: V, result: VectorBase) -> V:
        self.set(*result.to_tuple())
        return self

    def __neg__(self: V) -> V:
        return self._map(lambda a: -a)

    def __add__(self: V, other: V) -> V:
        if not isinstance(other, VectorBase):
            return NotImplemented
        return self._zip(other, lambda a, b: a + b)

    def __sub__(self: V, other: V) -> V:
        if not isinstance(other, VectorBase):
            return NotImplemented
        return self._zip(other, lambda a, b: a - b)

    def __mul__(self: V, other: Any) -> V:
        return self._combine(other, lambda a, b: a * b)

    def __rmul__(self: V, other: Any) -> V:
        return self._map(lambda a: other * a)

    def __truediv__(self: V, other: Any) -> V:
        return self._combine(other, lambda a, b: a / b)

    def __iadd__(self: V, other: V) -> V:
        return self._assign(self + other)

    def __isub__(self: V, other: V) -> V:
        return self._assign(self - other)

    def __imul__(self: V, other: Any) -> V:
        return self._assign(self * other)

    def __itruediv__(self: V, other: Any) -> V:
        return self._assign(self / other)

    # ------------------------------------------------------------------
    # Magnitude and normalization
    # ------------------------------------------------------------------

    def sqr_magnitude(self) -> Any:
        total = 0
        for a in self.to_tuple():
            total = total + a * a
        return total

    def magnitude(self) -> float:
        return math.sqrt(self.sqr_magnitude())

    def normalized(self: V) -> V:
        """Unit-length copy. A zero vector raises ZeroDivisionError."""
        length = self.magnitude()
        return self._map(lambda a: a / length)

    def normalize(self: V) -> V:
        """Scale this vector to unit length in place."""
        return self._assign(self.normalized())

    def is_close(self, other: VectorBase, tolerance: float = DEFAULT_TOLERANCE) -> bool:
        """Componentwise float comparison."""
        if type(other) is not type(self):
            return False
        return all(
            math.isclose(a, b, rel_tol=tolerance, abs_tol=tolerance)
            for a, b in zip(self.to_tuple(), other.to_tuple())
        )

    # ------------------------------------------------------------------
    # Binary helpers
    # ------------------------------------------------------------------

    @classmethod
    def dot(cls, left: VectorBase, right: VectorBase) -> Any:
        total = 0
        for a, b in zip(left.to_tuple(), right.to_tuple()):
            total = total + a * b
        return total

    @classmethod
    def distance(cls, left: VectorBase, right: VectorBase) -> float:
        return (left - right).magnitude()

    @classmethod
    def sqr_distance(cls, left: VectorBase, right: VectorBase) -> Any:
        return (left - right).sqr_magnitude()

    @classmethod
    def scale(cls, a: V, b: V) -> V:
        """Componentwise product."""
        return a._zip(b, lambda x, y: x * y)

    @classmethod
    def min(cls, a: V, b: V) -> V:
        return a._zip(b, lambda x, y: x if x < y else y)

    @classmethod
    def max(cls, a: V, b: V) -> V:
        return a._zip(b, lambda x, y: x if x > y else y)

    @classmethod
    def lerp(cls, a: V, b: V, t: float) -> V:
        """Unclamped linear interpolation between two points."""
        return a._zip(b, lambda x, y: x + (y - x) * t)

    @classmethod
    def reflect(cls, direction: V, normal: V) -> V:
        """Reflect direction off the plane defined by a unit normal."""
        factor = -2 * cls.dot(direction, normal)
        return normal * factor + direction

    @classmethod
    def project(cls, vector: V, onto: V) -> V:
        """Projection of vector onto another vector."""
        return onto * (cls.dot(vector, onto) / onto.sqr_magnitude())

    @classmethod
    def move_towards(cls, current: V, target: V, max_distance_delta: float) -> V:
        """Move current towards target by at most max_distance_delta."""
        movement = target - current
        sqr_magnitude = movement.sqr_magnitude()
        if sqr_magnitude > max_distance_delta * max_distance_delta:
            magnitude = math.sqrt(sqr_magnitude)
            return current + movement / magnitude * max_distance_delta
        return target.copy()

    # ------------------------------------------------------------------
    # Dimension conversions
    # ------------------------------------------------------------------

    def to_2d(self) -> Vector2:
        """Drop trailing components (or pad with zero)."""
        return Vector2(*pad_or_truncate(self.to_tuple(), 2))

    def to_3d(self) -> Vector3:
        return Vector3(*pad_or_truncate(self.to_tuple(), 3))

    def to_4d(self) -> Vector4:
        return Vector4(*pad_or_truncate(self.to_tuple(), 4))


@dataclass
class Vector2(VectorBase):
    """Two-component vector."""
    x: Number = 0
    y: Number = 0

    _FIELDS = ("x", "y")

    @staticmethod
    def perpendicular(vector: Vector2) -> Vector2:
        """Vector rotated 90 degrees counter-clockwise."""
        return Vector2(-vector.y, vector.x)

    @staticmethod
    def cross(left: Vector2, right: Vector2) -> Any:
        """Z component of the 3D cross product of two planar vectors."""
        return left.x * right.y - left.y * right.x


@dataclass
class Vector3(VectorBase):
    """Three-component vector."""
    x: Number = 0
    y: Number = 0
    z: Number = 0

    _FIELDS = ("x", "y", "z")

    @staticmethod
    def cross(left: Vector3, right: Vector3) -> Vector3:
        return Vector3(
            left.y * right.z - left.z * right.y,
            left.z * right.x - left.x * right.z,
            left.x * right.y - left.y * right.x,
        )


@dataclass
class Vector4(VectorBase):
    """Four-component vector."""
    x: Number = 0
    y: Number = 0
    z: Number = 0
    w: Number = 0

    _FIELDS = ("x", "y", "z", "w")
