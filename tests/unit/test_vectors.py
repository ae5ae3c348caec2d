"""
Tests for geoprim.vectors

Checks:
1. Construction, setters and component access
2. Componentwise arithmetic and in-place operators
3. Magnitude, normalization and the binary helpers
4. Dimension conversions
"""

import math

import pytest

from geoprim.vectors import Vector2, Vector3, Vector4


class TestConstruction:
    """Construction and component access."""

    def test_set_overwrites_components(self):
        vector = Vector2(2, 2)
        vector.set(2, 3)
        assert vector.x == 2
        assert vector.y == 3

        vector.set(5, 5)
        assert (vector.x, vector.y) == (5, 5)

    def test_set_rejects_wrong_arity(self):
        with pytest.raises(ValueError):
            Vector3(1, 2, 3).set(1, 2)

    def test_indexing(self):
        vector = Vector4(1, 2, 3, 4)
        assert [vector[i] for i in range(4)] == [1, 2, 3, 4]
        vector[2] = 9
        assert vector.z == 9

    @pytest.mark.parametrize("index", [2, -1, 10])
    def test_out_of_range_index_raises(self, index):
        vector = Vector2(1, 2)
        with pytest.raises(IndexError):
            vector[index]
        with pytest.raises(IndexError):
            vector[index] = 0

    def test_from_iterable_takes_first_n(self):
        assert Vector2.from_iterable([1, 2, 3]) == Vector2(1, 2)
        assert Vector3.from_iterable(iter(range(10))) == Vector3(0, 1, 2)

    def test_from_iterable_too_short(self):
        with pytest.raises(ValueError):
            Vector2.from_iterable([1])

    def test_tuple_list_and_column_forms(self):
        vector = Vector3(1, 2, 3)
        assert vector.to_tuple() == (1, 2, 3)
        assert vector.to_list() == [1, 2, 3]
        assert vector.to_column() == [[1], [2], [3]]
        assert Vector3.from_column([[1], [2], [3]]) == vector
        assert list(vector) == [1, 2, 3]
        assert len(vector) == 3

    def test_copy_is_independent(self):
        vector = Vector2(1, 2)
        other = vector.copy()
        other.x = 10
        assert vector.x == 1

    def test_zero_and_one(self):
        assert Vector4.zero() == Vector4(0, 0, 0, 0)
        assert Vector3.one() == Vector3(1, 1, 1)


class TestArithmetic:
    """Operators."""

    def test_add_sub_neg(self):
        assert Vector2(1, 2) + Vector2(3, 4) == Vector2(4, 6)
        assert Vector3(5, 5, 5) - Vector3(1, 2, 3) == Vector3(4, 3, 2)
        assert -Vector2(1, -2) == Vector2(-1, 2)

    def test_scalar_and_componentwise_mul_div(self):
        assert Vector2(1, 2) * 3 == Vector2(3, 6)
        assert 3 * Vector2(1, 2) == Vector2(3, 6)
        assert Vector2(2, 3) * Vector2(4, 5) == Vector2(8, 15)
        assert Vector2(4, 6) / 2 == Vector2(2, 3)
        assert Vector2(8, 15) / Vector2(4, 5) == Vector2(2, 3)

    def test_in_place_operators_mutate_receiver(self):
        vector = Vector2(1, 1)
        alias = vector
        vector += Vector2(1, 2)
        vector *= 2
        vector -= Vector2(1, 1)
        vector /= 2
        assert alias is vector
        assert vector == Vector2(1.5, 2.5)

    def test_mixed_dimensions_rejected(self):
        with pytest.raises(TypeError):
            Vector2(1, 2) + Vector3(1, 2, 3)


class TestMagnitude:
    """Magnitude and normalization."""

    def test_magnitude(self):
        assert Vector2(3, 4).sqr_magnitude() == 25
        assert Vector2(3, 4).magnitude() == 5.0
        assert Vector4(1, 1, 1, 1).magnitude() == 2.0

    def test_normalized_returns_unit_copy(self):
        vector = Vector3(0, 3, 4)
        unit = vector.normalized()
        assert unit.magnitude() == pytest.approx(1.0)
        assert unit == Vector3(0, 0.6, 0.8)
        assert vector == Vector3(0, 3, 4)

    def test_normalize_in_place(self):
        vector = Vector2(10, 0)
        vector.normalize()
        assert vector == Vector2(1.0, 0.0)

    def test_normalizing_zero_vector_propagates(self):
        with pytest.raises(ZeroDivisionError):
            Vector2(0.0, 0.0).normalized()


class TestBinaryHelpers:
    """dot, cross, distance, reflect, project, move_towards."""

    def test_dot(self):
        assert Vector3.dot(Vector3(1, 2, 3), Vector3(4, 5, 6)) == 32

    def test_cross(self):
        assert Vector3.cross(Vector3(1, 0, 0), Vector3(0, 1, 0)) == Vector3(0, 0, 1)
        assert Vector2.cross(Vector2(1, 0), Vector2(0, 1)) == 1

    def test_perpendicular(self):
        assert Vector2.perpendicular(Vector2(1, 2)) == Vector2(-2, 1)

    def test_distance(self):
        assert Vector2.distance(Vector2(0, 0), Vector2(3, 4)) == 5.0
        assert Vector2.sqr_distance(Vector2(0, 0), Vector2(3, 4)) == 25

    def test_scale_min_max(self):
        assert Vector3.scale(Vector3(1, 2, 3), Vector3(2, 2, 2)) == Vector3(2, 4, 6)
        assert Vector2.min(Vector2(1, 5), Vector2(3, 2)) == Vector2(1, 2)
        assert Vector2.max(Vector2(1, 5), Vector2(3, 2)) == Vector2(3, 5)

    def test_reflect_off_floor(self):
        reflected = Vector2.reflect(Vector2(1, -1), Vector2(0, 1))
        assert reflected == Vector2(1, 1)

    def test_project(self):
        projected = Vector2.project(Vector2(3, 4), Vector2(2, 0))
        assert projected == Vector2(3.0, 0.0)

    def test_lerp(self):
        assert Vector2.lerp(Vector2(0, 0), Vector2(10, 20), 0.25) == Vector2(2.5, 5.0)

    def test_move_towards_limited_step(self):
        moved = Vector2.move_towards(Vector2(0, 0), Vector2(10, 0), 3)
        assert moved.is_close(Vector2(3.0, 0.0))

    def test_move_towards_reaches_target(self):
        target = Vector2(1, 1)
        moved = Vector2.move_towards(Vector2(0, 0), target, 5)
        assert moved == target
        assert moved is not target


class TestDimensionConversion:
    """to_2d / to_3d / to_4d."""

    def test_narrowing_drops_trailing_components(self):
        assert Vector4(1, 2, 3, 4).to_2d() == Vector2(1, 2)
        assert Vector4(1, 2, 3, 4).to_3d() == Vector3(1, 2, 3)

    def test_widening_pads_with_zero(self):
        assert Vector2(1, 2).to_4d() == Vector4(1, 2, 0, 0)
        assert Vector3(1, 2, 3).to_4d() == Vector4(1, 2, 3, 0)

    def test_is_close(self):
        assert Vector2(0.1 + 0.2, 1.0).is_close(Vector2(0.3, 1.0))
        assert not Vector2(0.3, 1.0).is_close(Vector2(0.31, 1.0))
        assert not Vector2(1, 2).is_close(Vector3(1, 2, 0))
        assert math.isclose(Vector2(1, 1).magnitude(), math.sqrt(2))
