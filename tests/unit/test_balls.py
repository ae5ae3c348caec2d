"""
Tests for Circle, Sphere and HyperSphere

Checks:
1. Derived measures and their inverse setters
2. Inclusive containment, strict overlap
3. Ball-versus-box overlap from the ball side
"""

import math

import pytest

from geoprim.vectors import Vector2, Vector3, Vector4
from geoprim.shapes import Circle, Sphere, HyperSphere, Rect, Area3D, Bounds4D


class TestCircleMeasures:
    """Diameter, circumference, area."""

    def test_construction(self):
        circle = Circle.new(1, 2, 3)
        assert circle.center == Vector2(1, 2)
        assert circle.radius == 3
        assert Circle.new_vector(Vector2(1, 2), 3) == circle

    def test_diameter(self):
        circle = Circle.new(0, 0, 2)
        assert circle.get_diameter() == 4
        circle.set_diameter(10)
        assert circle.radius == 5

    def test_circumference(self):
        circle = Circle.new(0.0, 0.0, 1.0)
        assert circle.get_circumference() == pytest.approx(2 * math.pi)
        circle.set_circumference(4 * math.pi)
        assert circle.radius == pytest.approx(2.0)

    def test_area(self):
        circle = Circle.new(0.0, 0.0, 3.0)
        assert circle.get_area() == pytest.approx(9 * math.pi)
        circle.set_area(math.pi * 16)
        assert circle.radius == pytest.approx(4.0)

    def test_negative_radius_is_sign_faithful(self):
        circle = Circle.new(0.0, 0.0, -2.0)
        assert circle.get_diameter() == -4.0
        assert circle.contains(Vector2(1.0, 1.0))

    def test_negative_area_propagates(self):
        with pytest.raises(ValueError):
            Circle().set_area(-1.0)


class TestSphereMeasures:
    """Surface area and volume."""

    def test_surface_area(self):
        sphere = Sphere.new(0.0, 0.0, 0.0, 2.0)
        assert sphere.get_surface_area() == pytest.approx(16 * math.pi)
        sphere.set_surface_area(4 * math.pi * 9)
        assert sphere.radius == pytest.approx(3.0)

    def test_volume(self):
        sphere = Sphere.new(0.0, 0.0, 0.0, 3.0)
        assert sphere.get_volume() == pytest.approx(36 * math.pi)
        sphere.set_volume(4 / 3 * math.pi * 8)
        assert sphere.radius == pytest.approx(2.0)


class TestHyperSphereMeasures:
    """Surface volume and hypervolume."""

    def test_surface_volume(self):
        hyper = HyperSphere.new(0.0, 0.0, 0.0, 0.0, 1.0)
        assert hyper.get_surface_volume() == pytest.approx(2 * math.pi ** 2)
        hyper.set_surface_volume(2 * math.pi ** 2 * 27)
        assert hyper.radius == pytest.approx(3.0)

    def test_volume(self):
        hyper = HyperSphere.new(0.0, 0.0, 0.0, 0.0, 2.0)
        assert hyper.get_volume() == pytest.approx(8 * math.pi ** 2)
        hyper.set_volume(math.pi ** 2 / 2)
        assert hyper.radius == pytest.approx(1.0)


class TestPredicates:
    """contains is inclusive, overlaps is strict."""

    def test_contains_boundary(self):
        circle = Circle.new(0, 0, 5)
        assert circle.contains(Vector2(3, 4))
        assert not circle.contains(Vector2(4, 4))

    def test_sphere_contains(self):
        assert Sphere.new(0, 0, 0, 1).contains(Vector3(0, 0, 1))
        assert not HyperSphere.new(0, 0, 0, 0, 1).contains(Vector4(0.6, 0.6, 0.6, 0.6))

    def test_touching_circles_do_not_overlap(self):
        a = Circle.new(0.0, 0.0, 1.0)
        b = Circle.new(3.0, 0.0, 2.0)
        assert not a.overlaps(b)
        assert not b.overlaps(a)

    def test_nearly_touching_circles_overlap(self):
        a = Circle.new(0.0, 0.0, 1.0)
        b = Circle.new(3.0 - 1e-9, 0.0, 2.0)
        assert a.overlaps(b)

    def test_sphere_overlap(self):
        assert Sphere.new(0, 0, 0, 1).overlaps(Sphere.new(0, 0, 1.5, 1))
        assert not Sphere.new(0, 0, 0, 1).overlaps(Sphere.new(0, 0, 3, 1))

    def test_type_mismatch(self):
        with pytest.raises(TypeError):
            Circle.new(0, 0, 1).overlaps(Sphere.new(0, 0, 0, 1))

    def test_ball_against_boxes(self):
        assert Circle.new(0.0, 0.0, 1.0).overlaps_rect(Rect(0.5, 0.5, 1.0, 1.0))
        assert not Sphere.new(0, 0, 0, 1).overlaps_area(Area3D.new(2, 2, 2, 3, 3, 3))
        assert HyperSphere.new(0, 0, 0, 0, 1).overlaps_bounds(Bounds4D.new(1.5, 0, 0, 0, 1, 1, 1, 1))


class TestValueSemantics:
    """Copies and setters."""

    def test_copy_independent(self):
        circle = Circle.new(1, 1, 1)
        other = circle.copy()
        other.center.x = 9
        assert circle.center.x == 1

    def test_constructor_copies_center(self):
        center = Vector2(1, 1)
        circle = Circle(center, 2)
        circle.set(5, 5, 1)
        assert center == Vector2(1, 1)

    def test_new_vector_copies_center(self):
        center = Vector3(0, 0, 0)
        sphere = Sphere.new_vector(center, 1)
        sphere.center.z = 3
        assert center == Vector3(0, 0, 0)

    def test_set(self):
        sphere = Sphere()
        sphere.set(1, 2, 3, 4)
        assert sphere == Sphere.new(1, 2, 3, 4)
        with pytest.raises(ValueError):
            sphere.set(1, 2, 3)
