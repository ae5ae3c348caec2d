"""
Tests for raylib interop

Checks:
1. Rect / Vector2 / Circle map onto raylib structs and back

Skipped when no raylib binding is installed.
"""

import pytest

pytest.importorskip("raylib")

from geoprim import rl_compat  # noqa: E402
from geoprim.vectors import Vector2  # noqa: E402
from geoprim.shapes import Rect, Circle  # noqa: E402


class TestInterop:
    """Values survive a trip through raylib structs (float32)."""

    def test_rect(self):
        rect = rl_compat.rect_from_rl(rl_compat.make_rect(Rect(1.5, 2.5, 10.0, 20.0)))
        assert rect == Rect(1.5, 2.5, 10.0, 20.0)

    def test_vec2(self):
        vector = rl_compat.vec2_from_rl(rl_compat.make_vec2(Vector2(3, -4)))
        assert vector == Vector2(3.0, -4.0)

    def test_circle_args(self):
        center, radius = rl_compat.circle_args(Circle.new(1.0, 2.0, 0.5))
        assert (center.x, center.y, radius) == (1.0, 2.0, 0.5)

    def test_binding_name(self):
        assert rl_compat.RL_VERSION in ("raylibpy", "python-raylib")
