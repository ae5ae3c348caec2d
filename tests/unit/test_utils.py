"""
Tests for math helpers and the library logger

Checks:
1. clamp / lerp / interpolate / inverse_lerp / pad_or_truncate
2. Logger output, counters, and the global on/off switch
"""

import pytest

from geoprim import math_utils
from geoprim.logging import Logger, get_logger, set_enabled, is_enabled
from geoprim.vectors import Vector2


@pytest.fixture
def global_logging():
    """Enable the global logger for one test."""
    previous = is_enabled()
    set_enabled(True)
    yield get_logger()
    set_enabled(previous)


class TestMathUtils:
    """Scalar helpers."""

    def test_clamp(self):
        assert math_utils.clamp(5, 0, 3) == 3
        assert math_utils.clamp(-1, 0, 3) == 0
        assert math_utils.clamp(2, 0, 3) == 2

    def test_lerp_clamped(self):
        assert math_utils.lerp(0.0, 10.0, 2.0) == 10.0
        assert math_utils.lerp(0.0, 10.0, -1.0) == 0.0

    def test_interpolate_unclamped(self):
        assert math_utils.interpolate(0.0, 10.0, 2.0) == 20.0

    def test_inverse_lerp(self):
        assert math_utils.inverse_lerp(10.0, 20.0, 15.0) == 0.5

    def test_is_close(self):
        assert math_utils.is_close(0.1 + 0.2, 0.3)
        assert not math_utils.is_close(1.0, 1.001)

    def test_pad_or_truncate(self):
        assert math_utils.pad_or_truncate([1, 2, 3], 2) == [1, 2]
        assert math_utils.pad_or_truncate([1, 2], 4) == [1, 2, 0, 0]
        assert math_utils.pad_or_truncate((1,), 3, fill=9) == [1, 9, 9]


class TestLogger:
    """Logger formatting and switch."""

    def test_disabled_by_default(self, capsys):
        logger = Logger()
        logger.log("quiet")
        assert capsys.readouterr().out == ""
        assert logger.ops == 0

    def test_enabled_writes_stdout(self, capsys):
        logger = Logger(enabled=True)
        logger("hello")
        out = capsys.readouterr().out
        assert "OP000001" in out
        assert out.endswith("hello\n")
        assert logger.ops == 1

    def test_toggle(self, capsys):
        logger = Logger(enabled=True)
        logger.enabled = False
        logger.log("dropped")
        assert capsys.readouterr().out == ""

    def test_errors_are_logged_before_raising(self, capsys, global_logging):
        with pytest.raises(IndexError):
            Vector2()[5]
        assert "[VEC][ERR]" in capsys.readouterr().out
