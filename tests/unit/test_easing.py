"""
Tests for easing curves

Checks:
1. Every curve maps 0 -> 0 and 1 -> 1
2. In-out curves are continuous at the midpoint
3. Lookup by name / EaseType, eased interpolation
"""

import pytest

from geoprim import easing
from geoprim.easing import EASINGS, EaseType, ease, get_easing, interpolate


CONTINUOUS = [name for name in EASINGS if name != "step"]
INOUT = [name for name in EASINGS if name.endswith("_inout")]


class TestTable:
    """EaseType and EASINGS cover the same names."""

    def test_every_type_registered(self):
        assert {t.value for t in EaseType} == set(EASINGS)

    def test_lookup_by_type(self):
        assert get_easing(EaseType.CUBIC_OUT) is easing.cubic_out

    def test_lookup_by_name(self):
        assert get_easing("bounce_in") is easing.bounce_in

    def test_unknown_name(self):
        with pytest.raises(KeyError):
            get_easing("wobble")


class TestCurves:
    """Endpoints, midpoints, continuity."""

    @pytest.mark.parametrize("name", list(EASINGS))
    def test_endpoints(self, name):
        fn = EASINGS[name]
        assert fn(0.0) == pytest.approx(0.0, abs=1e-9)
        assert fn(1.0) == pytest.approx(1.0, abs=1e-9)

    @pytest.mark.parametrize("name", INOUT)
    def test_inout_midpoint(self, name):
        assert EASINGS[name](0.5) == pytest.approx(0.5, abs=1e-9)

    @pytest.mark.parametrize("name", INOUT)
    def test_inout_continuous(self, name):
        fn = EASINGS[name]
        assert fn(0.5 - 1e-9) == pytest.approx(fn(0.5), abs=1e-6)

    def test_polynomial_values(self):
        assert ease("quad_in", 0.5) == 0.25
        assert ease("cubic_out", 0.5) == 0.875
        assert ease(EaseType.QUART_IN, 0.5) == 0.0625
        assert ease("quad_inout", 0.25) == 0.125

    def test_linear(self):
        for t in (0.0, 0.3, 0.7, 1.0):
            assert ease("linear", t) == t

    def test_step(self):
        assert ease("step", 0.49) == 0.0
        assert ease("step", 0.5) == 1.0

    def test_back_overshoots(self):
        assert ease("back_in", 0.2) < 0.0
        assert ease("back_out", 0.8) > 1.0

    @pytest.mark.parametrize("name", [n for n in CONTINUOUS if n.startswith(("quad", "cubic", "sine", "circ"))])
    def test_monotonic(self, name):
        fn = EASINGS[name]
        samples = [fn(i / 20) for i in range(21)]
        assert samples == sorted(samples)


class TestInterpolate:
    """Eased interpolation between two values."""

    def test_default_linear(self):
        assert interpolate(0.0, 10.0, 0.3) == pytest.approx(3.0)

    def test_named(self):
        assert interpolate(10.0, 20.0, 0.5, "quad_in") == pytest.approx(12.5)

    def test_callable(self):
        assert interpolate(0.0, 8.0, 0.5, lambda t: t * t * t) == pytest.approx(1.0)

    def test_not_clamped(self):
        assert interpolate(0.0, 10.0, 1.5) == pytest.approx(15.0)
