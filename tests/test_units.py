"""Tests for unit conversions, angle wrapping and spin-mode labels."""

import math

import pytest

from poivtg.state.phase_math import (
    normalize_degrees_0_to_turn,
    normalize_radians_0_to_tau,
    shortest_angular_distance_radians,
)
from poivtg.state.units import (
    TWO_PI,
    PoiSpinMode,
    SpeedUnit,
    classify_poi_spin_mode,
    degrees_to_radians,
    radians_to_degrees,
    relative_poi_speed_from_absolute_head,
    speed_from_radians_per_beat,
    speed_to_radians_per_beat,
)


class TestConversions:

    def test_degrees_radians(self):
        assert degrees_to_radians(180.0) == pytest.approx(math.pi)
        assert radians_to_degrees(math.pi / 2) == pytest.approx(90.0)

    def test_speed_display_units(self):
        """One cycle per beat is 2pi rad/beat and 360 deg/beat."""
        assert speed_from_radians_per_beat(TWO_PI, SpeedUnit.CYCLES) == pytest.approx(1.0)
        assert speed_from_radians_per_beat(TWO_PI, SpeedUnit.DEGREES) == pytest.approx(360.0)
        assert speed_to_radians_per_beat(-3.0, SpeedUnit.CYCLES) == pytest.approx(-3 * TWO_PI)
        assert speed_to_radians_per_beat(90.0, SpeedUnit.DEGREES) == pytest.approx(math.pi / 2)

    def test_relative_from_absolute_head(self):
        assert relative_poi_speed_from_absolute_head(TWO_PI, -3 * TWO_PI) == pytest.approx(-4 * TWO_PI)


class TestSpinMode:

    @pytest.mark.parametrize("arm_speed, poi_speed, expected", [
        (TWO_PI, 0.0, PoiSpinMode.EXTENSION),
        (0.0, TWO_PI, PoiSpinMode.STATIC_SPIN),
        (TWO_PI, 3 * TWO_PI, PoiSpinMode.INSPIN),
        (-TWO_PI, -3 * TWO_PI, PoiSpinMode.INSPIN),
        (TWO_PI, -3 * TWO_PI, PoiSpinMode.ANTISPIN),
    ])
    def test_classify(self, arm_speed, poi_speed, expected):
        assert classify_poi_spin_mode(arm_speed, poi_speed) is expected


class TestWrapping:

    @pytest.mark.parametrize("angle, expected", [
        (0.0, 0.0),
        (TWO_PI, 0.0),
        (-math.pi / 2, 1.5 * math.pi),
        (5 * math.pi, math.pi),
    ])
    def test_normalize_radians(self, angle, expected):
        assert normalize_radians_0_to_tau(angle) == pytest.approx(expected)

    def test_normalize_never_returns_full_turn(self):
        """Tiny negative angles wrap to 0, not 2pi."""
        assert normalize_radians_0_to_tau(-1e-17) < TWO_PI

    def test_normalize_degrees(self):
        assert normalize_degrees_0_to_turn(-90.0) == 270.0
        assert normalize_degrees_0_to_turn(720.0) == 0.0

    def test_shortest_distance(self):
        assert shortest_angular_distance_radians(0.1, TWO_PI - 0.1) == pytest.approx(0.2)
        assert shortest_angular_distance_radians(0.0, math.pi) == pytest.approx(math.pi)
