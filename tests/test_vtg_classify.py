"""Tests for VTG classification."""

import math
from dataclasses import replace

import pytest

from poivtg.errors import ClassificationAmbiguityError
from poivtg.state.model import PhaseReference
from poivtg.vtg.classify import (
    classify_arm_element,
    classify_direction,
    classify_phase_bucket,
    classify_vtg,
    try_classify_vtg,
)
from poivtg.vtg.types import (
    VTGClassification,
    VTGDirection,
    VTGElement,
    VTGRelation,
    VTGTiming,
    get_element_for_relation,
    get_relation_for_element,
)

from conftest import TWO_PI


def _with_right(state, **changes):
    return state.with_hands(state.hands.left, replace(state.hands.right, **changes))


def _with_poi_phase(state, poi_phase):
    """Same relative poi phase on both hands: heads stay split-time."""
    return state.with_hands(
        replace(state.hands.left, poi_phase=poi_phase),
        replace(state.hands.right, poi_phase=poi_phase),
    )


class TestElementTable:

    @pytest.mark.parametrize("element, timing, direction", [
        (VTGElement.EARTH, VTGTiming.SAME_TIME, VTGDirection.SAME_DIRECTION),
        (VTGElement.AIR, VTGTiming.SAME_TIME, VTGDirection.OPPOSITE_DIRECTION),
        (VTGElement.WATER, VTGTiming.SPLIT_TIME, VTGDirection.SAME_DIRECTION),
        (VTGElement.FIRE, VTGTiming.SPLIT_TIME, VTGDirection.OPPOSITE_DIRECTION),
    ])
    def test_relation_lookup_both_ways(self, element, timing, direction):
        relation = VTGRelation(timing, direction)

        assert get_relation_for_element(element) == relation
        assert get_element_for_relation(relation) is element

    def test_direction_uses_sign(self):
        assert classify_direction(1.0, 5.0) is VTGDirection.SAME_DIRECTION
        assert classify_direction(-1.0, -0.5) is VTGDirection.SAME_DIRECTION
        assert classify_direction(1.0, -5.0) is VTGDirection.OPPOSITE_DIRECTION


class TestClassifyVTG:
    """Continuous state -> {arm element, poi element, phase bucket}."""

    def test_default_state_is_water(self, test_state):
        """Same-direction split-time arms and heads, head on the arm line."""
        assert classify_vtg(test_state) == VTGClassification(
            arm_element=VTGElement.WATER,
            poi_element=VTGElement.WATER,
            phase_deg=0,
        )

    def test_arms_only_split_time_is_water(self, test_state):
        """Both arms at 2pi, phases 0 and pi, no relative poi spin."""
        left = replace(test_state.hands.left, arm_speed=TWO_PI, arm_phase=0.0, poi_speed=0.0, poi_phase=0.0)
        right = replace(test_state.hands.right, arm_speed=TWO_PI, arm_phase=math.pi, poi_speed=0.0, poi_phase=0.0)
        state = test_state.with_hands(left, right)

        assert classify_vtg(state) == VTGClassification(
            arm_element=VTGElement.WATER,
            poi_element=VTGElement.WATER,
            phase_deg=0,
        )

    def test_opposite_arms_same_time_is_air(self, test_state):
        state = _with_right(test_state, arm_speed=-TWO_PI, arm_phase=0.0)

        assert classify_arm_element(state) is VTGElement.AIR

    def test_timing_inside_tolerance(self, test_state):
        """4.9 deg off split-time still reads as split-time."""
        state = _with_right(test_state, arm_phase=math.pi + math.radians(4.9))

        assert classify_arm_element(state) is VTGElement.WATER

    def test_timing_outside_tolerance(self, test_state):
        """5.1 deg off split-time has no element."""
        state = _with_right(test_state, arm_phase=math.pi + math.radians(5.1))

        with pytest.raises(ClassificationAmbiguityError):
            classify_arm_element(state)

    def test_phase_bucket_tolerance(self, test_state):
        inside = _with_right(test_state, poi_phase=math.radians(94.9))
        outside = _with_right(test_state, poi_phase=math.radians(95.1))

        assert classify_phase_bucket(inside) == 90
        with pytest.raises(ClassificationAmbiguityError):
            classify_phase_bucket(outside)

    def test_phase_bucket_wraps(self, test_state):
        """A hair under a full turn is bucket 0."""
        state = _with_right(test_state, poi_phase=TWO_PI - math.radians(1.0))

        assert classify_phase_bucket(state) == 0

    def test_zero_arm_speed_is_ambiguous(self, test_state):
        state = _with_right(test_state, arm_speed=0.0)

        with pytest.raises(ClassificationAmbiguityError):
            classify_vtg(state)
        assert try_classify_vtg(state) is None

    def test_zero_head_speed_is_ambiguous(self, test_state):
        """Relative poi exactly cancelling the arm leaves a still head."""
        state = _with_right(test_state, poi_speed=-TWO_PI)

        with pytest.raises(ClassificationAmbiguityError):
            classify_vtg(state)

    @pytest.mark.parametrize("offset", [0.37, -2.0, math.pi, 11.0])
    def test_rotation_invariant(self, test_state, offset):
        """Rotating the whole pattern never changes the classification."""
        state = _with_poi_phase(test_state, math.pi / 2)

        assert classify_vtg(state.rotated(offset)) == classify_vtg(state)

    def test_phase_reference_conversion(self, test_state):
        """Canonical bucket 90 reads as 180 under the down reference."""
        state = _with_poi_phase(test_state, math.pi / 2)

        assert classify_vtg(state).phase_deg == 90
        assert classify_vtg(state, PhaseReference.DOWN).phase_deg == 180
        assert classify_vtg(state, PhaseReference.UP).phase_deg == 0

    def test_try_classify_returns_result(self, test_state):
        assert try_classify_vtg(test_state) == classify_vtg(test_state)
