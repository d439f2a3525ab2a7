"""Shared fixtures for poi-vtg tests."""

import math

import pytest

from poivtg.config import EngineDefaults, create_default_state
from poivtg.state.model import EngineParams, HandState, HandsState

TWO_PI = 2 * math.pi
MATH_TOLERANCE = 1e-9

# Beats covering sub-beat, whole-beat and off-grid sample times
SAMPLE_BEATS = (0.0, 0.125, 0.25, 0.5, 1.0, 2.0, 3.75)


@pytest.fixture
def default_state():
    return create_default_state()


@pytest.fixture
def test_state():
    return create_default_state(EngineDefaults.for_testing())


@pytest.fixture
def split_time_params():
    """Both arms one cycle per beat, right arm half a turn ahead, 3x inspin."""
    left = HandState(
        arm_speed=TWO_PI, arm_phase=0.0, arm_radius=120.0,
        poi_speed=3 * TWO_PI, poi_phase=0.0, poi_radius=180.0,
    )
    right = HandState(
        arm_speed=TWO_PI, arm_phase=math.pi, arm_radius=120.0,
        poi_speed=3 * TWO_PI, poi_phase=0.0, poi_radius=180.0,
    )
    return EngineParams(bpm=120.0, hands=HandsState(left=left, right=right))
