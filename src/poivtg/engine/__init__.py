"""Oscillator geometry engine.

Pure functions from hand parameters to angles and wall-plane positions,
plus deterministic samplers built on top of them:
- get_angles / get_positions: one beat, both hands
- sample_loop: fixed-step samples across a loop, closed exactly at its end
- TrailSampler: bounded fixed-Hz head history, rebuilt on rewind
- fixtures: deterministic sample dumps for presets and hand-authored cases
"""

from .angles import AnglesByHand, HandAngles, get_angles, hand_angles
from .fixtures import (
    FixtureCase,
    build_all_preset_fixtures,
    build_all_state_fixtures,
    build_fixture_case_set,
    build_fixture_from_state_case,
    build_fixture_manifest,
    build_preset_fixture,
    parse_fixture_cases,
)
from .math import Vector2, beats_to_seconds, sample_hz_to_step_beats, seconds_to_beats
from .positions import HandPositions, PositionsByHand, get_positions, hand_positions
from .ring_buffer import RingBuffer
from .sampling import LoopSample, TrailPoint, build_static_trail_series, sample_loop
from .trails import (
    TrailSamplerConfig,
    TrailSamplerState,
    advance_trail_sampler,
    create_trail_sampler,
    get_trail_points,
)

__all__ = [
    "FixtureCase",
    "build_all_preset_fixtures",
    "build_all_state_fixtures",
    "build_fixture_case_set",
    "build_fixture_from_state_case",
    "build_fixture_manifest",
    "build_preset_fixture",
    "parse_fixture_cases",
    "AnglesByHand",
    "HandAngles",
    "get_angles",
    "hand_angles",
    "Vector2",
    "beats_to_seconds",
    "sample_hz_to_step_beats",
    "seconds_to_beats",
    "HandPositions",
    "PositionsByHand",
    "get_positions",
    "hand_positions",
    "RingBuffer",
    "LoopSample",
    "TrailPoint",
    "build_static_trail_series",
    "sample_loop",
    "TrailSamplerConfig",
    "TrailSamplerState",
    "advance_trail_sampler",
    "create_trail_sampler",
    "get_trail_points",
]
