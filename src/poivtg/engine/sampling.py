"""Deterministic fixed-step sampling across one beat loop."""

import math
from dataclasses import dataclass
from typing import Dict, List

import numpy as np

from ..errors import InputValidationError
from ..state.model import EngineParams, HandId
from .angles import AnglesByHand, get_angles
from .math import Vector2, require_finite, sample_hz_to_step_beats
from .positions import PositionsByHand, get_positions


@dataclass(frozen=True)
class LoopSample:
    """Angles and positions for one sampled beat."""
    t_beats: float
    angles: AnglesByHand
    positions: PositionsByHand


@dataclass(frozen=True)
class TrailPoint:
    """Head position at a beat timestamp."""
    t_beats: float
    point: Vector2


def get_loop_interval_count(loop_beats: float, step_beats: float) -> int:
    """Number of fixed intervals spanning loop_beats.

    Sample count is this + 1 because both endpoints are included.
    """
    require_finite("loop_beats", loop_beats)
    require_finite("step_beats", step_beats)
    if loop_beats < 0:
        raise InputValidationError(f"loop_beats must be >= 0, got {loop_beats!r}")
    if step_beats <= 0:
        raise InputValidationError(f"step_beats must be > 0, got {step_beats!r}")
    return math.ceil(loop_beats / step_beats)


def _sample_beat(start_beat: float, loop_beats: float, step_beats: float, index: int) -> float:
    # Last sample is clamped so the loop always closes exactly on its end
    return min(start_beat + index * step_beats, start_beat + loop_beats)


def sample_loop(
    params: EngineParams,
    sample_hz: float,
    loop_beats: float,
    start_beat: float = 0.0,
) -> List[LoopSample]:
    """Sample angles and positions at fixed beat steps across one loop.

    Args:
        params: Engine inputs (bpm + hands)
        sample_hz: Sample rate in samples per second
        loop_beats: Loop length in beats
        start_beat: Beat where sampling starts

    Returns:
        ceil(loop_beats / step) + 1 samples; the first at start_beat, the
        last exactly at start_beat + loop_beats
    """
    require_finite("start_beat", start_beat)
    step_beats = sample_hz_to_step_beats(sample_hz, params.bpm)
    sample_count = get_loop_interval_count(loop_beats, step_beats) + 1

    samples = []
    for index in range(sample_count):
        t_beats = _sample_beat(start_beat, loop_beats, step_beats, index)
        samples.append(LoopSample(
            t_beats=t_beats,
            angles=get_angles(params, t_beats),
            positions=get_positions(params, t_beats),
        ))
    return samples


def build_static_trail_series(
    params: EngineParams,
    loop_beats: float,
    sample_hz: float,
    start_beat: float = 0.0,
) -> Dict[HandId, List[TrailPoint]]:
    """Full-loop head trail for each hand, independent of frame timing."""
    samples = sample_loop(params, sample_hz, loop_beats, start_beat)
    return {
        hand_id: [
            TrailPoint(t_beats=s.t_beats, point=s.positions[hand_id].head)
            for s in samples
        ]
        for hand_id in (HandId.L, HandId.R)
    }


def trail_points_to_array(points: List[TrailPoint]) -> np.ndarray:
    """Stack trail points into an (N, 3) array of [t_beats, x, y] rows."""
    if not points:
        return np.zeros((0, 3), dtype=np.float64)
    return np.array(
        [[p.t_beats, p.point.x, p.point.y] for p in points],
        dtype=np.float64,
    )
