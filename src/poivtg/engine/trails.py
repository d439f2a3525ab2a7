"""Fixed-step trail sampling with bounded per-hand history.

The trail samples head positions at a fixed beat step derived from
trail_sample_hz, not once per render frame, so trail output only depends
on the sequence of frame beats it is advanced to.

The sampler state is an explicit value. advance_trail_sampler returns a
new state and never touches the one it was given.
"""

import logging
from dataclasses import dataclass, replace
from typing import Dict, List

from ..state.model import EngineParams, HandId, HAND_IDS
from .math import get_trail_capacity, require_finite, sample_hz_to_step_beats
from .positions import get_positions
from .ring_buffer import RingBuffer
from .sampling import TrailPoint

logger = logging.getLogger(__name__)

TrailBuffers = Dict[HandId, RingBuffer[TrailPoint]]


@dataclass(frozen=True)
class TrailSamplerConfig:
    """Trail window and sample rate."""
    bpm: float
    trail_beats: float
    trail_sample_hz: float

    @property
    def capacity(self) -> int:
        return get_trail_capacity(self.trail_sample_hz, self.trail_beats, self.bpm)


@dataclass(frozen=True)
class TrailSamplerState:
    config: TrailSamplerConfig
    sample_step_beats: float     # beat step derived from trail_sample_hz and bpm
    next_sample_beat: float      # next beat due for sampling
    last_frame_beat: float       # most recent frame beat advanced to
    trails: TrailBuffers


def _create_buffers(capacity: int) -> TrailBuffers:
    return {hand_id: RingBuffer(capacity) for hand_id in HAND_IDS}


def _copy_buffers(trails: TrailBuffers) -> TrailBuffers:
    return {hand_id: buffer.copy() for hand_id, buffer in trails.items()}


def _append_sample(trails: TrailBuffers, params: EngineParams, t_beats: float) -> None:
    positions = get_positions(params, t_beats)
    for hand_id, buffer in trails.items():
        buffer.push(TrailPoint(t_beats=t_beats, point=positions[hand_id].head))


def create_trail_sampler(
    config: TrailSamplerConfig,
    params: EngineParams,
    start_beat: float,
) -> TrailSamplerState:
    """Create a sampler seeded with one sample at start_beat."""
    require_finite("start_beat", start_beat)
    capacity = config.capacity
    step = sample_hz_to_step_beats(config.trail_sample_hz, config.bpm)

    trails = _create_buffers(capacity)
    _append_sample(trails, params, start_beat)

    return TrailSamplerState(
        config=config,
        sample_step_beats=step,
        next_sample_beat=start_beat + step,
        last_frame_beat=start_beat,
        trails=trails,
    )


def _rebuild(state: TrailSamplerState, params: EngineParams, frame_beat: float) -> TrailSamplerState:
    """Resample the whole trailing window so it ends exactly at frame_beat."""
    capacity = state.config.capacity
    step = state.sample_step_beats
    trails = _create_buffers(capacity)

    if capacity > 0:
        oldest_beat = frame_beat - (capacity - 1) * step
        for index in range(capacity - 1):
            _append_sample(trails, params, oldest_beat + index * step)
        _append_sample(trails, params, frame_beat)

    logger.debug(
        "Trail rewind to beat %.4f (from %.4f), rebuilt %d samples",
        frame_beat, state.last_frame_beat, capacity,
    )
    return replace(
        state,
        trails=trails,
        next_sample_beat=frame_beat + step,
        last_frame_beat=frame_beat,
    )


def _pending_sample_count(next_sample_beat: float, frame_beat: float, step: float) -> int:
    if frame_beat < next_sample_beat:
        return 0
    return int((frame_beat - next_sample_beat) // step) + 1


def advance_trail_sampler(
    state: TrailSamplerState,
    params: EngineParams,
    frame_beat: float,
) -> TrailSamplerState:
    """Catch the trail up to frame_beat.

    Moving backwards (frame_beat < last_frame_beat) rebuilds the full
    window instead of patching the buffers.
    """
    require_finite("frame_beat", frame_beat)
    if frame_beat < state.last_frame_beat:
        return _rebuild(state, params, frame_beat)

    step = state.sample_step_beats
    pending = _pending_sample_count(state.next_sample_beat, frame_beat, step)
    if pending == 0:
        return replace(state, last_frame_beat=frame_beat)

    trails = _copy_buffers(state.trails)
    for index in range(pending):
        _append_sample(trails, params, state.next_sample_beat + index * step)

    return replace(
        state,
        trails=trails,
        next_sample_beat=state.next_sample_beat + pending * step,
        last_frame_beat=frame_beat,
    )


def get_trail_points(state: TrailSamplerState) -> Dict[HandId, List[TrailPoint]]:
    """Both hands' trail points, oldest -> newest."""
    return {hand_id: buffer.to_list() for hand_id, buffer in state.trails.items()}
