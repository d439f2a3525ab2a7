"""Default settings for poi-vtg states."""

from dataclasses import dataclass
from typing import Optional

from .state.phase_math import SAME_TIME_PHASE_OFFSET, SPLIT_TIME_PHASE_OFFSET
from .state.units import TWO_PI
from .state.model import (
    GlobalState,
    HandState,
    HandsState,
    PatternState,
    PhaseReference,
)


@dataclass
class EngineDefaults:
    """Defaults used to build a canonical pattern state.

    Speeds are given in cycles per beat here and converted to radians
    per beat when the state is built.
    """

    # Transport
    bpm: float = 120.0
    loop_beats: float = 4.0
    play_speed: float = 1.0
    playhead_beats: float = 0.0

    # Trails
    trail_beats: float = 1.0
    trail_sample_hz: float = 120.0

    # Hands
    arm_radius: float = 120.0
    poi_radius: float = 180.0
    arm_cycles_per_beat: float = 1.0
    relative_poi_cycles_per_beat: float = 3.0   # 3 relative turns per arm turn

    phase_reference: PhaseReference = PhaseReference.DOWN

    @classmethod
    def for_testing(cls) -> "EngineDefaults":
        """Small radii and a coarse trail for quick, readable tests."""
        return cls(
            trail_beats=0.5,
            trail_sample_hz=24.0,
            arm_radius=90.0,
            poi_radius=45.0,
            phase_reference=PhaseReference.RIGHT,
        )

    @classmethod
    def for_fixtures(cls) -> "EngineDefaults":
        """Settings matching the checked-in sampling fixtures."""
        return cls(playhead_beats=0.0, trail_sample_hz=120.0)


def create_default_state(defaults: Optional[EngineDefaults] = None) -> PatternState:
    """Build the canonical default state: both hands identical, arms split-time."""
    defaults = defaults or EngineDefaults()

    arm_speed = defaults.arm_cycles_per_beat * TWO_PI
    poi_speed = defaults.relative_poi_cycles_per_beat * TWO_PI

    def hand(arm_phase: float) -> HandState:
        return HandState(
            arm_speed=arm_speed,
            arm_phase=arm_phase,
            arm_radius=defaults.arm_radius,
            poi_speed=poi_speed,
            poi_phase=0.0,
            poi_radius=defaults.poi_radius,
        )

    return PatternState(
        global_state=GlobalState(
            bpm=defaults.bpm,
            loop_beats=defaults.loop_beats,
            play_speed=defaults.play_speed,
            is_playing=False,
            t=defaults.playhead_beats,
            show_trails=True,
            trail_beats=defaults.trail_beats,
            trail_sample_hz=defaults.trail_sample_hz,
            show_waves=True,
            phase_reference=defaults.phase_reference,
        ),
        hands=HandsState(
            left=hand(SAME_TIME_PHASE_OFFSET),
            right=hand(SPLIT_TIME_PHASE_OFFSET),
        ),
    )
