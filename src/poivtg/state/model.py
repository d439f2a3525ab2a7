"""Hand and pattern state for the poi visualizer.

Angular values are radians and speeds are radians per beat. The core
only reads these objects; they are frozen so a state can be shared
across hands, samplers and generator calls without aliasing surprises.
Use ``dataclasses.replace`` (or the ``with_*`` helpers) to derive a new one.
"""

from dataclasses import dataclass, replace
from enum import Enum
from typing import Dict, Iterator, Tuple


class HandId(Enum):
    """Left or right hand."""
    L = "L"
    R = "R"


HAND_IDS: Tuple[HandId, HandId] = (HandId.L, HandId.R)


class PhaseReference(Enum):
    """User-facing phase-zero reference. Storage is always canonical (right = 0)."""
    RIGHT = "right"
    DOWN = "down"
    LEFT = "left"
    UP = "up"


@dataclass(frozen=True)
class HandState:
    """Oscillator and geometry parameters for one hand.

    poi_speed / poi_phase are relative to the arm; the absolute head
    channels are derived, never stored.
    """
    arm_speed: float
    arm_phase: float
    arm_radius: float
    poi_speed: float
    poi_phase: float
    poi_radius: float

    @property
    def head_speed(self) -> float:
        return self.arm_speed + self.poi_speed

    @property
    def head_phase(self) -> float:
        return self.arm_phase + self.poi_phase

    def with_angular(
        self,
        arm_speed: float,
        arm_phase: float,
        poi_speed: float,
        poi_phase: float,
    ) -> "HandState":
        """Copy with the four angular fields overridden; radii are kept."""
        return replace(
            self,
            arm_speed=arm_speed,
            arm_phase=arm_phase,
            poi_speed=poi_speed,
            poi_phase=poi_phase,
        )


@dataclass(frozen=True)
class HandsState:
    """Left/right hand pair, indexable by HandId."""
    left: HandState
    right: HandState

    def __getitem__(self, hand_id: HandId) -> HandState:
        if hand_id is HandId.L:
            return self.left
        if hand_id is HandId.R:
            return self.right
        raise KeyError(hand_id)

    def items(self) -> Iterator[Tuple[HandId, HandState]]:
        yield HandId.L, self.left
        yield HandId.R, self.right

    def as_dict(self) -> Dict[HandId, HandState]:
        return dict(self.items())


@dataclass(frozen=True)
class GlobalState:
    """Global settings. Time-domain fields are in beats."""
    bpm: float
    loop_beats: float
    play_speed: float
    is_playing: bool
    t: float
    show_trails: bool
    trail_beats: float
    trail_sample_hz: float
    show_waves: bool
    phase_reference: PhaseReference = PhaseReference.RIGHT


@dataclass(frozen=True)
class EngineParams:
    """Minimum input the pure engine needs."""
    bpm: float
    hands: HandsState


@dataclass(frozen=True)
class PatternState:
    """Full pattern state: global settings plus both hands."""
    global_state: GlobalState
    hands: HandsState

    def engine_params(self) -> EngineParams:
        return EngineParams(bpm=self.global_state.bpm, hands=self.hands)

    def with_hands(self, left: HandState, right: HandState) -> "PatternState":
        return replace(self, hands=HandsState(left=left, right=right))

    def rotated(self, phase_offset: float) -> "PatternState":
        """Rotate the whole pattern: both arms and both heads turn by the same offset.

        Relative poi phases are untouched, so each absolute head phase
        moves with its arm.
        """
        return self.with_hands(
            replace(self.hands.left, arm_phase=self.hands.left.arm_phase + phase_offset),
            replace(self.hands.right, arm_phase=self.hands.right.arm_phase + phase_offset),
        )
