"""Angle model: linear oscillators per hand.

theta(t) = omega * t + phi, evaluated for the arm and for the poi
relative to the arm. The absolute head angle is always arm + rel.
"""

from dataclasses import dataclass
from typing import Dict

from ..state.model import EngineParams, HandId, HandState


@dataclass(frozen=True)
class HandAngles:
    """Angular channels for one hand at one beat."""
    arm: float
    rel: float
    head: float


AnglesByHand = Dict[HandId, HandAngles]


def linear_angle(speed: float, phase: float, t_beats: float) -> float:
    return speed * t_beats + phase


def hand_angles(hand: HandState, t_beats: float) -> HandAngles:
    """Arm, relative and head angles for one hand at t_beats."""
    arm = linear_angle(hand.arm_speed, hand.arm_phase, t_beats)
    rel = linear_angle(hand.poi_speed, hand.poi_phase, t_beats)
    return HandAngles(arm=arm, rel=rel, head=arm + rel)


def get_angles(params: EngineParams, t_beats: float) -> AnglesByHand:
    """Angles for both hands at t_beats."""
    return {hand_id: hand_angles(hand, t_beats) for hand_id, hand in params.hands.items()}
