"""Position model: polar -> Cartesian for hand, head and tether.

H(t) = R_arm * (cos theta_arm, sin theta_arm)
P(t) = H(t) + R_poi * (cos theta_head, sin theta_head)
tether = P(t) - H(t)
"""

from dataclasses import dataclass
from typing import Dict

from ..state.model import EngineParams, HandId, HandState
from .angles import get_angles
from .math import Vector2


@dataclass(frozen=True)
class HandPositions:
    """Wall-plane positions for one hand at one beat."""
    hand: Vector2
    head: Vector2
    tether: Vector2


PositionsByHand = Dict[HandId, HandPositions]


def hand_positions(hand: HandState, arm_angle: float, head_angle: float) -> HandPositions:
    hand_point = Vector2.from_polar(hand.arm_radius, arm_angle)
    head_offset = Vector2.from_polar(hand.poi_radius, head_angle)
    head_point = hand_point + head_offset
    return HandPositions(
        hand=hand_point,
        head=head_point,
        tether=head_point - hand_point,
    )


def get_positions(params: EngineParams, t_beats: float) -> PositionsByHand:
    """Positions for both hands at t_beats."""
    angles = get_angles(params, t_beats)
    return {
        hand_id: hand_positions(hand, angles[hand_id].arm, angles[hand_id].head)
        for hand_id, hand in params.hands.items()
    }
