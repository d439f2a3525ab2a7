"""Descriptive cardinal geometry for VTG elements.

A language aid, not a classifier: it says whether the two hands (or
heads) are "together" or "apart" when the left one passes right, up,
left and down. Element classification stays timing + direction.
"""

import math
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Tuple

from ..errors import ClassificationAmbiguityError
from ..state.model import PatternState
from ..state.phase_math import (
    SAME_TIME_PHASE_OFFSET,
    SPLIT_TIME_PHASE_OFFSET,
    normalize_radians_0_to_tau,
    shortest_angular_distance_radians,
)
from ..state.phase_reference import get_phase_reference_offset_radians
from .classify import SPEED_SIGN_TOLERANCE, VTG_PHASE_BUCKET_TOLERANCE_RADIANS
from .types import VTGElement


class CardinalGeometry(Enum):
    TOGETHER = "together"
    APART = "apart"


@dataclass(frozen=True)
class CardinalGeometryDescription:
    right: CardinalGeometry
    up: CardinalGeometry
    left: CardinalGeometry
    down: CardinalGeometry


CARDINAL_PHASES: Tuple[Tuple[str, float], ...] = (
    ("right", 0.0),
    ("up", math.pi / 2),
    ("left", math.pi),
    ("down", 3 * math.pi / 2),
)

_T = CardinalGeometry.TOGETHER
_A = CardinalGeometry.APART

# Phrasing under the conventional "phase zero = down" orientation
ELEMENT_CARDINAL_GEOMETRY: Dict[VTGElement, CardinalGeometryDescription] = {
    VTGElement.EARTH: CardinalGeometryDescription(right=_T, up=_T, left=_T, down=_T),
    VTGElement.AIR: CardinalGeometryDescription(right=_A, up=_T, left=_A, down=_T),
    VTGElement.WATER: CardinalGeometryDescription(right=_A, up=_A, left=_A, down=_A),
    VTGElement.FIRE: CardinalGeometryDescription(right=_T, up=_A, left=_T, down=_A),
}


def _classify_together_apart(offset_radians: float) -> CardinalGeometry:
    if shortest_angular_distance_radians(offset_radians, SAME_TIME_PHASE_OFFSET) <= VTG_PHASE_BUCKET_TOLERANCE_RADIANS:
        return CardinalGeometry.TOGETHER
    if shortest_angular_distance_radians(offset_radians, SPLIT_TIME_PHASE_OFFSET) <= VTG_PHASE_BUCKET_TOLERANCE_RADIANS:
        return CardinalGeometry.APART
    raise ClassificationAmbiguityError("Cardinal geometry is outside together/apart tolerance")


def _solve_beat_for_phase(phase: float, speed: float, target_phase: float) -> float:
    if abs(speed) <= SPEED_SIGN_TOLERANCE:
        raise ClassificationAmbiguityError(
            "Cannot evaluate cardinal geometry with near-zero angular speed"
        )
    return (target_phase - phase) / speed


def describe_geometry_at_cardinals(
    left_speed: float,
    left_phase: float,
    right_speed: float,
    right_phase: float,
) -> CardinalGeometryDescription:
    """Together/apart at each cardinal passage of the left oscillator."""
    geometry = {}
    for key, cardinal_phase in CARDINAL_PHASES:
        t_beats = _solve_beat_for_phase(left_phase, left_speed, cardinal_phase)
        left_theta = left_speed * t_beats + left_phase
        right_theta = right_speed * t_beats + right_phase
        geometry[key] = _classify_together_apart(normalize_radians_0_to_tau(right_theta - left_theta))
    return CardinalGeometryDescription(**geometry)


def describe_element_geometry_at_cardinals(element: VTGElement) -> CardinalGeometryDescription:
    return ELEMENT_CARDINAL_GEOMETRY[element]


def describe_arm_geometry_at_cardinals(state: PatternState) -> CardinalGeometryDescription:
    """Cardinal language for the arms, in the state's phase reference."""
    offset = get_phase_reference_offset_radians(state.global_state.phase_reference)
    left, right = state.hands.left, state.hands.right
    return describe_geometry_at_cardinals(
        left.arm_speed,
        left.arm_phase + offset,
        right.arm_speed,
        right.arm_phase + offset,
    )


def describe_poi_geometry_at_cardinals(state: PatternState) -> CardinalGeometryDescription:
    """Cardinal language for the heads, in the state's phase reference."""
    offset = get_phase_reference_offset_radians(state.global_state.phase_reference)
    left, right = state.hands.left, state.hands.right
    return describe_geometry_at_cardinals(
        left.head_speed,
        left.head_phase + offset,
        right.head_speed,
        right.head_phase + offset,
    )
