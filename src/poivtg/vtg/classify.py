"""VTG classification: continuous hand state -> discrete descriptor.

Only relative relations are consulted (left vs right, head vs arm),
never absolute orientation, so classification is rotation-invariant.
"""

import math
from typing import Optional

from ..errors import ClassificationAmbiguityError
from ..state.model import PatternState, PhaseReference
from ..state.phase_math import (
    SAME_TIME_PHASE_OFFSET,
    SPLIT_TIME_PHASE_OFFSET,
    normalize_radians_0_to_tau,
    shortest_angular_distance_radians,
)
from ..state.phase_reference import canonical_phase_bucket_to_reference
from ..state.units import degrees_to_radians
from .types import (
    VTG_PHASE_BUCKETS,
    VTGClassification,
    VTGDirection,
    VTGElement,
    VTGRelation,
    VTGTiming,
    get_element_for_relation,
)

SPEED_SIGN_TOLERANCE = 1e-9
VTG_PHASE_BUCKET_TOLERANCE_DEGREES = 5.0
VTG_PHASE_BUCKET_TOLERANCE_RADIANS = degrees_to_radians(VTG_PHASE_BUCKET_TOLERANCE_DEGREES)


def classify_direction(speed_a: float, speed_b: float) -> VTGDirection:
    """Same sign -> same-direction, otherwise opposite-direction."""
    if abs(speed_a) <= SPEED_SIGN_TOLERANCE or abs(speed_b) <= SPEED_SIGN_TOLERANCE:
        raise ClassificationAmbiguityError(
            f"Cannot classify direction with near-zero angular speed ({speed_a}, {speed_b})"
        )
    if math.copysign(1.0, speed_a) == math.copysign(1.0, speed_b):
        return VTGDirection.SAME_DIRECTION
    return VTGDirection.OPPOSITE_DIRECTION


def classify_binary_timing(offset_radians: float) -> VTGTiming:
    """Offset within tolerance of 0 -> same-time, of pi -> split-time."""
    if shortest_angular_distance_radians(offset_radians, SAME_TIME_PHASE_OFFSET) <= VTG_PHASE_BUCKET_TOLERANCE_RADIANS:
        return VTGTiming.SAME_TIME
    if shortest_angular_distance_radians(offset_radians, SPLIT_TIME_PHASE_OFFSET) <= VTG_PHASE_BUCKET_TOLERANCE_RADIANS:
        return VTGTiming.SPLIT_TIME
    raise ClassificationAmbiguityError(
        f"Phase offset {math.degrees(offset_radians):.2f} deg is outside "
        f"±{VTG_PHASE_BUCKET_TOLERANCE_DEGREES:g} deg VTG timing tolerance"
    )


def classify_arm_element(state: PatternState) -> VTGElement:
    """Element from arm direction and right-minus-left arm phase."""
    left, right = state.hands.left, state.hands.right
    direction = classify_direction(left.arm_speed, right.arm_speed)
    timing = classify_binary_timing(normalize_radians_0_to_tau(right.arm_phase - left.arm_phase))
    return get_element_for_relation(VTGRelation(timing, direction))


def classify_poi_element(state: PatternState) -> VTGElement:
    """Element from absolute head direction and head phase relation."""
    left, right = state.hands.left, state.hands.right
    direction = classify_direction(left.head_speed, right.head_speed)
    timing = classify_binary_timing(normalize_radians_0_to_tau(right.head_phase - left.head_phase))
    return get_element_for_relation(VTGRelation(timing, direction))


def classify_phase_bucket(state: PatternState) -> int:
    """Canonical quarter-turn bucket of the right head relative to the right arm."""
    right = state.hands.right
    offset = normalize_radians_0_to_tau(right.head_phase - right.arm_phase)

    best_bucket = None
    best_distance = math.inf
    for bucket in VTG_PHASE_BUCKETS:
        distance = shortest_angular_distance_radians(offset, degrees_to_radians(bucket))
        if distance < best_distance:
            best_bucket = bucket
            best_distance = distance

    if best_bucket is None or best_distance > VTG_PHASE_BUCKET_TOLERANCE_RADIANS:
        raise ClassificationAmbiguityError(
            f"Head phase is outside ±{VTG_PHASE_BUCKET_TOLERANCE_DEGREES:g} deg VTG bucket tolerance"
        )
    return best_bucket


def classify_vtg(
    state: PatternState,
    phase_reference: PhaseReference = PhaseReference.RIGHT,
) -> VTGClassification:
    """Classify a state into {arm_element, poi_element, phase_deg}.

    phase_deg is expressed relative to phase_reference (canonical for RIGHT).

    Raises:
        ClassificationAmbiguityError: any relation is outside tolerance
    """
    phase_deg = classify_phase_bucket(state)
    return VTGClassification(
        arm_element=classify_arm_element(state),
        poi_element=classify_poi_element(state),
        phase_deg=canonical_phase_bucket_to_reference(phase_deg, phase_reference),
    )


def try_classify_vtg(
    state: PatternState,
    phase_reference: PhaseReference = PhaseReference.RIGHT,
) -> Optional[VTGClassification]:
    """classify_vtg, or None when the state has no VTG name."""
    try:
        return classify_vtg(state, phase_reference)
    except ClassificationAmbiguityError:
        return None
