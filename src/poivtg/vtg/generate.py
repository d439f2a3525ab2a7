"""VTG generation: discrete descriptor -> canonical continuous state.

The right arm is fixed as the baseline (one cycle per beat, phase 0);
everything else is derived from the element relations and back-solved
into the relative poi channels. The result is re-classified before it
is returned.
"""

import logging
import math
import numbers

from ..errors import (
    ClassificationAmbiguityError,
    GenerationInvariantError,
    InputValidationError,
)
from ..state.model import PatternState, PhaseReference
from ..state.phase_math import SAME_TIME_PHASE_OFFSET, SPLIT_TIME_PHASE_OFFSET
from ..state.phase_reference import reference_phase_bucket_to_canonical
from ..state.units import degrees_to_radians
from .classify import classify_vtg
from .types import (
    VTG_CANONICAL_ARM_SPEED,
    VTG_PHASE_BUCKETS,
    VTGClassification,
    VTGDescriptor,
    VTGDirection,
    VTGTiming,
    get_relation_for_element,
    poi_cycles_per_arm_cycle_to_head_speed,
)

logger = logging.getLogger(__name__)

CANONICAL_RIGHT_ARM_SPEED = VTG_CANONICAL_ARM_SPEED
CANONICAL_RIGHT_ARM_PHASE = 0.0
ZERO_CYCLE_TOLERANCE = 1e-9


def _timing_to_phase_offset(timing: VTGTiming) -> float:
    return SPLIT_TIME_PHASE_OFFSET if timing is VTGTiming.SPLIT_TIME else SAME_TIME_PHASE_OFFSET


def _signed_like(direction: VTGDirection, value: float) -> float:
    return value if direction is VTGDirection.SAME_DIRECTION else -value


def _validate_poi_cycles(poi_cycles_per_arm_cycle: float) -> None:
    if isinstance(poi_cycles_per_arm_cycle, bool) or not isinstance(poi_cycles_per_arm_cycle, numbers.Real):
        raise InputValidationError("VTG poi_cycles_per_arm_cycle must be a number")
    if not math.isfinite(poi_cycles_per_arm_cycle):
        raise InputValidationError("VTG poi_cycles_per_arm_cycle must be finite")
    if abs(poi_cycles_per_arm_cycle) <= ZERO_CYCLE_TOLERANCE:
        raise InputValidationError("VTG poi_cycles_per_arm_cycle must be non-zero")


def _validate_phase_bucket(phase_deg: int) -> None:
    if isinstance(phase_deg, bool) or phase_deg not in VTG_PHASE_BUCKETS:
        raise InputValidationError(
            f"VTG phase_deg must be one of 0/90/180/270, got {phase_deg!r}"
        )


def _check_round_trip(state: PatternState, expected: VTGClassification) -> None:
    try:
        actual = classify_vtg(state)
    except ClassificationAmbiguityError as exc:
        raise GenerationInvariantError(f"Generated state is not classifiable: {exc}") from exc

    if actual.arm_element is not expected.arm_element:
        raise GenerationInvariantError(
            f"Generated arm element mismatch: expected {expected.arm_element.value}, "
            f"got {actual.arm_element.value}"
        )
    if actual.poi_element is not expected.poi_element:
        raise GenerationInvariantError(
            f"Generated poi element mismatch: expected {expected.poi_element.value}, "
            f"got {actual.poi_element.value}"
        )
    if actual.phase_deg != expected.phase_deg:
        raise GenerationInvariantError(
            f"Generated phase bucket mismatch: expected {expected.phase_deg}, got {actual.phase_deg}"
        )


def generate_vtg_state(
    descriptor: VTGDescriptor,
    base_state: PatternState,
    phase_reference: PhaseReference = PhaseReference.RIGHT,
) -> PatternState:
    """Build the canonical state for a VTG descriptor.

    Only arm speed/phase and relative poi speed/phase change; radii and
    global settings come from base_state.

    Args:
        descriptor: Elements, phase bucket and signed poi cycles per arm cycle
        base_state: Source of every non-angular field
        phase_reference: Reference the descriptor's phase_deg is expressed in

    Returns:
        New PatternState that classifies back to the descriptor

    Raises:
        InputValidationError: poi_cycles_per_arm_cycle is zero or non-finite,
            or phase_deg is not a quarter-turn bucket
        GenerationInvariantError: the self-check failed
    """
    _validate_poi_cycles(descriptor.poi_cycles_per_arm_cycle)
    _validate_phase_bucket(descriptor.phase_deg)
    canonical_phase_deg = reference_phase_bucket_to_canonical(descriptor.phase_deg, phase_reference)

    arm_relation = get_relation_for_element(descriptor.arm_element)
    poi_relation = get_relation_for_element(descriptor.poi_element)

    right_arm_speed = CANONICAL_RIGHT_ARM_SPEED
    right_arm_phase = CANONICAL_RIGHT_ARM_PHASE
    left_arm_speed = _signed_like(arm_relation.direction, right_arm_speed)
    left_arm_phase = right_arm_phase - _timing_to_phase_offset(arm_relation.timing)

    right_head_speed = poi_cycles_per_arm_cycle_to_head_speed(descriptor.poi_cycles_per_arm_cycle)
    left_head_speed = _signed_like(poi_relation.direction, right_head_speed)

    # The phase bucket is the right head's offset from the right arm
    right_head_phase = right_arm_phase + degrees_to_radians(canonical_phase_deg)
    left_head_phase = right_head_phase - _timing_to_phase_offset(poi_relation.timing)

    hands = base_state.hands
    state = base_state.with_hands(
        hands.left.with_angular(
            arm_speed=left_arm_speed,
            arm_phase=left_arm_phase,
            poi_speed=left_head_speed - left_arm_speed,
            poi_phase=left_head_phase - left_arm_phase,
        ),
        hands.right.with_angular(
            arm_speed=right_arm_speed,
            arm_phase=right_arm_phase,
            poi_speed=right_head_speed - right_arm_speed,
            poi_phase=right_head_phase - right_arm_phase,
        ),
    )

    expected = VTGClassification(
        arm_element=descriptor.arm_element,
        poi_element=descriptor.poi_element,
        phase_deg=canonical_phase_deg,
    )
    _check_round_trip(state, expected)

    logger.debug(
        "Generated VTG state %s/%s phase=%d (canonical %d) cycles=%g",
        descriptor.arm_element.value,
        descriptor.poi_element.value,
        descriptor.phase_deg,
        canonical_phase_deg,
        descriptor.poi_cycles_per_arm_cycle,
    )
    return state
