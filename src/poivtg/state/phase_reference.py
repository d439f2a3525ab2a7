"""Phase-reference adapter.

Engine and VTG internals measure phase from a canonical zero at "right"
(+x). Users may prefer zero at down, left or up. The adapter applies or
removes a fixed additive offset per reference so the rest of the core
never has to know which one is active.
"""

import math
from typing import Dict, Tuple

from ..errors import InputValidationError
from .model import PhaseReference
from .phase_math import normalize_radians_0_to_tau
from .units import degrees_to_radians, radians_to_degrees

# Quarter-turn phase buckets in degrees, canonical iteration order
QUARTER_TURN_PHASE_BUCKETS: Tuple[int, ...] = (0, 90, 180, 270)

PHASE_REFERENCE_OPTIONS: Tuple[PhaseReference, ...] = (
    PhaseReference.DOWN,
    PhaseReference.RIGHT,
    PhaseReference.LEFT,
    PhaseReference.UP,
)

PHASE_REFERENCE_OFFSET_RADIANS: Dict[PhaseReference, float] = {
    PhaseReference.RIGHT: 0.0,
    PhaseReference.DOWN: 3 * math.pi / 2,
    PhaseReference.LEFT: math.pi,
    PhaseReference.UP: math.pi / 2,
}

PHASE_REFERENCE_OFFSET_DEGREES: Dict[PhaseReference, int] = {
    PhaseReference.RIGHT: 0,
    PhaseReference.DOWN: 270,
    PhaseReference.LEFT: 180,
    PhaseReference.UP: 90,
}


def get_phase_reference_offset_radians(phase_reference: PhaseReference) -> float:
    """Canonical radians offset of the given reference's zero."""
    return PHASE_REFERENCE_OFFSET_RADIANS[phase_reference]


def to_reference_phase(canonical_radians: float, phase_reference: PhaseReference) -> float:
    """Canonical (right = 0) radians -> reference-relative radians."""
    return canonical_radians - get_phase_reference_offset_radians(phase_reference)


def from_reference_phase(reference_radians: float, phase_reference: PhaseReference) -> float:
    """Reference-relative radians -> canonical (right = 0) radians."""
    return reference_radians + get_phase_reference_offset_radians(phase_reference)


def _normalize_quarter_turn(phase_deg: float) -> int:
    normalized = phase_deg % 360
    if normalized not in QUARTER_TURN_PHASE_BUCKETS:
        raise InputValidationError(
            f"Phase bucket must be one of 0/90/180/270, got {phase_deg}"
        )
    return int(normalized)


def canonical_phase_bucket_to_reference(phase_deg: int, phase_reference: PhaseReference) -> int:
    """Canonical quarter-turn bucket -> reference-relative bucket."""
    return _normalize_quarter_turn(phase_deg - PHASE_REFERENCE_OFFSET_DEGREES[phase_reference])


def reference_phase_bucket_to_canonical(phase_deg: int, phase_reference: PhaseReference) -> int:
    """Reference-relative quarter-turn bucket -> canonical bucket."""
    return _normalize_quarter_turn(phase_deg + PHASE_REFERENCE_OFFSET_DEGREES[phase_reference])


def canonical_phase_radians_to_reference_degrees(
    canonical_radians: float,
    phase_reference: PhaseReference,
) -> float:
    return radians_to_degrees(to_reference_phase(canonical_radians, phase_reference))


def reference_phase_degrees_to_canonical_radians(
    reference_degrees: float,
    phase_reference: PhaseReference,
) -> float:
    return from_reference_phase(degrees_to_radians(reference_degrees), phase_reference)


def normalize_canonical_phase_radians(phase_radians: float) -> float:
    """Wrap a canonical phase into [0, 2pi)."""
    return normalize_radians_0_to_tau(phase_radians)
