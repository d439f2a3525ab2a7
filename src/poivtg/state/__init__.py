"""Pattern state: hand parameters, units, phase references and presets."""

from .model import (
    HAND_IDS,
    EngineParams,
    GlobalState,
    HandId,
    HandState,
    HandsState,
    PatternState,
    PhaseReference,
)
from .phase_reference import (
    canonical_phase_bucket_to_reference,
    from_reference_phase,
    reference_phase_bucket_to_canonical,
    to_reference_phase,
)
from .presets import PRESET_CATALOG, PresetDefinition, apply_preset_by_id
from .validation import parse_pattern_state, pattern_state_to_dict

__all__ = [
    "HAND_IDS",
    "EngineParams",
    "GlobalState",
    "HandId",
    "HandState",
    "HandsState",
    "PatternState",
    "PhaseReference",
    "canonical_phase_bucket_to_reference",
    "from_reference_phase",
    "reference_phase_bucket_to_canonical",
    "to_reference_phase",
    "PRESET_CATALOG",
    "PresetDefinition",
    "apply_preset_by_id",
    "parse_pattern_state",
    "pattern_state_to_dict",
]
