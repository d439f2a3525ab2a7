"""Strict validation of externally supplied state snapshots.

Snapshots arrive as plain mappings using the external state layer's
camelCase field names. Every field is required: there is no merging
with defaults. Numbers must be finite (bools are rejected), flags must
be real bools, and the phase reference must be one of the four names.
"""

import math
import numbers
from typing import Any, Dict, Mapping

from ..errors import InputValidationError
from .model import (
    GlobalState,
    HandId,
    HandState,
    HandsState,
    PatternState,
    PhaseReference,
)

GLOBAL_NUMBER_KEYS = {
    "bpm": "bpm",
    "loopBeats": "loop_beats",
    "playSpeed": "play_speed",
    "t": "t",
    "trailBeats": "trail_beats",
    "trailSampleHz": "trail_sample_hz",
}
GLOBAL_BOOLEAN_KEYS = {
    "isPlaying": "is_playing",
    "showTrails": "show_trails",
    "showWaves": "show_waves",
}
HAND_NUMBER_KEYS = {
    "armSpeed": "arm_speed",
    "armPhase": "arm_phase",
    "armRadius": "arm_radius",
    "poiSpeed": "poi_speed",
    "poiPhase": "poi_phase",
    "poiRadius": "poi_radius",
}


def _is_finite_number(value: Any) -> bool:
    return (
        not isinstance(value, bool)
        and isinstance(value, numbers.Real)
        and math.isfinite(value)
    )


def _require_mapping(value: Any, path: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise InputValidationError(f"State {path} must be an object")
    return value


def _read_number(source: Mapping[str, Any], key: str, path: str) -> float:
    if key not in source or not _is_finite_number(source[key]):
        raise InputValidationError(f"State {path}.{key} must be a finite number")
    return float(source[key])


def _read_boolean(source: Mapping[str, Any], key: str, path: str) -> bool:
    if key not in source or not isinstance(source[key], bool):
        raise InputValidationError(f"State {path}.{key} must be a boolean")
    return source[key]


def _read_phase_reference(source: Mapping[str, Any]) -> PhaseReference:
    try:
        return PhaseReference(source.get("phaseReference"))
    except ValueError:
        raise InputValidationError(
            "State global.phaseReference must be one of right/down/left/up"
        ) from None


def parse_hand_state(candidate: Any, hand_id: HandId) -> HandState:
    path = f"hands.{hand_id.value}"
    source = _require_mapping(candidate, path)
    return HandState(**{
        field_name: _read_number(source, key, path)
        for key, field_name in HAND_NUMBER_KEYS.items()
    })


def parse_global_state(candidate: Any) -> GlobalState:
    source = _require_mapping(candidate, "global")
    values: Dict[str, Any] = {}
    for key, field_name in GLOBAL_NUMBER_KEYS.items():
        values[field_name] = _read_number(source, key, "global")
    for key, field_name in GLOBAL_BOOLEAN_KEYS.items():
        values[field_name] = _read_boolean(source, key, "global")
    values["phase_reference"] = _read_phase_reference(source)
    return GlobalState(**values)


def parse_pattern_state(candidate: Any) -> PatternState:
    """Validate a full {global, hands: {L, R}} snapshot.

    Raises:
        InputValidationError: any field missing, mistyped or non-finite
    """
    source = _require_mapping(candidate, "")
    if "global" not in source or "hands" not in source:
        raise InputValidationError("State must include full `global` and `hands` objects")
    hands = _require_mapping(source["hands"], "hands")

    return PatternState(
        global_state=parse_global_state(source["global"]),
        hands=HandsState(
            left=parse_hand_state(hands.get("L"), HandId.L),
            right=parse_hand_state(hands.get("R"), HandId.R),
        ),
    )


def pattern_state_to_dict(state: PatternState) -> Dict[str, Any]:
    """Inverse of parse_pattern_state."""
    global_state = state.global_state
    result: Dict[str, Any] = {"global": {}, "hands": {}}
    for key, field_name in {**GLOBAL_NUMBER_KEYS, **GLOBAL_BOOLEAN_KEYS}.items():
        result["global"][key] = getattr(global_state, field_name)
    result["global"]["phaseReference"] = global_state.phase_reference.value

    for hand_id, hand in state.hands.items():
        result["hands"][hand_id.value] = {
            key: getattr(hand, field_name) for key, field_name in HAND_NUMBER_KEYS.items()
        }
    return result
