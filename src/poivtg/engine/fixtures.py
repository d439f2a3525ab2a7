"""Deterministic sampling fixtures.

Fixtures pin the engine's output for known states so regressions show up
as numeric diffs. Everything here builds plain JSON-ready dicts; where
they are written is up to the caller.
"""

import json
import logging
import re
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from ..config import EngineDefaults, create_default_state
from ..errors import InputValidationError
from ..state.model import HandId, PatternState
from ..state.presets import PRESET_CATALOG, PresetDefinition
from ..state.validation import parse_pattern_state
from .sampling import LoopSample, sample_loop

logger = logging.getLogger(__name__)

FIXTURE_SCHEMA_VERSION = 1
FIXTURE_CASES_SCHEMA_VERSION = 1
DEFAULT_FIXTURE_ID = "default"
FIXTURE_SAMPLE_HZ = EngineDefaults.for_fixtures().trail_sample_hz
FIXTURE_START_BEAT = EngineDefaults.for_fixtures().playhead_beats

FIXTURE_ID_PATTERN = re.compile(r"^[a-z0-9]+(?:-[a-z0-9]+)*$")


@dataclass(frozen=True)
class FixtureCase:
    """One fixture input: a stable id and a fully specified state."""
    id: str
    state: PatternState


def _fixture_sample(sample: LoopSample) -> Dict[str, Any]:
    return {
        "tBeats": sample.t_beats,
        "L": {"x": sample.positions[HandId.L].head.x, "y": sample.positions[HandId.L].head.y},
        "R": {"x": sample.positions[HandId.R].head.x, "y": sample.positions[HandId.R].head.y},
    }


def sample_fixture_rows(state: PatternState, sample_hz: float, start_beat: float) -> List[Dict[str, Any]]:
    """Head positions for both hands across the state's loop."""
    samples = sample_loop(state.engine_params(), sample_hz, state.global_state.loop_beats, start_beat)
    return [_fixture_sample(s) for s in samples]


def get_fixture_filename(fixture_id: str) -> str:
    return f"{fixture_id}.json"


def build_preset_fixture(
    preset: PresetDefinition,
    base_state: PatternState,
    sample_hz: float = FIXTURE_SAMPLE_HZ,
    start_beat: float = FIXTURE_START_BEAT,
) -> Dict[str, Any]:
    """Apply a preset to base_state and sample one loop of head positions."""
    state = preset.apply(base_state)
    samples = sample_fixture_rows(state, sample_hz, start_beat)
    logger.debug("Built fixture %s with %d samples", preset.id, len(samples))
    return {
        "schemaVersion": FIXTURE_SCHEMA_VERSION,
        "presetId": preset.id,
        "bpm": state.global_state.bpm,
        "loopBeats": state.global_state.loop_beats,
        "sampleHz": sample_hz,
        "startBeat": start_beat,
        "sampleCount": len(samples),
        "samples": samples,
    }


def build_all_preset_fixtures(
    sample_hz: float = FIXTURE_SAMPLE_HZ,
    start_beat: float = FIXTURE_START_BEAT,
    base_state: Optional[PatternState] = None,
) -> List[Dict[str, Any]]:
    """One fixture per catalog preset, applied to the default state."""
    base_state = base_state or create_default_state()
    return [
        build_preset_fixture(preset, base_state, sample_hz, start_beat)
        for preset in PRESET_CATALOG
    ]


def build_fixture_from_state_case(
    case: FixtureCase,
    sample_hz: float = FIXTURE_SAMPLE_HZ,
    start_beat: float = FIXTURE_START_BEAT,
) -> Dict[str, Any]:
    """Sample one loop of head positions for a hand-authored state case."""
    global_state = case.state.global_state
    samples = sample_fixture_rows(case.state, sample_hz, start_beat)
    logger.debug("Built fixture %s with %d samples", case.id, len(samples))
    return {
        "schemaVersion": FIXTURE_SCHEMA_VERSION,
        "fixtureId": case.id,
        "bpm": global_state.bpm,
        "loopBeats": global_state.loop_beats,
        "sampleHz": sample_hz,
        "startBeat": start_beat,
        "sampleCount": len(samples),
        "samples": samples,
    }


def build_all_state_fixtures(
    cases: List[FixtureCase],
    sample_hz: float = FIXTURE_SAMPLE_HZ,
    start_beat: float = FIXTURE_START_BEAT,
) -> List[Dict[str, Any]]:
    """One fixture per case, in case order."""
    return [build_fixture_from_state_case(case, sample_hz, start_beat) for case in cases]


def get_fixture_id(fixture: Dict[str, Any]) -> str:
    """Id of a state fixture (fixtureId) or a preset fixture (presetId)."""
    if "fixtureId" in fixture:
        return fixture["fixtureId"]
    return fixture["presetId"]


def _uniform_field(fixtures: List[Dict[str, Any]], key: str, fallback: float) -> float:
    first = fixtures[0][key] if fixtures else fallback
    if any(fixture[key] != first for fixture in fixtures):
        raise InputValidationError(f"fixture manifest requires uniform {key} across fixtures")
    return first


def build_fixture_manifest(fixtures: List[Dict[str, Any]]) -> Dict[str, Any]:
    """Manifest mapping fixture ids to fixture filenames.

    Accepts preset fixtures and state-case fixtures alike.
    """
    return {
        "schemaVersion": FIXTURE_SCHEMA_VERSION,
        "sampleHz": _uniform_field(fixtures, "sampleHz", FIXTURE_SAMPLE_HZ),
        "startBeat": _uniform_field(fixtures, "startBeat", FIXTURE_START_BEAT),
        "fixtureCount": len(fixtures),
        "fixtures": [
            {"id": get_fixture_id(fixture), "file": get_fixture_filename(get_fixture_id(fixture))}
            for fixture in fixtures
        ],
    }


def _parse_fixture_case(candidate: Any) -> FixtureCase:
    if not isinstance(candidate, dict):
        raise InputValidationError("Fixture case must be an object")

    fixture_id = candidate.get("id")
    if not isinstance(fixture_id, str) or not FIXTURE_ID_PATTERN.match(fixture_id):
        raise InputValidationError("Fixture case id must be lowercase kebab-case")
    if fixture_id == DEFAULT_FIXTURE_ID:
        raise InputValidationError(f'Fixture case id "{DEFAULT_FIXTURE_ID}" is reserved')

    return FixtureCase(id=fixture_id, state=parse_pattern_state(candidate.get("state")))


def parse_fixture_cases(serialized: str) -> List[FixtureCase]:
    """Parse hand-authored fixture cases from JSON text.

    Expected shape: {"schemaVersion": 1, "cases": [{"id": ..., "state": ...}]}
    with full, strictly validated states.
    """
    try:
        payload = json.loads(serialized)
    except json.JSONDecodeError as exc:
        raise InputValidationError("Fixture cases file is not valid JSON") from exc

    if not isinstance(payload, dict):
        raise InputValidationError("Fixture cases payload must be an object")
    if payload.get("schemaVersion") != FIXTURE_CASES_SCHEMA_VERSION:
        raise InputValidationError(
            f"Fixture cases schema mismatch. Expected {FIXTURE_CASES_SCHEMA_VERSION}"
        )
    if not isinstance(payload.get("cases"), list):
        raise InputValidationError("Fixture cases payload must include an array at `cases`")

    cases = [_parse_fixture_case(entry) for entry in payload["cases"]]

    seen = set()
    for case in cases:
        if case.id in seen:
            raise InputValidationError(f'Duplicate fixture case id "{case.id}"')
        seen.add(case.id)

    return cases


def build_fixture_case_set(default_state: PatternState, cases: List[FixtureCase]) -> List[FixtureCase]:
    """Prepend the reserved default case to the manual cases."""
    return [FixtureCase(id=DEFAULT_FIXTURE_ID, state=default_state), *cases]
