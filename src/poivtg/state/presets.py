"""Programmatic preset transforms.

Element presets rewrite the right arm relative to the left arm; flower
presets set each hand's relative poi speed to a multiple of its arm
speed. Both return new states and leave radii untouched.
"""

from dataclasses import dataclass, replace
from typing import Callable, List, Optional

from .model import PatternState
from .phase_math import SAME_TIME_PHASE_OFFSET, SPLIT_TIME_PHASE_OFFSET

PETAL_COUNTS = (3, 4, 5)
FLOWER_MODES = ("inspin", "antispin")


@dataclass(frozen=True)
class ElementPreset:
    id: str
    label: str
    same_time: bool
    same_direction: bool


@dataclass(frozen=True)
class PresetDefinition:
    id: str
    label: str
    apply: Callable[[PatternState], PatternState]


ELEMENT_PRESETS: List[ElementPreset] = [
    ElementPreset("earth", "Earth", same_time=True, same_direction=True),
    ElementPreset("air", "Air", same_time=True, same_direction=False),
    ElementPreset("water", "Water", same_time=False, same_direction=True),
    ElementPreset("fire", "Fire", same_time=False, same_direction=False),
]


def _find_element_preset(preset_id: str) -> Optional[ElementPreset]:
    for preset in ELEMENT_PRESETS:
        if preset.id == preset_id:
            return preset
    return None


def apply_element_preset(state: PatternState, preset_id: str) -> PatternState:
    """Match the right arm to the left arm's speed, flipping direction and phase per element.

    Unknown ids return the state unchanged.
    """
    preset = _find_element_preset(preset_id)
    if preset is None:
        return state

    left = state.hands.left
    right_arm_speed = left.arm_speed if preset.same_direction else -left.arm_speed
    phase_offset = SAME_TIME_PHASE_OFFSET if preset.same_time else SPLIT_TIME_PHASE_OFFSET

    right = replace(
        state.hands.right,
        arm_speed=right_arm_speed,
        arm_phase=left.arm_phase + phase_offset,
    )
    return state.with_hands(left, right)


def apply_flower_mode_preset(state: PatternState, mode: str, petals: int) -> PatternState:
    """Set poi_speed = (+/-petals) * arm_speed and zero the relative poi phase."""
    if mode not in FLOWER_MODES:
        raise ValueError(f"Unknown flower mode: {mode}")
    multiplier = (1 if mode == "inspin" else -1) * petals

    left, right = state.hands.left, state.hands.right
    return state.with_hands(
        replace(left, poi_speed=multiplier * left.arm_speed, poi_phase=0.0),
        replace(right, poi_speed=multiplier * right.arm_speed, poi_phase=0.0),
    )


def _element_definition(preset: ElementPreset) -> PresetDefinition:
    return PresetDefinition(
        id=preset.id,
        label=preset.label,
        apply=lambda state: apply_element_preset(state, preset.id),
    )


def _flower_definition(mode: str, petals: int) -> PresetDefinition:
    return PresetDefinition(
        id=f"{mode}-{petals}",
        label=f"{petals}-Petal {mode.capitalize()}",
        apply=lambda state: apply_flower_mode_preset(state, mode, petals),
    )


PRESET_CATALOG: List[PresetDefinition] = [
    *(_element_definition(preset) for preset in ELEMENT_PRESETS),
    *(_flower_definition(mode, petals) for petals in PETAL_COUNTS for mode in FLOWER_MODES),
]


def get_preset(preset_id: str) -> Optional[PresetDefinition]:
    for preset in PRESET_CATALOG:
        if preset.id == preset_id:
            return preset
    return None


def apply_preset_by_id(state: PatternState, preset_id: str) -> PatternState:
    preset = get_preset(preset_id)
    if preset is None:
        return state
    return preset.apply(state)