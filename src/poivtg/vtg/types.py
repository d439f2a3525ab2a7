"""VTG vocabulary: elements, relations, phase buckets and descriptors."""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Tuple

from ..state.phase_reference import QUARTER_TURN_PHASE_BUCKETS
from ..state.units import TWO_PI


class VTGElement(Enum):
    """Discrete timing/direction relation label for a left/right pair."""
    EARTH = "Earth"
    AIR = "Air"
    WATER = "Water"
    FIRE = "Fire"


class VTGTiming(Enum):
    SAME_TIME = "same-time"
    SPLIT_TIME = "split-time"


class VTGDirection(Enum):
    SAME_DIRECTION = "same-direction"
    OPPOSITE_DIRECTION = "opposite-direction"


@dataclass(frozen=True)
class VTGRelation:
    timing: VTGTiming
    direction: VTGDirection


# Canonical iteration order for grids and selectors
VTG_ELEMENTS: Tuple[VTGElement, ...] = (
    VTGElement.EARTH,
    VTGElement.AIR,
    VTGElement.WATER,
    VTGElement.FIRE,
)
VTG_PHASE_BUCKETS: Tuple[int, ...] = QUARTER_TURN_PHASE_BUCKETS

# Right-arm speed used by the generator: one arm cycle per beat
VTG_CANONICAL_ARM_SPEED = TWO_PI

# Single source of truth for element semantics
VTG_ELEMENT_RELATIONS: Dict[VTGElement, VTGRelation] = {
    VTGElement.EARTH: VTGRelation(VTGTiming.SAME_TIME, VTGDirection.SAME_DIRECTION),
    VTGElement.AIR: VTGRelation(VTGTiming.SAME_TIME, VTGDirection.OPPOSITE_DIRECTION),
    VTGElement.WATER: VTGRelation(VTGTiming.SPLIT_TIME, VTGDirection.SAME_DIRECTION),
    VTGElement.FIRE: VTGRelation(VTGTiming.SPLIT_TIME, VTGDirection.OPPOSITE_DIRECTION),
}


@dataclass(frozen=True)
class VTGClassification:
    """What classification recovers from a continuous state."""
    arm_element: VTGElement
    poi_element: VTGElement
    phase_deg: int


@dataclass(frozen=True)
class VTGDescriptor:
    """Request for one generated VTG state.

    poi_cycles_per_arm_cycle: signed head cycles per canonical arm cycle.
    +N turns the head N times with the arm direction; -N reverses it.
    """
    arm_element: VTGElement
    poi_element: VTGElement
    phase_deg: int
    poi_cycles_per_arm_cycle: float

    def classification(self) -> VTGClassification:
        return VTGClassification(
            arm_element=self.arm_element,
            poi_element=self.poi_element,
            phase_deg=self.phase_deg,
        )


def get_relation_for_element(element: VTGElement) -> VTGRelation:
    return VTG_ELEMENT_RELATIONS[element]


def get_element_for_relation(relation: VTGRelation) -> VTGElement:
    for element in VTG_ELEMENTS:
        if VTG_ELEMENT_RELATIONS[element] == relation:
            return element
    raise KeyError(f"No VTG element matches {relation}")


def poi_cycles_per_arm_cycle_to_head_speed(poi_cycles_per_arm_cycle: float) -> float:
    """Signed cycles per arm cycle -> head speed in radians per beat."""
    return poi_cycles_per_arm_cycle * VTG_CANONICAL_ARM_SPEED


def head_speed_to_poi_cycles_per_arm_cycle(head_speed: float) -> float:
    return head_speed / VTG_CANONICAL_ARM_SPEED
