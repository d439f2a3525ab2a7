"""Angle and angular-speed unit conversions.

Storage is always radians and radians per beat; degrees and cycles
exist only at the presentation edge.
"""

import math
from enum import Enum

TWO_PI = 2 * math.pi

DEGREES_PER_TURN = 360.0
RADIANS_PER_TURN = TWO_PI
DEGREES_PER_RADIAN = DEGREES_PER_TURN / RADIANS_PER_TURN
RADIANS_PER_DEGREE = RADIANS_PER_TURN / DEGREES_PER_TURN

ZERO_SPEED_TOLERANCE = 1e-9


class AngleUnit(Enum):
    DEGREES = "degrees"
    RADIANS = "radians"


class SpeedUnit(Enum):
    CYCLES = "cycles"       # turns per beat
    DEGREES = "degrees"     # degrees per beat


class PoiSpinMode(Enum):
    """Relationship between a hand's arm and its relative poi spin."""
    EXTENSION = "extension"        # poi locked to the arm line
    INSPIN = "inspin"              # poi turns with the arm
    ANTISPIN = "antispin"          # poi turns against the arm
    STATIC_SPIN = "static-spin"    # arm still, poi spinning


def radians_to_degrees(radians: float) -> float:
    return radians * DEGREES_PER_RADIAN


def degrees_to_radians(degrees: float) -> float:
    return degrees * RADIANS_PER_DEGREE


def radians_per_beat_to_cycles_per_beat(radians_per_beat: float) -> float:
    return radians_per_beat / TWO_PI


def cycles_per_beat_to_radians_per_beat(cycles_per_beat: float) -> float:
    return cycles_per_beat * TWO_PI


def radians_per_beat_to_degrees_per_beat(radians_per_beat: float) -> float:
    return radians_per_beat * DEGREES_PER_RADIAN


def degrees_per_beat_to_radians_per_beat(degrees_per_beat: float) -> float:
    return degrees_per_beat * RADIANS_PER_DEGREE


def speed_from_radians_per_beat(radians_per_beat: float, unit: SpeedUnit) -> float:
    """Express a stored speed in the requested display unit."""
    if unit is SpeedUnit.CYCLES:
        return radians_per_beat_to_cycles_per_beat(radians_per_beat)
    return radians_per_beat_to_degrees_per_beat(radians_per_beat)


def speed_to_radians_per_beat(value: float, unit: SpeedUnit) -> float:
    """Convert a display-unit speed back to radians per beat."""
    if unit is SpeedUnit.CYCLES:
        return cycles_per_beat_to_radians_per_beat(value)
    return degrees_per_beat_to_radians_per_beat(value)


def absolute_head_speed(arm_speed: float, relative_poi_speed: float) -> float:
    return arm_speed + relative_poi_speed


def relative_poi_speed_from_absolute_head(arm_speed: float, absolute_head_speed: float) -> float:
    return absolute_head_speed - arm_speed


def classify_poi_spin_mode(arm_speed: float, relative_poi_speed: float) -> PoiSpinMode:
    """Classify one hand as extension, static-spin, inspin or antispin."""
    if abs(relative_poi_speed) <= ZERO_SPEED_TOLERANCE:
        return PoiSpinMode.EXTENSION
    if abs(arm_speed) <= ZERO_SPEED_TOLERANCE:
        return PoiSpinMode.STATIC_SPIN
    if math.copysign(1.0, relative_poi_speed) == math.copysign(1.0, arm_speed):
        return PoiSpinMode.INSPIN
    return PoiSpinMode.ANTISPIN
