"""Angle wrapping helpers."""

import math

from .units import DEGREES_PER_TURN, TWO_PI

SAME_TIME_PHASE_OFFSET = 0.0
SPLIT_TIME_PHASE_OFFSET = math.pi


def normalize_radians_0_to_tau(angle: float) -> float:
    """Wrap radians into [0, 2pi)."""
    normalized = math.fmod(angle, TWO_PI)
    if normalized < 0:
        normalized += TWO_PI
    # -1e-17 + 2pi rounds to exactly 2pi
    return 0.0 if normalized >= TWO_PI else normalized


def normalize_degrees_0_to_turn(angle_degrees: float) -> float:
    """Wrap degrees into [0, 360)."""
    normalized = math.fmod(angle_degrees, DEGREES_PER_TURN)
    if normalized < 0:
        normalized += DEGREES_PER_TURN
    return 0.0 if normalized >= DEGREES_PER_TURN else normalized


def shortest_angular_distance_radians(a: float, b: float) -> float:
    """Smallest absolute wrapped distance between two angles, in [0, pi]."""
    wrapped = normalize_radians_0_to_tau(a - b)
    return min(wrapped, TWO_PI - wrapped)
