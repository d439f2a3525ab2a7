"""Beat-domain conversions, input validation and 2D vector math.

Coordinate system: +x is right, +y is up, angles are CCW-positive.
"""

import math
import numbers
from dataclasses import dataclass

import numpy as np

from ..errors import InputValidationError

SECONDS_PER_MINUTE = 60.0


def require_finite(name: str, value: float) -> None:
    if isinstance(value, bool) or not isinstance(value, numbers.Real) or not math.isfinite(value):
        raise InputValidationError(f"{name} must be a finite number, got {value!r}")


def require_positive(name: str, value: float) -> None:
    require_finite(name, value)
    if value <= 0:
        raise InputValidationError(f"{name} must be > 0, got {value!r}")


def require_non_negative(name: str, value: float) -> None:
    require_finite(name, value)
    if value < 0:
        raise InputValidationError(f"{name} must be >= 0, got {value!r}")


def beats_to_seconds(beats: float, bpm: float) -> float:
    """Beat-domain duration -> seconds at the given tempo."""
    require_finite("beats", beats)
    require_positive("bpm", bpm)
    return beats * (SECONDS_PER_MINUTE / bpm)


def seconds_to_beats(seconds: float, bpm: float) -> float:
    """Elapsed seconds -> beat-domain duration at the given tempo."""
    require_finite("seconds", seconds)
    require_positive("bpm", bpm)
    return seconds * (bpm / SECONDS_PER_MINUTE)


def sample_hz_to_step_beats(sample_hz: float, bpm: float) -> float:
    """Fixed beat step between adjacent samples at sample_hz."""
    require_positive("sample_hz", sample_hz)
    return seconds_to_beats(1.0 / sample_hz, bpm)


def get_trail_seconds(trail_beats: float, bpm: float) -> float:
    require_non_negative("trail_beats", trail_beats)
    return beats_to_seconds(trail_beats, bpm)


def get_trail_capacity(trail_sample_hz: float, trail_beats: float, bpm: float) -> int:
    """Ring-buffer capacity for a trail: ceil(trail_sample_hz * trail_seconds)."""
    require_positive("trail_sample_hz", trail_sample_hz)
    trail_seconds = get_trail_seconds(trail_beats, bpm)
    return math.ceil(trail_sample_hz * trail_seconds)


def normalize_loop_beat(t_beats: float, loop_beats: float) -> float:
    """Wrap a beat into [0, loop_beats); 0 when the loop is non-positive."""
    if loop_beats <= 0:
        return 0.0
    normalized = math.fmod(t_beats, loop_beats)
    if normalized < 0:
        normalized += loop_beats
    return 0.0 if normalized >= loop_beats else normalized


@dataclass(frozen=True)
class Vector2:
    """Point or vector in the wall plane."""
    x: float
    y: float

    @classmethod
    def from_polar(cls, radius: float, angle: float) -> "Vector2":
        require_finite("radius", radius)
        require_finite("angle", angle)
        return cls(radius * math.cos(angle), radius * math.sin(angle))

    def __add__(self, other: "Vector2") -> "Vector2":
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Vector2") -> "Vector2":
        return Vector2(self.x - other.x, self.y - other.y)

    def magnitude(self) -> float:
        return math.hypot(self.x, self.y)

    def to_numpy(self) -> np.ndarray:
        return np.array([self.x, self.y], dtype=np.float64)
