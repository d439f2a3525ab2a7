"""Tests for the phase-reference adapter."""

import math

import pytest

from poivtg.errors import InputValidationError
from poivtg.state.model import PhaseReference
from poivtg.state.phase_reference import (
    PHASE_REFERENCE_OPTIONS,
    QUARTER_TURN_PHASE_BUCKETS,
    canonical_phase_bucket_to_reference,
    canonical_phase_radians_to_reference_degrees,
    from_reference_phase,
    get_phase_reference_offset_radians,
    reference_phase_bucket_to_canonical,
    reference_phase_degrees_to_canonical_radians,
    to_reference_phase,
)


class TestPhaseReference:
    """Offsets and round trips."""

    @pytest.mark.parametrize("reference, offset", [
        (PhaseReference.RIGHT, 0.0),
        (PhaseReference.DOWN, 3 * math.pi / 2),
        (PhaseReference.LEFT, math.pi),
        (PhaseReference.UP, math.pi / 2),
    ])
    def test_offsets(self, reference, offset):
        assert get_phase_reference_offset_radians(reference) == pytest.approx(offset)

    @pytest.mark.parametrize("reference", PHASE_REFERENCE_OPTIONS)
    @pytest.mark.parametrize("phase", [-2.0, 0.0, 0.7, math.pi, 9.5])
    def test_radians_round_trip(self, reference, phase):
        """from_reference(to_reference(x)) == x for every reference."""
        assert from_reference_phase(to_reference_phase(phase, reference), reference) == pytest.approx(phase)

    def test_down_reference_reads_down_as_zero(self):
        """Canonical 3pi/2 (pointing down) is zero under the down reference."""
        assert canonical_phase_radians_to_reference_degrees(1.5 * math.pi, PhaseReference.DOWN) == pytest.approx(0.0)
        assert reference_phase_degrees_to_canonical_radians(0.0, PhaseReference.UP) == pytest.approx(math.pi / 2)

    @pytest.mark.parametrize("reference", PHASE_REFERENCE_OPTIONS)
    @pytest.mark.parametrize("bucket", QUARTER_TURN_PHASE_BUCKETS)
    def test_bucket_round_trip(self, reference, bucket):
        reference_bucket = canonical_phase_bucket_to_reference(bucket, reference)

        assert reference_bucket in QUARTER_TURN_PHASE_BUCKETS
        assert reference_phase_bucket_to_canonical(reference_bucket, reference) == bucket

    def test_bucket_examples(self):
        assert canonical_phase_bucket_to_reference(0, PhaseReference.DOWN) == 90
        assert canonical_phase_bucket_to_reference(90, PhaseReference.LEFT) == 270
        assert reference_phase_bucket_to_canonical(90, PhaseReference.UP) == 180

    @pytest.mark.parametrize("bucket", [45, 100, 359])
    def test_invalid_bucket_rejected(self, bucket):
        with pytest.raises(InputValidationError):
            reference_phase_bucket_to_canonical(bucket, PhaseReference.RIGHT)
