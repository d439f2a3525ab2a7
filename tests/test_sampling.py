"""Tests for beat conversions and deterministic loop sampling."""

import math

import numpy as np
import pytest

from poivtg.engine.math import (
    beats_to_seconds,
    get_trail_capacity,
    normalize_loop_beat,
    sample_hz_to_step_beats,
    seconds_to_beats,
)
from poivtg.engine.positions import get_positions
from poivtg.engine.sampling import (
    build_static_trail_series,
    get_loop_interval_count,
    sample_loop,
    trail_points_to_array,
)
from poivtg.errors import InputValidationError
from poivtg.state.model import HandId


class TestBeatConversions:
    """Tempo arithmetic."""

    def test_beats_and_seconds(self):
        """At 120 bpm one beat is half a second."""
        assert beats_to_seconds(1.0, 120.0) == 0.5
        assert seconds_to_beats(0.5, 120.0) == 1.0

    def test_step_beats(self):
        """8 Hz at 120 bpm is a quarter beat per sample."""
        assert sample_hz_to_step_beats(8.0, 120.0) == 0.25

    def test_trail_capacity_rounds_up(self):
        assert get_trail_capacity(8.0, 1.0, 120.0) == 4
        assert get_trail_capacity(8.0, 1.1, 120.0) == 5
        assert get_trail_capacity(8.0, 0.0, 120.0) == 0

    @pytest.mark.parametrize("bpm", [0.0, -60.0, float("inf"), float("nan")])
    def test_invalid_bpm_rejected(self, bpm):
        with pytest.raises(InputValidationError):
            beats_to_seconds(1.0, bpm)

    def test_invalid_sample_hz_rejected(self):
        with pytest.raises(InputValidationError):
            sample_hz_to_step_beats(0.0, 120.0)

    def test_normalize_loop_beat(self):
        assert normalize_loop_beat(5.0, 4.0) == 1.0
        assert normalize_loop_beat(-1.0, 4.0) == 3.0
        assert normalize_loop_beat(2.0, 0.0) == 0.0


class TestSampleLoop:
    """Fixed-step loop sampling."""

    def test_sample_count_includes_both_endpoints(self, split_time_params):
        """ceil(loop / step) + 1 samples."""
        samples = sample_loop(split_time_params, 8.0, 1.0)

        assert len(samples) == 5
        assert [s.t_beats for s in samples] == [0.0, 0.25, 0.5, 0.75, 1.0]

    def test_last_sample_closes_exactly(self, split_time_params):
        """A loop that is not a multiple of the step still ends on its end."""
        samples = sample_loop(split_time_params, 8.0, 1.1, start_beat=2.0)

        assert len(samples) == 6
        assert samples[0].t_beats == 2.0
        assert samples[-1].t_beats == 2.0 + 1.1

    def test_zero_length_loop(self, split_time_params):
        samples = sample_loop(split_time_params, 8.0, 0.0)

        assert len(samples) == 1
        assert samples[0].t_beats == 0.0

    def test_samples_match_direct_evaluation(self, split_time_params):
        """Each sample equals get_positions at its own beat."""
        for sample in sample_loop(split_time_params, 8.0, 1.0):
            direct = get_positions(split_time_params, sample.t_beats)
            assert sample.positions == direct

    def test_deterministic(self, split_time_params):
        first = sample_loop(split_time_params, 30.0, 4.0)
        second = sample_loop(split_time_params, 30.0, 4.0)

        assert first == second

    def test_one_cycle_returns_to_start(self, split_time_params):
        """Integer-cycle speeds close the loop geometrically."""
        samples = sample_loop(split_time_params, 8.0, 1.0)
        start = samples[0].positions[HandId.L].head
        end = samples[-1].positions[HandId.L].head

        assert end.x == pytest.approx(start.x, abs=1e-9)
        assert end.y == pytest.approx(start.y, abs=1e-9)

    @pytest.mark.parametrize("loop_beats, step_beats", [
        (-1.0, 0.25),
        (1.0, 0.0),
        (1.0, -0.25),
        (float("nan"), 0.25),
        (1.0, float("inf")),
    ])
    def test_interval_count_rejects_bad_input(self, loop_beats, step_beats):
        with pytest.raises(InputValidationError):
            get_loop_interval_count(loop_beats, step_beats)

    def test_bad_start_beat_rejected(self, split_time_params):
        with pytest.raises(InputValidationError):
            sample_loop(split_time_params, 8.0, 1.0, start_beat=math.inf)


class TestStaticTrail:
    """Full-loop head series."""

    def test_series_per_hand(self, split_time_params):
        series = build_static_trail_series(split_time_params, 1.0, 8.0)

        assert set(series) == {HandId.L, HandId.R}
        assert [p.t_beats for p in series[HandId.R]] == [0.0, 0.25, 0.5, 0.75, 1.0]

    def test_array_export(self, split_time_params):
        """Rows are [t_beats, x, y]."""
        points = build_static_trail_series(split_time_params, 1.0, 8.0)[HandId.L]
        array = trail_points_to_array(points)

        assert array.shape == (5, 3)
        np.testing.assert_array_equal(array[:, 0], [0.0, 0.25, 0.5, 0.75, 1.0])
        assert array[2, 1] == points[2].point.x
        assert array[2, 2] == points[2].point.y

    def test_empty_array_export(self):
        assert trail_points_to_array([]).shape == (0, 3)
