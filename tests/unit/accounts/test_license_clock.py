"""
Unit tests for LicenseClock.
"""
from datetime import timedelta

import pytest

from accounts.domain.license_clock import LicenseClock
from tests.fakes import T0


class TestLicenseClock:
    """Tests for LicenseClock.remaining."""

    def test_full_duration_at_activation(self):
        assert LicenseClock.remaining(3600, T0, T0) == 3600

    def test_elapsed_time_is_subtracted(self):
        assert LicenseClock.remaining(3600, T0, T0 + timedelta(seconds=1800)) == 1800

    def test_fractional_seconds_truncate_down(self):
        now = T0 + timedelta(seconds=10, milliseconds=400)
        assert LicenseClock.remaining(60, T0, now) == 49

    def test_floored_at_zero(self):
        assert LicenseClock.remaining(60, T0, T0 + timedelta(days=2)) == 0

    def test_zero_duration_is_expired_immediately(self):
        assert LicenseClock.remaining(0, T0, T0) == 0
        assert LicenseClock.is_expired(0, T0, T0)

    def test_activation_in_the_future_counts_as_no_time_elapsed(self):
        assert LicenseClock.remaining(3600, T0 + timedelta(seconds=5), T0) == 3600

    def test_unactivated_license_is_rejected(self):
        with pytest.raises(ValueError, match="not been activated"):
            LicenseClock.remaining(3600, None, T0)

    def test_remaining_is_non_increasing_over_time(self):
        observations = [
            LicenseClock.remaining(100, T0, T0 + timedelta(seconds=offset))
            for offset in range(0, 120, 7)
        ]
        assert observations == sorted(observations, reverse=True)
        assert observations[-1] == 0

    def test_remaining_strictly_decreases_while_time_is_left(self):
        first = LicenseClock.remaining(100, T0, T0 + timedelta(seconds=10))
        second = LicenseClock.remaining(100, T0, T0 + timedelta(seconds=11))
        assert second < first

    def test_same_inputs_same_result(self):
        now = T0 + timedelta(seconds=42)
        assert LicenseClock.remaining(100, T0, now) == LicenseClock.remaining(100, T0, now)

    def test_extended_duration_applies_without_moving_activation(self):
        now = T0 + timedelta(seconds=3600)
        assert LicenseClock.remaining(3600, T0, now) == 0
        assert LicenseClock.remaining(3600 + 600, T0, now) == 600
