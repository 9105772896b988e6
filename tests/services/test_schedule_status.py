"""
Tests for schedule status text.

Tests cover:
- Delay labels for late, early and on-time flights
- Truncation of partial minutes
- Departure and arrival labels from a time window
- Block duration and its formatting
"""

from datetime import timedelta

import pytest

from flight_progress.schemas.flight import FlightTimeWindow
from flight_progress.services.schedule_status import (
    ON_TIME_TEXT,
    UNKNOWN_DURATION_TEXT,
    arrival_status_text,
    block_duration,
    delay_minutes,
    delay_status_text,
    departure_status_text,
    format_duration,
)


# =============================================================================
# DELAY LABELS
# =============================================================================


class TestDelayStatusText:
    """Tests for delay_status_text()."""

    def test_delayed(self, departure_time):
        later = departure_time + timedelta(minutes=12)
        assert delay_status_text(departure_time, later) == "12m delayed"

    def test_early(self, departure_time):
        earlier = departure_time - timedelta(minutes=5)
        assert delay_status_text(departure_time, earlier) == "5m early"

    def test_on_time(self, departure_time):
        assert delay_status_text(departure_time, departure_time) == ON_TIME_TEXT

    @pytest.mark.parametrize("which", ["scheduled", "reference"])
    def test_unknown_time_is_on_time(self, departure_time, which):
        scheduled = None if which == "scheduled" else departure_time
        reference = None if which == "reference" else departure_time
        assert delay_status_text(scheduled, reference) == ON_TIME_TEXT

    def test_under_a_minute_is_on_time(self, departure_time):
        assert delay_status_text(departure_time, departure_time + timedelta(seconds=59)) == ON_TIME_TEXT


class TestDelayMinutes:
    """Tests for delay_minutes()."""

    @pytest.mark.parametrize(
        "offset_seconds,expected",
        [(90, 1), (-90, -1), (3600, 60), (0, 0)],
    )
    def test_truncates_toward_zero(self, departure_time, offset_seconds, expected):
        reference = departure_time + timedelta(seconds=offset_seconds)
        assert delay_minutes(departure_time, reference) == expected

    def test_unknown(self, departure_time):
        assert delay_minutes(None, departure_time) is None


# =============================================================================
# WINDOW LABELS
# =============================================================================


class TestWindowStatus:
    """Departure and arrival labels from a FlightTimeWindow."""

    def test_departure_uses_actual(self, departure_time):
        window = FlightTimeWindow(
            departure_scheduled=departure_time,
            departure_actual=departure_time + timedelta(minutes=20),
        )
        assert departure_status_text(window) == "20m delayed"

    def test_departure_without_actual(self, scheduled_window):
        assert departure_status_text(scheduled_window) == ON_TIME_TEXT

    def test_arrival_uses_estimate_before_landing(self, arrival_time):
        window = FlightTimeWindow(
            arrival_scheduled=arrival_time,
            arrival_estimated=arrival_time + timedelta(minutes=30),
        )
        assert arrival_status_text(window) == "30m delayed"

    def test_arrival_actual_wins_over_estimate(self, arrival_time):
        window = FlightTimeWindow(
            arrival_scheduled=arrival_time,
            arrival_estimated=arrival_time + timedelta(minutes=30),
            arrival_actual=arrival_time - timedelta(minutes=7),
        )
        assert arrival_status_text(window) == "7m early"


# =============================================================================
# BLOCK DURATION
# =============================================================================


class TestBlockDuration:
    """Tests for block_duration() and format_duration()."""

    def test_scheduled_window(self, scheduled_window):
        assert block_duration(scheduled_window) == timedelta(hours=2)
        assert format_duration(block_duration(scheduled_window)) == "2h 0min"

    def test_uses_effective_times(self, departure_time, arrival_time):
        window = FlightTimeWindow(
            departure_scheduled=departure_time,
            departure_actual=departure_time + timedelta(minutes=15),
            arrival_scheduled=arrival_time,
        )
        assert format_duration(block_duration(window)) == "1h 45min"

    def test_unknown_time(self, departure_time):
        window = FlightTimeWindow(departure_scheduled=departure_time)
        assert block_duration(window) is None
        assert format_duration(None) == UNKNOWN_DURATION_TEXT

    def test_inverted_window(self, departure_time, arrival_time):
        window = FlightTimeWindow(
            departure_scheduled=arrival_time,
            arrival_scheduled=departure_time,
        )
        assert block_duration(window) is None

    def test_partial_minutes_dropped(self):
        assert format_duration(timedelta(hours=1, minutes=5, seconds=59)) == "1h 5min"
