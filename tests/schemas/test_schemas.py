"""
Tests for flight_progress schemas.

Tests cover:
- GeoCoordinate / ArcPath / MapRegion value types
- FlightPhase display text and terminal phases
- FlightTimeWindow effective times and string factory
- Immutability of snapshots
"""

from dataclasses import FrozenInstanceError
from datetime import datetime, timedelta, timezone

import pytest

from flight_progress.schemas import (
    ArcPath,
    FlightPhase,
    FlightProgressSnapshot,
    FlightTimeWindow,
    GeoCoordinate,
    MapRegion,
)


# =============================================================================
# GEO TYPES
# =============================================================================


class TestGeoCoordinate:
    """Tests for GeoCoordinate."""

    def test_almost_equals(self):
        a = GeoCoordinate(52.0, 21.0)
        assert a.almost_equals(GeoCoordinate(52.0000005, 20.9999995))
        assert not a.almost_equals(GeoCoordinate(52.00001, 21.0))

    def test_frozen(self):
        with pytest.raises(FrozenInstanceError):
            GeoCoordinate(0, 0).latitude = 1.0

    def test_hashable(self):
        assert len({GeoCoordinate(1, 2), GeoCoordinate(1, 2)}) == 1


class TestArcPath:
    """Tests for ArcPath."""

    def test_sequence_protocol(self):
        points = (GeoCoordinate(0, 0), GeoCoordinate(0, 1), GeoCoordinate(0, 2))
        path = ArcPath(points=points, control_point=GeoCoordinate(1, 1), bow_direction=1.0)

        assert len(path) == 3
        assert list(path) == list(points)
        assert path[1] == points[1]
        assert path.first == points[0]
        assert path.last == points[2]

    def test_empty_path_rejected(self):
        with pytest.raises(ValueError):
            ArcPath(points=(), control_point=GeoCoordinate(0, 0))


class TestMapRegion:
    """Tests for MapRegion ranges."""

    def test_ranges(self):
        region = MapRegion(center=GeoCoordinate(10, 20), latitude_delta=4, longitude_delta=6)
        assert region.lat_range == (8, 12)
        assert region.lng_range == (17, 23)


# =============================================================================
# FLIGHT TYPES
# =============================================================================


class TestFlightPhase:
    """Tests for FlightPhase."""

    @pytest.mark.parametrize(
        "phase,text",
        [
            (FlightPhase.SCHEDULED, "Scheduled"),
            (FlightPhase.DEPARTED, "Departed"),
            (FlightPhase.IN_AIR, "In Air"),
            (FlightPhase.ARRIVED, "Arrived"),
            (FlightPhase.CANCELLED, "Cancelled"),
        ],
    )
    def test_display_text(self, phase, text):
        assert phase.display_text == text

    def test_terminal_phases(self):
        terminal = {phase for phase in FlightPhase if phase.is_terminal}
        assert terminal == {FlightPhase.ARRIVED, FlightPhase.CANCELLED}


class TestFlightTimeWindow:
    """Tests for FlightTimeWindow."""

    def test_effective_departure_prefers_actual(self, departure_time):
        actual = departure_time + timedelta(minutes=20)
        window = FlightTimeWindow(departure_scheduled=departure_time, departure_actual=actual)
        assert window.effective_departure == actual

    def test_effective_departure_falls_back_to_scheduled(self, departure_time):
        window = FlightTimeWindow(departure_scheduled=departure_time)
        assert window.effective_departure == departure_time

    def test_effective_arrival_priority(self, arrival_time):
        estimated = arrival_time + timedelta(minutes=15)
        actual = arrival_time + timedelta(minutes=10)

        assert FlightTimeWindow(arrival_scheduled=arrival_time).effective_arrival == arrival_time
        assert (
            FlightTimeWindow(
                arrival_scheduled=arrival_time, arrival_estimated=estimated
            ).effective_arrival
            == estimated
        )
        assert (
            FlightTimeWindow(
                arrival_scheduled=arrival_time,
                arrival_estimated=estimated,
                arrival_actual=actual,
            ).effective_arrival
            == actual
        )

    def test_empty_window(self):
        window = FlightTimeWindow()
        assert window.effective_departure is None
        assert window.effective_arrival is None

    def test_from_strings(self):
        window = FlightTimeWindow.from_strings(
            departure_scheduled="2025-06-10T08:00:00+00:00",
            arrival_scheduled="2025-06-10 10:00",
            arrival_estimated="tbd",
            raw_status_label="Scheduled",
        )

        assert window.departure_scheduled == datetime(2025, 6, 10, 8, 0, tzinfo=timezone.utc)
        assert window.arrival_scheduled == datetime(2025, 6, 10, 10, 0, tzinfo=timezone.utc)
        assert window.arrival_estimated is None
        assert window.raw_status_label == "Scheduled"


class TestFlightProgressSnapshot:
    """Tests for FlightProgressSnapshot."""

    def test_status_text_and_immutability(self):
        point = GeoCoordinate(0, 0)
        snapshot = FlightProgressSnapshot(
            phase=FlightPhase.ARRIVED,
            fraction=1.0,
            current_position=point,
            traveled_path=(point, point),
            remaining_path=(point,),
        )

        assert snapshot.status_text == "Arrived"
        with pytest.raises(FrozenInstanceError):
            snapshot.fraction = 0.5
