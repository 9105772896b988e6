"""
Shared fixtures for flight_progress tests.

Times are fixed UTC instants so phase and fraction assertions never
depend on the wall clock.
"""

from datetime import datetime, timedelta, timezone

import pytest

from flight_progress.schemas.flight import FlightTimeWindow
from flight_progress.schemas.geo import GeoCoordinate


DEPARTURE_TIME = datetime(2025, 6, 10, 8, 0, tzinfo=timezone.utc)
ARRIVAL_TIME = datetime(2025, 6, 10, 10, 0, tzinfo=timezone.utc)


@pytest.fixture
def waw() -> GeoCoordinate:
    """Warsaw Chopin airport."""
    return GeoCoordinate(latitude=52.1657, longitude=20.9671)


@pytest.fixture
def bcn() -> GeoCoordinate:
    """Barcelona El Prat airport."""
    return GeoCoordinate(latitude=41.2974, longitude=2.0833)


@pytest.fixture
def departure_time() -> datetime:
    return DEPARTURE_TIME


@pytest.fixture
def arrival_time() -> datetime:
    return ARRIVAL_TIME


@pytest.fixture
def midflight(departure_time, arrival_time) -> datetime:
    """Exactly halfway between departure and arrival."""
    return departure_time + (arrival_time - departure_time) / 2


@pytest.fixture
def scheduled_window(departure_time, arrival_time) -> FlightTimeWindow:
    """Window with scheduled times only and a stale provider label."""
    return FlightTimeWindow(
        departure_scheduled=departure_time,
        arrival_scheduled=arrival_time,
        raw_status_label="Scheduled",
    )


@pytest.fixture
def flight_detail_payload() -> dict:
    """Flight-detail record as returned by the tracking API."""
    return {
        "result": {
            "flight_iata": "LO445",
            "status": "scheduled",
            "last_updated": "2025-06-10T07:55:00Z",
            "departure": {
                "airport": {
                    "iata_code": "WAW",
                    "name": "Warsaw Chopin Airport",
                    "location": {"lat": 52.1657, "lng": 20.9671},
                },
                "scheduled": {
                    "utc": "2025-06-10T08:00:00+00:00",
                    "local": "2025-06-10T10:00:00+02:00",
                },
                "actual": None,
                "terminal": "A",
                "gate": "12",
            },
            "arrival": {
                "airport": {
                    "iata_code": "BCN",
                    "name": "Barcelona El Prat",
                    "location": {"lat": 41.2974, "lng": 2.0833},
                },
                "scheduled": {"utc": "2025-06-10T10:00:00+00:00"},
                "estimated": {"utc": "2025-06-10T10:30:00+00:00"},
                "baggage_belt": "7",
            },
            "aircraft": {"model": "Embraer 195"},
        }
    }
