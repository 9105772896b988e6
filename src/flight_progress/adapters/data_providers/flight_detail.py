"""
Flight Detail Provider - JSON payload to FlightProgressRequest adapter.

Parses the flight-detail record returned by the flight tracking API
(either the bare record or wrapped as {"result": {...}}) and extracts
the time window and airport locations the engine needs. Every field the
engine does not use is ignored.
"""

import logging
from typing import Any, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from flight_progress.exceptions import FlightDetailParseError
from flight_progress.schemas.flight import FlightProgressRequest, FlightTimeWindow
from flight_progress.schemas.geo import GeoCoordinate

logger = logging.getLogger(__name__)


# --- Pydantic models (The JSON contract) ---
# Only the fields used for progress are modelled; extra keys pass silently.


class FlightTimePayload(BaseModel):
    model_config = ConfigDict(extra="ignore")

    utc: Optional[str] = None
    local: Optional[str] = None


class LocationPayload(BaseModel):
    model_config = ConfigDict(extra="ignore")

    lat: float = Field(ge=-90, le=90)
    lng: float = Field(ge=-180, le=180)


class AirportPayload(BaseModel):
    model_config = ConfigDict(extra="ignore")

    iata_code: Optional[str] = None
    name: Optional[str] = None
    location: Optional[LocationPayload] = None


class FlightLocationPayload(BaseModel):
    model_config = ConfigDict(extra="ignore")

    airport: Optional[AirportPayload] = None
    scheduled: Optional[FlightTimePayload] = None
    estimated: Optional[FlightTimePayload] = None
    actual: Optional[FlightTimePayload] = None
    terminal: Optional[str] = None
    gate: Optional[str] = None

    @property
    def coordinate(self) -> Optional[GeoCoordinate]:
        """Airport location, or None if the payload has none."""
        if self.airport is None or self.airport.location is None:
            return None
        return GeoCoordinate(
            latitude=self.airport.location.lat,
            longitude=self.airport.location.lng,
        )


class FlightDetailPayload(BaseModel):
    model_config = ConfigDict(extra="ignore")

    departure: FlightLocationPayload
    arrival: FlightLocationPayload
    flight_iata: Optional[str] = None
    status: Optional[str] = None
    last_updated: Optional[str] = None


def _utc(time_payload: Optional[FlightTimePayload]) -> Optional[str]:
    return time_payload.utc if time_payload is not None else None


def to_request(detail: FlightDetailPayload) -> FlightProgressRequest:
    """
    Convert a validated flight-detail payload to a progress request.

    Only the `utc` member of each time is used; departure estimates are
    not part of the effective departure time.

    Args:
        detail: Validated payload.

    Returns:
        FlightProgressRequest with parsed times and airport locations.

    Raises:
        FlightDetailParseError: If neither airport has a location.
    """
    departure = detail.departure.coordinate
    arrival = detail.arrival.coordinate
    if departure is None and arrival is None:
        raise FlightDetailParseError(
            f"Flight {detail.flight_iata or '<unknown>'} has no airport locations"
        )

    window = FlightTimeWindow.from_strings(
        departure_scheduled=_utc(detail.departure.scheduled),
        departure_actual=_utc(detail.departure.actual),
        arrival_scheduled=_utc(detail.arrival.scheduled),
        arrival_estimated=_utc(detail.arrival.estimated),
        arrival_actual=_utc(detail.arrival.actual),
        raw_status_label=detail.status,
    )

    return FlightProgressRequest(
        window=window,
        departure=departure,
        arrival=arrival,
        flight_id=detail.flight_iata,
    )


def parse_flight_detail(payload: Mapping[str, Any]) -> FlightProgressRequest:
    """
    Parse a raw flight-detail JSON object into a progress request.

    Args:
        payload: Decoded JSON, either the record itself or an envelope
            {"result": record}.

    Returns:
        FlightProgressRequest for the flight.

    Raises:
        FlightDetailParseError: If the payload is structurally invalid or
            carries no airport location.
    """
    if not isinstance(payload, Mapping):
        raise FlightDetailParseError(
            f"Expected a JSON object, got {type(payload).__name__}"
        )

    record = payload.get("result", payload)
    try:
        detail = FlightDetailPayload.model_validate(record)
    except ValidationError as error:
        logger.warning("Rejected flight detail payload: %d errors", error.error_count())
        raise FlightDetailParseError(f"Invalid flight detail payload: {error}") from error

    request = to_request(detail)
    logger.debug(
        "Parsed flight %s (status=%r)", request.flight_id, request.window.raw_status_label
    )
    return request
