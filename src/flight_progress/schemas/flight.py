"""
Flight time and progress schemas.

Defines the time window a progress query is computed from, the closed
set of lifecycle phases, and the immutable snapshot handed to renderers.
"""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Optional, Tuple

import pandera as pa
from pandera.typing import DataFrame, Series

from flight_progress.schemas.geo import GeoCoordinate


class FlightPhase(Enum):
    """
    Lifecycle phase of a flight.

    ARRIVED and CANCELLED are terminal. Phases are recomputed on every
    query, so no transition history is kept.
    """

    SCHEDULED = "scheduled"
    DEPARTED = "departed"
    IN_AIR = "in_air"
    ARRIVED = "arrived"
    CANCELLED = "cancelled"

    @property
    def display_text(self) -> str:
        """Human-readable label for icons and badges."""
        return _DISPLAY_TEXT[self]

    @property
    def is_terminal(self) -> bool:
        """True for phases that never change once reached."""
        return self in (FlightPhase.ARRIVED, FlightPhase.CANCELLED)


_DISPLAY_TEXT = {
    FlightPhase.SCHEDULED: "Scheduled",
    FlightPhase.DEPARTED: "Departed",
    FlightPhase.IN_AIR: "In Air",
    FlightPhase.ARRIVED: "Arrived",
    FlightPhase.CANCELLED: "Cancelled",
}


@dataclass(frozen=True)
class FlightTimeWindow:
    """
    Immutable set of timestamps describing one flight.

    Every timestamp is optional: an unparsable source string becomes
    None instead of an error. Datetimes are timezone-aware UTC.

    Attributes:
        departure_scheduled: Scheduled departure.
        departure_actual: Actual departure, once known.
        arrival_scheduled: Scheduled arrival.
        arrival_estimated: Latest arrival estimate.
        arrival_actual: Actual arrival, once known.
        raw_status_label: Free-form status text from the data provider.
    """

    departure_scheduled: Optional[datetime] = None
    departure_actual: Optional[datetime] = None
    arrival_scheduled: Optional[datetime] = None
    arrival_estimated: Optional[datetime] = None
    arrival_actual: Optional[datetime] = None
    raw_status_label: Optional[str] = None

    @property
    def effective_departure(self) -> Optional[datetime]:
        """Actual departure if known, otherwise scheduled."""
        if self.departure_actual is not None:
            return self.departure_actual
        return self.departure_scheduled

    @property
    def effective_arrival(self) -> Optional[datetime]:
        """Actual, then estimated, then scheduled arrival."""
        for candidate in (
            self.arrival_actual,
            self.arrival_estimated,
            self.arrival_scheduled,
        ):
            if candidate is not None:
                return candidate
        return None

    @classmethod
    def from_strings(
        cls,
        departure_scheduled: Optional[str] = None,
        departure_actual: Optional[str] = None,
        arrival_scheduled: Optional[str] = None,
        arrival_estimated: Optional[str] = None,
        arrival_actual: Optional[str] = None,
        raw_status_label: Optional[str] = None,
    ) -> "FlightTimeWindow":
        """
        Factory method building a window from raw timestamp strings.

        Each string goes through parse_timestamp; strings in no accepted
        format become None.

        Args:
            departure_scheduled: Raw scheduled departure.
            departure_actual: Raw actual departure.
            arrival_scheduled: Raw scheduled arrival.
            arrival_estimated: Raw estimated arrival.
            arrival_actual: Raw actual arrival.
            raw_status_label: Status text, passed through unchanged.

        Returns:
            FlightTimeWindow with parsed UTC datetimes.
        """
        from flight_progress.services.time_parser import parse_timestamp

        return cls(
            departure_scheduled=parse_timestamp(departure_scheduled),
            departure_actual=parse_timestamp(departure_actual),
            arrival_scheduled=parse_timestamp(arrival_scheduled),
            arrival_estimated=parse_timestamp(arrival_estimated),
            arrival_actual=parse_timestamp(arrival_actual),
            raw_status_label=raw_status_label,
        )


@dataclass(frozen=True)
class FlightProgressSnapshot:
    """
    Result of one progress query. Recomputed per query, never mutated.

    traveled_path and remaining_path share their boundary point, so
    neither is ever empty and the two strokes join visually.

    Attributes:
        phase: Resolved lifecycle phase.
        fraction: Progress along the route in [0, 1].
        current_position: Marker position on the arc.
        traveled_path: Arc samples from departure up to the boundary.
        remaining_path: Arc samples from the boundary to arrival.
        heading_degrees: Aircraft bearing along the arc, clockwise from
            north (0.0 when the path has no direction).
    """

    phase: FlightPhase
    fraction: float
    current_position: GeoCoordinate
    traveled_path: Tuple[GeoCoordinate, ...]
    remaining_path: Tuple[GeoCoordinate, ...]
    heading_degrees: float = 0.0

    @property
    def status_text(self) -> str:
        """Display text of the phase."""
        return self.phase.display_text


@dataclass(frozen=True)
class FlightProgressRequest:
    """
    Everything needed to compute a snapshot for one flight.

    Produced by data-provider adapters from host payloads.

    Attributes:
        window: Parsed time window.
        departure: Departure airport location (None if unknown).
        arrival: Arrival airport location (None if unknown).
        flight_id: Provider identifier such as the IATA flight number.
    """

    window: FlightTimeWindow
    departure: Optional[GeoCoordinate]
    arrival: Optional[GeoCoordinate]
    flight_id: Optional[str] = None


class TrackedFlightSchema(pa.DataFrameModel):
    """
    Batch input contract for tracked-flight lists.

    One row per flight. Raw timestamp columns hold strings in any accepted
    format (empty string for unknown); coordinate columns may be NaN when
    the airport location is unknown.
    """

    flight_id: Series[str] = pa.Field(
        nullable=False,
        description="Flight identifier (e.g., 'LO281')",
    )
    departure_scheduled: Series[str] = pa.Field(
        description="Raw scheduled departure timestamp",
    )
    departure_actual: Series[str] = pa.Field(
        description="Raw actual departure timestamp",
    )
    arrival_scheduled: Series[str] = pa.Field(
        description="Raw scheduled arrival timestamp",
    )
    arrival_estimated: Series[str] = pa.Field(
        description="Raw estimated arrival timestamp",
    )
    arrival_actual: Series[str] = pa.Field(
        description="Raw actual arrival timestamp",
    )
    status: Series[str] = pa.Field(
        description="Raw provider status label",
    )
    departure_lat: Series[float] = pa.Field(
        ge=-90, le=90, nullable=True, coerce=True,
        description="Departure airport latitude",
    )
    departure_lng: Series[float] = pa.Field(
        ge=-180, le=180, nullable=True, coerce=True,
        description="Departure airport longitude",
    )
    arrival_lat: Series[float] = pa.Field(
        ge=-90, le=90, nullable=True, coerce=True,
        description="Arrival airport latitude",
    )
    arrival_lng: Series[float] = pa.Field(
        ge=-180, le=180, nullable=True, coerce=True,
        description="Arrival airport longitude",
    )

    class Config:
        strict = False
        name = "TrackedFlightSchema"
        description = "Tracked flights submitted for batch progress computation"


TRACKED_FLIGHT_TEXT_COLUMNS = (
    "departure_scheduled",
    "departure_actual",
    "arrival_scheduled",
    "arrival_estimated",
    "arrival_actual",
    "status",
)

TrackedFlightDataFrame = DataFrame[TrackedFlightSchema]
