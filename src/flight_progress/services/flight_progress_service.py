"""
Flight Progress Service - Domain orchestrator for progress snapshots.

Coordinates the interaction between:
- TimeParser / StatusResolver / ProgressCalculator (time side)
- ArcPathGenerator and the arc cache (geometry side)
- PositionInterpolator / PathSplitter (combining both)
"""

from __future__ import annotations

import logging
import time
from datetime import datetime, timezone
from typing import TYPE_CHECKING, Optional

import pandas as pd

from flight_progress.adapters.curvature.profiles import build_curvature_profile
from flight_progress.config import EngineConfig
from flight_progress.ports.arc_cache import ArcCacheKey
from flight_progress.schemas.flight import (
    TRACKED_FLIGHT_TEXT_COLUMNS,
    FlightProgressRequest,
    FlightProgressSnapshot,
    FlightTimeWindow,
    TrackedFlightSchema,
)
from flight_progress.schemas.geo import ArcPath, GeoCoordinate
from flight_progress.services.arc_path_generator import generate_arc_path
from flight_progress.services.path_splitter import split_path
from flight_progress.services.position_interpolator import (
    heading_degrees,
    interpolate_position,
    nearest_position,
)
from flight_progress.services.progress_calculator import calculate_progress
from flight_progress.services.status_resolver import resolve_phase
from flight_progress.services.time_parser import ensure_utc, parse_timestamp_series

if TYPE_CHECKING:
    from flight_progress.ports.arc_cache import ArcPathCache
    from flight_progress.ports.curvature import CurvatureProfile

logger = logging.getLogger(__name__)

FRAME_OUTPUT_COLUMNS = [
    "flight_id",
    "phase",
    "status_text",
    "fraction",
    "current_latitude",
    "current_longitude",
    "heading_degrees",
]

# Stand-in location when neither airport is known.
NULL_ISLAND = GeoCoordinate(latitude=0.0, longitude=0.0)

_TIME_COLUMNS = (
    "departure_scheduled",
    "departure_actual",
    "arrival_scheduled",
    "arrival_estimated",
    "arrival_actual",
)


def _timestamp_to_datetime(value: object) -> Optional[datetime]:
    """Convert a parsed pandas timestamp (or NaT) to an aware datetime."""
    if value is None or pd.isna(value):
        return None
    return ensure_utc(pd.Timestamp(value).to_pydatetime())


def _coordinate_or_none(lat: float, lng: float) -> Optional[GeoCoordinate]:
    if pd.isna(lat) or pd.isna(lng):
        return None
    return GeoCoordinate(latitude=float(lat), longitude=float(lng))


class FlightProgressService:
    """
    Domain service computing progress snapshots.

    Every call recomputes phase, fraction and path split from scratch;
    the only state kept between calls is the optional arc cache.

    This service is thread-safe as long as its cache is.

    Attributes:
        _config: Engine configuration.
        _cache: Arc memoization backend (None disables caching).
        _curvature: Bow magnitude strategy.
    """

    def __init__(
        self,
        config: Optional[EngineConfig] = None,
        cache: Optional[ArcPathCache] = None,
        curvature: Optional[CurvatureProfile] = None,
    ) -> None:
        """
        Initialize the progress service.

        Args:
            config: Engine configuration; defaults to EngineConfig().
            cache: Arc cache; arcs are regenerated per call if None.
            curvature: Curvature profile; built from config if None.
        """
        self._config = config or EngineConfig()
        self._cache = cache if self._config.cache_enabled else None
        self._curvature = curvature or build_curvature_profile(self._config)

    @property
    def config(self) -> EngineConfig:
        """Active engine configuration."""
        return self._config

    def arc_for(self, departure: GeoCoordinate, arrival: GeoCoordinate) -> ArcPath:
        """
        Get the arc between two airports, generating it on a cache miss.

        Args:
            departure: Departure airport location.
            arrival: Arrival airport location.

        Returns:
            Arc path of config.sample_count + 1 points.
        """
        if self._cache is None:
            return generate_arc_path(
                departure, arrival, self._config.sample_count, self._curvature
            )

        key = ArcCacheKey.create(
            departure,
            arrival,
            sample_count=self._config.sample_count,
            profile=self._curvature.name,
            precision=self._config.cache_precision,
        )
        cached = self._cache.get(key)
        if cached is not None:
            return cached

        path = generate_arc_path(
            departure, arrival, self._config.sample_count, self._curvature
        )
        return self._cache.set(key, path)

    def _path_for(
        self,
        departure: Optional[GeoCoordinate],
        arrival: Optional[GeoCoordinate],
    ) -> ArcPath:
        if departure is not None and arrival is not None:
            return self.arc_for(departure, arrival)

        if departure is None and arrival is None:
            logger.warning(
                "Missing both airport locations; using single-point path at origin"
            )
            return ArcPath(points=(NULL_ISLAND,), control_point=NULL_ISLAND)

        known = departure if departure is not None else arrival
        logger.warning(
            "Missing %s airport location; using single-point path",
            "arrival" if departure is not None else "departure",
        )
        return ArcPath(points=(known,), control_point=known)

    def _position(self, path: ArcPath, fraction: float) -> GeoCoordinate:
        if self._config.position_mode == "continuous":
            return interpolate_position(path, fraction)
        return nearest_position(path, fraction)

    def compute(
        self,
        window: FlightTimeWindow,
        departure: Optional[GeoCoordinate],
        arrival: Optional[GeoCoordinate],
        now: Optional[datetime] = None,
    ) -> FlightProgressSnapshot:
        """
        Compute the progress snapshot of one flight.

        Args:
            window: Flight time window.
            departure: Departure airport location (None if unknown).
            arrival: Arrival airport location (None if unknown).
            now: Query instant; current UTC time if None.

        Returns:
            Immutable FlightProgressSnapshot. Missing locations degrade to
            a single-point path instead of raising.
        """
        now = ensure_utc(now) if now is not None else datetime.now(timezone.utc)

        departure_time = window.effective_departure
        arrival_time = window.effective_arrival

        phase = resolve_phase(window.raw_status_label, departure_time, arrival_time, now)
        fraction = calculate_progress(phase, departure_time, arrival_time, now)

        path = self._path_for(departure, arrival)
        current_position = self._position(path, fraction)
        traveled, remaining = split_path(path, fraction)
        heading = heading_degrees(path, fraction)

        logger.debug(
            "Snapshot: phase=%s, fraction=%.3f, traveled=%d, remaining=%d",
            phase.value,
            fraction,
            len(traveled),
            len(remaining),
        )

        return FlightProgressSnapshot(
            phase=phase,
            fraction=fraction,
            current_position=current_position,
            traveled_path=traveled,
            remaining_path=remaining,
            heading_degrees=heading,
        )

    def compute_request(
        self,
        request: FlightProgressRequest,
        now: Optional[datetime] = None,
    ) -> FlightProgressSnapshot:
        """Compute the snapshot for a request built by a data provider."""
        return self.compute(request.window, request.departure, request.arrival, now)

    def compute_frame(
        self,
        flights: pd.DataFrame,
        now: Optional[datetime] = None,
    ) -> pd.DataFrame:
        """
        Compute progress for a list of tracked flights.

        Missing or null timestamp/status columns are treated as unknown.
        Rows with no airport location at all still get a phase and a
        fraction; their position and heading columns are NaN.

        Args:
            flights: DataFrame matching TrackedFlightSchema.
            now: Query instant shared by all rows; current UTC time if None.

        Returns:
            DataFrame with FRAME_OUTPUT_COLUMNS, one row per input row.

        Raises:
            pandera.errors.SchemaError: If required columns are missing or
                coordinates are out of range.
        """
        start_time = time.perf_counter()
        now = ensure_utc(now) if now is not None else datetime.now(timezone.utc)

        frame = flights.copy()
        for column in TRACKED_FLIGHT_TEXT_COLUMNS:
            if column not in frame.columns:
                frame[column] = ""
            else:
                frame[column] = frame[column].fillna("").astype(str)
        if "flight_id" in frame.columns:
            frame["flight_id"] = frame["flight_id"].astype(str)

        validated = TrackedFlightSchema.validate(frame)

        parsed = {
            column: parse_timestamp_series(validated[column])
            for column in _TIME_COLUMNS
        }

        rows = []
        for position, row in enumerate(validated.itertuples(index=False)):
            window = FlightTimeWindow(
                departure_scheduled=_timestamp_to_datetime(
                    parsed["departure_scheduled"].iloc[position]
                ),
                departure_actual=_timestamp_to_datetime(
                    parsed["departure_actual"].iloc[position]
                ),
                arrival_scheduled=_timestamp_to_datetime(
                    parsed["arrival_scheduled"].iloc[position]
                ),
                arrival_estimated=_timestamp_to_datetime(
                    parsed["arrival_estimated"].iloc[position]
                ),
                arrival_actual=_timestamp_to_datetime(
                    parsed["arrival_actual"].iloc[position]
                ),
                raw_status_label=row.status or None,
            )
            departure = _coordinate_or_none(row.departure_lat, row.departure_lng)
            arrival = _coordinate_or_none(row.arrival_lat, row.arrival_lng)

            if departure is None and arrival is None:
                logger.warning("Flight %s has no airport locations", row.flight_id)
                phase = resolve_phase(
                    window.raw_status_label,
                    window.effective_departure,
                    window.effective_arrival,
                    now,
                )
                fraction = calculate_progress(
                    phase, window.effective_departure, window.effective_arrival, now
                )
                current_lat = current_lng = heading = float("nan")
            else:
                snapshot = self.compute(window, departure, arrival, now)
                phase = snapshot.phase
                fraction = snapshot.fraction
                current_lat = snapshot.current_position.latitude
                current_lng = snapshot.current_position.longitude
                heading = snapshot.heading_degrees

            rows.append(
                {
                    "flight_id": row.flight_id,
                    "phase": phase.value,
                    "status_text": phase.display_text,
                    "fraction": fraction,
                    "current_latitude": current_lat,
                    "current_longitude": current_lng,
                    "heading_degrees": heading,
                }
            )

        result = pd.DataFrame(rows, columns=FRAME_OUTPUT_COLUMNS)

        logger.info(
            "Computed progress for %d flights in %.3fms",
            len(result),
            (time.perf_counter() - start_time) * 1000,
        )

        return result
