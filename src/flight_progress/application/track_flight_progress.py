"""
TrackFlightProgress Use Case - Public API for the progress engine.

This module provides the main entry point for hosts (screens, HTTP
handlers, scripts). It acts as a Facade/Factory, wiring the config,
arc cache and service, and accepting either raw flight-detail payloads
or already-parsed time windows.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Any, Mapping, Optional

import pandas as pd

from flight_progress.adapters.data_providers.flight_detail import parse_flight_detail
from flight_progress.adapters.repositories.arc_path_cache import InMemoryArcPathCache
from flight_progress.config import EngineConfig
from flight_progress.ports.arc_cache import ArcPathCache
from flight_progress.schemas.flight import (
    FlightProgressRequest,
    FlightProgressSnapshot,
    FlightTimeWindow,
)
from flight_progress.schemas.geo import GeoCoordinate, MapRegion
from flight_progress.services.flight_progress_service import FlightProgressService
from flight_progress.services.map_region import compute_map_region

logger = logging.getLogger(__name__)


class TrackFlightProgress:
    """
    Public API for computing flight progress snapshots.

    Example usage:
        >>> tracker = TrackFlightProgress()
        >>> snapshot = tracker.track(flight_detail_json)
        >>> snapshot.status_text
        'In Air'

    Attributes:
        _config: Engine configuration.
        _cache: Arc cache shared by all queries (None when disabled).
        _service: Underlying FlightProgressService.
    """

    def __init__(
        self,
        config: Optional[EngineConfig] = None,
        cache: Optional[ArcPathCache] = None,
    ) -> None:
        """
        Initialize the tracker with optional custom dependencies.

        Args:
            config: Engine configuration. Defaults to EngineConfig().
            cache: Custom arc cache. If None and caching is enabled, an
                InMemoryArcPathCache sized by the config is used.
        """
        self._config = config or EngineConfig()

        if not self._config.cache_enabled:
            self._cache = None
        elif cache is not None:
            self._cache = cache
        else:
            self._cache = InMemoryArcPathCache(
                max_entries=self._config.cache_max_entries
            )

        self._service = FlightProgressService(config=self._config, cache=self._cache)

        logger.info(
            "TrackFlightProgress initialized (samples=%d, profile=%s, cache=%s)",
            self._config.sample_count,
            self._config.curvature_profile,
            "on" if self._cache is not None else "off",
        )

    def track(
        self,
        payload: Mapping[str, Any],
        now: Optional[datetime] = None,
    ) -> FlightProgressSnapshot:
        """
        Compute progress from a raw flight-detail payload.

        Args:
            payload: Flight-detail JSON object (bare or {"result": ...}).
            now: Query instant; current UTC time if None.

        Returns:
            FlightProgressSnapshot.

        Raises:
            FlightDetailParseError: If the payload is unusable.
        """
        return self.track_request(parse_flight_detail(payload), now)

    def track_request(
        self,
        request: FlightProgressRequest,
        now: Optional[datetime] = None,
    ) -> FlightProgressSnapshot:
        """Compute progress for a request already built by a data provider."""
        return self._service.compute_request(request, now)

    def track_window(
        self,
        window: FlightTimeWindow,
        departure: Optional[GeoCoordinate],
        arrival: Optional[GeoCoordinate],
        now: Optional[datetime] = None,
    ) -> FlightProgressSnapshot:
        """
        Compute progress from an already-parsed time window.

        Args:
            window: Flight time window.
            departure: Departure airport location.
            arrival: Arrival airport location.
            now: Query instant; current UTC time if None.

        Returns:
            FlightProgressSnapshot.
        """
        return self._service.compute(window, departure, arrival, now)

    def track_many(
        self,
        flights: pd.DataFrame,
        now: Optional[datetime] = None,
    ) -> pd.DataFrame:
        """
        Compute progress for a tracked-flight list.

        Args:
            flights: DataFrame matching TrackedFlightSchema.
            now: Query instant shared by all rows.

        Returns:
            One output row per flight (see FRAME_OUTPUT_COLUMNS).
        """
        return self._service.compute_frame(flights, now)

    @staticmethod
    def region_for(request: FlightProgressRequest) -> Optional[MapRegion]:
        """
        Map framing for a flight.

        Returns:
            MapRegion covering both airports, or None when one is unknown.
        """
        if request.departure is None or request.arrival is None:
            return None
        return compute_map_region(request.departure, request.arrival)

    @property
    def config(self) -> EngineConfig:
        """Active engine configuration."""
        return self._config

    @property
    def cache_size(self) -> int:
        """Number of memoized arcs (0 when caching is disabled)."""
        return len(self._cache) if self._cache is not None else 0

    def clear_cache(self) -> None:
        """Drop all memoized arcs."""
        if self._cache is not None:
            self._cache.clear()
            logger.debug("Arc cache cleared")
