"""
Schema definitions for the Flight Progress Engine.

Frozen dataclasses for per-flight values; a Pandera model for batch input.
"""

from .flight import (
    FlightPhase,
    FlightProgressRequest,
    FlightProgressSnapshot,
    FlightTimeWindow,
    TrackedFlightDataFrame,
    TrackedFlightSchema,
)
from .geo import ArcPath, GeoCoordinate, MapRegion

__all__ = [
    # Geometry
    "GeoCoordinate",
    "ArcPath",
    "MapRegion",
    # Flight schemas
    "FlightPhase",
    "FlightTimeWindow",
    "FlightProgressSnapshot",
    "FlightProgressRequest",
    # Batch input
    "TrackedFlightSchema",
    "TrackedFlightDataFrame",
]
