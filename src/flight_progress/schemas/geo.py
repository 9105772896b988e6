"""
Geographic value types for the progress engine.

All coordinates are plain latitude/longitude pairs in decimal degrees.
Geometry is planar (degree space); no geodesic correction is applied.
"""

import math
from dataclasses import dataclass
from typing import Iterator, Tuple

import numpy as np


@dataclass(frozen=True)
class GeoCoordinate:
    """
    Immutable latitude/longitude pair.

    Attributes:
        latitude: Latitude in decimal degrees.
        longitude: Longitude in decimal degrees.
    """

    latitude: float
    longitude: float

    def almost_equals(self, other: "GeoCoordinate", tolerance: float = 1e-6) -> bool:
        """Check both components are within tolerance of another coordinate."""
        return (
            math.isclose(self.latitude, other.latitude, rel_tol=0.0, abs_tol=tolerance)
            and math.isclose(
                self.longitude, other.longitude, rel_tol=0.0, abs_tol=tolerance
            )
        )

    def as_tuple(self) -> Tuple[float, float]:
        """Return (latitude, longitude)."""
        return (self.latitude, self.longitude)


@dataclass(frozen=True)
class ArcPath:
    """
    Sampled curved route between two airports.

    Points always run departure -> arrival. A regular arc holds
    sample_count + 1 points; the single-point fallback used when one
    airport location is unknown holds exactly one.

    Attributes:
        points: Ordered path samples.
        control_point: Quadratic Bezier control point used to bow the route.
        bow_direction: +1.0 (eastbound), -1.0 (westbound) or 0.0 when
            no bow was applied.
    """

    points: Tuple[GeoCoordinate, ...]
    control_point: GeoCoordinate
    bow_direction: float = 0.0

    def __post_init__(self) -> None:
        """Validate the path is not empty."""
        if not self.points:
            raise ValueError("ArcPath requires at least one point")

    def __len__(self) -> int:
        return len(self.points)

    def __iter__(self) -> Iterator[GeoCoordinate]:
        return iter(self.points)

    def __getitem__(self, index):
        return self.points[index]

    @property
    def first(self) -> GeoCoordinate:
        """Departure end of the path."""
        return self.points[0]

    @property
    def last(self) -> GeoCoordinate:
        """Arrival end of the path."""
        return self.points[-1]

    def to_array(self) -> np.ndarray:
        """
        Return the samples as a read-only (N+1, 2) array of (lat, lng).

        The array is a fresh copy with the writeable flag cleared, so
        callers cannot mutate a cached path through it.
        """
        arr = np.array([p.as_tuple() for p in self.points], dtype=float)
        arr.flags.writeable = False
        return arr


@dataclass(frozen=True)
class MapRegion:
    """
    Map framing that shows both airports.

    Attributes:
        center: Midpoint of the two airports.
        latitude_delta: Vertical span in degrees.
        longitude_delta: Horizontal span in degrees.
    """

    center: GeoCoordinate
    latitude_delta: float
    longitude_delta: float

    @property
    def lat_range(self) -> Tuple[float, float]:
        """(south, north) bounds."""
        half = self.latitude_delta / 2
        return (self.center.latitude - half, self.center.latitude + half)

    @property
    def lng_range(self) -> Tuple[float, float]:
        """(west, east) bounds."""
        half = self.longitude_delta / 2
        return (self.center.longitude - half, self.center.longitude + half)
