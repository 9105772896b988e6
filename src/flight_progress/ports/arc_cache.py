"""
Arc path cache port interface.

Defines the memoization protocol for generated arcs. Keys are rounded
endpoint pairs, so repeated queries for the same flight reuse one arc.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional, Protocol, runtime_checkable

if TYPE_CHECKING:
    from flight_progress.schemas.geo import ArcPath, GeoCoordinate


@dataclass(frozen=True)
class ArcCacheKey:
    """
    Cache key for one generated arc.

    Attributes:
        departure: Rounded (lat, lng) of the departure airport.
        arrival: Rounded (lat, lng) of the arrival airport.
        sample_count: Number of Bezier segments.
        profile: Curvature profile name.
    """

    departure: tuple[float, float]
    arrival: tuple[float, float]
    sample_count: int
    profile: str

    @classmethod
    def create(
        cls,
        departure: GeoCoordinate,
        arrival: GeoCoordinate,
        sample_count: int,
        profile: str,
        precision: int = 6,
    ) -> "ArcCacheKey":
        """Build a key, rounding both endpoints to `precision` decimals."""
        return cls(
            departure=(
                round(departure.latitude, precision),
                round(departure.longitude, precision),
            ),
            arrival=(
                round(arrival.latitude, precision),
                round(arrival.longitude, precision),
            ),
            sample_count=sample_count,
            profile=profile,
        )


@runtime_checkable
class ArcPathCache(Protocol):
    """
    Protocol for arc memoization backends.

    Entries are write-once: the first arc stored under a key is kept and
    returned by later set() calls for the same key. Implementations must
    be safe for concurrent access.
    """

    def get(self, key: ArcCacheKey) -> Optional[ArcPath]:
        """
        Get a cached arc or None on a miss.

        Args:
            key: Rounded endpoint key.
        """
        ...

    def set(self, key: ArcCacheKey, path: ArcPath) -> ArcPath:
        """
        Store an arc unless the key is already present.

        Args:
            key: Rounded endpoint key.
            path: Freshly generated arc.

        Returns:
            The arc now associated with the key.
        """
        ...

    def clear(self) -> None:
        """Drop every cached arc."""
        ...

    def __len__(self) -> int:
        """Number of cached arcs."""
        ...
