"""
Curvature profiles - distance to bow magnitude strategies.

ConstantCurvature is the default used for route overviews. The tiered
profile keeps short hops nearly straight and lets long-haul routes
bow further, as the flight detail screen draws them.
"""

from typing import Tuple

from flight_progress.config import EngineConfig
from flight_progress.ports.curvature import CurvatureProfile

DEFAULT_CURVATURE_FACTOR = 0.3

# (upper distance bound in degrees, factor); last tier is open-ended.
DEFAULT_TIERS: Tuple[Tuple[float, float], ...] = (
    (5.0, 0.08),
    (15.0, 0.15),
    (30.0, 0.22),
    (50.0, 0.28),
)
DEFAULT_LONG_HAUL_FACTOR = 0.35


class ConstantCurvature(CurvatureProfile):
    """Bow magnitude = distance * factor."""

    def __init__(self, factor: float = DEFAULT_CURVATURE_FACTOR) -> None:
        if factor < 0:
            raise ValueError(f"factor must be >= 0, got {factor}")
        self._factor = factor

    @property
    def factor(self) -> float:
        return self._factor

    def magnitude(self, distance: float) -> float:
        return distance * self._factor

    @property
    def name(self) -> str:
        return f"constant:{self._factor:g}"


class DistanceTieredCurvature(CurvatureProfile):
    """
    Bow factor chosen by distance band.

    Attributes:
        _tiers: Ascending (upper_bound, factor) pairs, upper bound exclusive.
        _long_haul_factor: Factor for distances beyond the last bound.
    """

    def __init__(
        self,
        tiers: Tuple[Tuple[float, float], ...] = DEFAULT_TIERS,
        long_haul_factor: float = DEFAULT_LONG_HAUL_FACTOR,
    ) -> None:
        bounds = [bound for bound, _ in tiers]
        if bounds != sorted(bounds):
            raise ValueError("tiers must be sorted by ascending upper bound")
        self._tiers = tuple(tiers)
        self._long_haul_factor = long_haul_factor

    def factor_for(self, distance: float) -> float:
        """Factor of the band containing `distance`."""
        for upper_bound, factor in self._tiers:
            if distance < upper_bound:
                return factor
        return self._long_haul_factor

    def magnitude(self, distance: float) -> float:
        return distance * self.factor_for(distance)

    @property
    def name(self) -> str:
        tiers = ",".join(f"{bound:g}={factor:g}" for bound, factor in self._tiers)
        return f"tiered:{tiers};{self._long_haul_factor:g}"


def build_curvature_profile(config: EngineConfig) -> CurvatureProfile:
    """
    Create the curvature profile selected by the engine config.

    Args:
        config: Engine configuration.

    Returns:
        ConstantCurvature or DistanceTieredCurvature.
    """
    if config.curvature_profile == "distance_tiered":
        return DistanceTieredCurvature()
    return ConstantCurvature(config.curvature_factor)
