"""
Curvature profile adapters.
"""

from flight_progress.adapters.curvature.profiles import (
    DEFAULT_CURVATURE_FACTOR,
    ConstantCurvature,
    DistanceTieredCurvature,
    build_curvature_profile,
)

__all__ = [
    "DEFAULT_CURVATURE_FACTOR",
    "ConstantCurvature",
    "DistanceTieredCurvature",
    "build_curvature_profile",
]
