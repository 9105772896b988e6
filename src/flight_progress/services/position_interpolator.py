"""
Position lookup along an arc path.

Lookups:
- nearest_position snaps to the closest sample (marker placement)
- interpolate_position blends neighbouring samples (smooth redraw)
- heading_degrees gives the marker rotation along the arc

All are total: out-of-range and NaN fractions are clamped.
"""

import math

from flight_progress.schemas.geo import ArcPath, GeoCoordinate
from flight_progress.services.progress_calculator import clamp_fraction


def nearest_position(path: ArcPath, fraction: float) -> GeoCoordinate:
    """
    Return the arc sample closest to `fraction` along the path.

    index = round(fraction * (len - 1)), halves rounding up, clamped to
    the valid range.

    Args:
        path: Non-empty arc path.
        fraction: Progress fraction.

    Returns:
        The selected sample.
    """
    last_index = len(path) - 1
    index = int(math.floor(clamp_fraction(fraction) * last_index + 0.5))
    return path[min(max(index, 0), last_index)]


def interpolate_position(path: ArcPath, fraction: float) -> GeoCoordinate:
    """
    Linearly interpolate a position between the two nearest samples.

    Args:
        path: Non-empty arc path.
        fraction: Progress fraction; <= 0 returns the first sample and
            >= 1 the last.

    Returns:
        Interpolated coordinate.
    """
    if math.isnan(fraction) or fraction <= 0.0:
        return path.first
    if fraction >= 1.0:
        return path.last

    last_index = len(path) - 1
    index = fraction * last_index
    lower = int(math.floor(index))
    upper = min(int(math.ceil(index)), last_index)

    if lower == upper:
        return path[lower]

    t = index - lower
    start = path[lower]
    end = path[upper]
    return GeoCoordinate(
        latitude=start.latitude + (end.latitude - start.latitude) * t,
        longitude=start.longitude + (end.longitude - start.longitude) * t,
    )


def bearing_degrees(start: GeoCoordinate, end: GeoCoordinate) -> float:
    """Planar bearing from start to end: 0 is north, 90 east, -90 west."""
    return math.degrees(
        math.atan2(end.longitude - start.longitude, end.latitude - start.latitude)
    )


def heading_degrees(path: ArcPath, fraction: float) -> float:
    """
    Aircraft heading at `fraction` along the path.

    Uses the samples on either side of the current one, with the current
    index clamped to [1, len - 2] so both neighbours exist. Two-point
    paths use the straight route; single-point paths have no direction
    and return 0.0.

    Args:
        path: Non-empty arc path.
        fraction: Progress fraction.

    Returns:
        Bearing in degrees in (-180, 180], clockwise from north.

    Example:
        >>> path = ArcPath(
        ...     points=(GeoCoordinate(0, 0), GeoCoordinate(0, 1), GeoCoordinate(0, 2)),
        ...     control_point=GeoCoordinate(0, 1),
        ... )
        >>> heading_degrees(path, 0.5)
        90.0
    """
    point_count = len(path)
    if point_count < 2:
        return 0.0
    if point_count == 2:
        return bearing_degrees(path.first, path.last)

    index = int(math.floor((point_count - 1) * clamp_fraction(fraction)))
    index = min(max(index, 1), point_count - 2)
    return bearing_degrees(path[index - 1], path[index + 1])
