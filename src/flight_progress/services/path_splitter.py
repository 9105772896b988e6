"""
Traveled/remaining split of an arc path.
"""

import math
from typing import Sequence, Tuple

from flight_progress.schemas.geo import GeoCoordinate
from flight_progress.services.progress_calculator import clamp_fraction


def split_index(point_count: int, fraction: float) -> int:
    """
    Boundary sample index for a path of `point_count` points.

    max(1, floor((point_count - 1) * fraction)), clamped to the last index.
    """
    last_index = point_count - 1
    end_index = max(1, int(math.floor(last_index * clamp_fraction(fraction))))
    return min(end_index, last_index)


def split_path(
    path: Sequence[GeoCoordinate],
    fraction: float,
) -> Tuple[Tuple[GeoCoordinate, ...], Tuple[GeoCoordinate, ...]]:
    """
    Split a path into traveled and remaining parts at `fraction`.

    The boundary sample belongs to both parts, so the two strokes join
    and neither part is ever empty. Paths with fewer than two points
    (the single-point fallback) are returned whole on both sides.

    Args:
        path: Arc path or any sequence of coordinates.
        fraction: Progress fraction.

    Returns:
        (traveled, remaining).

    Example:
        >>> pts = [GeoCoordinate(0, float(i)) for i in range(5)]
        >>> traveled, remaining = split_path(pts, 0.5)
        >>> len(traveled), len(remaining)
        (3, 3)
    """
    points = tuple(path)
    if len(points) < 2:
        return points, points

    end_index = split_index(len(points), fraction)
    return points[: end_index + 1], points[end_index:]
