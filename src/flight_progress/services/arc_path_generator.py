"""
Arc path generation - bowed quadratic Bezier between two airports.

The route is approximated in planar degree space (equirectangular), not
along a great circle. The curve is bowed perpendicular to the straight
route so it reads as a flight path on a map:

1. Midpoint and Euclidean distance of the endpoints
2. Unit perpendicular of the departure -> arrival vector
3. Control point = midpoint + magnitude * direction * perpendicular,
   direction +1 for eastbound routes and -1 otherwise
4. Sample B(t) = (1-t)^2 P0 + 2(1-t)t C + t^2 P2 for t = i / sample_count

Sampling is vectorized with numpy over all t values at once.
"""

import logging
import math
from typing import Optional

import numpy as np

from flight_progress.ports.curvature import CurvatureProfile
from flight_progress.schemas.geo import ArcPath, GeoCoordinate

logger = logging.getLogger(__name__)

DEFAULT_SAMPLE_COUNT = 50


def bow_direction(departure: GeoCoordinate, arrival: GeoCoordinate) -> float:
    """+1.0 for eastbound routes (arrival east of departure), else -1.0."""
    return 1.0 if arrival.longitude > departure.longitude else -1.0


def compute_control_point(
    departure: GeoCoordinate,
    arrival: GeoCoordinate,
    curvature: CurvatureProfile,
) -> tuple[GeoCoordinate, float]:
    """
    Compute the Bezier control point bowing the route.

    Args:
        departure: Route start.
        arrival: Route end.
        curvature: Distance to bow magnitude strategy.

    Returns:
        (control_point, direction). For coincident endpoints the bow is
        skipped: the control point is the midpoint and direction is 0.0.
    """
    mid_lat = (departure.latitude + arrival.latitude) / 2
    mid_lng = (departure.longitude + arrival.longitude) / 2

    d_lat = arrival.latitude - departure.latitude
    d_lng = arrival.longitude - departure.longitude
    distance = math.hypot(d_lat, d_lng)

    if distance == 0.0:
        logger.debug(
            "Zero-length route at (%.6f, %.6f); skipping bow",
            departure.latitude,
            departure.longitude,
        )
        return GeoCoordinate(mid_lat, mid_lng), 0.0

    # Route vector rotated 90 degrees: (lat, lng) = (-d_lng, d_lat), normalized.
    perp_lat = -d_lng / distance
    perp_lng = d_lat / distance

    magnitude = curvature.magnitude(distance)
    direction = bow_direction(departure, arrival)

    control = GeoCoordinate(
        latitude=mid_lat + magnitude * direction * perp_lat,
        longitude=mid_lng + magnitude * direction * perp_lng,
    )
    return control, direction


def generate_arc_path(
    departure: GeoCoordinate,
    arrival: GeoCoordinate,
    sample_count: int = DEFAULT_SAMPLE_COUNT,
    curvature: Optional[CurvatureProfile] = None,
) -> ArcPath:
    """
    Generate a bowed route of sample_count + 1 points.

    Args:
        departure: Departure airport location.
        arrival: Arrival airport location.
        sample_count: Number of Bezier segments (>= 1).
        curvature: Bow strategy; ConstantCurvature(0.3) if None.

    Returns:
        ArcPath whose first point is departure and last is arrival.

    Raises:
        ValueError: If sample_count < 1.

    Example:
        >>> path = generate_arc_path(GeoCoordinate(0, 0), GeoCoordinate(0, 10), 4)
        >>> len(path), path.bow_direction
        (5, 1.0)
    """
    if sample_count < 1:
        raise ValueError(f"sample_count must be >= 1, got {sample_count}")

    if curvature is None:
        from flight_progress.adapters.curvature.profiles import ConstantCurvature

        curvature = ConstantCurvature()

    control, direction = compute_control_point(departure, arrival, curvature)

    t = np.linspace(0.0, 1.0, sample_count + 1)
    one_minus_t = 1.0 - t
    w_start = one_minus_t * one_minus_t
    w_control = 2.0 * one_minus_t * t
    w_end = t * t

    lats = (
        w_start * departure.latitude
        + w_control * control.latitude
        + w_end * arrival.latitude
    )
    lngs = (
        w_start * departure.longitude
        + w_control * control.longitude
        + w_end * arrival.longitude
    )

    points = tuple(
        GeoCoordinate(latitude=float(lat), longitude=float(lng))
        for lat, lng in zip(lats, lngs)
    )

    logger.debug(
        "Generated arc with %d points (bow direction %+.0f, control %.4f, %.4f)",
        len(points),
        direction,
        control.latitude,
        control.longitude,
    )

    return ArcPath(points=points, control_point=control, bow_direction=direction)
