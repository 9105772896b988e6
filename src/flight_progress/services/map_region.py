"""
Map framing for a route.
"""

from flight_progress.schemas.geo import GeoCoordinate, MapRegion

REGION_PADDING = 1.5
MIN_SPAN_DEGREES = 1.0


def compute_map_region(
    departure: GeoCoordinate,
    arrival: GeoCoordinate,
    padding: float = REGION_PADDING,
    min_span: float = MIN_SPAN_DEGREES,
) -> MapRegion:
    """
    Frame both airports: centered on the midpoint, spans padded by
    `padding` and never smaller than `min_span` degrees.
    """
    center = GeoCoordinate(
        latitude=(departure.latitude + arrival.latitude) / 2,
        longitude=(departure.longitude + arrival.longitude) / 2,
    )
    lat_delta = abs(departure.latitude - arrival.latitude) * padding
    lng_delta = abs(departure.longitude - arrival.longitude) * padding
    return MapRegion(
        center=center,
        latitude_delta=max(lat_delta, min_span),
        longitude_delta=max(lng_delta, min_span),
    )
