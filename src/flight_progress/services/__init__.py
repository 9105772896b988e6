"""
Domain services for the Flight Progress Engine.

Pure computations (time parsing, phase resolution, progress, arc
geometry, schedule status) plus the FlightProgressService that
orchestrates them.
"""

from flight_progress.services.arc_path_generator import generate_arc_path
from flight_progress.services.flight_progress_service import FlightProgressService
from flight_progress.services.map_region import compute_map_region
from flight_progress.services.path_splitter import split_path
from flight_progress.services.position_interpolator import (
    heading_degrees,
    interpolate_position,
    nearest_position,
)
from flight_progress.services.progress_calculator import calculate_progress
from flight_progress.services.schedule_status import (
    arrival_status_text,
    block_duration,
    departure_status_text,
    format_duration,
)
from flight_progress.services.status_resolver import resolve_phase
from flight_progress.services.time_parser import parse_timestamp, parse_timestamp_series

__all__ = [
    "FlightProgressService",
    "arrival_status_text",
    "block_duration",
    "calculate_progress",
    "compute_map_region",
    "departure_status_text",
    "format_duration",
    "generate_arc_path",
    "heading_degrees",
    "interpolate_position",
    "nearest_position",
    "parse_timestamp",
    "parse_timestamp_series",
    "resolve_phase",
    "split_path",
]
