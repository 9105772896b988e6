"""
Data provider adapters turning host payloads into progress requests.
"""

from flight_progress.adapters.data_providers.flight_detail import (
    FlightDetailPayload,
    parse_flight_detail,
    to_request,
)

__all__ = ["FlightDetailPayload", "parse_flight_detail", "to_request"]
