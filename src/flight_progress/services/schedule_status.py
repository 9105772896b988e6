"""
Schedule status text for a flight's time window.

Delay labels ("12m delayed", "5m early", "On time") and block duration
("2h 15min"), as shown next to the route on the flight detail screen.
Unknown times never raise; they produce the neutral label.
"""

from datetime import datetime, timedelta
from typing import Optional

from flight_progress.schemas.flight import FlightTimeWindow
from flight_progress.services.time_parser import ensure_utc

ON_TIME_TEXT = "On time"
UNKNOWN_DURATION_TEXT = "--h --min"


def delay_minutes(
    scheduled: Optional[datetime],
    reference: Optional[datetime],
) -> Optional[int]:
    """
    Whole minutes `reference` is later than `scheduled`.

    Partial minutes are truncated toward zero, so 90 seconds late is 1
    and 90 seconds early is -1.

    Returns:
        Signed minutes, or None when either time is unknown.
    """
    if scheduled is None or reference is None:
        return None
    seconds = (ensure_utc(reference) - ensure_utc(scheduled)).total_seconds()
    return int(seconds / 60)


def delay_status_text(
    scheduled: Optional[datetime],
    reference: Optional[datetime],
) -> str:
    """
    Delay label comparing a scheduled time with an actual or estimated one.

    Examples:
        >>> from datetime import datetime
        >>> delay_status_text(datetime(2025, 1, 1, 8, 0), datetime(2025, 1, 1, 8, 12))
        '12m delayed'
        >>> delay_status_text(None, datetime(2025, 1, 1, 8, 12))
        'On time'
    """
    minutes = delay_minutes(scheduled, reference)
    if not minutes:
        return ON_TIME_TEXT
    if minutes > 0:
        return f"{minutes}m delayed"
    return f"{-minutes}m early"


def departure_status_text(window: FlightTimeWindow) -> str:
    """Scheduled vs actual departure."""
    return delay_status_text(window.departure_scheduled, window.departure_actual)


def arrival_status_text(window: FlightTimeWindow) -> str:
    """Scheduled vs actual arrival, or vs the estimate before landing."""
    reference = window.arrival_actual or window.arrival_estimated
    return delay_status_text(window.arrival_scheduled, reference)


def block_duration(window: FlightTimeWindow) -> Optional[timedelta]:
    """
    Time between effective departure and effective arrival.

    Returns:
        Duration, or None when a time is unknown or the window is inverted.
    """
    departure = window.effective_departure
    arrival = window.effective_arrival
    if departure is None or arrival is None:
        return None
    duration = ensure_utc(arrival) - ensure_utc(departure)
    if duration < timedelta(0):
        return None
    return duration


def format_duration(duration: Optional[timedelta]) -> str:
    """Render a duration as "Hh Mmin"; unknown becomes "--h --min"."""
    if duration is None:
        return UNKNOWN_DURATION_TEXT
    total_minutes = int(duration.total_seconds()) // 60
    hours, minutes = divmod(total_minutes, 60)
    return f"{hours}h {minutes}min"
