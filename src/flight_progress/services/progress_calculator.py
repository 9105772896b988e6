"""
Progress fraction calculation.

Maps a resolved phase and the flight's effective time window onto a
fraction in [0, 1]: 0 at departure, 1 at arrival.
"""

import logging
import math
from datetime import datetime, timedelta
from typing import Optional

from flight_progress.schemas.flight import FlightPhase
from flight_progress.services.time_parser import ensure_utc

logger = logging.getLogger(__name__)

# Used for airborne flights when either end of the window is unknown.
UNKNOWN_TIME_FALLBACK = 0.5

# Replaces a zero or negative flight duration.
MIN_DURATION = timedelta(microseconds=1)


def clamp_fraction(value: float) -> float:
    """Clamp to [0, 1]; NaN becomes 0.0."""
    if math.isnan(value):
        return 0.0
    return min(max(value, 0.0), 1.0)


def calculate_progress(
    phase: FlightPhase,
    departure_time: Optional[datetime],
    arrival_time: Optional[datetime],
    now: datetime,
) -> float:
    """
    Calculate how far along its route a flight is.

    SCHEDULED and CANCELLED flights report 0.0, ARRIVED flights 1.0.
    Airborne flights (DEPARTED, IN_AIR) interpolate linearly in time
    between departure and arrival, or report UNKNOWN_TIME_FALLBACK when
    either time is unknown.

    Args:
        phase: Resolved phase.
        departure_time: Effective departure, None if unknown.
        arrival_time: Effective arrival, None if unknown.
        now: Query instant.

    Returns:
        Fraction in [0.0, 1.0].
    """
    if phase in (FlightPhase.SCHEDULED, FlightPhase.CANCELLED):
        return 0.0
    if phase is FlightPhase.ARRIVED:
        return 1.0

    if departure_time is None or arrival_time is None:
        logger.debug(
            "Airborne flight without full time window; using fallback %.1f",
            UNKNOWN_TIME_FALLBACK,
        )
        return UNKNOWN_TIME_FALLBACK

    now = ensure_utc(now)
    departure_time = ensure_utc(departure_time)
    arrival_time = ensure_utc(arrival_time)

    duration = arrival_time - departure_time
    if duration <= timedelta(0):
        logger.warning(
            "Arrival %s is not after departure %s; treating flight as complete",
            arrival_time.isoformat(),
            departure_time.isoformat(),
        )
        duration = MIN_DURATION

    elapsed = now - departure_time
    return clamp_fraction(elapsed / duration)
