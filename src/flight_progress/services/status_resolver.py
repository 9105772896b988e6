"""
Flight phase resolution.

Explicit provider labels win when they name a cancelled, landed or
airborne flight. Anything else ("scheduled", missing, unknown wording)
is treated as stale and the phase is derived from the clock instead.
"""

import logging
import re
from datetime import datetime
from typing import Optional

from flight_progress.schemas.flight import FlightPhase
from flight_progress.services.time_parser import ensure_utc

logger = logging.getLogger(__name__)

CANCELLED_LABELS = frozenset({"cancelled", "canceled"})
ARRIVED_LABELS = frozenset({"arrived", "landed"})
IN_AIR_LABELS = frozenset({"departed", "airborne", "in air", "enroute", "en route"})

_SEPARATORS = re.compile(r"[\s_\-]+")


def normalize_status_label(label: Optional[str]) -> str:
    """
    Normalize a provider status label for matching.

    Lower-cases, trims, and folds '-', '_' and whitespace runs into a
    single space ("In-Air" -> "in air").

    Args:
        label: Raw status label, possibly None.

    Returns:
        Normalized label; empty string for None.
    """
    if not label:
        return ""
    return _SEPARATORS.sub(" ", label.strip().lower()).strip()


def resolve_phase(
    raw_status_label: Optional[str],
    departure_time: Optional[datetime],
    arrival_time: Optional[datetime],
    now: datetime,
) -> FlightPhase:
    """
    Resolve the lifecycle phase of a flight.

    Priority order:
    1. cancelled/canceled label -> CANCELLED
    2. arrived/landed label -> ARRIVED
    3. departed/airborne/in air/enroute label -> IN_AIR
    4. otherwise derive from time:
       no departure or now < departure -> SCHEDULED,
       now >= known arrival -> ARRIVED, else IN_AIR.

    Both boundaries are inclusive: now == departure is IN_AIR and
    now == arrival is ARRIVED.

    Args:
        raw_status_label: Provider status text (any case, may be None).
        departure_time: Effective departure, None if unknown.
        arrival_time: Effective arrival, None if unknown.
        now: Query instant.

    Returns:
        Resolved FlightPhase. Never raises.
    """
    label = normalize_status_label(raw_status_label)

    if label in CANCELLED_LABELS:
        return FlightPhase.CANCELLED
    if label in ARRIVED_LABELS:
        return FlightPhase.ARRIVED
    if label in IN_AIR_LABELS:
        return FlightPhase.IN_AIR

    if departure_time is None:
        logger.debug("No departure time for label %r; phase stays SCHEDULED", label)
        return FlightPhase.SCHEDULED

    now = ensure_utc(now)
    if now < ensure_utc(departure_time):
        return FlightPhase.SCHEDULED
    if arrival_time is not None and now >= ensure_utc(arrival_time):
        return FlightPhase.ARRIVED
    return FlightPhase.IN_AIR
