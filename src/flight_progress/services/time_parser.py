"""
Timestamp parsing for provider time strings.

Providers send timestamps in several loosely-related formats. Formats
are tried in a fixed priority order and the first match wins; anything
that matches none of them is treated as unknown (None), never an error.
"""

import logging
from datetime import datetime, timezone
from typing import Optional

import pandas as pd

logger = logging.getLogger(__name__)

# Priority order matters: offset-aware formats first so an explicit
# offset is never discarded by a naive match.
TIMESTAMP_FORMATS = (
    "%Y-%m-%dT%H:%M:%S%z",
    "%Y-%m-%dT%H:%M:%S.%f%z",
    "%Y-%m-%dT%H:%M:%S",
    "%Y-%m-%d %H:%M:%S",
    "%Y-%m-%d %H:%M",
)


def ensure_utc(dt: datetime) -> datetime:
    """
    Normalize a datetime to timezone-aware UTC.

    Naive values are interpreted as UTC; the provider's time fields are
    the `utc` members of the flight record.

    Args:
        dt: Naive or aware datetime.

    Returns:
        Aware datetime in UTC.
    """
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def parse_timestamp(value: object) -> Optional[datetime]:
    """
    Parse a provider timestamp into an aware UTC datetime.

    Args:
        value: Raw timestamp string. datetime instances are normalized
            and returned; None, blanks and non-strings yield None.

    Returns:
        UTC datetime, or None if no accepted format matches.

    Examples:
        >>> parse_timestamp("2025-06-10T08:30:00+02:00")
        datetime.datetime(2025, 6, 10, 6, 30, tzinfo=datetime.timezone.utc)
        >>> parse_timestamp("not a time") is None
        True
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        return ensure_utc(value)
    if not isinstance(value, str):
        logger.debug("Ignoring non-string timestamp of type %s", type(value).__name__)
        return None

    text = value.strip()
    if not text:
        return None

    for fmt in TIMESTAMP_FORMATS:
        try:
            parsed = datetime.strptime(text, fmt)
        except ValueError:
            continue
        return ensure_utc(parsed)

    logger.debug("Unparsable timestamp treated as unknown: %r", value)
    return None


def parse_timestamp_series(values: pd.Series) -> pd.Series:
    """
    Vectorized parse of a Series of timestamp strings.

    Applies TIMESTAMP_FORMATS in priority order; each element takes the
    first format that parses it. Unparsable or missing elements become NaT.

    Args:
        values: Series of raw timestamp strings (None/NaN allowed).

    Returns:
        Series of datetime64[ns, UTC] aligned with the input index.
    """
    cleaned = values.astype("string").str.strip()
    present = (cleaned.notna() & (cleaned != "")).fillna(False).astype(bool)
    result = pd.Series(pd.NaT, index=values.index, dtype="datetime64[ns, UTC]")

    for fmt in TIMESTAMP_FORMATS:
        pending = result.isna() & present
        if not pending.any():
            break
        parsed = pd.to_datetime(
            cleaned[pending], format=fmt, errors="coerce", utc=True
        )
        result.loc[pending] = parsed

    unparsed = int((result.isna() & present).sum())
    if unparsed:
        logger.debug("%d timestamps did not match any accepted format", unparsed)

    return result
