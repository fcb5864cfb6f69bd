#!/usr/bin/env python3
"""
Message Date Helpers

Converts the provider's ``internalDate`` (milliseconds since the epoch, sent
as a string) into the display date used by unparsed records.
"""

import logging
from datetime import datetime, timezone

logger = logging.getLogger(__name__)

UNKNOWN_DATE = "Unknown"


def parse_internal_date(internal_date: str | int | None) -> datetime | None:
    """
    Parse an ``internalDate`` value into an aware UTC datetime.

    Args:
        internal_date: Milliseconds since epoch, as a string or integer

    Returns:
        datetime in UTC, or None if the value is missing or not numeric
    """
    if internal_date is None or internal_date == "":
        return None

    try:
        millis = int(str(internal_date).strip())
    except ValueError:
        logger.debug(f"Ignoring non-numeric internalDate: {internal_date!r}")
        return None

    try:
        return datetime.fromtimestamp(millis / 1000, tz=timezone.utc)
    except (OverflowError, OSError, ValueError):
        logger.debug(f"Ignoring out-of-range internalDate: {internal_date!r}")
        return None


def format_internal_date(internal_date: str | int | None) -> str:
    """Format an ``internalDate`` as YYYY-MM-DD, or return ``UNKNOWN_DATE``."""
    parsed = parse_internal_date(internal_date)
    if parsed is None:
        return UNKNOWN_DATE
    return parsed.date().isoformat()
