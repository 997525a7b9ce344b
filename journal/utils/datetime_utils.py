"""
Centralized DateTime Utilities
==============================

Entry timestamps are assigned by the database clock and stored in UTC.
The timezone configured in journal.core.config is only used for display.

Functions:
- to_app_timezone(): Convert a stored datetime to the application timezone
- to_iso(): Convert datetime object to ISO 8601 string
"""
import logging
import zoneinfo
from datetime import datetime, timezone as dt_timezone, tzinfo
from typing import Optional

from journal.core.config import get_settings

logger = logging.getLogger(__name__)


def _get_app_timezone() -> tzinfo:
    """
    Get the application timezone from config.
    Returns timezone object (defaults to UTC if invalid).
    """
    tz_str = get_settings().timezone

    if tz_str.upper() == "UTC":
        return dt_timezone.utc

    try:
        return zoneinfo.ZoneInfo(tz_str)
    except (zoneinfo.ZoneInfoNotFoundError, ValueError):
        logger.warning("Invalid timezone %r, falling back to UTC", tz_str)
        return dt_timezone.utc


def to_app_timezone(dt: datetime) -> datetime:
    """
    Convert a datetime to the application timezone.

    Naive datetimes come back from MongoDB when the client is not tz-aware;
    they are UTC by definition there.
    """
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=dt_timezone.utc)
    return dt.astimezone(_get_app_timezone())


def to_iso(dt: Optional[datetime]) -> Optional[str]:
    """
    Convert datetime object to ISO 8601 string in the application timezone.

    Returns:
        ISO 8601 formatted string ('Z' suffix for UTC), or None if dt is None
    """
    if dt is None:
        return None

    dt = to_app_timezone(dt).replace(microsecond=0)
    if dt.utcoffset() == dt_timezone.utc.utcoffset(None):
        return dt.replace(tzinfo=dt_timezone.utc).isoformat().replace("+00:00", "Z")
    return dt.isoformat()
