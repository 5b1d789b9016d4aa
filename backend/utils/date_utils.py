"""Utilities for date and time operations.

Timestamps are stored as naive UTC. Values arriving without an offset are
interpreted in the server time zone from `app.timezone`.
"""

from datetime import datetime, time, timedelta, timezone, tzinfo

from backend.config import get_settings
from backend.services.time_manager import get_current_time


def to_storage(dt: datetime, tz: tzinfo | None = None) -> datetime:
    """Convert a datetime into the naive-UTC storage format.

    Args:
        dt: Aware datetime, or naive datetime in the server time zone.
        tz: Zone for naive input. Defaults to the configured server zone.

    Returns:
        Naive datetime in UTC.
    """
    if dt.tzinfo is None or dt.tzinfo.utcoffset(dt) is None:
        dt = dt.replace(tzinfo=tz or get_settings().tzinfo)
    return dt.astimezone(timezone.utc).replace(tzinfo=None)


def from_storage(dt: datetime | None) -> datetime | None:
    """Attach the UTC offset to a stored naive timestamp."""
    if dt is None:
        return None
    if dt.tzinfo is not None:
        return dt.astimezone(timezone.utc)
    return dt.replace(tzinfo=timezone.utc)


def get_day_window(now: datetime | None = None, tz: tzinfo | None = None) -> tuple[datetime, datetime]:
    """Get the calendar day containing `now` in the server time zone.

    Args:
        now: Reference instant. Defaults to the (possibly virtual) current time.
        tz: Zone that defines the calendar day. Defaults to the configured one.

    Returns:
        (start, end) as naive UTC; start is inclusive, end is exclusive.
    """
    zone = tz or get_settings().tzinfo
    if now is None:
        now = get_current_time()
    elif now.tzinfo is None:
        now = now.replace(tzinfo=zone)

    local_day = now.astimezone(zone).date()
    start_local = datetime.combine(local_day, time.min, tzinfo=zone)
    # Build the next midnight from the calendar date so DST days keep their real length
    end_local = datetime.combine(local_day + timedelta(days=1), time.min, tzinfo=zone)
    return to_storage(start_local), to_storage(end_local)
