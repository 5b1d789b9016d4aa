"""Utility for controlling current time with optional override."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from threading import Lock


class TimeManager:
    """Manage virtual current time for debugging/testing.

    All values are timezone-aware UTC datetimes.
    """

    _offset: timedelta | None = None
    _lock = Lock()

    @classmethod
    def get_real_time(cls) -> datetime:
        """Return the wall-clock time, ignoring any override."""
        return datetime.now(timezone.utc)

    @classmethod
    def get_current_time(cls) -> datetime:
        """Return the effective current time respecting override offset."""
        real_now = cls.get_real_time()
        with cls._lock:
            if cls._offset is None:
                return real_now
            return real_now + cls._offset

    @classmethod
    def set_override(cls, target_time: datetime) -> datetime:
        """Set absolute virtual time."""
        if target_time.tzinfo is None:
            raise ValueError("target_time must be timezone-aware")
        real_now = cls.get_real_time()
        with cls._lock:
            cls._offset = target_time - real_now
        return cls.get_current_time()

    @classmethod
    def clear_override(cls) -> None:
        """Reset to real system time."""
        with cls._lock:
            cls._offset = None


def get_current_time() -> datetime:
    """Convenience function."""
    return TimeManager.get_current_time()


def utc_now_naive() -> datetime:
    """Current time as naive UTC, the storage format for timestamp columns."""
    return TimeManager.get_current_time().astimezone(timezone.utc).replace(tzinfo=None)


def set_current_time(target_time: datetime) -> datetime:
    """Set virtual time to target."""
    return TimeManager.set_override(target_time)


def reset_time_override() -> None:
    """Disable time override."""
    TimeManager.clear_override()
