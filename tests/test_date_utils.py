"""Unit tests for date utilities and the virtual clock."""

from datetime import datetime, timedelta, timezone
from zoneinfo import ZoneInfo

import pytest

from backend.services.time_manager import (
    TimeManager,
    get_current_time,
    reset_time_override,
    set_current_time,
    utc_now_naive,
)
from backend.utils.date_utils import from_storage, get_day_window, to_storage
from tests.utils import local_datetime


@pytest.fixture(autouse=True)
def real_clock():
    yield
    reset_time_override()


class TestStorageConversion:
    """Naive-UTC storage format."""

    def test_aware_value_is_converted_to_utc(self) -> None:
        value = datetime(2024, 5, 10, 9, 0, tzinfo=timezone(timedelta(hours=2)))

        assert to_storage(value) == datetime(2024, 5, 10, 7, 0)

    def test_naive_value_uses_server_zone(self) -> None:
        expected = local_datetime(2024, 5, 10, 9, 0).astimezone(timezone.utc).replace(tzinfo=None)

        assert to_storage(datetime(2024, 5, 10, 9, 0)) == expected

    def test_naive_value_with_explicit_zone(self) -> None:
        assert to_storage(datetime(2024, 5, 10, 9, 0), ZoneInfo("UTC")) == datetime(2024, 5, 10, 9, 0)

    def test_from_storage_attaches_utc(self) -> None:
        assert from_storage(datetime(2024, 5, 10, 9, 0)) == datetime(2024, 5, 10, 9, 0, tzinfo=timezone.utc)
        assert from_storage(None) is None


class TestDayWindow:
    """Calendar day boundaries."""

    def test_window_spans_local_day(self) -> None:
        start, end = get_day_window(local_datetime(2024, 5, 10, 23, 59))

        assert start == to_storage(local_datetime(2024, 5, 10))
        assert end == to_storage(local_datetime(2024, 5, 11))

    def test_window_on_dst_change_day(self) -> None:
        """The spring-forward day is 23 hours long."""
        zone = ZoneInfo("Europe/Berlin")

        start, end = get_day_window(datetime(2024, 3, 31, 12, 0, tzinfo=zone), tz=zone)

        assert end - start == timedelta(hours=23)

    def test_window_follows_virtual_clock(self) -> None:
        set_current_time(local_datetime(2030, 1, 2, 8, 0))

        start, _ = get_day_window()

        assert start == to_storage(local_datetime(2030, 1, 2))


class TestTimeManager:
    """Virtual clock overrides."""

    def test_set_override_requires_aware(self) -> None:
        with pytest.raises(ValueError):
            set_current_time(datetime(2024, 1, 1))

    def test_override_keeps_ticking_from_target(self) -> None:
        target = TimeManager.get_real_time() + timedelta(days=1)

        set_current_time(target)

        assert get_current_time() - target >= timedelta()
        assert get_current_time() - target < timedelta(minutes=1)
        assert TimeManager.get_real_time() < target

    def test_utc_now_naive_is_naive(self) -> None:
        assert utc_now_naive().tzinfo is None
