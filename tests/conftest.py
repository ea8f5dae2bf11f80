from datetime import datetime
from typing import Any, Callable, Optional
from zoneinfo import ZoneInfo

import pytest

from room_display.models import CalendarEvent
from room_display.time_format import TimeFormatter

COPENHAGEN = ZoneInfo("Europe/Copenhagen")


@pytest.fixture
def tz() -> ZoneInfo:
    """Fixed display timezone so results do not depend on the host."""
    return COPENHAGEN


@pytest.fixture
def now(tz: ZoneInfo) -> datetime:
    """Monday 7 August 2023, 09:54 local time."""
    return datetime(2023, 8, 7, 9, 54, 0, tzinfo=tz)


@pytest.fixture
def ts(now: datetime) -> int:
    """``now`` as epoch seconds."""
    return int(now.timestamp())


@pytest.fixture
def day_end(tz: ZoneInfo) -> int:
    return int(datetime(2023, 8, 7, 23, 59, 59, tzinfo=tz).timestamp())


@pytest.fixture
def formatter(tz: ZoneInfo) -> TimeFormatter:
    return TimeFormatter(tz)


@pytest.fixture
def make_event() -> Callable[..., CalendarEvent]:
    """Factory for validated events."""

    def _make(event_id: str, start: int, end: Optional[int] = None, **fields: Any) -> CalendarEvent:
        return CalendarEvent(id=event_id, startTime=start, endTime=end, **fields)

    return _make
