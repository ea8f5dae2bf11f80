"""Selection of the events listed on the display for the rest of the day."""

from __future__ import annotations

from datetime import datetime
from typing import Callable, Iterable, List, Optional

from .models import CalendarEvent
from .time_format import end_of_day, to_epoch

MAX_VISIBLE_EVENTS = 3


def select_visible_events(
    events: Iterable[CalendarEvent],
    now: datetime,
    limit: int = MAX_VISIBLE_EVENTS,
    accept: Optional[Callable[[CalendarEvent], bool]] = None,
) -> List[CalendarEvent]:
    """Pick at most ``limit`` events that are still running or upcoming today.

    An event qualifies when it has an ``endTime`` with
    ``now < endTime <= end of now's local day``. Events keep their input
    order; callers wanting chronological output must sort beforehand. Once
    ``limit`` events are collected the rest are ignored.

    Args:
        events: validated events for the resource.
        now: timezone-aware instant; its timezone defines the calendar day.
        limit: maximum number of events returned.
        accept: optional extra check; rejected events do not take a slot.

    Returns:
        A subsequence of ``events``, possibly empty.
    """
    now_ts = to_epoch(now)
    day_end = end_of_day(now)
    visible: List[CalendarEvent] = []
    for event in events:
        if len(visible) >= limit:
            break
        if event.endTime is None:
            continue
        if not now_ts < event.endTime <= day_end:
            continue
        if accept is None or accept(event):
            visible.append(event)
    return visible
