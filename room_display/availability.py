"""Free/occupied resolution for the displayed resource."""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Iterable, Optional

from .models import CalendarEvent
from .time_format import to_epoch

logger = logging.getLogger(__name__)


def occupying_event(events: Iterable[CalendarEvent], now: datetime) -> Optional[CalendarEvent]:
    """Return the first event covering ``now``, or ``None``.

    An event covers ``now`` when ``startTime <= now < endTime``. An event
    without ``endTime`` is open-ended and covers every instant from its start.
    """
    now_ts = to_epoch(now)
    for event in events:
        if event.startTime > now_ts:
            continue
        if event.endTime is None or now_ts < event.endTime:
            return event
    return None


def is_free(events: Iterable[CalendarEvent], now: datetime) -> bool:
    """Return True if no event occupies the resource at ``now``."""
    event = occupying_event(events, now)
    if event is not None:
        logger.debug("Resource occupied by event %s at %s", event.id, now.isoformat())
        return False
    return True
