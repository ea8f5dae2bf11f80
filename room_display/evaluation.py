"""Evaluation of the display state for one instant.

This is where raw calendar records enter the core. Each record is validated
into a ``CalendarEvent``; records that fail validation are logged and
skipped so the presentation layer always receives a complete state. The
instant is captured once per evaluation and shared by the availability
resolver, the event window and the formatter.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from datetime import datetime
from typing import Any, Callable, Dict, List, Optional, Tuple

from pydantic import ValidationError

from .availability import is_free
from .booking import quick_booking_options
from .errors import InvalidEventCollection, InvalidTimestamp, MalformedEvent
from .event_window import MAX_VISIBLE_EVENTS, select_visible_events
from .models import (
    CalendarEvent,
    DisplayConfiguration,
    DisplayState,
    EventItem,
    Header,
    ResolvedState,
)
from .status import project_status
from .time_format import TimeFormatter

logger = logging.getLogger(__name__)

TIMESTAMP_FIELDS = ("startTime", "endTime")

TitleGetter = Callable[[Optional[str]], str]


def _default_title(title: Optional[str]) -> str:
    return title or ""


def coerce_event(record: Any) -> CalendarEvent:
    """Validate one raw calendar record.

    Raises:
        InvalidTimestamp: a time field is present but not an integer.
        MalformedEvent: the record is not a mapping, lacks ``id`` or
            ``startTime``, or ends before it starts.
    """
    if isinstance(record, CalendarEvent):
        return record
    if not isinstance(record, Mapping):
        raise MalformedEvent(f"Event record must be a mapping, got {type(record).__name__}")
    try:
        return CalendarEvent.model_validate(dict(record))
    except ValidationError as exc:
        for error in exc.errors():
            loc = error.get("loc") or ()
            if loc and loc[0] in TIMESTAMP_FIELDS and error.get("type") != "missing":
                raise InvalidTimestamp(f"{loc[0]}: {error.get('msg')}") from exc
        raise MalformedEvent(str(exc)) from exc


def coerce_events(records: Any) -> Tuple[List[CalendarEvent], int]:
    """Validate a collection of records, skipping the invalid ones.

    Returns:
        The valid events in input order and the number of skipped records.

    Raises:
        InvalidEventCollection: if ``records`` is not a sequence.
    """
    if isinstance(records, (str, bytes, bytearray, Mapping)) or not isinstance(records, Sequence):
        raise InvalidEventCollection(
            f"Calendar events must be a sequence of records, got {type(records).__name__}"
        )
    events: List[CalendarEvent] = []
    skipped = 0
    for index, record in enumerate(records):
        try:
            events.append(coerce_event(record))
        except (InvalidTimestamp, MalformedEvent) as exc:
            skipped += 1
            event_id = record.get("id") if isinstance(record, Mapping) else None
            logger.warning(
                "Skipping calendar record #%s (id=%s): %s: %s",
                index,
                event_id,
                type(exc).__name__,
                exc,
            )
    return events, skipped


def resolve_state(
    events: Sequence[CalendarEvent],
    now: datetime,
    limit: int = MAX_VISIBLE_EVENTS,
    accept: Optional[Callable[[CalendarEvent], bool]] = None,
) -> ResolvedState:
    """Derive the state from validated events at the single instant ``now``.

    Events rejected by ``accept`` are left out of the visible window
    without using up a slot; they still count for availability.
    """
    free = is_free(events, now)
    visible = select_visible_events(events, now, limit=limit, accept=accept)
    return ResolvedState(isFree=free, visibleEvents=visible, evaluatedAt=now)


def evaluate(records: Any, now: datetime, limit: int = MAX_VISIBLE_EVENTS) -> ResolvedState:
    """Validate ``records`` and derive the state at ``now``.

    ``now`` must be timezone-aware; its timezone defines the calendar day
    used by the event window.
    """
    events, _ = coerce_events(records)
    return resolve_state(events, now, limit=limit)


def build_display_state(
    records: Any,
    config: DisplayConfiguration,
    now: datetime,
    formatter: TimeFormatter,
    title_getter: Optional[TitleGetter] = None,
    limit: int = MAX_VISIBLE_EVENTS,
) -> DisplayState:
    """Project the state at ``now`` into the layout consumed by the renderer."""
    get_title = title_getter or _default_title
    events, skipped = coerce_events(records)
    local_now = formatter.localize(now)
    time_ranges: Dict[CalendarEvent, str] = {}

    def _formattable(event: CalendarEvent) -> bool:
        try:
            time_ranges[event] = formatter.format_range(event.startTime, event.endTime)
        except InvalidTimestamp as exc:
            logger.warning("Leaving event %s off the display: %s", event.id, exc)
            return False
        return True

    state = resolve_state(events, local_now, limit=limit, accept=_formattable)
    logger.debug(
        "Evaluated %s events at %s: free=%s visible=%s skipped=%s",
        len(events),
        local_now.isoformat(),
        state.isFree,
        len(state.visibleEvents),
        skipped,
    )

    items: List[EventItem] = []
    for event in state.visibleEvents:
        items.append(
            EventItem(
                id=event.id,
                title=get_title(event.title),
                timeRange=time_ranges[event],
                itemClass="single--next" if items else "single--now",
            )
        )

    header = Header(
        title=config.title,
        subTitle=config.subTitle,
        status=project_status(state.isFree, config),
        dateText=formatter.format_date(local_now),
        timeText=formatter.format_instant(local_now),
    )
    return DisplayState(
        header=header,
        events=items,
        quickBooking=quick_booking_options() if state.isFree else None,
        evaluatedAt=local_now.isoformat(),
        skippedEvents=skipped,
    )
