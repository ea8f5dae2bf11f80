"""Pydantic data models for calendar events, display text and derived state.

Incoming calendar records are validated into ``CalendarEvent`` at the
boundary (see ``room_display.evaluation``); everything downstream of that
works on these frozen models only. Field names follow the camelCase used on
the wire so the JSON handed to the presentation layer needs no aliasing.
"""

from datetime import datetime
from typing import Any, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, StrictInt, model_validator


class CalendarEvent(BaseModel):
    """A single booking of the displayed resource.

    Times are whole seconds since the epoch. ``endTime`` may be absent, in
    which case the event is open-ended.
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1)
    title: Optional[str] = None
    startTime: StrictInt
    endTime: Optional[StrictInt] = None
    resourceTitle: Optional[str] = None
    resourceId: Optional[str] = None

    @model_validator(mode="after")
    def _check_order(self) -> "CalendarEvent":
        if self.endTime is not None and self.startTime > self.endTime:
            raise ValueError("startTime must not be after endTime")
        return self


class DisplayConfiguration(BaseModel):
    """Static text shown by the display."""

    model_config = ConfigDict(frozen=True)

    title: str = ""
    subTitle: Optional[str] = None
    resourceAvailableText: Optional[str] = None
    resourceUnavailableText: Optional[str] = None


class ResolvedState(BaseModel):
    """Outcome of one evaluation against a single captured instant."""

    isFree: bool
    visibleEvents: List[CalendarEvent] = []
    evaluatedAt: datetime


class StatusProjection(BaseModel):
    label: str
    styleClass: Literal["free", "occupied"]


class EventItem(BaseModel):
    """An event as it appears in the content region."""

    id: str
    title: str
    timeRange: str
    itemClass: Literal["single--now", "single--next"]


class QuickBookingOption(BaseModel):
    durationMinutes: int
    label: str


class QuickBooking(BaseModel):
    heading: str
    prompt: str
    options: List[QuickBookingOption]


class Header(BaseModel):
    title: str
    subTitle: Optional[str] = None
    status: StatusProjection
    dateText: str
    timeText: str


class DisplayState(BaseModel):
    """Everything the renderer needs to draw one frame of the display."""

    header: Header
    events: List[EventItem] = []
    quickBooking: Optional[QuickBooking] = None
    evaluatedAt: str
    skippedEvents: int = 0


class StateRequest(BaseModel):
    """Request body for ``POST /api/state``.

    Records in ``events`` are validated one at a time by the evaluator; a
    bad record is skipped, a non-list ``events`` is rejected with 422.
    """

    events: List[Any]
    now: Optional[StrictInt] = None
    content: Optional[DisplayConfiguration] = None


class BookingRequest(BaseModel):
    durationMinutes: StrictInt


class BookingResponse(BaseModel):
    accepted: bool
    durationMinutes: int
