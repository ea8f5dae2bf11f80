"""Main application entry point for the room display service.

This module defines the FastAPI application and configures logging. The
service holds no calendar data of its own: the presentation layer posts the
room's events on every refresh and receives the derived display state.

Endpoints:
  - ``/api/state``: evaluate posted events and return the display state.
  - ``/api/booking``: forward a quick-booking request to the booking hook.
  - ``/healthz``: simple health check endpoint.

A request evaluates against a single instant, either the ``now`` supplied
by the caller or the server clock read once when the request arrives.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any, Dict

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware

from .booking import log_booking_request, request_booking
from .config import settings
from .errors import InvalidBookingDuration, InvalidEventCollection, InvalidTimestamp
from .evaluation import build_display_state
from .models import BookingRequest, BookingResponse, DisplayState, StateRequest
from .time_format import TimeFormatter

logger = logging.getLogger("room_display")
logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)

app = FastAPI(title="Room Display Service")

# CORS is disabled by default because the display and the API share an origin.
# Set ENABLE_CORS=yes to expose the API to other hosts.
if settings.enable_cors:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
    )

formatter = TimeFormatter(settings.display_timezone)

# Replaced by the hosting application to hand bookings to a booking service.
app.state.booking_hook = log_booking_request


def _utcnow() -> datetime:
    """Return the current time in UTC."""
    return datetime.now(timezone.utc)


def _request_instant(seconds: Any) -> datetime:
    if seconds is None:
        return _utcnow()
    try:
        return datetime.fromtimestamp(seconds, tz=timezone.utc)
    except (OverflowError, OSError, ValueError) as exc:
        raise HTTPException(status_code=422, detail=f"Invalid 'now' timestamp: {seconds}") from exc


@app.post("/api/state", response_model=DisplayState)
def api_state(body: StateRequest) -> DisplayState:
    """Return the display state for the posted events."""
    now = _request_instant(body.now)
    config = body.content or settings.display_configuration()
    try:
        return build_display_state(
            body.events,
            config,
            now,
            formatter,
            limit=settings.max_visible_events,
        )
    except (InvalidEventCollection, InvalidTimestamp) as exc:
        logger.error("Rejected state request: %s", exc)
        raise HTTPException(status_code=422, detail=str(exc))


@app.post("/api/booking", status_code=202, response_model=BookingResponse)
def api_booking(body: BookingRequest) -> BookingResponse:
    """Forward a quick-booking request for one of the offered durations."""
    try:
        duration = request_booking(body.durationMinutes, app.state.booking_hook)
    except InvalidBookingDuration as exc:
        raise HTTPException(status_code=422, detail=str(exc))
    return BookingResponse(accepted=True, durationMinutes=duration)


@app.get("/healthz")
def healthz() -> Dict[str, Any]:
    """Health check endpoint for monitoring."""
    return {
        "ok": True,
        "time": _utcnow().isoformat().replace("+00:00", "Z"),
        "refreshSeconds": settings.refresh_seconds,
    }


def main() -> None:
    import uvicorn

    uvicorn.run("room_display.main:app", host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
