"""Quick-booking triggers offered while the resource is free.

The display only forwards the booking intent. Executing the booking,
checking for conflicts and persisting it belong to whatever hook the
hosting application installs.
"""

from __future__ import annotations

import logging
from typing import Callable, List, Optional

from .errors import InvalidBookingDuration
from .models import QuickBooking, QuickBookingOption

logger = logging.getLogger(__name__)

QUICK_BOOKING_DURATIONS = (15, 30, 60)

QUICK_BOOKING_HEADING = "Lokalet er ledigt"
QUICK_BOOKING_PROMPT = "Straksbook lokalet. Vælg varighed."

BookingHook = Callable[[int], None]


def log_booking_request(duration_minutes: int) -> None:
    """Default hook: record the request and do nothing else."""
    logger.info("Quick booking requested for %s minutes", duration_minutes)


def request_booking(duration_minutes: int, hook: Optional[BookingHook] = None) -> int:
    """Forward a quick-booking request of ``duration_minutes`` to ``hook``.

    Raises:
        InvalidBookingDuration: if the duration is not one of the offered ones.
    """
    if (
        isinstance(duration_minutes, bool)
        or not isinstance(duration_minutes, int)
        or duration_minutes not in QUICK_BOOKING_DURATIONS
    ):
        raise InvalidBookingDuration(
            f"Unsupported booking duration {duration_minutes!r}; "
            f"expected one of {', '.join(str(d) for d in QUICK_BOOKING_DURATIONS)}"
        )
    (hook or log_booking_request)(duration_minutes)
    return duration_minutes


def quick_booking_options() -> QuickBooking:
    options: List[QuickBookingOption] = [
        QuickBookingOption(durationMinutes=d, label=f"{d} min") for d in QUICK_BOOKING_DURATIONS
    ]
    return QuickBooking(heading=QUICK_BOOKING_HEADING, prompt=QUICK_BOOKING_PROMPT, options=options)
