"""Time formatting for the room display.

The locale and the display timezone are passed to ``TimeFormatter`` when it
is constructed; nothing here reads or changes process-wide locale state, so
two formatters for different rooms can coexist.
"""

from __future__ import annotations

import math
from datetime import datetime, tzinfo
from typing import Tuple, Union
from zoneinfo import ZoneInfo

from pydantic import BaseModel, ConfigDict

from .errors import InvalidTimestamp


class LocaleFormat(BaseModel):
    """Names and patterns for one display locale."""

    model_config = ConfigDict(frozen=True)

    name: str
    time_pattern: str
    weekdays: Tuple[str, ...]
    months: Tuple[str, ...]


DANISH = LocaleFormat(
    name="da",
    time_pattern="%H:%M",
    weekdays=("mandag", "tirsdag", "onsdag", "torsdag", "fredag", "lørdag", "søndag"),
    months=(
        "januar",
        "februar",
        "marts",
        "april",
        "maj",
        "juni",
        "juli",
        "august",
        "september",
        "oktober",
        "november",
        "december",
    ),
)


def check_timestamp(value: object) -> int:
    """Return ``value`` as whole epoch seconds or raise ``InvalidTimestamp``.

    Integral floats are accepted since JSON producers frequently emit them.
    Booleans, ``None``, NaN, infinities and fractional values are rejected.
    """
    if isinstance(value, bool) or value is None:
        raise InvalidTimestamp(f"Not a timestamp: {value!r}")
    if isinstance(value, int):
        return value
    if isinstance(value, float) and math.isfinite(value) and value.is_integer():
        return int(value)
    raise InvalidTimestamp(f"Not a finite integer timestamp: {value!r}")


class TimeFormatter:
    """Format epoch seconds and instants as local wall-clock text."""

    def __init__(self, timezone: Union[str, tzinfo], locale: LocaleFormat = DANISH):
        self.timezone = ZoneInfo(timezone) if isinstance(timezone, str) else timezone
        self.locale = locale

    def localize(self, instant: datetime) -> datetime:
        """Convert an aware ``instant`` to the display timezone."""
        to_epoch(instant)
        try:
            return instant.astimezone(self.timezone)
        except (OverflowError, ValueError) as exc:
            raise InvalidTimestamp(f"Instant out of range for display timezone: {instant!r}") from exc

    def format(self, timestamp: int) -> str:
        """Return ``HH:MM`` for ``timestamp`` seconds since the epoch."""
        seconds = check_timestamp(timestamp)
        try:
            local = datetime.fromtimestamp(seconds, tz=self.timezone)
        except (OverflowError, OSError, ValueError) as exc:
            raise InvalidTimestamp(f"Timestamp out of range: {seconds}") from exc
        return local.strftime(self.locale.time_pattern)

    def format_range(self, start: int, end: int) -> str:
        return f"{self.format(start)} - {self.format(end)}"

    def format_instant(self, instant: datetime) -> str:
        """Clock text for the header, e.g. ``09:54``."""
        return self.localize(instant).strftime(self.locale.time_pattern)

    def format_date(self, instant: datetime) -> str:
        """Header date such as ``Mandag 7. august``."""
        local = self.localize(instant)
        weekday = self.locale.weekdays[local.weekday()].capitalize()
        month = self.locale.months[local.month - 1]
        return f"{weekday} {local.day}. {month}"


def to_epoch(instant: datetime) -> float:
    """Seconds since the epoch for an aware ``instant``."""
    if instant.tzinfo is None or instant.utcoffset() is None:
        raise InvalidTimestamp(f"Instant must be timezone-aware: {instant!r}")
    return instant.timestamp()


def end_of_day(instant: datetime) -> int:
    """Epoch seconds of the last whole second of ``instant``'s local day."""
    to_epoch(instant)
    return int(instant.replace(hour=23, minute=59, second=59, microsecond=0).timestamp())
