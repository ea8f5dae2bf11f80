"""Exception types raised by the room display core.

Only ``InvalidEventCollection`` ever reaches the caller of ``evaluate``;
the per-record errors are raised while validating single events and are
caught by the evaluator, which logs and skips the offending record.
"""


class RoomDisplayError(Exception):
    pass


class InvalidTimestamp(RoomDisplayError, ValueError):
    """A timestamp is missing where required or is not a finite integer."""


class MalformedEvent(RoomDisplayError, ValueError):
    """A calendar record is structurally invalid (no id, no start, etc.)."""


class InvalidEventCollection(RoomDisplayError, TypeError):
    """The event input is not a sequence of records at all."""


class InvalidBookingDuration(RoomDisplayError, ValueError):
    pass
