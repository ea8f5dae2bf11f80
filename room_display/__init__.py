# Package initializer for the room display service.

"""
The `room_display` package derives the state of a single meeting-room display.

Modules:

- ``config``: application settings loaded from environment variables.
- ``models``: Pydantic models for calendar events and the derived state.
- ``errors``: exception types for invalid timestamps and records.
- ``time_format``: locale-aware ``HH:MM`` and header date formatting.
- ``availability``: free/occupied resolution.
- ``event_window``: selection of the events shown for the rest of the day.
- ``status``: projection of the availability flag into display text.
- ``booking``: quick-booking triggers.
- ``evaluation``: boundary validation and the per-instant evaluation.
- ``main``: the FastAPI application definition.

"""
