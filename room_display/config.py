"""Application configuration settings.

This module defines the ``Settings`` class using ``pydantic-settings`` to
load configuration from environment variables (and an optional ``.env``
file). It centralises all runtime configuration for the display service:
the display timezone, the default room text and the size of the visible
event window.
"""

from pydantic import Field
from pydantic_settings import BaseSettings

from .event_window import MAX_VISIBLE_EVENTS
from .models import DisplayConfiguration


class Settings(BaseSettings):
    """Configuration values loaded from environment variables.

    Environment variable names map to fields by alias. Every field has a
    default so the service starts without any configuration; the room text
    is normally overridden per device.
    """

    display_timezone: str = Field(
        default="Europe/Copenhagen",
        alias="DISPLAY_TIMEZONE",
        description="IANA timezone used for the clock, event times and the end of the day.",
    )

    # Room text
    room_title: str = Field(default="", alias="ROOM_TITLE")
    room_subtitle: str = Field(default="", alias="ROOM_SUBTITLE")
    resource_available_text: str = Field(default="", alias="RESOURCE_AVAILABLE_TEXT")
    resource_unavailable_text: str = Field(default="", alias="RESOURCE_UNAVAILABLE_TEXT")

    # Display behaviour
    max_visible_events: int = Field(
        default=3,
        ge=1,
        le=MAX_VISIBLE_EVENTS,
        alias="MAX_VISIBLE_EVENTS",
        description="Number of events listed for the rest of the day (1 to 3).",
    )
    refresh_seconds: int = Field(
        default=60,
        alias="REFRESH_SECONDS",
        description="Interval (in seconds) at which the presentation layer should re-evaluate the state.",
    )

    # Service
    enable_cors: bool = Field(default=False, alias="ENABLE_CORS")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    host: str = Field(default="127.0.0.1", alias="HOST")
    port: int = Field(default=8000, alias="PORT")

    class Config:
        extra = "ignore"
        env_file = ".env"

    def display_configuration(self) -> DisplayConfiguration:
        """Return the configured room text, leaving blank values unset."""
        return DisplayConfiguration(
            title=self.room_title,
            subTitle=self.room_subtitle or None,
            resourceAvailableText=self.resource_available_text or None,
            resourceUnavailableText=self.resource_unavailable_text or None,
        )


# Shared instance read once from the environment.
settings = Settings()
