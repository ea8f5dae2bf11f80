"""Tests for environment-driven settings."""

import pytest
from pydantic import ValidationError

from room_display.config import Settings


class TestSettings:
    def test_defaults(self, monkeypatch):
        for name in ("DISPLAY_TIMEZONE", "ROOM_TITLE", "MAX_VISIBLE_EVENTS"):
            monkeypatch.delenv(name, raising=False)

        settings = Settings()

        assert settings.display_timezone == "Europe/Copenhagen"
        assert settings.max_visible_events == 3

    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("ROOM_TITLE", "Mødelokale 2")
        monkeypatch.setenv("ROOM_SUBTITLE", "1. sal")
        monkeypatch.setenv("RESOURCE_AVAILABLE_TEXT", "Ledig")
        monkeypatch.setenv("MAX_VISIBLE_EVENTS", "2")

        settings = Settings()
        config = settings.display_configuration()

        assert settings.max_visible_events == 2
        assert config.title == "Mødelokale 2"
        assert config.subTitle == "1. sal"
        assert config.resourceAvailableText == "Ledig"

    def test_blank_text_left_unset(self, monkeypatch):
        monkeypatch.setenv("RESOURCE_UNAVAILABLE_TEXT", "")
        assert Settings().display_configuration().resourceUnavailableText is None

    def test_visible_events_must_be_positive(self, monkeypatch):
        monkeypatch.setenv("MAX_VISIBLE_EVENTS", "0")
        with pytest.raises(ValidationError):
            Settings()

    @pytest.mark.parametrize("value", ["4", "5"])
    def test_visible_events_capped_at_three(self, monkeypatch, value):
        monkeypatch.setenv("MAX_VISIBLE_EVENTS", value)
        with pytest.raises(ValidationError):
            Settings()
