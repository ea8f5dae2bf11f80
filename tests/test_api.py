"""Tests for the FastAPI service."""

from unittest.mock import Mock

import pytest
from fastapi.testclient import TestClient

from room_display.main import app

pytestmark = pytest.mark.api


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def booking_hook():
    """Install a mock booking hook for the duration of a test."""
    original = app.state.booking_hook
    hook = Mock()
    app.state.booking_hook = hook
    yield hook
    app.state.booking_hook = original


class TestStateEndpoint:
    """Tests for POST /api/state."""

    def test_empty_events_free(self, client, ts):
        resp = client.post("/api/state", json={"events": [], "now": ts})

        assert resp.status_code == 200
        data = resp.json()
        assert data["header"]["status"]["styleClass"] == "free"
        assert data["events"] == []
        assert data["quickBooking"]["options"][0] == {"durationMinutes": 15, "label": "15 min"}

    def test_occupied_with_content_override(self, client, ts):
        body = {
            "events": [{"id": "a", "title": "Standup", "startTime": ts - 600, "endTime": ts + 600}],
            "now": ts,
            "content": {"title": "Mødelokale 1", "resourceUnavailableText": "Optaget nu"},
        }

        data = client.post("/api/state", json=body).json()

        assert data["header"]["title"] == "Mødelokale 1"
        assert data["header"]["status"] == {"label": "Optaget nu", "styleClass": "occupied"}
        assert data["header"]["timeText"] == "09:54"
        assert data["quickBooking"] is None
        assert data["events"] == [
            {"id": "a", "title": "Standup", "timeRange": "09:44 - 10:04", "itemClass": "single--now"}
        ]

    def test_bad_records_skipped(self, client, ts):
        body = {"events": [{"title": "no id"}, {"id": "b", "startTime": ts, "endTime": ts + 60}], "now": ts}

        data = client.post("/api/state", json=body).json()

        assert data["skippedEvents"] == 1
        assert [e["id"] for e in data["events"]] == ["b"]

    def test_events_not_a_list_rejected(self, client, ts):
        resp = client.post("/api/state", json={"events": {"id": "a"}, "now": ts})
        assert resp.status_code == 422

    def test_now_defaults_to_server_clock(self, client):
        resp = client.post("/api/state", json={"events": []})
        assert resp.status_code == 200
        assert resp.json()["evaluatedAt"]

    def test_out_of_range_now_rejected(self, client):
        resp = client.post("/api/state", json={"events": [], "now": 10**20})
        assert resp.status_code == 422

    def test_now_overflowing_display_timezone_rejected(self, client):
        resp = client.post("/api/state", json={"events": [], "now": 253402300000})
        assert resp.status_code == 422

    def test_visible_events_capped_at_three(self, client, ts):
        records = [{"id": str(i), "startTime": ts, "endTime": ts + 600 + i} for i in range(5)]
        data = client.post("/api/state", json={"events": records, "now": ts}).json()
        assert [e["id"] for e in data["events"]] == ["0", "1", "2"]


class TestBookingEndpoint:
    """Tests for POST /api/booking."""

    def test_accepted(self, client, booking_hook):
        resp = client.post("/api/booking", json={"durationMinutes": 30})

        assert resp.status_code == 202
        assert resp.json() == {"accepted": True, "durationMinutes": 30}
        booking_hook.assert_called_once_with(30)

    def test_unsupported_duration(self, client, booking_hook):
        resp = client.post("/api/booking", json={"durationMinutes": 45})

        assert resp.status_code == 422
        booking_hook.assert_not_called()


def test_healthz(client):
    data = client.get("/healthz").json()
    assert data["ok"] is True
    assert data["time"].endswith("Z")
