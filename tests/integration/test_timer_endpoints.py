"""Integration tests for timer endpoints."""
import pytest
from datetime import datetime


@pytest.mark.asyncio
class TestTimerStart:
    """Tests for starting a timer."""

    async def test_start_timer_success(self, app_client):
        """Test starting a timer successfully."""
        response = await app_client.post("/timers/start", json={"notes": "Welding frame"})

        assert response.status_code == 200
        data = response.json()
        assert data["start"] == "2024-03-20T12:00:00"
        assert data["end"] == ""
        assert data["notes"] == "Welding frame"

    async def test_start_timer_without_body(self, app_client):
        """Test starting a timer with no request body."""
        response = await app_client.post("/timers/start")

        assert response.status_code == 200
        assert response.json()["notes"] is None

    async def test_start_timer_with_running_timer(self, app_client):
        """Test starting timer when one is already running fails."""
        await app_client.post("/timers/start", json={})

        response = await app_client.post("/timers/start", json={})

        assert response.status_code == 409
        assert "already running" in response.json()["detail"].lower()


@pytest.mark.asyncio
class TestTimerStop:
    """Tests for stopping a timer."""

    async def test_stop_timer_success(self, app_client, clock):
        """Test stopping a running timer stores one closed entry."""
        start_response = await app_client.post("/timers/start", json={})
        entry_id = start_response.json()["id"]

        clock.now = datetime(2024, 3, 20, 14, 30)
        response = await app_client.post("/timers/stop")

        assert response.status_code == 200
        data = response.json()
        assert data["id"] == entry_id
        assert data["end"] == "2024-03-20T14:30:00"

        entries = (await app_client.get("/entries")).json()
        assert [e["id"] for e in entries] == [entry_id]

    async def test_stop_timer_no_running_timer(self, app_client):
        """Test stopping timer when none is running fails."""
        response = await app_client.post("/timers/stop")

        assert response.status_code == 400
        assert "no timer running" in response.json()["detail"].lower()


@pytest.mark.asyncio
class TestTimerCurrent:
    """Tests for the current timer."""

    async def test_get_current_timer(self, app_client, clock):
        """Test elapsed time of the running timer follows the clock."""
        await app_client.post("/timers/start", json={})

        clock.now = datetime(2024, 3, 20, 13, 45, 30)
        response = await app_client.get("/timers/current")

        assert response.status_code == 200
        data = response.json()
        assert data["hours"] == 1
        assert data["minutes"] == 45
        assert data["elapsed_hours"] == pytest.approx(1.7583, abs=1e-3)
        assert data["entry"]["end"] == ""

    async def test_get_current_timer_none(self, app_client):
        """Test 404 when nothing is running."""
        response = await app_client.get("/timers/current")

        assert response.status_code == 404

    async def test_unreadable_session_can_be_restarted(self, app_client, store):
        """Test a malformed stored session reads as idle and start recovers."""
        store.set("active_session", {"id": "x", "start": "garbage", "end": ""})

        current = await app_client.get("/timers/current")
        started = await app_client.post("/timers/start", json={})

        assert current.status_code == 404
        assert started.status_code == 200
        assert store.get("active_session")["start"] == "2024-03-20T12:00:00"
