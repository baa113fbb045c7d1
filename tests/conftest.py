"""Pytest configuration and fixtures."""
from datetime import datetime

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

from worklog.database import InMemoryRecordStore
from worklog.main import app
from worklog.utils.clock import get_now


class FrozenClock:
    """Settable stand-in for the live clock."""

    def __init__(self, now: datetime):
        self.now = now

    def __call__(self) -> datetime:
        return self.now


@pytest.fixture
def store():
    """Empty in-memory record store."""
    return InMemoryRecordStore()


@pytest.fixture
def clock():
    """Clock frozen at 2024-03-20 12:00, movable by assigning clock.now."""
    return FrozenClock(datetime(2024, 3, 20, 12, 0))


@pytest_asyncio.fixture
async def app_client(store, clock):
    """
    Create a test client over an in-memory store.

    This fixture:
    - Points the database dependency at a fresh in-memory store
    - Freezes "now" to the clock fixture
    - Yields an async HTTP client for testing
    """
    from worklog.database import database

    original_store = database.store
    database.store = store
    app.dependency_overrides[get_now] = clock

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test"
    ) as client:
        yield client

    app.dependency_overrides.clear()
    database.store = original_store
