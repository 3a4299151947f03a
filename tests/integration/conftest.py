from __future__ import annotations

import os
from datetime import datetime, timedelta, timezone

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

os.environ.setdefault("ENVIRONMENT", "test")

START = datetime(2024, 3, 4, 10, 0, tzinfo=timezone.utc)


def _access_log():
    from app.modules.access_sentinel.domain import AccessEvent

    rows = [
        ("A1", "1", "icu", 0),
        ("A2", "1", "pharmacy", 0.5),
        ("B1", "2", "icu", 0),
        ("B2", "2", "pharmacy", 1),
        ("C1", "3", "emergency", 0),
        ("C2", "3", "radiology", 60),
    ]
    return [
        AccessEvent(
            id=event_id,
            identity_id=identity_id,
            location_id=location_id,
            timestamp=START + timedelta(minutes=minutes),
        )
        for event_id, identity_id, location_id, minutes in rows
    ]


@pytest.fixture(scope="session")
def app_instance():
    """Import the FastAPI app once for the session."""
    from app.main import app  # type: ignore

    yield app


@pytest.fixture
def sentinel(app_instance):
    """Fresh container over a fixed access log, without the synthetic feed."""
    from app.modules.access_sentinel import build_container
    from app.modules.access_sentinel.config import AlertStreamConfig
    from app.modules.access_sentinel.repositories import InMemoryAccessEventRepository

    previous = app_instance.state.container
    container = build_container(
        event_repository=InMemoryAccessEventRepository(_access_log()),
        stream_config=AlertStreamConfig(feed_enabled=False),
        clock=lambda: START + timedelta(hours=2),
    )
    app_instance.state.container = container
    yield container
    app_instance.state.container = previous


@pytest_asyncio.fixture
async def client(app_instance, sentinel):
    """HTTP client bound to the ASGI app."""
    transport = ASGITransport(app=app_instance)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
