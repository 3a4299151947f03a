import os
from datetime import datetime, timedelta, timezone

import pytest

# Set environment variables for testing before any imports
os.environ.update({
    "ENVIRONMENT": "test",
    "LOG_LEVEL": "DEBUG",
})

from app.modules.access_sentinel.domain import AccessEvent  # noqa: E402
from app.modules.access_sentinel.repositories import ReferenceRegistry  # noqa: E402

BASE_TIME = datetime(2024, 3, 4, 10, 0, tzinfo=timezone.utc)


def fixed_clock(moment: datetime = BASE_TIME):
    return lambda: moment


@pytest.fixture
def registry():
    """Default hospital catalog."""
    return ReferenceRegistry.default()


@pytest.fixture
def clock():
    return fixed_clock()


@pytest.fixture
def make_event():
    """Factory for access events relative to BASE_TIME."""
    counter = {"n": 0}

    def _make(
        identity_id: str,
        location_id: str,
        minutes: float = 0,
        event_id: str | None = None,
        device_id: str = "",
        base: datetime = BASE_TIME,
    ) -> AccessEvent:
        counter["n"] += 1
        return AccessEvent(
            id=event_id or f"E{counter['n']}",
            identity_id=identity_id,
            location_id=location_id,
            timestamp=base + timedelta(minutes=minutes),
            device_id=device_id,
        )

    return _make


@pytest.fixture
def base_time():
    return BASE_TIME
