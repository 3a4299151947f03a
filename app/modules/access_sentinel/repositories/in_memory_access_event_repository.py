"""In-memory implementation of the access event repository"""

from datetime import datetime
from typing import Iterable

from app.modules.access_sentinel.domain.entities import AccessEvent
from app.modules.access_sentinel.repositories.access_event_repository import (
    AccessEventRepository,
    filter_by_period,
)


class InMemoryAccessEventRepository(AccessEventRepository):
    """Events supplied by the caller, kept in insertion order"""

    def __init__(self, events: Iterable[AccessEvent] | None = None):
        self._events = list(events or [])

    def add(self, *events: AccessEvent) -> None:
        self._events.extend(events)

    def replace(self, events: Iterable[AccessEvent]) -> None:
        self._events = list(events)

    def find_events(
        self, start: datetime | None = None, end: datetime | None = None
    ) -> list[AccessEvent]:
        return filter_by_period(self._events, start, end)

    def test_connection(self) -> bool:
        return True
