"""Synthetic access log generator used for demos and local development"""

import random
import string
from datetime import datetime, timedelta
from typing import Callable

from app.modules.access_sentinel.domain.entities import AccessEvent
from app.modules.access_sentinel.repositories.access_event_repository import (
    AccessEventRepository,
    filter_by_period,
)
from app.modules.access_sentinel.repositories.reference_registry import ReferenceRegistry
from app.modules.access_sentinel.utils import DateTimeService, get_logger

logger = get_logger()

SHIFT_START_HOUR = 6
SHIFT_LENGTH_MINUTES = 720

# (event id, identity index, location id, minutes before now, device id, source address)
SUSPICIOUS_SCENARIOS = (
    ("LOG-SUSP-001", 0, "icu", 5, "DEV-ICU001", "192.168.1.50"),
    ("LOG-SUSP-002", 0, "pharmacy", 4, "DEV-PHARM01", "192.168.2.100"),
    ("LOG-SUSP-003", 2, "emergency", 10, "DEV-EMR001", "192.168.3.25"),
    ("LOG-SUSP-004", 2, "cardiology", 8, "DEV-CARD01", "192.168.5.80"),
)


class SyntheticAccessEventRepository(AccessEventRepository):
    """Random badge accesses over a 12 hour shift plus injected impossible journeys

    Every call to ``find_events`` draws a fresh batch from the injected
    random generator, so a seeded generator yields a repeatable sequence of
    batches.
    """

    def __init__(
        self,
        registry: ReferenceRegistry,
        count: int = 60,
        rng: random.Random | None = None,
        clock: Callable[[], datetime] = DateTimeService.utc_now,
        include_scenarios: bool = True,
    ):
        if count < 0:
            raise ValueError("count must be non-negative")
        self.registry = registry
        self.count = count
        self.rng = rng or random.Random()
        self.clock = clock
        self.include_scenarios = include_scenarios

    def find_events(
        self, start: datetime | None = None, end: datetime | None = None
    ) -> list[AccessEvent]:
        events = self.generate()
        logger.debug(f"Generated {len(events)} synthetic access events")
        return filter_by_period(events, start, end)

    def test_connection(self) -> bool:
        return bool(self.registry.identities and self.registry.locations)

    def generate(self) -> list[AccessEvent]:
        """Draw one batch, newest first"""
        now = self.clock()
        shift_start = now.replace(hour=SHIFT_START_HOUR, minute=0, second=0, microsecond=0)

        events = [self._random_event(i, shift_start) for i in range(self.count)]
        if self.include_scenarios:
            events.extend(self._scenario_events(now))
        return sorted(events, key=lambda event: event.timestamp, reverse=True)

    def _random_event(self, index: int, shift_start: datetime) -> AccessEvent:
        identity = self.rng.choice(self.registry.identities)
        location = self.rng.choice(self.registry.locations)
        offset = self.rng.randrange(SHIFT_LENGTH_MINUTES)
        return AccessEvent(
            id=f"LOG-{index + 1:04d}",
            identity_id=identity.id,
            location_id=location.id,
            timestamp=shift_start + timedelta(minutes=offset),
            device_id=f"DEV-{self._random_token(6)}",
            source_address=f"192.168.{self.rng.randrange(255)}.{self.rng.randrange(255)}",
        )

    def _scenario_events(self, now: datetime) -> list[AccessEvent]:
        identities = self.registry.identities
        events = []
        for event_id, identity_index, location_id, minutes_ago, device_id, address in SUSPICIOUS_SCENARIOS:
            if identity_index >= len(identities) or self.registry.get_location(location_id) is None:
                continue
            events.append(
                AccessEvent(
                    id=event_id,
                    identity_id=identities[identity_index].id,
                    location_id=location_id,
                    timestamp=now - timedelta(minutes=minutes_ago),
                    device_id=device_id,
                    source_address=address,
                )
            )
        return events

    def _random_token(self, length: int) -> str:
        alphabet = string.ascii_uppercase + string.digits
        return "".join(self.rng.choice(alphabet) for _ in range(length))
