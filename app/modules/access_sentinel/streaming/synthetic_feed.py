"""Simulated external alert feed"""

import asyncio
import itertools
import random
import string
from datetime import datetime
from typing import Awaitable, Callable

from app.modules.access_sentinel.config import SyntheticFeedConfig
from app.modules.access_sentinel.domain.entities import Alert
from app.modules.access_sentinel.domain.enums import AlertSource, AlertType
from app.modules.access_sentinel.repositories.reference_registry import ReferenceRegistry
from app.modules.access_sentinel.streaming.severity import SeverityClassifier
from app.modules.access_sentinel.utils import DateTimeService, get_logger

logger = get_logger()


class SyntheticAlertSource:
    """Emits random alerts at irregular intervals

    All randomness comes from ``rng`` and all timestamps from ``clock``, so a
    seeded generator reproduces the exact same alerts and delays.
    """

    def __init__(
        self,
        registry: ReferenceRegistry,
        config: SyntheticFeedConfig | None = None,
        rng: random.Random | None = None,
        clock: Callable[[], datetime] = DateTimeService.utc_now,
    ):
        if len(registry.locations) < 2 or not registry.identities:
            raise ValueError("Synthetic feed needs at least two locations and one identity")
        self.registry = registry
        self.config = config or SyntheticFeedConfig()
        self.rng = rng or random.Random()
        self.clock = clock
        self._sequence = itertools.count(1)

    def next_delay(self) -> float:
        """Seconds until the next emission, in [min_delay, max_delay)"""
        low, high = self.config.min_delay_seconds, self.config.max_delay_seconds
        return low + self.rng.random() * (high - low)

    def generate(self) -> Alert:
        staff = self.rng.choice(self.registry.identities)
        origin = self.rng.choice(self.registry.locations)
        destination = self.rng.choice(self.registry.locations)
        while destination.id == origin.id:
            destination = self.rng.choice(self.registry.locations)

        alert_type = self._pick_type()
        low, high = self.config.risk_ranges[alert_type]
        risk_score = low + self.rng.random() * (high - low)

        return SeverityClassifier.compose(
            alert_id=f"WS-{next(self._sequence):06d}-{self._token(6)}",
            alert_type=alert_type,
            staff_name=staff.name,
            from_location=origin.name,
            to_location=destination.name,
            risk_score=risk_score,
            timestamp=self.clock(),
            source=AlertSource.SYNTHETIC,
        )

    async def run(self, emit: Callable[[Alert], Awaitable[None]]) -> None:
        """Emit forever; stops only through task cancellation"""
        while True:
            await asyncio.sleep(self.next_delay())
            alert = self.generate()
            logger.debug(f"Synthetic feed emitting {alert.type.value} alert {alert.id}")
            await emit(alert)

    def _pick_type(self) -> AlertType:
        weights = self.config.type_weights
        total = sum(weights.values())
        draw = self.rng.random() * total
        cumulative = 0.0
        for alert_type, weight in weights.items():
            cumulative += weight
            if draw < cumulative:
                return alert_type
        return [alert_type for alert_type, weight in weights.items() if weight > 0][-1]

    def _token(self, length: int) -> str:
        alphabet = string.ascii_lowercase + string.digits
        return "".join(self.rng.choice(alphabet) for _ in range(length))
