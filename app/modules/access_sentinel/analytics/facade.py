"""Behavioral pattern engine - composes the behavior calculators"""

from datetime import datetime
from typing import Callable

import pandas as pd

from app.modules.access_sentinel.analytics.calculators.anomaly_detector import AnomalyDetector
from app.modules.access_sentinel.analytics.calculators.behavior_scorer import BehaviorScorer
from app.modules.access_sentinel.analytics.calculators.profile_builder import (
    BehaviorProfileBuilder,
)
from app.modules.access_sentinel.analytics.calculators.summary_calculator import (
    SummaryCalculator,
)
from app.modules.access_sentinel.config import BehaviorScoringConfig
from app.modules.access_sentinel.domain.entities import (
    AccessEvent,
    BehaviorPattern,
    BehaviorSummary,
)
from app.modules.access_sentinel.repositories.access_event_repository import AccessEventMapper
from app.modules.access_sentinel.repositories.reference_registry import ReferenceRegistry
from app.modules.access_sentinel.utils import DateTimeService, get_logger

logger = get_logger()


class BehaviorPatternEngine:
    """Learns a profile per identity and flags anomalies of its latest access"""

    def __init__(
        self,
        registry: ReferenceRegistry,
        config: BehaviorScoringConfig | None = None,
        clock: Callable[[], datetime] = DateTimeService.utc_now,
    ):
        self.registry = registry
        self.config = config or BehaviorScoringConfig()
        self.profile_builder = BehaviorProfileBuilder(self.config)
        self.anomaly_detector = AnomalyDetector(self.config, clock)

    def analyze(self, identity_id: str, events: list[AccessEvent]) -> BehaviorPattern:
        """Pattern of one identity; events of other identities are ignored"""
        own_events = [event for event in events if event.identity_id == identity_id]
        history = self._group_histories(own_events).get(identity_id, [])
        return self._build_pattern(identity_id, history)

    def analyze_all(self, events: list[AccessEvent]) -> list[BehaviorPattern]:
        """One pattern per registry identity, then per identity only seen in events"""
        histories = self._group_histories(events)
        identity_ids = [identity.id for identity in self.registry.identities]
        seen_ids = dict.fromkeys(event.identity_id for event in events)
        identity_ids += [key for key in seen_ids if self.registry.get_identity(key) is None]

        patterns = [
            self._build_pattern(identity_id, histories.get(identity_id, []))
            for identity_id in identity_ids
        ]
        logger.debug(f"Built {len(patterns)} behavior patterns from {len(events)} events")
        return patterns

    @staticmethod
    def summarize(patterns: list[BehaviorPattern]) -> BehaviorSummary:
        return SummaryCalculator.summarize(patterns)

    def _build_pattern(self, identity_id: str, history: list[AccessEvent]) -> BehaviorPattern:
        profile = self.profile_builder.build(history)
        anomalies = self.anomaly_detector.detect(identity_id, history, profile)
        score = BehaviorScorer.score(profile, anomalies, self.config)

        return BehaviorPattern(
            staff_id=identity_id,
            staff_name=self.registry.identity_name(identity_id),
            usual_login_hours=profile.usual_login_hours,
            average_logins_per_day=profile.average_logins_per_day,
            preferred_locations=profile.preferred_locations,
            preferred_devices=profile.preferred_devices,
            login_frequency=profile.login_frequency,
            anomalies=anomalies,
            risk_level=BehaviorScorer.risk_level(score, self.config),
            behavior_score=score,
            last_activity=profile.last_activity,
        )

    @staticmethod
    def _group_histories(events: list[AccessEvent]) -> dict[str, list[AccessEvent]]:
        """Per identity histories, oldest first

        Among equal timestamps the earliest input event is placed last, so it
        is the one treated as the latest access.
        """
        if not events:
            return {}

        df = AccessEventMapper.events_to_dataframe(events)
        df = df.sort_values(["timestamp_utc", "position"], ascending=[True, False])

        histories = {}
        for identity_id, group in df.groupby("identity_id", sort=False):
            histories[identity_id] = [events[position] for position in group["position"]]
        return histories
