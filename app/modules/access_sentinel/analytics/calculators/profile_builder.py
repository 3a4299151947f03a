"""Per-identity access profile"""

import math
from collections import Counter
from dataclasses import dataclass
from datetime import datetime

import pandas as pd

from app.modules.access_sentinel.config import BehaviorScoringConfig
from app.modules.access_sentinel.domain.entities import AccessEvent, LoginHours
from app.modules.access_sentinel.domain.enums import LoginFrequency
from app.modules.access_sentinel.utils import DEFAULT_LOGIN_HOURS, TOP_PREFERENCES


@dataclass(frozen=True)
class BehaviorProfile:
    usual_login_hours: LoginHours
    average_logins_per_day: float
    preferred_locations: list[str]
    preferred_devices: list[str]
    login_frequency: LoginFrequency
    event_count: int
    last_activity: datetime | None


class BehaviorProfileBuilder:
    """Builds the statistical profile of one identity from its chronological history"""

    def __init__(self, config: BehaviorScoringConfig | None = None):
        self.config = config or BehaviorScoringConfig()

    def build(self, history: list[AccessEvent]) -> BehaviorProfile:
        """``history`` must be ordered oldest first"""
        if not history:
            return self._empty_profile()

        return BehaviorProfile(
            usual_login_hours=self._usual_login_hours(history),
            average_logins_per_day=self._average_logins_per_day(history),
            preferred_locations=self._top(event.location_id for event in history),
            preferred_devices=self._top(event.device_id for event in history if event.device_id),
            login_frequency=self._login_frequency(len(history)),
            event_count=len(history),
            last_activity=history[-1].timestamp,
        )

    def _empty_profile(self) -> BehaviorProfile:
        start, end = DEFAULT_LOGIN_HOURS
        return BehaviorProfile(
            usual_login_hours=LoginHours(start=start, end=end),
            average_logins_per_day=0.0,
            preferred_locations=[],
            preferred_devices=[],
            login_frequency=LoginFrequency.SPORADIC,
            event_count=0,
            last_activity=None,
        )

    def _usual_login_hours(self, history: list[AccessEvent]) -> LoginHours:
        hours = pd.Series([event.timestamp.hour for event in history], dtype=float)
        avg_hour = float(hours.mean())
        margin = self.config.login_hours_margin
        return LoginHours(
            start=max(self.config.working_day_start_hour, math.floor(avg_hour - margin)),
            end=min(self.config.working_day_end_hour, math.floor(avg_hour + margin)),
        )

    @staticmethod
    def _average_logins_per_day(history: list[AccessEvent]) -> float:
        active_days = pd.Series([event.timestamp.date() for event in history]).nunique()
        return len(history) / active_days

    @staticmethod
    def _top(values) -> list[str]:
        """Most frequent values; ties keep first appearance"""
        return [value for value, _ in Counter(values).most_common(TOP_PREFERENCES)]

    def _login_frequency(self, count: int) -> LoginFrequency:
        if count > self.config.heavy_frequency_threshold:
            return LoginFrequency.HEAVY
        if count > self.config.regular_frequency_threshold:
            return LoginFrequency.REGULAR
        return LoginFrequency.SPORADIC
