"""Anomaly rules evaluated against the most recent access of an identity"""

from datetime import datetime, timedelta
from typing import Any, Callable

from app.modules.access_sentinel.analytics.calculators.profile_builder import BehaviorProfile
from app.modules.access_sentinel.config import BehaviorScoringConfig
from app.modules.access_sentinel.domain.entities import AccessEvent, BehaviorAnomaly
from app.modules.access_sentinel.domain.enums import AnomalySeverity, AnomalyType
from app.modules.access_sentinel.utils import DateTimeService

ANOMALY_DESCRIPTIONS = {
    AnomalyType.UNUSUAL_TIME: "Login at unusual hours for this user",
    AnomalyType.AFTER_HOURS: "Login outside normal working hours",
    AnomalyType.NEW_LOCATION: "First login from this location",
    AnomalyType.NEW_DEVICE: "Login from unrecognized device",
    AnomalyType.RAPID_LOGINS: "Multiple rapid login attempts",
    AnomalyType.LOCATION_HOPPING: "Frequent location changes",
}

# Stable per-rule suffix of anomaly ids
_RULE_NUMBERS = {
    AnomalyType.UNUSUAL_TIME: 1,
    AnomalyType.AFTER_HOURS: 2,
    AnomalyType.NEW_LOCATION: 3,
    AnomalyType.RAPID_LOGINS: 4,
    AnomalyType.LOCATION_HOPPING: 5,
    AnomalyType.NEW_DEVICE: 6,
}


class AnomalyDetector:
    def __init__(
        self,
        config: BehaviorScoringConfig | None = None,
        clock: Callable[[], datetime] = DateTimeService.utc_now,
    ):
        self.config = config or BehaviorScoringConfig()
        self.clock = clock

    def detect(
        self, identity_id: str, history: list[AccessEvent], profile: BehaviorProfile
    ) -> list[BehaviorAnomaly]:
        """Anomalies of the latest event in ``history`` (oldest first), in rule order"""
        if not history:
            return []

        latest = history[-1]
        hour = latest.timestamp.hour
        window = self._trailing_window(history, latest)
        detected_at = self.clock()

        found: list[tuple[AnomalyType, AnomalySeverity, dict[str, Any]]] = []

        usual = profile.usual_login_hours
        if hour < usual.start or hour > usual.end:
            severity = AnomalySeverity.WARNING if self._is_after_hours(hour) else AnomalySeverity.INFO
            found.append(
                (
                    AnomalyType.UNUSUAL_TIME,
                    severity,
                    {"loginHour": hour, "usualRange": {"start": usual.start, "end": usual.end}},
                )
            )

        if self._is_after_hours(hour):
            found.append((AnomalyType.AFTER_HOURS, AnomalySeverity.WARNING, {"loginHour": hour}))

        if latest.location_id not in profile.preferred_locations:
            found.append(
                (
                    AnomalyType.NEW_LOCATION,
                    AnomalySeverity.INFO,
                    {
                        "newLocation": latest.location_id,
                        "usualLocations": list(profile.preferred_locations),
                    },
                )
            )

        if self._is_new_device(latest, profile):
            found.append(
                (
                    AnomalyType.NEW_DEVICE,
                    AnomalySeverity.INFO,
                    {"newDevice": latest.device_id, "knownDevices": list(profile.preferred_devices)},
                )
            )

        time_window = f"{self.config.rapid_window_minutes:g} minutes"
        if len(window) > self.config.rapid_login_threshold:
            found.append(
                (
                    AnomalyType.RAPID_LOGINS,
                    AnomalySeverity.WARNING,
                    {"loginCount": len(window), "timeWindow": time_window},
                )
            )

        location_count = len({event.location_id for event in window})
        if location_count >= self.config.location_hopping_threshold:
            found.append(
                (
                    AnomalyType.LOCATION_HOPPING,
                    AnomalySeverity.CRITICAL,
                    {"locationCount": location_count, "timeWindow": time_window},
                )
            )

        return [
            BehaviorAnomaly(
                id=f"ANOM-{identity_id}-{_RULE_NUMBERS[anomaly_type]}",
                type=anomaly_type,
                description=ANOMALY_DESCRIPTIONS[anomaly_type],
                severity=severity,
                detected_at=detected_at,
                details=details,
            )
            for anomaly_type, severity, details in found
        ]

    def _is_after_hours(self, hour: int) -> bool:
        return hour < self.config.working_day_start_hour or hour > self.config.working_day_end_hour

    def _is_new_device(self, latest: AccessEvent, profile: BehaviorProfile) -> bool:
        if not self.config.detect_new_device or not latest.device_id:
            return False
        if profile.event_count <= self.config.new_device_min_history:
            return False
        return latest.device_id not in profile.preferred_devices

    def _trailing_window(self, history: list[AccessEvent], latest: AccessEvent) -> list[AccessEvent]:
        """Events strictly less than the window length older than the latest one"""
        window = timedelta(minutes=self.config.rapid_window_minutes)
        latest_ts = DateTimeService.to_utc_timestamp(latest.timestamp)
        return [
            event
            for event in history
            if latest_ts - DateTimeService.to_utc_timestamp(event.timestamp) < window
        ]
