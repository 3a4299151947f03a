"""Configuration models for the Access Sentinel detection system

Every tunable number of the analyzers lives here. Values users can change at
runtime (``DetectionThresholds`` and ``NotificationSettings``) carry explicit
bounds; anything outside them is rejected when the model is built.
"""

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel

from app.modules.access_sentinel.domain.enums import AlertType
from app.modules.access_sentinel.utils.constants import (
    ALERT_BUFFER_CAPACITY,
    BUILDING_CHANGE_MINUTES,
    FLOOR_CHANGE_MINUTES,
    MAX_PAIR_GAP_MINUTES,
    WALKING_SPEED_M_PER_MIN,
)


class _ConfigModel(BaseModel):
    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
        extra="forbid",
        allow_inf_nan=False,
    )


class DetectionThresholds(_ConfigModel):
    """Runtime adjustable detection thresholds"""

    impossible_travel_ratio: float = Field(0.3, ge=0.1, le=0.5)
    suspicious_travel_ratio: float = Field(0.7, ge=0.4, le=0.9)
    max_human_speed_kmh: float = Field(25.0, ge=15, le=40)
    high_risk_score_threshold: float = Field(80.0, ge=60, le=95)
    medium_risk_score_threshold: float = Field(50.0, ge=30, le=70)

    @model_validator(mode="after")
    def _check_ordering(self) -> "DetectionThresholds":
        if self.impossible_travel_ratio >= self.suspicious_travel_ratio:
            raise ValueError(
                "impossible_travel_ratio must be lower than suspicious_travel_ratio"
            )
        if self.medium_risk_score_threshold >= self.high_risk_score_threshold:
            raise ValueError(
                "medium_risk_score_threshold must be lower than high_risk_score_threshold"
            )
        return self


class NotificationSettings(_ConfigModel):
    enable_alerts: bool = True
    alert_on_impossible: bool = True
    alert_on_suspicious: bool = True
    auto_refresh_interval: int = Field(30, ge=10, le=120)


class SentinelSettings(_ConfigModel):
    """Persisted settings document"""

    thresholds: DetectionThresholds = Field(default_factory=DetectionThresholds)
    notifications: NotificationSettings = Field(default_factory=NotificationSettings)


class TravelTimeModel(_ConfigModel):
    """Minimum travel time model between two access points"""

    walking_speed_m_per_min: float = Field(WALKING_SPEED_M_PER_MIN, gt=0)
    floor_change_minutes: float = Field(FLOOR_CHANGE_MINUTES, ge=0)
    building_change_minutes: float = Field(BUILDING_CHANGE_MINUTES, ge=0)
    max_pair_gap_minutes: float = Field(MAX_PAIR_GAP_MINUTES, gt=0)


class BehaviorScoringConfig(_ConfigModel):
    """Anomaly rules and behavior score weights"""

    critical_penalty: float = 25
    warning_penalty: float = 10
    info_penalty: float = 5
    regular_frequency_bonus: float = 5
    preferred_locations_bonus: float = 5

    low_risk_min_score: float = Field(80, ge=0, le=100)
    medium_risk_min_score: float = Field(50, ge=0, le=100)

    heavy_frequency_threshold: int = Field(20, ge=1)
    regular_frequency_threshold: int = Field(5, ge=0)
    login_hours_margin: int = Field(4, ge=0, le=12)

    working_day_start_hour: int = Field(6, ge=0, le=23)
    working_day_end_hour: int = Field(22, ge=0, le=23)

    rapid_window_minutes: float = Field(5, gt=0)
    rapid_login_threshold: int = Field(3, ge=1)
    location_hopping_threshold: int = Field(3, ge=2)

    detect_new_device: bool = False
    new_device_min_history: int = Field(3, ge=0)

    @model_validator(mode="after")
    def _check_ordering(self) -> "BehaviorScoringConfig":
        if self.medium_risk_min_score > self.low_risk_min_score:
            raise ValueError("medium_risk_min_score must not exceed low_risk_min_score")
        if self.regular_frequency_threshold > self.heavy_frequency_threshold:
            raise ValueError(
                "regular_frequency_threshold must not exceed heavy_frequency_threshold"
            )
        if self.working_day_start_hour > self.working_day_end_hour:
            raise ValueError("working_day_start_hour must not exceed working_day_end_hour")
        return self


class SyntheticFeedConfig(_ConfigModel):
    """Simulated external alert feed"""

    min_delay_seconds: float = Field(15.0, gt=0)
    max_delay_seconds: float = Field(45.0, gt=0)
    type_weights: dict[AlertType, float] = Field(
        default_factory=lambda: {
            AlertType.FRAUD: 0.2,
            AlertType.SUSPICIOUS: 0.4,
            AlertType.INFO: 0.4,
        }
    )
    risk_ranges: dict[AlertType, tuple[float, float]] = Field(
        default_factory=lambda: {
            AlertType.FRAUD: (85.0, 100.0),
            AlertType.SUSPICIOUS: (50.0, 85.0),
            AlertType.INFO: (10.0, 40.0),
        }
    )

    @model_validator(mode="after")
    def _check_ranges(self) -> "SyntheticFeedConfig":
        if self.max_delay_seconds < self.min_delay_seconds:
            raise ValueError("max_delay_seconds must not be lower than min_delay_seconds")
        if any(weight < 0 for weight in self.type_weights.values()):
            raise ValueError("type weights must be non-negative")
        if sum(self.type_weights.values()) <= 0:
            raise ValueError("at least one type weight must be positive")
        for alert_type in self.type_weights:
            if alert_type not in self.risk_ranges:
                raise ValueError(f"missing risk range for {alert_type.value}")
        for low, high in self.risk_ranges.values():
            if not 0 <= low <= high <= 100:
                raise ValueError("risk ranges must satisfy 0 <= low <= high <= 100")
        return self


class AlertStreamConfig(_ConfigModel):
    capacity: int = Field(ALERT_BUFFER_CAPACITY, ge=1)
    feed_enabled: bool = True
    feed: SyntheticFeedConfig = Field(default_factory=SyntheticFeedConfig)
