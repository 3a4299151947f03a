"""Domain entities for badge access anomaly detection"""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from app.modules.access_sentinel.domain.enums import (
    AlertSource,
    AlertType,
    AnomalySeverity,
    AnomalyType,
    LoginFrequency,
    RiskLevel,
    TravelStatus,
)


class SentinelModel(BaseModel):
    """Immutable model serialized with camelCase field names"""

    model_config = ConfigDict(
        frozen=True, alias_generator=to_camel, populate_by_name=True
    )


class Coordinates(SentinelModel):
    lat: float = Field(ge=-90, le=90)
    lng: float = Field(ge=-180, le=180)


class Location(SentinelModel):
    """Access point inside the facility"""

    id: str
    name: str
    coordinates: Coordinates
    floor: int
    building: str


class Identity(SentinelModel):
    """Badge holder"""

    id: str
    name: str
    role: str
    department: str
    badge_id: str


class AccessEvent(SentinelModel):
    """Single badge presentation at a location"""

    id: str
    identity_id: str
    location_id: str
    timestamp: datetime
    device_id: str = ""
    source_address: str = ""


class TravelAnalysis(SentinelModel):
    """Feasibility verdict for two consecutive accesses of one identity"""

    id: str
    staff_id: str
    staff_name: str
    from_location: str
    to_location: str
    from_location_id: str
    to_location_id: str
    from_time: datetime
    to_time: datetime
    time_gap_minutes: float
    distance_meters: float
    required_time_minutes: float
    speed_kmh: float
    status: TravelStatus
    risk_score: float = Field(ge=0, le=100)
    reason: str


class LoginHours(SentinelModel):
    start: int
    end: int


class BehaviorAnomaly(SentinelModel):
    id: str
    type: AnomalyType
    description: str
    severity: AnomalySeverity
    detected_at: datetime
    details: dict[str, Any] = Field(default_factory=dict)


class BehaviorPattern(SentinelModel):
    """Learned usage profile of one identity plus anomalies of its latest access"""

    staff_id: str
    staff_name: str
    usual_login_hours: LoginHours
    average_logins_per_day: float
    preferred_locations: list[str]
    preferred_devices: list[str]
    login_frequency: LoginFrequency
    anomalies: list[BehaviorAnomaly]
    risk_level: RiskLevel
    behavior_score: float = Field(ge=0, le=100)
    last_activity: datetime | None = None


class BehaviorSummary(SentinelModel):
    total_anomalies: int
    critical_count: int
    warning_count: int
    info_count: int
    average_score: float
    anomaly_types: dict[str, int]
    high_risk_users: int
    medium_risk_users: int
    low_risk_users: int


class Alert(SentinelModel):
    """Entry of the live alert feed"""

    id: str
    type: AlertType
    title: str
    message: str
    staff_name: str
    from_location: str
    to_location: str
    risk_score: float = Field(ge=0, le=100)
    timestamp: datetime
    read: bool = False
    source: AlertSource = AlertSource.TRAVEL_ANALYSIS
    analysis_id: str | None = None
