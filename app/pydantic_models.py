# -*- coding: utf-8 -*-
from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from app.modules.access_sentinel.domain import Alert, AlertType, ConnectionStatus


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class HealthCheck(BaseModel):
    status: str


class TravelStatisticsOut(CamelModel):
    total: int
    safe: int
    suspicious: int
    impossible: int
    flagged: int
    flagged_ratio: float
    event_count: int
    generation: int
    computed_at: Optional[datetime]


class AlertFeedOut(CamelModel):
    alerts: List[Alert]
    unread_count: int
    status: ConnectionStatus
    capacity: int


class MarkAllReadOut(CamelModel):
    updated: int


class AlertTriggerIn(CamelModel):
    type: AlertType = AlertType.FRAUD


class ThresholdsUpdateIn(CamelModel):
    """Partial update; range checks happen in the settings manager"""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="forbid")

    impossible_travel_ratio: Optional[float] = None
    suspicious_travel_ratio: Optional[float] = None
    max_human_speed_kmh: Optional[float] = None
    high_risk_score_threshold: Optional[float] = None
    medium_risk_score_threshold: Optional[float] = None


class NotificationsUpdateIn(CamelModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="forbid")

    enable_alerts: Optional[bool] = None
    alert_on_impossible: Optional[bool] = None
    alert_on_suspicious: Optional[bool] = None
    auto_refresh_interval: Optional[int] = None


class RefreshOut(CamelModel):
    generation: int
    computed_at: Optional[datetime]
    event_count: int
    analysis_count: int
    unread_alerts: int
