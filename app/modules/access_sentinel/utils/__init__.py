"""
utils package - Clean architecture utilities
-------------------------------------------
Organized by single responsibility principle
"""

from app.modules.access_sentinel.utils.constants import (
    ALERT_BUFFER_CAPACITY,
    BUILDING_CHANGE_MINUTES,
    DEFAULT_LOGIN_HOURS,
    FLOOR_CHANGE_MINUTES,
    MAX_PAIR_GAP_MINUTES,
    TOP_PREFERENCES,
    WALKING_SPEED_M_PER_MIN,
)
from app.modules.access_sentinel.utils.datetime import DateTimeService
from app.modules.access_sentinel.utils.logging import (
    get_logger,
    configure_logging,
    LogLevel,
)


def clamp_score(value: float, low: float = 0.0, high: float = 100.0) -> float:
    return max(low, min(high, value))


__all__ = [
    "ALERT_BUFFER_CAPACITY",
    "BUILDING_CHANGE_MINUTES",
    "DEFAULT_LOGIN_HOURS",
    "FLOOR_CHANGE_MINUTES",
    "MAX_PAIR_GAP_MINUTES",
    "TOP_PREFERENCES",
    "WALKING_SPEED_M_PER_MIN",
    "DateTimeService",
    "get_logger",
    "configure_logging",
    "LogLevel",
    "clamp_score",
]
