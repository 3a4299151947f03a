"""Domain entities and business errors"""

from .entities import (
    AccessEvent,
    Alert,
    BehaviorAnomaly,
    BehaviorPattern,
    BehaviorSummary,
    Coordinates,
    Identity,
    Location,
    LoginHours,
    TravelAnalysis,
)
from .enums import (
    AlertSource,
    AlertType,
    AnomalySeverity,
    AnomalyType,
    ConnectionStatus,
    LoginFrequency,
    RiskLevel,
    TravelStatus,
)
from .exceptions import (
    AccessSentinelError,
    ConfigOutOfRangeError,
    EventSourceError,
    InvalidIntervalError,
    ReferenceDataMissingError,
)

__all__ = [
    'AccessEvent', 'Alert', 'BehaviorAnomaly', 'BehaviorPattern', 'BehaviorSummary',
    'Coordinates', 'Identity', 'Location', 'LoginHours', 'TravelAnalysis',
    'AlertSource', 'AlertType', 'AnomalySeverity', 'AnomalyType', 'ConnectionStatus',
    'LoginFrequency', 'RiskLevel', 'TravelStatus',
    'AccessSentinelError', 'ConfigOutOfRangeError', 'EventSourceError',
    'InvalidIntervalError', 'ReferenceDataMissingError',
]
