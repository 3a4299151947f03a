# -*- coding: utf-8 -*-
from enum import Enum


class TravelStatus(str, Enum):
    SAFE = "safe"
    SUSPICIOUS = "suspicious"
    IMPOSSIBLE = "impossible"


class LoginFrequency(str, Enum):
    SPORADIC = "sporadic"
    REGULAR = "regular"
    HEAVY = "heavy"


class RiskLevel(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class AnomalySeverity(str, Enum):
    INFO = "info"
    WARNING = "warning"
    CRITICAL = "critical"


class AnomalyType(str, Enum):
    UNUSUAL_TIME = "UNUSUAL_TIME"
    AFTER_HOURS = "AFTER_HOURS"
    NEW_LOCATION = "NEW_LOCATION"
    NEW_DEVICE = "NEW_DEVICE"
    RAPID_LOGINS = "RAPID_LOGINS"
    LOCATION_HOPPING = "LOCATION_HOPPING"


class AlertType(str, Enum):
    FRAUD = "fraud"
    SUSPICIOUS = "suspicious"
    INFO = "info"


class AlertSource(str, Enum):
    TRAVEL_ANALYSIS = "travel_analysis"
    SYNTHETIC = "synthetic"
    TEST = "test"


class ConnectionStatus(str, Enum):
    DISCONNECTED = "disconnected"
    CONNECTING = "connecting"
    CONNECTED = "connected"
