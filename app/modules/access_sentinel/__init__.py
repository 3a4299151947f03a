"""
Access Sentinel - Credential Misuse Detection for Facility Badge Access
======================================================================

Flags physically impossible journeys between consecutive badge accesses,
learns per-identity access profiles to spot behavioral anomalies, and keeps
a bounded live feed of alerts.

Usage:
    from app.modules.access_sentinel import build_container

    container = build_container()
    snapshot = container.service.refresh()
    for analysis in snapshot.analyses:
        print(analysis.status, analysis.risk_score, analysis.reason)
"""

__version__ = "1.0.0"

from app.modules.access_sentinel.analytics import BehaviorPatternEngine
from app.modules.access_sentinel.application import AccessSentinelService, SentinelSnapshot
from app.modules.access_sentinel.config import DetectionThresholds, NotificationSettings
from app.modules.access_sentinel.container import Container, build_container, get_container
from app.modules.access_sentinel.detection import TravelFeasibilityAnalyzer
from app.modules.access_sentinel.repositories import ReferenceRegistry
from app.modules.access_sentinel.settings import SettingsManager
from app.modules.access_sentinel.streaming import AlertStreamProcessor

__all__ = [
    "AccessSentinelService",
    "AlertStreamProcessor",
    "BehaviorPatternEngine",
    "Container",
    "DetectionThresholds",
    "NotificationSettings",
    "ReferenceRegistry",
    "SentinelSnapshot",
    "SettingsManager",
    "TravelFeasibilityAnalyzer",
    "build_container",
    "get_container",
    "__version__",
]
