"""Population level behavior summary"""

from collections import Counter

import pandas as pd

from app.modules.access_sentinel.domain.entities import BehaviorPattern, BehaviorSummary
from app.modules.access_sentinel.domain.enums import AnomalySeverity, RiskLevel


class SummaryCalculator:
    """Aggregates anomaly and risk counts across patterns"""

    @staticmethod
    def summarize(patterns: list[BehaviorPattern]) -> BehaviorSummary:
        anomalies = [anomaly for pattern in patterns for anomaly in pattern.anomalies]
        severities = Counter(anomaly.severity for anomaly in anomalies)
        risk_levels = Counter(pattern.risk_level for pattern in patterns)

        return BehaviorSummary(
            total_anomalies=len(anomalies),
            critical_count=severities[AnomalySeverity.CRITICAL],
            warning_count=severities[AnomalySeverity.WARNING],
            info_count=severities[AnomalySeverity.INFO],
            average_score=SummaryCalculator._average_score(patterns),
            anomaly_types=dict(Counter(anomaly.type.value for anomaly in anomalies)),
            high_risk_users=risk_levels[RiskLevel.HIGH],
            medium_risk_users=risk_levels[RiskLevel.MEDIUM],
            low_risk_users=risk_levels[RiskLevel.LOW],
        )

    @staticmethod
    def _average_score(patterns: list[BehaviorPattern]) -> float:
        if not patterns:
            return 0.0
        return float(pd.Series([pattern.behavior_score for pattern in patterns]).mean())
