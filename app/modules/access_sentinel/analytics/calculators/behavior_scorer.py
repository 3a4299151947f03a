"""Behavior score and risk level"""

from app.modules.access_sentinel.analytics.calculators.profile_builder import BehaviorProfile
from app.modules.access_sentinel.config import BehaviorScoringConfig
from app.modules.access_sentinel.domain.entities import BehaviorAnomaly
from app.modules.access_sentinel.domain.enums import AnomalySeverity, LoginFrequency, RiskLevel
from app.modules.access_sentinel.utils import clamp_score


class BehaviorScorer:
    @staticmethod
    def score(
        profile: BehaviorProfile,
        anomalies: list[BehaviorAnomaly],
        config: BehaviorScoringConfig,
    ) -> float:
        """100 minus severity penalties plus consistency bonuses, clamped to [0, 100]"""
        penalties = {
            AnomalySeverity.CRITICAL: config.critical_penalty,
            AnomalySeverity.WARNING: config.warning_penalty,
            AnomalySeverity.INFO: config.info_penalty,
        }
        score = 100.0 - sum(penalties[anomaly.severity] for anomaly in anomalies)

        if profile.login_frequency == LoginFrequency.REGULAR:
            score += config.regular_frequency_bonus
        if profile.preferred_locations:
            score += config.preferred_locations_bonus

        return clamp_score(score)

    @staticmethod
    def risk_level(score: float, config: BehaviorScoringConfig) -> RiskLevel:
        if score >= config.low_risk_min_score:
            return RiskLevel.LOW
        if score >= config.medium_risk_min_score:
            return RiskLevel.MEDIUM
        return RiskLevel.HIGH
