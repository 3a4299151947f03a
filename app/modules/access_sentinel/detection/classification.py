# -*- coding: utf-8 -*-
"""
classification.py — Travel feasibility verdicts
-----------------------------------------------
Single responsibility: Turn a measured pair into status, risk and reason
"""
from dataclasses import dataclass

from app.modules.access_sentinel.config import DetectionThresholds
from app.modules.access_sentinel.domain.enums import TravelStatus
from app.modules.access_sentinel.utils import clamp_score


@dataclass(frozen=True)
class TravelVerdict:
    status: TravelStatus
    risk_score: float
    reason: str


class TravelClassifier:
    """Deterministic classification of a consecutive access pair

    Branches are evaluated in order:

    1. gap below ``required * impossible_ratio``: impossible, risk 95..100
    2. gap below ``required * suspicious_ratio``: suspicious, risk 60..95
    3. speed above the human maximum: suspicious, risk from 50 upwards
    4. otherwise safe, risk decaying from 30 as the gap exceeds the requirement
    """

    @classmethod
    def classify(
        cls,
        gap_minutes: float,
        required_minutes: float,
        speed_kmh: float,
        thresholds: DetectionThresholds,
    ) -> TravelVerdict:
        impossible_ratio = thresholds.impossible_travel_ratio
        suspicious_ratio = thresholds.suspicious_travel_ratio

        if gap_minutes < required_minutes * impossible_ratio:
            return cls._impossible(gap_minutes, required_minutes)
        if gap_minutes < required_minutes * suspicious_ratio:
            return cls._too_fast(gap_minutes, required_minutes, speed_kmh, thresholds)
        if speed_kmh > thresholds.max_human_speed_kmh:
            return cls._superhuman_speed(speed_kmh, thresholds.max_human_speed_kmh)
        return cls._safe(gap_minutes, required_minutes)

    @staticmethod
    def _impossible(gap: float, required: float) -> TravelVerdict:
        risk = 95 + min(5.0, (required - gap) / required * 5)
        return TravelVerdict(
            status=TravelStatus.IMPOSSIBLE,
            risk_score=clamp_score(risk),
            reason=f"Physically impossible travel. Required: {required:.1f} min, Actual: {gap:.1f} min",
        )

    @staticmethod
    def _too_fast(
        gap: float, required: float, speed_kmh: float, thresholds: DetectionThresholds
    ) -> TravelVerdict:
        suspicious_ratio = thresholds.suspicious_travel_ratio
        band = required * (suspicious_ratio - thresholds.impossible_travel_ratio)
        risk = 60 + ((required * suspicious_ratio - gap) / band) * 35
        return TravelVerdict(
            status=TravelStatus.SUSPICIOUS,
            risk_score=clamp_score(risk),
            reason=f"Unusually fast travel detected. Speed: {speed_kmh:.1f} km/h",
        )

    @staticmethod
    def _superhuman_speed(speed_kmh: float, max_speed_kmh: float) -> TravelVerdict:
        return TravelVerdict(
            status=TravelStatus.SUSPICIOUS,
            risk_score=clamp_score(50 + (speed_kmh - max_speed_kmh) * 2),
            reason=f"Speed exceeds human capability: {speed_kmh:.1f} km/h",
        )

    @staticmethod
    def _safe(gap: float, required: float) -> TravelVerdict:
        return TravelVerdict(
            status=TravelStatus.SAFE,
            risk_score=clamp_score(30 - (gap - required) * 2),
            reason=f"Normal access pattern. Required: {required:.1f} min, Actual: {gap:.1f} min",
        )
