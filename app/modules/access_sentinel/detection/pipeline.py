# -*- coding: utf-8 -*-
"""
pipeline.py — Travel feasibility analysis orchestrator
"""
from dataclasses import dataclass

from app.modules.access_sentinel.config import DetectionThresholds, TravelTimeModel
from app.modules.access_sentinel.detection.pair_detection import (
    PairAssessment,
    TravelPairDetector,
)
from app.modules.access_sentinel.detection.preprocessing import EventPreprocessor
from app.modules.access_sentinel.detection.travel_time import TravelTimeEstimator
from app.modules.access_sentinel.detection.validation import AccessEventValidator
from app.modules.access_sentinel.domain.entities import AccessEvent, Location, TravelAnalysis
from app.modules.access_sentinel.domain.enums import TravelStatus
from app.modules.access_sentinel.repositories.access_event_repository import AccessEventMapper
from app.modules.access_sentinel.repositories.reference_registry import ReferenceRegistry
from app.modules.access_sentinel.settings import SettingsManager
from app.modules.access_sentinel.utils import get_logger

logger = get_logger()


@dataclass(frozen=True)
class TravelStatistics:
    total: int
    safe: int
    suspicious: int
    impossible: int

    @property
    def flagged(self) -> int:
        return self.suspicious + self.impossible

    @property
    def flagged_ratio(self) -> float:
        return self.flagged / self.total if self.total else 0.0

    @classmethod
    def from_analyses(cls, analyses: list[TravelAnalysis]) -> "TravelStatistics":
        counts = {status: 0 for status in TravelStatus}
        for analysis in analyses:
            counts[analysis.status] += 1
        return cls(
            total=len(analyses),
            safe=counts[TravelStatus.SAFE],
            suspicious=counts[TravelStatus.SUSPICIOUS],
            impossible=counts[TravelStatus.IMPOSSIBLE],
        )

    def to_dict(self) -> dict:
        return {
            "total": self.total,
            "safe": self.safe,
            "suspicious": self.suspicious,
            "impossible": self.impossible,
            "flagged": self.flagged,
            "flaggedRatio": round(self.flagged_ratio, 4),
        }


class TravelFeasibilityAnalyzer:
    """Detects physically impossible journeys between consecutive accesses"""

    def __init__(
        self,
        registry: ReferenceRegistry,
        settings: SettingsManager | None = None,
        travel_model: TravelTimeModel | None = None,
    ):
        self.registry = registry
        self.settings = settings or SettingsManager()
        self.detector = TravelPairDetector(registry, TravelTimeEstimator(travel_model))

    def analyze(
        self, events: list[AccessEvent], thresholds: DetectionThresholds | None = None
    ) -> list[TravelAnalysis]:
        """Analyze all consecutive pairs, highest risk first

        Ties keep identity first-appearance order, then chronological order.
        """
        thresholds = thresholds or self.settings.thresholds
        if not events:
            return []

        df = AccessEventMapper.events_to_dataframe(events)
        AccessEventValidator.validate_dataframe(df)
        prepared = EventPreprocessor.prepare_dataframe(df)

        analyses = self.detector.scan(prepared, events, thresholds)
        logger.debug(f"Analyzed {len(events)} events into {len(analyses)} travel pairs")
        return sorted(analyses, key=lambda analysis: analysis.risk_score, reverse=True)

    def analyze_pair(
        self,
        origin: Location,
        destination: Location,
        gap_minutes: float,
        thresholds: DetectionThresholds | None = None,
    ) -> PairAssessment:
        return self.detector.assess(
            origin, destination, gap_minutes, thresholds or self.settings.thresholds
        )

    @staticmethod
    def statistics(analyses: list[TravelAnalysis]) -> TravelStatistics:
        return TravelStatistics.from_analyses(analyses)
