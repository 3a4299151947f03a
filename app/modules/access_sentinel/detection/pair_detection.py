# -*- coding: utf-8 -*-
"""
pair_detection.py — Consecutive access pair analysis
---------------------------------------------------
Single responsibility: Measure and classify each identity's consecutive pairs
"""
from dataclasses import dataclass
from typing import Any

import pandas as pd

from app.modules.access_sentinel.config import DetectionThresholds
from app.modules.access_sentinel.detection.classification import (
    TravelClassifier,
    TravelVerdict,
)
from app.modules.access_sentinel.detection.travel_time import TravelTimeEstimator
from app.modules.access_sentinel.domain.entities import AccessEvent, Location, TravelAnalysis
from app.modules.access_sentinel.domain.exceptions import (
    InvalidIntervalError,
    ReferenceDataMissingError,
)
from app.modules.access_sentinel.repositories.reference_registry import ReferenceRegistry
from app.modules.access_sentinel.utils import get_logger

logger = get_logger()


@dataclass(frozen=True)
class PairAssessment:
    """Measurements and verdict for travel between two locations"""

    distance_meters: float
    required_time_minutes: float
    time_gap_minutes: float
    speed_kmh: float
    verdict: TravelVerdict


class TravelPairDetector:
    """Scans per-identity ordered events and produces one analysis per valid pair"""

    def __init__(
        self,
        registry: ReferenceRegistry,
        estimator: TravelTimeEstimator | None = None,
    ):
        self.registry = registry
        self.estimator = estimator or TravelTimeEstimator()

    @property
    def max_gap_minutes(self) -> float:
        return self.estimator.model.max_pair_gap_minutes

    def scan(
        self, df: pd.DataFrame, events: list[AccessEvent], thresholds: DetectionThresholds
    ) -> list[TravelAnalysis]:
        """Scan a frame prepared by EventPreprocessor; ``position`` indexes into events"""
        analyses = []
        for _, group in df.groupby("identity_order", sort=True):
            rows = group.to_dict("records")
            for previous, current in zip(rows, rows[1:]):
                analysis = self._analyze_rows(previous, current, events, thresholds)
                if analysis is not None:
                    analyses.append(analysis)
        return analyses

    def assess(
        self,
        origin: Location,
        destination: Location,
        gap_minutes: float,
        thresholds: DetectionThresholds,
    ) -> PairAssessment:
        """Measure one trip; raises InvalidIntervalError outside (0, max gap]"""
        if gap_minutes <= 0 or gap_minutes > self.max_gap_minutes:
            raise InvalidIntervalError(gap_minutes, self.max_gap_minutes)

        distance = self.estimator.distance_m(origin, destination)
        required = self.estimator.required_time(origin, destination)
        speed_kmh = self._calculate_speed(distance, gap_minutes)
        verdict = TravelClassifier.classify(gap_minutes, required, speed_kmh, thresholds)
        return PairAssessment(
            distance_meters=distance,
            required_time_minutes=required,
            time_gap_minutes=gap_minutes,
            speed_kmh=speed_kmh,
            verdict=verdict,
        )

    def _analyze_rows(
        self,
        previous: dict[str, Any],
        current: dict[str, Any],
        events: list[AccessEvent],
        thresholds: DetectionThresholds,
    ) -> TravelAnalysis | None:
        from_event = events[previous["position"]]
        to_event = events[current["position"]]

        if from_event.location_id == to_event.location_id:
            return None

        gap_minutes = self._calculate_gap_minutes(previous, current)
        try:
            origin = self.registry.require_location(from_event.location_id)
            destination = self.registry.require_location(to_event.location_id)
            assessment = self.assess(origin, destination, gap_minutes, thresholds)
        except (InvalidIntervalError, ReferenceDataMissingError) as exc:
            logger.debug(f"Skipping pair {from_event.id} -> {to_event.id}: {exc}")
            return None

        return self._create_analysis(from_event, to_event, origin, destination, assessment)

    @staticmethod
    def _calculate_gap_minutes(previous: dict[str, Any], current: dict[str, Any]) -> float:
        return (current["timestamp_utc"] - previous["timestamp_utc"]).total_seconds() / 60.0

    @staticmethod
    def _calculate_speed(distance_m: float, gap_minutes: float) -> float:
        """Calculate speed in km/h"""
        return (distance_m / 1000.0) / (gap_minutes / 60.0)

    def _create_analysis(
        self,
        from_event: AccessEvent,
        to_event: AccessEvent,
        origin: Location,
        destination: Location,
        assessment: PairAssessment,
    ) -> TravelAnalysis:
        return TravelAnalysis(
            id=f"ANALYSIS-{from_event.id}-{to_event.id}",
            staff_id=to_event.identity_id,
            staff_name=self.registry.identity_name(to_event.identity_id),
            from_location=origin.name,
            to_location=destination.name,
            from_location_id=origin.id,
            to_location_id=destination.id,
            from_time=from_event.timestamp,
            to_time=to_event.timestamp,
            time_gap_minutes=assessment.time_gap_minutes,
            distance_meters=assessment.distance_meters,
            required_time_minutes=assessment.required_time_minutes,
            speed_kmh=assessment.speed_kmh,
            status=assessment.verdict.status,
            risk_score=assessment.verdict.risk_score,
            reason=assessment.verdict.reason,
        )
