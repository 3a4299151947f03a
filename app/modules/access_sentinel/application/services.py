"""Application services for access anomaly detection"""

import asyncio
import threading
from dataclasses import dataclass, field
from datetime import datetime
from typing import Callable

from app.modules.access_sentinel.analytics import BehaviorPatternEngine
from app.modules.access_sentinel.config import SentinelSettings
from app.modules.access_sentinel.detection import TravelFeasibilityAnalyzer, TravelStatistics
from app.modules.access_sentinel.domain.entities import (
    BehaviorPattern,
    BehaviorSummary,
    TravelAnalysis,
)
from app.modules.access_sentinel.domain.enums import TravelStatus
from app.modules.access_sentinel.domain.exceptions import AccessSentinelError
from app.modules.access_sentinel.repositories import AccessEventRepository
from app.modules.access_sentinel.settings import SettingsManager
from app.modules.access_sentinel.streaming import AlertStreamProcessor, SeverityClassifier
from app.modules.access_sentinel.utils import DateTimeService, get_logger

logger = get_logger()


@dataclass(frozen=True)
class SentinelSnapshot:
    """Result of one full recompute"""

    generation: int
    computed_at: datetime | None
    settings: SentinelSettings
    event_count: int = 0
    analyses: tuple[TravelAnalysis, ...] = ()
    patterns: tuple[BehaviorPattern, ...] = ()
    summary: BehaviorSummary = field(
        default_factory=lambda: BehaviorPatternEngine.summarize([])
    )

    @property
    def statistics(self) -> TravelStatistics:
        return TravelStatistics.from_analyses(list(self.analyses))

    def analyses_with_status(self, status: TravelStatus | None = None) -> list[TravelAnalysis]:
        if status is None:
            return list(self.analyses)
        return [analysis for analysis in self.analyses if analysis.status == status]


class AccessSentinelService:
    """Recomputes travel and behavior analyses and feeds flagged pairs to the alert stream"""

    def __init__(
        self,
        repository: AccessEventRepository,
        travel_analyzer: TravelFeasibilityAnalyzer,
        behavior_engine: BehaviorPatternEngine,
        alert_stream: AlertStreamProcessor,
        settings: SettingsManager,
        clock: Callable[[], datetime] = DateTimeService.utc_now,
    ):
        self.repository = repository
        self.travel_analyzer = travel_analyzer
        self.behavior_engine = behavior_engine
        self.alert_stream = alert_stream
        self.settings = settings
        self.clock = clock

        self._lock = threading.Lock()
        self._generation = 0
        self._snapshot = SentinelSnapshot(generation=0, computed_at=None, settings=settings.settings)
        self._alerted_ids: set[str] = set()
        self._periodic_task: asyncio.Task | None = None

    @property
    def snapshot(self) -> SentinelSnapshot:
        return self._snapshot

    def refresh(self) -> SentinelSnapshot:
        """Full recompute from the log source; returns the committed snapshot

        A result finishing after a newer one has been committed is discarded.
        Raises EventSourceError when the log source cannot be read.
        """
        with self._lock:
            self._generation += 1
            generation = self._generation
        settings = self.settings.settings

        events = self.repository.find_events()
        analyses = self.travel_analyzer.analyze(events, settings.thresholds)
        patterns = self.behavior_engine.analyze_all(events)

        snapshot = SentinelSnapshot(
            generation=generation,
            computed_at=self.clock(),
            settings=settings,
            event_count=len(events),
            analyses=tuple(analyses),
            patterns=tuple(patterns),
            summary=self.behavior_engine.summarize(patterns),
        )

        with self._lock:
            if generation < self._snapshot.generation:
                logger.debug(
                    f"Discarding stale result {generation}, "
                    f"generation {self._snapshot.generation} already committed"
                )
                return self._snapshot
            self._snapshot = snapshot
            published = self._publish_alerts(snapshot)

        logger.info(
            f"Refresh {generation}: {len(events)} events, {len(analyses)} pairs, "
            f"{published} new alerts"
        )
        return snapshot

    def _publish_alerts(self, snapshot: SentinelSnapshot) -> int:
        """Ingest an alert for each new flagged analysis allowed by the notification settings"""
        notifications = snapshot.settings.notifications
        current_ids = {analysis.id for analysis in snapshot.analyses}
        self._alerted_ids &= current_ids

        if not notifications.enable_alerts:
            return 0

        enabled = {
            TravelStatus.IMPOSSIBLE: notifications.alert_on_impossible,
            TravelStatus.SUSPICIOUS: notifications.alert_on_suspicious,
            TravelStatus.SAFE: False,
        }

        published = 0
        # lowest risk first so the riskiest pair ends up on top of the feed
        for analysis in reversed(snapshot.analyses):
            if not enabled[analysis.status] or analysis.id in self._alerted_ids:
                continue
            alert = SeverityClassifier.from_analysis(
                analysis, snapshot.settings.thresholds, self.clock()
            )
            self.alert_stream.ingest(alert)
            self._alerted_ids.add(analysis.id)
            published += 1
        return published

    async def run_periodic(self) -> None:
        """Recompute forever, waiting ``auto_refresh_interval`` seconds between runs"""
        while True:
            try:
                await asyncio.to_thread(self.refresh)
            except AccessSentinelError:
                logger.exception("Periodic refresh failed")
            except Exception:
                logger.exception("Unexpected error in periodic refresh")
            await asyncio.sleep(self.settings.notifications.auto_refresh_interval)

    def start_periodic(self) -> asyncio.Task:
        if self._periodic_task is None or self._periodic_task.done():
            self._periodic_task = asyncio.create_task(self.run_periodic(), name="sentinel-refresh")
        return self._periodic_task

    async def stop(self) -> None:
        task, self._periodic_task = self._periodic_task, None
        if task is None:
            return
        task.cancel()
        try:
            await task
        except asyncio.CancelledError:
            logger.debug("Periodic refresh stopped")
