# -*- coding: utf-8 -*-
"""Unit tests for the recompute service and container wiring."""
import asyncio
import threading

import pytest

from app.modules.access_sentinel import build_container
from app.modules.access_sentinel.config import AlertStreamConfig
from app.modules.access_sentinel.domain import (
    AlertSource,
    AlertType,
    EventSourceError,
    TravelStatus,
)
from app.modules.access_sentinel.repositories import (
    CSVAccessEventRepository,
    InMemoryAccessEventRepository,
)


@pytest.fixture
def events(make_event):
    """One impossible, one suspicious and one safe pair."""
    return [
        make_event("1", "icu", 0, event_id="A1"),
        make_event("1", "pharmacy", 0.5, event_id="A2"),
        make_event("2", "icu", 0, event_id="B1"),
        make_event("2", "pharmacy", 1, event_id="B2"),
        make_event("3", "emergency", 0, event_id="C1"),
        make_event("3", "radiology", 60, event_id="C2"),
    ]


@pytest.fixture
def container(events, clock):
    return build_container(
        event_repository=InMemoryAccessEventRepository(events),
        stream_config=AlertStreamConfig(feed_enabled=False),
        clock=clock,
    )


class TestAccessSentinelService:
    """Full recompute and alert publication."""

    def test_initial_snapshot_is_empty(self, container):
        snapshot = container.service.snapshot
        assert snapshot.generation == 0
        assert snapshot.computed_at is None
        assert snapshot.analyses == ()

    def test_refresh(self, container, clock):
        snapshot = container.service.refresh()

        assert snapshot.generation == 1
        assert snapshot.computed_at == clock()
        assert snapshot.event_count == 6
        assert [analysis.status for analysis in snapshot.analyses] == [
            TravelStatus.IMPOSSIBLE,
            TravelStatus.SUSPICIOUS,
            TravelStatus.SAFE,
        ]
        assert len(snapshot.patterns) == 8
        assert snapshot.summary.total_anomalies == 0
        assert snapshot.statistics.flagged == 2
        assert container.service.snapshot is snapshot

    def test_flagged_pairs_become_alerts(self, container):
        container.service.refresh()

        alerts = container.alert_stream.alerts
        assert [alert.id for alert in alerts] == ["ALERT-ANALYSIS-A1-A2", "ALERT-ANALYSIS-B1-B2"]
        assert [alert.type for alert in alerts] == [AlertType.FRAUD, AlertType.SUSPICIOUS]
        assert all(alert.source == AlertSource.TRAVEL_ANALYSIS for alert in alerts)
        assert container.alert_stream.unread_count == 2

    def test_each_pair_alerts_once(self, container):
        container.service.refresh()
        container.alert_stream.mark_all_as_read()

        container.service.refresh()

        assert len(container.alert_stream.alerts) == 2
        assert container.alert_stream.unread_count == 0

    def test_notification_toggles(self, container):
        container.settings_manager.update_notifications(alert_on_suspicious=False)
        container.service.refresh()
        assert [alert.type for alert in container.alert_stream.alerts] == [AlertType.FRAUD]

    def test_alerts_disabled(self, container):
        container.settings_manager.update_notifications(enable_alerts=False)
        container.service.refresh()
        assert container.alert_stream.alerts == []

    def test_threshold_change_applies_on_next_refresh(self, container):
        container.service.refresh()
        container.settings_manager.update_thresholds(high_risk_score_threshold=60, medium_risk_score_threshold=30)

        snapshot = container.service.refresh()

        assert snapshot.settings.thresholds.high_risk_score_threshold == 60
        assert snapshot.generation == 2

    def test_stale_result_is_discarded(self, container, events):
        service = container.service

        class _ReentrantRepository(InMemoryAccessEventRepository):
            """Starts a second refresh while the first one is still reading."""

            def __init__(self, items):
                super().__init__(items)
                self.calls = 0

            def find_events(self, start=None, end=None):
                self.calls += 1
                if self.calls == 1:
                    service.refresh()
                return super().find_events(start, end)

        service.repository = _ReentrantRepository(events)

        snapshot = service.refresh()

        assert snapshot.generation == 2
        assert service.snapshot.generation == 2
        assert len(container.alert_stream.alerts) == 2

    def test_unreadable_source_keeps_previous_snapshot(self, container, tmp_path):
        container.service.refresh()
        container.service.repository = CSVAccessEventRepository(tmp_path / "absent.csv")

        with pytest.raises(EventSourceError):
            container.service.refresh()

        assert container.service.snapshot.generation == 1

    def test_analyses_with_status(self, container):
        snapshot = container.service.refresh()
        assert len(snapshot.analyses_with_status()) == 3
        assert [a.status for a in snapshot.analyses_with_status(TravelStatus.SAFE)] == [TravelStatus.SAFE]

    @pytest.mark.asyncio
    async def test_threaded_refresh_delivers_on_worker_thread(self, container):
        threads = []
        container.alert_stream.subscribe(lambda alert: threads.append(threading.get_ident()))

        await asyncio.to_thread(container.service.refresh)

        assert len(threads) == 2
        assert threading.get_ident() not in threads

    @pytest.mark.asyncio
    async def test_periodic_refresh_survives_unexpected_errors(self, container):
        class _BrokenRepository(InMemoryAccessEventRepository):
            def __init__(self):
                super().__init__([])
                self.calls = 0

            def find_events(self, start=None, end=None):
                self.calls += 1
                raise RuntimeError("disk vanished")

        repository = _BrokenRepository()
        container.service.repository = repository

        task = container.service.start_periodic()
        for _ in range(100):
            if repository.calls:
                break
            await asyncio.sleep(0.01)
        await asyncio.sleep(0.05)

        assert repository.calls == 1
        assert not task.done()

        await container.service.stop()
        assert container.service.snapshot.generation == 0

    @pytest.mark.asyncio
    async def test_periodic_refresh_can_be_stopped(self, container):
        task = container.service.start_periodic()
        assert container.service.start_periodic() is task

        await container.service.stop()

        assert task.cancelled() or task.done()
