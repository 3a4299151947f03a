# -*- coding: utf-8 -*-
"""Unit tests for reference data and access log repositories."""
import random
from datetime import datetime, timedelta, timezone

import pytest

from app.modules.access_sentinel.domain import EventSourceError, ReferenceDataMissingError
from app.modules.access_sentinel.repositories import (
    AccessEventRepositoryFactory,
    CSVAccessEventRepository,
    InMemoryAccessEventRepository,
    ReferenceRegistry,
    SyntheticAccessEventRepository,
)

NOW = datetime(2024, 3, 4, 15, 0, tzinfo=timezone.utc)


class TestReferenceRegistry:
    """Catalog lookups."""

    def test_default_catalog(self, registry):
        assert len(registry.locations) == 8
        assert len(registry.identities) == 8
        assert registry.locations[0].id == "icu"
        assert registry.identities[0].name == "Dr. Rahul Sharma"

    def test_lookups(self, registry):
        assert registry.get_location("pharmacy").name == "Pharmacy"
        assert registry.get_location("rooftop") is None
        assert registry.location_name("rooftop") == "rooftop"
        assert registry.identity_name("3") == "Dr. Aman Singh"
        assert registry.identity_name("42") == "42"

    def test_require_location_raises(self, registry):
        with pytest.raises(ReferenceDataMissingError) as exc_info:
            registry.require_location("rooftop")
        assert exc_info.value.kind == "location"
        assert exc_info.value.reference_id == "rooftop"

    def test_from_records_accepts_camel_case(self):
        registry = ReferenceRegistry.from_records(
            [
                {"id": "a", "name": "A", "coordinates": {"lat": 1.0, "lng": 2.0}, "floor": 0, "building": "X"},
            ],
            [
                {"id": "u1", "name": "User", "role": "Nurse", "department": "ICU", "badgeId": "B-1"},
            ],
        )
        assert registry.get_identity("u1").badge_id == "B-1"
        assert registry.require_location("a").coordinates.lng == 2.0


class TestCSVAccessEventRepository:
    """Access logs exported as CSV."""

    def _write(self, tmp_path, content: str):
        path = tmp_path / "access_log.csv"
        path.write_text(content)
        return path

    def test_reads_aliased_columns(self, tmp_path):
        path = self._write(
            tmp_path,
            "logId,staffId,location,timestamp,deviceId,ipAddress\n"
            "L1,1,icu,2024-03-04T10:00:00Z,DEV-1,192.168.1.1\n"
            "L2,1,pharmacy,2024-03-04T10:01:00Z,DEV-1,192.168.1.2\n",
        )

        events = CSVAccessEventRepository(path).find_events()

        assert [event.id for event in events] == ["L1", "L2"]
        assert events[0].identity_id == "1"
        assert events[0].location_id == "icu"
        assert events[0].device_id == "DEV-1"
        assert events[0].source_address == "192.168.1.1"
        assert events[1].timestamp == datetime(2024, 3, 4, 10, 1, tzinfo=timezone.utc)

    def test_missing_ids_are_generated_and_bad_rows_dropped(self, tmp_path):
        path = self._write(
            tmp_path,
            "identity_id,location_id,timestamp\n"
            "1,icu,2024-03-04T10:00:00Z\n"
            "1,pharmacy,not-a-date\n"
            ",lab,2024-03-04T10:05:00Z\n"
            "2,lab,2024-03-04T10:06:00Z\n",
        )

        events = CSVAccessEventRepository(path).find_events()

        assert [(event.id, event.identity_id) for event in events] == [("LOG-0001", "1"), ("LOG-0004", "2")]
        assert events[0].device_id == ""

    def test_mixed_iso_timestamp_forms_are_all_kept(self, tmp_path):
        path = self._write(
            tmp_path,
            "logId,staffId,location,timestamp\n"
            "L1,1,icu,2024-03-04 10:00:00\n"
            "L2,1,pharmacy,2024-03-04T10:00:30Z\n"
            "L3,2,lab,2024-03-04 10:00:00+00:00\n",
        )

        events = CSVAccessEventRepository(path).find_events()

        by_id = {event.id: event.timestamp for event in events}
        assert len(events) == 3
        assert by_id["L1"] == datetime(2024, 3, 4, 10, 0, tzinfo=timezone.utc)
        assert by_id["L2"] == datetime(2024, 3, 4, 10, 0, 30, tzinfo=timezone.utc)
        assert by_id["L3"] == datetime(2024, 3, 4, 10, 0, tzinfo=timezone.utc)

    def test_mixed_forms_keep_the_impossible_pair(self, tmp_path, registry):
        from app.modules.access_sentinel.detection import TravelFeasibilityAnalyzer
        from app.modules.access_sentinel.domain import TravelStatus

        path = self._write(
            tmp_path,
            "logId,staffId,location,timestamp\n"
            "L1,1,icu,2024-03-04 10:00:00\n"
            "L2,1,pharmacy,2024-03-04T10:00:30Z\n",
        )

        analyses = TravelFeasibilityAnalyzer(registry).analyze(CSVAccessEventRepository(path).find_events())

        assert [analysis.status for analysis in analyses] == [TravelStatus.IMPOSSIBLE]

    def test_period_filter_is_inclusive(self, tmp_path):
        path = self._write(
            tmp_path,
            "identity_id,location_id,timestamp\n"
            "1,icu,2024-03-04T09:00:00Z\n"
            "1,icu,2024-03-04T10:00:00Z\n"
            "1,icu,2024-03-04T11:00:00Z\n",
        )
        start = datetime(2024, 3, 4, 10, 0, tzinfo=timezone.utc)

        events = CSVAccessEventRepository(path).find_events(start=start, end=start)

        assert len(events) == 1
        assert events[0].timestamp == start

    def test_missing_file(self, tmp_path):
        repository = CSVAccessEventRepository(tmp_path / "absent.csv")

        assert repository.test_connection() is False
        with pytest.raises(EventSourceError):
            repository.find_events()

    def test_missing_columns(self, tmp_path):
        path = self._write(tmp_path, "identity_id,timestamp\n1,2024-03-04T10:00:00Z\n")
        with pytest.raises(EventSourceError, match="location_id"):
            CSVAccessEventRepository(path).find_events()

    def test_empty_file(self, tmp_path):
        path = self._write(tmp_path, "")
        with pytest.raises(EventSourceError):
            CSVAccessEventRepository(path).find_events()


class TestSyntheticAccessEventRepository:
    """Random access log with injected scenarios."""

    def _repository(self, registry, seed=42, count=60, **kwargs):
        return SyntheticAccessEventRepository(
            registry, count=count, rng=random.Random(seed), clock=lambda: NOW, **kwargs
        )

    def test_seeded_batches_are_reproducible(self, registry):
        first = self._repository(registry).find_events()
        second = self._repository(registry).find_events()
        assert first == second

    def test_batch_shape(self, registry):
        events = self._repository(registry).find_events()

        assert len(events) == 64
        timestamps = [event.timestamp for event in events]
        assert timestamps == sorted(timestamps, reverse=True)

        shift_start = NOW.replace(hour=6, minute=0)
        random_events = [event for event in events if event.id.startswith("LOG-0")]
        assert all(shift_start <= event.timestamp < shift_start + timedelta(hours=12) for event in random_events)
        assert {event.location_id for event in events} <= {location.id for location in registry.locations}

    def test_scenarios(self, registry):
        events = self._repository(registry, count=0).find_events()

        assert [event.id for event in events] == [
            "LOG-SUSP-002", "LOG-SUSP-001", "LOG-SUSP-004", "LOG-SUSP-003",
        ]
        assert events[1].identity_id == "1"
        assert events[1].timestamp == NOW - timedelta(minutes=5)

    def test_scenarios_can_be_disabled(self, registry):
        events = self._repository(registry, count=5, include_scenarios=False).find_events()
        assert len(events) == 5

    def test_each_call_draws_a_new_batch(self, registry):
        repository = self._repository(registry)
        assert repository.find_events() != repository.find_events()


class TestRepositoryFactory:
    """Repository selection by source name."""

    def test_creates_each_kind(self, registry, tmp_path):
        assert isinstance(
            AccessEventRepositoryFactory.create_repository("csv", csv_path=tmp_path / "log.csv"),
            CSVAccessEventRepository,
        )
        assert isinstance(
            AccessEventRepositoryFactory.create_repository("SYNTHETIC", registry=registry, seed=1),
            SyntheticAccessEventRepository,
        )
        assert isinstance(
            AccessEventRepositoryFactory.create_repository("memory"),
            InMemoryAccessEventRepository,
        )

    def test_unknown_kind(self):
        with pytest.raises(ValueError):
            AccessEventRepositoryFactory.create_repository("bigquery")

    def test_in_memory_repository(self, make_event):
        repository = InMemoryAccessEventRepository()
        repository.add(make_event("1", "icu", 0), make_event("1", "lab", 30))

        assert len(repository.find_events()) == 2
        assert repository.test_connection() is True

        repository.replace([])
        assert repository.find_events() == []
