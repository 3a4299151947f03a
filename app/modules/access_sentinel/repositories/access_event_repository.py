"""Repository pattern for access log data"""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Iterable

import pandas as pd

from app.modules.access_sentinel.domain.entities import AccessEvent
from app.modules.access_sentinel.utils import DateTimeService

EVENT_COLUMNS = [
    "id",
    "identity_id",
    "location_id",
    "timestamp",
    "device_id",
    "source_address",
]


class AccessEventRepository(ABC):
    """Abstract source of badge access events"""

    @abstractmethod
    def find_events(
        self, start: datetime | None = None, end: datetime | None = None
    ) -> list[AccessEvent]:
        """Find events in the inclusive period; open bounds when None. Order is not guaranteed"""
        pass

    @abstractmethod
    def test_connection(self) -> bool:
        """Test if data source is accessible"""
        pass


def filter_by_period(
    events: Iterable[AccessEvent], start: datetime | None, end: datetime | None
) -> list[AccessEvent]:
    """Keep events with start <= timestamp <= end"""
    start_ts = DateTimeService.to_utc_timestamp(start) if start else None
    end_ts = DateTimeService.to_utc_timestamp(end) if end else None

    selected = []
    for event in events:
        ts = DateTimeService.to_utc_timestamp(event.timestamp)
        if start_ts is not None and ts < start_ts:
            continue
        if end_ts is not None and ts > end_ts:
            continue
        selected.append(event)
    return selected


class AccessEventMapper:
    """Maps between DataFrame and domain entities"""

    @staticmethod
    def dataframe_to_events(df: pd.DataFrame) -> list[AccessEvent]:
        """Convert a normalized DataFrame to AccessEvent entities"""
        events = []
        for _, row in df.iterrows():
            events.append(
                AccessEvent(
                    id=str(row["id"]),
                    identity_id=str(row["identity_id"]),
                    location_id=str(row["location_id"]),
                    timestamp=pd.to_datetime(row["timestamp"], utc=True).to_pydatetime(),
                    device_id=AccessEventMapper._text(row.get("device_id")),
                    source_address=AccessEventMapper._text(row.get("source_address")),
                )
            )
        return events

    @staticmethod
    def events_to_dataframe(events: list[AccessEvent]) -> pd.DataFrame:
        """Convert AccessEvent entities to a DataFrame with a UTC timestamp column

        ``position`` keeps the input order so later sorts can stay stable.
        """
        data = [
            {
                "position": position,
                "id": event.id,
                "identity_id": event.identity_id,
                "location_id": event.location_id,
                "timestamp": event.timestamp,
                "device_id": event.device_id,
                "source_address": event.source_address,
            }
            for position, event in enumerate(events)
        ]
        df = pd.DataFrame(data, columns=["position", *EVENT_COLUMNS])
        df["timestamp_utc"] = DateTimeService.to_utc_timestamp(df["timestamp"])
        return df

    @staticmethod
    def _text(value) -> str:
        if value is None or pd.isna(value):
            return ""
        return str(value)
