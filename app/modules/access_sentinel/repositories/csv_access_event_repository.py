"""CSV implementation of the access event repository"""

from datetime import datetime
from pathlib import Path

import pandas as pd

from app.modules.access_sentinel.domain.entities import AccessEvent
from app.modules.access_sentinel.domain.exceptions import EventSourceError
from app.modules.access_sentinel.repositories.access_event_repository import (
    AccessEventMapper,
    AccessEventRepository,
    filter_by_period,
)
from app.modules.access_sentinel.utils import DateTimeService, get_logger

logger = get_logger()


class CSVAccessEventRepository(AccessEventRepository):
    """Repository implementation for access logs exported as CSV"""

    REQUIRED_COLUMNS = ["identity_id", "location_id", "timestamp"]

    COLUMN_MAPPING = {
        "log_id": "id",
        "logId": "id",
        "event_id": "id",
        "staffId": "identity_id",
        "staff_id": "identity_id",
        "identityId": "identity_id",
        "location": "location_id",
        "locationId": "location_id",
        "datetime": "timestamp",
        "time": "timestamp",
        "deviceId": "device_id",
        "device": "device_id",
        "ipAddress": "source_address",
        "ip_address": "source_address",
        "sourceAddress": "source_address",
    }

    def __init__(self, csv_path: str | Path):
        self.csv_path = Path(csv_path)
        logger.info(f"CSV repository initialized: {self.csv_path}")

    def find_events(
        self, start: datetime | None = None, end: datetime | None = None
    ) -> list[AccessEvent]:
        if not self.csv_path.exists():
            raise EventSourceError(f"CSV file not found: {self.csv_path}")

        logger.info(f"Loading access events from {self.csv_path}")
        try:
            df = pd.read_csv(self.csv_path, dtype=str, keep_default_na=False)
        except (pd.errors.ParserError, pd.errors.EmptyDataError, UnicodeDecodeError) as exc:
            raise EventSourceError(f"Unreadable CSV file {self.csv_path}: {exc}") from exc

        df = self._normalize_columns(df)
        self._validate_columns(df)
        df = self._drop_invalid_rows(df)

        events = AccessEventMapper.dataframe_to_events(df)
        return filter_by_period(events, start, end)

    def test_connection(self) -> bool:
        return self.csv_path.exists() and self.csv_path.is_file()

    def _normalize_columns(self, df: pd.DataFrame) -> pd.DataFrame:
        """Normalize column names for consistency"""
        df = df.rename(columns=lambda col: str(col).strip())
        return df.rename(columns=self.COLUMN_MAPPING)

    def _validate_columns(self, df: pd.DataFrame) -> None:
        missing = [col for col in self.REQUIRED_COLUMNS if col not in df.columns]
        if missing:
            raise EventSourceError(f"Missing required columns: {', '.join(missing)}")

    def _drop_invalid_rows(self, df: pd.DataFrame) -> pd.DataFrame:
        dfx = df.copy()
        if "id" not in dfx.columns:
            dfx["id"] = [f"LOG-{i + 1:04d}" for i in range(len(dfx))]

        dfx["timestamp"] = DateTimeService.parse_iso8601(dfx["timestamp"])
        invalid = dfx["timestamp"].isna()
        if invalid.any():
            logger.warning(f"Dropping {int(invalid.sum())} rows with unparseable timestamps")
        dfx = dfx[~invalid]

        blank = (dfx["identity_id"].str.strip() == "") | (dfx["location_id"].str.strip() == "")
        if blank.any():
            logger.warning(f"Dropping {int(blank.sum())} rows without identity or location")
        return dfx[~blank].reset_index(drop=True)
