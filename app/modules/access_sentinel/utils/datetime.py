"""
datetime.py - Date and time operations
-------------------------------------
Single responsibility: Handle datetime conversions
"""

from datetime import datetime, timezone
from typing import Any

import pandas as pd


class DateTimeService:
    """Handle datetime operations following SRP"""

    @staticmethod
    def utc_now() -> datetime:
        """Current instant, timezone aware"""
        return datetime.now(timezone.utc)

    @staticmethod
    def to_utc_timestamp(value: Any) -> pd.Timestamp | pd.Series:
        """Convert value to UTC timestamp; naive values are taken as UTC"""
        return pd.to_datetime(value, errors="coerce", utc=True)

    @staticmethod
    def parse_iso8601(values: pd.Series) -> pd.Series:
        """Parse ISO-8601 strings row by row; rows may mix separators and offsets"""
        return pd.to_datetime(values, errors="coerce", utc=True, format="ISO8601")
