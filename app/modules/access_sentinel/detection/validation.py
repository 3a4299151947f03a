# -*- coding: utf-8 -*-
"""
validation.py — Input validation for the travel analysis pipeline
----------------------------------------------------------------
Single responsibility: Validate access event frames
"""
import pandas as pd


class AccessEventValidator:
    """Validates input data for travel feasibility analysis"""

    REQUIRED_COLUMNS = ['position', 'id', 'identity_id', 'location_id', 'timestamp_utc']

    @classmethod
    def validate_dataframe(cls, df: pd.DataFrame) -> None:
        """Validate that dataframe has required columns"""
        missing_columns = cls._find_missing_columns(df)

        if missing_columns:
            raise KeyError(f"Missing required columns: {', '.join(missing_columns)}")

    @classmethod
    def _find_missing_columns(cls, df: pd.DataFrame) -> list[str]:
        return [col for col in cls.REQUIRED_COLUMNS if col not in df.columns]
