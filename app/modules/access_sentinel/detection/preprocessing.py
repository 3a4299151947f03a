"""
preprocessing.py - Event preprocessing for travel analysis
---------------------------------------------------------
Single responsibility: Order access events per identity
"""

import pandas as pd

from app.modules.access_sentinel.utils import get_logger

logger = get_logger()


class EventPreprocessor:
    """Prepares the event frame for consecutive pair scanning"""

    @staticmethod
    def prepare_dataframe(df: pd.DataFrame) -> pd.DataFrame:
        """Drop undated rows and sort by identity, then chronologically"""
        dfx = EventPreprocessor._drop_invalid_timestamps(df)
        dfx = EventPreprocessor._add_identity_order(dfx)
        return EventPreprocessor._sort_per_identity(dfx)

    @staticmethod
    def _drop_invalid_timestamps(df: pd.DataFrame) -> pd.DataFrame:
        invalid = df["timestamp_utc"].isna()
        if invalid.any():
            logger.debug(f"Dropping {int(invalid.sum())} events without a valid timestamp")
        return df[~invalid].copy()

    @staticmethod
    def _add_identity_order(df: pd.DataFrame) -> pd.DataFrame:
        """Rank identities by first appearance in the batch"""
        df["identity_order"] = pd.factorize(df["identity_id"])[0]
        return df

    @staticmethod
    def _sort_per_identity(df: pd.DataFrame) -> pd.DataFrame:
        """Stable sort: equal timestamps keep their input order"""
        return df.sort_values(
            ["identity_order", "timestamp_utc", "position"], kind="mergesort"
        ).reset_index(drop=True)
