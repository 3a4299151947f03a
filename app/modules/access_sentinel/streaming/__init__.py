from app.modules.access_sentinel.streaming.alert_buffer import AlertBuffer
from app.modules.access_sentinel.streaming.alert_stream import (
    AlertStreamProcessor,
    Subscription,
)
from app.modules.access_sentinel.streaming.severity import (
    ALERT_MESSAGES,
    ALERT_TITLES,
    SeverityClassifier,
)
from app.modules.access_sentinel.streaming.synthetic_feed import SyntheticAlertSource

__all__ = [
    "ALERT_MESSAGES",
    "ALERT_TITLES",
    "AlertBuffer",
    "AlertStreamProcessor",
    "SeverityClassifier",
    "Subscription",
    "SyntheticAlertSource",
]
