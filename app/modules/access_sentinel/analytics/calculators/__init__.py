from app.modules.access_sentinel.analytics.calculators.anomaly_detector import (
    ANOMALY_DESCRIPTIONS,
    AnomalyDetector,
)
from app.modules.access_sentinel.analytics.calculators.behavior_scorer import BehaviorScorer
from app.modules.access_sentinel.analytics.calculators.profile_builder import (
    BehaviorProfile,
    BehaviorProfileBuilder,
)
from app.modules.access_sentinel.analytics.calculators.summary_calculator import (
    SummaryCalculator,
)

__all__ = [
    "ANOMALY_DESCRIPTIONS",
    "AnomalyDetector",
    "BehaviorProfile",
    "BehaviorProfileBuilder",
    "BehaviorScorer",
    "SummaryCalculator",
]
