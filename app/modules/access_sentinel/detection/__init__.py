from app.modules.access_sentinel.detection.classification import (
    TravelClassifier,
    TravelVerdict,
)
from app.modules.access_sentinel.detection.pair_detection import (
    PairAssessment,
    TravelPairDetector,
)
from app.modules.access_sentinel.detection.pipeline import (
    TravelFeasibilityAnalyzer,
    TravelStatistics,
)
from app.modules.access_sentinel.detection.travel_time import TravelTimeEstimator

__all__ = [
    "PairAssessment",
    "TravelClassifier",
    "TravelFeasibilityAnalyzer",
    "TravelPairDetector",
    "TravelStatistics",
    "TravelTimeEstimator",
    "TravelVerdict",
]
