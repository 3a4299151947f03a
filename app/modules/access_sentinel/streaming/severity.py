"""Alert type assignment and alert wording"""

from datetime import datetime

from app.modules.access_sentinel.config import DetectionThresholds
from app.modules.access_sentinel.domain.entities import Alert, TravelAnalysis
from app.modules.access_sentinel.domain.enums import AlertSource, AlertType

ALERT_TITLES = {
    AlertType.FRAUD: "🚨 FRAUD ALERT: Impossible Journey Detected",
    AlertType.SUSPICIOUS: "⚠️ Suspicious Activity Detected",
    AlertType.INFO: "ℹ️ Login Activity Recorded",
}

ALERT_MESSAGES = {
    AlertType.FRAUD: (
        "{staff} logged in at {origin} and {destination} within impossible time frame. "
        "Immediate investigation required."
    ),
    AlertType.SUSPICIOUS: (
        "{staff} showed unusual travel pattern between {origin} and {destination}. "
        "Review recommended."
    ),
    AlertType.INFO: "{staff} logged in at {destination} from {origin}.",
}


class SeverityClassifier:
    @staticmethod
    def classify(risk_score: float, thresholds: DetectionThresholds) -> AlertType:
        if risk_score >= thresholds.high_risk_score_threshold:
            return AlertType.FRAUD
        if risk_score >= thresholds.medium_risk_score_threshold:
            return AlertType.SUSPICIOUS
        return AlertType.INFO

    @staticmethod
    def compose(
        alert_id: str,
        alert_type: AlertType,
        staff_name: str,
        from_location: str,
        to_location: str,
        risk_score: float,
        timestamp: datetime,
        source: AlertSource,
        analysis_id: str | None = None,
        message: str | None = None,
    ) -> Alert:
        """Build an unread alert with the standard title and message for its type"""
        if message is None:
            message = ALERT_MESSAGES[alert_type].format(
                staff=staff_name, origin=from_location, destination=to_location
            )
        return Alert(
            id=alert_id,
            type=alert_type,
            title=ALERT_TITLES[alert_type],
            message=message,
            staff_name=staff_name,
            from_location=from_location,
            to_location=to_location,
            risk_score=risk_score,
            timestamp=timestamp,
            source=source,
            analysis_id=analysis_id,
        )

    @classmethod
    def from_analysis(
        cls, analysis: TravelAnalysis, thresholds: DetectionThresholds, timestamp: datetime
    ) -> Alert:
        return cls.compose(
            alert_id=f"ALERT-{analysis.id}",
            alert_type=cls.classify(analysis.risk_score, thresholds),
            staff_name=analysis.staff_name,
            from_location=analysis.from_location,
            to_location=analysis.to_location,
            risk_score=analysis.risk_score,
            timestamp=timestamp,
            source=AlertSource.TRAVEL_ANALYSIS,
            analysis_id=analysis.id,
        )
