# -*- coding: utf-8 -*-
"""Unit tests for runtime settings validation and persistence."""
import orjson
import pytest

from app.modules.access_sentinel.config import (
    BehaviorScoringConfig,
    DetectionThresholds,
    NotificationSettings,
    SyntheticFeedConfig,
)
from app.modules.access_sentinel.domain import AlertType, ConfigOutOfRangeError
from app.modules.access_sentinel.settings import (
    InMemorySettingsStore,
    JsonFileSettingsStore,
    SettingsManager,
)


class TestConfigModels:
    """Bounds and cross-field rules."""

    def test_defaults(self):
        thresholds = DetectionThresholds()
        assert thresholds.impossible_travel_ratio == 0.3
        assert thresholds.suspicious_travel_ratio == 0.7
        assert thresholds.max_human_speed_kmh == 25
        assert thresholds.high_risk_score_threshold == 80
        assert thresholds.medium_risk_score_threshold == 50
        assert NotificationSettings().auto_refresh_interval == 30

    @pytest.mark.parametrize(
        "field,value",
        [
            ("impossible_travel_ratio", 0.05),
            ("suspicious_travel_ratio", 0.95),
            ("max_human_speed_kmh", 41),
            ("high_risk_score_threshold", 96),
            ("medium_risk_score_threshold", 29),
        ],
    )
    def test_out_of_range_values_are_rejected(self, field, value):
        with pytest.raises(ValueError):
            DetectionThresholds(**{field: value})

    def test_impossible_ratio_must_stay_below_suspicious(self):
        with pytest.raises(ValueError):
            DetectionThresholds(impossible_travel_ratio=0.45, suspicious_travel_ratio=0.45)

    def test_nan_is_rejected(self):
        with pytest.raises(ValueError):
            DetectionThresholds(max_human_speed_kmh=float("nan"))

    def test_scoring_config_ordering(self):
        with pytest.raises(ValueError):
            BehaviorScoringConfig(low_risk_min_score=40, medium_risk_min_score=50)

    def test_feed_config_needs_positive_weight(self):
        with pytest.raises(ValueError):
            SyntheticFeedConfig(
                type_weights={AlertType.FRAUD: 0, AlertType.SUSPICIOUS: 0, AlertType.INFO: 0}
            )


class TestSettingsManager:
    """Runtime updates of thresholds and notifications."""

    def test_update_thresholds(self):
        store = InMemorySettingsStore()
        manager = SettingsManager(store)

        updated = manager.update_thresholds(max_human_speed_kmh=30)

        assert updated.max_human_speed_kmh == 30
        assert manager.thresholds.max_human_speed_kmh == 30
        assert store.data["thresholds"]["max_human_speed_kmh"] == 30

    def test_camel_case_keys_are_accepted(self):
        manager = SettingsManager()

        manager.update_thresholds({"impossibleTravelRatio": 0.2})

        assert manager.thresholds.impossible_travel_ratio == 0.2

    def test_rejected_update_keeps_previous_settings(self):
        store = InMemorySettingsStore()
        manager = SettingsManager(store)
        manager.update_thresholds(max_human_speed_kmh=30)
        saved = store.data

        with pytest.raises(ConfigOutOfRangeError) as exc_info:
            manager.update_thresholds(impossible_travel_ratio=0.9)

        assert exc_info.value.errors
        assert manager.thresholds.impossible_travel_ratio == 0.3
        assert manager.thresholds.max_human_speed_kmh == 30
        assert store.data == saved

    def test_unknown_key_is_rejected(self):
        manager = SettingsManager()
        with pytest.raises(ConfigOutOfRangeError):
            manager.update_thresholds(walking_speed=100)

    def test_update_notifications(self):
        manager = SettingsManager()

        manager.update_notifications(alert_on_suspicious=False, auto_refresh_interval=60)

        assert manager.notifications.alert_on_suspicious is False
        assert manager.notifications.auto_refresh_interval == 60
        assert manager.notifications.enable_alerts is True

    def test_refresh_interval_bounds(self):
        manager = SettingsManager()
        with pytest.raises(ConfigOutOfRangeError):
            manager.update_notifications(auto_refresh_interval=5)
        assert manager.notifications.auto_refresh_interval == 30

    def test_reset_to_defaults(self):
        store = InMemorySettingsStore()
        manager = SettingsManager(store)
        manager.update_thresholds(max_human_speed_kmh=30)

        settings = manager.reset_to_defaults()

        assert settings.thresholds == DetectionThresholds()
        assert store.data is None

    def test_partial_stored_document_is_merged_with_defaults(self):
        store = InMemorySettingsStore({"thresholds": {"maxHumanSpeedKmh": 35}})

        manager = SettingsManager(store)

        assert manager.thresholds.max_human_speed_kmh == 35
        assert manager.thresholds.impossible_travel_ratio == 0.3
        assert manager.notifications == NotificationSettings()

    def test_invalid_stored_document_falls_back_to_defaults(self):
        store = InMemorySettingsStore({"thresholds": {"impossible_travel_ratio": 0.9}})

        manager = SettingsManager(store)

        assert manager.thresholds == DetectionThresholds()


class TestJsonFileSettingsStore:
    """Settings kept in a JSON file."""

    def test_settings_survive_restart(self, tmp_path):
        path = tmp_path / "settings.json"
        SettingsManager(JsonFileSettingsStore(path)).update_thresholds(max_human_speed_kmh=20)

        reloaded = SettingsManager(JsonFileSettingsStore(path))

        assert reloaded.thresholds.max_human_speed_kmh == 20
        assert orjson.loads(path.read_bytes())["thresholds"]["max_human_speed_kmh"] == 20

    def test_missing_file_gives_defaults(self, tmp_path):
        manager = SettingsManager(JsonFileSettingsStore(tmp_path / "absent.json"))
        assert manager.settings.thresholds == DetectionThresholds()

    def test_corrupt_file_gives_defaults(self, tmp_path):
        path = tmp_path / "settings.json"
        path.write_text("{not json")

        manager = SettingsManager(JsonFileSettingsStore(path))

        assert manager.settings.thresholds == DetectionThresholds()

    def test_reset_removes_file(self, tmp_path):
        path = tmp_path / "settings.json"
        manager = SettingsManager(JsonFileSettingsStore(path))
        manager.update_notifications(enable_alerts=False)
        assert path.exists()

        manager.reset_to_defaults()

        assert not path.exists()
