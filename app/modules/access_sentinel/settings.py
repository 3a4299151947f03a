"""Settings persistence and runtime updates

The manager owns the active ``SentinelSettings`` value. Stores only move the
document in and out: it is loaded once when the manager is built and saved on
every accepted change.
"""

import threading
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any

import orjson
from pydantic import BaseModel, ValidationError

from app.modules.access_sentinel.config import (
    DetectionThresholds,
    NotificationSettings,
    SentinelSettings,
)
from app.modules.access_sentinel.domain.exceptions import ConfigOutOfRangeError
from app.modules.access_sentinel.utils import get_logger

logger = get_logger()


class SettingsStore(ABC):
    """Abstract persistence for the settings document"""

    @abstractmethod
    def load(self) -> dict[str, Any] | None:
        """Return the stored document or None when nothing was saved"""
        pass

    @abstractmethod
    def save(self, data: dict[str, Any]) -> None:
        pass

    @abstractmethod
    def clear(self) -> None:
        pass


class InMemorySettingsStore(SettingsStore):
    def __init__(self, data: dict[str, Any] | None = None):
        self.data = data

    def load(self) -> dict[str, Any] | None:
        return self.data

    def save(self, data: dict[str, Any]) -> None:
        self.data = data

    def clear(self) -> None:
        self.data = None


class JsonFileSettingsStore(SettingsStore):
    """Settings document kept as a JSON file"""

    def __init__(self, path: str | Path):
        self.path = Path(path)

    def load(self) -> dict[str, Any] | None:
        if not self.path.exists():
            return None
        try:
            data = orjson.loads(self.path.read_bytes())
        except orjson.JSONDecodeError:
            logger.warning(f"Ignoring unreadable settings file {self.path}")
            return None
        return data if isinstance(data, dict) else None

    def save(self, data: dict[str, Any]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_bytes(orjson.dumps(data, option=orjson.OPT_INDENT_2))

    def clear(self) -> None:
        self.path.unlink(missing_ok=True)


def _normalize_keys(model_cls: type[BaseModel], changes: dict[str, Any]) -> dict[str, Any]:
    """Map camelCase aliases to field names; unknown keys are rejected"""
    names_by_key = {}
    for name, field in model_cls.model_fields.items():
        names_by_key[name] = name
        if field.alias:
            names_by_key[field.alias] = name

    unknown = sorted(key for key in changes if key not in names_by_key)
    if unknown:
        raise ConfigOutOfRangeError(f"Unknown setting(s): {', '.join(unknown)}")
    return {names_by_key[key]: value for key, value in changes.items()}


def _describe_errors(exc: ValidationError) -> list[dict[str, Any]]:
    return [
        {"loc": [str(part) for part in error["loc"]], "msg": error["msg"]}
        for error in exc.errors()
    ]


class SettingsManager:
    """Validated, runtime adjustable settings shared by the analyzers"""

    def __init__(self, store: SettingsStore | None = None):
        self._store = store or InMemorySettingsStore()
        self._lock = threading.Lock()
        self._settings = self._load()

    @property
    def settings(self) -> SentinelSettings:
        return self._settings

    @property
    def thresholds(self) -> DetectionThresholds:
        return self._settings.thresholds

    @property
    def notifications(self) -> NotificationSettings:
        return self._settings.notifications

    def update_thresholds(self, changes: dict[str, Any] | None = None, **kwargs) -> DetectionThresholds:
        """Apply a partial threshold update; raises ConfigOutOfRangeError on rejection"""
        return self._update_section("thresholds", DetectionThresholds, {**(changes or {}), **kwargs})

    def update_notifications(self, changes: dict[str, Any] | None = None, **kwargs) -> NotificationSettings:
        """Apply a partial notification update; raises ConfigOutOfRangeError on rejection"""
        return self._update_section("notifications", NotificationSettings, {**(changes or {}), **kwargs})

    def reset_to_defaults(self) -> SentinelSettings:
        with self._lock:
            self._store.clear()
            self._settings = SentinelSettings()
            logger.info("Settings reset to defaults")
            return self._settings

    def _update_section(self, section: str, model_cls: type[BaseModel], changes: dict[str, Any]):
        with self._lock:
            current = getattr(self._settings, section)
            merged = {**current.model_dump(), **_normalize_keys(model_cls, changes)}
            try:
                updated = model_cls.model_validate(merged)
            except ValidationError as exc:
                logger.warning(f"Rejected {section} update {changes}: {exc.error_count()} error(s)")
                raise ConfigOutOfRangeError(
                    f"Invalid {section} configuration", errors=_describe_errors(exc)
                ) from exc

            candidate = self._settings.model_copy(update={section: updated})
            self._store.save(candidate.model_dump(mode="json"))
            self._settings = candidate
            logger.info(f"Updated {section}: {changes}")
            return updated

    def _load(self) -> SentinelSettings:
        stored = self._store.load()
        if not stored:
            return SentinelSettings()

        defaults = SentinelSettings().model_dump()
        sections = {"thresholds": DetectionThresholds, "notifications": NotificationSettings}
        try:
            merged = {
                section: {
                    **defaults[section],
                    **_normalize_keys(model_cls, _section_dict(stored.get(section))),
                }
                for section, model_cls in sections.items()
            }
            return SentinelSettings.model_validate(merged)
        except (ValidationError, ConfigOutOfRangeError):
            logger.warning("Stored settings are invalid, falling back to defaults")
            return SentinelSettings()


def _section_dict(value: Any) -> dict[str, Any]:
    return value if isinstance(value, dict) else {}
