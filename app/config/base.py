# -*- coding: utf-8 -*-
from . import getenv_list_or_action, getenv_or_action

# Logging
LOG_LEVEL = getenv_or_action("LOG_LEVEL", default="INFO")

# CORS configuration
ALLOWED_ORIGINS = getenv_list_or_action("ALLOWED_ORIGINS", default="*")
ALLOWED_ORIGINS_REGEX = getenv_or_action("ALLOWED_ORIGINS_REGEX", action="ignore")
ALLOWED_METHODS = getenv_list_or_action("ALLOWED_METHODS", default="*")
ALLOWED_HEADERS = getenv_list_or_action("ALLOWED_HEADERS", default="*")
ALLOW_CREDENTIALS = getenv_or_action("ALLOW_CREDENTIALS", default="false").lower() == "true"

# Access log source: "synthetic" or "csv"
ACCESS_EVENT_SOURCE = getenv_or_action("ACCESS_EVENT_SOURCE", default="synthetic").lower()
ACCESS_EVENTS_CSV_PATH = getenv_or_action("ACCESS_EVENTS_CSV_PATH", action="ignore")
SYNTHETIC_EVENT_COUNT = int(getenv_or_action("SYNTHETIC_EVENT_COUNT", default="60"))
SYNTHETIC_SEED = getenv_or_action("SYNTHETIC_SEED", action="ignore")
SYNTHETIC_SEED = int(SYNTHETIC_SEED) if SYNTHETIC_SEED else None

# Persisted detection settings; empty keeps them in memory only
SETTINGS_FILE_PATH = getenv_or_action(
    "SETTINGS_FILE_PATH", default="data/access_sentinel_settings.json"
)

# Alert stream
ALERT_BUFFER_CAPACITY = int(getenv_or_action("ALERT_BUFFER_CAPACITY", default="50"))
ALERT_FEED_ENABLED = getenv_or_action("ALERT_FEED_ENABLED", default="true").lower() == "true"
ALERT_FEED_SEED = getenv_or_action("ALERT_FEED_SEED", action="ignore")
ALERT_FEED_SEED = int(ALERT_FEED_SEED) if ALERT_FEED_SEED else None

# Periodic recompute of the analyses
AUTO_REFRESH_ENABLED = getenv_or_action("AUTO_REFRESH_ENABLED", default="true").lower() == "true"

# HTTP server
API_HOST = getenv_or_action("API_HOST", default="0.0.0.0")
API_PORT = int(getenv_or_action("API_PORT", default="8000"))
