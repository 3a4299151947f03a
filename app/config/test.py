# -*- coding: utf-8 -*-
"""Test configuration with deterministic, side effect free defaults."""

# Don't import from base to avoid environment variable loading

# Logging
LOG_LEVEL = "DEBUG"

# CORS configuration
ALLOWED_ORIGINS = ["*"]
ALLOWED_ORIGINS_REGEX = None
ALLOWED_METHODS = ["*"]
ALLOWED_HEADERS = ["*"]
ALLOW_CREDENTIALS = True

# Access log source
ACCESS_EVENT_SOURCE = "synthetic"
ACCESS_EVENTS_CSV_PATH = ""
SYNTHETIC_EVENT_COUNT = 60
SYNTHETIC_SEED = 42

# Settings stay in memory during tests
SETTINGS_FILE_PATH = ""

# Alert stream (no background emission)
ALERT_BUFFER_CAPACITY = 50
ALERT_FEED_ENABLED = False
ALERT_FEED_SEED = 7

# No background recompute
AUTO_REFRESH_ENABLED = False

# HTTP server
API_HOST = "127.0.0.1"
API_PORT = 8001
