# -*- coding: utf-8 -*-
from . import getenv_list_or_action, getenv_or_action
from .base import *  # noqa: F401, F403

# Logging
LOG_LEVEL = getenv_or_action("LOG_LEVEL", action="ignore", default="INFO")

# CORS configuration
ALLOWED_ORIGINS = getenv_list_or_action("ALLOWED_ORIGINS", action="ignore")
ALLOWED_ORIGINS_REGEX = getenv_or_action("ALLOWED_ORIGINS_REGEX", action="ignore")
if not ALLOWED_ORIGINS and not ALLOWED_ORIGINS_REGEX:
    raise EnvironmentError("ALLOWED_ORIGINS or ALLOWED_ORIGINS_REGEX must be set.")
ALLOWED_METHODS = getenv_list_or_action("ALLOWED_METHODS", action="raise")
ALLOWED_HEADERS = getenv_list_or_action("ALLOWED_HEADERS", action="raise")
ALLOW_CREDENTIALS = (
    getenv_or_action("ALLOW_CREDENTIALS", action="raise").lower() == "true"
)

# Access log source
ACCESS_EVENT_SOURCE = getenv_or_action("ACCESS_EVENT_SOURCE", action="raise").lower()
if ACCESS_EVENT_SOURCE == "csv":
    ACCESS_EVENTS_CSV_PATH = getenv_or_action("ACCESS_EVENTS_CSV_PATH", action="raise")

# Settings must survive restarts in production
SETTINGS_FILE_PATH = getenv_or_action("SETTINGS_FILE_PATH", action="raise")
