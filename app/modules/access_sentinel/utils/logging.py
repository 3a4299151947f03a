"""Logging configuration using loguru for consistency with main app"""

import sys
from enum import Enum

from loguru import logger


class LogLevel(Enum):
    """Log levels for different deployment environments"""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"


def get_logger():
    """Get the loguru logger instance with access_sentinel context"""
    return logger.bind(name="access_sentinel")


def configure_logging(log_level: LogLevel) -> None:
    """Reset sinks for standalone use (CLI). The API configures its own in app.main"""
    logger.remove()
    logger.add(sys.stderr, level=log_level.value)
