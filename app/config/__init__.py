# -*- coding: utf-8 -*-
from os import getenv

from loguru import logger


def getenv_or_action(env_name: str, *, action: str = "raise", default: str = None) -> str:
    """Read an environment variable; ``action`` decides what happens when it is unset"""
    if action not in ("raise", "warn", "ignore"):
        raise ValueError("action must be one of 'raise', 'warn' or 'ignore'")

    value = getenv(env_name, default)
    if value is None:
        if action == "raise":
            raise EnvironmentError(f"Environment variable {env_name} is not set.")
        if action == "warn":
            logger.warning(f"Warning: Environment variable {env_name} is not set.")
        return ""
    return value


def getenv_list_or_action(
    env_name: str, *, action: str = "raise", default: str = None
) -> list[str]:
    """Comma separated environment variable as a list of stripped items"""
    value = getenv_or_action(env_name, action=action, default=default)
    return [item.strip() for item in value.split(",") if item.strip()]


ENVIRONMENT = getenv_or_action("ENVIRONMENT", action="ignore", default="dev")

if ENVIRONMENT == "test":
    from app.config.test import *  # noqa: F401, F403
elif ENVIRONMENT in ("prod", "staging"):
    from app.config.prod import *  # noqa: F401, F403
else:
    from app.config.base import *  # noqa: F401, F403
