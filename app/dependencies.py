# -*- coding: utf-8 -*-
from typing import Annotated

from fastapi import Depends, Request

from app.modules.access_sentinel import (
    AccessSentinelService,
    AlertStreamProcessor,
    Container,
    SettingsManager,
)


def get_sentinel_container(request: Request) -> Container:
    return request.app.state.container


def get_service(
    container: Annotated[Container, Depends(get_sentinel_container)]
) -> AccessSentinelService:
    return container.service


def get_alert_stream(
    container: Annotated[Container, Depends(get_sentinel_container)]
) -> AlertStreamProcessor:
    return container.alert_stream


def get_settings_manager(
    container: Annotated[Container, Depends(get_sentinel_container)]
) -> SettingsManager:
    return container.settings_manager
