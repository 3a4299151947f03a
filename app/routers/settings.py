# -*- coding: utf-8 -*-
from typing import Annotated

from fastapi import APIRouter, Depends

from app.dependencies import get_settings_manager
from app.modules.access_sentinel import SettingsManager
from app.modules.access_sentinel.config import (
    DetectionThresholds,
    NotificationSettings,
    SentinelSettings,
)
from app.pydantic_models import NotificationsUpdateIn, ThresholdsUpdateIn

router = APIRouter(
    prefix="/settings",
    tags=["Settings"],
    responses={422: {"description": "Value outside the allowed range"}},
)


@router.get("", response_model=SentinelSettings)
async def get_settings(
    manager: Annotated[SettingsManager, Depends(get_settings_manager)],
):
    return manager.settings


@router.patch("/thresholds", response_model=DetectionThresholds)
async def update_thresholds(
    data: ThresholdsUpdateIn,
    manager: Annotated[SettingsManager, Depends(get_settings_manager)],
):
    return manager.update_thresholds(data.model_dump(exclude_unset=True))


@router.patch("/notifications", response_model=NotificationSettings)
async def update_notifications(
    data: NotificationsUpdateIn,
    manager: Annotated[SettingsManager, Depends(get_settings_manager)],
):
    return manager.update_notifications(data.model_dump(exclude_unset=True))


@router.post("/reset", response_model=SentinelSettings)
async def reset_settings(
    manager: Annotated[SettingsManager, Depends(get_settings_manager)],
):
    return manager.reset_to_defaults()
