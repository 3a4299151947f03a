# -*- coding: utf-8 -*-
from typing import Annotated, List

from fastapi import APIRouter, Depends

from app.dependencies import get_service
from app.modules.access_sentinel import AccessSentinelService
from app.modules.access_sentinel.domain import BehaviorPattern, BehaviorSummary

router = APIRouter(
    prefix="/behavior-patterns",
    tags=["Behavior patterns"],
)


@router.get("", response_model=List[BehaviorPattern])
async def list_behavior_patterns(
    service: Annotated[AccessSentinelService, Depends(get_service)],
):
    return list(service.snapshot.patterns)


@router.get("/summary", response_model=BehaviorSummary)
async def get_behavior_summary(
    service: Annotated[AccessSentinelService, Depends(get_service)],
):
    return service.snapshot.summary
