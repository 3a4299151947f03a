# -*- coding: utf-8 -*-
from typing import Annotated, List, Optional

from fastapi import APIRouter, Depends

from app.dependencies import get_service
from app.modules.access_sentinel import AccessSentinelService
from app.modules.access_sentinel.domain import TravelAnalysis, TravelStatus
from app.pydantic_models import TravelStatisticsOut

router = APIRouter(
    prefix="/travel-analyses",
    tags=["Travel analyses"],
)


@router.get("", response_model=List[TravelAnalysis])
async def list_travel_analyses(
    service: Annotated[AccessSentinelService, Depends(get_service)],
    status: Optional[TravelStatus] = None,
):
    """Analyses of the last refresh, highest risk first"""
    return service.snapshot.analyses_with_status(status)


@router.get("/stats", response_model=TravelStatisticsOut)
async def get_travel_statistics(
    service: Annotated[AccessSentinelService, Depends(get_service)],
):
    snapshot = service.snapshot
    stats = snapshot.statistics
    return TravelStatisticsOut(
        total=stats.total,
        safe=stats.safe,
        suspicious=stats.suspicious,
        impossible=stats.impossible,
        flagged=stats.flagged,
        flagged_ratio=stats.flagged_ratio,
        event_count=snapshot.event_count,
        generation=snapshot.generation,
        computed_at=snapshot.computed_at,
    )
