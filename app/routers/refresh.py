# -*- coding: utf-8 -*-
import asyncio
from typing import Annotated

from fastapi import APIRouter, Depends

from app.dependencies import get_service
from app.modules.access_sentinel import AccessSentinelService
from app.pydantic_models import RefreshOut

router = APIRouter(
    tags=["Refresh"],
    responses={503: {"description": "Access log source unavailable"}},
)


@router.post("/refresh", response_model=RefreshOut)
async def refresh(
    service: Annotated[AccessSentinelService, Depends(get_service)],
):
    """Recompute every analysis from the access log now"""
    snapshot = await asyncio.to_thread(service.refresh)
    return RefreshOut(
        generation=snapshot.generation,
        computed_at=snapshot.computed_at,
        event_count=snapshot.event_count,
        analysis_count=len(snapshot.analyses),
        unread_alerts=service.alert_stream.unread_count,
    )
