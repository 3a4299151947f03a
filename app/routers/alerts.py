# -*- coding: utf-8 -*-
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status

from app.dependencies import get_alert_stream
from app.modules.access_sentinel import AlertStreamProcessor
from app.modules.access_sentinel.domain import Alert
from app.pydantic_models import AlertFeedOut, AlertTriggerIn, MarkAllReadOut

router = APIRouter(
    prefix="/alerts",
    tags=["Alerts"],
    responses={404: {"description": "Alert not found"}},
)


@router.get("", response_model=AlertFeedOut)
async def get_alert_feed(
    stream: Annotated[AlertStreamProcessor, Depends(get_alert_stream)],
):
    """Buffered alerts, newest first"""
    return AlertFeedOut(
        alerts=stream.alerts,
        unread_count=stream.unread_count,
        status=stream.status,
        capacity=stream.capacity,
    )


@router.post("/read-all", response_model=MarkAllReadOut)
async def mark_all_alerts_as_read(
    stream: Annotated[AlertStreamProcessor, Depends(get_alert_stream)],
):
    return MarkAllReadOut(updated=stream.mark_all_as_read())


@router.post("/test", response_model=Alert, status_code=status.HTTP_201_CREATED)
async def trigger_test_alert(
    stream: Annotated[AlertStreamProcessor, Depends(get_alert_stream)],
    data: AlertTriggerIn = AlertTriggerIn(),
):
    return stream.trigger_test_alert(data.type)


@router.post("/{alert_id}/read", response_model=Alert)
async def mark_alert_as_read(
    alert_id: str,
    stream: Annotated[AlertStreamProcessor, Depends(get_alert_stream)],
):
    if stream.get(alert_id) is None:
        raise HTTPException(status_code=404, detail="Alert not found")
    stream.mark_as_read(alert_id)
    return stream.get(alert_id)


@router.delete("", status_code=status.HTTP_204_NO_CONTENT)
async def clear_alerts(
    stream: Annotated[AlertStreamProcessor, Depends(get_alert_stream)],
):
    stream.clear()
