"""Notification polling endpoint."""
from typing import List

from fastapi import APIRouter, Depends, Query

from app.core.dependencies import get_notification_sink
from app.services.restaurant.notifications import InMemoryNotificationSink, Notification

router = APIRouter()


@router.get("/api/notifications", response_model=List[Notification])
async def list_notifications(
    limit: int = Query(20, ge=1, le=100),
    sink: InMemoryNotificationSink = Depends(get_notification_sink),
):
    """Get the most recent notifications, newest first."""
    return sink.recent(limit)
