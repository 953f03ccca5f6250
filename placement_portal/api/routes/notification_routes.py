"""
Notification & Activity Routes

GET /notifications - Active notifications (student only)
POST /notifications - Publish a notification (admin only)
GET /activities - My recent activity feed (student only)
"""

from fastapi import APIRouter, Depends
from typing import List

from placement_portal.core.auth import get_current_student, get_current_admin
from placement_portal.models import Activity, Notification, User
from placement_portal.schemas.schemas import NotificationCreate
from placement_portal.storage import PortalStorage, get_storage

router = APIRouter(tags=["Notifications"])

ACTIVITY_FEED_SIZE = 10


@router.get("/notifications", response_model=List[Notification])
async def list_notifications(
    student: User = Depends(get_current_student),
    storage: PortalStorage = Depends(get_storage)
):
    """Get active notifications, newest first."""
    return storage.list_active_notifications()


@router.post("/notifications", response_model=Notification, status_code=201)
async def create_notification(
    notification: NotificationCreate,
    admin: User = Depends(get_current_admin),
    storage: PortalStorage = Depends(get_storage)
):
    """Publish a notification to all students."""
    return storage.create_notification({**notification.model_dump(), "created_by": admin.id})


@router.get("/activities", response_model=List[Activity])
async def list_activities(
    student: User = Depends(get_current_student),
    storage: PortalStorage = Depends(get_storage)
):
    """Get the current student's latest activities."""
    return storage.list_activities_by_user(student.id, limit=ACTIVITY_FEED_SIZE)
