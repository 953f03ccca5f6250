"""
Admin Routes

GET /admin/analytics - Placement dashboard numbers
"""

from datetime import datetime, timedelta

from fastapi import APIRouter, Depends

from placement_portal.core.auth import get_current_admin
from placement_portal.core.clock import utc_now
from placement_portal.core.config import Settings, get_settings
from placement_portal.models import PlacementAnalytics, User
from placement_portal.services.analytics_service import compute_analytics
from placement_portal.storage import PortalStorage, get_storage

router = APIRouter(prefix="/admin", tags=["Admin"])


@router.get("/analytics", response_model=PlacementAnalytics)
async def get_analytics(
    admin: User = Depends(get_current_admin),
    storage: PortalStorage = Depends(get_storage),
    settings: Settings = Depends(get_settings),
    now: datetime = Depends(utc_now)
):
    """
    Get placement analytics computed from the current data.

    Includes totals, average CGPA, course/branch distributions and the
    number of applications in the last RECENT_APPLICATION_DAYS days.
    """
    return compute_analytics(
        profiles=storage.list_student_profiles(),
        jobs=storage.list_jobs(),
        applications=storage.list_applications(),
        posts=storage.list_forum_posts(),
        now=now,
        window=timedelta(days=settings.recent_application_days),
    )
