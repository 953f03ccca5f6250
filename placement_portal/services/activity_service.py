"""
Activity feed helpers.

Activities are append-only audit records shown on the student dashboard.
"""

import logging

from placement_portal.models import Activity, ActivityType, User
from placement_portal.storage import PortalStorage

logger = logging.getLogger(__name__)


def record_activity(
    storage: PortalStorage,
    user: User,
    activity_type: ActivityType,
    description: str,
) -> Activity:
    activity = storage.create_activity({
        "user_id": user.id,
        "type": activity_type,
        "description": description,
    })
    logger.debug("Activity %s for user %s: %s", activity_type.value, user.id, description)
    return activity
