"""
Models module - Pydantic records shared by storage, services and routes.

Difference from schemas:
- Models: records as they live in the store (and plain results computed from them)
- Schemas: API contract (what client sends/receives)
"""

from placement_portal.models.records import (
    UserRole,
    ApplicationStatus,
    ActivityType,
    User,
    StudentProfile,
    Job,
    AnnotatedJob,
    Application,
    ForumPost,
    Notification,
    Activity,
    DistributionEntry,
    PlacementAnalytics,
)

__all__ = [
    "UserRole",
    "ApplicationStatus",
    "ActivityType",
    "User",
    "StudentProfile",
    "Job",
    "AnnotatedJob",
    "Application",
    "ForumPost",
    "Notification",
    "Activity",
    "DistributionEntry",
    "PlacementAnalytics",
]
