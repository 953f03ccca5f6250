"""
In-memory storage backend.

Dictionaries keyed by id. Used for local demos (STORAGE_BACKEND=memory) and
for service tests. Records are copied on the way in and out so callers can
never mutate stored state by accident.
"""

import logging
from typing import Any, Dict, List, Optional

from placement_portal.core.clock import utc_now
from placement_portal.models import (
    Activity,
    Application,
    ApplicationStatus,
    ForumPost,
    Job,
    Notification,
    StudentProfile,
    User,
)
from placement_portal.storage.base import PortalStorage, new_id

logger = logging.getLogger(__name__)


class MemoryStorage(PortalStorage):

    def __init__(self):
        self.users: Dict[str, User] = {}
        self.student_profiles: Dict[str, StudentProfile] = {}
        self.jobs: Dict[str, Job] = {}
        self.applications: Dict[str, Application] = {}
        self.forum_posts: Dict[str, ForumPost] = {}
        self.notifications: Dict[str, Notification] = {}
        self.activities: Dict[str, Activity] = {}

    # ---------------- users ----------------

    def get_user(self, user_id: str) -> Optional[User]:
        user = self.users.get(user_id)
        return user.model_copy() if user else None

    def get_user_by_email(self, email: str) -> Optional[User]:
        for user in self.users.values():
            if user.email == email:
                return user.model_copy()
        return None

    def create_user(self, data: Dict[str, Any]) -> Optional[User]:
        if self.get_user_by_email(data["email"]):
            logger.info("Duplicate signup rejected: %s", data["email"])
            return None
        user = User.model_validate({"id": new_id(), "created_at": utc_now(), **data})
        self.users[user.id] = user
        return user.model_copy()

    # ---------------- student profiles ----------------

    def _profile_for(self, user_id: str) -> Optional[StudentProfile]:
        for profile in self.student_profiles.values():
            if profile.user_id == user_id:
                return profile
        return None

    def get_student_profile_by_user_id(self, user_id: str) -> Optional[StudentProfile]:
        profile = self._profile_for(user_id)
        return profile.model_copy(deep=True) if profile else None

    def create_student_profile(self, data: Dict[str, Any]) -> StudentProfile:
        profile = StudentProfile.model_validate({"id": new_id(), **data})
        self.student_profiles[profile.id] = profile
        return profile.model_copy(deep=True)

    def update_student_profile(self, user_id: str, updates: Dict[str, Any]) -> Optional[StudentProfile]:
        profile = self._profile_for(user_id)
        if profile is None:
            return None
        updated = StudentProfile.model_validate({**profile.model_dump(), **updates})
        self.student_profiles[profile.id] = updated
        return updated.model_copy(deep=True)

    def list_student_profiles(self) -> List[StudentProfile]:
        return [p.model_copy(deep=True) for p in self.student_profiles.values()]

    # ---------------- jobs ----------------

    def list_jobs(self) -> List[Job]:
        ordered = sorted(self.jobs.values(), key=lambda j: j.created_at, reverse=True)
        return [j.model_copy(deep=True) for j in ordered]

    def get_job(self, job_id: str) -> Optional[Job]:
        job = self.jobs.get(job_id)
        return job.model_copy(deep=True) if job else None

    def create_job(self, data: Dict[str, Any]) -> Job:
        job = Job.model_validate({"id": new_id(), "created_at": utc_now(), **data})
        self.jobs[job.id] = job
        return job.model_copy(deep=True)

    def update_job(self, job_id: str, updates: Dict[str, Any]) -> Optional[Job]:
        job = self.jobs.get(job_id)
        if job is None:
            return None
        updated = Job.model_validate({**job.model_dump(), **updates})
        self.jobs[job_id] = updated
        return updated.model_copy(deep=True)

    def delete_job(self, job_id: str) -> bool:
        if self.jobs.pop(job_id, None) is None:
            return False
        for app_id in [a.id for a in self.applications.values() if a.job_id == job_id]:
            del self.applications[app_id]
        return True

    # ---------------- applications ----------------

    def create_application(self, job_id: str, student_id: str) -> Optional[Application]:
        # Unique per (student, job), like the SQL constraint
        if self._find_application(student_id, job_id):
            logger.info("Duplicate application rejected: student=%s job=%s", student_id, job_id)
            return None
        application = Application(
            id=new_id(),
            job_id=job_id,
            student_id=student_id,
            applied_at=utc_now(),
            status=ApplicationStatus.pending,
        )
        self.applications[application.id] = application
        return application.model_copy()

    def get_application(self, application_id: str) -> Optional[Application]:
        application = self.applications.get(application_id)
        return application.model_copy() if application else None

    def list_applications_by_student(self, student_id: str) -> List[Application]:
        found = [a for a in self.applications.values() if a.student_id == student_id]
        found.sort(key=lambda a: a.applied_at, reverse=True)
        return [a.model_copy() for a in found]

    def list_applications_by_job(self, job_id: str) -> List[Application]:
        found = [a for a in self.applications.values() if a.job_id == job_id]
        found.sort(key=lambda a: a.applied_at, reverse=True)
        return [a.model_copy() for a in found]

    def _find_application(self, student_id: str, job_id: str) -> Optional[Application]:
        for application in self.applications.values():
            if application.student_id == student_id and application.job_id == job_id:
                return application
        return None

    def has_applied(self, student_id: str, job_id: str) -> bool:
        return self._find_application(student_id, job_id) is not None

    def list_applications(self) -> List[Application]:
        return [a.model_copy() for a in self.applications.values()]

    def update_application_status(
        self, application_id: str, status: ApplicationStatus
    ) -> Optional[Application]:
        application = self.applications.get(application_id)
        if application is None:
            return None
        application.status = ApplicationStatus(status)
        return application.model_copy()

    # ---------------- forum posts ----------------

    def list_forum_posts(self) -> List[ForumPost]:
        ordered = sorted(self.forum_posts.values(), key=lambda p: p.created_at, reverse=True)
        return [p.model_copy(deep=True) for p in ordered]

    def create_forum_post(self, data: Dict[str, Any]) -> ForumPost:
        post = ForumPost.model_validate({"id": new_id(), "created_at": utc_now(), **data})
        self.forum_posts[post.id] = post
        return post.model_copy(deep=True)

    def delete_forum_post(self, post_id: str) -> bool:
        return self.forum_posts.pop(post_id, None) is not None

    # ---------------- notifications ----------------

    def list_active_notifications(self) -> List[Notification]:
        active = [n for n in self.notifications.values() if n.is_active]
        active.sort(key=lambda n: n.created_at, reverse=True)
        return [n.model_copy() for n in active]

    def create_notification(self, data: Dict[str, Any]) -> Notification:
        notification = Notification.model_validate(
            {"id": new_id(), "created_at": utc_now(), **data}
        )
        self.notifications[notification.id] = notification
        return notification.model_copy()

    # ---------------- activities ----------------

    def list_activities_by_user(self, user_id: str, limit: int = 10) -> List[Activity]:
        found = [a for a in self.activities.values() if a.user_id == user_id]
        found.sort(key=lambda a: a.created_at, reverse=True)
        return [a.model_copy() for a in found[:limit]]

    def create_activity(self, data: Dict[str, Any]) -> Activity:
        activity = Activity.model_validate({"id": new_id(), "created_at": utc_now(), **data})
        self.activities[activity.id] = activity
        return activity.model_copy()
