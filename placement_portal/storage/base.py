"""
Storage interface.

Routes and services only talk to `PortalStorage`; the SQL and in-memory
backends are interchangeable behind it.

Create methods take a dict of field values. The backend assigns `id` and the
creation timestamp unless the dict already carries them.
"""

import uuid
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

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


def new_id() -> str:
    return str(uuid.uuid4())


class PortalStorage(ABC):

    def initialize(self) -> None:
        """Prepare the backing store (create tables etc.). No-op by default."""

    def ping(self) -> bool:
        return True

    # ---------------- users ----------------

    @abstractmethod
    def get_user(self, user_id: str) -> Optional[User]: ...

    @abstractmethod
    def get_user_by_email(self, email: str) -> Optional[User]: ...

    @abstractmethod
    def create_user(self, data: Dict[str, Any]) -> Optional[User]:
        """Store a new user. None if the email is already registered."""

    # ---------------- student profiles ----------------

    @abstractmethod
    def get_student_profile_by_user_id(self, user_id: str) -> Optional[StudentProfile]: ...

    @abstractmethod
    def create_student_profile(self, data: Dict[str, Any]) -> StudentProfile: ...

    @abstractmethod
    def update_student_profile(self, user_id: str, updates: Dict[str, Any]) -> Optional[StudentProfile]:
        """Apply `updates` to the user's profile. None if the user has no profile."""

    @abstractmethod
    def list_student_profiles(self) -> List[StudentProfile]: ...

    # ---------------- jobs ----------------

    @abstractmethod
    def list_jobs(self) -> List[Job]:
        """All jobs, newest first."""

    @abstractmethod
    def get_job(self, job_id: str) -> Optional[Job]: ...

    @abstractmethod
    def create_job(self, data: Dict[str, Any]) -> Job: ...

    @abstractmethod
    def update_job(self, job_id: str, updates: Dict[str, Any]) -> Optional[Job]: ...

    @abstractmethod
    def delete_job(self, job_id: str) -> bool:
        """Delete a job and its applications. False if it did not exist."""

    # ---------------- applications ----------------

    @abstractmethod
    def create_application(self, job_id: str, student_id: str) -> Optional[Application]:
        """Store a pending application. None if the pair already has one."""

    @abstractmethod
    def get_application(self, application_id: str) -> Optional[Application]: ...

    @abstractmethod
    def list_applications_by_student(self, student_id: str) -> List[Application]: ...

    @abstractmethod
    def list_applications_by_job(self, job_id: str) -> List[Application]: ...

    @abstractmethod
    def has_applied(self, student_id: str, job_id: str) -> bool: ...

    @abstractmethod
    def list_applications(self) -> List[Application]: ...

    @abstractmethod
    def update_application_status(
        self, application_id: str, status: ApplicationStatus
    ) -> Optional[Application]: ...

    # ---------------- forum posts ----------------

    @abstractmethod
    def list_forum_posts(self) -> List[ForumPost]:
        """All posts, newest first."""

    @abstractmethod
    def create_forum_post(self, data: Dict[str, Any]) -> ForumPost: ...

    @abstractmethod
    def delete_forum_post(self, post_id: str) -> bool: ...

    # ---------------- notifications ----------------

    @abstractmethod
    def list_active_notifications(self) -> List[Notification]:
        """Active notifications, newest first."""

    @abstractmethod
    def create_notification(self, data: Dict[str, Any]) -> Notification: ...

    # ---------------- activities ----------------

    @abstractmethod
    def list_activities_by_user(self, user_id: str, limit: int = 10) -> List[Activity]:
        """The user's most recent activities, newest first."""

    @abstractmethod
    def create_activity(self, data: Dict[str, Any]) -> Activity: ...
