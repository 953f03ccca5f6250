"""
SQL storage backend.

PostgreSQL in production, SQLite in tests. Statements are built with
SQLAlchemy Core against the tables in `placement_portal.db.tables` and run
inside `get_db_session()` so every call commits or rolls back as a unit.
"""

import logging
from enum import Enum
from typing import Any, Dict, List, Optional, Type, TypeVar

from pydantic import BaseModel
from sqlalchemy import and_, delete, insert, select, update
from sqlalchemy.engine import Engine
from sqlalchemy.exc import IntegrityError

from placement_portal.core.clock import utc_now
from placement_portal.db.postgres import get_db_session, make_session_factory, test_postgres_connection
from placement_portal.db.tables import (
    activities,
    applications,
    forum_posts,
    jobs,
    metadata,
    notifications,
    student_profiles,
    users,
)
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

ModelT = TypeVar("ModelT", bound=BaseModel)


def _plain(data: Dict[str, Any]) -> Dict[str, Any]:
    """Unwrap enum members so drivers only ever see plain values."""
    return {k: (v.value if isinstance(v, Enum) else v) for k, v in data.items()}


def _to_model(model: Type[ModelT], row) -> Optional[ModelT]:
    if row is None:
        return None
    return model.model_validate(dict(row._mapping))


def is_unique_violation(error: IntegrityError, table, constraint_name: str) -> bool:
    """
    True when `error` was raised by the named unique constraint of `table`.

    PostgreSQL reports the constraint name; SQLite reports the column list.
    Anything else (foreign keys, NOT NULL, other constraints) is False.
    """
    message = str(error.orig)
    if f'"{constraint_name}"' in message:
        return True
    for constraint in table.constraints:
        if constraint.name == constraint_name:
            columns = ", ".join(f"{table.name}.{column.name}" for column in constraint.columns)
            return f"UNIQUE constraint failed: {columns}" in message
    return False


class SqlStorage(PortalStorage):

    def __init__(self, engine: Engine):
        self.engine = engine
        self.SessionLocal = make_session_factory(engine)

    def initialize(self) -> None:
        metadata.create_all(self.engine)
        logger.info("Database schema ready (%d tables)", len(metadata.tables))

    def ping(self) -> bool:
        return test_postgres_connection(self.engine)

    # ---------------- helpers ----------------

    def _fetch_one(self, model: Type[ModelT], stmt) -> Optional[ModelT]:
        with get_db_session(self.SessionLocal) as db:
            row = db.execute(stmt).fetchone()
        return _to_model(model, row)

    def _fetch_all(self, model: Type[ModelT], stmt) -> List[ModelT]:
        with get_db_session(self.SessionLocal) as db:
            rows = db.execute(stmt).fetchall()
        return [_to_model(model, row) for row in rows]

    def _insert(self, model: Type[ModelT], table, row: Dict[str, Any]) -> ModelT:
        row = _plain(row)
        with get_db_session(self.SessionLocal) as db:
            db.execute(insert(table).values(**row))
        return model.model_validate(row)

    def _update(self, table, key_column, key, updates: Dict[str, Any]) -> bool:
        if not updates:
            return True
        with get_db_session(self.SessionLocal) as db:
            result = db.execute(
                update(table).where(key_column == key).values(**_plain(updates))
            )
            return result.rowcount > 0

    def _delete(self, table, key) -> bool:
        with get_db_session(self.SessionLocal) as db:
            result = db.execute(delete(table).where(table.c.id == key))
            return result.rowcount > 0

    # ---------------- users ----------------

    def get_user(self, user_id: str) -> Optional[User]:
        return self._fetch_one(User, select(users).where(users.c.id == user_id))

    def get_user_by_email(self, email: str) -> Optional[User]:
        return self._fetch_one(User, select(users).where(users.c.email == email))

    def create_user(self, data: Dict[str, Any]) -> Optional[User]:
        row = {"id": new_id(), "created_at": utc_now(), **data}
        try:
            return self._insert(User, users, row)
        except IntegrityError as e:
            if not is_unique_violation(e, users, "uq_users_email"):
                raise
            logger.info("Duplicate signup rejected: %s", data.get("email"))
            return None

    # ---------------- student profiles ----------------

    def get_student_profile_by_user_id(self, user_id: str) -> Optional[StudentProfile]:
        return self._fetch_one(
            StudentProfile,
            select(student_profiles).where(student_profiles.c.user_id == user_id)
        )

    def create_student_profile(self, data: Dict[str, Any]) -> StudentProfile:
        row = {"id": new_id(), "course": "", "branch": "", "skills": [], **data}
        return self._insert(StudentProfile, student_profiles, row)

    def update_student_profile(self, user_id: str, updates: Dict[str, Any]) -> Optional[StudentProfile]:
        if not self._update(student_profiles, student_profiles.c.user_id, user_id, updates):
            return None
        return self.get_student_profile_by_user_id(user_id)

    def list_student_profiles(self) -> List[StudentProfile]:
        return self._fetch_all(StudentProfile, select(student_profiles))

    # ---------------- jobs ----------------

    def list_jobs(self) -> List[Job]:
        return self._fetch_all(Job, select(jobs).order_by(jobs.c.created_at.desc()))

    def get_job(self, job_id: str) -> Optional[Job]:
        return self._fetch_one(Job, select(jobs).where(jobs.c.id == job_id))

    def create_job(self, data: Dict[str, Any]) -> Job:
        row = {"id": new_id(), "created_at": utc_now(), "is_active": True, **data}
        return self._insert(Job, jobs, row)

    def update_job(self, job_id: str, updates: Dict[str, Any]) -> Optional[Job]:
        if not self._update(jobs, jobs.c.id, job_id, updates):
            return None
        return self.get_job(job_id)

    def delete_job(self, job_id: str) -> bool:
        with get_db_session(self.SessionLocal) as db:
            db.execute(delete(applications).where(applications.c.job_id == job_id))
            result = db.execute(delete(jobs).where(jobs.c.id == job_id))
            return result.rowcount > 0

    # ---------------- applications ----------------

    def create_application(self, job_id: str, student_id: str) -> Optional[Application]:
        row = {
            "id": new_id(),
            "job_id": job_id,
            "student_id": student_id,
            "applied_at": utc_now(),
            "status": ApplicationStatus.pending,
        }
        try:
            return self._insert(Application, applications, row)
        except IntegrityError as e:
            if not is_unique_violation(e, applications, "uq_applications_job_student"):
                raise
            logger.info("Duplicate application rejected: student=%s job=%s", student_id, job_id)
            return None

    def get_application(self, application_id: str) -> Optional[Application]:
        return self._fetch_one(
            Application, select(applications).where(applications.c.id == application_id)
        )

    def list_applications_by_student(self, student_id: str) -> List[Application]:
        return self._fetch_all(
            Application,
            select(applications)
            .where(applications.c.student_id == student_id)
            .order_by(applications.c.applied_at.desc())
        )

    def list_applications_by_job(self, job_id: str) -> List[Application]:
        return self._fetch_all(
            Application,
            select(applications)
            .where(applications.c.job_id == job_id)
            .order_by(applications.c.applied_at.desc())
        )

    def has_applied(self, student_id: str, job_id: str) -> bool:
        stmt = select(applications.c.id).where(
            and_(applications.c.student_id == student_id, applications.c.job_id == job_id)
        )
        with get_db_session(self.SessionLocal) as db:
            return db.execute(stmt).first() is not None

    def list_applications(self) -> List[Application]:
        return self._fetch_all(Application, select(applications))

    def update_application_status(
        self, application_id: str, status: ApplicationStatus
    ) -> Optional[Application]:
        if not self._update(applications, applications.c.id, application_id, {"status": status}):
            return None
        return self.get_application(application_id)

    # ---------------- forum posts ----------------

    def list_forum_posts(self) -> List[ForumPost]:
        return self._fetch_all(
            ForumPost, select(forum_posts).order_by(forum_posts.c.created_at.desc())
        )

    def create_forum_post(self, data: Dict[str, Any]) -> ForumPost:
        row = {"id": new_id(), "created_at": utc_now(), "tags": [], **data}
        return self._insert(ForumPost, forum_posts, row)

    def delete_forum_post(self, post_id: str) -> bool:
        return self._delete(forum_posts, post_id)

    # ---------------- notifications ----------------

    def list_active_notifications(self) -> List[Notification]:
        return self._fetch_all(
            Notification,
            select(notifications)
            .where(notifications.c.is_active.is_(True))
            .order_by(notifications.c.created_at.desc())
        )

    def create_notification(self, data: Dict[str, Any]) -> Notification:
        row = {"id": new_id(), "created_at": utc_now(), "is_active": True, **data}
        return self._insert(Notification, notifications, row)

    # ---------------- activities ----------------

    def list_activities_by_user(self, user_id: str, limit: int = 10) -> List[Activity]:
        return self._fetch_all(
            Activity,
            select(activities)
            .where(activities.c.user_id == user_id)
            .order_by(activities.c.created_at.desc())
            .limit(limit)
        )

    def create_activity(self, data: Dict[str, Any]) -> Activity:
        row = {"id": new_id(), "created_at": utc_now(), **data}
        return self._insert(Activity, activities, row)
