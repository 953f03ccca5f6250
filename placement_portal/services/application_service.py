"""
Application Service

Handles a student applying to a job. Every expected failure comes back as an
outcome value; the route decides which HTTP status it maps to.

Order of checks:
1. Job exists
2. Student has not applied already
3. Profile is complete
4. Student is eligible (this also rejects inactive jobs)
"""

import logging
from enum import Enum
from typing import Optional

from pydantic import BaseModel

from placement_portal.models import ActivityType, Application, User
from placement_portal.services.activity_service import record_activity
from placement_portal.services.eligibility_service import is_eligible, is_profile_complete
from placement_portal.storage import PortalStorage

logger = logging.getLogger(__name__)


class ApplicationOutcome(str, Enum):
    created = "created"
    job_not_found = "job_not_found"
    already_applied = "already_applied"
    incomplete_profile = "incomplete_profile"
    not_eligible = "not_eligible"


class ApplicationResult(BaseModel):
    outcome: ApplicationOutcome
    application: Optional[Application] = None

    @property
    def success(self) -> bool:
        return self.outcome == ApplicationOutcome.created


def submit_application(storage: PortalStorage, student: User, job_id: str) -> ApplicationResult:
    """
    Apply `student` to `job_id`.

    Returns:
        ApplicationResult with the outcome and, when created, the application
    """
    job = storage.get_job(job_id)
    if job is None:
        return ApplicationResult(outcome=ApplicationOutcome.job_not_found)

    if storage.has_applied(student.id, job_id):
        return ApplicationResult(outcome=ApplicationOutcome.already_applied)

    profile = storage.get_student_profile_by_user_id(student.id)
    if not is_profile_complete(profile):
        return ApplicationResult(outcome=ApplicationOutcome.incomplete_profile)

    if not is_eligible(profile, job):
        return ApplicationResult(outcome=ApplicationOutcome.not_eligible)

    # The store enforces uniqueness too; a concurrent duplicate comes back as None
    application = storage.create_application(job_id, student.id)
    if application is None:
        return ApplicationResult(outcome=ApplicationOutcome.already_applied)

    record_activity(
        storage,
        student,
        ActivityType.application,
        f"Applied to {job.position} at {job.company_name}",
    )
    logger.info("Student %s applied to job %s (%s)", student.id, job.id, job.company_name)

    return ApplicationResult(outcome=ApplicationOutcome.created, application=application)
