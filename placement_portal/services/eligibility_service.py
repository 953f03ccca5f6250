"""
Eligibility Service

A student is eligible for a job when all four hold:
- CGPA at or above the job's minimum
- course is one of the job's eligible courses
- branch is one of the job's eligible branches
- the job is active

Eligibility is never stored. It is recomputed from (profile, job) on every
read, so profile or job edits take effect immediately.
"""

from typing import Iterable, List, Optional, Set

from placement_portal.models import AnnotatedJob, Job, StudentProfile


def is_profile_complete(profile: Optional[StudentProfile]) -> bool:
    """True once course, branch and CGPA have all been filled in."""
    return (
        profile is not None
        and bool(profile.course)
        and bool(profile.branch)
        and profile.cgpa is not None
    )


def is_eligible(profile: Optional[StudentProfile], job: Job) -> bool:
    """
    Binary eligibility gate.

    An incomplete profile is simply not eligible; it is not an error.
    """
    if not is_profile_complete(profile):
        return False

    return (
        job.is_active
        and profile.cgpa >= job.min_cgpa
        and profile.course in job.eligible_courses
        and profile.branch in job.eligible_branches
    )


def annotate_jobs(
    profile: Optional[StudentProfile],
    jobs: Iterable[Job],
    applied_job_ids: Set[str],
) -> List[AnnotatedJob]:
    """
    Attach `is_eligible` and `has_applied` to each job, keeping the input order.

    Args:
        profile: The viewing student's profile (may be None)
        jobs: Jobs to annotate
        applied_job_ids: Ids of jobs the student already applied to
    """
    return [
        AnnotatedJob(
            **job.model_dump(),
            is_eligible=is_eligible(profile, job),
            has_applied=job.id in applied_job_ids,
        )
        for job in jobs
    ]


def count_eligible_jobs(profile: Optional[StudentProfile], jobs: Iterable[Job]) -> int:
    return sum(1 for job in jobs if is_eligible(profile, job))
