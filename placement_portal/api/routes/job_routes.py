"""
Job Routes

GET /jobs - List all jobs
GET /jobs/eligible - Jobs annotated with eligibility for the current student
GET /jobs/{job_id} - Get job details
POST /jobs - Create job posting (admin only)
PUT /jobs/{job_id} - Update job (admin only)
DELETE /jobs/{job_id} - Delete job (admin only)
GET /jobs/{job_id}/applications - Applications received (admin only)
"""

import logging

from fastapi import APIRouter, HTTPException, Depends
from typing import List

from placement_portal.core.auth import get_current_user, get_current_student, get_current_admin
from placement_portal.models import AnnotatedJob, Application, Job, User
from placement_portal.schemas.schemas import JobCreate, JobUpdate, MessageResponse
from placement_portal.services.eligibility_service import annotate_jobs
from placement_portal.storage import PortalStorage, get_storage

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/jobs", tags=["Jobs"])


@router.get("", response_model=List[Job])
async def list_jobs(
    user: User = Depends(get_current_user),
    storage: PortalStorage = Depends(get_storage)
):
    """List all job postings, newest first."""
    return storage.list_jobs()


@router.get("/eligible", response_model=List[AnnotatedJob])
async def list_eligible_jobs(
    student: User = Depends(get_current_student),
    storage: PortalStorage = Depends(get_storage)
):
    """
    List all jobs with `is_eligible` and `has_applied` for the current student.

    Eligibility is computed fresh from the current profile on every call.
    """
    profile = storage.get_student_profile_by_user_id(student.id)
    applied = {a.job_id for a in storage.list_applications_by_student(student.id)}
    return annotate_jobs(profile, storage.list_jobs(), applied)


@router.get("/{job_id}", response_model=Job)
async def get_job(
    job_id: str,
    user: User = Depends(get_current_user),
    storage: PortalStorage = Depends(get_storage)
):
    """Get details of a specific job."""
    job = storage.get_job(job_id)
    if not job:
        raise HTTPException(status_code=404, detail="Job not found")
    return job


@router.post("", response_model=Job, status_code=201)
async def create_job(
    job: JobCreate,
    admin: User = Depends(get_current_admin),
    storage: PortalStorage = Depends(get_storage)
):
    """Create a new job posting. Only admins can create jobs."""
    created = storage.create_job({**job.model_dump(), "posted_by": admin.id})
    logger.info("Job %s posted by %s: %s at %s", created.id, admin.id, created.position, created.company_name)
    return created


@router.put("/{job_id}", response_model=Job)
async def update_job(
    job_id: str,
    update: JobUpdate,
    admin: User = Depends(get_current_admin),
    storage: PortalStorage = Depends(get_storage)
):
    """Update a job posting. Only provided fields are changed."""
    job = storage.update_job(job_id, update.model_dump(exclude_unset=True, exclude_none=True))
    if not job:
        raise HTTPException(status_code=404, detail="Job not found")
    return job


@router.delete("/{job_id}", response_model=MessageResponse)
async def delete_job(
    job_id: str,
    admin: User = Depends(get_current_admin),
    storage: PortalStorage = Depends(get_storage)
):
    """Delete a job posting. Cascades to applications."""
    if not storage.delete_job(job_id):
        raise HTTPException(status_code=404, detail="Job not found")

    logger.info("Job %s deleted by %s", job_id, admin.id)
    return MessageResponse(message="Job deleted successfully")


@router.get("/{job_id}/applications", response_model=List[Application])
async def list_job_applications(
    job_id: str,
    admin: User = Depends(get_current_admin),
    storage: PortalStorage = Depends(get_storage)
):
    """Get all applications received for one job."""
    if not storage.get_job(job_id):
        raise HTTPException(status_code=404, detail="Job not found")
    return storage.list_applications_by_job(job_id)
