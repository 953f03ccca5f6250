"""
Application Routes

POST /applications - Apply to a job (student only)
GET /applications/me - Get my applications
PUT /applications/{application_id}/status - Update application status (admin only)
"""

from fastapi import APIRouter, HTTPException, Depends
from typing import List

from placement_portal.core.auth import get_current_student, get_current_admin
from placement_portal.models import Application, User
from placement_portal.schemas.schemas import ApplicationCreate, ApplicationStatusUpdate
from placement_portal.services.application_service import ApplicationOutcome, submit_application
from placement_portal.storage import PortalStorage, get_storage

router = APIRouter(prefix="/applications", tags=["Applications"])

# outcome -> (status code, detail)
OUTCOME_ERRORS = {
    ApplicationOutcome.job_not_found: (404, "Job not found"),
    ApplicationOutcome.already_applied: (409, "Already applied to this job"),
    ApplicationOutcome.incomplete_profile: (400, "Please complete your profile first"),
    ApplicationOutcome.not_eligible: (403, "Not eligible for this job"),
}


@router.post("", response_model=Application, status_code=201)
async def apply_to_job(
    request: ApplicationCreate,
    student: User = Depends(get_current_student),
    storage: PortalStorage = Depends(get_storage)
):
    """Apply to a job. Students only. Cannot apply twice to same job."""
    result = submit_application(storage, student, request.job_id)

    if not result.success:
        status_code, detail = OUTCOME_ERRORS[result.outcome]
        raise HTTPException(status_code=status_code, detail=detail)

    return result.application


@router.get("/me", response_model=List[Application])
async def get_my_applications(
    student: User = Depends(get_current_student),
    storage: PortalStorage = Depends(get_storage)
):
    """Get all job applications for current student."""
    return storage.list_applications_by_student(student.id)


@router.put("/{application_id}/status", response_model=Application)
async def update_application_status(
    application_id: str,
    update: ApplicationStatusUpdate,
    admin: User = Depends(get_current_admin),
    storage: PortalStorage = Depends(get_storage)
):
    """Update status of a job application."""
    application = storage.update_application_status(application_id, update.status)
    if not application:
        raise HTTPException(status_code=404, detail="Application not found")
    return application
