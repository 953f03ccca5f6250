"""
Student Routes

GET /students/profile - Get own profile
PUT /students/profile - Update profile
POST /students/resume - Upload resume (PDF)
GET /students/stats - Number of jobs the student is eligible for
"""

from fastapi import APIRouter, HTTPException, Depends, UploadFile, File

from placement_portal.core.auth import get_current_student
from placement_portal.core.config import Settings, get_settings
from placement_portal.models import ActivityType, StudentProfile, User
from placement_portal.schemas.schemas import StudentProfileUpdate, ResumeUploadResponse, StudentStatsResponse
from placement_portal.services.activity_service import record_activity
from placement_portal.services.eligibility_service import count_eligible_jobs
from placement_portal.storage import PortalStorage, get_storage
from placement_portal.utils.file_upload import save_resume

router = APIRouter(prefix="/students", tags=["Students"])


@router.get("/profile", response_model=StudentProfile)
async def get_profile(
    student: User = Depends(get_current_student),
    storage: PortalStorage = Depends(get_storage)
):
    """Get current student's profile."""
    profile = storage.get_student_profile_by_user_id(student.id)
    if not profile:
        raise HTTPException(status_code=404, detail="Student profile not found")
    return profile


@router.put("/profile", response_model=StudentProfile)
async def update_profile(
    data: StudentProfileUpdate,
    student: User = Depends(get_current_student),
    storage: PortalStorage = Depends(get_storage)
):
    """Update student profile. Only provided fields are updated."""
    updates = data.model_dump(exclude_unset=True, exclude_none=True)
    if not updates:
        raise HTTPException(status_code=400, detail="No fields to update")

    profile = storage.update_student_profile(student.id, updates)
    if not profile:
        raise HTTPException(status_code=404, detail="Student profile not found")

    record_activity(storage, student, ActivityType.profile_update, "Updated profile information")
    return profile


@router.post("/resume", response_model=ResumeUploadResponse)
async def upload_resume(
    file: UploadFile = File(..., description="Resume file (PDF)"),
    student: User = Depends(get_current_student),
    storage: PortalStorage = Depends(get_storage),
    settings: Settings = Depends(get_settings)
):
    """
    Upload a resume.

    Supported format: PDF (max 5MB by default)
    """
    resume_url, filename = await save_resume(file, settings.upload_dir, settings.max_resume_size_mb)

    profile = storage.update_student_profile(student.id, {"resume_url": resume_url})
    if not profile:
        raise HTTPException(status_code=404, detail="Student profile not found")

    record_activity(storage, student, ActivityType.profile_update, "Updated resume")
    return ResumeUploadResponse(resume_url=resume_url, filename=filename)


@router.get("/stats", response_model=StudentStatsResponse)
async def get_stats(
    student: User = Depends(get_current_student),
    storage: PortalStorage = Depends(get_storage)
):
    """Count the jobs the student can currently apply to."""
    profile = storage.get_student_profile_by_user_id(student.id)
    return StudentStatsResponse(eligible_jobs=count_eligible_jobs(profile, storage.list_jobs()))
