"""
Pydantic Schemas - Request/Response Validation

All API request and response schemas in one file for simplicity.
Records returned as-is (jobs, applications, posts...) use the models in
`placement_portal.models` directly.
"""

from pydantic import BaseModel, EmailStr, Field
from typing import Optional, List
from datetime import datetime
from decimal import Decimal

from placement_portal.models import ApplicationStatus, UserRole


# ============================================================
# AUTH SCHEMAS
# ============================================================

class SignupRequest(BaseModel):
    email: EmailStr
    password: str = Field(..., min_length=6)
    role: UserRole
    full_name: str = Field(..., min_length=2, max_length=200)

class LoginRequest(BaseModel):
    email: EmailStr
    password: str = Field(..., min_length=6)
    role: UserRole

class UserResponse(BaseModel):
    id: str
    email: str
    role: UserRole
    full_name: str
    created_at: datetime

class TokenResponse(BaseModel):
    access_token: str
    token_type: str = "bearer"
    user: UserResponse


# ============================================================
# STUDENT SCHEMAS
# ============================================================

class StudentProfileUpdate(BaseModel):
    course: Optional[str] = Field(None, min_length=1, max_length=100)
    branch: Optional[str] = Field(None, min_length=1, max_length=100)
    cgpa: Optional[Decimal] = Field(None, ge=0, le=10, decimal_places=2)
    graduation_year: Optional[int] = Field(None, ge=2020, le=2030)
    phone: Optional[str] = None
    skills: Optional[List[str]] = None
    linkedin: Optional[str] = None
    github: Optional[str] = None

class ResumeUploadResponse(BaseModel):
    resume_url: str
    filename: str

class StudentStatsResponse(BaseModel):
    eligible_jobs: int


# ============================================================
# JOB SCHEMAS
# ============================================================

class JobCreate(BaseModel):
    company_name: str = Field(..., min_length=1, max_length=200)
    position: str = Field(..., min_length=1, max_length=200)
    description: str = Field(..., min_length=10)
    location: str = Field(..., min_length=1, max_length=200)
    salary: Optional[str] = None
    min_cgpa: Decimal = Field(..., ge=0, le=10, decimal_places=2)
    eligible_courses: List[str] = Field(..., min_length=1)
    eligible_branches: List[str] = Field(..., min_length=1)
    deadline: datetime
    is_active: bool = True

class JobUpdate(BaseModel):
    company_name: Optional[str] = Field(None, min_length=1, max_length=200)
    position: Optional[str] = Field(None, min_length=1, max_length=200)
    description: Optional[str] = Field(None, min_length=10)
    location: Optional[str] = Field(None, min_length=1, max_length=200)
    salary: Optional[str] = None
    min_cgpa: Optional[Decimal] = Field(None, ge=0, le=10, decimal_places=2)
    eligible_courses: Optional[List[str]] = Field(None, min_length=1)
    eligible_branches: Optional[List[str]] = Field(None, min_length=1)
    deadline: Optional[datetime] = None
    is_active: Optional[bool] = None


# ============================================================
# APPLICATION SCHEMAS
# ============================================================

class ApplicationCreate(BaseModel):
    job_id: str

class ApplicationStatusUpdate(BaseModel):
    status: ApplicationStatus


# ============================================================
# FORUM / NOTIFICATION SCHEMAS
# ============================================================

class ForumPostCreate(BaseModel):
    company_name: str = Field(..., min_length=1, max_length=200)
    position: str = Field(..., min_length=1, max_length=200)
    experience: str = Field(..., min_length=20)
    interview_date: Optional[datetime] = None
    tags: List[str] = []

class NotificationCreate(BaseModel):
    title: str = Field(..., min_length=1, max_length=200)
    message: str = Field(..., min_length=1)


# ============================================================
# GENERIC SCHEMAS
# ============================================================

class MessageResponse(BaseModel):
    message: str
    success: bool = True

class HealthResponse(BaseModel):
    status: str
    storage: str
