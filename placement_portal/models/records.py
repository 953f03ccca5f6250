"""
Record models.

One class per stored entity. Storage backends return these, services take
them as input, and routes use most of them directly as response models.
"""

from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


# ============================================================
# ENUMS
# ============================================================

class UserRole(str, Enum):
    student = "student"
    admin = "admin"


class ApplicationStatus(str, Enum):
    pending = "pending"
    accepted = "accepted"
    rejected = "rejected"


class ActivityType(str, Enum):
    application = "application"
    post = "post"
    profile_update = "profile_update"


# ============================================================
# ENTITIES
# ============================================================

class User(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    email: str
    password_hash: str
    role: UserRole
    full_name: str
    created_at: datetime


class StudentProfile(BaseModel):
    """
    Academic profile, exactly one per student user.

    course/branch are empty and cgpa is None until the student fills them in.
    """
    model_config = ConfigDict(from_attributes=True)

    id: str
    user_id: str
    course: str = ""
    branch: str = ""
    cgpa: Optional[Decimal] = None
    graduation_year: Optional[int] = None
    skills: List[str] = Field(default_factory=list)
    phone: Optional[str] = None
    linkedin: Optional[str] = None
    github: Optional[str] = None
    resume_url: Optional[str] = None


class Job(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    company_name: str
    position: str
    description: str
    location: str
    salary: Optional[str] = None
    min_cgpa: Decimal
    eligible_courses: List[str]
    eligible_branches: List[str]
    deadline: datetime
    posted_by: str
    created_at: datetime
    is_active: bool = True


class AnnotatedJob(Job):
    """A job as seen by one student."""
    is_eligible: bool
    has_applied: bool


class Application(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    job_id: str
    student_id: str
    applied_at: datetime
    status: ApplicationStatus = ApplicationStatus.pending


class ForumPost(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    author_id: str
    author_name: str
    company_name: str
    position: str
    experience: str
    interview_date: Optional[datetime] = None
    tags: List[str] = Field(default_factory=list)
    created_at: datetime


class Notification(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    title: str
    message: str
    created_by: str
    created_at: datetime
    is_active: bool = True


class Activity(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    user_id: str
    type: ActivityType
    description: str
    created_at: datetime


# ============================================================
# ANALYTICS
# ============================================================

class DistributionEntry(BaseModel):
    name: str
    count: int


class PlacementAnalytics(BaseModel):
    total_students: int
    total_jobs: int
    active_jobs: int
    total_applications: int
    total_posts: int
    average_cgpa: float
    top_courses: List[DistributionEntry]
    top_branches: List[DistributionEntry]
    recent_applications: int
