"""
Schemas module - Request/Response schemas for API endpoints.

Difference from models:
- Models: records as stored and computed internally
- Schemas: API contract (what client sends/receives)
"""

from placement_portal.schemas.schemas import (
    SignupRequest,
    LoginRequest,
    UserResponse,
    TokenResponse,
    StudentProfileUpdate,
    ResumeUploadResponse,
    StudentStatsResponse,
    JobCreate,
    JobUpdate,
    ApplicationCreate,
    ApplicationStatusUpdate,
    ForumPostCreate,
    NotificationCreate,
    MessageResponse,
    HealthResponse,
)
