"""
Authentication Routes

POST /auth/signup - Register new user (students also get an empty profile)
POST /auth/login - Login and get JWT token
GET /auth/me - Get current user info
"""

import logging

from fastapi import APIRouter, HTTPException, Depends

from placement_portal.core.auth import hash_password, verify_password, create_access_token, get_current_user
from placement_portal.core.clock import utc_now
from placement_portal.models import User, UserRole
from placement_portal.schemas.schemas import SignupRequest, LoginRequest, TokenResponse, UserResponse
from placement_portal.storage import PortalStorage, get_storage

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["Authentication"])


def to_user_response(user: User) -> UserResponse:
    return UserResponse(**user.model_dump(exclude={"password_hash"}))


def issue_token(user: User) -> TokenResponse:
    token = create_access_token(data={"sub": user.id, "role": user.role.value})
    return TokenResponse(access_token=token, user=to_user_response(user))


@router.post("/signup", response_model=TokenResponse, status_code=201)
async def signup(request: SignupRequest, storage: PortalStorage = Depends(get_storage)):
    """
    Register a new user account and log in straight away.

    Student accounts get an empty profile to fill in; they are not eligible
    for any job until course, branch and CGPA are set.
    """
    if storage.get_user_by_email(request.email):
        raise HTTPException(status_code=400, detail="User already exists")

    user = storage.create_user({
        "email": request.email,
        "password_hash": hash_password(request.password),
        "role": request.role,
        "full_name": request.full_name,
    })
    if user is None:
        # Lost a race with a concurrent signup for the same email
        raise HTTPException(status_code=400, detail="User already exists")

    if user.role == UserRole.student:
        storage.create_student_profile({
            "user_id": user.id,
            "course": "",
            "branch": "",
            "cgpa": None,
            "graduation_year": utc_now().year + 1,
            "skills": [],
        })

    logger.info("Registered %s account %s", user.role.value, user.id)
    return issue_token(user)


@router.post("/login", response_model=TokenResponse)
async def login(request: LoginRequest, storage: PortalStorage = Depends(get_storage)):
    """
    Login and receive JWT access token.

    The role picked on the login form must match the account's role.
    Include token in requests: Authorization: Bearer <token>
    """
    user = storage.get_user_by_email(request.email)

    if not user or user.role != request.role:
        raise HTTPException(status_code=401, detail="Invalid credentials")

    if not verify_password(request.password, user.password_hash):
        raise HTTPException(status_code=401, detail="Invalid credentials")

    return issue_token(user)


@router.get("/me", response_model=UserResponse)
async def get_me(user: User = Depends(get_current_user)):
    """Get current authenticated user's info."""
    return to_user_response(user)
