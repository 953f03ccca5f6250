"""
Placement Portal - Main Application

FastAPI backend with:
- PostgreSQL (or in-memory) storage behind a repository interface
- JWT authentication with student/admin roles
- Eligibility-annotated job listings
- Placement analytics for admins
- Resume uploads served from /uploads

Run: uvicorn placement_portal.main:app --reload
"""

import logging

from fastapi import FastAPI, Depends
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from placement_portal import __version__
from placement_portal.api.routes import api_router
from placement_portal.core.config import get_settings
from placement_portal.core.logging import setup_logging
from placement_portal.schemas.schemas import HealthResponse
from placement_portal.storage import PortalStorage, get_storage
from placement_portal.utils.file_upload import UPLOAD_URL_PREFIX

settings = get_settings()
setup_logging(settings.log_level)

logger = logging.getLogger(__name__)

# Create FastAPI app
app = FastAPI(
    title="Placement Portal",
    description="""
    University placement portal backend.

    ## Features
    - **Authentication**: JWT-based auth for students and admins
    - **Students**: Academic profile, resume upload, eligibility stats
    - **Jobs**: Admin postings with CGPA/course/branch criteria
    - **Applications**: One per student per job, gated by eligibility
    - **Forum**: Interview experiences shared by students
    - **Notifications & Activity feed**
    - **Analytics**: Totals, average CGPA, course/branch distribution, recent applications
    """,
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc"
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include API routes
app.include_router(api_router, prefix="/api")

# Uploaded resumes; the directory is created on first upload
app.mount(UPLOAD_URL_PREFIX, StaticFiles(directory=settings.upload_dir, check_dir=False), name="uploads")


# Startup event
@app.on_event("startup")
async def startup_event():
    """Create the schema on startup."""
    try:
        get_storage().initialize()
        logger.info("Storage initialized (%s backend)", settings.storage_backend)
    except Exception as e:
        logger.warning("Storage initialization failed: %s", e)


@app.get("/", tags=["Health"])
async def root():
    return {"status": "healthy", "app": "Placement Portal", "version": __version__}


@app.get("/health", response_model=HealthResponse, tags=["Health"])
async def health_check(storage: PortalStorage = Depends(get_storage)):
    """Detailed health check."""
    reachable = storage.ping()
    return HealthResponse(
        status="healthy" if reachable else "degraded",
        storage="connected" if reachable else "disconnected"
    )
