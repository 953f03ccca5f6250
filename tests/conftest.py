"""Test configuration and fixtures."""
from datetime import datetime, timedelta, timezone
from decimal import Decimal

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.pool import StaticPool

from placement_portal.core.config import Settings, get_settings
from placement_portal.main import app
from placement_portal.models import Job, StudentProfile
from placement_portal.storage import MemoryStorage, SqlStorage, get_storage

FIXED_NOW = datetime(2024, 11, 15, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def memory_storage():
    return MemoryStorage()


@pytest.fixture
def sql_storage():
    """SqlStorage over a private in-memory SQLite database."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool
    )
    storage = SqlStorage(engine)
    storage.initialize()
    yield storage
    engine.dispose()


@pytest.fixture(params=["memory", "sql"])
def storage(request):
    """Run the test once per storage backend."""
    return request.getfixturevalue(f"{request.param}_storage")


@pytest.fixture
def test_settings(tmp_path):
    return Settings(upload_dir=str(tmp_path / "uploads"), storage_backend="memory")


@pytest.fixture
def client(sql_storage, test_settings):
    """Create test client backed by SQLite, with dependency overrides."""
    app.dependency_overrides[get_storage] = lambda: sql_storage
    app.dependency_overrides[get_settings] = lambda: test_settings

    yield TestClient(app)

    app.dependency_overrides.clear()


# ============================================================
# RECORD BUILDERS
# ============================================================

def make_profile(**overrides) -> StudentProfile:
    data = {
        "id": "profile-1",
        "user_id": "student-1",
        "course": "B.Tech",
        "branch": "CSE",
        "cgpa": Decimal("8.0"),
        "graduation_year": 2025,
    }
    data.update(overrides)
    return StudentProfile(**data)


def make_job(**overrides) -> Job:
    data = {
        "id": "job-1",
        "company_name": "Infosys",
        "position": "Systems Engineer",
        "description": "Campus hiring for the 2025 batch.",
        "location": "Bengaluru",
        "min_cgpa": Decimal("7.5"),
        "eligible_courses": ["B.Tech"],
        "eligible_branches": ["CSE"],
        "deadline": FIXED_NOW + timedelta(days=30),
        "posted_by": "admin-1",
        "created_at": FIXED_NOW - timedelta(days=1),
        "is_active": True,
    }
    data.update(overrides)
    return Job(**data)


def job_payload(**overrides) -> dict:
    """JSON body for POST /api/jobs."""
    data = {
        "company_name": "Infosys",
        "position": "Systems Engineer",
        "description": "Campus hiring for the 2025 batch.",
        "location": "Bengaluru",
        "salary": "6 LPA",
        "min_cgpa": "7.5",
        "eligible_courses": ["B.Tech"],
        "eligible_branches": ["CSE"],
        "deadline": (datetime.now(timezone.utc) + timedelta(days=30)).isoformat(),
    }
    data.update(overrides)
    return data


# ============================================================
# API HELPERS
# ============================================================

def signup(client, email, role="student", full_name="Asha Verma", password="secret123") -> dict:
    """Register a user and return Authorization headers for it."""
    response = client.post(
        "/api/auth/signup",
        json={"email": email, "password": password, "role": role, "full_name": full_name}
    )
    assert response.status_code == 201, response.text
    return {"Authorization": f"Bearer {response.json()['access_token']}"}


@pytest.fixture
def admin_headers(client):
    return signup(client, "tpo@mody.ac.in", role="admin", full_name="Placement Officer")


@pytest.fixture
def student_headers(client):
    return signup(client, "asha@mody.ac.in")


@pytest.fixture
def complete_student_headers(client, student_headers):
    """A student whose profile qualifies for the default job payload."""
    response = client.put(
        "/api/students/profile",
        json={"course": "B.Tech", "branch": "CSE", "cgpa": "8.0"},
        headers=student_headers
    )
    assert response.status_code == 200, response.text
    return student_headers


@pytest.fixture
def posted_job(client, admin_headers):
    response = client.post("/api/jobs", json=job_payload(), headers=admin_headers)
    assert response.status_code == 201, response.text
    return response.json()
