"""Tests for the student profile, resume and stats endpoints."""
import os
from decimal import Decimal

import pytest

from conftest import job_payload

pytestmark = pytest.mark.api


def test_update_profile_changes_only_given_fields(client, student_headers):
    response = client.put(
        "/api/students/profile",
        json={"course": "B.Tech", "branch": "CSE", "cgpa": "8.45", "skills": ["Python", "React"]},
        headers=student_headers
    )

    assert response.status_code == 200
    profile = response.json()
    assert profile["course"] == "B.Tech"
    assert Decimal(str(profile["cgpa"])) == Decimal("8.45")
    assert profile["skills"] == ["Python", "React"]

    response = client.put("/api/students/profile", json={"phone": "9876543210"}, headers=student_headers)
    profile = response.json()
    assert profile["phone"] == "9876543210"
    assert profile["course"] == "B.Tech"


def test_empty_profile_update_rejected(client, student_headers):
    response = client.put("/api/students/profile", json={}, headers=student_headers)
    assert response.status_code == 400


@pytest.mark.parametrize("payload", [
    {"cgpa": "10.5"},
    {"cgpa": "-1"},
    {"graduation_year": 2040},
])
def test_profile_validation(client, student_headers, payload):
    response = client.put("/api/students/profile", json=payload, headers=student_headers)
    assert response.status_code == 422


def test_profile_update_recorded_in_activity_feed(client, student_headers):
    client.put("/api/students/profile", json={"branch": "ECE"}, headers=student_headers)

    feed = client.get("/api/activities", headers=student_headers).json()
    assert feed[0]["type"] == "profile_update"
    assert feed[0]["description"] == "Updated profile information"


def test_upload_pdf_resume(client, student_headers, test_settings):
    response = client.post(
        "/api/students/resume",
        files={"file": ("asha_resume.pdf", b"%PDF-1.4 minimal", "application/pdf")},
        headers=student_headers
    )

    assert response.status_code == 200
    body = response.json()
    assert body["filename"] == "asha_resume.pdf"
    assert body["resume_url"].startswith("/uploads/resume-")
    assert body["resume_url"].endswith(".pdf")

    stored = os.path.join(test_settings.upload_dir, body["resume_url"].rsplit("/", 1)[1])
    assert os.path.exists(stored)

    profile = client.get("/api/students/profile", headers=student_headers).json()
    assert profile["resume_url"] == body["resume_url"]


def test_upload_rejects_non_pdf(client, student_headers):
    response = client.post(
        "/api/students/resume",
        files={"file": ("resume.docx", b"PK\x03\x04", "application/octet-stream")},
        headers=student_headers
    )
    assert response.status_code == 400


def test_upload_rejects_oversized_file(client, student_headers, test_settings):
    test_settings.max_resume_size_mb = 1
    response = client.post(
        "/api/students/resume",
        files={"file": ("big.pdf", b"0" * (1024 * 1024 + 1), "application/pdf")},
        headers=student_headers
    )
    assert response.status_code == 413


def test_stats_counts_eligible_jobs(client, admin_headers, complete_student_headers):
    client.post("/api/jobs", json=job_payload(), headers=admin_headers)
    client.post("/api/jobs", json=job_payload(min_cgpa="9.0"), headers=admin_headers)
    client.post("/api/jobs", json=job_payload(eligible_branches=["ECE"]), headers=admin_headers)

    response = client.get("/api/students/stats", headers=complete_student_headers)
    assert response.json() == {"eligible_jobs": 1}


def test_stats_zero_for_incomplete_profile(client, admin_headers, student_headers):
    client.post("/api/jobs", json=job_payload(), headers=admin_headers)

    response = client.get("/api/students/stats", headers=student_headers)
    assert response.json() == {"eligible_jobs": 0}
