"""Tests for job postings and the eligibility-annotated listing."""
from decimal import Decimal

import pytest

from conftest import job_payload

pytestmark = pytest.mark.api


def test_admin_creates_job(client, admin_headers):
    response = client.post("/api/jobs", json=job_payload(), headers=admin_headers)

    assert response.status_code == 201
    job = response.json()
    assert job["company_name"] == "Infosys"
    assert Decimal(str(job["min_cgpa"])) == Decimal("7.5")
    assert job["eligible_courses"] == ["B.Tech"]
    assert job["is_active"] is True

    me = client.get("/api/auth/me", headers=admin_headers).json()
    assert job["posted_by"] == me["id"]


def test_student_cannot_create_job(client, student_headers):
    response = client.post("/api/jobs", json=job_payload(), headers=student_headers)
    assert response.status_code == 403


@pytest.mark.parametrize("overrides", [
    {"eligible_courses": []},
    {"min_cgpa": "11"},
    {"description": "short"},
])
def test_job_validation(client, admin_headers, overrides):
    response = client.post("/api/jobs", json=job_payload(**overrides), headers=admin_headers)
    assert response.status_code == 422


def test_list_and_get_jobs(client, student_headers, posted_job):
    jobs = client.get("/api/jobs", headers=student_headers).json()
    assert [j["id"] for j in jobs] == [posted_job["id"]]

    response = client.get(f"/api/jobs/{posted_job['id']}", headers=student_headers)
    assert response.json()["position"] == "Systems Engineer"

    assert client.get("/api/jobs/missing", headers=student_headers).status_code == 404


def test_update_job(client, admin_headers, posted_job):
    response = client.put(
        f"/api/jobs/{posted_job['id']}",
        json={"is_active": False, "salary": "7 LPA"},
        headers=admin_headers
    )

    assert response.status_code == 200
    assert response.json()["is_active"] is False
    assert response.json()["salary"] == "7 LPA"
    assert response.json()["company_name"] == "Infosys"

    response = client.put("/api/jobs/missing", json={"is_active": False}, headers=admin_headers)
    assert response.status_code == 404


def test_delete_job(client, admin_headers, posted_job):
    response = client.delete(f"/api/jobs/{posted_job['id']}", headers=admin_headers)
    assert response.status_code == 200

    assert client.get(f"/api/jobs/{posted_job['id']}", headers=admin_headers).status_code == 404
    assert client.delete(f"/api/jobs/{posted_job['id']}", headers=admin_headers).status_code == 404


def test_eligible_listing_annotates_every_job(client, admin_headers, complete_student_headers):
    open_job = client.post("/api/jobs", json=job_payload(), headers=admin_headers).json()
    strict_job = client.post("/api/jobs", json=job_payload(min_cgpa="9.5"), headers=admin_headers).json()

    client.post("/api/applications", json={"job_id": open_job["id"]}, headers=complete_student_headers)

    listing = {j["id"]: j for j in client.get("/api/jobs/eligible", headers=complete_student_headers).json()}

    assert len(listing) == 2
    assert listing[open_job["id"]]["is_eligible"] is True
    assert listing[open_job["id"]]["has_applied"] is True
    assert listing[strict_job["id"]]["is_eligible"] is False
    assert listing[strict_job["id"]]["has_applied"] is False


def test_eligibility_follows_profile_changes(client, complete_student_headers, posted_job):
    def eligible():
        listing = client.get("/api/jobs/eligible", headers=complete_student_headers).json()
        return listing[0]["is_eligible"]

    assert eligible() is True
    client.put("/api/students/profile", json={"cgpa": "7.0"}, headers=complete_student_headers)
    assert eligible() is False


def test_eligible_listing_is_students_only(client, admin_headers):
    assert client.get("/api/jobs/eligible", headers=admin_headers).status_code == 403


def test_job_applications_listing(client, admin_headers, complete_student_headers, posted_job):
    client.post("/api/applications", json={"job_id": posted_job["id"]}, headers=complete_student_headers)

    response = client.get(f"/api/jobs/{posted_job['id']}/applications", headers=admin_headers)
    assert response.status_code == 200
    assert len(response.json()) == 1
    assert client.get("/api/jobs/missing/applications", headers=admin_headers).status_code == 404
