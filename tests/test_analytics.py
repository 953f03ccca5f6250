"""Unit tests for the analytics aggregation."""
from datetime import datetime, timedelta, timezone
from decimal import Decimal

import pytest

from conftest import FIXED_NOW, make_job, make_profile
from placement_portal.models import Application, ForumPost
from placement_portal.services.analytics_service import (
    average_cgpa,
    compute_analytics,
    count_recent_applications,
    distribution,
)


def make_application(id, applied_at):
    return Application(id=id, job_id="job-1", student_id=f"student-{id}", applied_at=applied_at)


def make_post(id):
    return ForumPost(
        id=id,
        author_id="student-1",
        author_name="Asha Verma",
        company_name="TCS",
        position="Analyst",
        experience="Two technical rounds followed by HR.",
        created_at=FIXED_NOW,
    )


def test_average_cgpa_ignores_missing_and_zero():
    profiles = [
        make_profile(cgpa=Decimal("8.0")),
        make_profile(cgpa=Decimal("7.0")),
        make_profile(cgpa=None),
        make_profile(cgpa=Decimal("0")),
    ]
    assert average_cgpa(profiles) == pytest.approx(7.5)


def test_average_cgpa_of_empty_set_is_zero():
    assert average_cgpa([]) == 0.0
    assert average_cgpa([make_profile(cgpa=None), make_profile(cgpa=Decimal("0"))]) == 0.0


def test_distribution_sorted_by_count_with_stable_ties():
    entries = distribution(["ECE", "CSE", "ME", "CSE", "", "ECE", "CSE"])
    assert [(e.name, e.count) for e in entries] == [("CSE", 3), ("ECE", 2), ("ME", 1)]


def test_distribution_ties_keep_first_seen_order():
    entries = distribution(["MBA", "B.Tech", "M.Tech"])
    assert [e.name for e in entries] == ["MBA", "B.Tech", "M.Tech"]


def test_distribution_counts_sum_to_profiles_with_field():
    profiles = [
        make_profile(course="B.Tech", branch="CSE"),
        make_profile(course="B.Tech", branch=""),
        make_profile(course="", branch="ECE"),
        make_profile(course="MBA", branch="CSE"),
    ]
    courses = distribution(p.course for p in profiles)
    branches = distribution(p.branch for p in profiles)

    assert sum(e.count for e in courses) == sum(1 for p in profiles if p.course)
    assert sum(e.count for e in branches) == sum(1 for p in profiles if p.branch)


def test_recent_applications_use_trailing_window():
    applications = [
        make_application("1", FIXED_NOW - timedelta(hours=1)),
        make_application("2", FIXED_NOW - timedelta(days=6, hours=23)),
        make_application("3", FIXED_NOW - timedelta(days=7)),
        make_application("4", FIXED_NOW - timedelta(days=30)),
    ]
    assert count_recent_applications(applications, FIXED_NOW) == 2
    assert count_recent_applications(applications, FIXED_NOW, window=timedelta(days=31)) == 4


def test_recent_applications_treat_naive_timestamps_as_utc():
    naive = (FIXED_NOW - timedelta(days=1)).replace(tzinfo=None)
    assert count_recent_applications([make_application("1", naive)], FIXED_NOW) == 1


def test_recent_window_moves_with_now():
    applications = [make_application("1", FIXED_NOW - timedelta(days=2))]
    assert count_recent_applications(applications, FIXED_NOW) == 1
    assert count_recent_applications(applications, FIXED_NOW + timedelta(days=6)) == 0


def test_compute_analytics_summary():
    profiles = [
        make_profile(course="B.Tech", branch="CSE", cgpa=Decimal("9.0")),
        make_profile(course="B.Tech", branch="ECE", cgpa=Decimal("7.0")),
        make_profile(course="MBA", branch="CSE", cgpa=None),
    ]
    jobs = [make_job(id="a"), make_job(id="b", is_active=False)]
    applications = [
        make_application("1", FIXED_NOW - timedelta(days=1)),
        make_application("2", FIXED_NOW - timedelta(days=10)),
    ]

    result = compute_analytics(profiles, jobs, applications, [make_post("p1")], now=FIXED_NOW)

    assert result.total_students == 3
    assert result.total_jobs == 2
    assert result.active_jobs == 1
    assert result.total_applications == 2
    assert result.total_posts == 1
    assert result.average_cgpa == pytest.approx(8.0)
    assert [(e.name, e.count) for e in result.top_courses] == [("B.Tech", 2), ("MBA", 1)]
    assert [(e.name, e.count) for e in result.top_branches] == [("CSE", 2), ("ECE", 1)]
    assert result.recent_applications == 1


def test_compute_analytics_on_empty_data():
    result = compute_analytics([], [], [], [], now=datetime.now(timezone.utc))

    assert result.total_students == 0
    assert result.average_cgpa == 0.0
    assert result.top_courses == []
    assert result.top_branches == []
    assert result.recent_applications == 0
