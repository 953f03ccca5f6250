"""
Analytics Service

Builds the admin dashboard numbers from the current records:
- totals per entity
- average CGPA over students who have entered one
- course and branch distributions
- applications submitted in the trailing window (7 days by default)

Nothing is cached or snapshotted. `now` is passed in by the caller, so the
recency count is reproducible for a fixed clock.
"""

from collections import Counter
from datetime import datetime, timedelta, timezone
from decimal import Decimal
from typing import Iterable, List, Sequence

from placement_portal.models import (
    Application,
    DistributionEntry,
    ForumPost,
    Job,
    PlacementAnalytics,
    StudentProfile,
)

RECENT_WINDOW = timedelta(days=7)


def _as_utc(moment: datetime) -> datetime:
    # SQLite hands back naive datetimes; everything is stored in UTC
    if moment.tzinfo is None:
        return moment.replace(tzinfo=timezone.utc)
    return moment


def average_cgpa(profiles: Iterable[StudentProfile]) -> float:
    """
    Mean CGPA over profiles with a positive value.

    Missing or zero CGPAs are left out rather than counted as zero.
    Returns 0.0 when no profile qualifies.
    """
    values = [p.cgpa for p in profiles if p.cgpa is not None and p.cgpa > 0]
    if not values:
        return 0.0
    return float(sum(values, Decimal(0)) / len(values))


def distribution(values: Iterable[str]) -> List[DistributionEntry]:
    """
    Count non-empty values, most common first.

    Ties keep the order in which the values were first seen.
    """
    counts = Counter(v for v in values if v)
    return [DistributionEntry(name=name, count=count) for name, count in counts.most_common()]


def count_recent_applications(
    applications: Iterable[Application],
    now: datetime,
    window: timedelta = RECENT_WINDOW,
) -> int:
    cutoff = _as_utc(now) - window
    return sum(1 for a in applications if _as_utc(a.applied_at) > cutoff)


def compute_analytics(
    profiles: Sequence[StudentProfile],
    jobs: Sequence[Job],
    applications: Sequence[Application],
    posts: Sequence[ForumPost],
    now: datetime,
    window: timedelta = RECENT_WINDOW,
) -> PlacementAnalytics:
    """
    Compute the dashboard summary.

    Args:
        profiles: All student profiles
        jobs: All jobs (active and inactive)
        applications: All applications
        posts: All forum posts
        now: Reference time for the recency window
        window: Length of the recency window

    Returns:
        PlacementAnalytics
    """
    return PlacementAnalytics(
        total_students=len(profiles),
        total_jobs=len(jobs),
        active_jobs=sum(1 for j in jobs if j.is_active),
        total_applications=len(applications),
        total_posts=len(posts),
        average_cgpa=average_cgpa(profiles),
        top_courses=distribution(p.course for p in profiles),
        top_branches=distribution(p.branch for p in profiles),
        recent_applications=count_recent_applications(applications, now, window),
    )
