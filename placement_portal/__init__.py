"""
Placement Portal
University placement backend with eligibility matching and placement analytics.

Architecture:
- PostgreSQL: users, student profiles, jobs, applications, forum, notifications, activity feed
- Eligibility: pure predicate over (profile, job), recomputed on every read
- Analytics: pure aggregation over the current records
"""

__version__ = "1.0.0"
