"""
Table definitions (SQLAlchemy Core).

List-valued columns (skills, eligible courses/branches, tags) are JSON so the
same schema works on PostgreSQL and on SQLite in tests.
"""

from sqlalchemy import (
    Boolean,
    Column,
    DateTime,
    ForeignKey,
    Integer,
    JSON,
    MetaData,
    Numeric,
    String,
    Table,
    Text,
    UniqueConstraint,
)

metadata = MetaData()

users = Table(
    "users",
    metadata,
    Column("id", String(36), primary_key=True),
    Column("email", String(255), nullable=False, index=True),
    Column("password_hash", String(255), nullable=False),
    Column("role", String(20), nullable=False),
    Column("full_name", String(200), nullable=False),
    Column("created_at", DateTime(timezone=True), nullable=False),
    UniqueConstraint("email", name="uq_users_email"),
)

student_profiles = Table(
    "student_profiles",
    metadata,
    Column("id", String(36), primary_key=True),
    Column("user_id", String(36), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, unique=True),
    Column("course", String(100), nullable=False, default=""),
    Column("branch", String(100), nullable=False, default=""),
    Column("cgpa", Numeric(4, 2), nullable=True),
    Column("graduation_year", Integer, nullable=True),
    Column("skills", JSON, nullable=False, default=list),
    Column("phone", String(30), nullable=True),
    Column("linkedin", String(255), nullable=True),
    Column("github", String(255), nullable=True),
    Column("resume_url", String(500), nullable=True),
)

jobs = Table(
    "jobs",
    metadata,
    Column("id", String(36), primary_key=True),
    Column("company_name", String(200), nullable=False),
    Column("position", String(200), nullable=False),
    Column("description", Text, nullable=False),
    Column("location", String(200), nullable=False),
    Column("salary", String(100), nullable=True),
    Column("min_cgpa", Numeric(4, 2), nullable=False),
    Column("eligible_courses", JSON, nullable=False),
    Column("eligible_branches", JSON, nullable=False),
    Column("deadline", DateTime(timezone=True), nullable=False),
    Column("posted_by", String(36), ForeignKey("users.id"), nullable=False),
    Column("created_at", DateTime(timezone=True), nullable=False, index=True),
    Column("is_active", Boolean, nullable=False, default=True),
)

applications = Table(
    "applications",
    metadata,
    Column("id", String(36), primary_key=True),
    Column("job_id", String(36), ForeignKey("jobs.id", ondelete="CASCADE"), nullable=False, index=True),
    Column("student_id", String(36), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True),
    Column("applied_at", DateTime(timezone=True), nullable=False),
    Column("status", String(20), nullable=False, default="pending"),
    # One application per student per job
    UniqueConstraint("job_id", "student_id", name="uq_applications_job_student"),
)

forum_posts = Table(
    "forum_posts",
    metadata,
    Column("id", String(36), primary_key=True),
    Column("author_id", String(36), ForeignKey("users.id"), nullable=False),
    Column("author_name", String(200), nullable=False),
    Column("company_name", String(200), nullable=False),
    Column("position", String(200), nullable=False),
    Column("experience", Text, nullable=False),
    Column("interview_date", DateTime(timezone=True), nullable=True),
    Column("tags", JSON, nullable=False, default=list),
    Column("created_at", DateTime(timezone=True), nullable=False, index=True),
)

notifications = Table(
    "notifications",
    metadata,
    Column("id", String(36), primary_key=True),
    Column("title", String(200), nullable=False),
    Column("message", Text, nullable=False),
    Column("created_by", String(36), ForeignKey("users.id"), nullable=False),
    Column("created_at", DateTime(timezone=True), nullable=False),
    Column("is_active", Boolean, nullable=False, default=True),
)

activities = Table(
    "activities",
    metadata,
    Column("id", String(36), primary_key=True),
    Column("user_id", String(36), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True),
    Column("type", String(30), nullable=False),
    Column("description", Text, nullable=False),
    Column("created_at", DateTime(timezone=True), nullable=False),
)
