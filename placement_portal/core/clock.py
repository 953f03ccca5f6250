"""Wall clock access, kept behind a function so it can be replaced in tests."""

from datetime import datetime, timezone


def utc_now() -> datetime:
    return datetime.now(timezone.utc)
