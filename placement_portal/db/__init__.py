"""
Database module - SQLAlchemy engine, sessions and table definitions.
"""
from placement_portal.db.postgres import display_url, get_engine, get_db_session, test_postgres_connection
from placement_portal.db.tables import metadata

__all__ = [
    "display_url",
    "get_engine",
    "get_db_session",
    "test_postgres_connection",
    "metadata"
]
