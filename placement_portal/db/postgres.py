import logging
from contextlib import contextmanager
from typing import Optional

from sqlalchemy import create_engine, make_url, text
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker

from placement_portal.core.config import get_settings

logger = logging.getLogger(__name__)

# Global engine (connection pooling handled internally by SQLAlchemy)
_engine: Optional[Engine] = None


def create_db_engine(url: str, echo: bool = False) -> Engine:
    """
    Create an engine for the given URL.

    pool_size=5: maintain 5 connections ready
    max_overflow=10: allow 10 extra connections under load
    SQLite (local runs) gets the dialect's default pool.
    """
    if url.startswith("sqlite"):
        return create_engine(url, echo=echo, connect_args={"check_same_thread": False})
    return create_engine(url, pool_size=5, max_overflow=10, pool_pre_ping=True, echo=echo)


def get_engine() -> Engine:
    """Get or create the application engine (singleton pattern)"""
    global _engine
    if _engine is None:
        settings = get_settings()
        _engine = create_db_engine(settings.sqlalchemy_url, echo=settings.debug)
    return _engine


def display_url(url: str) -> str:
    """Connection URL with the password masked, for logs and console output."""
    return make_url(url).render_as_string(hide_password=True)


def make_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(autoflush=False, bind=engine)


@contextmanager
def get_db_session(session_factory: sessionmaker):
    """
    Context manager for database sessions.
    Usage:
        with get_db_session(SessionLocal) as db:
            db.execute(select(users))
    """
    session = session_factory()
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()


def test_postgres_connection(engine: Optional[Engine] = None) -> bool:
    """
    Test if the database is reachable.
    Returns True if connection successful, False otherwise.
    """
    try:
        with (engine or get_engine()).connect() as conn:
            row = conn.execute(text("SELECT 1 as test")).fetchone()
            return row[0] == 1
    except Exception as e:
        logger.warning("Database connection failed: %s", e)
        return False
