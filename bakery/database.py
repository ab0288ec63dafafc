"""Database connection and session management."""
import os
from functools import lru_cache

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, Session

from bakery.config import get_settings


def get_database_url() -> str:
    """Build database URL from environment variables.

    DATABASE_URL wins when set. Otherwise a Cloud SQL unix socket is used
    when INSTANCE_CONNECTION_NAME is configured, and plain TCP when not.
    """
    if url := os.getenv("DATABASE_URL"):
        return url

    settings = get_settings()
    user = settings.DB_USER
    password = settings.DB_PASSWORD
    database = settings.DB_NAME

    if settings.INSTANCE_CONNECTION_NAME:
        return (
            f"postgresql://{user}:{password}@/{database}"
            f"?host=/cloudsql/{settings.INSTANCE_CONNECTION_NAME}"
        )

    return f"postgresql://{user}:{password}@{settings.DB_HOST}:{settings.DB_PORT}/{database}"


@lru_cache
def get_engine():
    """Create SQLAlchemy engine (cached)."""
    return create_engine(
        get_database_url(),
        pool_pre_ping=True,
        pool_size=5,
        max_overflow=10,
    )


def get_session() -> Session:
    """Create a new database session."""
    SessionLocal = sessionmaker(bind=get_engine())
    return SessionLocal()


def get_db():
    """Dependency for FastAPI routes that need a database session."""
    db = get_session()
    try:
        yield db
    finally:
        db.close()
