#!/usr/bin/env python3
"""
FastAPI dependencies for dependency injection.
"""

from functools import lru_cache
from typing import Generator
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker

from core.recommendation import RecommendationService
from database.repositories import InternshipRepository
from .config import get_config


class DatabaseManager:
    """Manages database connections and sessions."""

    def __init__(self, url: str):
        self.engine = create_engine(
            url,
            pool_pre_ping=True  # Verify connections before using
        )
        self.SessionLocal = sessionmaker(
            autocommit=False,
            autoflush=False,
            bind=self.engine
        )

    def get_session(self) -> Generator[Session, None, None]:
        """
        Get a database session.

        Commits when the request handler returns, rolls back on error.

        Yields:
            Session: SQLAlchemy database session.
        """
        session = self.SessionLocal()
        try:
            yield session
            session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()


@lru_cache()
def get_db_manager() -> DatabaseManager:
    """Create the database manager on first use."""
    return DatabaseManager(get_config().database.url)


def get_db() -> Generator[Session, None, None]:
    """
    FastAPI dependency that yields a database session.

    Usage:
        @app.get("/endpoint")
        def my_endpoint(db: Session = Depends(get_db)):
            ...

    Yields:
        Session: Database session that will be automatically closed.
    """
    yield from get_db_manager().get_session()


def get_recommendation_service(db: Session) -> RecommendationService:
    """Bind the recommendation service to this request's catalog."""
    repo = InternshipRepository(db)
    return RecommendationService(
        fetch_active_internships=repo.fetch_active_internships,
        config=get_config().scorer
    )
