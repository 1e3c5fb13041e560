"""
Database configuration and session management.
"""

import logging
from typing import Generator

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

logger = logging.getLogger("foodbase.database")

# Create SQLAlchemy Base
Base = declarative_base()


def _engine_options(url: str) -> dict:
    if url.startswith("sqlite") and (":memory:" in url or url.rstrip("/").endswith("sqlite:")):
        # One shared connection so every session sees the same in-memory database
        return {
            "poolclass": StaticPool,
            "connect_args": {"check_same_thread": False},
        }
    if url.startswith("sqlite"):
        return {"connect_args": {"check_same_thread": False}}
    return {"pool_pre_ping": True}


class Database:
    """
    Owns the engine and session factory for one backing store.

    Created explicitly at process start (see the application lifespan) and
    passed to whatever needs sessions; disposed at shutdown.
    """

    def __init__(self, url: str, echo: bool = False, engine: Engine = None):
        self.url = url
        self.engine = engine or create_engine(url, echo=echo, future=True, **_engine_options(url))
        self.SessionLocal = sessionmaker(
            bind=self.engine, autoflush=False, expire_on_commit=True, future=True
        )

    def create_all(self) -> None:
        """Initialize database schema"""
        # Import models so they register on Base.metadata
        import domain.models  # noqa: F401

        with self.engine.begin() as conn:
            Base.metadata.create_all(bind=conn)
        logger.info("Database tables created successfully")

    def session(self) -> Generator[Session, None, None]:
        """Get database session (for FastAPI dependency injection)"""
        db = self.SessionLocal()
        try:
            yield db
        finally:
            db.close()

    def dispose(self) -> None:
        self.engine.dispose()
        logger.info("Database engine disposed")
