"""Database connection and session management."""
import logging
from contextlib import contextmanager
from typing import Generator

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from config.settings import settings
from src.persistence.models import Base

logger = logging.getLogger(__name__)


def build_engine(url: str | None = None) -> Engine:
    """Create SQLAlchemy engine with appropriate settings for the database backend."""
    url = url or settings.database_url

    if url.startswith("sqlite"):
        return create_engine(
            url,
            echo=False,
            connect_args={"check_same_thread": False},
        )

    # PostgreSQL (or other server-based databases)
    return create_engine(
        url,
        echo=False,
        pool_size=5,
        max_overflow=10,
        pool_pre_ping=True,  # Verify connections before use
    )


# Create engine and session factory
engine = build_engine()
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def init_db(bind: Engine | None = None) -> None:
    """Initialize the database, creating all tables."""
    Base.metadata.create_all(bind=bind or engine)
    logger.info("Database schema ready")


def drop_db(bind: Engine | None = None) -> None:
    """Drop all tables (use with caution)."""
    Base.metadata.drop_all(bind=bind or engine)


@contextmanager
def get_session(factory: sessionmaker | None = None) -> Generator[Session, None, None]:
    """Get a database session with automatic cleanup."""
    session = (factory or SessionLocal)()
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()
