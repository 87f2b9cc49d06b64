"""Pytest fixtures for JobNet tests."""
import sys
from datetime import datetime, timedelta, timezone
from pathlib import Path

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from config.settings import settings
from src.api.app import create_app
from src.auth.rate_limit import RateLimiter
from src.auth.service import hash_password
from src.auth.tokens import issue_token
from src.persistence.models import Base, Job, Post, User

# Minimum bcrypt cost keeps the suite fast
settings.bcrypt_rounds = 4

TEST_SECRET = "test-secret"


# =============================================================================
# DATABASE FIXTURES
# =============================================================================


@pytest.fixture(scope="function")
def test_db():
    """Create a fresh in-memory database for each test."""
    engine = create_engine("sqlite:///:memory:")
    Base.metadata.create_all(bind=engine)
    Session = sessionmaker(bind=engine)
    session = Session()
    yield session
    session.close()


@pytest.fixture
def user_factory(test_db):
    """
    Factory fixture to create users.

    Usage:
        alice = user_factory("alice@test.com", skills=["React"])
    """
    def _create_user(
        email: str = "user@example.com",
        name: str = "Test User",
        password: str = "TestPass123!",
        skills: list[str] | None = None,
    ) -> User:
        user = User(
            name=name,
            email=email,
            password_hash=hash_password(password),
            skills=skills or [],
        )
        test_db.add(user)
        test_db.commit()
        return user

    return _create_user


@pytest.fixture
def job_factory(test_db, user_factory):
    """
    Factory fixture to create jobs; each call is one minute newer than the last.

    Usage:
        job = job_factory("React Dev", skills=["React"])
    """
    poster = user_factory("poster@example.com", name="Poster")
    base_time = datetime(2026, 1, 1, tzinfo=timezone.utc)
    counter = {"n": 0}

    def _create_job(title: str = "Developer", skills: list[str] | None = None, **kwargs) -> Job:
        counter["n"] += 1
        job = Job(
            title=title,
            description=kwargs.pop("description", f"{title} wanted"),
            budget=kwargs.pop("budget", 1000),
            skills=skills or [],
            posted_by_id=kwargs.pop("posted_by_id", poster.id),
            created_at=kwargs.pop("created_at", base_time + timedelta(minutes=counter["n"])),
            **kwargs,
        )
        test_db.add(job)
        test_db.commit()
        return job

    return _create_job


@pytest.fixture
def sample_user(user_factory):
    """A user with a few declared skills."""
    return user_factory("sample@example.com", name="Sample", skills=["React", "Node.js"])


@pytest.fixture
def sample_post(test_db, sample_user):
    post = Post(content="Just shipped a Web3 project!", author_id=sample_user.id)
    test_db.add(post)
    test_db.commit()
    return post


# =============================================================================
# API FIXTURES
# =============================================================================


@pytest.fixture
def api_engine():
    """In-memory engine shared across threads/connections for the Flask app."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture
def api_session_factory(api_engine):
    return sessionmaker(bind=api_engine, autocommit=False, autoflush=False)


@pytest.fixture
def app(api_session_factory):
    app = create_app(
        session_factory=api_session_factory,
        rate_limiter=RateLimiter(max_requests=1000, window_seconds=60),
        jwt_secret=TEST_SECRET,
    )
    app.config["TESTING"] = True
    return app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def api_user(api_session_factory):
    """A persisted user in the API database."""
    session = api_session_factory()
    user = User(
        name="Api User",
        email="api@example.com",
        password_hash=hash_password("TestPass123!"),
        skills=[],
    )
    session.add(user)
    session.commit()
    session.refresh(user)
    session.expunge(user)
    session.close()
    return user


@pytest.fixture
def auth_headers(api_user):
    token = issue_token(api_user, secret=TEST_SECRET)
    return {"Authorization": f"Bearer {token}"}
