"""SQLAlchemy models for JobNet."""
import uuid
from datetime import datetime, timezone

from sqlalchemy import (
    JSON,
    Column,
    DateTime,
    Float,
    ForeignKey,
    Integer,
    String,
    Table,
    Text,
)
from sqlalchemy.orm import DeclarativeBase, relationship


def utcnow() -> datetime:
    """Return current UTC time as timezone-aware datetime."""
    return datetime.now(timezone.utc)


def generate_uuid() -> str:
    """Generate a UUID string."""
    return str(uuid.uuid4())


JOB_TYPES = ("full-time", "part-time", "contract", "freelance")
EXPERIENCE_LEVELS = ("entry", "intermediate", "senior", "expert")
JOB_STATUSES = ("active", "closed", "draft")


class Base(DeclarativeBase):
    """Base class for all models."""

    pass


job_applicants = Table(
    "job_applicants",
    Base.metadata,
    Column("job_id", String, ForeignKey("jobs.id"), primary_key=True),
    Column("user_id", String, ForeignKey("users.id"), primary_key=True),
)


class User(Base):
    """Member account: login credentials plus public profile."""

    __tablename__ = "users"

    id = Column(String, primary_key=True, default=generate_uuid)
    name = Column(String, nullable=False)
    email = Column(String, unique=True, nullable=False)
    password_hash = Column(String, nullable=False)

    # Profile
    bio = Column(Text)
    location = Column(String)
    linkedin_url = Column(String)
    skills = Column(JSON, default=list)  # ["React", "Python", ...]
    wallet_address = Column(String)  # Browser wallet public key
    profile_views = Column(Integer, default=0)

    created_at = Column(DateTime, default=utcnow)

    # Relationships
    jobs = relationship("Job", back_populates="posted_by", cascade="all, delete-orphan")
    posts = relationship("Post", back_populates="author", cascade="all, delete-orphan")

    def __repr__(self) -> str:
        return f"<User {self.name} ({self.email})>"


class Job(Base):
    """Job posting."""

    __tablename__ = "jobs"

    id = Column(String, primary_key=True, default=generate_uuid)
    title = Column(String, nullable=False)
    description = Column(Text, nullable=False)
    budget = Column(Float, nullable=False)
    location = Column(String)
    skills = Column(JSON, default=list)

    # One of JOB_TYPES / EXPERIENCE_LEVELS / JOB_STATUSES
    job_type = Column(String, default="full-time")
    experience_level = Column(String, default="intermediate")
    status = Column(String, default="active", index=True)

    posted_by_id = Column(String, ForeignKey("users.id"), nullable=False)
    payment_tx_hash = Column(String)  # Platform fee transaction signature

    created_at = Column(DateTime, default=utcnow, index=True)

    # Relationships
    posted_by = relationship("User", back_populates="jobs")
    applicants = relationship("User", secondary=job_applicants)

    def __repr__(self) -> str:
        return f"<Job {self.title} ({self.status})>"


class Post(Base):
    """Social feed post."""

    __tablename__ = "posts"

    id = Column(String, primary_key=True, default=generate_uuid)
    content = Column(Text, nullable=False)
    author_id = Column(String, ForeignKey("users.id"), nullable=False)
    likes = Column(Integer, default=0)
    shares = Column(Integer, default=0)
    created_at = Column(DateTime, default=utcnow, index=True)

    # Relationships
    author = relationship("User", back_populates="posts")
    comments = relationship(
        "Comment",
        back_populates="post",
        cascade="all, delete-orphan",
        order_by="Comment.created_at",
    )

    def __repr__(self) -> str:
        return f"<Post {self.id} by {self.author_id}>"


class Comment(Base):
    """Comment on a feed post."""

    __tablename__ = "comments"

    id = Column(String, primary_key=True, default=generate_uuid)
    post_id = Column(String, ForeignKey("posts.id"), nullable=False)
    author_id = Column(String, ForeignKey("users.id"), nullable=False)
    content = Column(Text, nullable=False)
    created_at = Column(DateTime, default=utcnow)

    # Relationships
    post = relationship("Post", back_populates="comments")
    author = relationship("User")
