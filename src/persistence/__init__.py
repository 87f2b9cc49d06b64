"""Database persistence layer."""
from .database import get_session, init_db
from .models import Base, Comment, Job, Post, User

__all__ = [
    "Base",
    "User",
    "Job",
    "Post",
    "Comment",
    "init_db",
    "get_session",
]
