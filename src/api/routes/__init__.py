"""API blueprints."""
from . import ai, auth, jobs, posts

BLUEPRINTS = [auth.bp, jobs.bp, posts.bp, ai.bp]

__all__ = ["BLUEPRINTS"]
