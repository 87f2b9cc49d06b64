"""Social feed."""
from .exceptions import EmptyContentError, FeedError, PostNotFoundError
from .service import PostService

__all__ = ["PostService", "FeedError", "EmptyContentError", "PostNotFoundError"]
