"""Feed exceptions."""
from src.errors import JobNetError


class FeedError(JobNetError):
    """Base exception for feed errors."""

    pass


class EmptyContentError(FeedError):
    """Raised when a post or comment has no text."""

    def __init__(self):
        super().__init__("Content is required")


class PostNotFoundError(FeedError):
    """Raised when a post id does not resolve to a post."""

    status_code = 404

    def __init__(self, post_id: str):
        self.post_id = post_id
        super().__init__("Post not found")
