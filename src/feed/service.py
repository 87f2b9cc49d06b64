"""Social feed service."""
import logging

from sqlalchemy import select, update
from sqlalchemy.orm import Session, selectinload

from src.feed.exceptions import EmptyContentError, PostNotFoundError
from src.persistence.models import Comment, Post

logger = logging.getLogger(__name__)


class PostService:
    """Service for feed posts, likes, comments and shares."""

    def __init__(self, session: Session):
        self.session = session

    def list_posts(self, limit: int = 10, page: int = 1) -> list[Post]:
        """Newest posts first, one page at a time."""
        limit = max(1, limit)
        page = max(1, page)
        stmt = (
            select(Post)
            .options(
                selectinload(Post.author),
                selectinload(Post.comments).selectinload(Comment.author),
            )
            .order_by(Post.created_at.desc())
            .limit(limit)
            .offset((page - 1) * limit)
        )
        return list(self.session.execute(stmt).scalars().all())

    def require_post(self, post_id: str) -> Post:
        """Get a post by ID or raise PostNotFoundError."""
        post = self.session.get(Post, post_id)
        if post is None:
            raise PostNotFoundError(post_id)
        return post

    def create_post(self, author_id: str, content: str) -> Post:
        """Publish a post. Raises EmptyContentError for blank content."""
        if not content or not content.strip():
            raise EmptyContentError()

        post = Post(content=content, author_id=author_id)
        self.session.add(post)
        self.session.commit()
        self.session.refresh(post)
        logger.info("Post %s created by %s", post.id, author_id)
        return post

    def like_post(self, post_id: str) -> Post:
        """Increment a post's like counter."""
        return self._increment(post_id, Post.likes)

    def share_post(self, post_id: str) -> Post:
        """Increment a post's share counter."""
        return self._increment(post_id, Post.shares)

    def add_comment(self, post_id: str, author_id: str, content: str) -> Post:
        """Attach a comment to a post and return the updated post."""
        if not content or not content.strip():
            raise EmptyContentError()

        post = self.require_post(post_id)
        post.comments.append(Comment(author_id=author_id, content=content))
        self.session.commit()
        self.session.refresh(post)
        return post

    def _increment(self, post_id: str, column) -> Post:
        # Done in SQL so concurrent requests don't lose counts
        result = self.session.execute(
            update(Post)
            .where(Post.id == post_id)
            .values({column: column + 1})
            .execution_options(synchronize_session=False)
        )
        if result.rowcount == 0:
            raise PostNotFoundError(post_id)
        self.session.commit()

        post = self.require_post(post_id)
        self.session.refresh(post)
        return post
