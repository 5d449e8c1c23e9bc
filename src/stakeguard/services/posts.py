"""Post registry: creation and moderation status transitions."""

from __future__ import annotations

import logging

from sqlalchemy.orm import Session

from stakeguard.core.settings import Settings, settings as default_settings
from stakeguard.models import Post
from stakeguard.models.engine_state import get_engine_state
from stakeguard.models.post import (
    POST_STATUS_ACTIVE,
    POST_STATUS_FLAGGED,
    POST_STATUS_REMOVED,
)
from stakeguard.services.errors import InvalidContentRefError, PostNotFoundError

logger = logging.getLogger(__name__)

__all__ = ["PostRegistry"]


class PostRegistry:
    """Thin wrapper around database access for post entities.

    Status setters are meant to be driven by the report engine only.
    """

    def __init__(self, db: Session, config: Settings | None = None) -> None:
        self.db = db
        self.config = config or default_settings

    def get_post(self, post_id: int) -> Post:
        """Return a post by identifier.

        Raises:
            PostNotFoundError: If no post has this id.
        """
        post = self.db.get(Post, post_id)
        if post is None:
            raise PostNotFoundError(post_id)
        return post

    def create_post(self, author: str, content_ref: bytes, now: int) -> Post:
        """Insert a new active post under the next sequential id.

        Args:
            author: Principal submitting the content.
            content_ref: Opaque reference to the content, at most 64 bytes.
            now: Current height, recorded as the creation height.

        Raises:
            InvalidContentRefError: If `content_ref` exceeds its byte bound.
        """
        if len(content_ref) > self.config.content_ref_bytes:
            raise InvalidContentRefError(
                f"Content reference exceeds {self.config.content_ref_bytes} bytes"
            )

        state = get_engine_state(self.db)
        post_id = state.next_post_id
        state.next_post_id = post_id + 1

        post = Post(
            id=post_id,
            author=author,
            content_ref=bytes(content_ref),
            created_at=now,
            status=POST_STATUS_ACTIVE,
            report_count=0,
        )
        self.db.add(post)
        self.db.flush()
        logger.debug("Allocated post id %d for %s", post_id, author)
        return post

    def _set_status(self, post_id: int, status: str) -> Post:
        post = self.get_post(post_id)
        post.status = status
        return post

    def mark_flagged(self, post_id: int) -> Post:
        """Move a post into the flagged state."""
        return self._set_status(post_id, POST_STATUS_FLAGGED)

    def mark_removed(self, post_id: int) -> Post:
        """Move a post into the removed state."""
        return self._set_status(post_id, POST_STATUS_REMOVED)

    def mark_active(self, post_id: int) -> Post:
        """Move a post back into the active state."""
        return self._set_status(post_id, POST_STATUS_ACTIVE)

    def increment_report_count(self, post_id: int) -> Post:
        """Record one more report filed against the post."""
        post = self.get_post(post_id)
        post.report_count += 1
        return post
