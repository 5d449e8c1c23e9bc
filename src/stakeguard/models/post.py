# src/stakeguard/models/post.py
"""SQLAlchemy model for posts and their moderation status."""

from sqlalchemy import BigInteger, Integer, LargeBinary, String
from sqlalchemy.orm import Mapped, mapped_column

from stakeguard.db.session import Base

POST_STATUS_ACTIVE = "active"
POST_STATUS_FLAGGED = "flagged"
POST_STATUS_REMOVED = "removed"

POST_STATUSES = (POST_STATUS_ACTIVE, POST_STATUS_FLAGGED, POST_STATUS_REMOVED)


class Post(Base):
    """Content item that can be reported.

    Posts are never deleted; moderation only moves them between statuses.
    """

    __tablename__ = "post"

    # Assigned by the engine from its sequential counter, never autoincremented.
    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=False)
    author: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    # Opaque reference to off-engine content (typically a digest).
    content_ref: Mapped[bytes] = mapped_column(LargeBinary(64), nullable=False)
    created_at: Mapped[int] = mapped_column(BigInteger, nullable=False)

    # active -> flagged on report; flagged -> removed | active on resolution.
    status: Mapped[str] = mapped_column(String(16), nullable=False, default=POST_STATUS_ACTIVE)
    report_count: Mapped[int] = mapped_column(BigInteger, nullable=False, default=0)
