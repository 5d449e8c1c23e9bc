# src/stakeguard/models/reputation.py
"""SQLAlchemy model for per-principal reputation."""

from sqlalchemy import BigInteger, Boolean, CheckConstraint, String
from sqlalchemy.orm import Mapped, mapped_column

from stakeguard.db.session import Base


class ReputationRecord(Base):
    """Reputation score and moderator flag for a principal.

    Principals without a row are treated as having the default score and no
    moderator rights.
    """

    __tablename__ = "reputation"
    __table_args__ = (
        CheckConstraint("score >= 0", name="ck_reputation_score_non_negative"),
    )

    principal: Mapped[str] = mapped_column(String(255), primary_key=True)
    score: Mapped[int] = mapped_column(BigInteger, nullable=False)
    is_moderator: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
