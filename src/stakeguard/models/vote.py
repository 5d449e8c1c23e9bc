# src/stakeguard/models/vote.py
"""Models capturing moderator votes on reports."""

from sqlalchemy import BigInteger, Boolean, ForeignKey, Index, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from stakeguard.db.session import Base


class ReportVote(Base):
    """Per-moderator vote on a report.

    Votes are immutable once cast.
    """

    __tablename__ = "report_vote"
    __table_args__ = (
        Index("ix_report_vote_report_id", "report_id"),
    )

    report_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("report.id"),
        primary_key=True,
    )

    voter: Mapped[str] = mapped_column(String(255), primary_key=True)

    # Composite primary key prevents duplicate votes from the same moderator.

    # True = uphold the report, False = reject it.
    choice: Mapped[bool] = mapped_column(Boolean, nullable=False)
    stake: Mapped[int] = mapped_column(BigInteger, nullable=False)
