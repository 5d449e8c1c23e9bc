# src/stakeguard/models/report.py
"""Models tracking stake-backed reports against posts."""

from sqlalchemy import BigInteger, Boolean, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from stakeguard.db.session import Base

REPORT_PHASE_OPEN = "open"
REPORT_PHASE_VOTING_CLOSED = "voting_closed"
REPORT_PHASE_RESOLVED = "resolved"


class Report(Base):
    """A flag raised against a post, backed by the reporter's stake.

    Immutable after filing except for the vote tallies and the resolution
    fields.
    """

    __tablename__ = "report"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=False)
    post_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("post.id"),
        nullable=False,
        index=True,
    )
    reporter: Mapped[str] = mapped_column(String(255), nullable=False)
    reason: Mapped[str] = mapped_column(String(100), nullable=False)
    stake: Mapped[int] = mapped_column(BigInteger, nullable=False)
    filed_at: Mapped[int] = mapped_column(BigInteger, nullable=False)

    votes_for: Mapped[int] = mapped_column(BigInteger, nullable=False, default=0)
    votes_against: Mapped[int] = mapped_column(BigInteger, nullable=False, default=0)

    resolved: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    # Audit snapshot of the terminal state; NULL while unresolved.
    upheld: Mapped[bool | None] = mapped_column(Boolean, nullable=True)
    resolved_at: Mapped[int | None] = mapped_column(BigInteger, nullable=True)

    @property
    def total_votes(self) -> int:
        """Return the number of votes cast on this report."""
        return self.votes_for + self.votes_against
