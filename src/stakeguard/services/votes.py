"""Vote ledger: one immutable vote per moderator per report."""

from __future__ import annotations

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from stakeguard.models import ReportVote
from stakeguard.services.errors import DuplicateVoteError

__all__ = ["VoteLedger"]


class VoteLedger:
    """Records votes and guards against double voting.

    Escrow of the voter's stake is the caller's responsibility.
    """

    def __init__(self, db: Session) -> None:
        self.db = db

    def get_vote(self, report_id: int, voter: str) -> ReportVote | None:
        """Return the vote cast by `voter` on a report, if any."""
        return self.db.get(ReportVote, (report_id, voter))

    def vote_exists(self, report_id: int, voter: str) -> bool:
        """Return whether `voter` already voted on the report."""
        return self.get_vote(report_id, voter) is not None

    def cast_vote(self, report_id: int, voter: str, choice: bool, stake: int) -> ReportVote:
        """Insert a vote record.

        Raises:
            DuplicateVoteError: If the pair `(report_id, voter)` already exists.
        """
        if self.vote_exists(report_id, voter):
            raise DuplicateVoteError(report_id, voter)

        vote = ReportVote(report_id=report_id, voter=voter, choice=choice, stake=stake)
        self.db.add(vote)
        self.db.flush()
        return vote

    def votes_for_report(self, report_id: int) -> list[ReportVote]:
        """Return every vote on a report in voter order.

        Resolution never enumerates voters; this exists for inspection.
        """
        result = self.db.execute(
            select(ReportVote)
            .where(ReportVote.report_id == report_id)
            .order_by(ReportVote.voter)
        )
        return list(result.scalars())

    def escrowed_vote_stake(self, report_id: int) -> int:
        """Return the sum of voter stakes held in escrow for a report."""
        total = self.db.execute(
            select(func.coalesce(func.sum(ReportVote.stake), 0))
            .where(ReportVote.report_id == report_id)
        ).scalar_one()
        return int(total)
