"""Report lifecycle and resolution engine.

A report moves through three phases:

- ``open``: filed, voting window running (``now < filed_at + voting_period``)
- ``voting_closed``: window elapsed, waiting for someone to resolve it
- ``resolved``: terminal; the reporter's stake has been paid out or forfeited

Every public operation is a single unit of work. All checks run before the
first mutation, and any failure during the mutation phase (typically a ledger
rejection) rolls the session back so no partial state is ever committed.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass

from sqlalchemy.orm import Session

from stakeguard.core.settings import Settings, settings as default_settings
from stakeguard.models import EngineState, Post, Report, ReportVote, ReputationRecord
from stakeguard.models.engine_state import get_engine_state
from stakeguard.models.report import (
    REPORT_PHASE_OPEN,
    REPORT_PHASE_RESOLVED,
    REPORT_PHASE_VOTING_CLOSED,
)
from stakeguard.services.errors import (
    DuplicateVoteError,
    InsufficientFundsError,
    InsufficientStakeError,
    InvalidReasonError,
    InvalidVoteError,
    NotModeratorError,
    ReportNotFoundError,
    TransferFailedError,
    VotingPeriodEndedError,
)
from stakeguard.services.ledger import LedgerAdapter
from stakeguard.services.posts import PostRegistry
from stakeguard.services.reputation import ReputationStore
from stakeguard.services.votes import VoteLedger

logger = logging.getLogger(__name__)

# Serializes engine operations within a process.
_OPERATION_LOCK = threading.Lock()


@dataclass(frozen=True)
class ResolutionOutcome:
    """Result of resolving a report."""

    upheld: bool
    votes_for: int
    votes_against: int
    total_votes: int


class ReportEngine:
    """Central state machine for filing, voting on and resolving reports."""

    def __init__(
        self,
        db: Session,
        ledger: LedgerAdapter,
        config: Settings | None = None,
    ) -> None:
        """Initialize the engine.

        Args:
            db: Session holding posts, reports, votes, reputation and counters.
            ledger: Adapter used to escrow stakes and pay out resolutions.
            config: Optional settings override; defaults to the global settings.
        """
        self.db = db
        self.ledger = ledger
        self.config = config or default_settings
        self.posts = PostRegistry(db, self.config)
        self.votes = VoteLedger(db)
        self.reputation = ReputationStore(db, self.config)

    @contextmanager
    def _unit_of_work(self) -> Iterator[None]:
        with _OPERATION_LOCK:
            try:
                yield
                self.db.commit()
            except Exception:
                self.db.rollback()
                raise

    # ------------------------------------------------------------------
    # Read operations
    # ------------------------------------------------------------------

    def get_report(self, report_id: int) -> Report:
        """Return a report by identifier.

        Raises:
            ReportNotFoundError: If no report has this id.
        """
        report = self.db.get(Report, report_id)
        if report is None:
            raise ReportNotFoundError(report_id)
        return report

    def voting_deadline(self, report: Report) -> int:
        """Return the first height at which votes are no longer accepted."""
        return report.filed_at + self.config.voting_period

    def report_phase(self, report: Report, now: int) -> str:
        """Return the lifecycle phase of a report at height `now`."""
        if report.resolved:
            return REPORT_PHASE_RESOLVED
        if now < self.voting_deadline(report):
            return REPORT_PHASE_OPEN
        return REPORT_PHASE_VOTING_CLOSED

    def engine_state(self) -> EngineState:
        """Return the engine counters."""
        return get_engine_state(self.db)

    def total_staked(self) -> int:
        """Return the running total of escrowed stake not yet settled."""
        return self.engine_state().total_staked

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _require_stake(self, stake: int) -> None:
        if stake < self.config.min_stake_amount:
            raise InsufficientStakeError(stake, self.config.min_stake_amount)

    def _move(self, sender: str, recipient: str, amount: int) -> None:
        try:
            self.ledger.transfer(sender, recipient, amount)
        except InsufficientFundsError as err:
            raise TransferFailedError(str(err)) from err

    # ------------------------------------------------------------------
    # Public operations
    # ------------------------------------------------------------------

    def create_post(self, author: str, content_ref: bytes, now: int) -> Post:
        """Register a new post as a single unit of work."""
        with self._unit_of_work():
            post = self.posts.create_post(author, content_ref, now)
        logger.info("Post %d created by %s at height %d", post.id, author, now)
        return post

    def promote_to_moderator(self, principal: str) -> ReputationRecord:
        """Grant moderator rights as a single unit of work."""
        with self._unit_of_work():
            record = self.reputation.promote_to_moderator(principal)
        return record

    def file_report(
        self,
        post_id: int,
        reporter: str,
        reason: str,
        stake: int,
        now: int,
    ) -> Report:
        """Flag a post by escrowing a stake against it.

        Any principal may report any post, and a post that is already flagged
        may be reported again.

        Raises:
            PostNotFoundError: If the post does not exist.
            InsufficientStakeError: If `stake` is below the minimum.
            InvalidReasonError: If `reason` exceeds its byte bound.
            TransferFailedError: If the reporter cannot fund the stake.
        """
        with self._unit_of_work():
            post = self.posts.get_post(post_id)
            self._require_stake(stake)
            if len(reason.encode("utf-8")) > self.config.max_reason_bytes:
                raise InvalidReasonError(
                    f"Reason exceeds {self.config.max_reason_bytes} bytes"
                )

            self._move(reporter, self.config.escrow_principal, stake)

            state = get_engine_state(self.db)
            report_id = state.next_report_id
            state.next_report_id = report_id + 1

            report = Report(
                id=report_id,
                post_id=post.id,
                reporter=reporter,
                reason=reason,
                stake=stake,
                filed_at=now,
                votes_for=0,
                votes_against=0,
                resolved=False,
            )
            self.db.add(report)
            self.posts.increment_report_count(post.id)
            self.posts.mark_flagged(post.id)
            state.total_staked += stake
            self.db.flush()

        logger.info(
            "Report %d filed by %s against post %d with stake %d",
            report.id,
            reporter,
            post_id,
            stake,
        )
        return report

    def cast_vote(
        self,
        report_id: int,
        voter: str,
        choice: bool,
        stake: int,
        now: int,
    ) -> ReportVote:
        """Record a moderator's stake-backed vote on an open report.

        Raises:
            ReportNotFoundError: If the report does not exist.
            NotModeratorError: If `voter` lacks moderator rights.
            VotingPeriodEndedError: If the window has elapsed or the report is resolved.
            InsufficientStakeError: If `stake` is below the minimum.
            DuplicateVoteError: If `voter` already voted on this report.
            TransferFailedError: If the voter cannot fund the stake.
        """
        with self._unit_of_work():
            report = self.get_report(report_id)
            if not self.reputation.is_moderator(voter):
                raise NotModeratorError(voter)
            if report.resolved:
                raise VotingPeriodEndedError(f"Report {report_id} is already resolved")
            deadline = self.voting_deadline(report)
            if now >= deadline:
                raise VotingPeriodEndedError(
                    f"Voting on report {report_id} closed at height {deadline}"
                )
            self._require_stake(stake)
            if self.votes.vote_exists(report_id, voter):
                raise DuplicateVoteError(report_id, voter)

            self._move(voter, self.config.escrow_principal, stake)

            vote = self.votes.cast_vote(report_id, voter, choice, stake)
            if choice:
                report.votes_for += 1
            else:
                report.votes_against += 1
            get_engine_state(self.db).total_staked += stake
            self.db.flush()

        logger.info(
            "Vote %s by %s on report %d with stake %d",
            "for" if choice else "against",
            voter,
            report_id,
            stake,
        )
        return vote

    def resolve_report(self, report_id: int, now: int) -> ResolutionOutcome:
        """Settle a report once its voting window has elapsed.

        A strict majority of votes for upholds the report; ties do not. Only
        the reporter's stake is settled. Voter stakes stay in escrow.

        Raises:
            ReportNotFoundError: If the report does not exist.
            VotingPeriodEndedError: If voting is still open or the report is resolved.
            InvalidVoteError: If no votes were cast.
            TransferFailedError: If escrow cannot cover the payout.
        """
        with self._unit_of_work():
            report = self.get_report(report_id)
            deadline = self.voting_deadline(report)
            if now < deadline:
                raise VotingPeriodEndedError(
                    f"Report {report_id} cannot be resolved before height {deadline}"
                )
            if report.resolved:
                raise VotingPeriodEndedError(f"Report {report_id} is already resolved")
            if report.total_votes == 0:
                raise InvalidVoteError(f"Report {report_id} has no votes")

            upheld = report.votes_for > report.votes_against
            post = self.posts.get_post(report.post_id)

            report.resolved = True
            report.upheld = upheld
            report.resolved_at = now

            if upheld:
                self.posts.mark_removed(post.id)
                self.reputation.apply_delta(post.author, -self.config.reputation_penalty)
                self.reputation.apply_delta(report.reporter, self.config.reputation_reward)
                self._move(
                    self.config.escrow_principal,
                    report.reporter,
                    report.stake + self.config.reporter_bonus,
                )
            else:
                self.posts.mark_active(post.id)
                self.reputation.apply_delta(report.reporter, -self.config.reputation_penalty)
                self.reputation.apply_delta(post.author, self.config.reputation_reward)
                self._move(self.config.escrow_principal, post.author, report.stake)

            get_engine_state(self.db).total_staked -= report.stake
            outcome = ResolutionOutcome(
                upheld=upheld,
                votes_for=report.votes_for,
                votes_against=report.votes_against,
                total_votes=report.total_votes,
            )
            self.db.flush()

        logger.info(
            "Report %d resolved at height %d: upheld=%s (%d for, %d against)",
            report_id,
            now,
            outcome.upheld,
            outcome.votes_for,
            outcome.votes_against,
        )
        return outcome
