"""Reputation bookkeeping for reporters, authors and moderators."""

from __future__ import annotations

import logging

from sqlalchemy.orm import Session

from stakeguard.core.settings import Settings, settings as default_settings
from stakeguard.models import ReputationRecord
from stakeguard.services.errors import UnauthorizedError

logger = logging.getLogger(__name__)


class ReputationStore:
    """Maps principals to a non-negative score and a moderator flag.

    All score changes go through `apply_delta`, which owns the floor-at-zero
    rule. Unseen principals read as the default score without a row being
    written.
    """

    def __init__(self, db: Session, config: Settings | None = None) -> None:
        self.db = db
        self.config = config or default_settings

    def _stored(self, principal: str) -> ReputationRecord | None:
        return self.db.get(ReputationRecord, principal)

    def get_record(self, principal: str) -> ReputationRecord:
        """Return the stored record, or a transient default one."""
        record = self._stored(principal)
        if record is None:
            return ReputationRecord(
                principal=principal,
                score=self.config.default_reputation,
                is_moderator=False,
            )
        return record

    def reputation_of(self, principal: str) -> int:
        """Return the score of `principal`."""
        record = self._stored(principal)
        return record.score if record else self.config.default_reputation

    def is_moderator(self, principal: str) -> bool:
        """Return whether `principal` holds voting rights."""
        record = self._stored(principal)
        return bool(record and record.is_moderator)

    def _get_or_create(self, principal: str) -> ReputationRecord:
        record = self._stored(principal)
        if record is None:
            record = ReputationRecord(
                principal=principal,
                score=self.config.default_reputation,
                is_moderator=False,
            )
            self.db.add(record)
        return record

    def promote_to_moderator(self, principal: str) -> ReputationRecord:
        """Grant voting rights once the reputation threshold is reached.

        Raises:
            UnauthorizedError: If the score is below the moderator threshold.
        """
        score = self.reputation_of(principal)
        if score < self.config.moderator_threshold:
            raise UnauthorizedError(
                f"{principal} has reputation {score}, "
                f"{self.config.moderator_threshold} required to moderate"
            )

        record = self._get_or_create(principal)
        record.is_moderator = True
        self.db.flush()
        logger.info("Promoted %s to moderator at reputation %d", principal, score)
        return record

    def apply_delta(self, principal: str, delta: int) -> int:
        """Adjust the score by a signed delta, saturating at zero.

        The moderator flag is left untouched.

        Returns:
            The new score.
        """
        record = self._get_or_create(principal)
        if delta > 0:
            record.score += delta
        elif delta < 0:
            record.score = max(0, record.score + delta)
        self.db.flush()
        logger.debug("Reputation of %s adjusted by %d to %d", principal, delta, record.score)
        return record.score
