"""Monotonic block-height clock."""

from __future__ import annotations

import logging
from typing import Protocol

from sqlalchemy.orm import Session

from stakeguard.models import BlockClock

logger = logging.getLogger(__name__)


class Clock(Protocol):
    """Source of the current height; never decreases across calls."""

    def now(self) -> int:
        """Return the current height."""


class DatabaseClock:
    """Clock backed by the `block_clock` singleton row."""

    def __init__(self, db: Session) -> None:
        self.db = db

    def _get_or_create(self) -> BlockClock:
        clock = self.db.query(BlockClock).first()
        if clock is None:
            clock = BlockClock(id=1, height=0)
            self.db.add(clock)
            self.db.flush()
        return clock

    def now(self) -> int:
        """Return the current height, zero before the first advance."""
        clock = self.db.query(BlockClock).first()
        return clock.height if clock else 0

    def advance(self, blocks: int = 1) -> int:
        """Move the clock forward by `blocks` and commit.

        Returns:
            The new height.

        Raises:
            ValueError: If `blocks` is negative.
        """
        if blocks < 0:
            raise ValueError("The clock cannot move backwards")
        clock = self._get_or_create()
        clock.height += blocks
        self.db.commit()
        logger.info("Advanced block clock to height %d", clock.height)
        return clock.height
