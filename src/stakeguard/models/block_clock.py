# src/stakeguard/models/block_clock.py
"""System-level clock model."""

from sqlalchemy import BigInteger
from sqlalchemy.orm import Mapped, mapped_column

from stakeguard.db.session import Base


class BlockClock(Base):
    """Monotonic block height used as the engine's notion of time."""

    __tablename__ = "block_clock"

    id: Mapped[int] = mapped_column(BigInteger, primary_key=True, default=1)
    height: Mapped[int] = mapped_column(BigInteger, nullable=False, default=0)
