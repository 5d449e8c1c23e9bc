"""Engine-level bookkeeping models."""

from sqlalchemy import BigInteger
from sqlalchemy.orm import Mapped, Session, mapped_column

from stakeguard.db.session import Base

ENGINE_STATE_ID = 1


class EngineState(Base):
    """Monotonic counters owned by the report engine.

    A single row; ids are handed out sequentially starting at 1.
    """

    __tablename__ = "engine_state"

    id: Mapped[int] = mapped_column(BigInteger, primary_key=True, default=ENGINE_STATE_ID)
    next_post_id: Mapped[int] = mapped_column(BigInteger, nullable=False, default=1)
    next_report_id: Mapped[int] = mapped_column(BigInteger, nullable=False, default=1)
    # Diagnostic aggregate; payouts never read it.
    total_staked: Mapped[int] = mapped_column(BigInteger, nullable=False, default=0)


def get_engine_state(db: Session) -> EngineState:
    """Return the engine counter row, creating it on first use."""
    state = db.get(EngineState, ENGINE_STATE_ID)
    if state is None:
        state = EngineState(id=ENGINE_STATE_ID, next_post_id=1, next_report_id=1, total_staked=0)
        db.add(state)
        db.flush()
    return state
