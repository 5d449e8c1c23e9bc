# src/stakeguard/models/__init__.py
"""SQLAlchemy models for the Stakeguard engine."""

from .block_clock import BlockClock
from .engine_state import EngineState
from .ledger_account import LedgerAccount
from .post import Post
from .report import Report
from .reputation import ReputationRecord
from .vote import ReportVote

__all__ = [
    "BlockClock",
    "EngineState",
    "LedgerAccount",
    "Post",
    "Report",
    "ReputationRecord",
    "ReportVote",
]
