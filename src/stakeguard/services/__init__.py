# src/stakeguard/services/__init__.py
"""Business logic services for the Stakeguard engine."""

from .clock import DatabaseClock
from .ledger import DatabaseLedger
from .posts import PostRegistry
from .reports import ReportEngine, ResolutionOutcome
from .reputation import ReputationStore
from .votes import VoteLedger

__all__ = [
    "DatabaseClock",
    "DatabaseLedger",
    "PostRegistry",
    "ReportEngine",
    "ResolutionOutcome",
    "ReputationStore",
    "VoteLedger",
]
