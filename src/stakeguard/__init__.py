"""Stake-weighted content moderation engine."""

__version__ = "0.1.0"
