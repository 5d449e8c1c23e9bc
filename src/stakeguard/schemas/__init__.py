# src/stakeguard/schemas/__init__.py
"""
Pydantic schemas for API request/response models.

These schemas define the structure of API data for serialization and validation.
"""

from .post import PostCreate, PostResponse
from .report import (
    ReportCreate,
    ReportResponse,
    ResolutionResponse,
    VoteCreate,
    VoteResponse,
)
from .reputation import ReputationResponse

__all__ = [
    "PostCreate", "PostResponse",
    "ReportCreate", "ReportResponse", "ResolutionResponse",
    "VoteCreate", "VoteResponse",
    "ReputationResponse",
]
