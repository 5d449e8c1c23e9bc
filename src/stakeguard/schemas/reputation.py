# src/stakeguard/schemas/reputation.py
"""Reputation Pydantic schemas."""

from pydantic import BaseModel, ConfigDict


class ReputationResponse(BaseModel):
    """Schema for a principal's reputation record."""

    model_config = ConfigDict(from_attributes=True)

    principal: str
    score: int
    is_moderator: bool
