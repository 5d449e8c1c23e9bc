# src/stakeguard/schemas/report.py
"""Report and vote Pydantic schemas."""

from pydantic import BaseModel, ConfigDict, Field


class ReportCreate(BaseModel):
    """Schema for filing a report against a post."""

    post_id: int
    reason: str = Field(..., max_length=100, description="Why the post is reported")
    stake: int = Field(..., gt=0, description="Amount escrowed by the reporter")


class ReportResponse(BaseModel):
    """Schema for report information returned by the API."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    post_id: int
    reporter: str
    reason: str
    stake: int
    filed_at: int
    votes_for: int
    votes_against: int
    resolved: bool
    upheld: bool | None = None
    resolved_at: int | None = None
    phase: str | None = None
    voting_deadline: int | None = None


class VoteCreate(BaseModel):
    """Schema for casting a vote on a report."""

    choice: bool = Field(..., description="True to uphold the report, False to reject it")
    stake: int = Field(..., gt=0, description="Amount escrowed by the voter")


class VoteResponse(BaseModel):
    """Schema for a recorded vote."""

    model_config = ConfigDict(from_attributes=True)

    report_id: int
    voter: str
    choice: bool
    stake: int


class ResolutionResponse(BaseModel):
    """Schema for the outcome of resolving a report."""

    model_config = ConfigDict(from_attributes=True)

    upheld: bool
    votes_for: int
    votes_against: int
    total_votes: int
