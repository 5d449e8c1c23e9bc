# src/stakeguard/api/v1/endpoints/reports.py
"""Report lifecycle endpoints: filing, voting and resolution."""

from __future__ import annotations

from fastapi import APIRouter, status

from stakeguard.api.v1.dependencies import (
    ClockDep,
    CurrentPrincipalDep,
    EngineDep,
    to_http_exception,
)
from stakeguard.models import Report
from stakeguard.schemas.report import (
    ReportCreate,
    ReportResponse,
    ResolutionResponse,
    VoteCreate,
    VoteResponse,
)
from stakeguard.services.errors import ModerationError
from stakeguard.services.reports import ReportEngine

router = APIRouter(prefix="/reports", tags=["reports"])


def _to_report_response(engine: ReportEngine, report: Report, now: int) -> ReportResponse:
    response = ReportResponse.model_validate(report)
    response.phase = engine.report_phase(report, now)
    response.voting_deadline = engine.voting_deadline(report)
    return response


@router.post("/", response_model=ReportResponse, status_code=status.HTTP_201_CREATED)
async def file_report(
    report_data: ReportCreate,
    principal: CurrentPrincipalDep,
    engine: EngineDep,
    clock: ClockDep,
) -> ReportResponse:
    """File a stake-backed report against a post."""
    now = clock.now()
    try:
        report = engine.file_report(
            report_data.post_id,
            principal,
            report_data.reason,
            report_data.stake,
            now,
        )
    except ModerationError as err:
        raise to_http_exception(err) from err
    return _to_report_response(engine, report, now)


@router.get("/{report_id}", response_model=ReportResponse)
async def get_report(report_id: int, engine: EngineDep, clock: ClockDep) -> ReportResponse:
    """Return a report with its current phase."""
    try:
        report = engine.get_report(report_id)
    except ModerationError as err:
        raise to_http_exception(err) from err
    return _to_report_response(engine, report, clock.now())


@router.post(
    "/{report_id}/votes",
    response_model=VoteResponse,
    status_code=status.HTTP_201_CREATED,
)
async def cast_vote(
    report_id: int,
    vote_data: VoteCreate,
    principal: CurrentPrincipalDep,
    engine: EngineDep,
    clock: ClockDep,
) -> VoteResponse:
    """Cast a moderator vote on an open report."""
    try:
        vote = engine.cast_vote(
            report_id,
            principal,
            vote_data.choice,
            vote_data.stake,
            clock.now(),
        )
    except ModerationError as err:
        raise to_http_exception(err) from err
    return VoteResponse.model_validate(vote)


@router.get("/{report_id}/votes", response_model=list[VoteResponse])
async def list_votes(report_id: int, engine: EngineDep) -> list[VoteResponse]:
    """Return every vote cast on a report."""
    try:
        engine.get_report(report_id)
    except ModerationError as err:
        raise to_http_exception(err) from err
    return [VoteResponse.model_validate(vote) for vote in engine.votes.votes_for_report(report_id)]


@router.post("/{report_id}/resolve", response_model=ResolutionResponse)
async def resolve_report(
    report_id: int,
    principal: CurrentPrincipalDep,
    engine: EngineDep,
    clock: ClockDep,
) -> ResolutionResponse:
    """Resolve a report whose voting window has elapsed.

    Any authenticated principal may trigger resolution.
    """
    try:
        outcome = engine.resolve_report(report_id, clock.now())
    except ModerationError as err:
        raise to_http_exception(err) from err
    return ResolutionResponse.model_validate(outcome)
