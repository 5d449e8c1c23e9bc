# src/stakeguard/api/v1/endpoints/reputation.py
"""Reputation endpoints."""

from fastapi import APIRouter

from stakeguard.api.v1.dependencies import CurrentPrincipalDep, EngineDep, to_http_exception
from stakeguard.schemas.reputation import ReputationResponse
from stakeguard.services.errors import ModerationError

router = APIRouter(prefix="/reputation", tags=["reputation"])


@router.get("/{principal}", response_model=ReputationResponse)
async def get_reputation(principal: str, engine: EngineDep) -> ReputationResponse:
    """Return the reputation record of any principal."""
    return ReputationResponse.model_validate(engine.reputation.get_record(principal))


@router.post("/promote", response_model=ReputationResponse)
async def promote_self(principal: CurrentPrincipalDep, engine: EngineDep) -> ReputationResponse:
    """Promote the calling principal to moderator once eligible."""
    try:
        record = engine.promote_to_moderator(principal)
    except ModerationError as err:
        raise to_http_exception(err) from err
    return ReputationResponse.model_validate(record)
