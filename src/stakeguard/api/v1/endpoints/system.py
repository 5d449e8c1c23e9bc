"""System and transparency endpoints for the Stakeguard API."""

from __future__ import annotations

from fastapi import APIRouter

from stakeguard.api.v1.dependencies import ClockDep, EngineDep, LedgerDep
from stakeguard.core.settings import settings

router = APIRouter(prefix="/system", tags=["system", "transparency"])


@router.get("/config")
async def get_public_config() -> dict[str, object]:
    """Return a sanitized snapshot of public runtime configuration.

    Excludes secrets and connection strings.
    """
    return {
        "app": {
            "name": settings.app_name,
            "version": settings.app_version,
            "debug": settings.debug,
        },
        "moderation": settings.moderation_parameters,
        "escrow_principal": settings.escrow_principal,
    }


@router.get("/stats")
async def get_stats(engine: EngineDep, ledger: LedgerDep, clock: ClockDep) -> dict[str, int]:
    """Return engine counters alongside the escrow balance and clock height."""
    state = engine.engine_state()
    return {
        "height": clock.now(),
        "posts": state.next_post_id - 1,
        "reports": state.next_report_id - 1,
        "total_staked": state.total_staked,
        "escrow_balance": ledger.balance_of(settings.escrow_principal),
    }
