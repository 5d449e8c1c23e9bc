"""Shared API dependencies for identity, collaborators and error mapping."""

from typing import Annotated

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from stakeguard.core.security import decode_principal
from stakeguard.db.session import get_db
from stakeguard.services.clock import DatabaseClock
from stakeguard.services.errors import ModerationError
from stakeguard.services.ledger import DatabaseLedger
from stakeguard.services.reports import ReportEngine

# HTTP Bearer scheme; tokens are issued by the upstream identity provider
bearer_scheme = HTTPBearer()

# Type alias for database session dependency
SessionDep = Annotated[Session, Depends(get_db)]


def get_current_principal(
    credentials: Annotated[HTTPAuthorizationCredentials, Depends(bearer_scheme)],
) -> str:
    """Return the pre-authenticated principal behind the bearer token.

    Raises:
        HTTPException: If the token cannot be decoded.
    """
    try:
        return decode_principal(credentials.credentials)
    except ValueError as err:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Could not validate credentials",
        ) from err


def get_clock(db: SessionDep) -> DatabaseClock:
    """Return the block clock bound to the request session."""
    return DatabaseClock(db)


def get_ledger(db: SessionDep) -> DatabaseLedger:
    """Return the ledger adapter bound to the request session."""
    return DatabaseLedger(db)


def get_engine(
    db: SessionDep,
    ledger: Annotated[DatabaseLedger, Depends(get_ledger)],
) -> ReportEngine:
    """Return a report engine bound to the request session."""
    return ReportEngine(db, ledger)


def to_http_exception(err: ModerationError) -> HTTPException:
    """Convert an engine rejection into an HTTP error."""
    return HTTPException(status_code=err.status_code, detail=str(err))


# Type aliases for dependency injection
CurrentPrincipalDep = Annotated[str, Depends(get_current_principal)]
ClockDep = Annotated[DatabaseClock, Depends(get_clock)]
LedgerDep = Annotated[DatabaseLedger, Depends(get_ledger)]
EngineDep = Annotated[ReportEngine, Depends(get_engine)]
