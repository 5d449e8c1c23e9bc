"""Bearer token helpers.

Principals are authenticated upstream; the tokens they present carry the
principal identifier in the ``sub`` claim. This module only mints tokens for
local development and decodes them on the way in.
"""
from __future__ import annotations

from datetime import UTC, datetime, timedelta

from jose import JWTError, jwt

from stakeguard.core.settings import settings


def create_access_token(principal: str, extra_claims: dict[str, str] | None = None) -> str:
    """Create a signed bearer token for `principal`."""
    to_encode: dict[str, object] = {"sub": principal}
    if extra_claims:
        to_encode.update(extra_claims)
    expire = datetime.now(UTC) + timedelta(minutes=settings.access_token_expire_minutes)
    to_encode["exp"] = expire
    encoded_jwt: str = jwt.encode(
        to_encode,
        settings.secret_key,
        algorithm=settings.jwt_algorithm,
    )
    return encoded_jwt


def decode_principal(token: str) -> str:
    """Return the principal carried by a bearer token.

    Raises:
        ValueError: If the token is invalid, expired or has no subject.
    """
    try:
        payload = jwt.decode(token, settings.secret_key, algorithms=[settings.jwt_algorithm])
    except JWTError as err:
        raise ValueError("Could not validate credentials") from err

    subject = payload.get("sub")
    if not isinstance(subject, str) or not subject:
        raise ValueError("Token has no subject")
    return subject
