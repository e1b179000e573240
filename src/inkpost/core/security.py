"""Bearer token helpers.

Tokens are issued by the external identity provider and share its signing
secret. ``create_access_token`` exists for tooling and tests that need to
mint a token for a known profile id.
"""
from __future__ import annotations

from datetime import UTC, datetime, timedelta

from jose import JWTError, jwt

from inkpost.core.settings import settings


def create_access_token(subject: str, extra_claims: dict[str, str] | None = None) -> str:
    """Create a JWT access token whose ``sub`` claim is the profile id."""
    to_encode: dict[str, object] = {"sub": subject}
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


def decode_subject(token: str) -> str | None:
    """Return the ``sub`` claim of a valid token, or None if it does not verify."""
    try:
        payload = jwt.decode(
            token,
            settings.secret_key,
            algorithms=[settings.jwt_algorithm],
        )
    except JWTError:
        return None
    subject = payload.get("sub")
    if not isinstance(subject, str) or not subject:
        return None
    return subject
