"""Shared API dependencies for authentication and common functionality."""

from typing import Annotated

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from inkpost.core.security import decode_subject
from inkpost.db.session import get_db
from inkpost.models import Profile

# HTTP Bearer scheme for JWT authentication
bearer_scheme = HTTPBearer()
optional_bearer_scheme = HTTPBearer(auto_error=False)

# Type alias for database session dependency
SessionDep = Annotated[Session, Depends(get_db)]


def _resolve_profile(token: str, db: Session) -> Profile | None:
    subject = decode_subject(token)
    if subject is None:
        return None
    return db.get(Profile, subject)


def get_current_user(
    credentials: Annotated[HTTPAuthorizationCredentials, Depends(bearer_scheme)],
    db: SessionDep,
) -> Profile:
    """Get the profile of the authenticated caller from the bearer token.

    Raises:
        HTTPException: If the token is invalid or no profile matches its subject.
    """
    subject = decode_subject(credentials.credentials)
    if subject is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Could not validate credentials",
        )
    profile = db.get(Profile, subject)
    if profile is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="User not found",
        )
    return profile


def get_optional_user(
    credentials: Annotated[
        HTTPAuthorizationCredentials | None, Depends(optional_bearer_scheme)
    ],
    db: SessionDep,
) -> Profile | None:
    """Resolve the caller when a valid token is supplied, otherwise None.

    Used by public routes that personalize their response for signed-in viewers.
    """
    if credentials is None:
        return None
    return _resolve_profile(credentials.credentials, db)


# Type aliases for caller dependencies
CurrentUserDep = Annotated[Profile, Depends(get_current_user)]
OptionalUserDep = Annotated[Profile | None, Depends(get_optional_user)]
