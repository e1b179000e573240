"""CRUD-style helpers for managing profiles."""
from __future__ import annotations

from sqlalchemy.orm import Session

from inkpost.core.errors import ForbiddenError, NotFoundError
from inkpost.db.time import utcnow
from inkpost.models import Profile
from inkpost.schemas.profile import ProfileUpdate

__all__ = [
    "get_profile",
    "update_profile",
]


def get_profile(db: Session, profile_id: str) -> Profile:
    """Return a single profile by identifier."""
    profile = db.get(Profile, profile_id)
    if profile is None:
        raise NotFoundError("Profile not found")
    return profile


def update_profile(
    db: Session,
    profile_id: str,
    requester_id: str,
    update_data: ProfileUpdate,
) -> Profile:
    """Apply partial updates to the requester's own profile.

    Empty strings are treated like omitted fields and leave the value as is.
    """
    if profile_id != requester_id:
        raise ForbiddenError("Not authorized to update this profile")
    db_profile = get_profile(db, profile_id)

    update_dict = update_data.model_dump(exclude_unset=True)
    for key, value in update_dict.items():
        if value:
            setattr(db_profile, key, value)
    db_profile.updated_at = utcnow()

    db.add(db_profile)
    db.commit()
    db.refresh(db_profile)
    return db_profile
