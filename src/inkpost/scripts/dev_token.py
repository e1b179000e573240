# src/inkpost/scripts/dev_token.py
"""Mint a bearer token for a local profile.

Tokens normally come from the identity provider. For local development this
script ensures a profile row exists and prints a token signed with
``SECRET_KEY`` for it.
"""
from __future__ import annotations

import argparse

from inkpost.core.security import create_access_token
from inkpost.db.session import SessionLocal
from inkpost.models import Profile


def ensure_profile(profile_id: str, name: str) -> Profile:
    """Return the profile, creating it when missing."""
    db = SessionLocal()
    try:
        profile = db.get(Profile, profile_id)
        if profile is None:
            profile = Profile(id=profile_id, name=name)
            db.add(profile)
            db.commit()
            db.refresh(profile)
        return profile
    finally:
        db.close()


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Print a bearer token for a profile")
    parser.add_argument("profile_id")
    parser.add_argument("--name", default="Local Author")
    args = parser.parse_args(argv)

    profile = ensure_profile(args.profile_id, args.name)
    print(create_access_token(profile.id))


if __name__ == "__main__":
    main()
