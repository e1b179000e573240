"""Engine, session factory and declarative base."""

from __future__ import annotations

from collections.abc import Iterator

from sqlalchemy import create_engine
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker

from inkpost.core.settings import settings


class Base(DeclarativeBase):
    """Base class of every Inkpost table."""


# Models register themselves on Base.metadata at import time.
import inkpost.models  # noqa: E402,F401

engine = create_engine(
    settings.effective_database_url,
    echo=settings.sql_debug,
    pool_pre_ping=not settings.is_sqlite,
    # Request handlers may run the session on a worker thread.
    connect_args={"check_same_thread": False} if settings.is_sqlite else {},
)

SessionLocal = sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)


def get_db() -> Iterator[Session]:
    """FastAPI dependency yielding one session per request."""
    with SessionLocal() as db:
        yield db


def create_tables() -> None:
    Base.metadata.create_all(bind=engine)


def drop_tables() -> None:
    Base.metadata.drop_all(bind=engine)
