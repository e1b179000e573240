# tests/conftest.py
from __future__ import annotations

import os
from collections.abc import Callable, Iterator
from datetime import UTC, datetime, timedelta
from itertools import count

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session
from sqlalchemy.pool import StaticPool

os.environ.setdefault("SECRET_KEY", "test-secret-key")
os.environ.setdefault("DATABASE_URL", "sqlite://")

from inkpost.core.security import create_access_token  # noqa: E402
from inkpost.db.session import Base, get_db  # noqa: E402
from inkpost.main import app as fastapi_app  # noqa: E402
from inkpost.models import Comment, Post, Profile  # noqa: E402

# Every fixture row is one second newer than the previous one, so ordering
# assertions never depend on clock resolution.
_BASE_TIME = datetime(2020, 1, 1, tzinfo=UTC)
_TICKS = count(1)


def next_timestamp() -> datetime:
    """Return a strictly increasing timestamp for fixture rows."""
    return _BASE_TIME + timedelta(seconds=next(_TICKS))


def _in_memory_engine() -> Engine:
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    # pysqlite defers BEGIN on its own, which breaks SAVEPOINT; emit it ourselves.
    @event.listens_for(engine, "connect")
    def _no_implicit_begin(dbapi_connection, connection_record) -> None:
        dbapi_connection.isolation_level = None

    @event.listens_for(engine, "begin")
    def _explicit_begin(conn) -> None:
        conn.exec_driver_sql("BEGIN")

    return engine


@pytest.fixture(scope="session")
def engine() -> Iterator[Engine]:
    engine = _in_memory_engine()
    Base.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture()
def db_session(engine: Engine) -> Iterator[Session]:
    """Session whose commits only release savepoints inside an outer transaction."""
    with engine.connect() as connection:
        outer = connection.begin()
        session = Session(
            bind=connection,
            autoflush=False,
            expire_on_commit=False,
            join_transaction_mode="create_savepoint",
        )
        try:
            yield session
        finally:
            session.close()
            if outer.is_active:
                outer.rollback()


@pytest.fixture(scope="session")
def app() -> FastAPI:
    return fastapi_app


@pytest.fixture(autouse=True)
def override_session_dependency(app: FastAPI, db_session: Session) -> Iterator[None]:
    def _shared_session() -> Iterator[Session]:
        yield db_session

    app.dependency_overrides[get_db] = _shared_session
    yield
    app.dependency_overrides.pop(get_db, None)


@pytest.fixture()
def client(app: FastAPI) -> Iterator[TestClient]:
    with TestClient(app, base_url="http://test") as test_client:
        yield test_client


def _make_profile(db_session: Session, profile_id: str, name: str) -> Profile:
    profile = Profile(id=profile_id, name=name, email=f"{profile_id}@example.com")
    db_session.add(profile)
    db_session.flush()
    db_session.refresh(profile)
    return profile


@pytest.fixture()
def test_user(db_session: Session) -> Iterator[Profile]:
    """Create and return the primary profile."""
    yield _make_profile(db_session, "user-1", "Test User")


@pytest.fixture()
def other_user(db_session: Session) -> Iterator[Profile]:
    """Create and return a second profile."""
    yield _make_profile(db_session, "user-2", "Other User")


@pytest.fixture()
def auth_token(test_user: Profile) -> dict[str, str]:
    """Return authorization headers for the primary profile."""
    return {"Authorization": f"Bearer {create_access_token(test_user.id)}"}


@pytest.fixture()
def other_auth_token(other_user: Profile) -> dict[str, str]:
    """Return authorization headers for the secondary profile."""
    return {"Authorization": f"Bearer {create_access_token(other_user.id)}"}


@pytest.fixture()
def make_post(db_session: Session) -> Callable[..., Post]:
    """Return a factory that persists posts with increasing timestamps."""

    def _make(author: Profile, title: str = "A post", content: str = "Body text", **extra) -> Post:
        created = next_timestamp()
        post = Post(
            title=title,
            content=content,
            tags=extra.pop("tags", []),
            author_id=author.id,
            created_at=created,
            updated_at=created,
            **extra,
        )
        db_session.add(post)
        db_session.flush()
        db_session.refresh(post)
        return post

    return _make


@pytest.fixture()
def test_post(make_post: Callable[..., Post], test_user: Profile) -> Post:
    """Create a baseline post authored by the primary profile."""
    return make_post(test_user, title="Test post", content="Test post content")


@pytest.fixture()
def make_comment(db_session: Session) -> Callable[..., Comment]:
    """Return a factory that persists comments with increasing timestamps.

    Counters on the post are left alone; tests that check them go through the
    service instead.
    """

    def _make(post: Post, author: Profile, content: str = "A comment", parent: Comment | None = None) -> Comment:
        created = next_timestamp()
        comment = Comment(
            content=content,
            post_id=post.id,
            user_id=author.id,
            parent_id=parent.id if parent else None,
            created_at=created,
            updated_at=created,
        )
        db_session.add(comment)
        db_session.flush()
        db_session.refresh(comment)
        return comment

    return _make
