# mypy: ignore-errors
# tests/test_timestamps.py
from datetime import UTC, datetime, timedelta, timezone

from fastapi.testclient import TestClient

from inkpost.models import Bookmark


def test_timestamps_read_back_as_utc(db_session, test_post) -> None:
    db_session.expire(test_post)
    db_session.refresh(test_post)

    assert test_post.created_at.tzinfo is not None
    assert test_post.created_at.utcoffset() == timedelta(0)


def test_offset_timestamps_are_stored_as_utc(db_session, test_post, test_user) -> None:
    plus_two = timezone(timedelta(hours=2))
    mark = Bookmark(
        post_id=test_post.id,
        user_id=test_user.id,
        created_at=datetime(2024, 5, 1, 12, 0, tzinfo=plus_two),
    )
    db_session.add(mark)
    db_session.flush()
    db_session.expire(mark)
    db_session.refresh(mark)

    assert mark.created_at == datetime(2024, 5, 1, 10, 0, tzinfo=UTC)
    assert mark.created_at.utcoffset() == timedelta(0)


def test_api_timestamps_carry_offset(client: TestClient, test_post, auth_token) -> None:
    body = client.post(f"/api/v1/bookmarks/{test_post.id}", headers=auth_token).json()
    created = datetime.fromisoformat(body["bookmark"]["created_at"])
    assert created.utcoffset() == timedelta(0)

    post = client.get(f"/api/v1/posts/{test_post.id}").json()
    assert datetime.fromisoformat(post["created_at"]).utcoffset() == timedelta(0)
