# mypy: ignore-errors
# tests/v1/test_dependencies.py
from fastapi.testclient import TestClient

from inkpost.core.security import create_access_token, decode_subject


def test_token_round_trip() -> None:
    assert decode_subject(create_access_token("user-1")) == "user-1"


def test_garbage_token_has_no_subject() -> None:
    assert decode_subject("not-a-jwt") is None


def test_invalid_token_is_rejected(client: TestClient, test_post) -> None:
    response = client.post(
        f"/api/v1/posts/{test_post.id}/like",
        headers={"Authorization": "Bearer not-a-jwt"},
    )
    assert response.status_code == 401
    assert response.json()["detail"] == "Could not validate credentials"


def test_token_for_unknown_profile_is_rejected(client: TestClient, test_post) -> None:
    token = create_access_token("ghost")
    response = client.post(
        f"/api/v1/posts/{test_post.id}/like",
        headers={"Authorization": f"Bearer {token}"},
    )
    assert response.status_code == 401
    assert response.json()["detail"] == "User not found"


def test_invalid_token_on_public_route_is_anonymous(client: TestClient, test_post) -> None:
    response = client.get(
        f"/api/v1/posts/{test_post.id}",
        headers={"Authorization": "Bearer not-a-jwt"},
    )
    assert response.status_code == 200
    assert response.json()["is_liked"] is False
