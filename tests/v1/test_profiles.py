# mypy: ignore-errors
# tests/v1/test_profiles.py
from fastapi.testclient import TestClient


def test_get_profile(client: TestClient, test_user) -> None:
    response = client.get(f"/api/v1/profiles/{test_user.id}")
    assert response.status_code == 200
    body = response.json()
    assert body["id"] == test_user.id
    assert body["name"] == "Test User"
    assert "email" not in body


def test_get_missing_profile(client: TestClient) -> None:
    assert client.get("/api/v1/profiles/nobody").status_code == 404


def test_update_own_profile(client: TestClient, test_user, auth_token) -> None:
    response = client.put(
        f"/api/v1/profiles/{test_user.id}",
        json={"bio": "Writes about databases", "name": ""},
        headers=auth_token,
    )
    assert response.status_code == 200
    body = response.json()
    assert body["bio"] == "Writes about databases"
    assert body["name"] == "Test User"


def test_update_other_profile_forbidden(client: TestClient, other_user, auth_token) -> None:
    response = client.put(
        f"/api/v1/profiles/{other_user.id}", json={"bio": "hacked"}, headers=auth_token
    )
    assert response.status_code == 403


def test_profile_posts(client: TestClient, make_post, test_user, other_user) -> None:
    older = make_post(test_user, title="older")
    newer = make_post(test_user, title="newer")
    make_post(other_user, title="not mine")

    response = client.get(f"/api/v1/profiles/{test_user.id}/posts", params={"limit": 1})
    body = response.json()
    assert [p["id"] for p in body["posts"]] == [newer.id]
    assert body["pagination"]["hasMore"] is True

    response = client.get(
        f"/api/v1/profiles/{test_user.id}/posts", params={"page": 1, "limit": 1}
    )
    assert [p["id"] for p in response.json()["posts"]] == [older.id]
