# mypy: ignore-errors
# tests/v1/test_posts.py
from fastapi.testclient import TestClient
from sqlalchemy import func, select

from inkpost.models import Bookmark, Comment, Post, PostLike


def test_feed_first_page_reports_more(client: TestClient, make_post, test_user) -> None:
    for i in range(15):
        make_post(test_user, title=f"Post {i}")

    response = client.get("/api/v1/posts/", params={"page": 0, "limit": 10})
    assert response.status_code == 200
    body = response.json()
    assert len(body["posts"]) == 10
    assert body["pagination"] == {"page": 0, "limit": 10, "hasMore": True}
    assert body["posts"][0]["title"] == "Post 14"

    response = client.get("/api/v1/posts/", params={"page": 1, "limit": 10})
    body = response.json()
    assert len(body["posts"]) == 5
    assert body["pagination"]["hasMore"] is False
    assert body["posts"][-1]["title"] == "Post 0"


def test_feed_defaults(client: TestClient, test_post) -> None:
    response = client.get("/api/v1/posts/")
    assert response.status_code == 200
    body = response.json()
    assert body["pagination"]["page"] == 0
    assert body["pagination"]["limit"] == 10
    assert [p["id"] for p in body["posts"]] == [test_post.id]
    assert body["posts"][0]["author"]["name"] == "Test User"


def test_feed_search_and_author(client: TestClient, make_post, test_user, other_user) -> None:
    mine = make_post(test_user, title="Python tips")
    make_post(other_user, title="python news")
    make_post(test_user, title="Cooking")

    response = client.get("/api/v1/posts/", params={"search": "PYTHON", "author_id": test_user.id})
    assert [p["id"] for p in response.json()["posts"]] == [mine.id]


def test_feed_rejects_bad_paging(client: TestClient) -> None:
    assert client.get("/api/v1/posts/", params={"page": -1}).status_code == 400
    assert client.get("/api/v1/posts/", params={"limit": 0}).status_code == 400
    assert client.get("/api/v1/posts/", params={"limit": 101}).status_code == 400


def test_feed_marks_viewer_engagement(
    client: TestClient, db_session, test_post, test_user, auth_token
) -> None:
    db_session.add(PostLike(post_id=test_post.id, user_id=test_user.id))
    db_session.flush()

    anonymous = client.get("/api/v1/posts/").json()["posts"][0]
    viewer = client.get("/api/v1/posts/", headers=auth_token).json()["posts"][0]

    assert anonymous["is_liked"] is False
    assert viewer["is_liked"] is True
    assert viewer["is_bookmarked"] is False


def test_get_post(client: TestClient, test_post) -> None:
    response = client.get(f"/api/v1/posts/{test_post.id}")
    assert response.status_code == 200
    assert response.json()["title"] == "Test post"


def test_get_missing_post(client: TestClient) -> None:
    response = client.get("/api/v1/posts/9999")
    assert response.status_code == 404
    assert response.json()["detail"] == "Post not found"


def test_create_post(client: TestClient, test_user, auth_token) -> None:
    payload = {
        "title": "  Hello  ",
        "content": "<p>World</p>",
        "tags": ["intro", " intro ", "", "news"],
    }
    response = client.post("/api/v1/posts/", json=payload, headers=auth_token)

    assert response.status_code == 201
    body = response.json()
    assert body["title"] == "Hello"
    assert body["tags"] == ["intro", "news"]
    assert body["author_id"] == test_user.id
    assert body["likes_count"] == 0
    assert body["comments_count"] == 0


def test_create_post_requires_auth(client: TestClient) -> None:
    response = client.post("/api/v1/posts/", json={"title": "t", "content": "c"})
    assert response.status_code in (401, 403)


def test_create_post_missing_fields(client: TestClient, auth_token) -> None:
    response = client.post("/api/v1/posts/", json={"title": "only a title"}, headers=auth_token)
    assert response.status_code == 400


def test_create_post_blank_title(client: TestClient, auth_token) -> None:
    response = client.post(
        "/api/v1/posts/", json={"title": "   ", "content": "body"}, headers=auth_token
    )
    assert response.status_code == 400
    assert response.json()["detail"] == "Title and content are required"


def test_update_post_by_author(client: TestClient, test_post, auth_token) -> None:
    response = client.put(
        f"/api/v1/posts/{test_post.id}",
        json={"title": "Renamed", "tags": ["a"]},
        headers=auth_token,
    )
    assert response.status_code == 200
    body = response.json()
    assert body["title"] == "Renamed"
    assert body["content"] == "Test post content"
    assert body["tags"] == ["a"]


def test_update_post_forbidden(client: TestClient, test_post, other_auth_token) -> None:
    response = client.put(
        f"/api/v1/posts/{test_post.id}", json={"title": "Mine now"}, headers=other_auth_token
    )
    assert response.status_code == 403


def test_update_missing_post(client: TestClient, auth_token) -> None:
    response = client.put("/api/v1/posts/9999", json={"title": "x"}, headers=auth_token)
    assert response.status_code == 404


def test_delete_post_cascades(
    client: TestClient, db_session, test_post, test_user, other_user, auth_token, make_comment
) -> None:
    root = make_comment(test_post, other_user, "root")
    make_comment(test_post, test_user, "reply", parent=root)
    db_session.add_all(
        [
            PostLike(post_id=test_post.id, user_id=other_user.id),
            Bookmark(post_id=test_post.id, user_id=other_user.id),
        ]
    )
    db_session.flush()
    post_id = test_post.id

    response = client.delete(f"/api/v1/posts/{post_id}", headers=auth_token)

    assert response.status_code == 200
    assert response.json() == {"message": "Post deleted successfully"}
    for model in (Comment, PostLike, Bookmark):
        remaining = db_session.execute(
            select(func.count()).select_from(model).where(model.post_id == post_id)
        ).scalar_one()
        assert remaining == 0
    assert db_session.get(Post, post_id) is None


def test_delete_post_forbidden(client: TestClient, test_post, other_auth_token) -> None:
    response = client.delete(f"/api/v1/posts/{test_post.id}", headers=other_auth_token)
    assert response.status_code == 403


def test_like_toggle(client: TestClient, test_post, auth_token, other_auth_token) -> None:
    url = f"/api/v1/posts/{test_post.id}/like"

    assert client.post(url, headers=auth_token).json() == {"liked": True, "likes_count": 1}
    assert client.post(url, headers=other_auth_token).json() == {"liked": True, "likes_count": 2}
    assert client.post(url, headers=auth_token).json() == {"liked": False, "likes_count": 1}

    post = client.get(f"/api/v1/posts/{test_post.id}", headers=auth_token).json()
    assert post["likes_count"] == 1
    assert post["is_liked"] is False


def test_like_missing_post(client: TestClient, auth_token) -> None:
    response = client.post("/api/v1/posts/9999/like", headers=auth_token)
    assert response.status_code == 404
