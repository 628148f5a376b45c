"""End-to-end tests for list comment threads."""

from uuid import uuid4

import pytest
from fastapi.testclient import TestClient

from topmeup.domain.value import UserId
from topmeup.interface.api.app import create_app
from tests.di import build_test_container
from tests.factories import make_token

ALICE = UserId(uuid4())
BOB = UserId(uuid4())


def _auth(user_id: UserId) -> dict[str, str]:
    return {"Authorization": f"Bearer {make_token(user_id)}"}


def _register(client, user_id: UserId, display_name: str) -> None:
    response = client.post(
        "/auth/user",
        json={"email": f"{user_id}@example.com", "displayName": display_name},
        headers=_auth(user_id),
    )
    assert response.status_code == 200


@pytest.fixture
def client():
    """Create test client backed by in-memory repositories."""
    return TestClient(create_app(container=build_test_container()))


@pytest.fixture
def list_id(client):
    _register(client, ALICE, "Alice")
    response = client.post(
        "/lists",
        json={"title": "Best films of the 90s", "category": "movies", "isPublic": True},
        headers=_auth(ALICE),
    )
    assert response.status_code == 201
    return response.json()["data"]["_id"]


def _comment(client, list_id, content, user_id=ALICE, parent=None) -> str:
    body = {"content": content}
    if parent is not None:
        body["parentCommentId"] = parent
    response = client.post(
        f"/lists/{list_id}/comments", json=body, headers=_auth(user_id)
    )
    assert response.status_code == 201
    return response.json()["data"]["_id"]


class TestHealth:
    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"


class TestGetComments:
    """GET /lists/{list_id}/comments"""

    def test_empty_list(self, client, list_id):
        response = client.get(f"/lists/{list_id}/comments")

        assert response.status_code == 200
        assert response.json() == {
            "success": True,
            "data": [],
            "pagination": {
                "limit": 20,
                "total": 0,
                "hasNext": False,
                "nextCursor": None,
            },
        }

    def test_paginates_roots_newest_first(self, client, list_id):
        # Arrange
        c1 = _comment(client, list_id, "first")
        c2 = _comment(client, list_id, "second")
        c3 = _comment(client, list_id, "third")

        # Act
        first = client.get(f"/lists/{list_id}/comments", params={"limit": 2}).json()
        second = client.get(
            f"/lists/{list_id}/comments",
            params={"limit": 2, "cursor": first["pagination"]["nextCursor"]},
        ).json()

        # Assert
        assert [c["_id"] for c in first["data"]] == [c3, c2]
        assert first["pagination"]["hasNext"] is True
        assert first["pagination"]["nextCursor"] == c2
        assert [c["_id"] for c in second["data"]] == [c1]
        assert second["pagination"]["hasNext"] is False
        assert second["pagination"]["nextCursor"] is None
        assert second["pagination"]["total"] == 3

    def test_nested_reply_tree(self, client, list_id):
        # Arrange
        c1 = _comment(client, list_id, "root")
        r1 = _comment(client, list_id, "reply one", user_id=BOB, parent=c1)
        r2 = _comment(client, list_id, "reply two", parent=c1)
        r3 = _comment(client, list_id, "deep reply", user_id=BOB, parent=r2)

        # Act
        body = client.get(f"/lists/{list_id}/comments").json()

        # Assert
        assert len(body["data"]) == 1
        root = body["data"][0]
        assert root["_id"] == c1
        assert root["parentCommentId"] is None
        assert [r["_id"] for r in root["replies"]] == [r1, r2]
        assert root["replies"][0]["replies"] == []
        deep = root["replies"][1]["replies"][0]
        assert deep["_id"] == r3
        assert deep["parentCommentId"] == r2
        assert deep["userId"] == str(BOB)
        assert body["pagination"]["total"] == 4

    def test_deleted_root_with_replies_stays(self, client, list_id):
        # Arrange
        kept = _comment(client, list_id, "will be deleted")
        reply = _comment(client, list_id, "still here", user_id=BOB, parent=kept)
        lonely = _comment(client, list_id, "will vanish")

        # Act
        assert client.delete(f"/comments/{kept}", headers=_auth(ALICE)).status_code == 200
        assert client.delete(f"/comments/{lonely}", headers=_auth(ALICE)).status_code == 200
        body = client.get(f"/lists/{list_id}/comments").json()

        # Assert
        assert [c["_id"] for c in body["data"]] == [kept]
        root = body["data"][0]
        assert root["isDeleted"] is True
        assert root["content"] == "This comment has been deleted"
        assert [r["_id"] for r in root["replies"]] == [reply]
        assert root["replies"][0]["content"] == "still here"
        assert body["pagination"]["total"] == 3

    def test_user_has_liked_depends_on_viewer(self, client, list_id):
        comment_id = _comment(client, list_id, "like me")
        liked = client.post(f"/comments/{comment_id}/like", headers=_auth(BOB))
        assert liked.json()["data"] == {"likesCount": 1, "userHasLiked": True}

        as_bob = client.get(f"/lists/{list_id}/comments", headers=_auth(BOB)).json()
        as_alice = client.get(f"/lists/{list_id}/comments", headers=_auth(ALICE)).json()
        anonymous = client.get(f"/lists/{list_id}/comments").json()

        assert as_bob["data"][0]["userHasLiked"] is True
        assert as_alice["data"][0]["userHasLiked"] is False
        assert anonymous["data"][0]["userHasLiked"] is False
        assert anonymous["data"][0]["likesCount"] == 1

    def test_unregistered_author_has_no_user(self, client, list_id):
        _comment(client, list_id, "who am I", user_id=BOB)

        body = client.get(f"/lists/{list_id}/comments").json()

        assert body["data"][0]["userId"] == str(BOB)
        assert body["data"][0]["user"] is None

    def test_registered_authors_are_resolved(self, client, list_id):
        # Arrange
        _register(client, BOB, "Bob")
        root = _comment(client, list_id, "Pulp Fiction at number one?")
        _comment(client, list_id, "Obviously", user_id=BOB, parent=root)

        # Act
        body = client.get(f"/lists/{list_id}/comments").json()

        # Assert
        thread = body["data"][0]
        assert thread["user"] == {"_id": str(ALICE), "displayName": "Alice"}
        assert thread["replies"][0]["user"] == {"_id": str(BOB), "displayName": "Bob"}

    def test_renamed_author_shows_new_name(self, client, list_id):
        _comment(client, list_id, "before the rename")
        _register(client, ALICE, "Alice Liddell")

        body = client.get(f"/lists/{list_id}/comments").json()

        assert body["data"][0]["user"]["displayName"] == "Alice Liddell"

    def test_cursor_past_bigint_range(self, client, list_id):
        response = client.get(
            f"/lists/{list_id}/comments", params={"cursor": "9223372036854775808"}
        )

        assert response.status_code == 400

    def test_invalid_cursor(self, client, list_id):
        response = client.get(
            f"/lists/{list_id}/comments", params={"cursor": "not-a-cursor"}
        )

        assert response.status_code == 400

    def test_invalid_list_id(self, client):
        assert client.get("/lists/not-a-uuid/comments").status_code == 400

    def test_unknown_list(self, client):
        assert client.get(f"/lists/{uuid4()}/comments").status_code == 404

    def test_oversized_limit_is_clamped(self, client, list_id):
        body = client.get(f"/lists/{list_id}/comments", params={"limit": 500}).json()

        assert body["pagination"]["limit"] == 100


class TestCommentMutations:
    """POST /lists/{id}/comments and /comments/{id} routes."""

    def test_comment_requires_auth(self, client, list_id):
        response = client.post(f"/lists/{list_id}/comments", json={"content": "hi"})

        assert response.status_code == 401

    def test_cookie_auth(self, client, list_id):
        client.cookies.set("auth_token", make_token(BOB))

        response = client.post(f"/lists/{list_id}/comments", json={"content": "hi"})

        assert response.status_code == 201
        assert response.json()["data"]["userId"] == str(BOB)

    def test_comment_counter_on_list(self, client, list_id):
        comment_id = _comment(client, list_id, "count me")
        _comment(client, list_id, "and me")

        client.delete(f"/comments/{comment_id}", headers=_auth(ALICE))
        body = client.get(f"/lists/{list_id}").json()

        assert body["data"]["commentsCount"] == 1

    def test_reply_to_unknown_parent(self, client, list_id):
        response = client.post(
            f"/lists/{list_id}/comments",
            json={"content": "orphan", "parentCommentId": "999"},
            headers=_auth(ALICE),
        )

        assert response.status_code == 400

    def test_edit_by_author(self, client, list_id):
        comment_id = _comment(client, list_id, "tpyo")

        response = client.put(
            f"/comments/{comment_id}", json={"content": "typo"}, headers=_auth(ALICE)
        )

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["content"] == "typo"
        assert data["isEdited"] is True

    def test_edit_by_someone_else(self, client, list_id):
        comment_id = _comment(client, list_id, "mine")

        response = client.put(
            f"/comments/{comment_id}", json={"content": "ours"}, headers=_auth(BOB)
        )

        assert response.status_code == 403

    def test_edit_deleted_comment(self, client, list_id):
        comment_id = _comment(client, list_id, "gone soon")
        client.delete(f"/comments/{comment_id}", headers=_auth(ALICE))

        response = client.put(
            f"/comments/{comment_id}", json={"content": "back"}, headers=_auth(ALICE)
        )

        assert response.status_code == 404

    def test_like_deleted_comment(self, client, list_id):
        comment_id = _comment(client, list_id, "gone soon")
        client.delete(f"/comments/{comment_id}", headers=_auth(ALICE))

        response = client.post(f"/comments/{comment_id}/like", headers=_auth(BOB))

        assert response.status_code == 400

    def test_unlike(self, client, list_id):
        comment_id = _comment(client, list_id, "meh")
        client.post(f"/comments/{comment_id}/like", headers=_auth(BOB))

        response = client.delete(f"/comments/{comment_id}/like", headers=_auth(BOB))

        assert response.json()["data"] == {"likesCount": 0, "userHasLiked": False}


class TestLists:
    def test_private_list(self, client):
        _register(client, ALICE, "Alice")
        created = client.post(
            "/lists",
            json={"title": "Secret", "category": "games", "isPublic": False},
            headers=_auth(ALICE),
        ).json()["data"]

        assert client.get(f"/lists/{created['_id']}").status_code == 401
        assert (
            client.get(f"/lists/{created['_id']}", headers=_auth(BOB)).status_code
            == 403
        )
        owner_view = client.get(f"/lists/{created['_id']}", headers=_auth(ALICE))
        assert owner_view.status_code == 200
        assert owner_view.json()["data"]["viewsCount"] == 1
