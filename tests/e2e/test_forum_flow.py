"""End-to-end tests for the question, answer, vote and accept flow."""

from uuid import uuid4

import pytest
from fastapi.testclient import TestClient

from qna.interface.api.app import create_app
from tests.di import build_test_container


@pytest.fixture
def client():
    """Create test client backed by in-memory repositories."""
    return TestClient(create_app(build_test_container()))


def register(client, username: str) -> dict[str, str]:
    """Register a user and return bearer auth headers."""
    response = client.post(
        "/auth/register",
        json={
            "username": username,
            "email": f"{username}@example.com",
            "password": "password123",
        },
    )
    assert response.status_code == 201
    return {"Authorization": f"Bearer {response.json()['token']}"}


def ask(client, headers, title: str = "How do I merge two dicts?") -> dict:
    response = client.post(
        "/questions",
        json={
            "title": title,
            "description": "I want the second dict to win on key clashes.",
            "tags": ["python", "dict"],
        },
        headers=headers,
    )
    assert response.status_code == 201
    return response.json()


def answer(client, headers, question_id: str, content: str) -> dict:
    response = client.post(
        "/answers",
        json={"question_id": question_id, "content": content},
        headers=headers,
    )
    assert response.status_code == 201
    return response.json()


class TestAuthEndpoints:
    """End-to-end tests for account endpoints."""

    def test_register_login_and_me(self, client):
        # Arrange
        register(client, "alice")

        # Act
        login = client.post(
            "/auth/login",
            json={"email": "alice@example.com", "password": "password123"},
        )
        token = login.json()["token"]
        me = client.get("/auth/me", headers={"Authorization": f"Bearer {token}"})

        # Assert
        assert login.status_code == 200
        assert me.status_code == 200
        assert me.json()["username"] == "alice"

    def test_wrong_password_is_401(self, client):
        # Arrange
        register(client, "alice")

        # Act
        response = client.post(
            "/auth/login",
            json={"email": "alice@example.com", "password": "wrong-password"},
        )

        # Assert
        assert response.status_code == 401
        assert response.json() == {"error": "Invalid credentials"}

    def test_duplicate_registration_is_400(self, client):
        # Arrange
        register(client, "alice")

        # Act
        response = client.post(
            "/auth/register",
            json={
                "username": "alice",
                "email": "alice@example.com",
                "password": "password123",
            },
        )

        # Assert
        assert response.status_code == 400
        assert "already exists" in response.json()["error"]

    def test_me_without_token_is_401(self, client):
        response = client.get("/auth/me")
        assert response.status_code == 401
        assert response.json() == {"error": "Authentication required"}

    def test_me_with_garbage_token_is_401(self, client):
        response = client.get("/auth/me", headers={"Authorization": "Bearer nope"})
        assert response.status_code == 401


class TestForumFlow:
    """End-to-end tests for asking, answering, voting and accepting."""

    def test_full_flow(self, client):
        # Arrange
        asker = register(client, "asker")
        helper = register(client, "helper")
        voter = register(client, "voter")

        # Act - ask and answer
        question = ask(client, asker)
        first = answer(client, helper, question["id"], "Use {**a, **b} in Python 3.5+.")
        second = answer(client, voter, question["id"], "Use a | b in Python 3.9+.")

        # Act - vote
        vote = client.post(
            "/votes",
            json={
                "target_id": first["id"],
                "target_type": "answer",
                "vote_type": "upvote",
            },
            headers=voter,
        )

        # Act - accept the first, then switch to the second
        accept_first = client.put(
            f"/answers/{first['id']}", json={"is_accepted": True}, headers=asker
        )
        accept_second = client.put(
            f"/answers/{second['id']}", json={"is_accepted": True}, headers=asker
        )
        detail = client.get(f"/questions/{question['id']}")

        # Assert
        assert vote.status_code == 200
        assert vote.json()["score"] == 1
        assert vote.json()["user_vote"] == "upvote"
        assert accept_first.status_code == 200
        assert accept_second.status_code == 200

        body = detail.json()
        assert body["question"]["answer_count"] == 2
        assert body["question"]["author"]["username"] == "asker"
        accepted = [a["id"] for a in body["answers"] if a["is_accepted"]]
        assert accepted == [second["id"]]
        assert body["answers"][0]["id"] == second["id"]

    def test_answer_notifies_question_author(self, client):
        # Arrange
        asker = register(client, "asker")
        helper = register(client, "helper")
        question = ask(client, asker)

        # Act
        answer(client, helper, question["id"], "dict.update() works in place.")
        notifications = client.get("/notifications", headers=asker)
        helper_notifications = client.get("/notifications", headers=helper)

        # Assert
        assert notifications.status_code == 200
        body = notifications.json()
        assert body["unread_count"] == 1
        assert body["notifications"][0]["type"] == "answer"
        assert body["notifications"][0]["sender"]["username"] == "helper"
        assert helper_notifications.json()["unread_count"] == 0

    def test_self_vote_is_400(self, client):
        # Arrange
        asker = register(client, "asker")
        question = ask(client, asker)

        # Act
        response = client.post(
            "/votes",
            json={
                "target_id": question["id"],
                "target_type": "question",
                "vote_type": "downvote",
            },
            headers=asker,
        )

        # Assert
        assert response.status_code == 400
        assert response.json() == {"error": "You cannot vote on your own content"}

    def test_non_author_cannot_accept(self, client):
        # Arrange
        asker = register(client, "asker")
        helper = register(client, "helper")
        question = ask(client, asker)
        posted = answer(client, helper, question["id"], "Use collections.ChainMap.")

        # Act
        response = client.put(
            f"/answers/{posted['id']}", json={"is_accepted": True}, headers=helper
        )

        # Assert
        assert response.status_code == 403
        assert "error" in response.json()

    def test_forbidden_combined_update_changes_nothing(self, client):
        # Arrange
        asker = register(client, "asker")
        helper = register(client, "helper")
        question = ask(client, asker)
        posted = answer(client, helper, question["id"], "Use collections.ChainMap.")

        # Act
        response = client.put(
            f"/answers/{posted['id']}",
            json={"content": "Edited alongside an accept", "is_accepted": True},
            headers=helper,
        )
        listed = client.get("/answers", params={"question_id": question["id"]})

        # Assert
        assert response.status_code == 403
        [item] = listed.json()["answers"]
        assert item["content"] == "Use collections.ChainMap."
        assert not item["is_accepted"]

    def test_delete_question_cascades(self, client):
        # Arrange
        asker = register(client, "asker")
        helper = register(client, "helper")
        question = ask(client, asker)
        answer(client, helper, question["id"], "First of several answers.")
        answer(client, helper, question["id"], "Second of several answers.")

        # Act
        forbidden = client.delete(f"/questions/{question['id']}", headers=helper)
        deleted = client.delete(f"/questions/{question['id']}", headers=asker)
        missing = client.get(f"/questions/{question['id']}")

        # Assert
        assert forbidden.status_code == 403
        assert deleted.status_code == 200
        assert deleted.json()["deleted_answers"] == 2
        assert missing.status_code == 404
        assert "error" in missing.json()


class TestListingEndpoints:
    """End-to-end tests for list endpoints and request validation."""

    def test_list_questions_filters_by_tag(self, client):
        # Arrange
        asker = register(client, "asker")
        ask(client, asker, title="Merging dictionaries")
        client.post(
            "/questions",
            json={
                "title": "Borrow checker errors",
                "description": "Why does the compiler reject my reference?",
                "tags": ["rust"],
            },
            headers=asker,
        )

        # Act
        response = client.get("/questions", params={"tags": "rust,go"})

        # Assert
        assert response.status_code == 200
        body = response.json()
        assert [q["title"] for q in body["questions"]] == ["Borrow checker errors"]
        assert body["pagination"]["total"] == 1

    def test_tags_endpoint(self, client):
        # Arrange
        asker = register(client, "asker")
        ask(client, asker)

        # Act
        tags = client.get("/tags", params={"popular": "true"})
        detail = client.get("/tags/python")
        unknown = client.get("/tags/haskell")

        # Assert
        assert {t["name"] for t in tags.json()["tags"]} == {"python", "dict"}
        assert detail.json()["total_questions"] == 1
        assert unknown.status_code == 404

    def test_invalid_question_is_400(self, client):
        # Arrange
        asker = register(client, "asker")

        # Act
        response = client.post(
            "/questions",
            json={"title": "Hi", "description": "Too short title", "tags": ["x"]},
            headers=asker,
        )

        # Assert
        assert response.status_code == 400
        assert "error" in response.json()

    def test_missing_question_is_404(self, client):
        response = client.get(f"/questions/{uuid4()}")
        assert response.status_code == 404

    def test_user_profile(self, client):
        # Arrange
        asker = register(client, "asker")
        ask(client, asker)

        # Act
        profile = client.get("/users/asker")
        questions = client.get("/users/asker/questions")

        # Assert
        assert profile.status_code == 200
        assert profile.json()["reputation"] == 0
        assert questions.json()["pagination"]["total"] == 1

    def test_health(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json()["status"] == "healthy"
