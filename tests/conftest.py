"""Test configuration and fixtures."""

import os
from uuid import uuid4

from qna.domain.model import Answer, Question, User
from qna.domain.value import (
    AnswerId,
    Email,
    QuestionId,
    TagName,
    UserId,
    Username,
)

# Cheap password hashing for tests that register users
os.environ.setdefault("AUTH__BCRYPT_ROUNDS", "4")

# HS256 wants a key of at least 32 bytes
os.environ.setdefault("AUTH__JWT_SECRET", "test-secret-key-with-at-least-32-bytes")

# Placeholder hash for users that never log in during a test
UNUSED_PASSWORD_HASH = "$2b$04$unusedunusedunusedunuseduOr1gPv1YQkD8PVJtYn8v7OaZ5gQG"


def make_user(username: str = "alice") -> User:
    """Build a user with a unique ID and an address derived from the name."""
    return User(
        id=UserId(uuid4()),
        username=Username(username),
        email=Email(f"{username}@example.com"),
        password_hash=UNUSED_PASSWORD_HASH,
    )


def make_question(
    author_id: UserId,
    title: str = "How do I reverse a list?",
    tags: list[str] | None = None,
    **fields,
) -> Question:
    """Build a question; extra keyword arguments override fields."""
    return Question(
        id=QuestionId(uuid4()),
        author_id=author_id,
        title=title,
        description="I have a list of numbers and need it backwards.",
        tags=[TagName(t) for t in (["python"] if tags is None else tags)],
        **fields,
    )


def make_answer(
    question_id: QuestionId,
    author_id: UserId,
    content: str = "Use reversed() or slice with [::-1].",
    **fields,
) -> Answer:
    """Build an answer; extra keyword arguments override fields."""
    return Answer(
        id=AnswerId(uuid4()),
        question_id=question_id,
        author_id=author_id,
        content=content,
        **fields,
    )
