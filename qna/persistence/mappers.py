"""Mappers for converting between database rows and domain models.

Domain models are immutable Pydantic models, so rows are mapped by hand
instead of through SQLAlchemy's ORM. Vote ledgers and answer comments are
stored as JSONB arrays and round-trip through ``model_dump(mode="json")``.
"""

from typing import Any, Dict, List, Optional, Sequence
from uuid import UUID

from qna.domain.model import Answer, AnswerComment, Notification, Question, User, Vote
from qna.domain.value import (
    AnswerId,
    Email,
    NotificationId,
    NotificationType,
    QuestionId,
    UserId,
    UserRole,
    Username,
)


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def _optional_uuid(value: Any) -> Optional[UUID]:
    return None if value is None else _uuid(value)


def votes_to_json(votes: Sequence[Vote]) -> List[Dict[str, Any]]:
    """Serialize a vote ledger for a JSONB column."""
    return [vote.model_dump(mode="json") for vote in votes]


def json_to_votes(data: Optional[List[Dict[str, Any]]]) -> List[Vote]:
    return [Vote.model_validate(item) for item in data or []]


def comment_to_json(comment: AnswerComment) -> Dict[str, Any]:
    return comment.model_dump(mode="json")


def json_to_comments(data: Optional[List[Dict[str, Any]]]) -> List[AnswerComment]:
    return [AnswerComment.model_validate(item) for item in data or []]


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model.

    Args:
        row: Database row as dict

    Returns:
        User domain model
    """
    return User(
        id=UserId(_uuid(row["id"])),
        username=Username(row["username"]),
        email=Email(row["email"]),
        password_hash=row["password_hash"],
        role=UserRole(row.get("role", "user")),
        avatar_url=row.get("avatar_url"),
        bio=row.get("bio"),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert User domain model to database dict."""
    data = user.model_dump()
    data["role"] = user.role.value
    return data


def row_to_question(row: Dict[str, Any]) -> Question:
    """Convert database row to Question domain model.

    Args:
        row: Database row as dict

    Returns:
        Question domain model
    """
    return Question(
        id=QuestionId(_uuid(row["id"])),
        author_id=UserId(_uuid(row["author_id"])),
        title=row["title"],
        description=row["description"],
        tags=list(row["tags"]),
        view_count=row["view_count"],
        answer_count=row["answer_count"],
        votes=json_to_votes(row.get("votes")),
        score=row["score"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def question_to_dict(question: Question) -> Dict[str, Any]:
    """Convert Question domain model to database dict."""
    data = question.model_dump(exclude={"votes", "tags"})
    data["tags"] = question.tag_names
    data["votes"] = votes_to_json(question.votes)
    return data


def row_to_answer(row: Dict[str, Any]) -> Answer:
    """Convert database row to Answer domain model."""
    return Answer(
        id=AnswerId(_uuid(row["id"])),
        question_id=QuestionId(_uuid(row["question_id"])),
        author_id=UserId(_uuid(row["author_id"])),
        content=row["content"],
        is_accepted=row["is_accepted"],
        votes=json_to_votes(row.get("votes")),
        score=row["score"],
        comments=json_to_comments(row.get("comments")),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def answer_to_dict(answer: Answer) -> Dict[str, Any]:
    """Convert Answer domain model to database dict."""
    data = answer.model_dump(exclude={"votes", "comments"})
    data["votes"] = votes_to_json(answer.votes)
    data["comments"] = [comment_to_json(c) for c in answer.comments]
    return data


def row_to_notification(row: Dict[str, Any]) -> Notification:
    """Convert database row to Notification domain model."""
    return Notification(
        id=NotificationId(_uuid(row["id"])),
        recipient_id=UserId(_uuid(row["recipient_id"])),
        sender_id=UserId(_uuid(row["sender_id"])),
        type=NotificationType(row["type"]),
        title=row["title"],
        message=row["message"],
        related_question_id=_optional_uuid(row.get("related_question_id")),
        related_answer_id=_optional_uuid(row.get("related_answer_id")),
        is_read=row["is_read"],
        link=row["link"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def notification_to_dict(notification: Notification) -> Dict[str, Any]:
    """Convert Notification domain model to database dict."""
    data = notification.model_dump()
    data["type"] = notification.type.value
    return data
