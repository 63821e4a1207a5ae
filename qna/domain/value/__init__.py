"""Domain value objects for the forum."""

from qna.domain.value.identifiers import (
    AnswerId,
    CommentId,
    NotificationId,
    QuestionId,
    UserId,
)
from qna.domain.value.types import (
    AnswerSortOrder,
    Email,
    NotificationFilter,
    NotificationType,
    QuestionSortOrder,
    TagName,
    TargetType,
    UserRole,
    Username,
    VoteAction,
    VoteDirection,
)

__all__ = [
    # Identifiers
    "UserId",
    "QuestionId",
    "AnswerId",
    "CommentId",
    "NotificationId",
    # Types
    "AnswerSortOrder",
    "Email",
    "NotificationFilter",
    "NotificationType",
    "QuestionSortOrder",
    "TagName",
    "TargetType",
    "UserRole",
    "Username",
    "VoteAction",
    "VoteDirection",
]
