"""Domain value objects for the forum.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and normalization.
"""

import re
from enum import Enum

from pydantic import field_validator

from qna.domain.value.common import RootValueObject


class VoteDirection(str, Enum):
    """Direction of a vote on a question or answer."""

    UP = "upvote"
    DOWN = "downvote"

    @property
    def weight(self) -> int:
        """Score contribution of a single vote in this direction."""
        return 1 if self is VoteDirection.UP else -1


class TargetType(str, Enum):
    """Type of entity that can be voted on."""

    QUESTION = "question"
    ANSWER = "answer"


class VoteAction(str, Enum):
    """What a vote request did to the voter's ledger entry."""

    ADDED = "added"
    REMOVED = "removed"
    SWITCHED = "switched"


class UserRole(str, Enum):
    USER = "user"
    ADMIN = "admin"


class NotificationType(str, Enum):
    """Kinds of notification a user can receive."""

    ANSWER = "answer"
    COMMENT = "comment"
    MENTION = "mention"
    ACCEPT = "accept"
    VOTE = "vote"


class NotificationFilter(str, Enum):
    """Read-state filter for notification listings."""

    ALL = "all"
    UNREAD = "unread"
    READ = "read"


class QuestionSortOrder(str, Enum):
    """Sort order for question listings."""

    LATEST = "latest"
    OLDEST = "oldest"
    MOST_ANSWERS = "most-answers"
    MOST_VOTES = "most-votes"


class AnswerSortOrder(str, Enum):
    """Sort order for answer listings."""

    VOTES = "votes"
    NEWEST = "newest"
    OLDEST = "oldest"


class TagName(RootValueObject[str]):
    """Tag for categorizing questions.

    Trimmed and lowercased on construction. 1-30 characters from
    letters, digits and ``+ # . -`` so names like ``c++`` and ``node.js``
    are accepted.
    """

    @field_validator("root")
    @classmethod
    def normalize_tag_name(cls, v: str) -> str:
        """Normalize and validate tag name."""
        v = v.strip().lower()
        if not re.match(r"^[a-z0-9+#.\-]{1,30}$", v):
            raise ValueError(
                "Tag name must be 1-30 characters of letters, digits, "
                "'+', '#', '.' or '-'"
            )
        return v


class Username(RootValueObject[str]):
    """Public username, 3-30 characters, URL safe."""

    @field_validator("root")
    @classmethod
    def validate_username(cls, v: str) -> str:
        v = v.strip()
        if not re.match(r"^[A-Za-z0-9_.\-]{3,30}$", v):
            raise ValueError(
                "Username must be 3-30 characters of letters, digits, "
                "'_', '.' or '-'"
            )
        return v


class Email(RootValueObject[str]):
    """Email address, stored lowercase."""

    @field_validator("root")
    @classmethod
    def validate_email(cls, v: str) -> str:
        v = v.strip().lower()
        if not re.match(r"^[^@\s]+@[^@\s]+\.[^@\s]+$", v):
            raise ValueError("Please enter a valid email")
        return v
