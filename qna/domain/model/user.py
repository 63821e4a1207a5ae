"""User aggregate root.

Users register with a username, email and password. Reputation is not
stored: it is recomputed from the scores of the user's questions and
answers whenever a profile is read.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from qna.domain.model.common import DomainModel
from qna.domain.value import Email, UserId, UserRole, Username


class User(DomainModel):
    """User aggregate root."""

    id: UserId
    username: Username
    email: Email
    password_hash: str
    role: UserRole = UserRole.USER
    avatar_url: Optional[str] = None
    bio: Optional[str] = Field(default=None, max_length=200)
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)
