"""Notification entity."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from qna.domain.model.common import DomainModel
from qna.domain.value import (
    AnswerId,
    NotificationId,
    NotificationType,
    QuestionId,
    UserId,
)


class Notification(DomainModel):
    """Notification entity.

    Created only by the notification service. Afterwards only the read flag
    changes, and only the recipient may delete it.
    """

    id: NotificationId
    recipient_id: UserId
    sender_id: UserId
    type: NotificationType
    title: str = Field(min_length=1, max_length=100)
    message: str = Field(min_length=1, max_length=500)
    related_question_id: Optional[QuestionId] = None
    related_answer_id: Optional[AnswerId] = None
    is_read: bool = False
    link: str
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)
