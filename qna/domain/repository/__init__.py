"""Repository interfaces for the forum domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from qna.domain.repository.answer import AnswerRepository
from qna.domain.repository.notification import NotificationRepository
from qna.domain.repository.question import QuestionRepository
from qna.domain.repository.user import UserRepository

__all__ = [
    "UserRepository",
    "QuestionRepository",
    "AnswerRepository",
    "NotificationRepository",
]
