"""Domain services."""

from .acceptance_service import AcceptanceService
from .answer_service import AnswerService
from .auth_service import AuthService
from .base import Service
from .jwt_service import JWTService
from .notification_service import NotificationService
from .question_service import QuestionService
from .tag_service import TagService
from .user_service import UserService, UserStats
from .vote_service import VoteResult, VoteService

__all__ = [
    "AcceptanceService",
    "AnswerService",
    "AuthService",
    "JWTService",
    "NotificationService",
    "QuestionService",
    "Service",
    "TagService",
    "UserService",
    "UserStats",
    "VoteResult",
    "VoteService",
]
