"""Domain layer DI providers."""

from dishka import Scope, provide

from qna.config import AuthSettings
from qna.domain.repository import (
    AnswerRepository,
    NotificationRepository,
    QuestionRepository,
    UserRepository,
)
from qna.domain.service import (
    AcceptanceService,
    AnswerService,
    AuthService,
    JWTService,
    NotificationService,
    QuestionService,
    TagService,
    UserService,
    VoteService,
)
from qna.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_auth_service(
        self, user_repository: UserRepository, auth_settings: AuthSettings
    ) -> AuthService:
        """Provide password authentication domain service."""
        return AuthService(
            user_repository=user_repository, auth_settings=auth_settings
        )

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_user_service(
        self,
        user_repository: UserRepository,
        question_repository: QuestionRepository,
        answer_repository: AnswerRepository,
    ) -> UserService:
        """Provide user domain service."""
        return UserService(
            user_repository=user_repository,
            question_repository=question_repository,
            answer_repository=answer_repository,
        )

    @provide
    def get_notification_service(
        self, notification_repository: NotificationRepository
    ) -> NotificationService:
        """Provide notification domain service."""
        return NotificationService(notification_repository=notification_repository)

    @provide
    def get_question_service(
        self,
        question_repository: QuestionRepository,
        answer_repository: AnswerRepository,
    ) -> QuestionService:
        """Provide question domain service."""
        return QuestionService(
            question_repository=question_repository,
            answer_repository=answer_repository,
        )

    @provide
    def get_answer_service(
        self,
        answer_repository: AnswerRepository,
        question_repository: QuestionRepository,
        notification_service: NotificationService,
    ) -> AnswerService:
        """Provide answer domain service."""
        return AnswerService(
            answer_repository=answer_repository,
            question_repository=question_repository,
            notification_service=notification_service,
        )

    @provide
    def get_vote_service(
        self,
        question_repository: QuestionRepository,
        answer_repository: AnswerRepository,
    ) -> VoteService:
        """Provide vote domain service."""
        return VoteService(
            question_repository=question_repository,
            answer_repository=answer_repository,
        )

    @provide
    def get_acceptance_service(
        self,
        question_repository: QuestionRepository,
        answer_repository: AnswerRepository,
        notification_service: NotificationService,
    ) -> AcceptanceService:
        """Provide acceptance domain service."""
        return AcceptanceService(
            question_repository=question_repository,
            answer_repository=answer_repository,
            notification_service=notification_service,
        )

    @provide
    def get_tag_service(self, question_repository: QuestionRepository) -> TagService:
        """Provide tag domain service."""
        return TagService(question_repository=question_repository)
