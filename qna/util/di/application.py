"""Application layer DI providers."""

from dishka import Scope, provide

from qna.application.usecase.answer import (
    AddCommentUseCase,
    CreateAnswerUseCase,
    DeleteAnswerUseCase,
    ListAnswersUseCase,
    UpdateAnswerUseCase,
)
from qna.application.usecase.auth import (
    GetCurrentUserUseCase,
    LoginUseCase,
    RegisterUseCase,
)
from qna.application.usecase.notification import (
    DeleteNotificationUseCase,
    ListNotificationsUseCase,
    MarkAllNotificationsReadUseCase,
    MarkNotificationReadUseCase,
)
from qna.application.usecase.question import (
    CreateQuestionUseCase,
    DeleteQuestionUseCase,
    GetQuestionUseCase,
    ListQuestionsUseCase,
    UpdateQuestionUseCase,
)
from qna.application.usecase.tag import GetTagStatsUseCase, ListTagsUseCase
from qna.application.usecase.user import (
    GetUserProfileUseCase,
    ListUserAnswersUseCase,
    ListUserQuestionsUseCase,
    UpdateUserProfileUseCase,
)
from qna.application.usecase.vote import CastVoteUseCase, GetUserVotesUseCase
from qna.domain.repository import AnswerRepository, QuestionRepository
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


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Auth use cases
    @provide(scope=Scope.REQUEST)
    def get_register_use_case(
        self, auth_service: AuthService, jwt_service: JWTService
    ) -> RegisterUseCase:
        """Provide register use case."""
        return RegisterUseCase(auth_service=auth_service, jwt_service=jwt_service)

    @provide(scope=Scope.REQUEST)
    def get_login_use_case(
        self, auth_service: AuthService, jwt_service: JWTService
    ) -> LoginUseCase:
        """Provide login use case."""
        return LoginUseCase(auth_service=auth_service, jwt_service=jwt_service)

    @provide(scope=Scope.REQUEST)
    def get_current_user_use_case(
        self, jwt_service: JWTService, user_service: UserService
    ) -> GetCurrentUserUseCase:
        """Provide get current user use case."""
        return GetCurrentUserUseCase(
            jwt_service=jwt_service, user_service=user_service
        )

    # Question use cases
    @provide(scope=Scope.REQUEST)
    def get_create_question_use_case(
        self, question_service: QuestionService, user_service: UserService
    ) -> CreateQuestionUseCase:
        """Provide create question use case."""
        return CreateQuestionUseCase(
            question_service=question_service, user_service=user_service
        )

    @provide(scope=Scope.REQUEST)
    def get_get_question_use_case(
        self,
        question_service: QuestionService,
        answer_service: AnswerService,
        user_service: UserService,
    ) -> GetQuestionUseCase:
        """Provide get question use case."""
        return GetQuestionUseCase(
            question_service=question_service,
            answer_service=answer_service,
            user_service=user_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_list_questions_use_case(
        self, question_service: QuestionService, user_service: UserService
    ) -> ListQuestionsUseCase:
        """Provide list questions use case."""
        return ListQuestionsUseCase(
            question_service=question_service, user_service=user_service
        )

    @provide(scope=Scope.REQUEST)
    def get_update_question_use_case(
        self, question_service: QuestionService, user_service: UserService
    ) -> UpdateQuestionUseCase:
        """Provide update question use case."""
        return UpdateQuestionUseCase(
            question_service=question_service, user_service=user_service
        )

    @provide(scope=Scope.REQUEST)
    def get_delete_question_use_case(
        self, question_service: QuestionService
    ) -> DeleteQuestionUseCase:
        """Provide delete question use case."""
        return DeleteQuestionUseCase(question_service=question_service)

    # Answer use cases
    @provide(scope=Scope.REQUEST)
    def get_create_answer_use_case(
        self, answer_service: AnswerService, user_service: UserService
    ) -> CreateAnswerUseCase:
        """Provide create answer use case."""
        return CreateAnswerUseCase(
            answer_service=answer_service, user_service=user_service
        )

    @provide(scope=Scope.REQUEST)
    def get_list_answers_use_case(
        self,
        answer_service: AnswerService,
        question_service: QuestionService,
        user_service: UserService,
    ) -> ListAnswersUseCase:
        """Provide list answers use case."""
        return ListAnswersUseCase(
            answer_service=answer_service,
            question_service=question_service,
            user_service=user_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_update_answer_use_case(
        self,
        answer_service: AnswerService,
        acceptance_service: AcceptanceService,
        question_service: QuestionService,
        user_service: UserService,
    ) -> UpdateAnswerUseCase:
        """Provide update answer use case."""
        return UpdateAnswerUseCase(
            answer_service=answer_service,
            acceptance_service=acceptance_service,
            question_service=question_service,
            user_service=user_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_delete_answer_use_case(
        self, answer_service: AnswerService
    ) -> DeleteAnswerUseCase:
        """Provide delete answer use case."""
        return DeleteAnswerUseCase(answer_service=answer_service)

    @provide(scope=Scope.REQUEST)
    def get_add_comment_use_case(
        self, answer_service: AnswerService, user_service: UserService
    ) -> AddCommentUseCase:
        """Provide add comment use case."""
        return AddCommentUseCase(
            answer_service=answer_service, user_service=user_service
        )

    # Vote use cases
    @provide(scope=Scope.REQUEST)
    def get_cast_vote_use_case(self, vote_service: VoteService) -> CastVoteUseCase:
        """Provide cast vote use case."""
        return CastVoteUseCase(vote_service=vote_service)

    @provide(scope=Scope.REQUEST)
    def get_user_votes_use_case(
        self, vote_service: VoteService
    ) -> GetUserVotesUseCase:
        """Provide get user votes use case."""
        return GetUserVotesUseCase(vote_service=vote_service)

    # Tag use cases
    @provide(scope=Scope.REQUEST)
    def get_list_tags_use_case(self, tag_service: TagService) -> ListTagsUseCase:
        """Provide list tags use case."""
        return ListTagsUseCase(tag_service=tag_service)

    @provide(scope=Scope.REQUEST)
    def get_tag_stats_use_case(
        self, tag_service: TagService, user_service: UserService
    ) -> GetTagStatsUseCase:
        """Provide get tag stats use case."""
        return GetTagStatsUseCase(tag_service=tag_service, user_service=user_service)

    # User use cases
    @provide(scope=Scope.REQUEST)
    def get_user_profile_use_case(
        self, user_service: UserService
    ) -> GetUserProfileUseCase:
        """Provide get user profile use case."""
        return GetUserProfileUseCase(user_service=user_service)

    @provide(scope=Scope.REQUEST)
    def get_update_user_profile_use_case(
        self, user_service: UserService
    ) -> UpdateUserProfileUseCase:
        """Provide update user profile use case."""
        return UpdateUserProfileUseCase(user_service=user_service)

    @provide(scope=Scope.REQUEST)
    def get_list_user_questions_use_case(
        self, user_service: UserService, question_repository: QuestionRepository
    ) -> ListUserQuestionsUseCase:
        """Provide list user questions use case."""
        return ListUserQuestionsUseCase(
            user_service=user_service, question_repository=question_repository
        )

    @provide(scope=Scope.REQUEST)
    def get_list_user_answers_use_case(
        self, user_service: UserService, answer_repository: AnswerRepository
    ) -> ListUserAnswersUseCase:
        """Provide list user answers use case."""
        return ListUserAnswersUseCase(
            user_service=user_service, answer_repository=answer_repository
        )

    # Notification use cases
    @provide(scope=Scope.REQUEST)
    def get_list_notifications_use_case(
        self, notification_service: NotificationService, user_service: UserService
    ) -> ListNotificationsUseCase:
        """Provide list notifications use case."""
        return ListNotificationsUseCase(
            notification_service=notification_service, user_service=user_service
        )

    @provide(scope=Scope.REQUEST)
    def get_mark_notification_read_use_case(
        self, notification_service: NotificationService, user_service: UserService
    ) -> MarkNotificationReadUseCase:
        """Provide mark notification read use case."""
        return MarkNotificationReadUseCase(
            notification_service=notification_service, user_service=user_service
        )

    @provide(scope=Scope.REQUEST)
    def get_mark_all_notifications_read_use_case(
        self, notification_service: NotificationService
    ) -> MarkAllNotificationsReadUseCase:
        """Provide mark all notifications read use case."""
        return MarkAllNotificationsReadUseCase(
            notification_service=notification_service
        )

    @provide(scope=Scope.REQUEST)
    def get_delete_notification_use_case(
        self, notification_service: NotificationService
    ) -> DeleteNotificationUseCase:
        """Provide delete notification use case."""
        return DeleteNotificationUseCase(notification_service=notification_service)
