"""List a user's questions or answers."""

from pydantic import BaseModel

from qna.application.usecase.common import (
    AnswerItem,
    PageRequest,
    Pagination,
    QuestionItem,
    answer_item,
    question_item,
    referenced_users,
)
from qna.domain.repository import AnswerRepository, QuestionRepository
from qna.domain.service import UserService


class ListUserContentRequest(PageRequest):
    """List user content request."""

    username: str


class ListUserQuestionsResponse(BaseModel):
    questions: list[QuestionItem]
    pagination: Pagination


class ListUserAnswersResponse(BaseModel):
    answers: list[AnswerItem]
    pagination: Pagination


class ListUserQuestionsUseCase:
    """Use case for a user's questions, newest first."""

    def __init__(
        self, user_service: UserService, question_repository: QuestionRepository
    ) -> None:
        """Initialize list user questions use case.

        Args:
            user_service: User domain service
            question_repository: Question repository
        """
        self.user_service = user_service
        self.question_repository = question_repository

    async def execute(
        self, request: ListUserContentRequest
    ) -> ListUserQuestionsResponse:
        user = await self.user_service.get_by_username(request.username)
        stats = await self.question_repository.author_stats(user.id)
        questions = await self.question_repository.find_by_author(
            user.id, limit=request.limit, offset=request.offset
        )
        authors = {user.id: user}
        return ListUserQuestionsResponse(
            questions=[question_item(q, authors) for q in questions],
            pagination=Pagination.build(request.page, request.limit, stats.count),
        )


class ListUserAnswersUseCase:
    """Use case for a user's answers, newest first."""

    def __init__(
        self, user_service: UserService, answer_repository: AnswerRepository
    ) -> None:
        """Initialize list user answers use case.

        Args:
            user_service: User domain service
            answer_repository: Answer repository
        """
        self.user_service = user_service
        self.answer_repository = answer_repository

    async def execute(self, request: ListUserContentRequest) -> ListUserAnswersResponse:
        user = await self.user_service.get_by_username(request.username)
        stats = await self.answer_repository.author_stats(user.id)
        answers = await self.answer_repository.find_by_author(
            user.id, limit=request.limit, offset=request.offset
        )
        # Comment authors may be other users
        authors = await self.user_service.get_users(referenced_users(answers=answers))
        return ListUserAnswersResponse(
            answers=[answer_item(a, authors) for a in answers],
            pagination=Pagination.build(request.page, request.limit, stats.count),
        )
