"""Create answer use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from qna.application.usecase.common import AnswerItem, answer_item
from qna.domain.service import AnswerService, UserService
from qna.domain.value import QuestionId, UserId


class CreateAnswerRequest(BaseModel):
    """Create answer request."""

    question_id: str
    user_id: str  # From authenticated user
    content: str


class CreateAnswerUseCase:
    """Use case for answering a question.

    The question's author is notified, best-effort: a failed notification
    never fails the answer.
    """

    def __init__(
        self, answer_service: AnswerService, user_service: UserService
    ) -> None:
        """Initialize create answer use case.

        Args:
            answer_service: Answer domain service
            user_service: User domain service
        """
        self.answer_service = answer_service
        self.user_service = user_service

    async def execute(self, request: CreateAnswerRequest) -> AnswerItem:
        """Execute create answer flow.

        Raises:
            NotFoundError: If the question or the user does not exist
        """
        with logfire.span(
            "create_answer.execute",
            question_id=request.question_id,
            user_id=request.user_id,
        ):
            author = await self.user_service.get_by_id(UserId(UUID(request.user_id)))
            answer = await self.answer_service.create_answer(
                QuestionId(UUID(request.question_id)), author, request.content
            )
            return answer_item(answer, {author.id: author})
