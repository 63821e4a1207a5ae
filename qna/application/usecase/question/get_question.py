"""Get question use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel, Field

from qna.application.usecase.common import (
    AnswerItem,
    Pagination,
    QuestionItem,
    answer_item,
    question_item,
    referenced_users,
)
from qna.domain.service import AnswerService, QuestionService, UserService
from qna.domain.value import AnswerSortOrder, QuestionId


class GetQuestionRequest(BaseModel):
    """Get question request."""

    question_id: str
    include_answers: bool = True
    answers_page: int = Field(default=1, ge=1)
    answers_limit: int = Field(default=10, ge=1, le=100)


class GetQuestionResponse(BaseModel):
    """A question with one page of its answers."""

    question: QuestionItem
    answers: list[AnswerItem] | None = None
    answers_pagination: Pagination | None = None


class GetQuestionUseCase:
    """Use case for reading a question.

    Every read counts as a view. Answers come accepted first, then by score.
    """

    def __init__(
        self,
        question_service: QuestionService,
        answer_service: AnswerService,
        user_service: UserService,
    ) -> None:
        """Initialize get question use case.

        Args:
            question_service: Question domain service
            answer_service: Answer domain service
            user_service: User domain service
        """
        self.question_service = question_service
        self.answer_service = answer_service
        self.user_service = user_service

    async def execute(self, request: GetQuestionRequest) -> GetQuestionResponse:
        """Execute get question flow.

        Raises:
            NotFoundError: If the question does not exist
        """
        with logfire.span("get_question.execute", question_id=request.question_id):
            question_id = QuestionId(UUID(request.question_id))
            question = await self.question_service.record_view(question_id)

            if not request.include_answers:
                authors = await self.user_service.get_users([question.author_id])
                return GetQuestionResponse(question=question_item(question, authors))

            answers, total = await self.answer_service.list_answers(
                question_id,
                sort=AnswerSortOrder.VOTES,
                accepted_first=True,
                limit=request.answers_limit,
                offset=(request.answers_page - 1) * request.answers_limit,
            )
            authors = await self.user_service.get_users(
                referenced_users([question], answers)
            )

            return GetQuestionResponse(
                question=question_item(question, authors),
                answers=[answer_item(answer, authors) for answer in answers],
                answers_pagination=Pagination.build(
                    request.answers_page, request.answers_limit, total
                ),
            )
