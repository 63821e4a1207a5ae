"""List answers use case."""

from uuid import UUID

from pydantic import BaseModel

from qna.application.usecase.common import (
    AnswerItem,
    PageRequest,
    Pagination,
    answer_item,
    referenced_users,
)
from qna.domain.service import AnswerService, QuestionService, UserService
from qna.domain.value import AnswerSortOrder, QuestionId


class ListAnswersRequest(PageRequest):
    """List answers request."""

    question_id: str
    sort: AnswerSortOrder = AnswerSortOrder.VOTES


class ListAnswersResponse(BaseModel):
    """List answers response."""

    answers: list[AnswerItem]
    pagination: Pagination


class ListAnswersUseCase:
    """Use case for paging through a question's answers."""

    def __init__(
        self,
        answer_service: AnswerService,
        question_service: QuestionService,
        user_service: UserService,
    ) -> None:
        """Initialize list answers use case.

        Args:
            answer_service: Answer domain service
            question_service: Question domain service
            user_service: User domain service
        """
        self.answer_service = answer_service
        self.question_service = question_service
        self.user_service = user_service

    async def execute(self, request: ListAnswersRequest) -> ListAnswersResponse:
        """Execute list answers flow.

        Raises:
            NotFoundError: If the question does not exist
        """
        question_id = QuestionId(UUID(request.question_id))
        await self.question_service.get_question(question_id)

        answers, total = await self.answer_service.list_answers(
            question_id,
            sort=request.sort,
            limit=request.limit,
            offset=request.offset,
        )
        authors = await self.user_service.get_users(referenced_users(answers=answers))

        return ListAnswersResponse(
            answers=[answer_item(answer, authors) for answer in answers],
            pagination=Pagination.build(request.page, request.limit, total),
        )
