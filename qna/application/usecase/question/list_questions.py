"""List questions use case."""

import logfire
from pydantic import BaseModel

from qna.application.usecase.common import (
    PageRequest,
    Pagination,
    QuestionItem,
    question_item,
)
from qna.domain.error import invalid_input
from qna.domain.service import QuestionService, UserService
from qna.domain.value import QuestionSortOrder, TagName


class ListQuestionsRequest(PageRequest):
    """List questions request."""

    search: str | None = None
    tags: list[str] | None = None  # Match any of these
    sort: QuestionSortOrder = QuestionSortOrder.LATEST


class ListQuestionsResponse(BaseModel):
    """List questions response."""

    questions: list[QuestionItem]
    pagination: Pagination


class ListQuestionsUseCase:
    """Use case for listing questions with filtering and pagination."""

    def __init__(
        self, question_service: QuestionService, user_service: UserService
    ) -> None:
        """Initialize list questions use case.

        Args:
            question_service: Question domain service
            user_service: User domain service
        """
        self.question_service = question_service
        self.user_service = user_service

    async def execute(self, request: ListQuestionsRequest) -> ListQuestionsResponse:
        """Execute list questions flow.

        Args:
            request: Filters and pagination

        Returns:
            One page of questions with authors populated
        """
        with invalid_input():
            tag_filter = (
                [TagName(tag) for tag in request.tags] if request.tags else None
            )
        search = request.search.strip() if request.search else None

        questions, total = await self.question_service.list_questions(
            search=search or None,
            tags=tag_filter,
            sort=request.sort,
            limit=request.limit,
            offset=request.offset,
        )
        authors = await self.user_service.get_users([q.author_id for q in questions])

        logfire.info("Questions page built", page=request.page, count=len(questions))

        return ListQuestionsResponse(
            questions=[question_item(q, authors) for q in questions],
            pagination=Pagination.build(request.page, request.limit, total),
        )
