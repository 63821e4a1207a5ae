"""Update question use case."""

from uuid import UUID

from pydantic import BaseModel

from qna.application.usecase.common import QuestionItem, question_item
from qna.domain.service import QuestionService, UserService
from qna.domain.value import QuestionId, UserId


class UpdateQuestionRequest(BaseModel):
    """Update question request; None leaves a field unchanged."""

    question_id: str
    user_id: str  # From authenticated user
    title: str | None = None
    description: str | None = None
    tags: list[str] | None = None


class UpdateQuestionUseCase:
    """Use case for editing a question. Only the author may edit."""

    def __init__(
        self, question_service: QuestionService, user_service: UserService
    ) -> None:
        """Initialize update question use case.

        Args:
            question_service: Question domain service
            user_service: User domain service
        """
        self.question_service = question_service
        self.user_service = user_service

    async def execute(self, request: UpdateQuestionRequest) -> QuestionItem:
        """Execute update question flow.

        Raises:
            NotFoundError: If the question does not exist
            NotAuthorizedError: If the user is not the author
        """
        question = await self.question_service.update_question(
            QuestionId(UUID(request.question_id)),
            UserId(UUID(request.user_id)),
            title=request.title,
            description=request.description,
            tags=request.tags,
        )
        authors = await self.user_service.get_users([question.author_id])
        return question_item(question, authors)
