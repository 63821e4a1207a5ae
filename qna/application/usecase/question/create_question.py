"""Create question use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from qna.application.usecase.common import QuestionItem, question_item
from qna.domain.service import QuestionService, UserService
from qna.domain.value import UserId


class CreateQuestionRequest(BaseModel):
    """Create question request."""

    author_id: str
    title: str
    description: str
    tags: list[str]


class CreateQuestionUseCase:
    """Use case for asking a question."""

    def __init__(
        self, question_service: QuestionService, user_service: UserService
    ) -> None:
        """Initialize create question use case.

        Args:
            question_service: Question domain service
            user_service: User domain service
        """
        self.question_service = question_service
        self.user_service = user_service

    async def execute(self, request: CreateQuestionRequest) -> QuestionItem:
        """Execute create question flow.

        Raises:
            NotFoundError: If the author does not exist
            ValidationError: If title, description or tags are invalid
        """
        with logfire.span("create_question.execute", author_id=request.author_id):
            author = await self.user_service.get_by_id(UserId(UUID(request.author_id)))
            question = await self.question_service.create_question(
                author_id=author.id,
                title=request.title,
                description=request.description,
                tags=request.tags,
            )
            return question_item(question, {author.id: author})
