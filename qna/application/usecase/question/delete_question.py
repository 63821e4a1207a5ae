"""Delete question use case."""

from uuid import UUID

from pydantic import BaseModel

from qna.domain.service import QuestionService
from qna.domain.value import QuestionId, UserId


class DeleteQuestionRequest(BaseModel):
    """Delete question request."""

    question_id: str
    user_id: str  # From authenticated user


class DeleteQuestionResponse(BaseModel):
    """Delete question response."""

    question_id: str
    deleted_answers: int


class DeleteQuestionUseCase:
    """Use case for deleting a question together with its answers."""

    def __init__(self, question_service: QuestionService) -> None:
        """Initialize delete question use case.

        Args:
            question_service: Question domain service
        """
        self.question_service = question_service

    async def execute(self, request: DeleteQuestionRequest) -> DeleteQuestionResponse:
        deleted_answers = await self.question_service.delete_question(
            QuestionId(UUID(request.question_id)), UserId(UUID(request.user_id))
        )
        return DeleteQuestionResponse(
            question_id=request.question_id, deleted_answers=deleted_answers
        )
