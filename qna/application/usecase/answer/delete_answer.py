"""Delete answer use case."""

from uuid import UUID

from pydantic import BaseModel

from qna.domain.service import AnswerService
from qna.domain.value import AnswerId, UserId


class DeleteAnswerRequest(BaseModel):
    """Delete answer request."""

    answer_id: str
    user_id: str  # From authenticated user


class DeleteAnswerResponse(BaseModel):
    """Delete answer response."""

    answer_id: str
    deleted: bool


class DeleteAnswerUseCase:
    """Use case for deleting one's own answer."""

    def __init__(self, answer_service: AnswerService) -> None:
        """Initialize delete answer use case.

        Args:
            answer_service: Answer domain service
        """
        self.answer_service = answer_service

    async def execute(self, request: DeleteAnswerRequest) -> DeleteAnswerResponse:
        await self.answer_service.delete_answer(
            AnswerId(UUID(request.answer_id)), UserId(UUID(request.user_id))
        )
        return DeleteAnswerResponse(answer_id=request.answer_id, deleted=True)
