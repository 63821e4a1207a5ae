"""Add comment use case."""

from uuid import UUID

from pydantic import BaseModel

from qna.application.usecase.common import CommentItem, comment_item
from qna.domain.service import AnswerService, UserService
from qna.domain.value import AnswerId, UserId


class AddCommentRequest(BaseModel):
    """Add comment request."""

    answer_id: str
    user_id: str  # From authenticated user
    content: str


class AddCommentResponse(BaseModel):
    """Add comment response."""

    answer_id: str
    comment: CommentItem
    comment_count: int


class AddCommentUseCase:
    """Use case for commenting on an answer."""

    def __init__(
        self, answer_service: AnswerService, user_service: UserService
    ) -> None:
        """Initialize add comment use case.

        Args:
            answer_service: Answer domain service
            user_service: User domain service
        """
        self.answer_service = answer_service
        self.user_service = user_service

    async def execute(self, request: AddCommentRequest) -> AddCommentResponse:
        """Execute add comment flow.

        Raises:
            NotFoundError: If the answer or the user does not exist
            ValidationError: If the comment is empty or too long
        """
        author = await self.user_service.get_by_id(UserId(UUID(request.user_id)))
        answer, comment = await self.answer_service.add_comment(
            AnswerId(UUID(request.answer_id)), author, request.content
        )
        return AddCommentResponse(
            answer_id=str(answer.id),
            comment=comment_item(comment, {author.id: author}),
            comment_count=len(answer.comments),
        )
