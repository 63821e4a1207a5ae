"""Update answer use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from qna.application.usecase.base import BaseUseCase
from qna.application.usecase.common import AnswerItem, answer_item, referenced_users
from qna.domain.error import NotAuthorizedError, ValidationError
from qna.domain.service import (
    AcceptanceService,
    AnswerService,
    QuestionService,
    UserService,
)
from qna.domain.value import AnswerId, UserId


class UpdateAnswerRequest(BaseModel):
    """Update answer request.

    ``content`` may only be changed by the answer's author, ``is_accepted``
    only by the author of the question. Both may be sent together.
    """

    answer_id: str
    user_id: str  # From authenticated user
    content: str | None = None
    is_accepted: bool | None = None


class UpdateAnswerUseCase(BaseUseCase):
    """Use case for editing an answer and/or changing its accepted flag."""

    def __init__(
        self,
        answer_service: AnswerService,
        acceptance_service: AcceptanceService,
        question_service: QuestionService,
        user_service: UserService,
    ) -> None:
        """Initialize update answer use case.

        Args:
            answer_service: Answer domain service
            acceptance_service: Acceptance domain service
            question_service: Question domain service
            user_service: User domain service
        """
        self.answer_service = answer_service
        self.acceptance_service = acceptance_service
        self.question_service = question_service
        self.user_service = user_service

    async def execute(self, request: UpdateAnswerRequest) -> AnswerItem:
        """Execute update answer flow.

        Raises:
            ValidationError: If neither field is given
            NotFoundError: If the answer does not exist
            NotAuthorizedError: If the user may not make the requested change
        """
        if request.content is None and request.is_accepted is None:
            raise ValidationError("Nothing to update")

        answer_id = AnswerId(UUID(request.answer_id))
        user_id = UserId(UUID(request.user_id))

        with logfire.span(
            "update_answer.execute",
            answer_id=request.answer_id,
            user_id=request.user_id,
            edit_content=request.content is not None,
            is_accepted=request.is_accepted,
        ):
            answer = await self.answer_service.get_answer(answer_id)

            # Both permissions are checked before either change is written
            if request.content is not None and answer.author_id != user_id:
                raise NotAuthorizedError("answer", str(answer_id), str(user_id))
            if request.is_accepted is not None:
                question = await self.question_service.get_question(
                    answer.question_id
                )
                if question.author_id != user_id:
                    raise NotAuthorizedError(
                        "question",
                        str(question.id),
                        str(user_id),
                        action="change the accepted answer on",
                    )

            if request.content is not None:
                answer = await self.answer_service.edit_answer(
                    answer_id, user_id, request.content
                )

            if request.is_accepted is True:
                answer = await self.acceptance_service.accept_answer(
                    answer.question_id, answer_id, user_id
                )
            elif request.is_accepted is False:
                answer = await self.acceptance_service.unaccept_answer(
                    answer.question_id, answer_id, user_id
                )

            authors = await self.user_service.get_users(
                referenced_users(answers=[answer])
            )
            return answer_item(answer, authors)
