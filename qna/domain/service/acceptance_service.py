"""Accepted answer domain service."""

import logfire

from qna.domain.error import InvalidOperationError, NotAuthorizedError, NotFoundError
from qna.domain.model import Answer, Question
from qna.domain.repository import AnswerRepository, QuestionRepository
from qna.domain.value import AnswerId, QuestionId, UserId

from .base import Service
from .notification_service import NotificationService


class AcceptanceService(Service):
    """Domain service for marking a question's accepted answer.

    Only the question's author may accept or unaccept. The question row is
    locked first so concurrent accepts on the same question run one after
    the other, and the flag flip itself is a single statement over all of
    the question's answers.
    """

    def __init__(
        self,
        question_repository: QuestionRepository,
        answer_repository: AnswerRepository,
        notification_service: NotificationService,
    ) -> None:
        """Initialize acceptance service.

        Args:
            question_repository: Question repository
            answer_repository: Answer repository
            notification_service: Notification service for accept notices
        """
        self.question_repository = question_repository
        self.answer_repository = answer_repository
        self.notification_service = notification_service

    async def accept_answer(
        self, question_id: QuestionId, answer_id: AnswerId, requester_id: UserId
    ) -> Answer:
        """Make an answer the question's only accepted answer.

        Args:
            question_id: Question ID
            answer_id: Answer to accept
            requester_id: User making the request

        Returns:
            The accepted answer

        Raises:
            NotFoundError: If the question or answer does not exist
            NotAuthorizedError: If the requester did not ask the question
            InvalidOperationError: If the answer belongs to another question
        """
        with logfire.span(
            "acceptance_service.accept_answer",
            question_id=str(question_id),
            answer_id=str(answer_id),
            requester_id=str(requester_id),
        ):
            question, answer = await self._authorize(
                question_id, answer_id, requester_id, action="accept answers on"
            )

            accepted = await self.answer_repository.mark_accepted(
                question_id, answer_id
            )
            if accepted is None:
                raise NotFoundError("Answer", str(answer_id))

            logfire.info(
                "Answer accepted",
                question_id=str(question_id),
                answer_id=str(answer_id),
                was_accepted=answer.is_accepted,
            )

            if not answer.is_accepted:
                await self.notification_service.on_answer_accepted(
                    question, accepted, requester_id
                )

            return accepted

    async def unaccept_answer(
        self, question_id: QuestionId, answer_id: AnswerId, requester_id: UserId
    ) -> Answer:
        """Clear the accepted flag on one answer.

        No other answer is touched. Unaccepting an answer that is not
        accepted leaves it unchanged.

        Raises:
            NotFoundError: If the question or answer does not exist
            NotAuthorizedError: If the requester did not ask the question
            InvalidOperationError: If the answer belongs to another question
        """
        with logfire.span(
            "acceptance_service.unaccept_answer",
            question_id=str(question_id),
            answer_id=str(answer_id),
            requester_id=str(requester_id),
        ):
            _, answer = await self._authorize(
                question_id, answer_id, requester_id, action="unaccept answers on"
            )

            if not answer.is_accepted:
                return answer

            updated = await self.answer_repository.unmark_accepted(answer_id)
            if updated is None:
                raise NotFoundError("Answer", str(answer_id))

            logfire.info(
                "Answer unaccepted",
                question_id=str(question_id),
                answer_id=str(answer_id),
            )
            return updated

    async def _authorize(
        self,
        question_id: QuestionId,
        answer_id: AnswerId,
        requester_id: UserId,
        action: str,
    ) -> tuple[Question, Answer]:
        question = await self.question_repository.find_by_id(
            question_id, for_update=True
        )
        if question is None:
            raise NotFoundError("Question", str(question_id))

        if question.author_id != requester_id:
            logfire.warn(
                "Unauthorized acceptance attempt",
                question_id=str(question_id),
                requester_id=str(requester_id),
            )
            raise NotAuthorizedError(
                "question", str(question_id), str(requester_id), action=action
            )

        answer = await self.answer_repository.find_by_id(answer_id)
        if answer is None:
            raise NotFoundError("Answer", str(answer_id))

        if answer.question_id != question_id:
            raise InvalidOperationError("Answer does not belong to this question")

        return question, answer
