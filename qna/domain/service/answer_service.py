"""Answer domain service."""

from datetime import datetime
from uuid import uuid4

import logfire

from qna.domain.error import NotAuthorizedError, NotFoundError, invalid_input
from qna.domain.model import Answer, AnswerComment, User
from qna.domain.repository import AnswerRepository, QuestionRepository
from qna.domain.value import AnswerId, AnswerSortOrder, CommentId, QuestionId, UserId

from .base import Service
from .notification_service import NotificationService


class AnswerService(Service):
    """Domain service for answer operations.

    Keeps the parent question's ``answer_count`` in step with answer
    creation and deletion. The counter update is a separate atomic
    increment issued after the answer row is written.
    """

    def __init__(
        self,
        answer_repository: AnswerRepository,
        question_repository: QuestionRepository,
        notification_service: NotificationService,
    ) -> None:
        """Initialize answer service.

        Args:
            answer_repository: Answer repository
            question_repository: Question repository
            notification_service: Notification service
        """
        self.answer_repository = answer_repository
        self.question_repository = question_repository
        self.notification_service = notification_service

    async def create_answer(
        self, question_id: QuestionId, author: User, content: str
    ) -> Answer:
        """Post an answer to a question.

        Notifies the question's author, best-effort.

        Args:
            question_id: Question being answered
            author: Answering user
            content: Answer body

        Returns:
            The stored answer

        Raises:
            NotFoundError: If the question does not exist
        """
        with logfire.span(
            "answer_service.create_answer",
            question_id=str(question_id),
            author_id=str(author.id),
        ):
            question = await self.question_repository.find_by_id(question_id)
            if question is None:
                logfire.warn(
                    "Answer on non-existent question", question_id=str(question_id)
                )
                raise NotFoundError("Question", str(question_id))

            with invalid_input():
                answer = Answer(
                    id=AnswerId(uuid4()),
                    question_id=question_id,
                    author_id=author.id,
                    content=content,
                )
            saved = await self.answer_repository.save(answer)
            await self.question_repository.increment_answer_count(question_id)

            logfire.info(
                "Answer created", answer_id=str(saved.id), question_id=str(question_id)
            )

            await self.notification_service.on_answer_created(question, saved, author)
            return saved

    async def get_answer(self, answer_id: AnswerId) -> Answer:
        """Get an answer by ID.

        Raises:
            NotFoundError: If the answer does not exist
        """
        answer = await self.answer_repository.find_by_id(answer_id)
        if answer is None:
            logfire.warn("Answer not found", answer_id=str(answer_id))
            raise NotFoundError("Answer", str(answer_id))
        return answer

    async def list_answers(
        self,
        question_id: QuestionId,
        sort: AnswerSortOrder = AnswerSortOrder.VOTES,
        accepted_first: bool = False,
        limit: int = 10,
        offset: int = 0,
    ) -> tuple[list[Answer], int]:
        """List a question's answers with the total count for pagination."""
        with logfire.span(
            "answer_service.list_answers",
            question_id=str(question_id),
            sort=sort.value,
            accepted_first=accepted_first,
        ):
            total = await self.answer_repository.count_by_question(question_id)
            answers = await self.answer_repository.find_by_question(
                question_id,
                sort=sort,
                accepted_first=accepted_first,
                limit=limit,
                offset=offset,
            )
            return answers, total

    async def edit_answer(
        self, answer_id: AnswerId, requester_id: UserId, content: str
    ) -> Answer:
        """Replace an answer's content.

        Raises:
            NotFoundError: If the answer does not exist
            NotAuthorizedError: If the requester is not the answer's author
        """
        with logfire.span(
            "answer_service.edit_answer",
            answer_id=str(answer_id),
            requester_id=str(requester_id),
        ):
            answer = await self.get_answer(answer_id)
            if answer.author_id != requester_id:
                logfire.warn(
                    "Unauthorized answer edit",
                    answer_id=str(answer_id),
                    requester_id=str(requester_id),
                )
                raise NotAuthorizedError("answer", str(answer_id), str(requester_id))

            data = answer.model_dump()
            data["content"] = content
            data["updated_at"] = datetime.now()
            with invalid_input():
                edited = Answer(**data)
            saved = await self.answer_repository.save(edited)
            logfire.info("Answer edited", answer_id=str(answer_id))
            return saved

    async def delete_answer(self, answer_id: AnswerId, requester_id: UserId) -> None:
        """Delete an answer and decrement its question's answer count.

        Raises:
            NotFoundError: If the answer does not exist
            NotAuthorizedError: If the requester is not the answer's author
        """
        with logfire.span(
            "answer_service.delete_answer",
            answer_id=str(answer_id),
            requester_id=str(requester_id),
        ):
            answer = await self.get_answer(answer_id)
            if answer.author_id != requester_id:
                raise NotAuthorizedError(
                    "answer", str(answer_id), str(requester_id), action="delete"
                )

            deleted = await self.answer_repository.delete(answer_id)
            if deleted:
                await self.question_repository.decrement_answer_count(
                    answer.question_id
                )
            logfire.info(
                "Answer deleted",
                answer_id=str(answer_id),
                question_id=str(answer.question_id),
            )

    async def add_comment(
        self, answer_id: AnswerId, author: User, content: str
    ) -> tuple[Answer, AnswerComment]:
        """Append a comment to an answer and notify the answer's author.

        Raises:
            NotFoundError: If the answer does not exist
        """
        with logfire.span(
            "answer_service.add_comment",
            answer_id=str(answer_id),
            author_id=str(author.id),
        ):
            with invalid_input():
                comment = AnswerComment(
                    id=CommentId(uuid4()), author_id=author.id, content=content
                )
            updated = await self.answer_repository.add_comment(answer_id, comment)
            if updated is None:
                raise NotFoundError("Answer", str(answer_id))

            logfire.info(
                "Comment added", answer_id=str(answer_id), comment_id=str(comment.id)
            )
            await self.notification_service.on_comment_added(updated, comment, author)
            return updated, comment
