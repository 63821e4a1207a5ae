"""Question domain service."""

from datetime import datetime
from typing import Optional
from uuid import uuid4

import logfire

from qna.domain.error import NotAuthorizedError, NotFoundError, invalid_input
from qna.domain.model import Question
from qna.domain.repository import AnswerRepository, QuestionRepository
from qna.domain.value import QuestionId, QuestionSortOrder, TagName, UserId

from .base import Service


class QuestionService(Service):
    """Domain service for question operations."""

    def __init__(
        self,
        question_repository: QuestionRepository,
        answer_repository: AnswerRepository,
    ) -> None:
        """Initialize question service.

        Args:
            question_repository: Question repository
            answer_repository: Answer repository (for cascade delete)
        """
        self.question_repository = question_repository
        self.answer_repository = answer_repository

    async def create_question(
        self, author_id: UserId, title: str, description: str, tags: list[str]
    ) -> Question:
        """Create a new question.

        Args:
            author_id: Author of the question
            title: Question title
            description: Question body
            tags: Tag names, normalized and de-duplicated

        Returns:
            The stored question
        """
        with logfire.span(
            "question_service.create_question", author_id=str(author_id), title=title
        ):
            with invalid_input():
                question = Question(
                    id=QuestionId(uuid4()),
                    author_id=author_id,
                    title=title,
                    description=description,
                    tags=tags,
                )
            saved = await self.question_repository.save(question)
            logfire.info(
                "Question created", question_id=str(saved.id), tags=saved.tag_names
            )
            return saved

    async def get_question(self, question_id: QuestionId) -> Question:
        """Get a question by ID.

        Raises:
            NotFoundError: If the question does not exist
        """
        with logfire.span(
            "question_service.get_question", question_id=str(question_id)
        ):
            question = await self.question_repository.find_by_id(question_id)
            if question is None:
                logfire.warn("Question not found", question_id=str(question_id))
                raise NotFoundError("Question", str(question_id))
            return question

    async def record_view(self, question_id: QuestionId) -> Question:
        """Increment the view counter and return the fresh question."""
        with logfire.span("question_service.record_view", question_id=str(question_id)):
            await self.question_repository.increment_views(question_id)
            return await self.get_question(question_id)

    async def list_questions(
        self,
        search: Optional[str] = None,
        tags: Optional[list[TagName]] = None,
        sort: QuestionSortOrder = QuestionSortOrder.LATEST,
        limit: int = 10,
        offset: int = 0,
    ) -> tuple[list[Question], int]:
        """List questions with the total count for pagination."""
        with logfire.span(
            "question_service.list_questions",
            search=search,
            tags=[t.root for t in tags] if tags else None,
            sort=sort.value,
            limit=limit,
            offset=offset,
        ):
            total = await self.question_repository.count(search=search, tags=tags)
            questions = await self.question_repository.find_all(
                search=search, tags=tags, sort=sort, limit=limit, offset=offset
            )
            logfire.info("Questions listed", count=len(questions), total=total)
            return questions, total

    async def update_question(
        self,
        question_id: QuestionId,
        requester_id: UserId,
        title: Optional[str] = None,
        description: Optional[str] = None,
        tags: Optional[list[str]] = None,
    ) -> Question:
        """Edit a question's title, description or tags.

        Raises:
            NotFoundError: If the question does not exist
            NotAuthorizedError: If the requester is not the author
        """
        with logfire.span(
            "question_service.update_question",
            question_id=str(question_id),
            requester_id=str(requester_id),
        ):
            question = await self.get_question(question_id)
            if question.author_id != requester_id:
                logfire.warn(
                    "Unauthorized question edit",
                    question_id=str(question_id),
                    requester_id=str(requester_id),
                )
                raise NotAuthorizedError(
                    "question", str(question_id), str(requester_id)
                )

            # Re-validate through the constructor rather than model_copy
            data = question.model_dump()
            if title is not None:
                data["title"] = title
            if description is not None:
                data["description"] = description
            if tags is not None:
                data["tags"] = tags
            data["updated_at"] = datetime.now()
            with invalid_input():
                updated = Question(**data)

            saved = await self.question_repository.save(updated)
            logfire.info("Question updated", question_id=str(question_id))
            return saved

    async def delete_question(
        self, question_id: QuestionId, requester_id: UserId
    ) -> int:
        """Delete a question and all of its answers.

        Answers go first so no answer ever references a missing question.

        Returns:
            Number of answers deleted

        Raises:
            NotFoundError: If the question does not exist
            NotAuthorizedError: If the requester is not the author
        """
        with logfire.span(
            "question_service.delete_question",
            question_id=str(question_id),
            requester_id=str(requester_id),
        ):
            question = await self.question_repository.find_by_id(
                question_id, for_update=True
            )
            if question is None:
                raise NotFoundError("Question", str(question_id))
            if question.author_id != requester_id:
                raise NotAuthorizedError(
                    "question", str(question_id), str(requester_id), action="delete"
                )

            deleted_answers = await self.answer_repository.delete_by_question(
                question_id
            )
            await self.question_repository.delete(question_id)
            logfire.info(
                "Question deleted",
                question_id=str(question_id),
                deleted_answers=deleted_answers,
            )
            return deleted_answers
