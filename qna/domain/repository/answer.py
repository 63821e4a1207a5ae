"""Answer repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from qna.domain.model import Answer, AnswerComment, ContentStats, Vote
from qna.domain.value import AnswerId, AnswerSortOrder, QuestionId, UserId


class AnswerRepository(ABC):
    """Repository for Answer entity."""

    @abstractmethod
    async def find_by_id(
        self, answer_id: AnswerId, for_update: bool = False
    ) -> Optional[Answer]:
        """Find an answer by ID.

        Args:
            answer_id: The answer's unique identifier
            for_update: Lock the row until the current transaction ends

        Returns:
            The answer if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_question(
        self,
        question_id: QuestionId,
        sort: AnswerSortOrder = AnswerSortOrder.VOTES,
        accepted_first: bool = False,
        limit: int = 10,
        offset: int = 0,
    ) -> List[Answer]:
        """Find answers to a question.

        Args:
            question_id: Parent question
            sort: Sort order; VOTES is score descending then newest first
            accepted_first: Put the accepted answer ahead of the sort order
            limit: Maximum number of answers
            offset: Number of answers to skip

        Returns:
            List of answers
        """
        pass

    @abstractmethod
    async def count_by_question(self, question_id: QuestionId) -> int:
        pass

    @abstractmethod
    async def find_by_author(
        self, author_id: UserId, limit: int = 10, offset: int = 0
    ) -> List[Answer]:
        """Find an author's answers, newest first."""
        pass

    @abstractmethod
    async def save(self, answer: Answer) -> Answer:
        """Save an answer (create, or update its content).

        The accepted flag, comments and vote ledger have dedicated
        operations and are not written here for existing answers.
        """
        pass

    @abstractmethod
    async def delete(self, answer_id: AnswerId) -> bool:
        """Hard delete an answer.

        Returns:
            True if an answer was deleted
        """
        pass

    @abstractmethod
    async def delete_by_question(self, question_id: QuestionId) -> int:
        """Delete every answer of a question.

        Returns:
            Number of answers deleted
        """
        pass

    @abstractmethod
    async def save_votes(
        self, answer_id: AnswerId, votes: List[Vote], score_delta: int
    ) -> int:
        """Replace the vote ledger and shift the score in one statement.

        Returns:
            The new score
        """
        pass

    @abstractmethod
    async def mark_accepted(
        self, question_id: QuestionId, answer_id: AnswerId
    ) -> Optional[Answer]:
        """Make answer_id the only accepted answer of question_id.

        Every answer of the question is updated by a single statement, so no
        reader can observe two accepted answers.

        Returns:
            The accepted answer, or None if it does not belong to the question
        """
        pass

    @abstractmethod
    async def unmark_accepted(self, answer_id: AnswerId) -> Optional[Answer]:
        """Clear the accepted flag on one answer."""
        pass

    @abstractmethod
    async def add_comment(
        self, answer_id: AnswerId, comment: AnswerComment
    ) -> Optional[Answer]:
        """Append a comment to an answer.

        Returns:
            The updated answer, or None if the answer does not exist
        """
        pass

    @abstractmethod
    async def author_stats(self, author_id: UserId) -> ContentStats:
        """Count an author's answers, sum their scores and count accepted ones."""
        pass
