"""Question repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from qna.domain.model import ContentStats, Question, TagStatistics, TagUsage, Vote
from qna.domain.value import QuestionId, QuestionSortOrder, TagName, UserId


class QuestionRepository(ABC):
    """Repository for Question aggregate.

    Defines the contract for question persistence operations.
    Implementations live in the persistence layer.
    """

    @abstractmethod
    async def find_by_id(
        self, question_id: QuestionId, for_update: bool = False
    ) -> Optional[Question]:
        """Find a question by ID.

        Args:
            question_id: The question's unique identifier
            for_update: Lock the row until the current transaction ends

        Returns:
            The question if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(
        self,
        search: Optional[str] = None,
        tags: Optional[List[TagName]] = None,
        sort: QuestionSortOrder = QuestionSortOrder.LATEST,
        limit: int = 10,
        offset: int = 0,
    ) -> List[Question]:
        """Find questions with filtering and pagination.

        Args:
            search: Case-insensitive substring matched against title and description
            tags: Keep questions carrying any of these tags
            sort: Sort order
            limit: Maximum number of questions to return
            offset: Number of questions to skip

        Returns:
            List of questions matching the criteria
        """
        pass

    @abstractmethod
    async def count(
        self,
        search: Optional[str] = None,
        tags: Optional[List[TagName]] = None,
    ) -> int:
        """Count questions matching the same filters as find_all."""
        pass

    @abstractmethod
    async def find_by_author(
        self, author_id: UserId, limit: int = 10, offset: int = 0
    ) -> List[Question]:
        """Find an author's questions, newest first."""
        pass

    @abstractmethod
    async def find_by_tag(self, tag: TagName, limit: int = 10) -> List[Question]:
        """Find the most recent questions carrying a tag."""
        pass

    @abstractmethod
    async def save(self, question: Question) -> Question:
        """Save a question (create, or update its editable content).

        Counters and the vote ledger are only changed through their
        dedicated atomic operations.

        Args:
            question: The question to save

        Returns:
            The saved question
        """
        pass

    @abstractmethod
    async def delete(self, question_id: QuestionId) -> bool:
        """Hard delete a question.

        Returns:
            True if a question was deleted
        """
        pass

    @abstractmethod
    async def save_votes(
        self, question_id: QuestionId, votes: List[Vote], score_delta: int
    ) -> int:
        """Replace the vote ledger and shift the score in one statement.

        Args:
            question_id: The question ID
            votes: The complete new ledger
            score_delta: Amount to add to the stored score

        Returns:
            The new score
        """
        pass

    @abstractmethod
    async def increment_views(self, question_id: QuestionId) -> None:
        """Atomically increment view_count by 1."""
        pass

    @abstractmethod
    async def increment_answer_count(self, question_id: QuestionId) -> None:
        """Atomically increment answer_count by 1."""
        pass

    @abstractmethod
    async def decrement_answer_count(self, question_id: QuestionId) -> None:
        """Atomically decrement answer_count by 1 (minimum 0)."""
        pass

    @abstractmethod
    async def author_stats(self, author_id: UserId) -> ContentStats:
        """Count an author's questions and sum their scores."""
        pass

    @abstractmethod
    async def aggregate_tags(
        self, search: Optional[str] = None, popular: bool = False, limit: int = 50
    ) -> List[TagUsage]:
        """Aggregate tag usage across all questions.

        Args:
            search: Case-insensitive substring filter on tag name
            popular: Order by usage count (descending) instead of name
            limit: Maximum number of tags

        Returns:
            Tag usage rows
        """
        pass

    @abstractmethod
    async def tag_statistics(self, tag: TagName) -> TagStatistics:
        """Aggregate votes, views and answers over questions with a tag."""
        pass
