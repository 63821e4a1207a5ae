"""Tag domain service.

Tags have no table of their own; they are aggregated from questions.
"""

from typing import Optional

import logfire

from qna.domain.model import Question, TagStatistics, TagUsage
from qna.domain.repository import QuestionRepository
from qna.domain.value import TagName

from .base import Service


class TagService(Service):
    """Domain service for tag operations."""

    def __init__(self, question_repository: QuestionRepository) -> None:
        """Initialize tag service.

        Args:
            question_repository: Question repository
        """
        self.question_repository = question_repository

    async def list_tags(
        self, search: Optional[str] = None, popular: bool = False, limit: int = 50
    ) -> list[TagUsage]:
        """List tags with usage counts.

        Args:
            search: Case-insensitive substring filter
            popular: Most used first instead of alphabetical
            limit: Maximum number of tags

        Returns:
            Tag usage rows
        """
        with logfire.span(
            "tag_service.list_tags", search=search, popular=popular, limit=limit
        ):
            tags = await self.question_repository.aggregate_tags(
                search=search, popular=popular, limit=limit
            )
            logfire.info("Tags retrieved", count=len(tags))
            return tags

    async def get_tag_statistics(
        self, name: TagName, recent_limit: int = 10
    ) -> tuple[TagStatistics, list[Question]]:
        """Aggregate numbers and the most recent questions for one tag."""
        with logfire.span("tag_service.get_tag_statistics", tag_name=name.root):
            stats = await self.question_repository.tag_statistics(name)
            recent = await self.question_repository.find_by_tag(
                name, limit=recent_limit
            )
            return stats, recent
