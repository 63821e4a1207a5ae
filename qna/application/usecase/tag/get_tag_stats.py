"""Get tag statistics use case."""

from pydantic import BaseModel

from qna.application.usecase.common import QuestionItem, question_item
from qna.domain.error import NotFoundError
from qna.domain.service import TagService, UserService
from qna.domain.value import TagName


class GetTagStatsRequest(BaseModel):
    """Get tag statistics request."""

    name: str


class GetTagStatsResponse(BaseModel):
    """Aggregate numbers and recent questions for one tag."""

    name: str
    total_questions: int
    total_votes: int
    total_views: int
    total_answers: int
    avg_votes: float
    avg_views: float
    avg_answers: float
    recent_questions: list[QuestionItem]


class GetTagStatsUseCase:
    """Use case for the tag detail page."""

    def __init__(self, tag_service: TagService, user_service: UserService) -> None:
        """Initialize get tag stats use case.

        Args:
            tag_service: Tag domain service
            user_service: User domain service
        """
        self.tag_service = tag_service
        self.user_service = user_service

    async def execute(self, request: GetTagStatsRequest) -> GetTagStatsResponse:
        """Execute get tag stats flow.

        Raises:
            NotFoundError: If no question carries the tag
        """
        try:
            name = TagName(request.name)
        except ValueError:
            raise NotFoundError("Tag", request.name)

        stats, recent = await self.tag_service.get_tag_statistics(name)
        if stats.total_questions == 0:
            raise NotFoundError("Tag", name.root)

        authors = await self.user_service.get_users([q.author_id for q in recent])

        return GetTagStatsResponse(
            name=name.root,
            total_questions=stats.total_questions,
            total_votes=stats.total_votes,
            total_views=stats.total_views,
            total_answers=stats.total_answers,
            avg_votes=round(stats.avg_votes, 2),
            avg_views=round(stats.avg_views, 2),
            avg_answers=round(stats.avg_answers, 2),
            recent_questions=[question_item(q, authors) for q in recent],
        )
