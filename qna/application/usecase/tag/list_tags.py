"""List tags use case."""

from datetime import datetime

import logfire
from pydantic import BaseModel, Field

from qna.domain.service import TagService


class TagInfo(BaseModel):
    """Tag information."""

    name: str
    count: int
    last_used: datetime | None


class ListTagsRequest(BaseModel):
    """List tags request."""

    search: str | None = None
    popular: bool = False  # Most used first instead of alphabetical
    limit: int = Field(default=50, ge=1, le=100)


class ListTagsResponse(BaseModel):
    """List tags response."""

    tags: list[TagInfo]


class ListTagsUseCase:
    """Use case for listing tags with usage counts."""

    def __init__(self, tag_service: TagService) -> None:
        """Initialize list tags use case.

        Args:
            tag_service: Tag domain service
        """
        self.tag_service = tag_service

    async def execute(self, request: ListTagsRequest) -> ListTagsResponse:
        """Execute list tags flow.

        Returns:
            Tags matching the search, with question counts
        """
        with logfire.span("list_tags.execute", search=request.search):
            tags = await self.tag_service.list_tags(
                search=request.search, popular=request.popular, limit=request.limit
            )

            return ListTagsResponse(
                tags=[
                    TagInfo(name=tag.name, count=tag.count, last_used=tag.last_used)
                    for tag in tags
                ]
            )
