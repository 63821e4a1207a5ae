"""Tag routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Query

from qna.application.usecase.tag import (
    GetTagStatsRequest,
    GetTagStatsResponse,
    GetTagStatsUseCase,
    ListTagsRequest,
    ListTagsResponse,
    ListTagsUseCase,
)

router = APIRouter(prefix="/tags", tags=["tags"], route_class=DishkaRoute)


@router.get("", response_model=ListTagsResponse)
async def list_tags(
    list_tags_use_case: FromDishka[ListTagsUseCase],
    search: str | None = None,
    popular: bool = False,
    limit: int = Query(default=50, ge=1, le=100),
) -> ListTagsResponse:
    """List tags with question counts.

    Alphabetical by default, most used first with ``popular=true``.
    """
    return await list_tags_use_case.execute(
        ListTagsRequest(search=search, popular=popular, limit=limit)
    )


@router.get("/{name}", response_model=GetTagStatsResponse)
async def get_tag(
    name: str,
    get_tag_stats_use_case: FromDishka[GetTagStatsUseCase],
) -> GetTagStatsResponse:
    """Get statistics and recent questions for a tag."""
    return await get_tag_stats_use_case.execute(GetTagStatsRequest(name=name))
