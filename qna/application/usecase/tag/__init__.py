"""Tag use cases."""

from .get_tag_stats import GetTagStatsRequest, GetTagStatsResponse, GetTagStatsUseCase
from .list_tags import ListTagsRequest, ListTagsResponse, ListTagsUseCase, TagInfo

__all__ = [
    "GetTagStatsRequest",
    "GetTagStatsResponse",
    "GetTagStatsUseCase",
    "ListTagsRequest",
    "ListTagsResponse",
    "ListTagsUseCase",
    "TagInfo",
]
