"""User use cases."""

from .get_user_profile import (
    GetUserProfileRequest,
    GetUserProfileResponse,
    GetUserProfileUseCase,
    UserStatsInfo,
)
from .list_user_content import (
    ListUserAnswersResponse,
    ListUserAnswersUseCase,
    ListUserContentRequest,
    ListUserQuestionsResponse,
    ListUserQuestionsUseCase,
)
from .update_user_profile import UpdateUserProfileRequest, UpdateUserProfileUseCase

__all__ = [
    "GetUserProfileRequest",
    "GetUserProfileResponse",
    "GetUserProfileUseCase",
    "ListUserAnswersResponse",
    "ListUserAnswersUseCase",
    "ListUserContentRequest",
    "ListUserQuestionsResponse",
    "ListUserQuestionsUseCase",
    "UpdateUserProfileRequest",
    "UpdateUserProfileUseCase",
    "UserStatsInfo",
]
