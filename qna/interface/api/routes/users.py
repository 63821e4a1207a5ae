"""User profile routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Header, Query
from pydantic import BaseModel, Field

from qna.application.usecase.auth import CurrentUserResponse, GetCurrentUserUseCase
from qna.application.usecase.user import (
    GetUserProfileRequest,
    GetUserProfileResponse,
    GetUserProfileUseCase,
    ListUserAnswersResponse,
    ListUserAnswersUseCase,
    ListUserContentRequest,
    ListUserQuestionsResponse,
    ListUserQuestionsUseCase,
    UpdateUserProfileRequest,
    UpdateUserProfileUseCase,
)
from qna.config import PaginationSettings
from qna.interface.api.dependencies import require_user, resolve_limit

router = APIRouter(prefix="/users", tags=["users"], route_class=DishkaRoute)


class UpdateUserProfileAPIRequest(BaseModel):
    """API request for updating user profile."""

    username: str | None = None
    email: str | None = None
    bio: str | None = Field(None, max_length=200)
    avatar_url: str | None = None


@router.put("/me", response_model=CurrentUserResponse)
async def update_my_profile(
    request: UpdateUserProfileAPIRequest,
    update_user_profile_use_case: FromDishka[UpdateUserProfileUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    authorization: str | None = Header(default=None),
) -> CurrentUserResponse:
    """Update the current user's profile."""
    user = await require_user(get_current_user_use_case, authorization)
    return await update_user_profile_use_case.execute(
        UpdateUserProfileRequest(
            user_id=user.user_id,
            username=request.username,
            email=request.email,
            bio=request.bio,
            avatar_url=request.avatar_url,
        )
    )


@router.get("/{username}", response_model=GetUserProfileResponse)
async def get_user_profile(
    username: str,
    get_user_profile_use_case: FromDishka[GetUserProfileUseCase],
) -> GetUserProfileResponse:
    """Get a user's public profile with stats and reputation.

    Example:
        GET /users/alice

        Response:
        {
            "user_id": "123e4567-e89b-12d3-a456-426614174000",
            "username": "alice",
            "reputation": 12,
            "stats": {"questions_asked": 3, "answers_given": 5, ...},
            ...
        }
    """
    return await get_user_profile_use_case.execute(
        GetUserProfileRequest(username=username)
    )


@router.get("/{username}/questions", response_model=ListUserQuestionsResponse)
async def list_user_questions(
    username: str,
    list_user_questions_use_case: FromDishka[ListUserQuestionsUseCase],
    pagination: FromDishka[PaginationSettings],
    page: int = Query(default=1, ge=1),
    limit: int | None = Query(default=None, ge=1),
) -> ListUserQuestionsResponse:
    """List a user's questions, newest first."""
    return await list_user_questions_use_case.execute(
        ListUserContentRequest(
            username=username, page=page, limit=resolve_limit(limit, pagination)
        )
    )


@router.get("/{username}/answers", response_model=ListUserAnswersResponse)
async def list_user_answers(
    username: str,
    list_user_answers_use_case: FromDishka[ListUserAnswersUseCase],
    pagination: FromDishka[PaginationSettings],
    page: int = Query(default=1, ge=1),
    limit: int | None = Query(default=None, ge=1),
) -> ListUserAnswersResponse:
    """List a user's answers, newest first."""
    return await list_user_answers_use_case.execute(
        ListUserContentRequest(
            username=username, page=page, limit=resolve_limit(limit, pagination)
        )
    )
