"""Update user profile use case."""

from uuid import UUID

from pydantic import BaseModel, Field

from qna.application.usecase.auth import CurrentUserResponse
from qna.domain.service import UserService
from qna.domain.value import UserId


class UpdateUserProfileRequest(BaseModel):
    """Update user profile request."""

    user_id: str  # From authenticated user
    username: str | None = None
    email: str | None = None
    bio: str | None = Field(default=None, max_length=200)
    avatar_url: str | None = None


class UpdateUserProfileUseCase:
    """Use case for updating a user's profile.

    Users can change their username, email, bio and avatar URL. Username
    and email stay unique.
    """

    def __init__(self, user_service: UserService) -> None:
        """Initialize update user profile use case.

        Args:
            user_service: User domain service
        """
        self.user_service = user_service

    async def execute(self, request: UpdateUserProfileRequest) -> CurrentUserResponse:
        """Execute update user profile flow.

        Raises:
            NotFoundError: If user not found
            InvalidOperationError: If the username or email is taken
        """
        user = await self.user_service.update_profile(
            UserId(UUID(request.user_id)),
            username=request.username,
            email=request.email,
            bio=request.bio,
            avatar_url=request.avatar_url,
        )
        return CurrentUserResponse.from_user(user)
