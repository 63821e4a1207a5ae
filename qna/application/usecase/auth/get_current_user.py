"""Get current user use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from qna.domain.model import User
from qna.domain.service import JWTService, UserService
from qna.domain.value import UserId, UserRole


class GetCurrentUserRequest(BaseModel):
    """Get current user request."""

    token: str  # JWT token


class CurrentUserResponse(BaseModel):
    """The signed-in user's own account details."""

    user_id: str
    username: str
    email: str
    role: UserRole
    avatar_url: str | None
    bio: str | None
    created_at: datetime

    @classmethod
    def from_user(cls, user: User) -> "CurrentUserResponse":
        return cls(
            user_id=str(user.id),
            username=user.username.root,
            email=user.email.root,
            role=user.role,
            avatar_url=user.avatar_url,
            bio=user.bio,
            created_at=user.created_at,
        )


class GetCurrentUserUseCase:
    """Use case for getting current authenticated user."""

    def __init__(self, jwt_service: JWTService, user_service: UserService) -> None:
        """Initialize get current user use case.

        Args:
            jwt_service: JWT token domain service
            user_service: User domain service
        """
        self.jwt_service = jwt_service
        self.user_service = user_service

    async def execute(self, request: GetCurrentUserRequest) -> CurrentUserResponse:
        """Execute get current user flow.

        Steps:
        1. Verify JWT token via JWT service
        2. Load user from the user ID in the token

        Raises:
            JWTError: If token is invalid or expired
            NotFoundError: If user not found
        """
        payload = self.jwt_service.verify_token(request.token)
        user = await self.user_service.get_by_id(UserId(UUID(payload.user_id)))
        return CurrentUserResponse.from_user(user)
