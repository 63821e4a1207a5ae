"""Login use case."""

import logfire
from pydantic import BaseModel

from qna.domain.service import AuthService, JWTService

from .get_current_user import CurrentUserResponse
from .register import AuthResponse


class LoginRequest(BaseModel):
    """Login request."""

    email: str
    password: str


class LoginUseCase:
    """Use case for password login."""

    def __init__(self, auth_service: AuthService, jwt_service: JWTService) -> None:
        """Initialize login use case.

        Args:
            auth_service: Auth domain service
            jwt_service: JWT token domain service
        """
        self.auth_service = auth_service
        self.jwt_service = jwt_service

    async def execute(self, request: LoginRequest) -> AuthResponse:
        """Execute login flow.

        Steps:
        1. Check the email and password
        2. Issue a JWT for the user

        Raises:
            AuthenticationError: If the credentials are wrong
        """
        with logfire.span("login.execute"):
            user = await self.auth_service.authenticate(
                request.email, request.password
            )
            token = self.jwt_service.create_token(str(user.id), user.username.root)
            logfire.info("Login successful", user_id=str(user.id))
            return AuthResponse(user=CurrentUserResponse.from_user(user), token=token)
