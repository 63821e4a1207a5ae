"""Register use case."""

import logfire
from pydantic import BaseModel

from qna.domain.service import AuthService, JWTService

from .get_current_user import CurrentUserResponse


class RegisterRequest(BaseModel):
    """Register request."""

    username: str
    email: str
    password: str


class AuthResponse(BaseModel):
    """Account details plus a bearer token."""

    user: CurrentUserResponse
    token: str


class RegisterUseCase:
    """Use case for creating an account and signing the user in."""

    def __init__(self, auth_service: AuthService, jwt_service: JWTService) -> None:
        """Initialize register use case.

        Args:
            auth_service: Auth domain service
            jwt_service: JWT token domain service
        """
        self.auth_service = auth_service
        self.jwt_service = jwt_service

    async def execute(self, request: RegisterRequest) -> AuthResponse:
        """Execute registration flow.

        Raises:
            ValidationError: If the password is too short
            InvalidOperationError: If the username or email is taken
        """
        with logfire.span("register.execute", username=request.username):
            user = await self.auth_service.register(
                username=request.username,
                email=request.email,
                password=request.password,
            )
            token = self.jwt_service.create_token(str(user.id), user.username.root)
            return AuthResponse(user=CurrentUserResponse.from_user(user), token=token)
