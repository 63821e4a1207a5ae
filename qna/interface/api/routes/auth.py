"""Authentication routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Header, status

from qna.application.usecase.auth import (
    AuthResponse,
    CurrentUserResponse,
    GetCurrentUserUseCase,
    LoginRequest,
    LoginUseCase,
    RegisterRequest,
    RegisterUseCase,
)
from qna.interface.api.dependencies import require_user

router = APIRouter(prefix="/auth", tags=["auth"], route_class=DishkaRoute)


@router.post(
    "/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED
)
async def register(
    request: RegisterRequest,
    register_use_case: FromDishka[RegisterUseCase],
) -> AuthResponse:
    """Create an account and return a bearer token.

    Returns 400 if the username or email is already taken.
    """
    return await register_use_case.execute(request)


@router.post("/login", response_model=AuthResponse)
async def login(
    request: LoginRequest,
    login_use_case: FromDishka[LoginUseCase],
) -> AuthResponse:
    """Exchange email and password for a bearer token.

    Returns 401 for unknown email or wrong password.
    """
    return await login_use_case.execute(request)


@router.get("/me", response_model=CurrentUserResponse)
async def get_me(
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    authorization: str | None = Header(default=None),
) -> CurrentUserResponse:
    """Get current authenticated user."""
    return await require_user(get_current_user_use_case, authorization)
