"""Request helpers shared by the routers."""

from qna.application.usecase.auth import (
    CurrentUserResponse,
    GetCurrentUserRequest,
    GetCurrentUserUseCase,
)
from qna.config import PaginationSettings
from qna.domain.error import NotFoundError
from qna.util.jwt import JWTError

BEARER_PREFIX = "bearer "


def bearer_token(authorization: str | None) -> str | None:
    """Extract the token from an ``Authorization: Bearer <token>`` header."""
    if not authorization or not authorization.lower().startswith(BEARER_PREFIX):
        return None
    token = authorization[len(BEARER_PREFIX) :].strip()
    return token or None


async def require_user(
    get_current_user_use_case: GetCurrentUserUseCase, authorization: str | None
) -> CurrentUserResponse:
    """Resolve the signed-in user or fail with 401.

    Raises:
        JWTError: If the header is missing, the token is invalid, or the
            token names a user that no longer exists
    """
    token = bearer_token(authorization)
    if not token:
        raise JWTError("Authentication required")

    try:
        return await get_current_user_use_case.execute(
            GetCurrentUserRequest(token=token)
        )
    except NotFoundError:
        raise JWTError("Invalid authentication token")


def resolve_limit(limit: int | None, pagination: PaginationSettings) -> int:
    """Apply the default page size and cap it at the maximum."""
    return min(limit or pagination.default_limit, pagination.max_limit)
