"""Domain layer errors."""

from collections.abc import Iterator
from contextlib import contextmanager

from pydantic import ValidationError as ModelValidationError


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Domain validation error."""

    pass


class InvalidOperationError(DomainError):
    """Raised when a request is well-formed but breaks a business rule."""

    def __init__(self, message: str):
        super().__init__(message)


class AuthenticationError(DomainError):
    """Raised when credentials are missing or wrong."""

    def __init__(self, message: str = "Invalid credentials"):
        super().__init__(message)


class NotAuthorizedError(DomainError):
    """Raised when a user attempts to act on a resource they don't own."""

    def __init__(
        self, resource: str, resource_id: str, user_id: str, action: str = "edit"
    ):
        self.resource = resource
        self.resource_id = resource_id
        self.user_id = user_id
        super().__init__(
            f"User {user_id} is not authorized to {action} {resource} {resource_id}"
        )


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


@contextmanager
def invalid_input() -> Iterator[None]:
    """Report model validation failures on client input as ``ValidationError``.

    Only wrap code that builds domain objects from request data. A stored
    row that fails validation is a server fault and must not become a 400.
    """
    try:
        yield
    except ModelValidationError as e:
        error = e.errors()[0]
        field = ".".join(str(part) for part in error["loc"])
        message = error["msg"].removeprefix("Value error, ")
        raise ValidationError(f"{field}: {message}" if field else message) from e
