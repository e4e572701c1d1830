"""Identity domain exceptions."""

from location_service.domain.common.exceptions import DomainError


class InvalidCredentialsError(DomainError):
    """Raised when a bearer token cannot be verified."""

    def __init__(self, reason: str) -> None:
        super().__init__("Invalid authentication token", {"reason": reason})
        self.reason = reason


class MissingUserError(DomainError):
    """Raised when a user-scoped operation runs without an authenticated user."""

    def __init__(self, operation: str) -> None:
        super().__init__(f"{operation}: no authenticated user in request context")
        self.operation = operation
