"""Identity domain layer."""

from location_service.domain.identity.entities.user import User
from location_service.domain.identity.exceptions import InvalidCredentialsError, MissingUserError

__all__ = [
    "InvalidCredentialsError",
    "MissingUserError",
    "User",
]
