"""User entity for identity management."""

from dataclasses import dataclass

from location_service.domain.common.entity import Entity
from location_service.domain.common.exceptions import ValidationError
from location_service.domain.common.value_objects.ids import UserId

# Domain constraints
MAX_EMAIL_LENGTH = 254


@dataclass
class User(Entity[UserId]):
    """
    User entity representing the authenticated principal of a request.

    Business Rules:
    - Users are owned by an external identity provider and never persisted here
    - The identifier is never the nil sentinel
    - Email is optional (tokens may omit it) but bounded in length
    """

    id: UserId
    email: str = ""

    def __post_init__(self) -> None:
        """Validate invariants."""
        if self.id.is_nil():
            raise ValidationError("User id cannot be nil", field="id", value=str(self.id))
        if len(self.email) > MAX_EMAIL_LENGTH:
            raise ValidationError(
                "Email cannot exceed MAX_EMAIL_LENGTH characters", field="email", value=self.email
            )
