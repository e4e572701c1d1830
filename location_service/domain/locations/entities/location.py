"""Location entity describing a physical place."""

from dataclasses import dataclass

from location_service.domain.common.entity import Entity
from location_service.domain.common.exceptions import ValidationError
from location_service.domain.common.value_objects.ids import CategoryId, LocationId, UserId


@dataclass
class Location(Entity[LocationId]):
    """
    Location entity: a named, addressed place owned by a user.

    Instances built for an update may carry empty fields; an empty name or
    address and a nil category mean "keep the stored value". Use the
    ``create`` factory for brand new locations, it enforces every field.
    """

    # Identity
    id: LocationId

    # Content
    name: str
    address: str

    # Relations
    category: CategoryId
    user: UserId

    @classmethod
    def create(
        cls,
        name: str,
        address: str,
        category: CategoryId,
        user: UserId,
    ) -> "Location":
        """
        Factory for creating a new location with a fresh identifier.

        Raises:
            ValidationError: If a field is empty or the category is nil
        """
        if not name or not name.strip():
            raise ValidationError("Location name cannot be empty", field="name")
        if not address or not address.strip():
            raise ValidationError("Location address cannot be empty", field="address")
        if category.is_nil():
            raise ValidationError("Location category is required", field="category")
        return cls(
            id=LocationId.generate(),
            name=name.strip(),
            address=address.strip(),
            category=category,
            user=user,
        )
