"""Category entity for classifying locations."""

from dataclasses import dataclass

from location_service.domain.common.entity import Entity
from location_service.domain.common.exceptions import ValidationError
from location_service.domain.common.value_objects.ids import CategoryId


@dataclass
class Category(Entity[CategoryId]):
    """
    Category entity, such as "Homes" or "Tennis Center".

    Categories are global: they have no owner. Name uniqueness is a
    use case rule backed by a storage constraint.
    """

    id: CategoryId
    name: str

    def __post_init__(self) -> None:
        """Validate invariants."""
        if not self.name or not self.name.strip():
            raise ValidationError("Category name cannot be empty", field="name")

    @classmethod
    def create(cls, name: str) -> "Category":
        """Factory for creating a new category with a fresh identifier."""
        return cls(id=CategoryId.generate(), name=name.strip())
