"""Business errors raised by the location and category use cases."""

from location_service.domain.common.exceptions import (
    EntityAlreadyExistsError,
    EntityNotFoundError,
)
from location_service.domain.common.value_objects.ids import CategoryId, LocationId


class CategoryNotFoundError(EntityNotFoundError):
    def __init__(self, category_id: CategoryId) -> None:
        super().__init__("Category", category_id)


class CategoryAlreadyExistsError(EntityAlreadyExistsError):
    def __init__(self, name: str) -> None:
        super().__init__("Category", "name", name)


class LocationNotFoundError(EntityNotFoundError):
    def __init__(self, location_id: LocationId) -> None:
        super().__init__("Location", location_id)


class LocationAlreadyExistsError(EntityAlreadyExistsError):
    def __init__(self, name: str) -> None:
        super().__init__("Location", "name", name)
