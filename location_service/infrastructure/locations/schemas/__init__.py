from location_service.infrastructure.locations.schemas.category_schemas import (
    Category,
    CategoryCreateRequest,
    CategoryUpdateRequest,
)
from location_service.infrastructure.locations.schemas.location_schemas import (
    Location,
    LocationCreateRequest,
    LocationUpdateRequest,
)

__all__ = [
    "Category",
    "CategoryCreateRequest",
    "CategoryUpdateRequest",
    "Location",
    "LocationCreateRequest",
    "LocationUpdateRequest",
]
