"""Locations domain layer."""

from location_service.domain.locations.entities.category import Category
from location_service.domain.locations.entities.location import Location
from location_service.domain.locations.exceptions import (
    CategoryAlreadyExistsError,
    CategoryNotFoundError,
    LocationAlreadyExistsError,
    LocationNotFoundError,
)

__all__ = [
    "Category",
    "CategoryAlreadyExistsError",
    "CategoryNotFoundError",
    "Location",
    "LocationAlreadyExistsError",
    "LocationNotFoundError",
]
