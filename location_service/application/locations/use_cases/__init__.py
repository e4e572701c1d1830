from location_service.application.locations.use_cases.category_use_case import CategoryUseCase
from location_service.application.locations.use_cases.location_use_case import LocationUseCase

__all__ = ["CategoryUseCase", "LocationUseCase"]
