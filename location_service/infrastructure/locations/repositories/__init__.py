from location_service.infrastructure.locations.repositories.location_repository import (
    LocationRepository,
)

__all__ = ["LocationRepository"]
