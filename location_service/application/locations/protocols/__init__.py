from location_service.application.locations.protocols.location_repository import (
    LocationRepositoryProtocol,
)

__all__ = ["LocationRepositoryProtocol"]
