from location_service.infrastructure.locations.routers import categories, locations

__all__ = ["categories", "locations"]
