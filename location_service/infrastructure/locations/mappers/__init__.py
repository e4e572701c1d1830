from location_service.infrastructure.locations.mappers.category_mapper import CategoryMapper
from location_service.infrastructure.locations.mappers.location_mapper import LocationMapper

__all__ = ["CategoryMapper", "LocationMapper"]
