"""Mapper for Location ORM ↔ Domain conversion."""

from location_service.domain.common.value_objects.ids import CategoryId, LocationId, UserId
from location_service.domain.locations.entities.location import Location
from location_service.models import Location as LocationORM


class LocationMapper:
    """Mapper for Location ORM ↔ Domain conversion."""

    def to_domain(self, orm_model: LocationORM) -> Location:
        """Convert ORM model to domain entity."""
        return Location(
            id=LocationId(orm_model.id),
            name=orm_model.name,
            address=orm_model.address,
            category=CategoryId(orm_model.category_id),
            user=UserId(orm_model.user_id),
        )

    def to_orm(self, domain_entity: Location, orm_model: LocationORM | None = None) -> LocationORM:
        """Convert domain entity to ORM model."""
        if orm_model:
            # Update existing, ownership never changes
            orm_model.name = domain_entity.name
            orm_model.address = domain_entity.address
            orm_model.category_id = domain_entity.category.value
            return orm_model

        return LocationORM(
            id=domain_entity.id.value,
            name=domain_entity.name,
            address=domain_entity.address,
            category_id=domain_entity.category.value,
            user_id=domain_entity.user.value,
        )
