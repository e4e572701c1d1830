"""Mapper for Category ORM ↔ Domain conversion."""

from location_service.domain.common.value_objects.ids import CategoryId
from location_service.domain.locations.entities.category import Category
from location_service.models import Category as CategoryORM


class CategoryMapper:
    """Mapper for Category ORM ↔ Domain conversion."""

    def to_domain(self, orm_model: CategoryORM) -> Category:
        """Convert ORM model to domain entity."""
        return Category(id=CategoryId(orm_model.id), name=orm_model.name)

    def to_orm(self, domain_entity: Category, orm_model: CategoryORM | None = None) -> CategoryORM:
        """Convert domain entity to ORM model."""
        if orm_model:
            # Update existing
            orm_model.name = domain_entity.name
            return orm_model

        return CategoryORM(id=domain_entity.id.value, name=domain_entity.name)
