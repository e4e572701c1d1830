from dependency_injector import containers, providers
from sqlalchemy.orm import Session

from location_service.application.locations.use_cases.category_use_case import CategoryUseCase
from location_service.application.locations.use_cases.location_use_case import LocationUseCase
from location_service.infrastructure.locations.repositories import LocationRepository


class Container(containers.DeclarativeContainer):
    """Dependency injection container."""

    # Request-scoped database session, passed explicitly when resolving
    db = providers.Dependency(instance_of=Session)

    # Repositories
    location_repository = providers.Factory(LocationRepository, db=db)

    # Locations module, application use cases
    category_use_case = providers.Factory(
        CategoryUseCase,
        repository=location_repository,
    )
    location_use_case = providers.Factory(
        LocationUseCase,
        repository=location_repository,
    )
