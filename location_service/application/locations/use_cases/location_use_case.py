"""
Use case for managing user locations.

Enforces global name uniqueness and the reference from every location to an
existing category before delegating persistence to the repository. Owner
scoping of reads and writes is the repository's job, based on ``ctx.user``.
"""

import structlog

from location_service.application.common.exceptions import wrap_storage_errors
from location_service.application.common.request_context import RequestContext
from location_service.application.locations.protocols.location_repository import (
    LocationRepositoryProtocol,
)
from location_service.domain.common.value_objects.ids import CategoryId, LocationId
from location_service.domain.locations.entities.category import Category
from location_service.domain.locations.entities.location import Location
from location_service.domain.locations.exceptions import (
    CategoryNotFoundError,
    LocationAlreadyExistsError,
    LocationNotFoundError,
)

logger = structlog.get_logger(__name__)


class LocationUseCase:
    """Use case for creating, reading, updating and deleting locations."""

    def __init__(self, repository: LocationRepositoryProtocol) -> None:
        self.repository = repository

    def create_location(self, ctx: RequestContext, location: Location) -> None:
        """
        Store a new location.

        Name uniqueness is checked before the category reference, so a request
        failing both checks reports LocationAlreadyExistsError.

        Raises:
            LocationAlreadyExistsError: If a location with the same name exists
            CategoryNotFoundError: If the referenced category does not exist
            UseCaseError: If storage fails
        """
        with wrap_storage_errors(
            "create_location", f"failed to find location by name '{location.name}'"
        ):
            existing = self.repository.find_location_by_name(ctx, location.name)

        if existing is not None:
            raise LocationAlreadyExistsError(location.name)

        self._require_category(ctx, location.category, "create_location")

        with wrap_storage_errors("create_location", f"failed to create location {location.id}"):
            self.repository.create_location(ctx, location)

        logger.info(
            "created_location",
            location_id=str(location.id),
            category_id=str(location.category),
            user_id=str(location.user),
        )

    def get_locations(self, ctx: RequestContext) -> list[Location]:
        with wrap_storage_errors("get_locations", "failed to get locations"):
            return self.repository.get_locations(ctx)

    def find_location_by_id(self, ctx: RequestContext, location_id: LocationId) -> Location:
        """
        Get a location by id.

        Raises:
            LocationNotFoundError: If no location has this id
            UseCaseError: If storage fails
        """
        return self._require_location(ctx, location_id, "find_location_by_id")

    def find_locations_by_category(
        self, ctx: RequestContext, category_id: CategoryId
    ) -> list[Location]:
        """
        Get the locations tagged with a category.

        Raises:
            CategoryNotFoundError: If the category does not exist
            UseCaseError: If storage fails
        """
        category = self._require_category(ctx, category_id, "find_locations_by_category")

        with wrap_storage_errors(
            "find_locations_by_category", f"failed to find locations by category {category_id}"
        ):
            return self.repository.find_locations_by_category(ctx, category)

    def update_location(self, ctx: RequestContext, location: Location) -> Location:
        """
        Apply a partial update to a stored location.

        Empty name or address and a nil category keep the stored value. The
        owner is always the stored one.

        Returns:
            The merged location as persisted

        Raises:
            LocationNotFoundError: If the location does not exist
            CategoryNotFoundError: If the effective category does not exist
            UseCaseError: If storage fails
        """
        existing = self._require_location(ctx, location.id, "update_location")
        merged = _merge(existing, location)

        self._require_category(ctx, merged.category, "update_location")

        with wrap_storage_errors("update_location", f"failed to update location {location.id}"):
            self.repository.update_location(ctx, merged)

        logger.info("updated_location", location_id=str(merged.id))
        return merged

    def delete_location(self, ctx: RequestContext, location_id: LocationId) -> None:
        """
        Delete a location.

        Raises:
            LocationNotFoundError: If the location does not exist
            UseCaseError: If storage fails
        """
        self._require_location(ctx, location_id, "delete_location")

        with wrap_storage_errors("delete_location", f"failed to delete location {location_id}"):
            self.repository.delete_location(ctx, location_id)

        logger.info("deleted_location", location_id=str(location_id))

    def _require_location(
        self, ctx: RequestContext, location_id: LocationId, operation: str
    ) -> Location:
        with wrap_storage_errors(operation, f"failed to find location {location_id}"):
            location = self.repository.find_location_by_id(ctx, location_id)

        if location is None:
            raise LocationNotFoundError(location_id)
        return location

    def _require_category(
        self, ctx: RequestContext, category_id: CategoryId, operation: str
    ) -> Category:
        with wrap_storage_errors(operation, f"failed to find category {category_id}"):
            category = self.repository.find_category_by_id(ctx, category_id)

        if category is None:
            raise CategoryNotFoundError(category_id)
        return category


def _merge(existing: Location, incoming: Location) -> Location:
    """Overlay the non-empty fields of ``incoming`` on ``existing``."""
    return Location(
        id=existing.id,
        name=incoming.name or existing.name,
        address=incoming.address or existing.address,
        category=existing.category if incoming.category.is_nil() else incoming.category,
        user=existing.user,
    )
