"""Protocol for the location and category storage port."""

from typing import Protocol

from location_service.application.common.request_context import RequestContext
from location_service.domain.common.value_objects.ids import CategoryId, LocationId
from location_service.domain.locations.entities.category import Category
from location_service.domain.locations.entities.location import Location


class LocationRepositoryProtocol(Protocol):
    """
    Protocol for category and location persistence.

    A missing row is reported as ``None``, never as an exception. Every other
    failure raises a ``StorageError`` subclass. Location queries are scoped to
    ``ctx.user`` except ``find_location_by_name``, which enforces global name
    uniqueness.
    """

    def create_category(self, ctx: RequestContext, category: Category) -> None: ...

    def get_categories(self, ctx: RequestContext) -> list[Category]: ...

    def find_category_by_id(
        self, ctx: RequestContext, category_id: CategoryId
    ) -> Category | None: ...

    def find_category_by_name(self, ctx: RequestContext, name: str) -> Category | None: ...

    def update_category(self, ctx: RequestContext, category: Category) -> None: ...

    def delete_category(self, ctx: RequestContext, category_id: CategoryId) -> None: ...

    def create_location(self, ctx: RequestContext, location: Location) -> None: ...

    def get_locations(self, ctx: RequestContext) -> list[Location]:
        """
        Get all locations owned by the context user.

        Raises:
            MissingUserError: If the context carries no user
        """
        ...

    def find_location_by_id(
        self, ctx: RequestContext, location_id: LocationId
    ) -> Location | None: ...

    def find_location_by_name(self, ctx: RequestContext, name: str) -> Location | None: ...

    def find_locations_by_category(
        self, ctx: RequestContext, category: Category
    ) -> list[Location]: ...

    def update_location(self, ctx: RequestContext, location: Location) -> None: ...

    def delete_location(self, ctx: RequestContext, location_id: LocationId) -> None: ...
