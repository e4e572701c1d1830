"""Use case for managing location categories."""

import structlog

from location_service.application.common.exceptions import wrap_storage_errors
from location_service.application.common.request_context import RequestContext
from location_service.application.locations.protocols.location_repository import (
    LocationRepositoryProtocol,
)
from location_service.domain.common.value_objects.ids import CategoryId
from location_service.domain.locations.entities.category import Category
from location_service.domain.locations.exceptions import (
    CategoryAlreadyExistsError,
    CategoryNotFoundError,
)

logger = structlog.get_logger(__name__)


class CategoryUseCase:
    """Use case for creating, reading, updating and deleting categories."""

    def __init__(self, repository: LocationRepositoryProtocol) -> None:
        self.repository = repository

    def create_category(self, ctx: RequestContext, category: Category) -> None:
        """
        Store a new category.

        The category id must already be assigned by the caller.

        Raises:
            CategoryAlreadyExistsError: If a category with the same name exists
            UseCaseError: If storage fails
        """
        with wrap_storage_errors(
            "create_category", f"failed to find category by name '{category.name}'"
        ):
            existing = self.repository.find_category_by_name(ctx, category.name)

        if existing is not None:
            raise CategoryAlreadyExistsError(category.name)

        with wrap_storage_errors("create_category", f"failed to create category {category.id}"):
            self.repository.create_category(ctx, category)

        logger.info("created_category", category_id=str(category.id), name=category.name)

    def get_categories(self, ctx: RequestContext) -> list[Category]:
        with wrap_storage_errors("get_categories", "failed to get categories"):
            return self.repository.get_categories(ctx)

    def find_category_by_id(self, ctx: RequestContext, category_id: CategoryId) -> Category:
        """
        Get a category by id.

        Raises:
            CategoryNotFoundError: If no category has this id
            UseCaseError: If storage fails
        """
        return self._require_category(ctx, category_id, "find_category_by_id")

    def update_category(self, ctx: RequestContext, category: Category) -> None:
        """
        Replace the stored category with the incoming record.

        Raises:
            CategoryNotFoundError: If the category does not exist
            UseCaseError: If storage fails
        """
        self._require_category(ctx, category.id, "update_category")

        with wrap_storage_errors("update_category", f"failed to update category {category.id}"):
            self.repository.update_category(ctx, category)

        logger.info("updated_category", category_id=str(category.id), name=category.name)

    def delete_category(self, ctx: RequestContext, category_id: CategoryId) -> None:
        """
        Delete a category.

        Raises:
            CategoryNotFoundError: If the category does not exist
            UseCaseError: If storage fails, including when locations still
                reference the category
        """
        self._require_category(ctx, category_id, "delete_category")

        with wrap_storage_errors("delete_category", f"failed to delete category {category_id}"):
            self.repository.delete_category(ctx, category_id)

        logger.info("deleted_category", category_id=str(category_id))

    def _require_category(
        self, ctx: RequestContext, category_id: CategoryId, operation: str
    ) -> Category:
        with wrap_storage_errors(operation, f"failed to find category {category_id}"):
            category = self.repository.find_category_by_id(ctx, category_id)

        if category is None:
            raise CategoryNotFoundError(category_id)
        return category
