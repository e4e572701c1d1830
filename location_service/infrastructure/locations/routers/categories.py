from typing import Annotated

from fastapi import APIRouter, Depends, Response
from starlette import status

from location_service.application.locations.use_cases.category_use_case import CategoryUseCase
from location_service.domain.common.value_objects.ids import CategoryId
from location_service.domain.locations.entities.category import Category as CategoryEntity
from location_service.infrastructure.common.di import inject_use_case
from location_service.infrastructure.common.schemas import HTTPError
from location_service.infrastructure.identity import CurrentContext
from location_service.infrastructure.locations.schemas import (
    Category,
    CategoryCreateRequest,
    CategoryUpdateRequest,
)

router = APIRouter(
    prefix="/categories",
    tags=["categories"],
    responses={
        status.HTTP_400_BAD_REQUEST: {"model": HTTPError},
        status.HTTP_401_UNAUTHORIZED: {"model": HTTPError},
        status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": HTTPError},
    },
)

CategoryUseCaseDep = Annotated[CategoryUseCase, Depends(inject_use_case("category_use_case"))]


def _to_schema(category: CategoryEntity) -> Category:
    return Category(id=category.id.value, name=category.name)


@router.post(
    "",
    response_model=Category,
    status_code=status.HTTP_201_CREATED,
    responses={status.HTTP_409_CONFLICT: {"model": HTTPError}},
)
def create_category(
    request: CategoryCreateRequest,
    ctx: CurrentContext,
    use_case: CategoryUseCaseDep,
) -> Category:
    """
    Create a new category.

    Raises:
        CategoryAlreadyExistsError: If the name is already used (409)
    """
    category = CategoryEntity.create(request.name)
    use_case.create_category(ctx, category)
    return _to_schema(category)


@router.get("", response_model=list[Category])
def get_categories(ctx: CurrentContext, use_case: CategoryUseCaseDep) -> list[Category]:
    """Get all categories."""
    return [_to_schema(category) for category in use_case.get_categories(ctx)]


@router.get(
    "/{category_id}",
    response_model=Category,
    responses={status.HTTP_404_NOT_FOUND: {"model": HTTPError}},
)
def get_category(category_id: str, ctx: CurrentContext, use_case: CategoryUseCaseDep) -> Category:
    """Get one category by id."""
    category = use_case.find_category_by_id(ctx, CategoryId.parse(category_id))
    return _to_schema(category)


@router.put(
    "/{category_id}",
    response_model=Category,
    responses={
        status.HTTP_404_NOT_FOUND: {"model": HTTPError},
        status.HTTP_409_CONFLICT: {"model": HTTPError},
    },
)
def update_category(
    category_id: str,
    request: CategoryUpdateRequest,
    ctx: CurrentContext,
    use_case: CategoryUseCaseDep,
) -> Category:
    """
    Rename a category.

    The request carries the complete desired name.
    """
    category = CategoryEntity(id=CategoryId.parse(category_id), name=request.name.strip())
    use_case.update_category(ctx, category)
    return _to_schema(category)


@router.delete(
    "/{category_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={
        status.HTTP_404_NOT_FOUND: {"model": HTTPError},
        status.HTTP_409_CONFLICT: {"model": HTTPError},
    },
)
def delete_category(category_id: str, ctx: CurrentContext, use_case: CategoryUseCaseDep) -> None:
    """
    Delete a category.

    A category still referenced by locations cannot be deleted (409).
    """
    use_case.delete_category(ctx, CategoryId.parse(category_id))
