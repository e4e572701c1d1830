from typing import Annotated

from fastapi import APIRouter, Depends, Query, Response
from starlette import status

from location_service.application.locations.use_cases.location_use_case import LocationUseCase
from location_service.domain.common.exceptions import ValidationError
from location_service.domain.common.value_objects.ids import CategoryId, LocationId
from location_service.domain.locations.entities.location import Location as LocationEntity
from location_service.infrastructure.common.di import inject_use_case
from location_service.infrastructure.common.schemas import HTTPError
from location_service.infrastructure.identity import CurrentContext
from location_service.infrastructure.locations.schemas import (
    Location,
    LocationCreateRequest,
    LocationUpdateRequest,
)

router = APIRouter(
    prefix="/locations",
    tags=["locations"],
    responses={
        status.HTTP_400_BAD_REQUEST: {"model": HTTPError},
        status.HTTP_401_UNAUTHORIZED: {"model": HTTPError},
        status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": HTTPError},
    },
)

LocationUseCaseDep = Annotated[LocationUseCase, Depends(inject_use_case("location_use_case"))]


def _to_schema(location: LocationEntity) -> Location:
    return Location(
        id=location.id.value,
        name=location.name,
        address=location.address,
        category_id=location.category.value,
        user_id=location.user.value,
    )


@router.post(
    "",
    response_model=Location,
    status_code=status.HTTP_201_CREATED,
    responses={
        status.HTTP_404_NOT_FOUND: {"model": HTTPError},
        status.HTTP_409_CONFLICT: {"model": HTTPError},
    },
)
def create_location(
    request: LocationCreateRequest,
    ctx: CurrentContext,
    use_case: LocationUseCaseDep,
) -> Location:
    """
    Create a location owned by the current user.

    Raises:
        LocationAlreadyExistsError: If the name is already used (409)
        CategoryNotFoundError: If the category does not exist (404)
    """
    user = ctx.require_user("create_location")
    location = LocationEntity.create(
        name=request.name,
        address=request.address,
        category=CategoryId(request.category_id),
        user=user.id,
    )
    use_case.create_location(ctx, location)
    return _to_schema(location)


@router.get(
    "",
    response_model=list[Location],
    responses={status.HTTP_404_NOT_FOUND: {"model": HTTPError}},
)
def get_locations(
    ctx: CurrentContext,
    use_case: LocationUseCaseDep,
    category_id: Annotated[str, Query(description="Only locations of this category")] = "",
) -> list[Location]:
    """
    Get the current user's locations, optionally filtered by category.

    An explicit nil category id is rejected (400).
    """
    if not category_id:
        locations = use_case.get_locations(ctx)
    else:
        category = CategoryId.parse(category_id)
        if category.is_nil():
            raise ValidationError(
                "Category id cannot be nil", field="category_id", value=category_id
            )
        locations = use_case.find_locations_by_category(ctx, category)
    return [_to_schema(location) for location in locations]


@router.get(
    "/{location_id}",
    response_model=Location,
    responses={status.HTTP_404_NOT_FOUND: {"model": HTTPError}},
)
def get_location(location_id: str, ctx: CurrentContext, use_case: LocationUseCaseDep) -> Location:
    """Get one of the current user's locations by id."""
    location = use_case.find_location_by_id(ctx, LocationId.parse(location_id))
    return _to_schema(location)


@router.put(
    "/{location_id}",
    response_model=Location,
    responses={
        status.HTTP_404_NOT_FOUND: {"model": HTTPError},
        status.HTTP_409_CONFLICT: {"model": HTTPError},
    },
)
def update_location(
    location_id: str,
    request: LocationUpdateRequest,
    ctx: CurrentContext,
    use_case: LocationUseCaseDep,
) -> Location:
    """
    Partially update a location.

    Fields left empty keep their stored value.
    """
    user = ctx.require_user("update_location")
    incoming = LocationEntity(
        id=LocationId.parse(location_id),
        name=request.name,
        address=request.address,
        category=CategoryId(request.category_id) if request.category_id else CategoryId.nil(),
        user=user.id,
    )
    location = use_case.update_location(ctx, incoming)
    return _to_schema(location)


@router.delete(
    "/{location_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={status.HTTP_404_NOT_FOUND: {"model": HTTPError}},
)
def delete_location(location_id: str, ctx: CurrentContext, use_case: LocationUseCaseDep) -> None:
    """Delete one of the current user's locations."""
    use_case.delete_location(ctx, LocationId.parse(location_id))
