"""Repository for Category and Location domain entities."""

from collections.abc import Iterator
from contextlib import contextmanager

from sqlalchemy import delete, func, select
from sqlalchemy.exc import IntegrityError, OperationalError, SQLAlchemyError
from sqlalchemy.orm import Session

from location_service.application.common.exceptions import (
    StorageConflictError,
    StorageError,
    StorageTimeoutError,
)
from location_service.application.common.request_context import RequestContext
from location_service.domain.common.value_objects.ids import CategoryId, LocationId
from location_service.domain.locations.entities.category import Category
from location_service.domain.locations.entities.location import Location
from location_service.infrastructure.locations.mappers.category_mapper import CategoryMapper
from location_service.infrastructure.locations.mappers.location_mapper import LocationMapper
from location_service.models import Category as CategoryORM
from location_service.models import Location as LocationORM

# SQLSTATE raised by PostgreSQL when statement_timeout cancels a query
QUERY_CANCELED_SQLSTATE = "57014"


def _is_statement_timeout(exc: OperationalError) -> bool:
    orig = exc.orig
    code = getattr(orig, "sqlstate", None) or getattr(orig, "pgcode", None)
    return code == QUERY_CANCELED_SQLSTATE


class LocationRepository:
    """
    SQLAlchemy implementation of the location storage port.

    Every public method runs inside ``_operation``, which enforces the request
    deadline and translates SQLAlchemy failures into ``StorageError``
    subclasses. Location reads and writes are restricted to rows owned by
    ``ctx.user``; ``find_location_by_name`` is global because names are unique
    across all users.
    """

    def __init__(self, db: Session) -> None:
        self.db = db
        self.category_mapper = CategoryMapper()
        self.location_mapper = LocationMapper()

    # Categories

    def create_category(self, ctx: RequestContext, category: Category) -> None:
        with self._operation(ctx, "create_category"):
            self.db.add(self.category_mapper.to_orm(category))
            self.db.commit()

    def get_categories(self, ctx: RequestContext) -> list[Category]:
        with self._operation(ctx, "get_categories"):
            stmt = select(CategoryORM).order_by(CategoryORM.name)
            orm_models = self.db.execute(stmt).scalars().all()
            return [self.category_mapper.to_domain(orm) for orm in orm_models]

    def find_category_by_id(self, ctx: RequestContext, category_id: CategoryId) -> Category | None:
        with self._operation(ctx, "find_category_by_id"):
            stmt = select(CategoryORM).where(CategoryORM.id == category_id.value)
            orm_model = self.db.execute(stmt).scalar_one_or_none()
            return self.category_mapper.to_domain(orm_model) if orm_model else None

    def find_category_by_name(self, ctx: RequestContext, name: str) -> Category | None:
        with self._operation(ctx, "find_category_by_name"):
            stmt = select(CategoryORM).where(CategoryORM.name == name)
            orm_model = self.db.execute(stmt).scalar_one_or_none()
            return self.category_mapper.to_domain(orm_model) if orm_model else None

    def update_category(self, ctx: RequestContext, category: Category) -> None:
        with self._operation(ctx, "update_category"):
            orm_model = self.db.get(CategoryORM, category.id.value)
            if orm_model is None:
                return
            self.category_mapper.to_orm(category, orm_model)
            self.db.commit()

    def delete_category(self, ctx: RequestContext, category_id: CategoryId) -> None:
        """
        Delete a category.

        Raises:
            StorageConflictError: If locations still reference the category
        """
        with self._operation(ctx, "delete_category"):
            self.db.execute(delete(CategoryORM).where(CategoryORM.id == category_id.value))
            self.db.commit()

    # Locations

    def create_location(self, ctx: RequestContext, location: Location) -> None:
        with self._operation(ctx, "create_location"):
            self.db.add(self.location_mapper.to_orm(location))
            self.db.commit()

    def get_locations(self, ctx: RequestContext) -> list[Location]:
        with self._operation(ctx, "get_locations"):
            user = ctx.require_user("get_locations")
            stmt = (
                select(LocationORM)
                .where(LocationORM.user_id == user.id.value)
                .order_by(LocationORM.name)
            )
            orm_models = self.db.execute(stmt).scalars().all()
            return [self.location_mapper.to_domain(orm) for orm in orm_models]

    def find_location_by_id(self, ctx: RequestContext, location_id: LocationId) -> Location | None:
        with self._operation(ctx, "find_location_by_id"):
            orm_model = self._find_owned_location(ctx, location_id, "find_location_by_id")
            return self.location_mapper.to_domain(orm_model) if orm_model else None

    def find_location_by_name(self, ctx: RequestContext, name: str) -> Location | None:
        with self._operation(ctx, "find_location_by_name"):
            stmt = select(LocationORM).where(LocationORM.name == name)
            orm_model = self.db.execute(stmt).scalar_one_or_none()
            return self.location_mapper.to_domain(orm_model) if orm_model else None

    def find_locations_by_category(
        self, ctx: RequestContext, category: Category
    ) -> list[Location]:
        with self._operation(ctx, "find_locations_by_category"):
            user = ctx.require_user("find_locations_by_category")
            stmt = (
                select(LocationORM)
                .where(
                    LocationORM.category_id == category.id.value,
                    LocationORM.user_id == user.id.value,
                )
                .order_by(LocationORM.name)
            )
            orm_models = self.db.execute(stmt).scalars().all()
            return [self.location_mapper.to_domain(orm) for orm in orm_models]

    def update_location(self, ctx: RequestContext, location: Location) -> None:
        with self._operation(ctx, "update_location"):
            orm_model = self._find_owned_location(ctx, location.id, "update_location")
            if orm_model is None:
                return
            self.location_mapper.to_orm(location, orm_model)
            self.db.commit()

    def delete_location(self, ctx: RequestContext, location_id: LocationId) -> None:
        with self._operation(ctx, "delete_location"):
            user = ctx.require_user("delete_location")
            self.db.execute(
                delete(LocationORM).where(
                    LocationORM.id == location_id.value,
                    LocationORM.user_id == user.id.value,
                )
            )
            self.db.commit()

    def _find_owned_location(
        self, ctx: RequestContext, location_id: LocationId, operation: str
    ) -> LocationORM | None:
        user = ctx.require_user(operation)
        stmt = select(LocationORM).where(
            LocationORM.id == location_id.value,
            LocationORM.user_id == user.id.value,
        )
        return self.db.execute(stmt).scalar_one_or_none()

    @contextmanager
    def _operation(self, ctx: RequestContext, operation: str) -> Iterator[None]:
        """
        Run a storage operation under the request deadline.

        Raises:
            StorageTimeoutError: If the deadline is exceeded
            StorageConflictError: If a constraint rejects the write
            StorageError: For any other database failure
        """
        if ctx.expired():
            raise StorageTimeoutError(operation, "request deadline exceeded")

        try:
            self._apply_statement_timeout(ctx)
            yield
        except IntegrityError as exc:
            self.db.rollback()
            raise StorageConflictError(operation, str(exc.orig)) from exc
        except OperationalError as exc:
            self.db.rollback()
            if _is_statement_timeout(exc):
                raise StorageTimeoutError(operation, "statement timeout") from exc
            raise StorageError(operation, str(exc.orig)) from exc
        except SQLAlchemyError as exc:
            self.db.rollback()
            raise StorageError(operation, str(exc)) from exc

    def _apply_statement_timeout(self, ctx: RequestContext) -> None:
        """Bound the next statements of the transaction by the remaining time (PostgreSQL)."""
        remaining = ctx.remaining()
        if remaining is None or self.db.get_bind().dialect.name != "postgresql":
            return
        milliseconds = max(1, int(remaining * 1000))
        self.db.execute(select(func.set_config("statement_timeout", str(milliseconds), True)))
