from collections.abc import Callable
from typing import Any

from fastapi import Request

from location_service.core import Container
from location_service.database import DatabaseSession


def inject_use_case(name: str) -> Callable[[Request, DatabaseSession], Any]:
    """
    Create a FastAPI dependency for a use case provider of the container.

    The repository is built with the request-scoped database session and
    handed to the use case factory, so concurrent requests never share a
    provider override.
    """

    def dependency(request: Request, db: DatabaseSession) -> Any:
        container: Container = request.app.state.container
        repository = container.location_repository(db=db)
        provider = getattr(container, name)
        return provider(repository=repository)

    return dependency
