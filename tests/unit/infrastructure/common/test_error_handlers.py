import pytest
from fastapi import FastAPI, status
from fastapi.testclient import TestClient

from location_service.application.common.exceptions import (
    StorageConflictError,
    StorageError,
    StorageTimeoutError,
    UseCaseError,
)
from location_service.domain.common.value_objects.ids import CategoryId, LocationId
from location_service.domain.identity.exceptions import MissingUserError
from location_service.domain.locations.exceptions import (
    CategoryNotFoundError,
    LocationAlreadyExistsError,
)
from location_service.infrastructure.common.error_handlers import register_error_handlers

ERRORS: dict[str, Exception] = {
    "not-found": CategoryNotFoundError(CategoryId.generate()),
    "exists": LocationAlreadyExistsError("Home"),
    "no-user": MissingUserError("get_locations"),
    "timeout": UseCaseError("get_locations", "failed", StorageTimeoutError("op", "deadline")),
    "conflict": UseCaseError("delete_category", "failed", StorageConflictError("op", "fk")),
    "storage": UseCaseError("get_locations", "failed", StorageError("op", "reset")),
}


@pytest.fixture
def client() -> TestClient:
    app = FastAPI()
    register_error_handlers(app)

    @app.get("/raise/{name}")
    def raise_error(name: str) -> None:
        raise ERRORS[name]

    return TestClient(app, raise_server_exceptions=False)


@pytest.mark.parametrize(
    ("name", "expected_status"),
    [
        ("not-found", status.HTTP_404_NOT_FOUND),
        ("exists", status.HTTP_409_CONFLICT),
        ("no-user", status.HTTP_401_UNAUTHORIZED),
        ("timeout", status.HTTP_504_GATEWAY_TIMEOUT),
        ("conflict", status.HTTP_409_CONFLICT),
        ("storage", status.HTTP_500_INTERNAL_SERVER_ERROR),
    ],
)
def test_error_status_mapping(client: TestClient, name: str, expected_status: int) -> None:
    """Test that each error class maps to its HTTP status with the shared body."""
    response = client.get(f"/raise/{name}")

    assert response.status_code == expected_status
    assert response.json()["code"] == expected_status


def test_internal_details_are_hidden(client: TestClient) -> None:
    """Test that storage failure details never reach the client."""
    response = client.get("/raise/storage")

    assert "reset" not in response.json()["message"]


def test_not_found_message_names_entity(client: TestClient) -> None:
    """Test that not-found errors name the missing entity kind only."""
    response = client.get("/raise/not-found")

    assert response.json() == {"code": 404, "message": "Category not found"}
    assert str(LocationId.nil()) not in response.json()["message"]
