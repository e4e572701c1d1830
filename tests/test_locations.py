"""Tests for location API endpoints."""

from collections.abc import Callable
from typing import Any
from uuid import uuid4

import pytest
from fastapi import status
from fastapi.testclient import TestClient

NIL_ID = "00000000-0000-0000-0000-000000000000"


@pytest.fixture
def user_id() -> str:
    return str(uuid4())


@pytest.fixture
def headers(auth_headers: Callable[..., dict[str, str]], user_id: str) -> dict[str, str]:
    return auth_headers(user_id)


@pytest.fixture
def other_headers(auth_headers: Callable[..., dict[str, str]]) -> dict[str, str]:
    return auth_headers()


@pytest.fixture
def homes(client: TestClient, headers: dict[str, str]) -> dict[str, Any]:
    response = client.post("/api/v1/categories", json={"name": "Homes"}, headers=headers)
    return response.json()


@pytest.fixture
def tennis(client: TestClient, headers: dict[str, str]) -> dict[str, Any]:
    response = client.post("/api/v1/categories", json={"name": "Tennis Center"}, headers=headers)
    return response.json()


@pytest.fixture
def home(client: TestClient, headers: dict[str, str], homes: dict[str, Any]) -> dict[str, Any]:
    response = client.post(
        "/api/v1/locations",
        json={"name": "Home", "address": "1 Main Street, 75001 Paris", "category_id": homes["id"]},
        headers=headers,
    )
    assert response.status_code == status.HTTP_201_CREATED
    return response.json()


class TestCreateLocation:
    """Test suite for POST /locations."""

    def test_create_location(
        self, client: TestClient, headers: dict[str, str], user_id: str, homes: dict[str, Any]
    ) -> None:
        """Test that the created location is owned by the caller."""
        response = client.post(
            "/api/v1/locations",
            json={"name": "Home", "address": "1 Main Street", "category_id": homes["id"]},
            headers=headers,
        )

        assert response.status_code == status.HTTP_201_CREATED
        data = response.json()
        assert data["name"] == "Home"
        assert data["address"] == "1 Main Street"
        assert data["category_id"] == homes["id"]
        assert data["user_id"] == user_id
        assert data["id"] != NIL_ID

    def test_create_with_missing_category(
        self, client: TestClient, headers: dict[str, str]
    ) -> None:
        """Test that the category must exist."""
        response = client.post(
            "/api/v1/locations",
            json={"name": "Home", "address": "1 Main Street", "category_id": str(uuid4())},
            headers=headers,
        )

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json() == {"code": 404, "message": "Category not found"}

    def test_create_duplicate_name_for_other_user(
        self,
        client: TestClient,
        other_headers: dict[str, str],
        homes: dict[str, Any],
        home: dict[str, Any],
    ) -> None:
        """Test that location names are unique across all users."""
        response = client.post(
            "/api/v1/locations",
            json={"name": "Home", "address": "9 Elsewhere", "category_id": homes["id"]},
            headers=other_headers,
        )

        assert response.status_code == status.HTTP_409_CONFLICT
        assert response.json() == {"code": 409, "message": "Location already exists"}

    def test_duplicate_name_wins_over_missing_category(
        self, client: TestClient, headers: dict[str, str], home: dict[str, Any]
    ) -> None:
        """Test that the name check runs before the category check."""
        response = client.post(
            "/api/v1/locations",
            json={"name": "Home", "address": "9 Elsewhere", "category_id": str(uuid4())},
            headers=headers,
        )

        assert response.status_code == status.HTTP_409_CONFLICT

    @pytest.mark.parametrize(
        "payload",
        [
            {"address": "1 Main Street", "category_id": str(uuid4())},
            {"name": "Home", "category_id": str(uuid4())},
            {"name": "Home", "address": "1 Main Street"},
            {"name": "Home", "address": "1 Main Street", "category_id": NIL_ID},
            {"name": "Home", "address": "1 Main Street", "category_id": "not-a-uuid"},
            {"name": "   ", "address": "1 Main Street", "category_id": str(uuid4())},
        ],
    )
    def test_create_invalid_payload(
        self, client: TestClient, headers: dict[str, str], payload: dict[str, Any]
    ) -> None:
        """Test that every field is required on create."""
        response = client.post("/api/v1/locations", json=payload, headers=headers)

        assert response.status_code == status.HTTP_400_BAD_REQUEST


class TestReadLocations:
    """Test suite for GET /locations."""

    def test_get_locations(
        self, client: TestClient, headers: dict[str, str], home: dict[str, Any]
    ) -> None:
        """Test listing the caller's locations."""
        response = client.get("/api/v1/locations", headers=headers)

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == [home]

    def test_locations_are_private(
        self, client: TestClient, other_headers: dict[str, str], home: dict[str, Any]
    ) -> None:
        """Test that other users neither list nor fetch the location."""
        listed = client.get("/api/v1/locations", headers=other_headers)
        fetched = client.get(f"/api/v1/locations/{home['id']}", headers=other_headers)

        assert listed.json() == []
        assert fetched.status_code == status.HTTP_404_NOT_FOUND
        assert fetched.json() == {"code": 404, "message": "Location not found"}

    def test_get_location(
        self, client: TestClient, headers: dict[str, str], home: dict[str, Any]
    ) -> None:
        """Test fetching one location by id."""
        response = client.get(f"/api/v1/locations/{home['id']}", headers=headers)

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == home

    def test_filter_by_category(
        self,
        client: TestClient,
        headers: dict[str, str],
        home: dict[str, Any],
        tennis: dict[str, Any],
    ) -> None:
        """Test listing locations of one category."""
        court = client.post(
            "/api/v1/locations",
            json={"name": "Court", "address": "5 Sport Avenue", "category_id": tennis["id"]},
            headers=headers,
        ).json()

        response = client.get(
            "/api/v1/locations", params={"category_id": tennis["id"]}, headers=headers
        )

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == [court]

    def test_filter_by_missing_category(self, client: TestClient, headers: dict[str, str]) -> None:
        """Test that filtering by an unknown category is not found."""
        response = client.get(
            "/api/v1/locations", params={"category_id": str(uuid4())}, headers=headers
        )

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_filter_by_nil_category(
        self, client: TestClient, headers: dict[str, str], home: dict[str, Any]
    ) -> None:
        """Test that an explicit nil category filter is a bad request, not a full list."""
        response = client.get(
            "/api/v1/locations", params={"category_id": NIL_ID}, headers=headers
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json() == {"code": 400, "message": "Category id cannot be nil"}

    def test_filter_by_malformed_category(
        self, client: TestClient, headers: dict[str, str]
    ) -> None:
        """Test that a malformed category filter is a bad request."""
        response = client.get(
            "/api/v1/locations", params={"category_id": "nope"}, headers=headers
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST


class TestUpdateLocation:
    """Test suite for PUT /locations/{id}."""

    def test_partial_update(
        self, client: TestClient, headers: dict[str, str], home: dict[str, Any]
    ) -> None:
        """Test that omitted fields keep their stored value."""
        response = client.put(
            f"/api/v1/locations/{home['id']}", json={"name": "Main Home"}, headers=headers
        )

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {**home, "name": "Main Home"}
        fetched = client.get(f"/api/v1/locations/{home['id']}", headers=headers)
        assert fetched.json() == {**home, "name": "Main Home"}

    def test_move_to_other_category(
        self,
        client: TestClient,
        headers: dict[str, str],
        home: dict[str, Any],
        tennis: dict[str, Any],
    ) -> None:
        """Test changing the category of a location."""
        response = client.put(
            f"/api/v1/locations/{home['id']}",
            json={"category_id": tennis["id"]},
            headers=headers,
        )

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["category_id"] == tennis["id"]
        assert response.json()["address"] == home["address"]

    def test_update_to_missing_category(
        self, client: TestClient, headers: dict[str, str], home: dict[str, Any]
    ) -> None:
        """Test that the new category must exist and nothing changes otherwise."""
        response = client.put(
            f"/api/v1/locations/{home['id']}",
            json={"name": "Renamed", "category_id": str(uuid4())},
            headers=headers,
        )

        assert response.status_code == status.HTTP_404_NOT_FOUND
        fetched = client.get(f"/api/v1/locations/{home['id']}", headers=headers)
        assert fetched.json() == home

    def test_update_with_no_fields(
        self, client: TestClient, headers: dict[str, str], home: dict[str, Any]
    ) -> None:
        """Test that an empty update is a bad request."""
        response = client.put(f"/api/v1/locations/{home['id']}", json={}, headers=headers)

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    @pytest.mark.parametrize(
        "payload", [{"name": "   "}, {"address": "\t"}, {"name": " ", "address": "  "}]
    )
    def test_update_with_blank_fields(
        self,
        client: TestClient,
        headers: dict[str, str],
        home: dict[str, Any],
        payload: dict[str, Any],
    ) -> None:
        """Test that whitespace-only fields count as empty and are rejected."""
        response = client.put(f"/api/v1/locations/{home['id']}", json=payload, headers=headers)

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        fetched = client.get(f"/api/v1/locations/{home['id']}", headers=headers)
        assert fetched.json() == home

    def test_update_strips_whitespace(
        self, client: TestClient, headers: dict[str, str], home: dict[str, Any]
    ) -> None:
        """Test that surrounding whitespace is removed from updated fields."""
        response = client.put(
            f"/api/v1/locations/{home['id']}", json={"name": "  Main Home "}, headers=headers
        )

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["name"] == "Main Home"

    def test_update_other_users_location(
        self,
        client: TestClient,
        headers: dict[str, str],
        other_headers: dict[str, str],
        home: dict[str, Any],
    ) -> None:
        """Test that only the owner can update a location."""
        response = client.put(
            f"/api/v1/locations/{home['id']}", json={"name": "Stolen"}, headers=other_headers
        )

        assert response.status_code == status.HTTP_404_NOT_FOUND
        fetched = client.get(f"/api/v1/locations/{home['id']}", headers=headers)
        assert fetched.json()["name"] == "Home"

    def test_rename_to_taken_name(
        self,
        client: TestClient,
        headers: dict[str, str],
        homes: dict[str, Any],
        home: dict[str, Any],
    ) -> None:
        """Test that renaming onto an existing name is a conflict."""
        other = client.post(
            "/api/v1/locations",
            json={"name": "Office", "address": "3 Work Road", "category_id": homes["id"]},
            headers=headers,
        ).json()

        response = client.put(
            f"/api/v1/locations/{other['id']}", json={"name": "Home"}, headers=headers
        )

        assert response.status_code == status.HTTP_409_CONFLICT


class TestDeleteLocation:
    """Test suite for DELETE /locations/{id}."""

    def test_delete_location(
        self, client: TestClient, headers: dict[str, str], home: dict[str, Any]
    ) -> None:
        """Test deleting an owned location."""
        response = client.delete(f"/api/v1/locations/{home['id']}", headers=headers)

        assert response.status_code == status.HTTP_204_NO_CONTENT
        fetched = client.get(f"/api/v1/locations/{home['id']}", headers=headers)
        assert fetched.status_code == status.HTTP_404_NOT_FOUND

    def test_delete_other_users_location(
        self,
        client: TestClient,
        headers: dict[str, str],
        other_headers: dict[str, str],
        home: dict[str, Any],
    ) -> None:
        """Test that only the owner can delete a location."""
        response = client.delete(f"/api/v1/locations/{home['id']}", headers=other_headers)

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert client.get(f"/api/v1/locations/{home['id']}", headers=headers).json() == home

    def test_category_can_be_deleted_after_its_locations(
        self,
        client: TestClient,
        headers: dict[str, str],
        homes: dict[str, Any],
        home: dict[str, Any],
    ) -> None:
        """Test that removing the last location frees the category."""
        client.delete(f"/api/v1/locations/{home['id']}", headers=headers)

        response = client.delete(f"/api/v1/categories/{homes['id']}", headers=headers)

        assert response.status_code == status.HTTP_204_NO_CONTENT
