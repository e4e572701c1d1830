"""Pydantic schemas for Category API request/response validation."""

from uuid import UUID

from pydantic import BaseModel, Field


class CategoryCreateRequest(BaseModel):
    """Schema for creating a Category."""

    name: str = Field(
        ..., min_length=1, max_length=255, description='Category name, like "Homes"'
    )


class CategoryUpdateRequest(BaseModel):
    """Schema for replacing a Category name."""

    name: str = Field(..., min_length=1, max_length=255, description="New category name")


class Category(BaseModel):
    """Schema for Category response."""

    id: UUID
    name: str
