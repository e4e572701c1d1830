"""Pydantic schemas for Location API request/response validation."""

from uuid import UUID

from pydantic import BaseModel, Field, field_validator, model_validator

NIL_UUID = UUID(int=0)


class LocationCreateRequest(BaseModel):
    """Schema for creating a Location. Every field is required."""

    name: str = Field(..., min_length=1, max_length=255, description='Short name, like "Home"')
    address: str = Field(
        ...,
        min_length=1,
        max_length=500,
        description="Full address with at least street, postal code and city",
    )
    category_id: UUID = Field(..., description="ID of an existing category")

    @field_validator("name", "address", mode="before")
    @classmethod
    def strip_text(cls, value: object) -> object:
        """Strip surrounding whitespace so blank text counts as empty."""
        return value.strip() if isinstance(value, str) else value

    @field_validator("category_id", mode="after")
    @classmethod
    def category_id_not_nil(cls, value: UUID) -> UUID:
        """Reject the nil UUID as a category reference."""
        if value == NIL_UUID:
            msg = "category_id is required"
            raise ValueError(msg)
        return value


class LocationUpdateRequest(BaseModel):
    """
    Schema for partially updating a Location.

    Omitted fields keep their stored value; at least one field must be set.
    """

    name: str = Field("", max_length=255)
    address: str = Field("", max_length=500)
    category_id: UUID | None = None

    @field_validator("name", "address", mode="before")
    @classmethod
    def strip_text(cls, value: object) -> object:
        """Strip surrounding whitespace so blank text counts as empty."""
        return value.strip() if isinstance(value, str) else value

    @model_validator(mode="after")
    def at_least_one_field(self) -> "LocationUpdateRequest":
        """Require at least one field to update."""
        has_category = self.category_id is not None and self.category_id != NIL_UUID
        if not (self.name or self.address or has_category):
            msg = "at least one of name, address or category_id is required"
            raise ValueError(msg)
        return self


class Location(BaseModel):
    """Schema for Location response."""

    id: UUID
    name: str
    address: str
    category_id: UUID
    user_id: UUID
