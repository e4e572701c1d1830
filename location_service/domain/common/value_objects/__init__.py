"""Common value objects shared across all domain modules."""

from .ids import CategoryId, LocationId, UserId

__all__ = [
    "CategoryId",
    "LocationId",
    "UserId",
]
