from dataclasses import dataclass

from ..entity import EntityId


@dataclass(frozen=True)
class CategoryId(EntityId):
    """Strongly-typed category identifier."""


@dataclass(frozen=True)
class LocationId(EntityId):
    """Strongly-typed location identifier."""


@dataclass(frozen=True)
class UserId(EntityId):
    """Strongly-typed user identifier."""
