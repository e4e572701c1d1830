"""
Base class for Entities.

Entities are objects that have a distinct identity that runs through time
and different states. Identities are random 128-bit UUIDs generated by the
application, never by the database.

Example:
    @dataclass
    class Category(Entity[CategoryId]):
        id: CategoryId
        name: str

        def rename(self, new_name: str) -> None:
            self.name = new_name
"""

import re
from abc import ABC
from dataclasses import dataclass
from typing import Generic, Self, TypeVar
from uuid import UUID, uuid4

from .exceptions import ValidationError

NIL_UUID = UUID(int=0)

# 8-4-4-4-12 grouped hex, the only textual form accepted by EntityId.parse
_CANONICAL_ID_PATTERN = re.compile(
    r"[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}"
)


@dataclass(frozen=True)
class EntityId:
    """
    Base class for strongly-typed entity identifiers.

    Entity IDs are value objects that wrap a UUID.
    They provide type safety to prevent mixing up IDs of different entities.
    The all-zero UUID is the nil sentinel meaning "no identifier".

    Example:
        @dataclass(frozen=True)
        class CategoryId(EntityId):
            pass

        category_id = CategoryId.generate()
        same_id = CategoryId.parse(str(category_id))
        assert category_id == same_id
    """

    value: UUID

    def __post_init__(self) -> None:
        if not isinstance(self.value, UUID):
            raise TypeError(f"{self.__class__.__name__} must wrap a UUID")

    def __str__(self) -> str:
        return str(self.value)

    @classmethod
    def generate(cls) -> Self:
        """Create a fresh random identifier."""
        return cls(uuid4())

    @classmethod
    def nil(cls) -> Self:
        """Return the nil sentinel."""
        return cls(NIL_UUID)

    @classmethod
    def parse(cls, raw: str) -> Self:
        """
        Parse the canonical textual form of an identifier.

        An empty string yields the nil sentinel.

        Raises:
            ValidationError: If the string is not a canonical identifier
        """
        if raw == "":
            return cls.nil()
        if not _CANONICAL_ID_PATTERN.fullmatch(raw):
            raise ValidationError("Malformed identifier", field="id", value=raw)
        return cls(UUID(raw))

    def is_nil(self) -> bool:
        return self.value == NIL_UUID

    def to_primitive(self) -> str:
        """Convert to primitive for serialization."""
        return str(self.value)


IdType = TypeVar("IdType", bound=EntityId)


class Entity(ABC, Generic[IdType]):
    """
    Base class for Entities in the domain model.

    Entities are:
    - Defined by identity (not attributes)
    - Mutable (state can change over time)
    - Have lifecycle (created, modified, deleted)

    Subclasses must have an 'id' attribute of type IdType.
    """

    id: IdType

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, self.__class__):
            return False
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(id={self.id})"
