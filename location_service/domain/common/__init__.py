"""
Domain common module.

Contains base classes for domain modeling:
- Entity: Objects with identity and lifecycle
- EntityId: UUID-backed identifiers with a nil sentinel
- DomainError and its subclasses
"""

from .entity import Entity, EntityId
from .exceptions import (
    DomainError,
    EntityAlreadyExistsError,
    EntityNotFoundError,
    ValidationError,
)

__all__ = [
    "DomainError",
    "Entity",
    "EntityAlreadyExistsError",
    "EntityId",
    "EntityNotFoundError",
    "ValidationError",
]
