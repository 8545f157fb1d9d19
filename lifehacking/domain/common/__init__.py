"""
Domain common module.

Contains base classes for domain modeling:
- ValueObject: Immutable objects defined by their attributes
- Entity: Objects with identity and lifecycle
- EntityId: UUID-backed identifiers for entities
"""

from .entity import Entity, EntityId
from .exceptions import DomainError, DuplicateFavoriteError, ValidationError
from .value_object import ValueObject

__all__ = [
    "DomainError",
    "DuplicateFavoriteError",
    "Entity",
    "EntityId",
    "ValidationError",
    "ValueObject",
]
