"""
Domain common module.

Contains base classes for domain modeling:
- ValueObject: Immutable objects defined by their attributes
- Entity: Objects with identity
- EntityId: Strongly-typed identifiers
"""

from .entity import Entity, EntityId
from .exceptions import DomainError, EntityNotFoundError
from .value_object import ValueObject

__all__ = [
    "DomainError",
    "Entity",
    "EntityId",
    "EntityNotFoundError",
    "ValueObject",
]
