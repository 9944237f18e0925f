"""
Base class for Entities.

Entities have an identity that outlives changes to their attributes.
Two entities are equal when their identifiers are equal.

Example:
    @dataclass
    class Product(Entity[ProductId]):
        id: ProductId
        name: str
"""

from abc import ABC
from dataclasses import dataclass
from typing import Generic, Self, TypeVar

from .value_object import ValueObject


@dataclass(frozen=True)
class EntityId(ValueObject):
    """
    Base class for strongly-typed integer entity identifiers.

    The value 0 is a placeholder for entities the store has not yet
    assigned an identifier to.
    """

    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise ValueError(f"{self.__class__.__name__} must be non-negative")

    def __int__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return str(self.value)

    @classmethod
    def generate(cls) -> Self:
        """Set placeholder id. The database assigns the real one."""
        return cls(0)

    @property
    def is_assigned(self) -> bool:
        """Whether the store has assigned this identifier."""
        return self.value != 0

    def to_primitive(self) -> int:
        """Convert to primitive for serialization."""
        return self.value


IdType = TypeVar("IdType", bound=EntityId)


class Entity(ABC, Generic[IdType]):
    """
    Base class for Entities in the domain model.

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
