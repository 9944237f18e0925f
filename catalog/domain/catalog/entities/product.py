"""
Product entity for the catalog.
"""

from dataclasses import dataclass
from decimal import Decimal

from catalog.domain.common.entity import Entity
from catalog.domain.common.value_objects import ProductId


@dataclass(eq=False, repr=False)
class Product(Entity[ProductId]):
    """
    A product offered in the catalog.

    Price is expected to be non-negative but this is not enforced; names
    and descriptions are stored as given.
    """

    id: ProductId
    name: str
    description: str
    price: Decimal

    @classmethod
    def create(cls, name: str, description: str, price: Decimal) -> "Product":
        """Create a new product (ID will be 0 until persisted)."""
        return cls(
            id=ProductId.generate(),
            name=name,
            description=description,
            price=price,
        )

    @classmethod
    def create_with_id(
        cls,
        id: ProductId,
        name: str,
        description: str,
        price: Decimal,
    ) -> "Product":
        """Reconstitute a product from persistence."""
        return cls(id=id, name=name, description=description, price=price)
