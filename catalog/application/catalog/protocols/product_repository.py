"""Protocol for Product repository in catalog context."""

from typing import Protocol

from catalog.domain.catalog.entities.product import Product
from catalog.domain.common.value_objects.ids import ProductId


class ProductRepositoryProtocol(Protocol):
    """Protocol for Product repository operations in catalog context."""

    def insert(self, product: Product) -> Product:
        """
        Persist a new product and assign its identifier.

        Args:
            product: Unsaved product entity (placeholder ID)

        Returns:
            Product entity carrying the store-assigned ID

        Raises:
            StoreUnavailableError: If the store cannot be reached
        """
        ...

    def find_by_id(self, product_id: ProductId) -> Product | None:
        """
        Find a product by ID.

        Args:
            product_id: The product ID

        Returns:
            Product entity if found, None otherwise

        Raises:
            StoreUnavailableError: If the store cannot be reached
        """
        ...
