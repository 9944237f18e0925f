"""Catalog domain exceptions."""

from catalog.domain.common.exceptions import EntityNotFoundError


class ProductNotFoundError(EntityNotFoundError):
    """Raised when a product cannot be found."""

    def __init__(self, product_id: int) -> None:
        super().__init__("Product", product_id)
        self.product_id = product_id
