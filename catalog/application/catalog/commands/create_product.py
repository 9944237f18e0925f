"""Command and handler for creating products."""

from dataclasses import dataclass

import structlog

from catalog.application.catalog.dtos import ProductInput
from catalog.application.catalog.protocols.product_repository import ProductRepositoryProtocol
from catalog.application.common.command import Command, CommandHandler
from catalog.application.common.result import Failure, Result, Success
from catalog.domain.catalog.entities.product import Product
from catalog.exceptions import CatalogError, StoreUnavailableError

logger = structlog.get_logger(__name__)

PRODUCT_CREATED_MESSAGE = "Product created successfully"


@dataclass(frozen=True)
class CreateProductCommand(Command[Result[Product, CatalogError]]):
    """Create a product from client-supplied fields."""

    product: ProductInput


class CreateProductHandler(CommandHandler[CreateProductCommand, Result[Product, CatalogError]]):
    """Handler for CreateProductCommand."""

    def __init__(self, product_repository: ProductRepositoryProtocol) -> None:
        """Initialize handler with repository protocol."""
        self.product_repository = product_repository

    def handle(self, command: CreateProductCommand) -> Result[Product, CatalogError]:
        """
        Insert a new product.

        Name, description and price are stored as given.

        Args:
            command: Command carrying the product input

        Returns:
            Success with the created product (including its assigned ID),
            or Failure when the store is unavailable
        """
        product = Product.create(
            name=command.product.name,
            description=command.product.description,
            price=command.product.price,
        )

        try:
            product = self.product_repository.insert(product)
        except StoreUnavailableError as e:
            logger.warning("create_product_store_unavailable", reason=e.reason)
            return Failure(e)

        logger.info("created_product", product_id=product.id.value, name=product.name)
        return Success(product, PRODUCT_CREATED_MESSAGE)
