"""Query and handler for fetching a single product."""

from dataclasses import dataclass

import structlog

from catalog.application.catalog.protocols.product_repository import ProductRepositoryProtocol
from catalog.application.common.query import Query, QueryHandler
from catalog.application.common.result import Failure, Result, Success
from catalog.domain.catalog.entities.product import Product
from catalog.domain.catalog.exceptions import ProductNotFoundError
from catalog.domain.common.value_objects.ids import ProductId
from catalog.exceptions import CatalogError, StoreUnavailableError

logger = structlog.get_logger(__name__)

PRODUCT_RETRIEVED_MESSAGE = "Product retrieved successfully"


class ProductRetrievalError(CatalogError):
    """Any failure while retrieving a product, including a missing product."""

    def __init__(self, cause: Exception) -> None:
        self.cause = cause
        super().__init__(f"An error occurred while retrieving the product: {cause}")


@dataclass(frozen=True)
class GetProductByIdQuery(Query[Result[Product, CatalogError]]):
    """Fetch one product by its identifier."""

    product_id: int


class GetProductByIdHandler(QueryHandler[GetProductByIdQuery, Result[Product, CatalogError]]):
    """Handler for GetProductByIdQuery."""

    def __init__(self, product_repository: ProductRepositoryProtocol) -> None:
        """Initialize handler with repository protocol."""
        self.product_repository = product_repository

    def handle(self, query: GetProductByIdQuery) -> Result[Product, CatalogError]:
        """
        Look up a product.

        A missing product and any error raised by the lookup come back as
        a ProductRetrievalError; callers don't distinguish them.

        Args:
            query: Query carrying the product ID

        Returns:
            Success with the product, or Failure wrapping the cause
        """
        try:
            product = self.product_repository.find_by_id(ProductId(query.product_id))
        except (StoreUnavailableError, ValueError) as e:
            logger.warning("get_product_failed", product_id=query.product_id, error=str(e))
            return Failure(ProductRetrievalError(e))
        except Exception as e:
            logger.error(
                "get_product_failed", product_id=query.product_id, error=str(e), exc_info=True
            )
            return Failure(ProductRetrievalError(e))

        if product is None:
            logger.info("product_not_found", product_id=query.product_id)
            return Failure(ProductRetrievalError(ProductNotFoundError(query.product_id)))

        return Success(product, PRODUCT_RETRIEVED_MESSAGE)
