"""Repository for Product domain entities."""

import structlog
from sqlalchemy import select
from sqlalchemy.exc import InterfaceError, OperationalError
from sqlalchemy.orm import Session, sessionmaker

from catalog.domain.catalog.entities.product import Product
from catalog.domain.common.value_objects.ids import ProductId
from catalog.exceptions import StoreUnavailableError
from catalog.infrastructure.catalog.mappers.product_mapper import ProductMapper
from catalog.models import Product as ProductORM

logger = structlog.get_logger(__name__)


class ProductRepository:
    """
    Repository for Product domain entities.

    Every call runs in its own session and transaction, so a single
    instance can be shared between concurrent requests.
    """

    def __init__(self, session_factory: sessionmaker[Session]) -> None:
        self.session_factory = session_factory
        self.mapper = ProductMapper()

    def insert(self, product: Product) -> Product:
        """
        Persist a new product.

        The transaction is committed before this returns. The returned
        entity is read back from the row, so its price carries the
        column's scale.

        Args:
            product: The unsaved product entity

        Returns:
            Saved product entity with the database-generated ID

        Raises:
            StoreUnavailableError: If the database cannot be reached
        """
        try:
            with self.session_factory() as db, db.begin():
                orm_model = self.mapper.to_orm(product)
                db.add(orm_model)
                db.flush()
                db.refresh(orm_model)
                saved = self.mapper.to_domain(orm_model)
        except (OperationalError, InterfaceError) as e:
            logger.error("product_insert_failed", error=str(e.orig))
            raise StoreUnavailableError(str(e.orig)) from e
        return saved

    def find_by_id(self, product_id: ProductId) -> Product | None:
        """
        Find a product by ID.

        Args:
            product_id: The product ID

        Returns:
            Product entity if found, None otherwise

        Raises:
            StoreUnavailableError: If the database cannot be reached
        """
        stmt = select(ProductORM).where(ProductORM.id == product_id.value)
        try:
            with self.session_factory() as db:
                orm_model = db.execute(stmt).scalar_one_or_none()
                return self.mapper.to_domain(orm_model) if orm_model else None
        except (OperationalError, InterfaceError) as e:
            logger.error("product_lookup_failed", product_id=product_id.value, error=str(e.orig))
            raise StoreUnavailableError(str(e.orig)) from e
