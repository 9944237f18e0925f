"""Schema creation and fixture seeding for the products table."""

from decimal import Decimal

import structlog
from sqlalchemy import func, insert, select, text
from sqlalchemy.engine import Engine

from catalog import models
from catalog.database import Base

logger = structlog.get_logger(__name__)

SEED_PRODUCTS: list[dict[str, object]] = [
    {
        "id": 1,
        "name": "Laptop",
        "description": "High performance laptop",
        "price": Decimal("1200.50"),
    },
    {
        "id": 2,
        "name": "Smartphone",
        "description": "Latest Android smartphone",
        "price": Decimal("800.00"),
    },
    {
        "id": 3,
        "name": "Headphones",
        "description": "Noise-cancelling headphones",
        "price": Decimal("199.99"),
    },
    {
        "id": 4,
        "name": "Monitor",
        "description": "27-inch 4K monitor",
        "price": Decimal("350.75"),
    },
]


def init_db(engine: Engine, *, seed: bool = True) -> None:
    """
    Create all tables and optionally insert the seed products.

    Seeding only happens when the products table is empty, so calling this
    on every startup is safe.

    Args:
        engine: Engine bound to the target database
        seed: Whether to insert the fixture products
    """
    Base.metadata.create_all(bind=engine)

    if not seed:
        return

    with engine.begin() as conn:
        count = conn.execute(select(func.count(models.Product.id))).scalar() or 0
        if count:
            logger.debug("skipped_product_seed", existing_rows=count)
            return

        conn.execute(insert(models.Product), SEED_PRODUCTS)

        # Explicit ids don't advance the PostgreSQL sequence
        if engine.dialect.name == "postgresql":
            conn.execute(
                text(
                    "SELECT setval('products_id_seq', "
                    "COALESCE((SELECT MAX(id) FROM products), 0) + 1, false)"
                )
            )

    logger.info("seeded_products", count=len(SEED_PRODUCTS))
