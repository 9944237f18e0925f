"""Mapper for Product ORM ↔ Domain conversion."""

from decimal import ROUND_HALF_UP, Decimal

from catalog.domain.catalog.entities.product import Product
from catalog.domain.common.value_objects.ids import ProductId
from catalog.models import Product as ProductORM

# Matches the scale of the products.price column
PRICE_QUANTUM = Decimal("0.01")


class ProductMapper:
    """Mapper for Product ORM ↔ Domain conversion."""

    def to_domain(self, orm_model: ProductORM) -> Product:
        """Convert ORM model to domain entity."""
        return Product.create_with_id(
            id=ProductId(orm_model.id),
            name=orm_model.name,
            description=orm_model.description,
            price=orm_model.price,
        )

    def to_orm(self, domain_entity: Product) -> ProductORM:
        """Convert a new domain entity to an ORM model, rounding the price to cents."""
        return ProductORM(
            id=domain_entity.id.value if domain_entity.id.is_assigned else None,
            name=domain_entity.name,
            description=domain_entity.description,
            price=domain_entity.price.quantize(PRICE_QUANTUM, rounding=ROUND_HALF_UP),
        )
