"""Pydantic schemas for Product API request/response validation."""

from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field, field_serializer

from catalog.application.catalog.dtos import ProductInput
from catalog.domain.catalog.entities.product import Product
from catalog.infrastructure.common.schemas.response_wrappers import ResultEnvelope


class ProductCreateRequest(BaseModel):
    """Schema for creating a product."""

    name: str = Field(..., description="Product name")
    description: str = Field(..., description="Product description")
    price: Decimal = Field(..., description="Unit price")

    def to_input(self) -> ProductInput:
        """Convert the request body into the use case input."""
        return ProductInput(name=self.name, description=self.description, price=self.price)


class ProductSchema(BaseModel):
    """Schema for a product as returned by the API."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    description: str
    price: Decimal

    @field_serializer("price")
    def serialize_price(self, price: Decimal) -> float:
        """Render prices as JSON numbers rather than strings."""
        return float(price)

    @classmethod
    def from_entity(cls, product: Product) -> "ProductSchema":
        """Build the schema from a domain entity."""
        return cls(
            id=product.id.value,
            name=product.name,
            description=product.description,
            price=product.price,
        )


ProductResponse = ResultEnvelope[ProductSchema]
