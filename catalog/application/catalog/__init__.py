"""Product catalog requests and their handlers."""

from .commands.create_product import CreateProductCommand, CreateProductHandler
from .dtos import ProductInput
from .queries.get_product_by_id import GetProductByIdHandler, GetProductByIdQuery

# Every request type the HTTP layer sends; checked against the dispatcher at startup
CATALOG_REQUESTS: tuple[type, ...] = (CreateProductCommand, GetProductByIdQuery)

__all__ = [
    "CATALOG_REQUESTS",
    "CreateProductCommand",
    "CreateProductHandler",
    "GetProductByIdHandler",
    "GetProductByIdQuery",
    "ProductInput",
]
