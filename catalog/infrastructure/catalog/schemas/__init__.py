from .product_schemas import ProductCreateRequest, ProductResponse, ProductSchema

__all__ = ["ProductCreateRequest", "ProductResponse", "ProductSchema"]
