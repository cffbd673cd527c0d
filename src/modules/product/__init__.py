"""Product module: product code allocation, storage backends, and product CRUD."""

from src.modules.product.allocator import allocate, format_product_code
from src.modules.product.service import ProductService

__all__ = [
    "ProductService",
    "allocate",
    "format_product_code",
]
