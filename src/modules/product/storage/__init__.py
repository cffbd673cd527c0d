"""Storage collaborators for product records."""

from src.modules.product.storage.base import ProductRecord, ProductStoreBase
from src.modules.product.storage.factory import get_store
from src.modules.product.storage.postgres import PostgresProductStore
from src.modules.product.storage.sqlite import SqliteProductStore

__all__ = [
    "PostgresProductStore",
    "ProductRecord",
    "ProductStoreBase",
    "SqliteProductStore",
    "get_store",
]
