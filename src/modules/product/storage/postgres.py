"""PostgreSQL product store (networked relational backend, asyncpg driver)."""

from __future__ import annotations

from sqlalchemy.dialects.postgresql import insert

from src.config import STORAGE_POSTGRES
from src.models.product import Product
from src.modules.product.storage.sql import SqlProductStore


class PostgresProductStore(SqlProductStore):
    backend = STORAGE_POSTGRES

    def _insert(self):
        return insert(Product)

    def _match(self, column, pattern: str):
        return column.ilike(pattern, escape="\\")
