"""SQLite product store (embedded backend, aiosqlite driver)."""

from __future__ import annotations

from sqlalchemy.dialects.sqlite import insert

from src.config import STORAGE_SQLITE
from src.models.product import Product
from src.modules.product.storage.sql import SqlProductStore


class SqliteProductStore(SqlProductStore):
    backend = STORAGE_SQLITE

    def _insert(self):
        return insert(Product)

    def _match(self, column, pattern: str):
        # SQLite LIKE is already case-insensitive for ASCII
        return column.like(pattern, escape="\\")
