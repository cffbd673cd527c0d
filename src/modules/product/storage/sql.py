"""Shared SQLAlchemy implementation of the product store.

Dialect subclasses supply the ON CONFLICT insert construct and the
substring match operator.
"""

from __future__ import annotations

import logging
import re
from abc import abstractmethod
from dataclasses import asdict

from sqlalchemy import ColumnElement, delete, func, select, text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.sql.expression import Select

from src.models.product import Product
from src.modules.product.storage.base import ProductRecord, ProductStoreBase

logger = logging.getLogger(__name__)


def _like_pattern(query: str) -> str:
    escaped = re.sub(r"([%_\\])", r"\\\1", query)
    return f"%{escaped}%"


class SqlProductStore(ProductStoreBase):
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    @abstractmethod
    def _insert(self):
        """Return the dialect's ``insert(Product)`` supporting ON CONFLICT."""

    @abstractmethod
    def _match(self, column, pattern: str) -> ColumnElement[bool]:
        """Case-insensitive LIKE of ``column`` against an escaped pattern."""

    def _search_filter(self, query: str) -> ColumnElement[bool]:
        pattern = _like_pattern(query)
        return self._match(Product.product_code, pattern) | self._match(Product.link, pattern)

    @staticmethod
    def _newest_first(stmt: Select) -> Select:
        return stmt.order_by(Product.created_at.desc(), Product.id.desc())

    async def existing_codes(self) -> set[str]:
        result = await self._session.execute(select(Product.product_code))
        return set(result.scalars().all())

    async def contains(self, code: str) -> bool:
        result = await self._session.execute(
            select(Product.id).where(Product.product_code == code)
        )
        return result.scalar_one_or_none() is not None

    async def insert_if_absent(self, record: ProductRecord) -> Product | None:
        stmt = (
            self._insert()
            .values(**asdict(record))
            .on_conflict_do_nothing(index_elements=[Product.product_code])
            .returning(Product)
        )
        result = await self._session.scalars(
            stmt, execution_options={"populate_existing": True}
        )
        product = result.first()
        if product is None:
            logger.info("Insert of %s rejected by unique constraint", record.product_code)
        return product

    async def get_by_code(self, code: str) -> Product | None:
        result = await self._session.execute(
            select(Product).where(Product.product_code == code)
        )
        return result.scalar_one_or_none()

    async def list_products(
        self, search: str | None = None, limit: int = 50, offset: int = 0,
    ) -> tuple[list[Product], int]:
        stmt = select(Product)
        count_stmt = select(func.count()).select_from(Product)

        if search:
            search_filter = self._search_filter(search)
            stmt = stmt.where(search_filter)
            count_stmt = count_stmt.where(search_filter)

        total_result = await self._session.execute(count_stmt)
        total = total_result.scalar() or 0

        stmt = self._newest_first(stmt).limit(limit).offset(offset)
        result = await self._session.execute(stmt)
        return list(result.scalars().all()), total

    async def search(self, query: str) -> list[Product]:
        stmt = self._newest_first(select(Product).where(self._search_filter(query)))
        result = await self._session.execute(stmt)
        return list(result.scalars().all())

    async def delete_by_code(self, code: str) -> bool:
        result = await self._session.execute(
            delete(Product).where(Product.product_code == code)
        )
        return result.rowcount > 0

    async def health_check(self) -> bool:
        try:
            await self._session.execute(text("SELECT 1"))
        except SQLAlchemyError as exc:
            logger.error("%s store health check failed: %s", self.backend, exc)
            return False
        return True
