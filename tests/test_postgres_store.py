"""Statement tests for the PostgreSQL product store.

The store is driven with a mocked session and the captured statements are
compiled against the PostgreSQL dialect.
"""

from __future__ import annotations

from decimal import Decimal
from unittest.mock import AsyncMock, MagicMock

import pytest
from sqlalchemy.dialects import postgresql

from src.modules.product.storage.base import ProductRecord
from src.modules.product.storage.postgres import PostgresProductStore


def _sql(stmt) -> str:
    return str(stmt.compile(dialect=postgresql.dialect()))


@pytest.fixture
def mock_session():
    session = AsyncMock()
    scalar_result = MagicMock()
    scalar_result.first.return_value = None
    session.scalars.return_value = scalar_result

    execute_result = MagicMock()
    execute_result.scalars.return_value.all.return_value = []
    execute_result.scalar.return_value = 0
    session.execute.return_value = execute_result
    return session


@pytest.fixture
def store(mock_session):
    return PostgresProductStore(mock_session)


class TestInsertIfAbsent:
    @pytest.mark.asyncio
    async def test_uses_on_conflict_do_nothing_returning(self, store, mock_session):
        result = await store.insert_if_absent(
            ProductRecord(
                product_code="#LT123",
                link="https://item.taobao.com/1",
                rmb_price=Decimal("9.90"),
                weight=Decimal("0.100"),
                selling_price=Decimal("250.00"),
            )
        )

        assert result is None
        sql = _sql(mock_session.scalars.await_args.args[0])
        assert sql.startswith("INSERT INTO products")
        assert "ON CONFLICT (product_code) DO NOTHING" in sql
        assert "RETURNING" in sql


class TestSearch:
    @pytest.mark.asyncio
    async def test_search_uses_escaped_ilike(self, store, mock_session):
        products = await store.search("taobao")

        assert products == []
        sql = _sql(mock_session.execute.await_args.args[0])
        assert "products.product_code ILIKE" in sql
        assert "products.link ILIKE" in sql
        assert "ESCAPE" in sql
        assert "ORDER BY products.created_at DESC, products.id DESC" in sql

    @pytest.mark.asyncio
    async def test_list_search_filters_count_and_page(self, store, mock_session):
        products, total = await store.list_products(search="1688", limit=5, offset=10)

        assert products == []
        assert total == 0
        count_stmt, page_stmt = (call.args[0] for call in mock_session.execute.await_args_list)
        assert "ILIKE" in _sql(count_stmt)
        page_sql = _sql(page_stmt)
        assert "ILIKE" in page_sql
        assert "LIMIT" in page_sql
        assert "OFFSET" in page_sql
