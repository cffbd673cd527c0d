"""Store factory: pick the product store for the configured backend."""

from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncSession

from src.config import STORAGE_POSTGRES, STORAGE_SQLITE, settings
from src.modules.product.storage.base import ProductStoreBase
from src.modules.product.storage.postgres import PostgresProductStore
from src.modules.product.storage.sqlite import SqliteProductStore

_STORES: dict[str, type[ProductStoreBase]] = {
    STORAGE_POSTGRES: PostgresProductStore,
    STORAGE_SQLITE: SqliteProductStore,
}


def get_store(session: AsyncSession, backend: str | None = None) -> ProductStoreBase:
    backend = backend or settings.resolved_storage_backend
    store_cls = _STORES.get(backend)
    if store_cls is None:
        raise ValueError(f"No product store for backend: {backend}")
    return store_cls(session)
