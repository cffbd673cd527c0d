"""FastAPI dependency functions for the product store and service."""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from src.config import settings
from src.database.session import get_db
from src.modules.product.service import ProductService
from src.modules.product.storage import ProductStoreBase, get_store


def get_product_store(db: AsyncSession = Depends(get_db)) -> ProductStoreBase:
    """Bind the configured store implementation to the request session."""
    return get_store(db, settings.resolved_storage_backend)


def get_product_service(
    store: ProductStoreBase = Depends(get_product_store),
) -> ProductService:
    return ProductService(
        store,
        max_attempts=settings.product_code_max_attempts,
        space_size=settings.product_code_space_size,
        commit_attempts=settings.product_code_commit_attempts,
    )
