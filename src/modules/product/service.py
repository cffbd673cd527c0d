"""Product service: code allocation with commit-time retry, and product CRUD."""

from __future__ import annotations

import logging

from src.exceptions import CodeConflictException, NotFoundException
from src.models.product import Product
from src.modules.product.allocator import RandomSource, allocate
from src.modules.product.constants import (
    DEFAULT_COMMIT_ATTEMPTS,
    DEFAULT_MAX_ATTEMPTS,
    DEFAULT_SPACE_SIZE,
)
from src.modules.product.schemas import ProductCreate
from src.modules.product.storage.base import ProductRecord, ProductStoreBase

logger = logging.getLogger(__name__)


class ProductService:
    def __init__(
        self,
        store: ProductStoreBase,
        *,
        max_attempts: int = DEFAULT_MAX_ATTEMPTS,
        space_size: int = DEFAULT_SPACE_SIZE,
        commit_attempts: int = DEFAULT_COMMIT_ATTEMPTS,
        rng: RandomSource | None = None,
    ) -> None:
        if commit_attempts < 1:
            raise ValueError(f"commit_attempts must be positive, got {commit_attempts}")
        self._store = store
        self._max_attempts = max_attempts
        self._space_size = space_size
        self._commit_attempts = commit_attempts
        self._rng = rng

    # ------------------------------------------------------------------
    # Create
    # ------------------------------------------------------------------

    async def create_product(self, data: ProductCreate) -> Product:
        """Allocate a free code and commit the product under it.

        A conflict on commit means another writer took the code after we read
        the code set; re-read and allocate again, up to ``commit_attempts``.
        AllocationExhaustedException is not retried.
        """
        for attempt in range(1, self._commit_attempts + 1):
            existing = await self._store.existing_codes()
            code = allocate(
                existing,
                max_attempts=self._max_attempts,
                space_size=self._space_size,
                rng=self._rng,
            )
            product = await self._store.insert_if_absent(
                ProductRecord(
                    product_code=code,
                    link=data.link,
                    rmb_price=data.rmb_price,
                    weight=data.weight,
                    selling_price=data.selling_price,
                )
            )
            if product is not None:
                logger.info("Created product %s (id=%s)", product.product_code, product.id)
                return product

            logger.warning(
                "Product code %s taken at commit, retrying (attempt %d/%d)",
                code, attempt, self._commit_attempts,
            )

        raise CodeConflictException(
            f"Unable to commit a unique product code after {self._commit_attempts} attempts"
        )

    # ------------------------------------------------------------------
    # Read / delete
    # ------------------------------------------------------------------

    async def get_product(self, code: str) -> Product:
        product = await self._store.get_by_code(code)
        if product is None:
            raise NotFoundException(f"Product '{code}' not found")
        return product

    async def list_products(
        self,
        search: str | None = None,
        limit: int = 50,
        offset: int = 0,
    ) -> tuple[list[Product], int]:
        return await self._store.list_products(search=search, limit=limit, offset=offset)

    async def search_products(self, query: str) -> list[Product]:
        return await self._store.search(query)

    async def delete_product(self, code: str) -> None:
        deleted = await self._store.delete_by_code(code)
        if not deleted:
            raise NotFoundException(f"Product '{code}' not found")
        logger.info("Deleted product %s", code)

    async def health_check(self) -> bool:
        return await self._store.health_check()

    @property
    def backend(self) -> str:
        return self._store.backend
