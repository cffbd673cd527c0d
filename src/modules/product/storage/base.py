"""Abstract storage collaborator for product records."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from decimal import Decimal

from src.models.product import Product


@dataclass(frozen=True)
class ProductRecord:
    """A product ready to be committed under an allocated code."""

    product_code: str
    link: str
    rmb_price: Decimal
    weight: Decimal
    selling_price: Decimal


class ProductStoreBase(ABC):
    backend: str = ""

    @abstractmethod
    async def existing_codes(self) -> set[str]:
        """Return a snapshot of every product code currently in use."""

    @abstractmethod
    async def contains(self, code: str) -> bool:
        """Return True if a live product already carries ``code``."""

    @abstractmethod
    async def insert_if_absent(self, record: ProductRecord) -> Product | None:
        """Insert ``record`` unless its code is taken.

        Returns the committed product, or None when the unique constraint
        rejected the code (a concurrent writer got there first).
        """

    @abstractmethod
    async def get_by_code(self, code: str) -> Product | None:
        """Return the product with ``code``, or None."""

    @abstractmethod
    async def list_products(
        self, search: str | None = None, limit: int = 50, offset: int = 0,
    ) -> tuple[list[Product], int]:
        """Return one page of products, newest first, and the total count."""

    @abstractmethod
    async def search(self, query: str) -> list[Product]:
        """Return products whose code or link contains ``query``, newest first."""

    @abstractmethod
    async def delete_by_code(self, code: str) -> bool:
        """Delete the product with ``code``; False if nothing matched."""

    @abstractmethod
    async def health_check(self) -> bool:
        """Return True if the backing database answers."""
