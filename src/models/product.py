from __future__ import annotations

from decimal import Decimal

from sqlalchemy import Index, Integer, Numeric, String, Text, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from src.database.base import Base, TimestampMixin

PRODUCT_CODE_CONSTRAINT = "products_product_code_key"


class Product(TimestampMixin, Base):
    __tablename__ = "products"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    product_code: Mapped[str] = mapped_column(String(50), nullable=False)
    link: Mapped[str] = mapped_column(Text, nullable=False)
    rmb_price: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)
    weight: Mapped[Decimal] = mapped_column(Numeric(10, 3), nullable=False)
    selling_price: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)

    __table_args__ = (
        # Authoritative guard against two live records sharing a code
        UniqueConstraint("product_code", name=PRODUCT_CODE_CONSTRAINT),
        Index("ix_products_created_at", "created_at"),
    )
