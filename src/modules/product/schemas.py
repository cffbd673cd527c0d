"""Pydantic request/response schemas for the product module."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field


# ---------------------------------------------------------------------------
# Product
# ---------------------------------------------------------------------------

class ProductCreate(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    link: str = Field(..., min_length=1, max_length=2000)
    rmb_price: Decimal = Field(..., alias="rmbPrice", gt=0, max_digits=10, decimal_places=2)
    weight: Decimal = Field(..., gt=0, max_digits=10, decimal_places=3, description="Weight in kg")
    selling_price: Decimal = Field(
        ..., alias="sellingPrice", gt=0, max_digits=10, decimal_places=2,
        description="Selling price in BDT",
    )


class ProductResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    product_code: str
    link: str
    rmb_price: Decimal
    weight: Decimal
    selling_price: Decimal
    created_at: datetime


class ProductCreatedResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    success: bool = True
    product_code: str = Field(alias="productCode")
    id: int
    message: str = "Product saved successfully"


class ProductListResponse(BaseModel):
    items: list[ProductResponse]
    total: int
    limit: int
    offset: int


# ---------------------------------------------------------------------------
# Health
# ---------------------------------------------------------------------------

class HealthResponse(BaseModel):
    status: str
    storage: str
    timestamp: datetime
