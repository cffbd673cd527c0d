"""Centralized v1 API router; every module router is included here."""

from datetime import datetime, timezone

from fastapi import APIRouter, Depends

from src.modules.product.dependencies import get_product_service
from src.modules.product.router import product_router
from src.modules.product.schemas import HealthResponse
from src.modules.product.service import ProductService

v1_router = APIRouter(prefix="/api/v1")
v1_router.include_router(product_router)


@v1_router.get("/health", response_model=HealthResponse, tags=["health"])
async def health_check(svc: ProductService = Depends(get_product_service)) -> HealthResponse:
    healthy = await svc.health_check()
    return HealthResponse(
        status="ok" if healthy else "degraded",
        storage=svc.backend,
        timestamp=datetime.now(timezone.utc),
    )
