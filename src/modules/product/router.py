"""Product module API router."""

from fastapi import APIRouter, Depends, Path, Query, Request

from src.app import limiter
from src.exceptions import ValidationException
from src.modules.product.allocator import is_product_code
from src.modules.product.constants import DEFAULT_PAGE_LIMIT, MAX_PAGE_LIMIT
from src.modules.product.dependencies import get_product_service
from src.modules.product.schemas import (
    ProductCreate,
    ProductCreatedResponse,
    ProductListResponse,
    ProductResponse,
)
from src.modules.product.service import ProductService
from src.schemas.responses import ERROR_RESPONSES

product_router = APIRouter(prefix="/products", tags=["products"], responses=ERROR_RESPONSES)


def _require_code(code: str) -> str:
    code = code.strip()
    if not is_product_code(code):
        raise ValidationException(
            f"Invalid product code: {code}",
            details=[{"field": "code", "message": "expected #LT followed by 3 digits"}],
        )
    return code


@product_router.post("", response_model=ProductCreatedResponse, status_code=201)
@limiter.limit("30/minute")
async def create_product(
    request: Request,
    data: ProductCreate,
    svc: ProductService = Depends(get_product_service),
) -> ProductCreatedResponse:
    product = await svc.create_product(data)
    return ProductCreatedResponse(product_code=product.product_code, id=product.id)


@product_router.get("", response_model=ProductListResponse)
@limiter.limit("60/minute")
async def list_products(
    request: Request,
    search: str | None = None,
    limit: int = Query(DEFAULT_PAGE_LIMIT, ge=1, le=MAX_PAGE_LIMIT),
    offset: int = Query(0, ge=0),
    svc: ProductService = Depends(get_product_service),
) -> ProductListResponse:
    products, total = await svc.list_products(search=search, limit=limit, offset=offset)
    return ProductListResponse(
        items=[ProductResponse.model_validate(p) for p in products],
        total=total,
        limit=limit,
        offset=offset,
    )


# Static routes BEFORE /{code} to avoid shadowing
@product_router.get("/search/{query}", response_model=list[ProductResponse])
@limiter.limit("60/minute")
async def search_products(
    request: Request,
    query: str = Path(..., min_length=1, max_length=200),
    svc: ProductService = Depends(get_product_service),
) -> list[ProductResponse]:
    products = await svc.search_products(query)
    return [ProductResponse.model_validate(p) for p in products]


@product_router.get("/{code}", response_model=ProductResponse)
@limiter.limit("60/minute")
async def get_product(
    request: Request,
    code: str,
    svc: ProductService = Depends(get_product_service),
) -> ProductResponse:
    product = await svc.get_product(_require_code(code))
    return ProductResponse.model_validate(product)


@product_router.delete("/{code}", status_code=204)
@limiter.limit("30/minute")
async def delete_product(
    request: Request,
    code: str,
    svc: ProductService = Depends(get_product_service),
) -> None:
    await svc.delete_product(_require_code(code))
