"""Product endpoints."""

from fastapi import APIRouter, Depends, Query, Response, status

from stockroom.api.dependencies import get_app_settings, get_products
from stockroom.application.dto.requests import ProductRequest
from stockroom.application.dto.responses import (
    ErrorResponse,
    InventoryReportResponse,
    ProductListResponse,
    ProductResponse,
)
from stockroom.config import Settings
from stockroom.core.entities.product import ProductFilter
from stockroom.core.services import ProductService

router = APIRouter(prefix="/api/products", tags=["products"])


@router.post(
    "",
    response_model=ProductResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        400: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
        409: {"model": ErrorResponse},
    },
)
async def create_product(
    request: ProductRequest,
    service: ProductService = Depends(get_products),
) -> ProductResponse:
    """Create a product in an existing category."""
    product = await service.create_product(request.to_input())
    return ProductResponse.from_entity(product)


@router.get("", response_model=ProductListResponse)
async def list_products(
    name: str | None = None,
    categories: list[str] | None = Query(default=None),
    in_stock: bool | None = None,
    limit: int | None = Query(default=None, ge=1),
    offset: int = Query(default=0, ge=0),
    service: ProductService = Depends(get_products),
    settings: Settings = Depends(get_app_settings),
) -> ProductListResponse:
    """
    List products, optionally filtered.

    Filters combine with AND: name is a case-insensitive substring,
    categories match any of the given names.
    """
    page_size = min(limit or settings.inventory.default_page_size, settings.inventory.max_page_size)
    criteria = ProductFilter(name=name, category_names=categories, in_stock=in_stock)

    page = await service.list_products(criteria, limit=page_size, offset=offset)
    return ProductListResponse(
        items=[ProductResponse.from_entity(p) for p in page.items],
        total=page.total,
        limit=page_size,
        offset=offset,
    )


# Declared before /{product_id} so "metrics" is not taken as an ID
@router.get("/metrics", response_model=InventoryReportResponse)
async def get_inventory_metrics(
    service: ProductService = Depends(get_products),
) -> InventoryReportResponse:
    """Overall and per-category stock metrics for in-stock products."""
    report = await service.get_inventory_report()
    return InventoryReportResponse.from_entity(report)


@router.get(
    "/{product_id}",
    response_model=ProductResponse,
    responses={404: {"model": ErrorResponse}},
)
async def get_product(
    product_id: str,
    service: ProductService = Depends(get_products),
) -> ProductResponse:
    """Get a product by ID."""
    product = await service.get_product(product_id)
    return ProductResponse.from_entity(product)


@router.put(
    "/{product_id}",
    response_model=ProductResponse,
    responses={
        400: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
        409: {"model": ErrorResponse},
    },
)
async def update_product(
    product_id: str,
    request: ProductRequest,
    service: ProductService = Depends(get_products),
) -> ProductResponse:
    """Replace a product's fields. The path ID identifies the product."""
    product = await service.update_product(request.to_input(product_id))
    return ProductResponse.from_entity(product)


@router.delete(
    "/{product_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses={404: {"model": ErrorResponse}},
)
async def delete_product(
    product_id: str,
    service: ProductService = Depends(get_products),
) -> Response:
    """Delete a product."""
    await service.delete_product(product_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.put(
    "/{product_id}/instock",
    status_code=status.HTTP_204_NO_CONTENT,
    responses={404: {"model": ErrorResponse}},
)
async def mark_in_stock(
    product_id: str,
    service: ProductService = Depends(get_products),
) -> Response:
    """Mark a product in stock, resetting its quantity to the restock amount."""
    await service.set_stock(product_id, True)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.put(
    "/{product_id}/outofstock",
    status_code=status.HTTP_204_NO_CONTENT,
    responses={404: {"model": ErrorResponse}},
)
async def mark_out_of_stock(
    product_id: str,
    service: ProductService = Depends(get_products),
) -> Response:
    """Mark a product out of stock."""
    await service.set_stock(product_id, False)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
