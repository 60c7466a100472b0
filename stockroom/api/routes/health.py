"""
Health check endpoints.
"""

import time

from fastapi import APIRouter, Depends

from stockroom.api.dependencies import get_app_settings
from stockroom.application.dto.responses import HealthResponse, StoreHealthResponse
from stockroom.config import Settings

router = APIRouter(prefix="/api/health", tags=["health"])

# Track startup time
_start_time = time.time()


@router.get("", response_model=HealthResponse)
async def health_check(settings: Settings = Depends(get_app_settings)) -> HealthResponse:
    """
    Storage health check.

    Counts categories and products through the configured store and
    reports the round-trip latency.
    """
    from stockroom.infrastructure.storage import get_category_store, get_product_store

    backend = settings.storage.backend
    store_status = StoreHealthResponse(backend=backend, available=False)

    try:
        start = time.time()
        category_store = await get_category_store()
        product_store = await get_product_store()
        categories = len(await category_store.list_categories())
        products = await product_store.count_products()
        latency = (time.time() - start) * 1000

        store_status = StoreHealthResponse(
            backend=backend,
            available=True,
            latency_ms=latency,
            categories=categories,
            products=products,
        )

    except Exception as e:
        store_status = StoreHealthResponse(
            backend=backend,
            available=False,
            error=str(e),
        )

    return HealthResponse(
        status="healthy" if store_status.available else "unhealthy",
        version=settings.app_version,
        uptime_seconds=time.time() - _start_time,
        storage=store_status,
    )
