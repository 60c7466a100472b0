"""Category endpoints."""

from fastapi import APIRouter, Depends, status

from stockroom.api.dependencies import get_categories
from stockroom.application.dto.requests import CreateCategoryRequest
from stockroom.application.dto.responses import CategoryResponse, ErrorResponse
from stockroom.core.services import CategoryService

router = APIRouter(prefix="/api/categories", tags=["categories"])


@router.post(
    "",
    response_model=CategoryResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}, 409: {"model": ErrorResponse}},
)
async def create_category(
    request: CreateCategoryRequest,
    service: CategoryService = Depends(get_categories),
) -> CategoryResponse:
    """Create a new category. Names are unique."""
    category = await service.create_category(request.name)
    return CategoryResponse.from_entity(category)


@router.get("", response_model=list[CategoryResponse])
async def list_categories(
    service: CategoryService = Depends(get_categories),
) -> list[CategoryResponse]:
    """List all categories."""
    categories = await service.list_categories()
    return [CategoryResponse.from_entity(c) for c in categories]


@router.get(
    "/{name}",
    response_model=CategoryResponse,
    responses={404: {"model": ErrorResponse}},
)
async def get_category(
    name: str,
    service: CategoryService = Depends(get_categories),
) -> CategoryResponse:
    """Get a category by name."""
    category = await service.get_category(name)
    return CategoryResponse.from_entity(category)
