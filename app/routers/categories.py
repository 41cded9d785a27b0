# =============================================================================
# app/routers/categories.py - Category Endpoints
# =============================================================================
# Public: GET /api/categories needs no token.
# =============================================================================

from fastapi import APIRouter

from core.models.category import Category
from core.services.category_service import CategoryService

router = APIRouter()


@router.get("", response_model=list[Category])
async def list_categories():
    """All content categories, alphabetically."""
    return CategoryService.list_categories()
