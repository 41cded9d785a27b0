# =============================================================================
# app/routers/brands.py - Brand Profile Endpoints
# =============================================================================
# /me routes are limited to brand accounts; any signed-in user may view a
# brand by its owner's user id.
# =============================================================================

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, Path

from app.auth import AuthUser, get_current_user, require_role
from core.models.brand import BrandProfile, BrandProfileUpdate
from core.models.user import UserRole
from core.services.brand_service import BrandService

router = APIRouter()

brand_only = require_role(UserRole.BRAND)


@router.get("/me", response_model=BrandProfile)
async def get_my_profile(user: AuthUser = Depends(brand_only)):
    """The caller's brand profile."""
    return BrandService.get_for_user(user.id)


@router.put("/me", response_model=BrandProfile)
@router.post("/me", response_model=BrandProfile)
async def save_my_profile(
    request: BrandProfileUpdate,
    user: AuthUser = Depends(brand_only),
):
    """
    Create or update the caller's brand profile.

    company_name, industry and contact_email are required the first time.
    """
    BrandService.upsert_for_user(user.id, request)
    return BrandService.get_for_user(user.id)


@router.delete("/me")
async def delete_my_profile(user: AuthUser = Depends(brand_only)):
    """Delete the caller's brand profile."""
    BrandService.delete_for_user(user.id)
    return {"message": "Brand profile deleted"}


@router.get("/{user_id}", response_model=BrandProfile)
async def get_brand(
    user_id: Annotated[UUID, Path(description="Owning user's UUID")],
    user: AuthUser = Depends(get_current_user),
):
    """Brand profile by owning user id."""
    return BrandService.get_for_user(user_id)
