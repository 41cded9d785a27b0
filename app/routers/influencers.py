# =============================================================================
# app/routers/influencers.py - Influencer Profile Endpoints
# =============================================================================
# Public:
#   GET /api/influencers                 Search
#   GET /api/influencers/handle/{handle} Profile by handle
#   GET /api/influencers/{id}            Profile by id
# Authenticated (influencer accounts):
#   GET /api/influencers/me
#   PUT|POST /api/influencers/me         Create or update own profile
#
# /me routes are declared before /{id} so "me" never reaches the id route.
# =============================================================================

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, Path, Query

from app.auth import AuthUser, get_current_user, require_role
from app.config import settings
from core.models.influencer import (
    InfluencerProfile,
    InfluencerProfileUpdate,
    InfluencerSearchResult,
)
from core.models.user import UserRole
from core.services.influencer_service import DEFAULT_SORT, InfluencerService
from lib.utils import split_csv

router = APIRouter()


# =============================================================================
# Search
# =============================================================================

@router.get("", response_model=InfluencerSearchResult)
async def search_influencers(
    q: Annotated[str | None, Query(description="Text matched against handle, bio and tags")] = None,
    categories: Annotated[str | None, Query(description="Comma-separated category names")] = None,
    tags: Annotated[str | None, Query(description="Comma-separated tags")] = None,
    min_followers: Annotated[int | None, Query(ge=0)] = None,
    max_followers: Annotated[int | None, Query(ge=0)] = None,
    page: Annotated[int, Query(ge=1, description="Page number")] = 1,
    limit: Annotated[int | None, Query(ge=1, le=100, description="Items per page")] = None,
    sort: Annotated[str, Query(description="Sort field; prefix '-' for descending")] = DEFAULT_SORT,
):
    """
    Search influencer profiles.

    Filters combine with AND; list filters match any of the given values.
    """
    return InfluencerService.search(
        q=q,
        categories=split_csv(categories),
        tags=split_csv(tags),
        min_followers=min_followers,
        max_followers=max_followers,
        page=page,
        limit=limit or settings.SEARCH_DEFAULT_LIMIT,
        sort=sort,
    )


# =============================================================================
# Own Profile
# =============================================================================

@router.get("/me", response_model=InfluencerProfile)
async def get_my_profile(user: AuthUser = Depends(get_current_user)):
    """The caller's influencer profile."""
    return InfluencerService.get_for_user(user.id)


@router.put("/me", response_model=InfluencerProfile)
@router.post("/me", response_model=InfluencerProfile)
async def save_my_profile(
    request: InfluencerProfileUpdate,
    user: AuthUser = Depends(require_role(UserRole.INFLUENCER)),
):
    """
    Create or update the caller's influencer profile.

    A handle is required the first time. Social links that are left out keep
    their stored value.
    """
    InfluencerService.upsert_for_user(user.id, request)
    return InfluencerService.get_for_user(user.id)


# =============================================================================
# Public Profiles
# =============================================================================

@router.get("/handle/{handle}", response_model=InfluencerProfile)
async def get_profile_by_handle(
    handle: Annotated[str, Path(min_length=1, description="Influencer handle")],
):
    """Influencer profile by handle."""
    return InfluencerService.get_by_handle(handle)


@router.get("/{profile_id}", response_model=InfluencerProfile)
async def get_profile(
    profile_id: Annotated[UUID, Path(description="Influencer profile UUID")],
):
    """Influencer profile by id."""
    return InfluencerService.get_by_id(profile_id)
