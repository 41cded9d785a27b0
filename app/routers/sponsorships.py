# =============================================================================
# app/routers/sponsorships.py - Sponsorship Endpoints
# =============================================================================
# All endpoints require authentication.
#
#   POST  /api/sponsorships               Brand creates an offer (201)
#   GET   /api/sponsorships/my            Offers received (influencer)
#   GET   /api/sponsorships/brand/my      Offers sent (brand)
#   GET   /api/sponsorships/open          All pending offers
#   GET   /api/sponsorships/activities    Caller's most recently updated offers
#   GET   /api/sponsorships/{id}          One offer (its brand or influencer only)
#   PATCH /api/sponsorships/{id}/accept   Influencer accepts
#   PATCH /api/sponsorships/{id}/reject   Influencer rejects
#   PUT   /api/sponsorships/{id}/cancel   Brand cancels
#   PUT   /api/sponsorships/{id}/complete Brand marks delivered
# =============================================================================

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, Path, status

from app.auth import AuthUser, get_current_user, require_role
from app.config import settings
from core.models.sponsorship import SponsorshipCreate, SponsorshipResponse
from core.models.user import UserRole
from core.services.sponsorship_service import SponsorshipService

router = APIRouter()

SponsorshipId = Annotated[UUID, Path(description="Sponsorship UUID")]


# =============================================================================
# Create
# =============================================================================

@router.post("", response_model=SponsorshipResponse, status_code=status.HTTP_201_CREATED)
async def create_sponsorship(
    request: SponsorshipCreate,
    user: AuthUser = Depends(require_role(UserRole.BRAND)),
):
    """
    Send a sponsorship offer to an influencer.

    The brand must have a brand profile. The influencer is notified in
    real time.
    """
    return SponsorshipService.create(user.id, request)


# =============================================================================
# Lists
# =============================================================================

@router.get("/my", response_model=list[SponsorshipResponse])
async def list_received(user: AuthUser = Depends(get_current_user)):
    """Offers the caller received as an influencer, newest first."""
    return SponsorshipService.list_for_influencer(user.id)


@router.get("/brand/my", response_model=list[SponsorshipResponse])
async def list_sent(user: AuthUser = Depends(get_current_user)):
    """Offers the caller sent as a brand, newest first."""
    return SponsorshipService.list_for_brand(user.id)


@router.get("/open", response_model=list[SponsorshipResponse])
async def list_open(user: AuthUser = Depends(get_current_user)):
    """All pending offers, newest first."""
    return SponsorshipService.list_open()


@router.get("/activities", response_model=list[SponsorshipResponse])
async def recent_activities(user: AuthUser = Depends(get_current_user)):
    """The caller's most recently updated sponsorships."""
    return SponsorshipService.recent_activity(user.id, limit=settings.ACTIVITY_LIMIT)


# =============================================================================
# Single Sponsorship
# =============================================================================

@router.get("/{sponsorship_id}", response_model=SponsorshipResponse)
async def get_sponsorship(
    sponsorship_id: SponsorshipId,
    user: AuthUser = Depends(get_current_user),
):
    """One sponsorship; only its brand or influencer may view it."""
    return SponsorshipService.get_for_party(sponsorship_id, user.id, user.role)


@router.patch("/{sponsorship_id}/accept", response_model=SponsorshipResponse)
async def accept_sponsorship(
    sponsorship_id: SponsorshipId,
    user: AuthUser = Depends(get_current_user),
):
    """Accept a pending offer. Only its influencer may do this."""
    return SponsorshipService.accept(sponsorship_id, user.id)


@router.patch("/{sponsorship_id}/reject", response_model=SponsorshipResponse)
async def reject_sponsorship(
    sponsorship_id: SponsorshipId,
    user: AuthUser = Depends(get_current_user),
):
    """Reject a pending offer. Only its influencer may do this."""
    return SponsorshipService.reject(sponsorship_id, user.id)


@router.put("/{sponsorship_id}/cancel", response_model=SponsorshipResponse)
async def cancel_sponsorship(
    sponsorship_id: SponsorshipId,
    user: AuthUser = Depends(get_current_user),
):
    """Withdraw a pending or accepted offer. Only its brand may do this."""
    return SponsorshipService.cancel(sponsorship_id, user.id)


@router.put("/{sponsorship_id}/complete", response_model=SponsorshipResponse)
async def complete_sponsorship(
    sponsorship_id: SponsorshipId,
    user: AuthUser = Depends(get_current_user),
):
    """Mark an accepted offer as delivered. Only its brand may do this."""
    return SponsorshipService.complete(sponsorship_id, user.id)
