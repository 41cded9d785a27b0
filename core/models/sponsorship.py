# =============================================================================
# core/models/sponsorship.py - Sponsorship Schemas
# =============================================================================
# These models define the API contract for sponsorship offers:
# - SponsorshipCreate: Input for POST /api/sponsorships (brands only)
# - SponsorshipResponse: Offer with both parties resolved for display
# - SponsorshipStatus: Lifecycle states and the moves allowed between them
#
# A sponsorship is an offer from one brand to one influencer.
# =============================================================================

from datetime import datetime
from enum import Enum
from uuid import UUID

from pydantic import BaseModel, Field


class SponsorshipStatus(str, Enum):
    """
    Lifecycle of a sponsorship.

    - pending: Created by a brand, waiting for the influencer
    - accepted: Influencer agreed; work in progress
    - rejected: Influencer declined
    - completed: Brand marked the work as delivered
    - cancelled: Brand withdrew the offer

    Flow: pending -> accepted -> completed
          pending -> rejected | cancelled
          accepted -> cancelled
    """
    PENDING = "pending"
    ACCEPTED = "accepted"
    REJECTED = "rejected"
    COMPLETED = "completed"
    CANCELLED = "cancelled"

    def can_transition_to(self, target: "SponsorshipStatus") -> bool:
        return target in ALLOWED_TRANSITIONS.get(self, frozenset())

    @property
    def is_terminal(self) -> bool:
        return not ALLOWED_TRANSITIONS.get(self)


ALLOWED_TRANSITIONS: dict[SponsorshipStatus, frozenset[SponsorshipStatus]] = {
    SponsorshipStatus.PENDING: frozenset({
        SponsorshipStatus.ACCEPTED,
        SponsorshipStatus.REJECTED,
        SponsorshipStatus.CANCELLED,
    }),
    SponsorshipStatus.ACCEPTED: frozenset({
        SponsorshipStatus.COMPLETED,
        SponsorshipStatus.CANCELLED,
    }),
}


class SponsorshipCreate(BaseModel):
    """
    Schema for creating a sponsorship offer.

    The brand is taken from the authenticated user, never from the body.

    Example:
        {
            "influencer_id": "7d0c...",
            "title": "Spring launch",
            "description": "Two reels featuring the new line",
            "budget": 1500,
            "deliverables": ["2 reels", "1 story"]
        }
    """

    influencer_id: UUID = Field(
        ...,
        description="Influencer profile id (user id is also accepted)"
    )
    title: str = Field(..., min_length=1, max_length=255)
    description: str | None = Field(default=None, max_length=5000)
    budget: float = Field(..., ge=0, description="Offered amount")
    deliverables: list[str] = Field(default_factory=list)


class BrandSummary(BaseModel):
    """Brand side of a sponsorship, resolved for display."""
    id: UUID | None = None
    user_id: UUID | None = None
    name: str = "Unknown Brand"
    logo_url: str | None = None


class InfluencerSummary(BaseModel):
    """Influencer side of a sponsorship, resolved for display."""
    id: UUID | None = None
    user_id: UUID | None = None
    handle: str | None = None
    name: str | None = None
    avatar_url: str | None = None


class SponsorshipResponse(BaseModel):
    """
    Sponsorship returned to clients.

    brand_id and influencer_id are the owning *user* ids; the embedded
    summaries carry display names.
    """
    id: UUID
    brand_id: UUID
    influencer_id: UUID
    title: str
    description: str | None = None
    budget: float = 0
    deliverables: list[str] = Field(default_factory=list)
    status: SponsorshipStatus = SponsorshipStatus.PENDING
    created_at: datetime | None = None
    updated_at: datetime | None = None
    brand: BrandSummary | None = None
    influencer: InfluencerSummary | None = None
