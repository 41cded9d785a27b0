# =============================================================================
# core/models/influencer.py - Influencer Profile Schemas
# =============================================================================
# - InfluencerProfile: A row of influencer_profiles as returned to clients
# - InfluencerProfileUpdate: Body of PUT/POST /api/influencers/me
# - InfluencerSearchResult: Paginated search response
#
# Categories are stored by name on the profile; unknown names are added to
# the categories table when a profile is saved.
# =============================================================================

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field


SOCIAL_NETWORKS = ("instagram", "youtube", "tiktok", "twitter", "other")


class SocialLinks(BaseModel):
    """Links to the influencer's channels. Missing links are empty strings."""
    instagram: str | None = ""
    youtube: str | None = ""
    tiktok: str | None = ""
    twitter: str | None = ""
    other: str | None = ""


class Pricing(BaseModel):
    """Asking price per deliverable type."""
    post: float | None = Field(default=None, ge=0)
    reel: float | None = Field(default=None, ge=0)
    story: float | None = Field(default=None, ge=0)


class UserSummary(BaseModel):
    """Owning user, embedded in profile responses."""
    id: UUID
    name: str | None = None
    email: str | None = None
    avatar: str | None = None


class InfluencerProfile(BaseModel):
    """
    Influencer profile returned by the API.

    Example:
        {
            "id": "7d0c...",
            "user_id": "550e...",
            "handle": "janecooks",
            "bio": "Weeknight recipes",
            "categories": ["Food"],
            "follower_count": 48000,
            ...
        }
    """
    id: UUID
    user_id: UUID
    handle: str
    bio: str | None = None
    avatar_url: str | None = ""
    categories: list[str] = Field(default_factory=list)
    location: str | None = None
    social_links: SocialLinks = Field(default_factory=SocialLinks)
    follower_count: int = 0
    average_engagement_rate: float = 0
    portfolio: list[str] = Field(default_factory=list)
    tags: list[str] = Field(default_factory=list)
    pricing: Pricing = Field(default_factory=Pricing)
    created_at: datetime | None = None
    user: UserSummary | None = None


class InfluencerProfileUpdate(BaseModel):
    """
    Body for creating or updating the caller's influencer profile.

    Social links are sent as flat fields; a link that is omitted keeps its
    stored value, while an explicit empty string clears it.
    """
    handle: str | None = Field(default=None, min_length=1, max_length=64)
    bio: str | None = None
    categories: list[str] | None = None
    location: str | None = None
    follower_count: int | None = Field(default=None, ge=0)
    average_engagement_rate: float | None = Field(default=None, ge=0)
    pricing: Pricing | None = None
    tags: list[str] | None = None
    portfolio: list[str] | None = None
    avatar_url: str | None = None

    instagram: str | None = None
    youtube: str | None = None
    tiktok: str | None = None
    twitter: str | None = None
    other: str | None = None

class InfluencerSearchResult(BaseModel):
    """Paginated response of GET /api/influencers."""
    total: int = Field(default=0, ge=0)
    page: int = Field(default=1, ge=1)
    limit: int = Field(default=20, ge=1)
    results: list[InfluencerProfile] = Field(default_factory=list)
