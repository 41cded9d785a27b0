# =============================================================================
# core/models/brand.py - Brand Profile Schemas
# =============================================================================

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field

from .influencer import UserSummary

# Fields a brand profile can't be created without
REQUIRED_BRAND_FIELDS = ("company_name", "industry", "contact_email")


class BrandSocialLinks(BaseModel):
    instagram: str | None = ""
    twitter: str | None = ""
    linkedin: str | None = ""


class BrandProfile(BaseModel):
    """Brand profile returned by the API."""
    id: UUID
    user_id: UUID
    company_name: str
    industry: str
    description: str | None = None
    logo_url: str | None = ""
    website: str | None = None
    social_links: BrandSocialLinks = Field(default_factory=BrandSocialLinks)
    budget_per_post: float | None = None
    contact_email: str
    created_at: datetime | None = None
    updated_at: datetime | None = None
    user: UserSummary | None = None


class BrandSocialLinksUpdate(BaseModel):
    """Links to change; omitted networks keep their stored value."""
    instagram: str | None = None
    twitter: str | None = None
    linkedin: str | None = None


class BrandProfileUpdate(BaseModel):
    """
    Body of PUT/POST /api/brands/me.

    company_name, industry and contact_email are required the first time a
    profile is saved; afterwards every field is optional.
    """
    company_name: str | None = Field(default=None, min_length=1, max_length=255)
    industry: str | None = Field(default=None, min_length=1, max_length=255)
    contact_email: str | None = Field(default=None, min_length=3, max_length=320)
    description: str | None = None
    logo_url: str | None = None
    website: str | None = None
    social_links: BrandSocialLinksUpdate | None = None
    budget_per_post: float | None = Field(default=None, ge=0)
