# =============================================================================
# core/models/ - Pydantic Data Models
# =============================================================================
# This package contains Pydantic schemas for data validation:
# - user.py: Accounts, registration and login schemas
# - influencer.py: Influencer profiles and search results
# - brand.py: Brand profiles
# - sponsorship.py: Sponsorship offers and their status lifecycle
# - category.py: Content categories
# - analytics.py: Dashboard counts
#
# These models define the "contract" between API and clients.
# =============================================================================

# -----------------------------------------------------------------------------
# User Models - Accounts and auth payloads
# -----------------------------------------------------------------------------
from .user import (
    AuthResponse,
    LoginRequest,
    RegisterRequest,
    UserResponse,
    UserRole,
    UserUpdate,
)

# -----------------------------------------------------------------------------
# Profile Models - Influencers and brands
# -----------------------------------------------------------------------------
from .influencer import (
    InfluencerProfile,
    InfluencerProfileUpdate,
    InfluencerSearchResult,
    Pricing,
    SocialLinks,
    UserSummary,
)
from .brand import (
    BrandProfile,
    BrandProfileUpdate,
    BrandSocialLinks,
    BrandSocialLinksUpdate,
    REQUIRED_BRAND_FIELDS,
)

# -----------------------------------------------------------------------------
# Sponsorship Models - Offers between brands and influencers
# -----------------------------------------------------------------------------
from .sponsorship import (
    ALLOWED_TRANSITIONS,
    BrandSummary,
    InfluencerSummary,
    SponsorshipCreate,
    SponsorshipResponse,
    SponsorshipStatus,
)

# -----------------------------------------------------------------------------
# Lookup & Analytics Models
# -----------------------------------------------------------------------------
from .category import Category
from .analytics import AnalyticsOverview

__all__ = [
    # User
    "AuthResponse",
    "LoginRequest",
    "RegisterRequest",
    "UserResponse",
    "UserRole",
    "UserUpdate",
    # Influencer
    "InfluencerProfile",
    "InfluencerProfileUpdate",
    "InfluencerSearchResult",
    "Pricing",
    "SocialLinks",
    "UserSummary",
    # Brand
    "BrandProfile",
    "BrandProfileUpdate",
    "BrandSocialLinks",
    "BrandSocialLinksUpdate",
    "REQUIRED_BRAND_FIELDS",
    # Sponsorship
    "ALLOWED_TRANSITIONS",
    "BrandSummary",
    "InfluencerSummary",
    "SponsorshipCreate",
    "SponsorshipResponse",
    "SponsorshipStatus",
    # Lookups
    "Category",
    "AnalyticsOverview",
]
