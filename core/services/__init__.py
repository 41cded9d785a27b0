# =============================================================================
# core/services/__init__.py - Service Layer Exports
# =============================================================================

from .user_service import UserService
from .auth_service import AuthService
from .category_service import CategoryService
from .influencer_service import InfluencerService
from .brand_service import BrandService, brand_display_name
from .sponsorship_service import SponsorshipService
from .analytics_service import AnalyticsService

__all__ = [
    "UserService",
    "AuthService",
    "CategoryService",
    "InfluencerService",
    "BrandService",
    "brand_display_name",
    "SponsorshipService",
    "AnalyticsService",
]
