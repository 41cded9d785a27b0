# =============================================================================
# app/routers/ - API Route Definitions
# =============================================================================
# This package contains FastAPI routers organized by feature:
# - health.py: Health check endpoints
# - users.py: User listing and profile updates
# - influencers.py: Influencer search and profiles
# - brands.py: Brand profiles
# - sponsorships.py: Sponsorship offers and status changes
# - categories.py: Category lookup
# - analytics.py: Dashboard counts
#
# Each router is mounted in main.py with a URL prefix.
# =============================================================================

from . import health
from . import users
from . import influencers
from . import brands
from . import sponsorships
from . import categories
from . import analytics

__all__ = [
    "health",
    "users",
    "influencers",
    "brands",
    "sponsorships",
    "categories",
    "analytics",
]
