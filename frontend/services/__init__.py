# =============================================================================
# frontend/services/ - API Wrappers
# =============================================================================
# One module per API resource. Every wrapper is a coroutine performing a
# single HTTP call and returning the parsed JSON body.
#
# Usage:
#   from frontend.services import influencer
#   profile = await influencer.get_influencer_by_id("42")
# =============================================================================

from . import analytics
from . import auth
from . import brand
from . import category
from . import influencer
from . import sponsorship
from . import user
from .common import api_url, get_api_base_url, DEFAULT_API_URL

__all__ = [
    "analytics",
    "auth",
    "brand",
    "category",
    "influencer",
    "sponsorship",
    "user",
    "api_url",
    "get_api_base_url",
    "DEFAULT_API_URL",
]
