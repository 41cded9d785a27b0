# =============================================================================
# frontend/components/ - UI State Components
# =============================================================================
# Toolkit-independent state and behaviour of the shared UI pieces:
# - protected_route.py: Render a page or redirect to /login
# - modal.py: Dialog with Escape/overlay close and body scroll lock
# - search.py: Search text box
# - filters.py: Sponsorship and influencer search filters
# =============================================================================

from .protected_route import LOGIN_PATH, Redirect, protected_route
from .modal import ButtonView, Modal, ModalAction, ModalView, MODAL_WIDTHS
from .search import SearchInput
from .filters import (
    CATEGORY_OPTIONS,
    FOLLOWER_RANGES,
    STATUS_OPTIONS,
    SearchFilters,
    SponsorshipFilters,
    filter_sponsorships,
)

__all__ = [
    "LOGIN_PATH",
    "Redirect",
    "protected_route",
    "ButtonView",
    "Modal",
    "ModalAction",
    "ModalView",
    "MODAL_WIDTHS",
    "SearchInput",
    "CATEGORY_OPTIONS",
    "FOLLOWER_RANGES",
    "STATUS_OPTIONS",
    "SearchFilters",
    "SponsorshipFilters",
    "filter_sponsorships",
]
