# =============================================================================
# frontend/ - Client-Side State and API Wrappers
# =============================================================================
# Everything a UI needs to talk to the marketplace API, free of any UI toolkit:
# - services/: One async httpx call per API operation
# - auth.py: AuthSession holding the token and current user
# - components/: Route gate, modal, search input and filter state
# - document.py: Minimal stand-in for the browser document (listeners, body style)
#
# Rendering is left to whichever toolkit consumes these objects.
# =============================================================================
