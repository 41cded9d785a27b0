# =============================================================================
# core/ - Business Logic Package
# =============================================================================
# This package contains the marketplace's business logic:
# - models/: Pydantic schemas for data validation
# - services/: Operations on users, profiles, sponsorships and categories
#
# Code in this package should NOT import FastAPI request objects.
# Routes translate HTTP to service calls; services raise app.exceptions.
# =============================================================================
