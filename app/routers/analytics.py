# =============================================================================
# app/routers/analytics.py - Dashboard Analytics Endpoints
# =============================================================================

from fastapi import APIRouter, Depends

from app.auth import AuthUser, get_current_user
from core.models.analytics import AnalyticsOverview
from core.services.analytics_service import AnalyticsService

router = APIRouter()


@router.get("/overview", response_model=AnalyticsOverview)
async def overview(user: AuthUser = Depends(get_current_user)):
    """Counts of the caller's sponsorships by side and by status."""
    return AnalyticsService.overview(user.id)
