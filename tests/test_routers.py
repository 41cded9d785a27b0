# =============================================================================
# tests/test_routers.py - API Endpoint Tests
# =============================================================================
# Requests go through the whole app (middleware, validation, exception
# handlers) with the service layer patched out.
#
# Run with: pytest tests/test_routers.py -v
# =============================================================================

from unittest.mock import patch
from uuid import uuid4

import pytest

from app.exceptions import (
    InvalidStatusTransitionError,
    PermissionDeniedError,
    SponsorshipNotFoundError,
    UserExistsError,
)
from core.services.analytics_service import AnalyticsService
from core.services.auth_service import AuthService
from core.services.brand_service import BrandService
from core.services.influencer_service import InfluencerService
from core.services.sponsorship_service import SponsorshipService
from core.services.user_service import UserService
from lib.supabase_client import SupabaseClient, SupabaseClientError


# =============================================================================
# Root & Health
# =============================================================================

class TestHealth:

    def test_root(self, client):
        assert client.get("/").json()["name"] == "Influencer Marketplace API"

    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_ready_with_database_down(self, client):
        with patch.object(SupabaseClient, "get_client", side_effect=RuntimeError("no db")):
            body = client.get("/health/ready").json()

        assert body["status"] == "degraded"
        assert body["checks"]["notifications"] == "disabled"

    def test_live(self, client):
        assert client.get("/health/live").json()["status"] == "alive"


# =============================================================================
# Auth
# =============================================================================

class TestAuthRoutes:

    def _user(self, role="brand"):
        return {"id": str(uuid4()), "name": "Jane", "email": "jane@example.com", "role": role}

    def test_register_created(self, client):
        user = self._user("influencer")

        with patch.object(AuthService, "register", return_value={"token": "t", "user": user}):
            response = client.post("/api/auth/register", json={
                "name": "Jane", "email": "jane@example.com",
                "password": "secret123", "role": "influencer",
            })

        assert response.status_code == 201
        assert response.json()["token"] == "t"
        assert response.json()["user"]["role"] == "influencer"

    def test_register_short_password(self, client):
        response = client.post("/api/auth/register", json={
            "name": "Jane", "email": "jane@example.com", "password": "123",
        })

        assert response.status_code == 422
        assert response.json()["code"] == "VALIDATION_ERROR"

    def test_register_existing_user(self, client):
        with patch.object(AuthService, "register", side_effect=UserExistsError("jane@example.com")):
            response = client.post("/api/auth/register", json={
                "name": "Jane", "email": "jane@example.com", "password": "secret123",
            })

        assert response.status_code == 400
        assert response.json()["detail"] == "User already exists"

    def test_me(self, client, brand_headers, brand_user_id):
        user = dict(self._user(), id=brand_user_id)

        with patch.object(AuthService, "me", return_value=user) as me:
            response = client.get("/api/auth/me", headers=brand_headers)

        assert response.status_code == 200
        assert response.json()["id"] == brand_user_id
        assert str(me.call_args.args[0]) == brand_user_id


# =============================================================================
# Users
# =============================================================================

class TestUserRoutes:

    def test_update_other_user_forbidden(self, client, brand_headers):
        with patch.object(
            UserService, "update_user",
            side_effect=PermissionDeniedError("You can only update your own profile"),
        ):
            response = client.put(f"/api/users/{uuid4()}", json={"bio": "x"}, headers=brand_headers)

        assert response.status_code == 403
        assert response.json()["code"] == "FORBIDDEN"

    def test_update_passes_only_sent_fields(self, client, brand_headers, brand_user_id):
        updated = {"id": brand_user_id, "name": "Jane", "bio": "Hello"}

        with patch.object(UserService, "update_user", return_value=updated) as update_user:
            response = client.put(f"/api/users/{brand_user_id}", json={"bio": "Hello"}, headers=brand_headers)

        assert response.status_code == 200
        assert update_user.call_args.args[1] == {"bio": "Hello"}

    def test_self_claimed_admin_cannot_update_others(self, client, token_factory):
        """Test that a user_metadata role doesn't unlock admin rights."""
        token = token_factory(str(uuid4()), role=None, user_metadata={"role": "admin"})
        victim = str(uuid4())

        with patch.object(SupabaseClient, "update_row") as update_row:
            response = client.put(
                f"/api/users/{victim}",
                json={"name": "Someone else"},
                headers={"Authorization": f"Bearer {token}"},
            )

        assert response.status_code == 403
        update_row.assert_not_called()

    def test_null_name_rejected_before_write(self, client, brand_headers, brand_user_id):
        with patch.object(SupabaseClient, "update_row") as update_row:
            response = client.put(f"/api/users/{brand_user_id}", json={"name": None}, headers=brand_headers)

        assert response.status_code == 422
        update_row.assert_not_called()

    def test_invalid_user_id(self, client, brand_headers):
        assert client.get("/api/users/42", headers=brand_headers).status_code == 422

    def test_database_error(self, client, brand_headers):
        with patch.object(UserService, "list_users", side_effect=SupabaseClientError("down", code="FETCH_FAILED")):
            response = client.get("/api/users", headers=brand_headers)

        assert response.status_code == 500
        assert response.json() == {"detail": "A database error occurred", "code": "FETCH_FAILED"}


# =============================================================================
# Influencers
# =============================================================================

class TestInfluencerRoutes:

    def test_search_is_public(self, client):
        result = {"total": 0, "page": 1, "limit": 20, "results": []}

        with patch.object(InfluencerService, "search", return_value=result) as search:
            response = client.get(
                "/api/influencers",
                params={"q": "cook", "categories": "Food, Travel", "min_followers": 1000},
            )

        assert response.status_code == 200
        kwargs = search.call_args.kwargs
        assert kwargs["categories"] == ["Food", "Travel"]
        assert kwargs["tags"] == []
        assert kwargs["min_followers"] == 1000
        assert kwargs["limit"] == 20

    def test_search_limit_bounds(self, client):
        assert client.get("/api/influencers", params={"limit": 0}).status_code == 422
        assert client.get("/api/influencers", params={"limit": 101}).status_code == 422

    def test_profile_by_id_is_public(self, client, influencer_profile_row):
        with patch.object(InfluencerService, "get_by_id", return_value=influencer_profile_row):
            response = client.get(f"/api/influencers/{influencer_profile_row['id']}")

        assert response.status_code == 200
        assert response.json()["handle"] == "janecooks"
        assert response.json()["user"]["name"] == "Jane Doe"

    def test_me_requires_token(self, client):
        assert client.get("/api/influencers/me").status_code == 401

    def test_save_profile_as_influencer(self, client, influencer_headers, influencer_profile_row):
        with patch.object(InfluencerService, "upsert_for_user") as upsert, \
                patch.object(InfluencerService, "get_for_user", return_value=influencer_profile_row):
            response = client.put(
                "/api/influencers/me",
                json={"handle": "janecooks", "instagram": "janecooks"},
                headers=influencer_headers,
            )

        assert response.status_code == 200
        update = upsert.call_args.args[1]
        assert update.handle == "janecooks"
        assert update.instagram == "janecooks"

    def test_save_profile_as_brand_forbidden(self, client, brand_headers):
        response = client.put("/api/influencers/me", json={"handle": "x"}, headers=brand_headers)
        assert response.status_code == 403


# =============================================================================
# Brands
# =============================================================================

class TestBrandRoutes:

    def test_get_my_profile(self, client, brand_headers, brand_profile_row):
        with patch.object(BrandService, "get_for_user", return_value=brand_profile_row):
            response = client.get("/api/brands/me", headers=brand_headers)

        assert response.status_code == 200
        assert response.json()["company_name"] == "Acme Foods"

    def test_influencer_forbidden(self, client, influencer_headers):
        assert client.get("/api/brands/me", headers=influencer_headers).status_code == 403

    def test_delete(self, client, brand_headers):
        with patch.object(BrandService, "delete_for_user") as delete:
            response = client.delete("/api/brands/me", headers=brand_headers)

        assert response.json() == {"message": "Brand profile deleted"}
        delete.assert_called_once()


# =============================================================================
# Sponsorships
# =============================================================================

def _presented(row):
    return {
        **row,
        "brand": {"id": None, "user_id": row["brand_id"], "name": "Acme Foods", "logo_url": None},
        "influencer": {"id": None, "user_id": row["influencer_id"], "handle": "janecooks",
                       "name": "Jane Doe", "avatar_url": ""},
    }


class TestSponsorshipRoutes:

    def test_create(self, client, brand_headers, brand_user_id, sponsorship_row):
        with patch.object(SponsorshipService, "create", return_value=_presented(sponsorship_row)) as create:
            response = client.post(
                "/api/sponsorships",
                json={
                    "influencer_id": sponsorship_row["influencer_id"],
                    "title": "Spring launch",
                    "budget": 1500,
                },
                headers=brand_headers,
            )

        assert response.status_code == 201
        assert response.json()["status"] == "pending"
        assert response.json()["brand"]["name"] == "Acme Foods"
        assert str(create.call_args.args[0]) == brand_user_id

    def test_create_validation(self, client, brand_headers):
        response = client.post(
            "/api/sponsorships",
            json={"influencer_id": str(uuid4()), "title": "x", "budget": -5},
            headers=brand_headers,
        )
        assert response.status_code == 422

    def test_received_list(self, client, influencer_headers, sponsorship_row):
        with patch.object(SponsorshipService, "list_for_influencer",
                          return_value=[_presented(sponsorship_row)]):
            response = client.get("/api/sponsorships/my", headers=influencer_headers)

        assert response.status_code == 200
        assert len(response.json()) == 1

    def test_activities_use_configured_limit(self, client, brand_headers):
        with patch.object(SponsorshipService, "recent_activity", return_value=[]) as activity:
            client.get("/api/sponsorships/activities", headers=brand_headers)

        assert activity.call_args.kwargs == {"limit": 5}

    def test_accept(self, client, influencer_headers, sponsorship_row):
        accepted = _presented(dict(sponsorship_row, status="accepted"))

        with patch.object(SponsorshipService, "accept", return_value=accepted):
            response = client.patch(
                f"/api/sponsorships/{sponsorship_row['id']}/accept", headers=influencer_headers
            )

        assert response.status_code == 200
        assert response.json()["status"] == "accepted"

    def test_accept_wrong_party(self, client, brand_headers, sponsorship_row):
        with patch.object(SponsorshipService, "accept",
                          side_effect=PermissionDeniedError("Only the sponsorship's influencer can mark it accepted")):
            response = client.patch(
                f"/api/sponsorships/{sponsorship_row['id']}/accept", headers=brand_headers
            )

        assert response.status_code == 403

    def test_complete_pending_conflict(self, client, brand_headers, sponsorship_row):
        error = InvalidStatusTransitionError(sponsorship_row["id"], "pending", "completed")

        with patch.object(SponsorshipService, "complete", side_effect=error):
            response = client.put(
                f"/api/sponsorships/{sponsorship_row['id']}/complete", headers=brand_headers
            )

        assert response.status_code == 409
        assert response.json()["code"] == "INVALID_STATUS_TRANSITION"

    def test_get_missing(self, client, brand_headers):
        sponsorship_id = str(uuid4())

        with patch.object(SponsorshipService, "get_for_party",
                          side_effect=SponsorshipNotFoundError(sponsorship_id)):
            response = client.get(f"/api/sponsorships/{sponsorship_id}", headers=brand_headers)

        assert response.status_code == 404

    @pytest.mark.parametrize("method,action", [("put", "accept"), ("patch", "cancel")])
    def test_wrong_method(self, client, brand_headers, method, action):
        response = getattr(client, method)(
            f"/api/sponsorships/{uuid4()}/{action}", headers=brand_headers
        )
        assert response.status_code == 405


# =============================================================================
# Analytics
# =============================================================================

class TestAnalyticsRoutes:

    def test_overview(self, client, brand_headers):
        counts = {"as_brand": 1, "as_influencer": 0, "total": 1,
                  "by_status": {"pending": 1, "accepted": 0, "rejected": 0, "completed": 0, "cancelled": 0}}

        with patch.object(AnalyticsService, "overview", return_value=counts):
            response = client.get("/api/analytics/overview", headers=brand_headers)

        assert response.json() == counts
