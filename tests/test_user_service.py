# =============================================================================
# tests/test_user_service.py - User, Auth & Category Service Tests
# =============================================================================
# Services are exercised against patched SupabaseClient methods; no network.
#
# Run with: pytest tests/test_user_service.py -v
# =============================================================================

from types import SimpleNamespace
from unittest.mock import MagicMock, patch
from uuid import uuid4

import pytest

from app.exceptions import (
    InvalidCredentialsError,
    MarketplaceException,
    PermissionDeniedError,
    UserExistsError,
    UserNotFoundError,
)
from core.models.user import LoginRequest, RegisterRequest, UserRole
from core.services.auth_service import AuthService
from core.services.category_service import CategoryService
from core.services.user_service import UserService
from lib.supabase_client import SupabaseClient, SupabaseClientError, USERS_TABLE


# =============================================================================
# UserService
# =============================================================================

class TestUserService:

    def test_list_users_newest_first(self, fake_query, fake_client):
        query = fake_query(data=[{"id": "u1"}])

        with patch.object(SupabaseClient, "get_client", return_value=fake_client(query)):
            users = UserService.list_users(role=UserRole.INFLUENCER)

        assert users == [{"id": "u1"}]
        assert query.called("eq") == [(("role", "influencer"), {})]
        assert query.called("order") == [(("created_at",), {"desc": True})]

    def test_list_users_failure_raises(self, fake_query, fake_client):
        query = fake_query(error=RuntimeError("connection refused"))

        with patch.object(SupabaseClient, "get_client", return_value=fake_client(query)):
            with pytest.raises(SupabaseClientError):
                UserService.list_users()

    def test_get_user_not_found(self):
        with patch.object(SupabaseClient, "fetch_user", return_value=None):
            with pytest.raises(UserNotFoundError) as exc_info:
                UserService.get_user("missing")

        assert exc_info.value.status_code == 404

    def test_update_self(self):
        user_id = str(uuid4())
        updated = {"id": user_id, "name": "Jane", "bio": "Hi"}

        with patch.object(SupabaseClient, "update_row", return_value=updated) as update_row:
            result = UserService.update_user(user_id, {"bio": "Hi", "role": "admin"}, actor_id=user_id)

        assert result == updated
        # role is not user-editable
        update_row.assert_called_once_with(USERS_TABLE, user_id, {"bio": "Hi"})

    def test_update_other_user_forbidden(self):
        with patch.object(SupabaseClient, "update_row") as update_row:
            with pytest.raises(PermissionDeniedError):
                UserService.update_user(str(uuid4()), {"bio": "x"}, actor_id=str(uuid4()))

        update_row.assert_not_called()

    def test_admin_may_update_anyone(self):
        target = str(uuid4())

        with patch.object(SupabaseClient, "update_row", return_value={"id": target}):
            result = UserService.update_user(
                target, {"name": "New"}, actor_id=str(uuid4()), actor_role=UserRole.ADMIN
            )

        assert result == {"id": target}

    def test_update_missing_user(self):
        user_id = str(uuid4())

        with patch.object(SupabaseClient, "update_row", return_value=None):
            with pytest.raises(UserNotFoundError):
                UserService.update_user(user_id, {"name": "x"}, actor_id=user_id)

    def test_empty_update_returns_current(self):
        user_id = str(uuid4())

        with patch.object(SupabaseClient, "fetch_user", return_value={"id": user_id}), \
                patch.object(SupabaseClient, "update_row") as update_row:
            result = UserService.update_user(user_id, {}, actor_id=user_id)

        assert result == {"id": user_id}
        update_row.assert_not_called()


# =============================================================================
# AuthService
# =============================================================================

def _auth_response(user_id, token="access-token", metadata=None, app_metadata=None):
    return SimpleNamespace(
        user=SimpleNamespace(
            id=user_id,
            user_metadata=metadata or {},
            app_metadata=app_metadata or {"provider": "email"},
        ),
        session=SimpleNamespace(access_token=token, refresh_token="refresh-token") if token else None,
    )


@pytest.fixture
def auth_api():
    """Patch get_auth_client and return its .auth mock."""
    auth = MagicMock()
    with patch.object(SupabaseClient, "get_auth_client", return_value=SimpleNamespace(auth=auth)):
        yield auth


class TestAuthService:

    def _register_request(self):
        return RegisterRequest(
            name="Jane", email="jane@example.com", password="secret123", role="influencer"
        )

    def test_register(self, auth_api):
        """Test that registration returns a token carrying the server-set role."""
        user_id = str(uuid4())
        auth_api.sign_up.return_value = _auth_response(user_id)
        auth_api.refresh_session.return_value = _auth_response(user_id, token="role-token")
        user_row = {"id": user_id, "name": "Jane", "email": "jane@example.com", "role": "influencer"}

        with patch.object(SupabaseClient, "fetch_user_by_email", return_value=None), \
                patch.object(SupabaseClient, "set_user_role") as set_user_role, \
                patch.object(SupabaseClient, "upsert_row", return_value=user_row) as upsert_row:
            result = AuthService.register(self._register_request())

        assert result == {"token": "role-token", "user": user_row}
        set_user_role.assert_called_once_with(user_id, "influencer")
        auth_api.refresh_session.assert_called_once_with("refresh-token")
        # role never goes into user-editable metadata
        sent = auth_api.sign_up.call_args.args[0]
        assert sent["options"]["data"] == {"name": "Jane"}
        assert upsert_row.call_args.kwargs["on_conflict"] == "id"

    def test_set_user_role_uses_admin_api(self):
        """Test that the role is written to app_metadata with the service key."""
        client = MagicMock()
        user_id = uuid4()

        with patch.object(SupabaseClient, "get_client", return_value=client):
            SupabaseClient.set_user_role(user_id, "influencer")

        client.auth.admin.update_user_by_id.assert_called_once_with(
            str(user_id), {"app_metadata": {"role": "influencer"}}
        )

    def test_set_user_role_failure(self):
        client = MagicMock()
        client.auth.admin.update_user_by_id.side_effect = RuntimeError("not allowed")

        with patch.object(SupabaseClient, "get_client", return_value=client):
            with pytest.raises(SupabaseClientError) as exc_info:
                SupabaseClient.set_user_role(uuid4(), "brand")

        assert exc_info.value.code == "ROLE_UPDATE_FAILED"

    def test_register_existing_email(self, auth_api):
        with patch.object(SupabaseClient, "fetch_user_by_email", return_value={"id": "x"}):
            with pytest.raises(UserExistsError):
                AuthService.register(self._register_request())

        auth_api.sign_up.assert_not_called()

    def test_register_duplicate_reported_by_auth(self, auth_api):
        auth_api.sign_up.side_effect = Exception("User already registered")

        with patch.object(SupabaseClient, "fetch_user_by_email", return_value=None):
            with pytest.raises(UserExistsError):
                AuthService.register(self._register_request())

    def test_register_needs_email_confirmation(self, auth_api):
        auth_api.sign_up.return_value = _auth_response(str(uuid4()), token=None)

        with patch.object(SupabaseClient, "fetch_user_by_email", return_value=None), \
                patch.object(SupabaseClient, "set_user_role"), \
                patch.object(SupabaseClient, "upsert_row", return_value={}):
            with pytest.raises(MarketplaceException) as exc_info:
                AuthService.register(self._register_request())

        assert exc_info.value.code == "EMAIL_CONFIRMATION_REQUIRED"
        assert exc_info.value.status_code == 403

    def test_login(self, auth_api):
        user_id = str(uuid4())
        auth_api.sign_in_with_password.return_value = _auth_response(user_id, token="tok")

        with patch.object(SupabaseClient, "fetch_user", return_value={"id": user_id}):
            result = AuthService.login(LoginRequest(email="jane@example.com", password="secret123"))

        assert result == {"token": "tok", "user": {"id": user_id}}

    def test_login_wrong_password(self, auth_api):
        auth_api.sign_in_with_password.side_effect = Exception("Invalid login credentials")

        with pytest.raises(InvalidCredentialsError) as exc_info:
            AuthService.login(LoginRequest(email="jane@example.com", password="wrong"))

        assert exc_info.value.message == "Invalid credentials"

    def test_login_backfills_missing_user_row(self, auth_api):
        user_id = str(uuid4())
        auth_api.sign_in_with_password.return_value = _auth_response(
            user_id,
            metadata={"name": "Jane", "role": "admin"},
            app_metadata={"provider": "email", "role": "influencer"},
        )

        with patch.object(SupabaseClient, "fetch_user", return_value=None), \
                patch.object(SupabaseClient, "upsert_row", return_value={"id": user_id}) as upsert_row:
            AuthService.login(LoginRequest(email="jane@example.com", password="secret123"))

        data = upsert_row.call_args.args[1]
        assert data["name"] == "Jane"
        assert data["role"] == "influencer"


# =============================================================================
# CategoryService
# =============================================================================

class TestCategoryService:

    def test_ensure_categories_creates_missing(self):
        with patch.object(SupabaseClient, "fetch_many", return_value=[{"name": "Food"}]), \
                patch.object(SupabaseClient, "upsert_row") as upsert_row:
            names = CategoryService.ensure_categories([" Food", "Home Decor", "", "Food"])

        assert names == ["Food", "Home Decor"]
        upsert_row.assert_called_once_with(
            "categories", {"name": "Home Decor", "slug": "home-decor"}, on_conflict="slug"
        )

    def test_ensure_categories_empty(self):
        with patch.object(SupabaseClient, "fetch_many") as fetch_many:
            assert CategoryService.ensure_categories(["  "]) == []

        fetch_many.assert_not_called()

    def test_list_categories_alphabetical(self, fake_query, fake_client):
        query = fake_query(data=[{"id": 1, "name": "Fashion", "slug": "fashion"}])

        with patch.object(SupabaseClient, "get_client", return_value=fake_client(query)):
            categories = CategoryService.list_categories()

        assert categories[0]["slug"] == "fashion"
        assert query.called("order") == [(("name",), {})]
