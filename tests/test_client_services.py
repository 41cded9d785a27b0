# =============================================================================
# tests/test_client_services.py - API Wrapper Tests
# =============================================================================
# The wrappers are driven through httpx.MockTransport: each test checks the
# method, URL, headers and body that leave the client, and that the response
# body comes back unchanged.
#
# Run with: pytest tests/test_client_services.py -v
# =============================================================================

import json

import httpx
import pytest

from frontend.services import analytics, influencer, sponsorship, user
from frontend.services.common import (
    DEFAULT_API_URL,
    api_url,
    clean_params,
    get_api_base_url,
)


@pytest.fixture(autouse=True)
def default_api_url(monkeypatch):
    monkeypatch.delenv("API_URL", raising=False)


class Recorder:
    """Mock transport handler that records requests and replies with `body`."""

    def __init__(self, body=None, status_code=200):
        self.body = body if body is not None else {}
        self.status_code = status_code
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return httpx.Response(self.status_code, json=self.body)

    def client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(self))

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]


# =============================================================================
# Base URL
# =============================================================================

class TestBaseUrl:

    def test_default(self):
        assert get_api_base_url() == DEFAULT_API_URL == "http://localhost:5000"

    def test_configured(self, monkeypatch):
        monkeypatch.setenv("API_URL", "https://api.example.com/")
        assert get_api_base_url() == "https://api.example.com"
        assert api_url("/users") == "https://api.example.com/api/users"

    @pytest.mark.parametrize("value", ["not a url", "ftp://files.example.com", "/relative/path"])
    def test_invalid_falls_back(self, monkeypatch, value):
        monkeypatch.setenv("API_URL", value)
        assert get_api_base_url() == DEFAULT_API_URL

    def test_clean_params(self):
        assert clean_params({"q": "", "tags": [], "page": None, "categories": ["Food", "Travel"], "limit": 5}) == {
            "categories": "Food,Travel",
            "limit": 5,
        }


# =============================================================================
# Wrappers
# =============================================================================

class TestInfluencerWrappers:

    @pytest.mark.asyncio
    async def test_get_by_id_returns_body_verbatim(self):
        body = {"id": "42", "handle": "janecooks", "extra": {"nested": [1, 2]}}
        recorder = Recorder(body)

        async with recorder.client() as client:
            result = await influencer.get_influencer_by_id("42", client=client)

        assert result == body
        assert recorder.last.method == "GET"
        assert str(recorder.last.url) == f"{DEFAULT_API_URL}/api/influencers/42"
        assert "Authorization" not in recorder.last.headers

    @pytest.mark.asyncio
    async def test_search_params(self):
        recorder = Recorder({"total": 0, "page": 1, "limit": 20, "results": []})

        async with recorder.client() as client:
            await influencer.search_influencers(
                q="cook", categories=["Food", "Travel"], min_followers=1000, client=client
            )

        params = recorder.last.url.params
        assert params["q"] == "cook"
        assert params["categories"] == "Food,Travel"
        assert params["min_followers"] == "1000"
        assert "tags" not in params
        assert "page" not in params

    @pytest.mark.asyncio
    async def test_save_profile_sends_token(self):
        recorder = Recorder({"handle": "jane"})

        async with recorder.client() as client:
            await influencer.save_my_influencer_profile({"handle": "jane"}, token="tok", client=client)

        assert recorder.last.method == "PUT"
        assert recorder.last.headers["Authorization"] == "Bearer tok"
        assert json.loads(recorder.last.content) == {"handle": "jane"}


class TestUserWrappers:

    @pytest.mark.asyncio
    async def test_update_user(self):
        recorder = Recorder({"id": "7", "name": "A"})

        async with recorder.client() as client:
            result = await user.update_user("7", {"name": "A"}, client=client)

        assert result == {"id": "7", "name": "A"}
        assert recorder.last.method == "PUT"
        assert str(recorder.last.url) == f"{DEFAULT_API_URL}/api/users/7"
        assert json.loads(recorder.last.content) == {"name": "A"}

    @pytest.mark.asyncio
    async def test_error_status_raises(self):
        recorder = Recorder({"detail": "User not found: 9"}, status_code=404)

        async with recorder.client() as client:
            with pytest.raises(httpx.HTTPStatusError) as exc_info:
                await user.get_user_by_id("9", token="tok", client=client)

        assert exc_info.value.response.status_code == 404

    @pytest.mark.asyncio
    async def test_network_error_raises(self):
        def refuse(request):
            raise httpx.ConnectError("connection refused", request=request)

        async with httpx.AsyncClient(transport=httpx.MockTransport(refuse)) as client:
            with pytest.raises(httpx.TransportError):
                await user.get_users(token="tok", client=client)


class TestSponsorshipWrappers:

    @pytest.mark.asyncio
    @pytest.mark.parametrize("call,method,suffix", [
        (sponsorship.accept_sponsorship, "PATCH", "/accept"),
        (sponsorship.reject_sponsorship, "PATCH", "/reject"),
        (sponsorship.cancel_sponsorship, "PUT", "/cancel"),
        (sponsorship.complete_sponsorship, "PUT", "/complete"),
        (sponsorship.get_sponsorship, "GET", ""),
    ])
    async def test_single_sponsorship_calls(self, call, method, suffix):
        recorder = Recorder({"id": "s1"})

        async with recorder.client() as client:
            await call("s1", token="tok", client=client)

        assert recorder.last.method == method
        assert str(recorder.last.url) == f"{DEFAULT_API_URL}/api/sponsorships/s1{suffix}"

    @pytest.mark.asyncio
    async def test_create(self):
        recorder = Recorder({"id": "s1", "status": "pending"})
        offer = {"influencer_id": "i1", "title": "Spring launch", "budget": 1500}

        async with recorder.client() as client:
            result = await sponsorship.create_sponsorship(offer, token="tok", client=client)

        assert result["status"] == "pending"
        assert recorder.last.method == "POST"
        assert json.loads(recorder.last.content) == offer


class TestDashboardStats:

    @pytest.mark.asyncio
    async def test_influencer_stats(self):
        recorder = Recorder([
            {"status": "pending"}, {"status": "accepted"},
            {"status": "completed"}, {"status": "rejected"},
        ])

        async with recorder.client() as client:
            stats = await analytics.get_influencer_stats("tok", client=client)

        assert recorder.last.url.path == "/api/sponsorships/my"
        assert stats.active_collaborations == 2
        assert stats.pending_offers == 1
        assert stats.completed_collaborations == 1

    @pytest.mark.asyncio
    async def test_brand_stats(self):
        recorder = Recorder([
            {"status": "pending", "budget": 100},
            {"status": "accepted", "budget": 250.5},
            {"status": "cancelled", "budget": 50},
        ])

        async with recorder.client() as client:
            stats = await analytics.get_brand_stats("tok", client=client)

        assert recorder.last.url.path == "/api/sponsorships/brand/my"
        assert stats.active_sponsorships == 2
        assert stats.total_budget == 400.5
        assert stats.campaigns == 3
