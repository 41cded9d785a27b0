# =============================================================================
# tests/conftest.py - Pytest Configuration
# =============================================================================
# This module provides pytest fixtures and configuration for all tests.
#
# Key features:
# - Sets up mock environment variables before any imports
# - Issues signed access tokens for any user and role
# - Fakes the Supabase query builder so services run without a database
# =============================================================================

import os
import time
from types import SimpleNamespace
from uuid import uuid4

# =============================================================================
# Set up test environment BEFORE any imports
# =============================================================================
# This must happen before importing app.config which loads settings immediately

os.environ.setdefault("SUPABASE_URL", "https://test-project.supabase.co")
os.environ.setdefault("SUPABASE_ANON_KEY", "test-anon-key")
os.environ.setdefault("SUPABASE_SERVICE_KEY", "test-service-key")
os.environ.setdefault("SUPABASE_JWT_SECRET", "test-jwt-secret-with-enough-length")
os.environ.setdefault("ENVIRONMENT", "development")
os.environ["NOTIFICATIONS_ENABLED"] = "false"

import pytest
from jose import jwt

from app.config import settings


# =============================================================================
# Tokens
# =============================================================================

def make_token(
    user_id: str | None = None,
    role: str | None = "brand",
    email: str = "user@example.com",
    expires_in: int = 3600,
    secret: str | None = None,
    audience: str = "authenticated",
    user_metadata: dict | None = None,
) -> str:
    """Sign an access token shaped like the ones Supabase Auth issues."""
    now = int(time.time())
    claims = {
        "sub": user_id or str(uuid4()),
        "email": email,
        "aud": audience,
        "iat": now,
        "exp": now + expires_in,
    }
    if role is not None:
        claims["app_metadata"] = {"provider": "email", "role": role}
    if user_metadata is not None:
        claims["user_metadata"] = user_metadata
    return jwt.encode(claims, secret or settings.SUPABASE_JWT_SECRET, algorithm="HS256")


@pytest.fixture
def token_factory():
    """Factory fixture: token_factory(user_id, role="influencer")."""
    return make_token


@pytest.fixture
def brand_user_id():
    return str(uuid4())


@pytest.fixture
def influencer_user_id():
    return str(uuid4())


@pytest.fixture
def brand_headers(brand_user_id):
    return {"Authorization": f"Bearer {make_token(brand_user_id, role='brand')}"}


@pytest.fixture
def influencer_headers(influencer_user_id):
    return {"Authorization": f"Bearer {make_token(influencer_user_id, role='influencer')}"}


# =============================================================================
# Supabase Fakes
# =============================================================================

class FakeQuery:
    """
    Stand-in for a postgrest query builder.

    Every builder method records its call and returns the query itself, so
    chains like .select().eq().order().execute() work. execute() returns the
    configured rows, or raises the configured error.
    """

    def __init__(self, data=None, count=None, error: Exception | None = None):
        self.data = data if data is not None else []
        self.count = count
        self.error = error
        self.calls: list[tuple] = []

    def __getattr__(self, name):
        def method(*args, **kwargs):
            self.calls.append((name, args, kwargs))
            return self
        return method

    def execute(self):
        self.calls.append(("execute", (), {}))
        if self.error is not None:
            raise self.error
        return SimpleNamespace(data=self.data, count=self.count)

    def called(self, name: str) -> list[tuple]:
        """Args/kwargs of every call to `name`."""
        return [(args, kwargs) for n, args, kwargs in self.calls if n == name]


@pytest.fixture
def fake_query():
    """Factory fixture returning a FakeQuery."""
    return FakeQuery


@pytest.fixture
def fake_client():
    """
    Build a fake Supabase client whose .table() returns the given query.

    Usage:
        query = FakeQuery(data=[...])
        client = fake_client(query)
    """
    def build(query: FakeQuery):
        client = SimpleNamespace(tables=[])

        def table(name):
            client.tables.append(name)
            return query

        client.table = table
        return client

    return build


# =============================================================================
# Sample Rows
# =============================================================================

@pytest.fixture
def sponsorship_row(brand_user_id, influencer_user_id):
    """A pending sponsorship as stored in the database."""
    return {
        "id": str(uuid4()),
        "brand_id": brand_user_id,
        "influencer_id": influencer_user_id,
        "title": "Spring launch",
        "description": "Two reels featuring the new line",
        "budget": 1500,
        "deliverables": ["2 reels", "1 story"],
        "status": "pending",
        "created_at": "2024-03-01T10:00:00+00:00",
        "updated_at": "2024-03-01T10:00:00+00:00",
    }


@pytest.fixture
def influencer_profile_row(influencer_user_id):
    """An influencer profile with its owner embedded."""
    return {
        "id": str(uuid4()),
        "user_id": influencer_user_id,
        "handle": "janecooks",
        "bio": "Weeknight recipes",
        "avatar_url": "",
        "categories": ["Food"],
        "location": "Lisbon",
        "social_links": {"instagram": "janecooks", "youtube": "", "tiktok": "", "twitter": ""},
        "follower_count": 48000,
        "average_engagement_rate": 3.4,
        "portfolio": [],
        "tags": ["recipes"],
        "pricing": {"post": 200, "reel": 450, "story": 80},
        "created_at": "2024-01-15T10:30:00+00:00",
        "user": {"id": influencer_user_id, "name": "Jane Doe", "email": "jane@example.com", "avatar": None},
    }


@pytest.fixture
def brand_profile_row(brand_user_id):
    """A brand profile as stored in the database."""
    return {
        "id": str(uuid4()),
        "user_id": brand_user_id,
        "company_name": "Acme Foods",
        "industry": "Food",
        "description": "Snacks",
        "logo_url": "",
        "website": "https://acme.example.com",
        "social_links": {"instagram": "acme", "twitter": "", "linkedin": ""},
        "budget_per_post": 300,
        "contact_email": "hello@acme.example.com",
        "created_at": "2024-01-10T09:00:00+00:00",
        "updated_at": "2024-01-10T09:00:00+00:00",
    }


# =============================================================================
# API Client
# =============================================================================

@pytest.fixture
def client():
    """FastAPI TestClient for the whole app."""
    from fastapi.testclient import TestClient
    from app.main import app

    return TestClient(app)
