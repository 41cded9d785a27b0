# =============================================================================
# core/models/user.py - User & Auth Schemas
# =============================================================================
# These models define the API contract for accounts:
# - RegisterRequest / LoginRequest: Input for /api/auth/register and /login
# - AuthResponse: Token plus public user info returned after auth
# - UserResponse: Public view of a row in public.users
# - UserUpdate: Fields a user may change via PUT /api/users/{id}
# =============================================================================

import re
from datetime import datetime
from enum import Enum
from uuid import UUID

from pydantic import BaseModel, Field, field_validator

_EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


class UserRole(str, Enum):
    """
    Account type.

    - brand: Creates sponsorship offers
    - influencer: Receives and answers sponsorship offers
    - admin: Can edit any user
    """
    BRAND = "brand"
    INFLUENCER = "influencer"
    ADMIN = "admin"


class RegisterRequest(BaseModel):
    """
    Schema for creating an account.

    Example:
        {
            "name": "Jane Doe",
            "email": "jane@example.com",
            "password": "secret123",
            "role": "influencer"
        }
    """

    name: str = Field(..., min_length=1, max_length=255)
    email: str = Field(..., max_length=320)
    password: str = Field(..., min_length=6, description="At least 6 characters")
    role: UserRole = Field(default=UserRole.BRAND)

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("name must not be empty")
        return value.strip()

    @field_validator("email")
    @classmethod
    def email_format(cls, value: str) -> str:
        value = value.strip().lower()
        if not _EMAIL_PATTERN.match(value):
            raise ValueError("email must be a valid email address")
        return value

    @field_validator("role")
    @classmethod
    def no_self_service_admin(cls, value: UserRole) -> UserRole:
        if value == UserRole.ADMIN:
            raise ValueError("role must be 'brand' or 'influencer'")
        return value


class LoginRequest(BaseModel):
    """Credentials for POST /api/auth/login."""
    email: str
    password: str

    @field_validator("email")
    @classmethod
    def lower_email(cls, value: str) -> str:
        return value.strip().lower()


class UserResponse(BaseModel):
    """
    Public user profile.

    Password hashes never leave Supabase Auth, so every column of
    public.users is safe to return.
    """
    id: UUID
    name: str
    email: str | None = None
    role: UserRole = UserRole.BRAND
    bio: str | None = None
    avatar: str | None = None
    created_at: datetime | None = None


class UserUpdate(BaseModel):
    """
    Fields accepted by PUT /api/users/{id}.

    Omitted fields are left unchanged. Email and role are managed by
    Supabase Auth and can't be changed here.
    """
    name: str | None = Field(default=None, min_length=1, max_length=255)
    bio: str | None = Field(default=None, max_length=2000)
    avatar: str | None = None

    @field_validator("name")
    @classmethod
    def name_not_cleared(cls, value: str | None) -> str:
        # users.name is NOT NULL; bio and avatar may be cleared
        if value is None or not value.strip():
            raise ValueError("name must not be empty")
        return value.strip()

    def changes(self) -> dict:
        """Only the fields the caller actually sent."""
        return self.model_dump(exclude_unset=True)


class AuthResponse(BaseModel):
    """Returned by register and login."""
    token: str
    user: UserResponse
