# =============================================================================
# app/exceptions.py - Custom Exception Handlers
# =============================================================================
# Centralized exception handling for the API.
# Every error carries a machine-readable code and, where possible, a
# suggestion telling the caller how to fix the request.
# =============================================================================

from typing import Any

from fastapi import Request
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse


class MarketplaceException(Exception):
    """
    Base exception for the marketplace API.

    All custom exceptions inherit from this class.
    Provides structured error responses with actionable suggestions.
    """

    def __init__(
        self,
        message: str,
        code: str = "MARKETPLACE_ERROR",
        status_code: int = 500,
        suggestion: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.status_code = status_code
        self.suggestion = suggestion
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to API response dict."""
        result = {
            "detail": self.message,
            "code": self.code,
        }
        if self.suggestion:
            result["suggestion"] = self.suggestion
        if self.details:
            result["details"] = self.details
        return result


# =============================================================================
# Auth Exceptions
# =============================================================================

class UserExistsError(MarketplaceException):
    """Raised when registering with an email that is already taken."""

    def __init__(self, email: str):
        super().__init__(
            message="User already exists",
            code="USER_EXISTS",
            status_code=400,
            suggestion="Log in instead, or register with a different email",
            details={"email": email}
        )


class InvalidCredentialsError(MarketplaceException):
    """Raised when email/password do not match."""

    def __init__(self):
        super().__init__(
            message="Invalid credentials",
            code="INVALID_CREDENTIALS",
            status_code=400,
            suggestion="Check the email and password and try again",
        )


class PermissionDeniedError(MarketplaceException):
    """Raised when an authenticated user may not perform an action."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(
            message=message,
            code="FORBIDDEN",
            status_code=403,
            details=details,
        )


# =============================================================================
# Not Found Exceptions
# =============================================================================

class UserNotFoundError(MarketplaceException):
    """Raised when a user ID doesn't exist."""

    def __init__(self, user_id: str):
        super().__init__(
            message=f"User not found: {user_id}",
            code="USER_NOT_FOUND",
            status_code=404,
            suggestion="Check that the user id is correct",
            details={"user_id": user_id}
        )


class InfluencerNotFoundError(MarketplaceException):
    """Raised when an influencer profile can't be located."""

    def __init__(self, key: str, field: str = "id"):
        super().__init__(
            message=f"Influencer profile not found: {key}",
            code="INFLUENCER_NOT_FOUND",
            status_code=404,
            suggestion="Create the profile with PUT /api/influencers/me first"
            if field == "user_id" else None,
            details={field: key}
        )


class BrandProfileNotFoundError(MarketplaceException):
    """Raised when a brand profile can't be located."""

    def __init__(self, user_id: str):
        super().__init__(
            message="Brand profile not found",
            code="BRAND_PROFILE_NOT_FOUND",
            status_code=404,
            suggestion="Create the profile with PUT /api/brands/me first",
            details={"user_id": user_id}
        )


class SponsorshipNotFoundError(MarketplaceException):
    """Raised when a sponsorship ID doesn't exist."""

    def __init__(self, sponsorship_id: str):
        super().__init__(
            message=f"Sponsorship not found: {sponsorship_id}",
            code="SPONSORSHIP_NOT_FOUND",
            status_code=404,
            details={"sponsorship_id": sponsorship_id}
        )


# =============================================================================
# Sponsorship Exceptions
# =============================================================================

class BrandProfileRequiredError(MarketplaceException):
    """Raised when a brand without a profile tries to create a sponsorship."""

    def __init__(self):
        super().__init__(
            message="Brand profile is required to create sponsorships",
            code="BRAND_PROFILE_REQUIRED",
            status_code=400,
            suggestion="Create the profile with PUT /api/brands/me first",
        )


class InvalidStatusTransitionError(MarketplaceException):
    """Raised when a sponsorship can't move to the requested status."""

    def __init__(self, sponsorship_id: str, current: str, target: str):
        super().__init__(
            message=f"Cannot change sponsorship from '{current}' to '{target}'",
            code="INVALID_STATUS_TRANSITION",
            status_code=409,
            details={
                "sponsorship_id": sponsorship_id,
                "current_status": current,
                "requested_status": target,
            }
        )


# =============================================================================
# Profile Exceptions
# =============================================================================

class HandleTakenError(MarketplaceException):
    """Raised when another influencer already uses a handle."""

    def __init__(self, handle: str):
        super().__init__(
            message=f"Handle already taken: {handle}",
            code="HANDLE_TAKEN",
            status_code=409,
            suggestion="Choose a different handle",
            details={"handle": handle}
        )


class HandleRequiredError(MarketplaceException):
    """Raised when a new influencer profile is saved without a handle."""

    def __init__(self):
        super().__init__(
            message="A handle is required to create an influencer profile",
            code="HANDLE_REQUIRED",
            status_code=400,
            suggestion="Include 'handle' in the request body",
        )


# =============================================================================
# Exception Handlers
# =============================================================================

async def marketplace_exception_handler(
    request: Request,
    exc: MarketplaceException
) -> JSONResponse:
    """
    Convert MarketplaceException to JSON response.

    Returns structured error with:
    - detail: Human-readable message
    - code: Machine-readable error code
    - suggestion: How to fix (if available)
    - details: Additional context
    """
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_dict()
    )


async def validation_exception_handler(
    request: Request,
    exc: Exception
) -> JSONResponse:
    """
    Handle request validation errors.

    Flattens Pydantic's error list into a single response.
    """
    errors = jsonable_encoder(exc.errors()) if hasattr(exc, "errors") else str(exc)
    return JSONResponse(
        status_code=422,
        content={
            "detail": "Validation error",
            "code": "VALIDATION_ERROR",
            "errors": errors,
        }
    )
