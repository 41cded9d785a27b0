# =============================================================================
# app/auth/routes.py - Authentication Routes
# =============================================================================
# Sign-up and sign-in are delegated to Supabase Auth; both return the access
# token the client sends as "Authorization: Bearer <token>" afterwards.
#
# POST /api/auth/register and /login are public; /me needs a token.
# =============================================================================

import logging
from fastapi import APIRouter, Depends, status

from app.auth.dependencies import get_current_user
from app.auth.models import AuthUser
from core.models.user import AuthResponse, LoginRequest, RegisterRequest, UserResponse
from core.services.auth_service import AuthService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
async def register(request: RegisterRequest):
    """
    Create an account.

    Returns:
        AuthResponse: Access token and the new user's public profile

    Raises:
        400 USER_EXISTS: Email already registered
        422: Invalid name, email, password (min 6 chars) or role
    """
    return AuthService.register(request)


@router.post("/login", response_model=AuthResponse)
async def login(request: LoginRequest):
    """
    Sign in with email and password.

    Raises:
        400 INVALID_CREDENTIALS: Email and password don't match
    """
    return AuthService.login(request)


@router.get("/me", response_model=UserResponse)
async def get_current_user_info(user: AuthUser = Depends(get_current_user)):
    """
    Get the current authenticated user's profile.

    Raises:
        401: If not authenticated
        404: If the account has no public profile row
    """
    return AuthService.me(user.id)
