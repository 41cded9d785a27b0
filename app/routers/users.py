# =============================================================================
# app/routers/users.py - User Endpoints
# =============================================================================
# All endpoints require authentication.
# =============================================================================

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, Path, Query

from app.auth import get_current_user, AuthUser
from core.models.user import UserResponse, UserRole, UserUpdate
from core.services.user_service import UserService

router = APIRouter()


@router.get("", response_model=list[UserResponse])
async def list_users(
    role: Annotated[UserRole | None, Query(description="Filter by role")] = None,
    user: AuthUser = Depends(get_current_user),
):
    """List users, newest first."""
    return UserService.list_users(role=role)


@router.get("/{user_id}", response_model=UserResponse)
async def get_user(
    user_id: Annotated[UUID, Path(description="User UUID")],
    user: AuthUser = Depends(get_current_user),
):
    """Get one user's public profile."""
    return UserService.get_user(user_id)


@router.put("/{user_id}", response_model=UserResponse)
async def update_user(
    user_id: Annotated[UUID, Path(description="User UUID")],
    request: UserUpdate,
    user: AuthUser = Depends(get_current_user),
):
    """
    Update name, bio or avatar.

    Users may only update themselves; admins may update anyone.
    """
    return UserService.update_user(
        user_id,
        request.changes(),
        actor_id=user.id,
        actor_role=user.role,
    )
