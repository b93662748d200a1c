"""
User API endpoints.

Privileged routes identify their caller by email (query string or body);
privilege itself is always re-derived from the store by the service.
"""

from typing import Any, Optional

from fastapi import APIRouter, Depends, Query

from api.dependencies import get_user_service, require_admin_caller, require_admin_in_body

from .interfaces import IUserService
from .models import (
    AdminStatusRequest,
    CreateUserRequest,
    RoleSummary,
    UpdateUserRequest,
)

router = APIRouter()


@router.get("", dependencies=[Depends(require_admin_caller)])
async def list_users(
    email: Optional[str] = Query(default=None, description="Email of the requesting admin"),
    service: IUserService = Depends(get_user_service),
) -> list[dict[str, Any]]:
    """
    List all users (sanitized).

    Admin only.
    """
    return await service.list_users(email)


@router.post("", status_code=201)
async def create_user(
    request: CreateUserRequest,
    service: IUserService = Depends(get_user_service),
) -> dict[str, Any]:
    """
    Register a new user.

    Fails with 400 if the email is already registered.
    """
    return await service.create_user(request)


# Registered before /{email} so the literal segments win
@router.patch(
    "/admin/{user_id}",
    dependencies=[Depends(require_admin_in_body("requestingAdminEmail"))],
)
async def set_admin_status(
    user_id: str,
    request: AdminStatusRequest,
    service: IUserService = Depends(get_user_service),
) -> dict[str, Any]:
    """
    Grant or revoke admin privilege.

    The requesting_admin_email in the body must belong to an existing admin.
    """
    return await service.set_admin_status(user_id, request)


@router.get("/role-check/{email}", response_model=RoleSummary)
async def check_role(
    email: str,
    service: IUserService = Depends(get_user_service),
) -> RoleSummary:
    """Get role information for a user."""
    return await service.check_role(email)


@router.get("/{email}")
async def get_user(
    email: str,
    service: IUserService = Depends(get_user_service),
) -> dict[str, Any]:
    """Get a user's public profile by email."""
    return await service.get_user(email)


@router.patch("/{email}")
async def update_user(
    email: str,
    request: UpdateUserRequest,
    service: IUserService = Depends(get_user_service),
) -> dict[str, Any]:
    """
    Update a user's profile.

    Email and admin status cannot be changed here.
    """
    return await service.update_user(email, request)
