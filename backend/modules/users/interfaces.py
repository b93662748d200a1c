"""
Users module interface.

The API layer depends on IUserService for all user operations.
"""

from typing import Protocol, Optional, Any, runtime_checkable

from .models import (
    AdminStatusRequest,
    CreateUserRequest,
    RoleSummary,
    UpdateUserRequest,
)


@runtime_checkable
class IUserService(Protocol):
    """
    Interface for user operations.

    Every method that returns a user returns its sanitized view.
    """

    async def list_users(self, caller_email: Optional[str]) -> list[dict[str, Any]]:
        """
        List all users. Admin only.

        Raises:
            MissingCallerEmailError: If caller_email is empty
            AdminPrivilegesRequiredError: If the caller is not an admin
        """
        ...

    async def get_user(self, email: str) -> dict[str, Any]:
        """
        Get any user's public profile by email. No authorization.

        Raises:
            UserNotFoundError: If no user has this email
        """
        ...

    async def create_user(self, request: CreateUserRequest) -> dict[str, Any]:
        """
        Register a new user.

        Raises:
            UserAlreadyExistsError: If the email is already registered
        """
        ...

    async def update_user(self, email: str, request: UpdateUserRequest) -> dict[str, Any]:
        """
        Apply a profile update.

        Raises:
            ImmutableUserFieldError: If the request touches email or isAdmin
            UserNotFoundError: If no user has this email
        """
        ...

    async def set_admin_status(self, user_id: str, request: AdminStatusRequest) -> dict[str, Any]:
        """
        Grant or revoke admin privilege. The requester must be an admin.

        Raises:
            MissingCallerEmailError: If requesting_admin_email is empty
            AdminPrivilegesRequiredError: If the requester is not an admin
            UserNotFoundError: If user_id does not resolve
        """
        ...

    async def check_role(self, email: str) -> RoleSummary:
        """
        Get role information for a user. No authorization.

        Raises:
            UserNotFoundError: If no user has this email
        """
        ...
