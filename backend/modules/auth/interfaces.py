"""
Authorization module interface.

Other modules should depend on IAdminAuthorizer, not the concrete implementation.
This enables testing with mocks.
"""

from typing import Protocol, Optional, runtime_checkable

from .models import AuthorizationResult


@runtime_checkable
class IAdminAuthorizer(Protocol):
    """
    Interface for admin privilege checks.

    Privilege is always derived from the stored user record for the
    claimed email, never from a flag supplied by the client, and never
    cached between calls.
    """

    async def authorize(self, caller_email: Optional[str]) -> AuthorizationResult:
        """
        Check whether the caller currently holds admin privilege.

        Args:
            caller_email: Email identifying the caller

        Returns:
            AuthorizationResult; denied results carry 400 when the email
            is missing and 403 when the caller is unknown or not an admin
        """
        ...

    async def require_admin(self, caller_email: Optional[str]) -> None:
        """
        Like authorize(), but raises on denial.

        Raises:
            MissingCallerEmailError: If no email was supplied
            AdminPrivilegesRequiredError: If the caller is unknown or not an admin
        """
        ...
