"""
Authorization module.

Decides whether a caller, identified by email, holds admin privilege.

Public API:
- IAdminAuthorizer: Interface for admin checks
- AuthorizationResult: Outcome of a check
- Auth exceptions: MissingCallerEmailError, AdminPrivilegesRequiredError
"""

from .interfaces import IAdminAuthorizer
from .models import AuthorizationResult
from .exceptions import (
    MissingCallerEmailError,
    AdminPrivilegesRequiredError,
)

__all__ = [
    # Interface
    "IAdminAuthorizer",
    # Models
    "AuthorizationResult",
    # Exceptions
    "MissingCallerEmailError",
    "AdminPrivilegesRequiredError",
]
