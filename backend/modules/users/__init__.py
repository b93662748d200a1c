"""
Users module.

Registration, profile reads and updates, admin-status changes and role
checks for the users collection.

Public API:
- IUserService: Interface for user operations
- redact: Public view of a stored user
- Request models and user exceptions
"""

from .interfaces import IUserService
from .models import (
    AdminStatusRequest,
    CreateUserRequest,
    RoleSummary,
    UpdateUserRequest,
)
from .sanitizer import SENSITIVE_USER_FIELDS, redact
from .exceptions import (
    UserNotFoundError,
    UserAlreadyExistsError,
    ImmutableUserFieldError,
)

__all__ = [
    # Interface
    "IUserService",
    # Models
    "AdminStatusRequest",
    "CreateUserRequest",
    "RoleSummary",
    "UpdateUserRequest",
    # Sanitizer
    "SENSITIVE_USER_FIELDS",
    "redact",
    # Exceptions
    "UserNotFoundError",
    "UserAlreadyExistsError",
    "ImmutableUserFieldError",
]
