"""
Authorization module exceptions.

These exceptions are raised by the admin authorizer and caught by the
application error handlers to return the matching HTTP responses.
"""

from shared.exceptions import AuthorizationError, ValidationError


class MissingCallerEmailError(ValidationError):
    """Raised when a privileged request does not identify its caller."""

    def __init__(self, message: str = "email required"):
        super().__init__(message, code="MISSING_CALLER_EMAIL")


class AdminPrivilegesRequiredError(AuthorizationError):
    """
    Raised when the caller is not an admin.

    Also raised when the caller does not exist at all, so privileged
    routes never reveal whether an account is registered.
    """

    def __init__(self, email: str, message: str = "Admin privileges required"):
        super().__init__(
            message,
            code="ADMIN_PRIVILEGES_REQUIRED",
            details={"email": email},
        )
