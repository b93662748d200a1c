"""
Users module exceptions.
"""

from shared.exceptions import (
    AuthorizationError,
    ConflictError,
    NotFoundError,
)


class UserNotFoundError(NotFoundError):
    """Raised when no user matches the given email or id."""

    def __init__(self, identifier: str):
        super().__init__(
            "User not found",
            code="USER_NOT_FOUND",
            details={"identifier": identifier},
        )


class UserAlreadyExistsError(ConflictError):
    """Raised when registering an email that is already taken."""

    def __init__(self, email: str):
        super().__init__(
            "User already exists",
            code="USER_ALREADY_EXISTS",
            details={"email": email},
        )


class ImmutableUserFieldError(AuthorizationError):
    """Raised when a profile update tries to change email or admin status."""

    def __init__(self, fields: list[str]):
        super().__init__(
            "Cannot update email or admin status through this endpoint",
            code="IMMUTABLE_USER_FIELD",
            details={"fields": fields},
        )
