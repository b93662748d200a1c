"""
Base exception classes for the NSS backend.

Each module should define its own exceptions that inherit from these bases.
Every base carries the HTTP status the API layer answers with, so the
application error handler never needs to know about module exceptions.
"""

from typing import Optional, Any


class NssError(Exception):
    """
    Base exception for all NSS errors.

    All custom exceptions should inherit from this class.
    """

    status_code: int = 500

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to a dictionary for logs and diagnostics."""
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }


class ValidationError(NssError):
    """Input validation failed (malformed or missing input)."""

    status_code = 400


class ConflictError(NssError):
    """
    Resource already exists.

    Answered with 400 rather than 409 to keep the status code clients
    already handle for duplicate registrations.
    """

    status_code = 400


class AuthorizationError(NssError):
    """Authorization failed (insufficient permissions)."""

    status_code = 403


class NotFoundError(NssError):
    """Resource not found."""

    status_code = 404


class ExternalServiceError(NssError):
    """Error communicating with an external service."""

    status_code = 500

    def __init__(
        self,
        message: str,
        service: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message, code, details)
        self.service = service
        self.details["service"] = service
