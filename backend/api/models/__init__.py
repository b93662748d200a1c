"""API models package."""

from .errors import ErrorResponse, EnvelopeErrorResponse

__all__ = [
    "ErrorResponse",
    "EnvelopeErrorResponse",
]
