"""
Error response models.

Standardized error responses for the API.
"""

from pydantic import BaseModel


class ErrorResponse(BaseModel):
    """Error format used by the user endpoints."""

    message: str


class EnvelopeErrorResponse(BaseModel):
    """Error format used by the message and guard endpoints."""

    success: bool = False
    message: str
