"""
Authorization module data models.
"""

from typing import Optional

from pydantic import BaseModel, Field


class AuthorizationResult(BaseModel):
    """Outcome of an admin check."""

    ok: bool = Field(..., description="Whether the caller holds admin privilege")
    status: Optional[int] = Field(None, description="HTTP status when denied")
    message: Optional[str] = Field(None, description="Reason when denied")

    model_config = {"frozen": True}

    @classmethod
    def allowed(cls) -> "AuthorizationResult":
        return cls(ok=True)

    @classmethod
    def denied(cls, status: int, message: str) -> "AuthorizationResult":
        return cls(ok=False, status=status, message=message)
