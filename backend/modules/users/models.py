"""
Users module data models.

Stored user documents keep arbitrary caller-supplied profile fields,
so requests declare the known fields and allow extra ones through.
"""

from typing import Any, Optional

from pydantic import ConfigDict, Field, StrictBool

from shared.models import CamelModel

# Only changeable through the dedicated admin-status path (isAdmin) or never (email)
IMMUTABLE_USER_FIELDS = ("email", "isAdmin")

# Set by the service on creation; caller-supplied values are dropped
SERVER_MANAGED_USER_FIELDS = frozenset(
    {"_id", "emailVerified", "createdAt", "updatedAt", "lastLogin"}
)

# Never taken from an update payload; updatedAt is refreshed by the service
NON_UPDATABLE_USER_FIELDS = frozenset({"_id", "updatedAt"})


class CreateUserRequest(CamelModel):
    """Request to register a new user."""

    model_config = ConfigDict(extra="allow")

    email: str = Field(..., min_length=1, description="Unique email address")
    is_admin: bool = Field(default=False, description="Initial admin flag")
    name: Optional[str] = Field(None, description="Display name")
    photo_url: Optional[str] = Field(None, alias="photoURL", description="Avatar URL")
    phone: Optional[str] = Field(None, description="Phone number")

    def profile_fields(self) -> dict[str, Any]:
        """Caller-supplied fields, minus anything the service owns."""
        fields = self.to_document(exclude_unset=True, exclude_none=True)
        return {k: v for k, v in fields.items() if k not in SERVER_MANAGED_USER_FIELDS}


class UpdateUserRequest(CamelModel):
    """
    Sparse profile update.

    email and is_admin are accepted here only so their presence can be
    detected and rejected; they are never applied.
    """

    model_config = ConfigDict(extra="allow")

    email: Any = None
    is_admin: Any = None
    name: Optional[str] = None
    photo_url: Optional[str] = Field(None, alias="photoURL")
    phone: Optional[str] = None
    address: Optional[str] = None

    def immutable_fields_present(self) -> list[str]:
        """camelCase names of immutable fields included in the request."""
        present = self.to_document(exclude_unset=True)
        return [name for name in IMMUTABLE_USER_FIELDS if name in present]

    def changes(self) -> dict[str, Any]:
        """Fields to $set, shallow per key."""
        fields = self.to_document(exclude_unset=True)
        return {
            k: v
            for k, v in fields.items()
            if k not in IMMUTABLE_USER_FIELDS and k not in NON_UPDATABLE_USER_FIELDS
        }


class AdminStatusRequest(CamelModel):
    """Request to grant or revoke admin privilege."""

    is_admin: StrictBool = Field(..., description="New admin flag")
    requesting_admin_email: Optional[str] = Field(
        None, description="Email of the admin performing the change"
    )


class RoleSummary(CamelModel):
    """Role information for a single user."""

    email: str
    is_admin: bool = False
    role: str = "user"
