"""
Guards module interface.

Every operation is admin only; caller_email identifies the caller and is
checked before any data access.
"""

from typing import Protocol, Optional, runtime_checkable

from .models import (
    AddPresenceRequest,
    AddTransactionRequest,
    CreateGuardRequest,
    Guard,
    PresenceEntry,
    Transaction,
    UpdateGuardRequest,
)


@runtime_checkable
class IGuardService(Protocol):
    """
    Interface for guard personnel operations.

    All methods raise MissingCallerEmailError or AdminPrivilegesRequiredError
    when the caller is not an admin, and GuardNotFoundError when a guard id
    does not resolve.
    """

    async def list_guards(self, caller_email: Optional[str]) -> list[Guard]:
        ...

    async def get_guard(self, caller_email: Optional[str], guard_id: str) -> Guard:
        ...

    async def create_guard(self, caller_email: Optional[str], request: CreateGuardRequest) -> Guard:
        """Create a guard, seeding its logs from the request."""
        ...

    async def update_guard(
        self, caller_email: Optional[str], guard_id: str, request: UpdateGuardRequest
    ) -> Guard:
        """Update core fields; the logs are never replaced."""
        ...

    async def add_transaction(
        self, caller_email: Optional[str], guard_id: str, request: AddTransactionRequest
    ) -> Guard:
        """Append to the transaction log and return the full guard."""
        ...

    async def add_presence(
        self, caller_email: Optional[str], guard_id: str, request: AddPresenceRequest
    ) -> Guard:
        """Append to the presence log and return the full guard."""
        ...

    async def get_transactions(self, caller_email: Optional[str], guard_id: str) -> list[Transaction]:
        ...

    async def get_presence(self, caller_email: Optional[str], guard_id: str) -> list[PresenceEntry]:
        ...
