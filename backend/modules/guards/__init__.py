"""
Guards module.

Security-guard personnel records with append-only transaction and
presence logs. Admin only.
"""

from .interfaces import IGuardService
from .models import (
    APPEND_ONLY_GUARD_FIELDS,
    AddPresenceRequest,
    AddTransactionRequest,
    CreateGuardRequest,
    Guard,
    PresenceEntry,
    Transaction,
    UpdateGuardRequest,
)
from .exceptions import GuardNotFoundError

__all__ = [
    "IGuardService",
    "APPEND_ONLY_GUARD_FIELDS",
    "AddPresenceRequest",
    "AddTransactionRequest",
    "CreateGuardRequest",
    "Guard",
    "PresenceEntry",
    "Transaction",
    "UpdateGuardRequest",
    "GuardNotFoundError",
]
