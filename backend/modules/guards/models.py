"""
Guards module data models.

A guard record carries two embedded logs, transactions and presence.
Both only grow by appending through their own endpoints; the generic
update never touches them.
"""

import math
from datetime import date, datetime, timezone
from typing import Annotated, Any, Optional, Union

from pydantic import BeforeValidator, ConfigDict, Field, StrictFloat, StrictInt, field_validator

from shared.models import CamelModel, stringify_id

TRANSACTIONS = "transactions"
PRESENCE = "presence"

# Excluded from every generic update
APPEND_ONLY_GUARD_FIELDS = frozenset({TRANSACTIONS, PRESENCE})

DEFAULT_PRESENCE_STATUS = "absent"


def _coerce_calendar_date(value: Any) -> Any:
    """Accept plain dates ("2024-05-01") where a datetime is stored."""
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day, tzinfo=timezone.utc)
    if isinstance(value, str) and len(value) == 10:
        try:
            parsed = date.fromisoformat(value)
        except ValueError:
            return value
        return datetime(parsed.year, parsed.month, parsed.day, tzinfo=timezone.utc)
    return value


# BSON stores datetimes only, so calendar dates are promoted to midnight UTC
Timestamp = Annotated[datetime, BeforeValidator(_coerce_calendar_date)]


def _lenient_amount(value: Any) -> Any:
    """Seed amounts: numeric strings are parsed, anything else non-numeric is 0."""
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, str):
        try:
            value = float(value)
        except ValueError:
            return 0
        if value.is_integer():
            value = int(value)
    if isinstance(value, (int, float)):
        return value if math.isfinite(value) else 0
    return 0


def _text_or_none(value: Any) -> Any:
    return value if isinstance(value, str) else None


SeedAmount = Annotated[Union[int, float], BeforeValidator(_lenient_amount)]
SeedText = Annotated[Optional[str], BeforeValidator(_text_or_none)]


class Transaction(CamelModel):
    """One entry of a guard's transaction log."""

    type: Optional[str] = None
    amount: Union[int, float] = 0
    date: Timestamp
    note: Optional[str] = None


class PresenceEntry(CamelModel):
    """One entry of a guard's presence log."""

    date: Timestamp
    status: str = DEFAULT_PRESENCE_STATUS


class TransactionSeed(CamelModel):
    """Loosely typed transaction supplied when creating a guard."""

    type: SeedText = None
    amount: SeedAmount = 0
    date: Optional[Timestamp] = None
    note: SeedText = None

    def normalize(self, now: datetime) -> Transaction:
        return Transaction(type=self.type, amount=self.amount, date=self.date or now, note=self.note)


class PresenceSeed(CamelModel):
    """Loosely typed presence entry supplied when creating a guard."""

    date: Optional[Timestamp] = None
    status: SeedText = None

    def normalize(self, now: datetime) -> PresenceEntry:
        return PresenceEntry(date=self.date or now, status=self.status or DEFAULT_PRESENCE_STATUS)


def _mappings_only(value: Any) -> Any:
    # Anything but a list seeds an empty log; non-object items are dropped
    if not isinstance(value, list):
        return []
    return [item for item in value if isinstance(item, dict)]


class CreateGuardRequest(CamelModel):
    """Request to create a guard record."""

    name: str = Field(..., min_length=1)
    phone: str = Field(..., min_length=1)
    nid: str = Field(..., min_length=1, description="National id number")
    address: Optional[str] = None
    join_date: Optional[Timestamp] = Field(None, description="Defaults to now")
    duty_place: str = Field(..., min_length=1)
    duty_time: str = Field(..., min_length=1)
    transactions: list[TransactionSeed] = Field(default_factory=list)
    presence: list[PresenceSeed] = Field(default_factory=list)

    @field_validator("transactions", "presence", mode="before")
    @classmethod
    def _seed_lists(cls, value: Any) -> Any:
        return _mappings_only(value)


class UpdateGuardRequest(CamelModel):
    """
    Sparse update of a guard's core fields.

    Unknown keys, including the append-only logs, are ignored.
    """

    model_config = ConfigDict(extra="ignore")

    name: Optional[str] = Field(None, min_length=1)
    phone: Optional[str] = Field(None, min_length=1)
    nid: Optional[str] = Field(None, min_length=1)
    address: Optional[str] = None
    join_date: Optional[Timestamp] = None
    duty_place: Optional[str] = Field(None, min_length=1)
    duty_time: Optional[str] = Field(None, min_length=1)

    def changes(self) -> dict[str, Any]:
        """Provided fields keyed as stored, never including the logs."""
        fields = self.to_document(exclude_unset=True, exclude_none=True)
        return {k: v for k, v in fields.items() if k not in APPEND_ONLY_GUARD_FIELDS}


class AddTransactionRequest(CamelModel):
    """Request to append a transaction."""

    type: str = Field(..., min_length=1)
    amount: Union[StrictInt, StrictFloat]
    date: Optional[Timestamp] = Field(None, description="Defaults to now")
    note: Optional[str] = None


class AddPresenceRequest(CamelModel):
    """Request to append a presence entry."""

    date: Timestamp
    status: str = Field(..., min_length=1)


class Guard(CamelModel):
    """A stored guard record."""

    id: str = Field(..., alias="_id")
    name: str
    phone: str
    nid: str
    address: Optional[str] = None
    join_date: Timestamp
    duty_place: str
    duty_time: str
    transactions: list[Transaction] = Field(default_factory=list)
    presence: list[PresenceEntry] = Field(default_factory=list)
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_document(cls, document: dict[str, Any]) -> "Guard":
        return cls.model_validate(stringify_id(document))


class GuardResponse(CamelModel):
    """Envelope for a single guard."""

    success: bool = True
    data: Guard


class GuardListResponse(CamelModel):
    """Envelope for a list of guards."""

    success: bool = True
    count: int
    data: list[Guard]


class TransactionListResponse(CamelModel):
    """Envelope for a guard's transaction log."""

    success: bool = True
    count: int
    data: list[Transaction]


class PresenceListResponse(CamelModel):
    """Envelope for a guard's presence log."""

    success: bool = True
    count: int
    data: list[PresenceEntry]
