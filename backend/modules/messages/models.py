"""
Messages module data models.

Contact-form submissions and the admin view over them.
"""

import re
from datetime import datetime
from enum import Enum
from typing import Any, Optional

from pydantic import Field, StrictBool

from shared.models import CamelModel, stringify_id

# local@domain.tld, no whitespace and a single @
EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


def is_valid_email(value: str) -> bool:
    """Check an email against the basic local@domain.tld shape."""
    return bool(EMAIL_PATTERN.match(value))


class MessageStatus(str, Enum):
    """Handling status of a message."""

    NEW = "new"
    IN_PROGRESS = "in-progress"
    RESOLVED = "resolved"


class CreateMessageRequest(CamelModel):
    """Contact-form submission."""

    name: str = Field(..., min_length=1, description="Sender name")
    email: str = Field(..., min_length=1, description="Sender email")
    phone: Optional[str] = Field(None, description="Sender phone")
    message: str = Field(..., min_length=1, description="Message body")
    user_id: Any = Field(None, description="Linked account id, stored as sent")
    user_email: Optional[str] = Field(None, description="Linked account email")


class UpdateMessageRequest(CamelModel):
    """Admin update of a message's status or read flag."""

    status: Optional[MessageStatus] = None
    is_read: Optional[StrictBool] = None
    admin_email: Optional[str] = Field(None, description="Email of the requesting admin")

    def has_update_fields(self) -> bool:
        return bool({"status", "is_read"} & self.model_fields_set)

    def changes(self) -> dict[str, Any]:
        """Only the provided, non-null fields, keyed as stored."""
        fields: dict[str, Any] = {}
        if self.status is not None:
            fields["status"] = self.status.value
        if self.is_read is not None:
            fields["isRead"] = self.is_read
        return fields


class Message(CamelModel):
    """A stored message."""

    id: str = Field(..., alias="_id")
    name: str
    email: str
    phone: Optional[str] = None
    message: str
    user_id: Any = None
    user_email: Optional[str] = None
    # Enforced on write only; older records may hold other values
    status: str = MessageStatus.NEW.value
    is_read: bool = False
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_document(cls, document: dict[str, Any]) -> "Message":
        return cls.model_validate(stringify_id(document))


class MessageResponse(CamelModel):
    """Envelope for a single message."""

    success: bool = True
    message: str
    data: Message


class MessageListResponse(CamelModel):
    """Envelope for a list of messages."""

    success: bool = True
    count: int
    data: list[Message]

    @classmethod
    def of(cls, messages: list[Message]) -> "MessageListResponse":
        return cls(count=len(messages), data=messages)
