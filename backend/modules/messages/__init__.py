"""
Messages module.

Contact-form submissions: public creation, per-user listing, and admin
listing and triage.
"""

from .interfaces import IMessageService
from .models import (
    CreateMessageRequest,
    Message,
    MessageStatus,
    UpdateMessageRequest,
    is_valid_email,
)
from .exceptions import (
    InvalidEmailError,
    MessageNotFoundError,
    NoMessageUpdateFieldsError,
)

__all__ = [
    "IMessageService",
    "CreateMessageRequest",
    "Message",
    "MessageStatus",
    "UpdateMessageRequest",
    "is_valid_email",
    "InvalidEmailError",
    "MessageNotFoundError",
    "NoMessageUpdateFieldsError",
]
