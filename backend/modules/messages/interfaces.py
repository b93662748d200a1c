"""
Messages module interface.
"""

from typing import Protocol, Optional, runtime_checkable

from .models import CreateMessageRequest, Message, UpdateMessageRequest


@runtime_checkable
class IMessageService(Protocol):
    """Interface for contact message operations."""

    async def create_message(self, request: CreateMessageRequest) -> Message:
        """
        Store a contact-form submission. Open to anyone.

        Raises:
            InvalidEmailError: If the email is malformed
            WriteNotAcknowledgedError: If the store does not acknowledge the write
        """
        ...

    async def list_messages(self, caller_email: Optional[str]) -> list[Message]:
        """
        List every message, newest first. Admin only.
        """
        ...

    async def update_message(self, message_id: str, request: UpdateMessageRequest) -> Message:
        """
        Update status and/or isRead. Admin only.

        Raises:
            NoMessageUpdateFieldsError: If neither field is present
            MessageNotFoundError: If the id does not resolve
        """
        ...

    async def list_user_messages(self, user_email: str) -> list[Message]:
        """
        List a user's messages, newest first.

        Raises:
            InvalidEmailError: If user_email is malformed
        """
        ...
