"""
Messages service implementation.
"""

import logging
from typing import Optional

from modules.auth.interfaces import IAdminAuthorizer
from shared.database import parse_object_id
from shared.models import utc_now

from .exceptions import (
    InvalidEmailError,
    MessageNotFoundError,
    NoMessageUpdateFieldsError,
)
from .interfaces import IMessageService
from .models import (
    CreateMessageRequest,
    Message,
    MessageStatus,
    UpdateMessageRequest,
    is_valid_email,
)
from .repository import MessageRepository

logger = logging.getLogger(__name__)


class MessageService(IMessageService):
    """Message service backed by the contact messages collection."""

    def __init__(self, repository: MessageRepository, authorizer: IAdminAuthorizer):
        self._repository = repository
        self._authorizer = authorizer

    async def create_message(self, request: CreateMessageRequest) -> Message:
        if not is_valid_email(request.email):
            raise InvalidEmailError(request.email)

        now = utc_now()
        document = {
            "name": request.name,
            "email": request.email,
            "phone": request.phone or None,
            "message": request.message,
            "userId": request.user_id or None,
            # Anonymous submissions are filed under the form email
            "userEmail": request.user_email or request.email,
            "status": MessageStatus.NEW.value,
            "createdAt": now,
            "updatedAt": now,
            "isRead": False,
        }

        message_id = await self._repository.insert(document)
        logger.info("Stored contact message %s from %s", message_id, request.email)
        return Message.from_document({"_id": message_id, **document})

    async def list_messages(self, caller_email: Optional[str]) -> list[Message]:
        await self._authorizer.require_admin(caller_email)
        return await self._repository.list_all()

    async def update_message(self, message_id: str, request: UpdateMessageRequest) -> Message:
        await self._authorizer.require_admin(request.admin_email)

        if not request.has_update_fields():
            raise NoMessageUpdateFieldsError()

        object_id = parse_object_id(message_id)
        if object_id is None:
            raise MessageNotFoundError(message_id)

        matched = await self._repository.update(
            object_id,
            {**request.changes(), "updatedAt": utc_now()},
        )
        if matched == 0:
            raise MessageNotFoundError(message_id)

        updated = await self._repository.get_by_id(object_id)
        if updated is None:
            raise MessageNotFoundError(message_id)
        return updated

    async def list_user_messages(self, user_email: str) -> list[Message]:
        if not is_valid_email(user_email):
            raise InvalidEmailError(user_email)
        return await self._repository.list_by_user_email(user_email)
