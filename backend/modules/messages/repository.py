"""
Message repository for document store access.
"""

from typing import Any, Optional

from bson import ObjectId

from shared.database import IDocumentStore
from shared.repository import BaseRepository

from .models import Message

NEWEST_FIRST = [("createdAt", -1)]


class MessageRepository(BaseRepository[Message]):
    """Repository for the contact messages collection."""

    def __init__(self, store: IDocumentStore, collection_name: str = "usersMessages") -> None:
        super().__init__(store, collection_name)

    async def insert(self, document: dict[str, Any]) -> ObjectId:
        return await self._collection.insert_one(document)

    async def get_by_id(self, message_id: ObjectId) -> Optional[Message]:
        document = await self._collection.find_one({"_id": message_id})
        return Message.from_document(document) if document else None

    async def list_all(self) -> list[Message]:
        documents = await self._collection.find({}, sort=NEWEST_FIRST)
        return [Message.from_document(d) for d in documents]

    async def list_by_user_email(self, user_email: str) -> list[Message]:
        documents = await self._collection.find({"userEmail": user_email}, sort=NEWEST_FIRST)
        return [Message.from_document(d) for d in documents]

    async def update(self, message_id: ObjectId, fields: dict[str, Any]) -> int:
        return await self._collection.update_one({"_id": message_id}, set=fields)
