"""
User repository for document store access.
"""

from typing import Any, Optional

from bson import ObjectId

from shared.database import IDocumentStore
from shared.repository import BaseRepository


class UserRepository(BaseRepository[dict]):
    """
    Repository for the users collection.

    Returns raw stored documents; redaction happens in the service layer.
    """

    def __init__(self, store: IDocumentStore, collection_name: str = "users") -> None:
        super().__init__(store, collection_name)

    async def find_by_email(self, email: str) -> Optional[dict[str, Any]]:
        return await self._collection.find_one({"email": email})

    async def find_by_id(self, user_id: ObjectId) -> Optional[dict[str, Any]]:
        return await self._collection.find_one({"_id": user_id})

    async def list_all(self) -> list[dict[str, Any]]:
        return await self._collection.find({})

    async def insert(self, document: dict[str, Any]) -> ObjectId:
        return await self._collection.insert_one(document)

    async def update_by_email(self, email: str, fields: dict[str, Any]) -> int:
        """$set fields on the user with this email. Returns matched count."""
        return await self._collection.update_one({"email": email}, set=fields)

    async def update_by_id(self, user_id: ObjectId, fields: dict[str, Any]) -> int:
        """$set fields on the user with this id. Returns matched count."""
        return await self._collection.update_one({"_id": user_id}, set=fields)
