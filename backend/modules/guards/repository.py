"""
Guard repository for document store access.

Appends go through $push so concurrent appends to the same log both land.
"""

from datetime import datetime
from typing import Any, Optional

from bson import ObjectId

from shared.database import IDocumentStore
from shared.repository import BaseRepository

from .models import Guard, PresenceEntry, Transaction, PRESENCE, TRANSACTIONS


class GuardRepository(BaseRepository[Guard]):
    """Repository for the guards collection."""

    def __init__(self, store: IDocumentStore, collection_name: str = "guards") -> None:
        super().__init__(store, collection_name)

    async def insert(self, document: dict[str, Any]) -> ObjectId:
        return await self._collection.insert_one(document)

    async def get_by_id(self, guard_id: ObjectId) -> Optional[Guard]:
        document = await self._collection.find_one({"_id": guard_id})
        return Guard.from_document(document) if document else None

    async def list_all(self) -> list[Guard]:
        documents = await self._collection.find({})
        return [Guard.from_document(d) for d in documents]

    async def update(self, guard_id: ObjectId, fields: dict[str, Any]) -> int:
        """$set core fields. Returns matched count."""
        return await self._collection.update_one({"_id": guard_id}, set=fields)

    async def append_transaction(
        self, guard_id: ObjectId, entry: Transaction, updated_at: datetime
    ) -> int:
        return await self._append(guard_id, TRANSACTIONS, entry.to_document(), updated_at)

    async def append_presence(
        self, guard_id: ObjectId, entry: PresenceEntry, updated_at: datetime
    ) -> int:
        return await self._append(guard_id, PRESENCE, entry.to_document(), updated_at)

    async def get_transactions(self, guard_id: ObjectId) -> Optional[list[Transaction]]:
        """Transaction log only; None if the guard does not exist."""
        entries = await self._get_log(guard_id, TRANSACTIONS)
        return None if entries is None else [Transaction.model_validate(e) for e in entries]

    async def get_presence(self, guard_id: ObjectId) -> Optional[list[PresenceEntry]]:
        """Presence log only; None if the guard does not exist."""
        entries = await self._get_log(guard_id, PRESENCE)
        return None if entries is None else [PresenceEntry.model_validate(e) for e in entries]

    async def _append(
        self, guard_id: ObjectId, field: str, entry: dict[str, Any], updated_at: datetime
    ) -> int:
        return await self._collection.update_one(
            {"_id": guard_id},
            set={"updatedAt": updated_at},
            push={field: entry},
        )

    async def _get_log(self, guard_id: ObjectId, field: str) -> Optional[list[dict[str, Any]]]:
        document = await self._collection.find_one({"_id": guard_id}, projection={field: 1})
        if document is None:
            return None
        return document.get(field) or []
