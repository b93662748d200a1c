"""
Document store gateway for MongoDB.

Wraps a single shared AsyncMongoClient behind a narrow contract:
connect/close plus per-collection find_one, find, insert_one and
update_one. No business logic lives here.
"""

import logging
from typing import Any, Optional, Protocol, runtime_checkable

from bson import ObjectId
from bson.errors import InvalidId
from pymongo import AsyncMongoClient
from pymongo.asynchronous.collection import AsyncCollection
from pymongo.errors import PyMongoError

from .config import Settings
from .exceptions import ExternalServiceError

logger = logging.getLogger(__name__)

SERVICE_NAME = "mongodb"

# Sort specification: [(field, 1 | -1), ...]
SortSpec = list[tuple[str, int]]


class DatabaseError(ExternalServiceError):
    """Raised when a store operation fails."""

    def __init__(self, message: str = "Database operation failed", operation: Optional[str] = None):
        super().__init__(
            message,
            service=SERVICE_NAME,
            code="DATABASE_ERROR",
            details={"operation": operation} if operation else None,
        )


class DatabaseConnectionError(DatabaseError):
    """Raised when the initial connection to the store cannot be established."""

    def __init__(self, reason: str):
        super().__init__(f"Could not connect to MongoDB: {reason}", operation="connect")
        self.code = "DATABASE_CONNECTION_ERROR"


class WriteNotAcknowledgedError(DatabaseError):
    """Raised when the store does not acknowledge a write."""

    def __init__(self, collection: str):
        super().__init__(f"Write to {collection} was not acknowledged", operation="insert_one")
        self.code = "WRITE_NOT_ACKNOWLEDGED"
        self.details["collection"] = collection


@runtime_checkable
class IDocumentCollection(Protocol):
    """Interface for a single collection of documents."""

    async def find_one(
        self,
        filter: dict[str, Any],
        projection: Optional[dict[str, Any]] = None,
    ) -> Optional[dict[str, Any]]:
        """Return the first matching document, or None."""
        ...

    async def find(
        self,
        filter: Optional[dict[str, Any]] = None,
        sort: Optional[SortSpec] = None,
    ) -> list[dict[str, Any]]:
        """Return every matching document, optionally sorted."""
        ...

    async def insert_one(self, document: dict[str, Any]) -> ObjectId:
        """Insert a document and return its generated id."""
        ...

    async def update_one(
        self,
        filter: dict[str, Any],
        set: Optional[dict[str, Any]] = None,
        push: Optional[dict[str, Any]] = None,
    ) -> int:
        """
        Apply a partial update to the first matching document.

        Args:
            filter: Match criteria
            set: Fields to overwrite ($set)
            push: Values to append to array fields ($push)

        Returns:
            Number of matched documents (0 or 1)
        """
        ...


@runtime_checkable
class IDocumentStore(Protocol):
    """Interface for the document store connection."""

    async def connect(self) -> None:
        ...

    async def close(self) -> None:
        ...

    def collection(self, name: str) -> IDocumentCollection:
        ...

    async def server_status(self) -> dict[str, Any]:
        ...


class DocumentCollection:
    """MongoDB-backed implementation of IDocumentCollection."""

    def __init__(self, collection: AsyncCollection) -> None:
        self._collection = collection

    @property
    def name(self) -> str:
        return self._collection.name

    async def find_one(
        self,
        filter: dict[str, Any],
        projection: Optional[dict[str, Any]] = None,
    ) -> Optional[dict[str, Any]]:
        try:
            return await self._collection.find_one(filter, projection)
        except PyMongoError as e:
            logger.error("find_one on %s failed: %s", self.name, e)
            raise DatabaseError(operation="find_one") from e

    async def find(
        self,
        filter: Optional[dict[str, Any]] = None,
        sort: Optional[SortSpec] = None,
    ) -> list[dict[str, Any]]:
        try:
            cursor = self._collection.find(filter or {})
            if sort:
                cursor = cursor.sort(sort)
            return await cursor.to_list()
        except PyMongoError as e:
            logger.error("find on %s failed: %s", self.name, e)
            raise DatabaseError(operation="find") from e

    async def insert_one(self, document: dict[str, Any]) -> ObjectId:
        try:
            # insert_one writes the generated _id back into its argument
            result = await self._collection.insert_one(dict(document))
        except PyMongoError as e:
            logger.error("insert_one on %s failed: %s", self.name, e)
            raise DatabaseError(operation="insert_one") from e

        if not result.acknowledged:
            raise WriteNotAcknowledgedError(self.name)
        return result.inserted_id

    async def update_one(
        self,
        filter: dict[str, Any],
        set: Optional[dict[str, Any]] = None,
        push: Optional[dict[str, Any]] = None,
    ) -> int:
        update: dict[str, Any] = {}
        if set:
            update["$set"] = set
        if push:
            update["$push"] = push
        if not update:
            raise ValueError("update_one requires at least one of set or push")

        try:
            result = await self._collection.update_one(filter, update)
        except PyMongoError as e:
            logger.error("update_one on %s failed: %s", self.name, e)
            raise DatabaseError(operation="update_one") from e
        return result.matched_count


class DocumentStore:
    """
    Single shared MongoDB connection used by every in-flight request.

    The client is created lazily by connect() and released by close().
    """

    def __init__(self, uri: str, database_name: str, timeout_ms: int = 10000) -> None:
        self._uri = uri
        self._database_name = database_name
        self._timeout_ms = timeout_ms
        self._client: Optional[AsyncMongoClient] = None

    @classmethod
    def from_settings(cls, settings: Settings) -> "DocumentStore":
        """Build a store from application settings."""
        return cls(
            settings.mongodb_connection_uri,
            settings.database_name,
            timeout_ms=settings.mongodb_timeout_ms,
        )

    @property
    def is_connected(self) -> bool:
        return self._client is not None

    async def connect(self) -> None:
        """
        Open the client and verify the server answers a ping.

        Raises:
            DatabaseConnectionError: If the server cannot be reached
        """
        if self._client is not None:
            return

        client: AsyncMongoClient = AsyncMongoClient(
            self._uri,
            serverSelectionTimeoutMS=self._timeout_ms,
            tz_aware=True,
        )
        try:
            await client.aconnect()
            await client.admin.command("ping")
        except PyMongoError as e:
            await client.close()
            raise DatabaseConnectionError(str(e)) from e

        self._client = client
        logger.info("MongoDB connected (database=%s)", self._database_name)

    async def close(self) -> None:
        """Close the client. Safe to call more than once."""
        if self._client is None:
            return
        await self._client.close()
        self._client = None
        logger.info("MongoDB connection closed")

    def collection(self, name: str) -> DocumentCollection:
        """Get a gateway for one collection of the configured database."""
        if self._client is None:
            raise DatabaseError("Database is not connected", operation="collection")
        return DocumentCollection(self._client[self._database_name][name])

    async def server_status(self) -> dict[str, Any]:
        """Run serverStatus against the admin database."""
        if self._client is None:
            raise DatabaseError("Database is not connected", operation="server_status")
        try:
            return await self._client.admin.command({"serverStatus": 1})
        except PyMongoError as e:
            logger.error("serverStatus failed: %s", e)
            raise DatabaseError(operation="server_status") from e


def parse_object_id(value: Any) -> Optional[ObjectId]:
    """
    Convert a path id into an ObjectId.

    Returns None for anything that is not a valid ObjectId, so callers
    can treat malformed ids the same as ids that match nothing.
    """
    if isinstance(value, ObjectId):
        return value
    # ObjectId(None) would mint a fresh id
    if not isinstance(value, str):
        return None
    try:
        return ObjectId(value)
    except InvalidId:
        return None
