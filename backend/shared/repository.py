"""
Base repository class for document store access.

Provides a common abstraction layer for all repositories, encapsulating
collection access and providing shared utilities for data operations.
"""

from typing import TypeVar, Generic

from .database import IDocumentCollection, IDocumentStore


T = TypeVar("T")


class BaseRepository(Generic[T]):
    """
    Base class for all repositories.

    Provides common functionality for document operations:
    - Collection access via self._collection
    - Generic type parameter for model type hints

    Subclasses should implement domain-specific data access methods
    and handle document-to-model mapping internally. Repositories do NOT
    perform authorization checks; that belongs to the service layer.

    Example:
        class GuardRepository(BaseRepository[Guard]):
            async def get_by_id(self, guard_id: ObjectId) -> Optional[Guard]:
                doc = await self._collection.find_one({"_id": guard_id})
                return Guard.from_document(doc) if doc else None
    """

    def __init__(self, store: IDocumentStore, collection_name: str) -> None:
        """
        Initialize the repository with a document store.

        Args:
            store: Connected document store.
            collection_name: Name of the collection this repository owns.
        """
        self._store = store
        self._collection_name = collection_name

    @property
    def _collection(self) -> IDocumentCollection:
        # Resolved per call so a repository never outlives a reconnect
        return self._store.collection(self._collection_name)
