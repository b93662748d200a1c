"""
Shared test fixtures and utilities.

This module provides common test infrastructure used across all test modules,
most importantly an in-memory implementation of the document store contract.
"""

from copy import deepcopy
from datetime import datetime, timezone
from typing import Any, Optional

import pytest
from bson import ObjectId
from fastapi.testclient import TestClient

from api.app import create_app
from api.dependencies import ServiceContainer, get_container
from shared.config import Settings


ADMIN_EMAIL = "admin@example.com"
MEMBER_EMAIL = "member@example.com"


class InMemoryCollection:
    """IDocumentCollection backed by a list of dicts. Filters are exact-match."""

    def __init__(self, name: str) -> None:
        self.name = name
        self.documents: list[dict[str, Any]] = []

    @staticmethod
    def _matches(document: dict[str, Any], filter: Optional[dict[str, Any]]) -> bool:
        return all(document.get(key) == value for key, value in (filter or {}).items())

    async def find_one(
        self,
        filter: dict[str, Any],
        projection: Optional[dict[str, Any]] = None,
    ) -> Optional[dict[str, Any]]:
        for document in self.documents:
            if self._matches(document, filter):
                result = deepcopy(document)
                if projection:
                    keep = {k for k, v in projection.items() if v} | {"_id"}
                    result = {k: v for k, v in result.items() if k in keep}
                return result
        return None

    async def find(
        self,
        filter: Optional[dict[str, Any]] = None,
        sort: Optional[list[tuple[str, int]]] = None,
    ) -> list[dict[str, Any]]:
        results = [deepcopy(d) for d in self.documents if self._matches(d, filter)]
        for key, direction in reversed(sort or []):
            results.sort(key=lambda d: d.get(key), reverse=direction < 0)
        return results

    async def insert_one(self, document: dict[str, Any]) -> ObjectId:
        stored = deepcopy(document)
        stored.setdefault("_id", ObjectId())
        self.documents.append(stored)
        return stored["_id"]

    async def update_one(
        self,
        filter: dict[str, Any],
        set: Optional[dict[str, Any]] = None,
        push: Optional[dict[str, Any]] = None,
    ) -> int:
        for document in self.documents:
            if self._matches(document, filter):
                document.update(deepcopy(set or {}))
                for key, value in (push or {}).items():
                    document.setdefault(key, []).append(deepcopy(value))
                return 1
        return 0


class InMemoryDocumentStore:
    """IDocumentStore keeping every collection in memory."""

    def __init__(self) -> None:
        self.collections: dict[str, InMemoryCollection] = {}
        self.connected = False
        self.status: dict[str, Any] = {"ok": 1.0, "host": "test-host:27017"}

    async def connect(self) -> None:
        self.connected = True

    async def close(self) -> None:
        self.connected = False

    def collection(self, name: str) -> InMemoryCollection:
        if name not in self.collections:
            self.collections[name] = InMemoryCollection(name)
        return self.collections[name]

    async def server_status(self) -> dict[str, Any]:
        return dict(self.status)

    def seed(self, collection: str, document: dict[str, Any]) -> ObjectId:
        """Insert a document synchronously (for fixtures)."""
        stored = deepcopy(document)
        stored.setdefault("_id", ObjectId())
        self.collection(collection).documents.append(stored)
        return stored["_id"]


def make_user(email: str, is_admin: bool = False, **extra: Any) -> dict[str, Any]:
    """Helper to create a stored user document."""
    now = datetime.now(timezone.utc)
    return {
        "email": email,
        "isAdmin": is_admin,
        "emailVerified": False,
        "password": "hunter2",
        "firebaseUID": "firebase-uid-123",
        "createdAt": now,
        "updatedAt": now,
        "lastLogin": now,
        **extra,
    }


@pytest.fixture
def settings() -> Settings:
    """Settings with defaults only (no .env)."""
    return Settings(_env_file=None)


@pytest.fixture
def store() -> InMemoryDocumentStore:
    """Empty in-memory document store."""
    return InMemoryDocumentStore()


@pytest.fixture
def admin_id(store: InMemoryDocumentStore) -> ObjectId:
    """Seed an admin user and return its id."""
    return store.seed("users", make_user(ADMIN_EMAIL, is_admin=True, name="Admin"))


@pytest.fixture
def member_id(store: InMemoryDocumentStore) -> ObjectId:
    """Seed a non-admin user and return its id."""
    return store.seed("users", make_user(MEMBER_EMAIL, name="Member"))


@pytest.fixture
def container(store: InMemoryDocumentStore, settings: Settings) -> ServiceContainer:
    """Service container wired to the in-memory store."""
    return ServiceContainer(store=store, settings=settings)


@pytest.fixture
def app(container: ServiceContainer):
    """Create a fresh app using the in-memory container."""
    app = create_app()
    app.dependency_overrides[get_container] = lambda: container
    yield app
    app.dependency_overrides.clear()


@pytest.fixture
def client(app) -> TestClient:
    """Test client; the lifespan (real MongoDB) is not started."""
    return TestClient(app)
