"""
Shared infrastructure for NSS backend.

This package contains cross-cutting concerns that are used by multiple modules:
- config: Centralized settings management
- database: MongoDB document store gateway
- exceptions: Base exception classes

Note: Business logic should NOT go here. This is for infrastructure only.
"""

from .config import Settings, get_settings
from .database import (
    DocumentStore,
    DocumentCollection,
    IDocumentStore,
    IDocumentCollection,
    DatabaseError,
    DatabaseConnectionError,
    WriteNotAcknowledgedError,
    parse_object_id,
)
from .exceptions import (
    NssError,
    ValidationError,
    ConflictError,
    AuthorizationError,
    NotFoundError,
    ExternalServiceError,
)
from .models import CamelModel, stringify_id, utc_now

__all__ = [
    "Settings",
    "get_settings",
    "DocumentStore",
    "DocumentCollection",
    "IDocumentStore",
    "IDocumentCollection",
    "DatabaseError",
    "DatabaseConnectionError",
    "WriteNotAcknowledgedError",
    "parse_object_id",
    "NssError",
    "ValidationError",
    "ConflictError",
    "AuthorizationError",
    "NotFoundError",
    "ExternalServiceError",
    "CamelModel",
    "stringify_id",
    "utc_now",
]
