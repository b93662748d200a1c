"""
Dependency injection setup for FastAPI.

This module provides the "container" that wires together all module
implementations. Each module exposes its service through an interface,
and this file creates the concrete implementations over the shared
document store.
"""

from typing import TYPE_CHECKING, Optional

from fastapi import Depends, Query, Request

from shared.config import Settings, get_settings
from shared.database import DatabaseError, IDocumentStore

# Type checking imports for interfaces (avoids circular imports)
if TYPE_CHECKING:
    from modules.auth.interfaces import IAdminAuthorizer
    from modules.users.interfaces import IUserService
    from modules.users.repository import UserRepository
    from modules.messages.interfaces import IMessageService
    from modules.guards.interfaces import IGuardService


class ServiceContainer:
    """
    Container for all service instances.

    Holds the single document store connection shared by every request.
    Services are created lazily on first access and cached; none of them
    cache data, so a cached service never serves stale authorization.
    Use reset() to clear all cached services for testing.
    """

    def __init__(
        self,
        store: Optional[IDocumentStore] = None,
        settings: Optional[Settings] = None,
    ) -> None:
        self._store = store
        self._settings = settings or get_settings()
        self._user_repository: "UserRepository | None" = None
        self._authorizer: "IAdminAuthorizer | None" = None
        self._user_service: "IUserService | None" = None
        self._message_service: "IMessageService | None" = None
        self._guard_service: "IGuardService | None" = None

    @property
    def store(self) -> IDocumentStore:
        """Get the connected document store."""
        if self._store is None:
            raise DatabaseError("Database is not connected", operation="store")
        return self._store

    def attach_store(self, store: IDocumentStore) -> None:
        """Use a newly connected store; drops services bound to the old one."""
        self.reset()
        self._store = store

    @property
    def user_repository(self) -> "UserRepository":
        """Get the user repository instance."""
        if self._user_repository is None:
            from modules.users.repository import UserRepository
            self._user_repository = UserRepository(self.store, self._settings.users_collection)
        return self._user_repository

    @property
    def authorizer(self) -> "IAdminAuthorizer":
        """Get the admin authorizer instance."""
        if self._authorizer is None:
            from modules.auth.service import AdminAuthorizer
            self._authorizer = AdminAuthorizer(self.user_repository)
        return self._authorizer

    @property
    def users(self) -> "IUserService":
        """Get the user service instance."""
        if self._user_service is None:
            from modules.users.service import UserService
            self._user_service = UserService(self.user_repository, self.authorizer)
        return self._user_service

    @property
    def messages(self) -> "IMessageService":
        """Get the message service instance."""
        if self._message_service is None:
            from modules.messages.repository import MessageRepository
            from modules.messages.service import MessageService
            self._message_service = MessageService(
                MessageRepository(self.store, self._settings.messages_collection),
                self.authorizer,
            )
        return self._message_service

    @property
    def guards(self) -> "IGuardService":
        """Get the guard service instance."""
        if self._guard_service is None:
            from modules.guards.repository import GuardRepository
            from modules.guards.service import GuardService
            self._guard_service = GuardService(
                GuardRepository(self.store, self._settings.guards_collection),
                self.authorizer,
            )
        return self._guard_service

    def reset(self) -> None:
        """
        Reset all cached services.

        This is primarily for testing - allows tests to get fresh
        service instances with different mock dependencies.
        """
        self._user_repository = None
        self._authorizer = None
        self._user_service = None
        self._message_service = None
        self._guard_service = None


# Module-level container singleton
_container: ServiceContainer | None = None


def get_container() -> ServiceContainer:
    """Get the singleton service container."""
    global _container
    if _container is None:
        _container = ServiceContainer()
    return _container


def reset_container() -> None:
    """
    Reset the service container.

    This clears the cached container, so the next call to get_container()
    will create a fresh container with new service instances.

    Primarily used for testing.
    """
    global _container
    _container = None


# FastAPI dependency functions
# These are the functions that should be used in route Depends() calls


def get_user_service(container: ServiceContainer = Depends(get_container)) -> "IUserService":
    """FastAPI dependency for user service."""
    return container.users


def get_message_service(container: ServiceContainer = Depends(get_container)) -> "IMessageService":
    """FastAPI dependency for message service."""
    return container.messages


def get_guard_service(container: ServiceContainer = Depends(get_container)) -> "IGuardService":
    """FastAPI dependency for guard service."""
    return container.guards


# Admin gates. Declared as route dependencies so the caller is checked
# before FastAPI validates the request body.


async def require_admin_caller(
    email: Optional[str] = Query(default=None, description="Email of the requesting admin"),
    container: ServiceContainer = Depends(get_container),
) -> None:
    """Admin check on the ?email= caller."""
    await container.authorizer.require_admin(email)


def require_admin_in_body(field: str):
    """
    Build an admin check on the caller email carried in the JSON body.

    Args:
        field: camelCase body key holding the caller email
    """

    async def dependency(
        request: Request,
        container: ServiceContainer = Depends(get_container),
    ) -> None:
        try:
            body = await request.json()
        except ValueError:
            body = None
        email = body.get(field) if isinstance(body, dict) else None
        await container.authorizer.require_admin(email if isinstance(email, str) else None)

    return dependency
