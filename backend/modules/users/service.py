"""
Users service implementation.

Composes the user repository, the admin authorizer and the sanitizer.
"""

import logging
from typing import Optional, Any

from modules.auth.interfaces import IAdminAuthorizer
from shared.database import parse_object_id
from shared.models import utc_now

from .exceptions import (
    ImmutableUserFieldError,
    UserAlreadyExistsError,
    UserNotFoundError,
)
from .interfaces import IUserService
from .models import (
    AdminStatusRequest,
    CreateUserRequest,
    RoleSummary,
    UpdateUserRequest,
)
from .repository import UserRepository
from .sanitizer import redact

logger = logging.getLogger(__name__)


class UserService(IUserService):
    """
    User service backed by the users collection.

    Re-reads the stored record after every write so responses always
    reflect what the store holds.
    """

    def __init__(self, repository: UserRepository, authorizer: IAdminAuthorizer):
        self._repository = repository
        self._authorizer = authorizer

    async def list_users(self, caller_email: Optional[str]) -> list[dict[str, Any]]:
        await self._authorizer.require_admin(caller_email)
        users = await self._repository.list_all()
        return [redact(user) for user in users]

    async def get_user(self, email: str) -> dict[str, Any]:
        user = await self._repository.find_by_email(email)
        if not user:
            raise UserNotFoundError(email)
        return redact(user)

    async def create_user(self, request: CreateUserRequest) -> dict[str, Any]:
        if await self._repository.find_by_email(request.email):
            raise UserAlreadyExistsError(request.email)

        now = utc_now()
        document = {
            **request.profile_fields(),
            "email": request.email,
            # Echoed as given: this is the bootstrap path before any admin exists
            "isAdmin": request.is_admin,
            "emailVerified": False,
            "createdAt": now,
            "updatedAt": now,
            "lastLogin": now,
        }

        user_id = await self._repository.insert(document)
        logger.info("Created user %s", request.email)

        created = await self._repository.find_by_id(user_id)
        if not created:
            raise UserNotFoundError(str(user_id))
        return redact(created)

    async def update_user(self, email: str, request: UpdateUserRequest) -> dict[str, Any]:
        immutable = request.immutable_fields_present()
        if immutable:
            raise ImmutableUserFieldError(immutable)

        changes = {**request.changes(), "updatedAt": utc_now()}
        matched = await self._repository.update_by_email(email, changes)
        if matched == 0:
            raise UserNotFoundError(email)

        updated = await self._repository.find_by_email(email)
        if not updated:
            raise UserNotFoundError(email)
        return redact(updated)

    async def set_admin_status(self, user_id: str, request: AdminStatusRequest) -> dict[str, Any]:
        await self._authorizer.require_admin(request.requesting_admin_email)

        object_id = parse_object_id(user_id)
        if object_id is None:
            raise UserNotFoundError(user_id)

        matched = await self._repository.update_by_id(
            object_id,
            {"isAdmin": request.is_admin, "updatedAt": utc_now()},
        )
        if matched == 0:
            raise UserNotFoundError(user_id)

        logger.info(
            "Admin status of %s set to %s by %s",
            user_id,
            request.is_admin,
            request.requesting_admin_email,
        )

        updated = await self._repository.find_by_id(object_id)
        if not updated:
            raise UserNotFoundError(user_id)
        return redact(updated)

    async def check_role(self, email: str) -> RoleSummary:
        user = await self._repository.find_by_email(email)
        if not user:
            raise UserNotFoundError(email)
        return RoleSummary(
            email=user["email"],
            is_admin=bool(user.get("isAdmin", False)),
            role=user.get("role") or "user",
        )
