"""
Admin authorizer implementation.

Answers "is this email an admin right now?" with a fresh lookup in the
users collection on every call.
"""

import logging
from typing import Optional

from modules.users.repository import UserRepository

from .exceptions import AdminPrivilegesRequiredError, MissingCallerEmailError
from .interfaces import IAdminAuthorizer
from .models import AuthorizationResult

logger = logging.getLogger(__name__)


class AdminAuthorizer(IAdminAuthorizer):
    """
    Implementation of the admin authorizer.

    Holds no state beyond the repository; nothing is cached.
    """

    def __init__(self, users: UserRepository):
        self._users = users

    async def authorize(self, caller_email: Optional[str]) -> AuthorizationResult:
        if not caller_email:
            return AuthorizationResult.denied(400, MissingCallerEmailError().message)

        caller = await self._users.find_by_email(caller_email)

        # Unknown callers are denied exactly like non-admins
        if not caller or not caller.get("isAdmin"):
            logger.warning("Admin check denied for %s", caller_email)
            return AuthorizationResult.denied(403, "Admin privileges required")

        return AuthorizationResult.allowed()

    async def require_admin(self, caller_email: Optional[str]) -> None:
        result = await self.authorize(caller_email)
        if result.ok:
            return
        if result.status == 400:
            raise MissingCallerEmailError(result.message)
        raise AdminPrivilegesRequiredError(caller_email or "", result.message)
