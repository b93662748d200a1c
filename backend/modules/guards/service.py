"""
Guards service implementation.
"""

import logging
from typing import Optional

from bson import ObjectId

from modules.auth.interfaces import IAdminAuthorizer
from shared.database import parse_object_id
from shared.models import utc_now

from .exceptions import GuardNotFoundError
from .interfaces import IGuardService
from .models import (
    AddPresenceRequest,
    AddTransactionRequest,
    CreateGuardRequest,
    Guard,
    PresenceEntry,
    Transaction,
    UpdateGuardRequest,
)
from .repository import GuardRepository

logger = logging.getLogger(__name__)


class GuardService(IGuardService):
    """Guard service backed by the guards collection."""

    def __init__(self, repository: GuardRepository, authorizer: IAdminAuthorizer):
        self._repository = repository
        self._authorizer = authorizer

    async def list_guards(self, caller_email: Optional[str]) -> list[Guard]:
        await self._authorizer.require_admin(caller_email)
        return await self._repository.list_all()

    async def get_guard(self, caller_email: Optional[str], guard_id: str) -> Guard:
        await self._authorizer.require_admin(caller_email)
        return await self._load(self._object_id(guard_id), guard_id)

    async def create_guard(self, caller_email: Optional[str], request: CreateGuardRequest) -> Guard:
        await self._authorizer.require_admin(caller_email)

        now = utc_now()
        document = {
            "name": request.name,
            "phone": request.phone,
            "nid": request.nid,
            "address": request.address,
            "joinDate": request.join_date or now,
            "dutyPlace": request.duty_place,
            "dutyTime": request.duty_time,
            "transactions": [seed.normalize(now).to_document() for seed in request.transactions],
            "presence": [seed.normalize(now).to_document() for seed in request.presence],
            "createdAt": now,
            "updatedAt": now,
        }

        guard_id = await self._repository.insert(document)
        logger.info("Created guard %s (%s)", guard_id, request.name)
        return Guard.from_document({"_id": guard_id, **document})

    async def update_guard(
        self, caller_email: Optional[str], guard_id: str, request: UpdateGuardRequest
    ) -> Guard:
        await self._authorizer.require_admin(caller_email)
        object_id = self._object_id(guard_id)

        matched = await self._repository.update(
            object_id,
            {**request.changes(), "updatedAt": utc_now()},
        )
        if matched == 0:
            raise GuardNotFoundError(guard_id)
        return await self._load(object_id, guard_id)

    async def add_transaction(
        self, caller_email: Optional[str], guard_id: str, request: AddTransactionRequest
    ) -> Guard:
        await self._authorizer.require_admin(caller_email)
        object_id = self._object_id(guard_id)

        now = utc_now()
        entry = Transaction(
            type=request.type,
            amount=request.amount,
            date=request.date or now,
            note=request.note,
        )
        if await self._repository.append_transaction(object_id, entry, now) == 0:
            raise GuardNotFoundError(guard_id)
        return await self._load(object_id, guard_id)

    async def add_presence(
        self, caller_email: Optional[str], guard_id: str, request: AddPresenceRequest
    ) -> Guard:
        await self._authorizer.require_admin(caller_email)
        object_id = self._object_id(guard_id)

        entry = PresenceEntry(date=request.date, status=request.status)
        if await self._repository.append_presence(object_id, entry, utc_now()) == 0:
            raise GuardNotFoundError(guard_id)
        return await self._load(object_id, guard_id)

    async def get_transactions(self, caller_email: Optional[str], guard_id: str) -> list[Transaction]:
        await self._authorizer.require_admin(caller_email)
        entries = await self._repository.get_transactions(self._object_id(guard_id))
        if entries is None:
            raise GuardNotFoundError(guard_id)
        return entries

    async def get_presence(self, caller_email: Optional[str], guard_id: str) -> list[PresenceEntry]:
        await self._authorizer.require_admin(caller_email)
        entries = await self._repository.get_presence(self._object_id(guard_id))
        if entries is None:
            raise GuardNotFoundError(guard_id)
        return entries

    @staticmethod
    def _object_id(guard_id: str) -> ObjectId:
        object_id = parse_object_id(guard_id)
        if object_id is None:
            raise GuardNotFoundError(guard_id)
        return object_id

    async def _load(self, object_id: ObjectId, guard_id: str) -> Guard:
        guard = await self._repository.get_by_id(object_id)
        if guard is None:
            raise GuardNotFoundError(guard_id)
        return guard
