"""Tests for the guards service over the in-memory store."""

import asyncio
from datetime import datetime, timezone

import pytest
from bson import ObjectId

from modules.auth.exceptions import AdminPrivilegesRequiredError, MissingCallerEmailError
from modules.auth.service import AdminAuthorizer
from modules.guards.exceptions import GuardNotFoundError
from modules.guards.models import (
    AddPresenceRequest,
    AddTransactionRequest,
    CreateGuardRequest,
    UpdateGuardRequest,
)
from modules.guards.repository import GuardRepository
from modules.guards.service import GuardService
from modules.users.repository import UserRepository

from tests.conftest import ADMIN_EMAIL, MEMBER_EMAIL

BASE = {"name": "A", "phone": "1", "nid": "2", "dutyPlace": "Gate1", "dutyTime": "Day"}


@pytest.fixture
def service(store) -> GuardService:
    return GuardService(GuardRepository(store), AdminAuthorizer(UserRepository(store)))


@pytest.fixture
def guard_id(store, admin_id) -> str:
    """Seed a guard with one transaction and return its id."""
    now = datetime.now(timezone.utc)
    return str(
        store.seed(
            "guards",
            {
                "name": "A",
                "phone": "1",
                "nid": "2",
                "address": None,
                "joinDate": now,
                "dutyPlace": "Gate1",
                "dutyTime": "Day",
                "transactions": [{"type": "advance", "amount": 500, "date": now, "note": None}],
                "presence": [],
                "createdAt": now,
                "updatedAt": now,
            },
        )
    )


class TestAuthorization:
    @pytest.mark.asyncio
    async def test_every_operation_checks_admin(self, service, member_id):
        guard_id = str(ObjectId())
        calls = [
            service.list_guards(MEMBER_EMAIL),
            service.get_guard(MEMBER_EMAIL, guard_id),
            service.create_guard(MEMBER_EMAIL, CreateGuardRequest.model_validate(BASE)),
            service.update_guard(MEMBER_EMAIL, guard_id, UpdateGuardRequest(name="B")),
            service.add_transaction(
                MEMBER_EMAIL, guard_id, AddTransactionRequest(type="salary", amount=1)
            ),
            service.add_presence(
                MEMBER_EMAIL, guard_id, AddPresenceRequest(date="2024-05-01", status="present")
            ),
            service.get_transactions(MEMBER_EMAIL, guard_id),
            service.get_presence(MEMBER_EMAIL, guard_id),
        ]
        for call in calls:
            with pytest.raises(AdminPrivilegesRequiredError):
                await call

    @pytest.mark.asyncio
    async def test_missing_caller(self, service):
        with pytest.raises(MissingCallerEmailError):
            await service.list_guards(None)


class TestCreateGuard:
    @pytest.mark.asyncio
    async def test_empty_logs(self, service, admin_id):
        guard = await service.create_guard(ADMIN_EMAIL, CreateGuardRequest.model_validate(BASE))

        assert ObjectId.is_valid(guard.id)
        assert guard.transactions == []
        assert guard.presence == []
        assert guard.join_date == guard.created_at

    @pytest.mark.asyncio
    async def test_seeded_logs(self, service, admin_id, store):
        guard = await service.create_guard(
            ADMIN_EMAIL,
            CreateGuardRequest.model_validate(
                {
                    **BASE,
                    "joinDate": "2023-02-01",
                    "transactions": [{"type": "salary", "amount": 12000, "note": "Jan"}],
                    "presence": [{"date": "2024-01-02", "status": "present"}, {}],
                }
            ),
        )

        assert guard.join_date == datetime(2023, 2, 1, tzinfo=timezone.utc)
        assert guard.transactions[0].note == "Jan"
        assert [p.status for p in guard.presence] == ["present", "absent"]
        assert len(store.collection("guards").documents) == 1


class TestUpdateGuard:
    @pytest.mark.asyncio
    async def test_updates_core_fields(self, service, guard_id):
        guard = await service.update_guard(
            ADMIN_EMAIL, guard_id, UpdateGuardRequest(duty_place="Gate2", address="Mirpur")
        )
        assert guard.duty_place == "Gate2"
        assert guard.address == "Mirpur"
        assert guard.name == "A"

    @pytest.mark.asyncio
    async def test_logs_untouched(self, service, guard_id):
        request = UpdateGuardRequest.model_validate({"transactions": [], "presence": [], "name": "Z"})

        guard = await service.update_guard(ADMIN_EMAIL, guard_id, request)

        assert guard.name == "Z"
        assert len(guard.transactions) == 1
        assert guard.transactions[0].amount == 500

    @pytest.mark.asyncio
    @pytest.mark.parametrize("missing_id", [str(ObjectId()), "bogus"])
    async def test_not_found(self, service, admin_id, missing_id):
        with pytest.raises(GuardNotFoundError):
            await service.update_guard(ADMIN_EMAIL, missing_id, UpdateGuardRequest(name="Z"))


class TestAppendTransaction:
    @pytest.mark.asyncio
    async def test_appends_in_order(self, service, guard_id):
        await service.add_transaction(
            ADMIN_EMAIL, guard_id, AddTransactionRequest(type="salary", amount=1000)
        )
        guard = await service.add_transaction(
            ADMIN_EMAIL, guard_id, AddTransactionRequest(type="bonus", amount=250.5, note="Eid")
        )

        assert [t.type for t in guard.transactions] == ["advance", "salary", "bonus"]
        assert guard.transactions[-1].note == "Eid"
        assert guard.transactions[1].note is None

    @pytest.mark.asyncio
    async def test_concurrent_appends_both_land(self, service, guard_id):
        await asyncio.gather(
            service.add_transaction(ADMIN_EMAIL, guard_id, AddTransactionRequest(type="a", amount=1)),
            service.add_transaction(ADMIN_EMAIL, guard_id, AddTransactionRequest(type="b", amount=2)),
        )
        transactions = await service.get_transactions(ADMIN_EMAIL, guard_id)
        assert len(transactions) == 3

    @pytest.mark.asyncio
    async def test_not_found(self, service, admin_id):
        with pytest.raises(GuardNotFoundError):
            await service.add_transaction(
                ADMIN_EMAIL, str(ObjectId()), AddTransactionRequest(type="a", amount=1)
            )


class TestAppendPresence:
    @pytest.mark.asyncio
    async def test_appends(self, service, guard_id):
        guard = await service.add_presence(
            ADMIN_EMAIL, guard_id, AddPresenceRequest(date="2024-05-01", status="present")
        )
        assert len(guard.presence) == 1
        assert guard.presence[0].status == "present"

    @pytest.mark.asyncio
    async def test_not_found(self, service, admin_id):
        with pytest.raises(GuardNotFoundError):
            await service.add_presence(
                ADMIN_EMAIL, str(ObjectId()), AddPresenceRequest(date="2024-05-01", status="late")
            )


class TestLogReads:
    @pytest.mark.asyncio
    async def test_transactions(self, service, guard_id):
        transactions = await service.get_transactions(ADMIN_EMAIL, guard_id)
        assert [t.amount for t in transactions] == [500]

    @pytest.mark.asyncio
    async def test_absent_field_reads_as_empty(self, service, store, admin_id):
        guard_id = store.seed("guards", {"name": "Legacy"})
        assert await service.get_presence(ADMIN_EMAIL, str(guard_id)) == []

    @pytest.mark.asyncio
    async def test_not_found(self, service, admin_id):
        with pytest.raises(GuardNotFoundError):
            await service.get_presence(ADMIN_EMAIL, str(ObjectId()))
