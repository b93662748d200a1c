"""
Guard personnel API endpoints.

Every route is admin only; the caller is identified by the email query
parameter. Errors are answered as {"success": false, "message": ...}.
"""

from typing import Annotated, Optional

from fastapi import APIRouter, Depends, Query

from api.dependencies import get_guard_service, require_admin_caller
from api.errors import use_success_envelope

from .interfaces import IGuardService
from .models import (
    AddPresenceRequest,
    AddTransactionRequest,
    CreateGuardRequest,
    GuardListResponse,
    GuardResponse,
    PresenceListResponse,
    TransactionListResponse,
    UpdateGuardRequest,
)

router = APIRouter(
    dependencies=[Depends(use_success_envelope), Depends(require_admin_caller)],
)

CallerEmail = Annotated[Optional[str], Query(description="Email of the requesting admin")]


@router.get("", response_model=GuardListResponse)
async def list_guards(
    email: CallerEmail = None,
    service: IGuardService = Depends(get_guard_service),
) -> GuardListResponse:
    """List all guards."""
    guards = await service.list_guards(email)
    return GuardListResponse(count=len(guards), data=guards)


@router.post("", response_model=GuardResponse, status_code=201)
async def create_guard(
    request: CreateGuardRequest,
    email: CallerEmail = None,
    service: IGuardService = Depends(get_guard_service),
) -> GuardResponse:
    """
    Create a guard.

    Optional transactions/presence lists seed the logs.
    """
    return GuardResponse(data=await service.create_guard(email, request))


@router.get("/{guard_id}", response_model=GuardResponse)
async def get_guard(
    guard_id: str,
    email: CallerEmail = None,
    service: IGuardService = Depends(get_guard_service),
) -> GuardResponse:
    """Get a guard by id."""
    return GuardResponse(data=await service.get_guard(email, guard_id))


@router.patch("/{guard_id}", response_model=GuardResponse)
async def update_guard(
    guard_id: str,
    request: UpdateGuardRequest,
    email: CallerEmail = None,
    service: IGuardService = Depends(get_guard_service),
) -> GuardResponse:
    """
    Update a guard's core fields.

    transactions and presence in the body are ignored; use the
    append endpoints instead.
    """
    return GuardResponse(data=await service.update_guard(email, guard_id, request))


@router.post("/{guard_id}/transactions", response_model=GuardResponse)
async def add_transaction(
    guard_id: str,
    request: AddTransactionRequest,
    email: CallerEmail = None,
    service: IGuardService = Depends(get_guard_service),
) -> GuardResponse:
    """Append a transaction and return the updated guard."""
    return GuardResponse(data=await service.add_transaction(email, guard_id, request))


@router.post("/{guard_id}/presence", response_model=GuardResponse)
async def add_presence(
    guard_id: str,
    request: AddPresenceRequest,
    email: CallerEmail = None,
    service: IGuardService = Depends(get_guard_service),
) -> GuardResponse:
    """Append a presence entry and return the updated guard."""
    return GuardResponse(data=await service.add_presence(email, guard_id, request))


@router.get("/{guard_id}/transactions", response_model=TransactionListResponse)
async def get_transactions(
    guard_id: str,
    email: CallerEmail = None,
    service: IGuardService = Depends(get_guard_service),
) -> TransactionListResponse:
    """Get a guard's transaction log."""
    entries = await service.get_transactions(email, guard_id)
    return TransactionListResponse(count=len(entries), data=entries)


@router.get("/{guard_id}/presence", response_model=PresenceListResponse)
async def get_presence(
    guard_id: str,
    email: CallerEmail = None,
    service: IGuardService = Depends(get_guard_service),
) -> PresenceListResponse:
    """Get a guard's presence log."""
    entries = await service.get_presence(email, guard_id)
    return PresenceListResponse(count=len(entries), data=entries)
