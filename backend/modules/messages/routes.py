"""
Contact message API endpoints.

Routes here answer errors as {"success": false, "message": ...}.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query

from api.dependencies import get_message_service, require_admin_caller, require_admin_in_body
from api.errors import use_success_envelope

from .interfaces import IMessageService
from .models import (
    CreateMessageRequest,
    MessageListResponse,
    MessageResponse,
    UpdateMessageRequest,
)

router = APIRouter(dependencies=[Depends(use_success_envelope)])


@router.post("/users-message", response_model=MessageResponse, status_code=201)
async def create_message(
    request: CreateMessageRequest,
    service: IMessageService = Depends(get_message_service),
) -> MessageResponse:
    """Submit a contact-form message."""
    message = await service.create_message(request)
    return MessageResponse(
        message="Thank you for your message! We'll get back to you soon.",
        data=message,
    )


@router.get(
    "/all-users-messages",
    response_model=MessageListResponse,
    dependencies=[Depends(require_admin_caller)],
)
async def list_messages(
    email: Optional[str] = Query(default=None, description="Email of the requesting admin"),
    service: IMessageService = Depends(get_message_service),
) -> MessageListResponse:
    """
    List all messages, most recent first.

    Admin only.
    """
    return MessageListResponse.of(await service.list_messages(email))


@router.patch(
    "/users-messages/{message_id}",
    response_model=MessageResponse,
    dependencies=[Depends(require_admin_in_body("adminEmail"))],
)
async def update_message(
    message_id: str,
    request: UpdateMessageRequest,
    service: IMessageService = Depends(get_message_service),
) -> MessageResponse:
    """
    Update a message's status and/or read flag.

    Admin only; the admin is identified by adminEmail in the body.
    """
    message = await service.update_message(message_id, request)
    return MessageResponse(message="Message updated successfully", data=message)


@router.get("/users-messages/{user_email}", response_model=MessageListResponse)
async def list_user_messages(
    user_email: str,
    service: IMessageService = Depends(get_message_service),
) -> MessageListResponse:
    """List messages filed under a user's email, most recent first."""
    return MessageListResponse.of(await service.list_user_messages(user_email))
