"""Signer routes."""

from typing import Any

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Body
from pydantic import BaseModel

from homie.application.usecase.signer import (
    CreateSignerResponse,
    CreateSignerUseCase,
    GetSignerStatusRequest,
    GetSignerStatusResponse,
    GetSignerStatusUseCase,
)
from homie.util.redact import redact

router = APIRouter(prefix="/signer", tags=["signers"], route_class=DishkaRoute)


class WebhookResponse(BaseModel):
    """Webhook acknowledgement."""

    ok: bool = True


@router.post("", response_model=CreateSignerResponse)
async def create_signer(
    create_signer_use_case: FromDishka[CreateSignerUseCase],
) -> CreateSignerResponse:
    """Create a signer and submit its signed key request.

    The response carries the approval URL the user must open in their wallet.
    """
    return await create_signer_use_case.execute()


@router.get("", response_model=GetSignerStatusResponse)
async def get_signer_status(
    get_signer_status_use_case: FromDishka[GetSignerStatusUseCase],
    signer_uuid: str | None = None,
) -> GetSignerStatusResponse:
    """Poll a signer's approval status."""
    return await get_signer_status_use_case.execute(
        GetSignerStatusRequest(signer_uuid=signer_uuid)
    )


@router.post("/webhook", response_model=WebhookResponse)
async def signer_webhook(
    payload: dict[str, Any] | None = Body(default=None),
) -> WebhookResponse:
    """Receive signer status notifications.

    Payloads are unauthenticated and only logged. Signer state is always
    read back by polling ``GET /signer``, never taken from here.
    """
    payload = payload or {}
    logfire.info(
        "Signer webhook received",
        event_type=payload.get("type"),
        payload=redact(payload),
    )
    return WebhookResponse()
