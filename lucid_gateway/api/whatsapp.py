"""
WhatsApp Business webhook.

GET  /whatsapp/webhook: subscription handshake, echoes hub.challenge.
POST /whatsapp/webhook: event notifications; messages are logged and
acknowledged, nothing is stored.
"""
import json
import logging
from typing import List
from fastapi import APIRouter, FastAPI, Request
from fastapi.responses import JSONResponse
from pydantic import ValidationError
from lucid_gateway.api.whatsapp_mappers import map_to_command, to_verification_response
from lucid_gateway.api.whatsapp_schemas import (
    Contact,
    HookVerificationRequest,
    Message,
    WebhookPayload,
)
from lucid_gateway.services.webhook_verifier import WebhookVerificationError, WebhookVerifier

logger = logging.getLogger(__name__)

BUSINESS_ACCOUNT_OBJECT = "whatsapp_business_account"


def _bad_request() -> JSONResponse:
    return JSONResponse(status_code=400, content={"message": "Bad Request"})


def _sender_name(message: Message, contacts: List[Contact]) -> str:
    for contact in contacts:
        if contact.wa_id == message.from_:
            return contact.profile.name
    return ""


def register(router: APIRouter | FastAPI, verifier: WebhookVerifier):
    """Mount the webhook endpoints under /whatsapp on the given router."""
    whatsapp = APIRouter(prefix="/whatsapp", tags=["whatsapp"])

    @whatsapp.get("/webhook")
    async def verify_webhook(request: Request):
        try:
            hook_request = HookVerificationRequest.model_validate(dict(request.query_params))
        except ValidationError as e:
            logger.error("Failed to bind webhook verification query", extra={"error": str(e)})
            return _bad_request()

        try:
            challenge = verifier.verify(map_to_command(hook_request))
        except WebhookVerificationError as e:
            logger.warning(
                "Webhook verification failed",
                extra={"error": str(e), "request_id": getattr(request.state, "request_id", None)},
            )
            return JSONResponse(status_code=403, content={"error": str(e)})

        logger.info("Webhook verified", extra={"request_id": getattr(request.state, "request_id", None)})
        return to_verification_response(challenge)

    @whatsapp.post("/webhook")
    async def receive_webhook(request: Request):
        request_id = getattr(request.state, "request_id", None)
        try:
            payload = WebhookPayload.model_validate(await request.json())
        except (json.JSONDecodeError, UnicodeDecodeError, ValidationError) as e:
            logger.error("Failed to parse webhook payload", extra={"error": str(e), "request_id": request_id})
            return _bad_request()

        if payload.object != BUSINESS_ACCOUNT_OBJECT:
            logger.warning("Unexpected webhook object type", extra={"object": payload.object})
            return {"status": "ignored"}

        for entry in payload.entry:
            for change in entry.changes:
                for message in change.value.messages:
                    logger.info(
                        "Received message",
                        extra={
                            "request_id": request_id,
                            "from": message.from_,
                            "sender_name": _sender_name(message, change.value.contacts),
                            "type": message.type,
                            "message_id": message.id,
                        },
                    )

        return {"status": "received"}

    router.include_router(whatsapp)
