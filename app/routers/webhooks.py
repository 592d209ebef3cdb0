from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, HTTPException

from app.adapters.base import IncomingMessageParser
from app.adapters.registry import ParserRegistry
from app.adapters.whatsapp import iter_inbound_messages
from app.types import (
    MalformedPayloadError,
    SkippedMessage,
    UnsupportedMessageTypeError,
    WebhookResponse,
)


logger = logging.getLogger("normalizer.webhooks")

router = APIRouter(prefix="", tags=["webhooks"])


def get_parser(provider: str) -> IncomingMessageParser:
    """Resolve the provider's parser, mapping unknown names to 404."""
    try:
        return ParserRegistry.get(provider)
    except KeyError:
        raise HTTPException(status_code=404, detail=f"Unknown provider: {provider}")


def _skip(message: Dict[str, Any], reason: str, field: Optional[str] = None) -> SkippedMessage:
    message_id = message.get("id")
    message_type = message.get("type")
    return SkippedMessage(
        message_id=message_id if isinstance(message_id, str) else None,
        message_type=message_type if isinstance(message_type, str) else None,
        reason=reason,
        field=field,
    )


@router.post("/webhooks/{provider}", response_model=WebhookResponse)
async def webhook_events(
    provider: str,
    payload: Dict[str, Any] = Body(..., description="Raw webhook JSON envelope"),
) -> WebhookResponse:
    """Normalize every inbound message of a provider webhook envelope.

    - Looks up the provider's parser in `ParserRegistry`
    - Unpacks each message from the envelope and normalizes it
    - Messages that cannot be normalized are reported under `skipped`

    Always answers 200 for a known provider so the platform does not
    redeliver the same envelope.
    """
    parser = get_parser(provider)

    response = WebhookResponse()
    for message in iter_inbound_messages(payload):
        try:
            response.messages.append(parser.parse(message))
        except UnsupportedMessageTypeError as e:
            skipped = _skip(message, str(e))
            logger.info("Skipping %s message %s", skipped.message_type, skipped.message_id)
            response.skipped.append(skipped)
        except MalformedPayloadError as e:
            skipped = _skip(message, str(e), field=e.field_path)
            logger.warning(
                "Malformed %s message %s: missing or invalid %s",
                skipped.message_type,
                skipped.message_id,
                e.field_path,
            )
            response.skipped.append(skipped)

    logger.debug(
        "Webhook processed",
        extra={"provider": provider, "normalized": len(response.messages), "skipped": len(response.skipped)},
    )
    return response
