from __future__ import annotations

from typing import Any, Dict

from fastapi import APIRouter, Body

from app.routers.webhooks import get_parser
from app.types import NormalizedMessage

router = APIRouter(prefix="/messages", tags=["messages"])


@router.post("/{provider}/normalize", response_model=NormalizedMessage)
async def normalize_message(
    provider: str,
    message: Dict[str, Any] = Body(..., description="One inbound message, already unwrapped"),
) -> NormalizedMessage:
    """Normalize a single inbound message.

    Parser errors are not caught here; the app-level handlers turn
    `MalformedPayloadError` and `UnsupportedMessageTypeError` into 422s.
    """
    return get_parser(provider).parse(message)
