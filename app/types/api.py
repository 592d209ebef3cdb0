from __future__ import annotations

from typing import Annotated, List, Optional, Union

from pydantic import BaseModel, Field

from .messages import ImageMessage, LocationMessage, QuestionMessage, TextMessage


# Public discriminated union alias used by the HTTP layer
NormalizedMessage = Annotated[
    Union[TextMessage, QuestionMessage, LocationMessage, ImageMessage],
    Field(discriminator="type"),
]


class SkippedMessage(BaseModel):
    """An inbound message from the envelope that could not be normalized.

    Attributes:
        message_id: WhatsApp message id, when the payload carried one.
        message_type: Raw `type` value of the inbound message.
        reason: Human-readable explanation.
        field: Dotted path of the missing field for malformed payloads.
    """

    message_id: Optional[str] = None
    message_type: Optional[str] = None
    reason: str
    field: Optional[str] = None


class WebhookResponse(BaseModel):
    """Result of normalizing one webhook envelope.

    Examples:
        {
          "ok": true,
          "messages": [
            {"id": "3f0c...", "type": "text", "endUserPhoneNumber": "15551234567",
             "text": "Hi", "payload": {"from": "15551234567", "type": "text", "text": {"body": "Hi"}}}
          ],
          "skipped": [
            {"message_id": "wamid.2", "message_type": "sticker",
             "reason": "Unsupported message type: 'sticker'", "field": null}
          ]
        }
    """

    ok: bool = True
    messages: List[NormalizedMessage] = Field(default_factory=list)
    skipped: List[SkippedMessage] = Field(default_factory=list)
