from __future__ import annotations

from typing import Literal, Optional

from pydantic import BaseModel, Field


class InboundPayload(BaseModel):
    """Fields shared by every WhatsApp inbound message.

    Only the fields the normalizer reads are declared; anything else the
    platform sends is ignored here and stays reachable through the raw
    payload kept on the normalized message.

    Attributes:
        from_: Sender phone number (`from` in the webhook JSON).
        id: WhatsApp message id (`wamid...`), when present.
    """

    from_: str = Field(alias="from")
    id: Optional[str] = None


class TextBody(BaseModel):
    body: str


class TextMessagePayload(InboundPayload):
    """Plain text message.

    Example:
        {"from": "15551234567", "type": "text", "text": {"body": "Hi"}}
    """

    text: TextBody
    type: Literal["text"] = "text"


class ButtonReply(BaseModel):
    id: str
    title: str


class InteractiveButtonReply(BaseModel):
    # Cloud API also sends "list_reply" under the same key; only buttons convert
    type: Optional[str] = None
    button_reply: ButtonReply


class InteractiveButtonReplyPayload(InboundPayload):
    """Reply to an interactive message with quick-reply buttons.

    Example:
        {
          "from": "15551234567",
          "type": "interactive",
          "interactive": {
            "type": "button_reply",
            "button_reply": {"id": "opt_1", "title": "Yes"}
          }
        }
    """

    interactive: InteractiveButtonReply
    type: Literal["interactive"] = "interactive"


class Location(BaseModel):
    latitude: float
    longitude: float
    name: Optional[str] = None
    address: Optional[str] = None


class LocationPayload(InboundPayload):
    """Location shared by the user.

    Example:
        {"from": "15551234567", "type": "location",
         "location": {"latitude": 1.0, "longitude": 2.0}}
    """

    location: Location
    type: Literal["location"] = "location"


class ImagePayload(InboundPayload):
    """Image message. `id` references the media object for later retrieval."""

    id: str
    type: Literal["image"] = "image"
