from __future__ import annotations

from enum import Enum


class MessageType(str, Enum):
    """Discriminator carried by every normalized inbound message.

    The conversational engine switches on this value to decide which block
    handles the message. Adapters set it when normalizing webhook payloads.

    Example:
        >>> from app.types import MessageType, TextMessage
        >>> TextMessage(id="m1", end_user_phone_number="+1", text="Hi", payload={}).type
        <MessageType.TEXT: 'text'>
    """

    TEXT = "text"
    QUESTION = "question"
    LOCATION = "location"
    IMAGE = "image"


class WhatsAppMessageType(str, Enum):
    """Value of the `type` field on a WhatsApp Cloud API inbound message.

    Only the kinds listed here have a conversion. Docs:
    https://developers.facebook.com/docs/whatsapp/cloud-api/webhooks/payload-examples
    """

    TEXT = "text"
    INTERACTIVE = "interactive"
    LOCATION = "location"
    IMAGE = "image"
