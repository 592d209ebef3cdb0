"""WhatsApp Cloud API inbound message parser.

The chatbot receives different kinds of messages (text, a tapped button, a
location, an image, ...). Each is converted here into the standardized
message the conversational engine reads.

Payload examples:
https://developers.facebook.com/docs/whatsapp/cloud-api/webhooks/payload-examples
"""

from __future__ import annotations

from typing import Any, Dict, Iterator, Type, TypeVar

from pydantic import BaseModel, ValidationError

from app.adapters.base import IncomingMessageParser
from app.types import (
    ImageMessage,
    ImagePayload,
    InteractiveButtonReplyPayload,
    LocationMessage,
    LocationPayload,
    MalformedPayloadError,
    QuestionMessage,
    TextMessage,
    TextMessagePayload,
    format_field_path,
)

PayloadT = TypeVar("PayloadT", bound=BaseModel)


def _validate(model: Type[PayloadT], payload: Dict[str, Any]) -> PayloadT:
    try:
        return model.model_validate(payload)
    except ValidationError as e:
        first = e.errors()[0]
        raise MalformedPayloadError(format_field_path(first["loc"]), first["msg"]) from e


def _dict_items(container: Dict[str, Any], key: str) -> Iterator[Dict[str, Any]]:
    items = container.get(key)
    if not isinstance(items, list):
        return
    for item in items:
        if isinstance(item, dict):
            yield item


def iter_inbound_messages(envelope: Dict[str, Any]) -> Iterator[Dict[str, Any]]:
    """Yield every inbound message of a WhatsApp webhook envelope.

    Messages live under `entry[].changes[].value.messages[]`. Delivery/read
    status notifications carry no `messages` and yield nothing. Levels that
    are not lists, and items that are not objects, are skipped.
    """
    if not isinstance(envelope, dict):
        return
    for entry in _dict_items(envelope, "entry"):
        for change in _dict_items(entry, "changes"):
            value = change.get("value")
            if isinstance(value, dict):
                yield from _dict_items(value, "messages")


class WhatsAppIncomingMessageParser(IncomingMessageParser):
    """Converts WhatsApp inbound messages to `InboundMessage` records.

    Each conversion validates only the fields it reads and raises
    `MalformedPayloadError` naming the first missing one. The raw payload is
    attached to the result as-is.
    """

    def parse_text_message(self, payload: Dict[str, Any]) -> TextMessage:
        """Text message → `TextMessage`.

        See: https://developers.facebook.com/docs/whatsapp/cloud-api/webhooks/payload-examples#text-messages
        """
        message = _validate(TextMessagePayload, payload)
        return TextMessage(
            id=self.get_message_id(),
            end_user_phone_number=message.from_,
            text=message.text.body,
            payload=payload,
        )

    def parse_interactive_button_message(self, payload: Dict[str, Any]) -> QuestionMessage:
        """Interactive button reply → `QuestionMessage`.

        A question block offers the user buttons; when one is tapped we
        receive its id and title. List replies are rejected as malformed
        since they carry no `button_reply`.

        See: https://developers.facebook.com/docs/whatsapp/cloud-api/webhooks/payload-examples#reply-button
        """
        message = _validate(InteractiveButtonReplyPayload, payload)
        button = message.interactive.button_reply
        return QuestionMessage(
            id=self.get_message_id(),
            end_user_phone_number=message.from_,
            option_id=button.id,
            option_text=button.title,
            payload=payload,
        )

    def parse_location_message(self, payload: Dict[str, Any]) -> LocationMessage:
        """Location message → `LocationMessage`.

        The location mapping (latitude, longitude, optional name/address) is
        checked but handed on untouched.

        See: https://developers.facebook.com/docs/whatsapp/cloud-api/webhooks/payload-examples#location-messages
        """
        message = _validate(LocationPayload, payload)
        return LocationMessage(
            id=self.get_message_id(),
            end_user_phone_number=message.from_,
            location=payload["location"],
            payload=payload,
        )

    def parse_image_message(self, payload: Dict[str, Any]) -> ImageMessage:
        """Image message → `ImageMessage`, keeping the media id for later download."""
        message = _validate(ImagePayload, payload)
        return ImageMessage(
            id=self.get_message_id(),
            end_user_phone_number=message.from_,
            image_id=message.id,
            payload=payload,
        )
