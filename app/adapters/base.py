from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Callable, Dict, Mapping, Optional
from uuid import uuid4

from app.types import (
    ImageMessage,
    InboundMessage,
    LocationMessage,
    MalformedPayloadError,
    MessageIdGenerator,
    MessageParser,
    QuestionMessage,
    TextMessage,
    UnsupportedMessageTypeError,
    WhatsAppMessageType,
)


def uuid_message_id() -> str:
    return str(uuid4())


class IncomingMessageParser(MessageParser, ABC):
    """Base class for parsers turning provider messages into `InboundMessage`.

    Owns the message-id capability and the dispatch from a message's `type`
    to the matching conversion. Subclasses implement one conversion per
    supported kind and never inspect the outer webhook envelope.

    The id generator is injected so tests can use a deterministic stub;
    when omitted, every message gets a random UUID4.
    """

    def __init__(self, id_generator: Optional[MessageIdGenerator] = None) -> None:
        self._id_generator = id_generator or uuid_message_id

    def get_message_id(self) -> str:
        return self._id_generator()

    def _handlers(self) -> Dict[str, Callable[[Dict[str, Any]], InboundMessage]]:
        return {
            WhatsAppMessageType.TEXT.value: self.parse_text_message,
            WhatsAppMessageType.INTERACTIVE.value: self.parse_interactive_button_message,
            WhatsAppMessageType.LOCATION.value: self.parse_location_message,
            WhatsAppMessageType.IMAGE.value: self.parse_image_message,
        }

    def parse(self, message: Dict[str, Any]) -> InboundMessage:
        """Route one inbound message to its conversion by the `type` field."""
        if not isinstance(message, Mapping):
            raise MalformedPayloadError("<payload>", "message must be an object")
        message_type = message.get("type")
        handler = self._handlers().get(message_type) if isinstance(message_type, str) else None
        if handler is None:
            raise UnsupportedMessageTypeError(message_type)
        return handler(message)

    @abstractmethod
    def parse_text_message(self, payload: Dict[str, Any]) -> TextMessage:
        ...

    @abstractmethod
    def parse_interactive_button_message(self, payload: Dict[str, Any]) -> QuestionMessage:
        ...

    @abstractmethod
    def parse_location_message(self, payload: Dict[str, Any]) -> LocationMessage:
        ...

    @abstractmethod
    def parse_image_message(self, payload: Dict[str, Any]) -> ImageMessage:
        ...
