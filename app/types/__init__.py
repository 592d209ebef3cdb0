"""Core types for the inbound normalizer.

This package centralizes enums, inbound payload shapes, normalized message
models, parser protocols, errors and API schemas in one place. Most modules
should import types from here rather than directly from submodules.

Usage:
    from app.types import TextMessage, MessageParser, MessageType
"""

from .enums import MessageType, WhatsAppMessageType
from .errors import MalformedPayloadError, UnsupportedMessageTypeError, format_field_path
from .messages import (
    InboundMessage,
    TextMessage,
    QuestionMessage,
    LocationMessage,
    ImageMessage,
)
from .payloads import (
    TextMessagePayload,
    InteractiveButtonReplyPayload,
    LocationPayload,
    ImagePayload,
)
from .protocols import MessageIdGenerator, MessageParser
from .api import NormalizedMessage, SkippedMessage, WebhookResponse

__all__ = [
    "MessageType",
    "WhatsAppMessageType",
    "MalformedPayloadError",
    "UnsupportedMessageTypeError",
    "format_field_path",
    "InboundMessage",
    "TextMessage",
    "QuestionMessage",
    "LocationMessage",
    "ImageMessage",
    "TextMessagePayload",
    "InteractiveButtonReplyPayload",
    "LocationPayload",
    "ImagePayload",
    "MessageIdGenerator",
    "MessageParser",
    "NormalizedMessage",
    "SkippedMessage",
    "WebhookResponse",
]
