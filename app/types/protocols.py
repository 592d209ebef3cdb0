from __future__ import annotations

from typing import Any, Dict, Protocol

from .messages import InboundMessage


class MessageIdGenerator(Protocol):
    """Callable returning a fresh identifier for each normalized message.

    Uniqueness is the generator's responsibility. Tests pass a deterministic
    counter; production uses random UUIDs.

    Example:
        >>> import itertools
        >>> counter = itertools.count(1)
        >>> gen: MessageIdGenerator = lambda: f"msg-{next(counter)}"
    """

    def __call__(self) -> str:
        ...


class MessageParser(Protocol):
    """Protocol for inbound message parsers.

    Concrete implementations convert one provider-specific inbound message
    into an `InboundMessage` so routers stay provider-agnostic.

    Minimal example:
        >>> from app.types import MessageParser, TextMessage
        >>> class EchoParser(MessageParser):
        ...     def get_message_id(self) -> str:
        ...         return "m1"
        ...     def parse(self, message):
        ...         return TextMessage(id=self.get_message_id(), end_user_phone_number=message["from"],
        ...                            text=message["text"], payload=message)
    """

    def get_message_id(self) -> str:
        """Return a fresh identifier for the next normalized message."""
        ...

    def parse(self, message: Dict[str, Any]) -> InboundMessage:
        """Normalize one inbound message.

        Implementations raise `MalformedPayloadError` or
        `UnsupportedMessageTypeError`; routers map these into skip reasons.
        """
        ...
