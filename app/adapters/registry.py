from __future__ import annotations

from typing import Dict, List, Optional

from app.adapters.base import IncomingMessageParser
from app.adapters.whatsapp import WhatsAppIncomingMessageParser
from app.types import MessageIdGenerator


class ParserRegistry:
    """Registry for inbound message parsers by provider name.

    Enables plugging in other providers later without changing router logic.
    """

    _registry: Dict[str, type[IncomingMessageParser]] = {
        "whatsapp": WhatsAppIncomingMessageParser,
    }

    @classmethod
    def get(
        cls, name: str, id_generator: Optional[MessageIdGenerator] = None
    ) -> IncomingMessageParser:
        parser_cls = cls._registry.get(name)
        if parser_cls is None:
            raise KeyError(f"Unknown message parser: {name}")
        return parser_cls(id_generator=id_generator)

    @classmethod
    def register(cls, name: str, parser_cls: type[IncomingMessageParser]) -> None:
        cls._registry[name] = parser_cls

    @classmethod
    def providers(cls) -> List[str]:
        return sorted(cls._registry)
