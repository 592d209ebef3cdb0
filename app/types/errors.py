from __future__ import annotations

from typing import Any, Optional, Sequence, Union


def format_field_path(loc: Sequence[Union[str, int]]) -> str:
    """Join a pydantic error location into a dotted path (`text.body`)."""
    return ".".join(str(part) for part in loc) or "<payload>"


class MalformedPayloadError(ValueError):
    """Raised when an inbound payload lacks a field the conversion reads.

    Attributes:
        field_path: Dotted path of the first missing or ill-typed field,
            e.g. `interactive.button_reply`.
    """

    def __init__(self, field_path: str, detail: Optional[str] = None) -> None:
        self.field_path = field_path
        self.detail = detail
        message = f"Malformed payload at '{field_path}'"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)


class UnsupportedMessageTypeError(ValueError):
    """Raised when no conversion exists for an inbound message kind."""

    def __init__(self, message_type: Any) -> None:
        self.message_type = message_type
        super().__init__(f"Unsupported message type: {message_type!r}")
