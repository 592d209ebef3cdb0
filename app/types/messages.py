from __future__ import annotations

from typing import Any, Dict, Literal

from pydantic import BaseModel, ConfigDict, Field, SkipValidation

from .enums import MessageType


class InboundMessage(BaseModel):
    """Base class for normalized inbound messages handed to the engine.

    Every provider-specific payload is reduced to one of the subclasses
    below. Records are frozen once built.

    Anatomy:
    - id: fresh identifier from the parser's id generator, never derived
      from the payload
    - type: the discriminator the engine switches on
    - end_user_phone_number: sender of the inbound message
    - payload: the exact object the parser received (not a copy), so
      consumers can read fields the canonical shape does not surface

    JSON output uses camelCase aliases (`endUserPhoneNumber`, ...).

    Example:
        >>> from app.types import TextMessage
        >>> msg = TextMessage(id="m1", end_user_phone_number="+1555", text="Hello", payload={})
        >>> msg.model_dump(by_alias=True)["endUserPhoneNumber"]
        '+1555'
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str
    type: MessageType
    end_user_phone_number: str = Field(alias="endUserPhoneNumber")
    # SkipValidation keeps the caller's object instead of a validated copy
    payload: SkipValidation[Dict[str, Any]]


class TextMessage(InboundMessage):
    """Free-form text typed by the user."""

    text: str
    type: Literal[MessageType.TEXT] = MessageType.TEXT


class QuestionMessage(InboundMessage):
    """Option the user picked in answer to a question block.

    Fields:
        option_id: id of the button that was tapped
        option_text: label shown on that button
    """

    option_id: str = Field(alias="optionId")
    option_text: str = Field(alias="optionText")
    type: Literal[MessageType.QUESTION] = MessageType.QUESTION


class LocationMessage(InboundMessage):
    """Location sent by the user.

    `location` is the provider's latitude/longitude mapping, unchanged.
    """

    location: SkipValidation[Dict[str, Any]]
    type: Literal[MessageType.LOCATION] = MessageType.LOCATION


class ImageMessage(InboundMessage):
    """Image sent by the user; `image_id` references the stored media."""

    image_id: str = Field(alias="imageId")
    type: Literal[MessageType.IMAGE] = MessageType.IMAGE
