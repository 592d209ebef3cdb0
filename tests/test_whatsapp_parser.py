from __future__ import annotations

from typing import Callable

import pytest
from pydantic import ValidationError

from app.adapters.whatsapp import WhatsAppIncomingMessageParser
from app.types import (
    ImageMessage,
    LocationMessage,
    MalformedPayloadError,
    MessageType,
    QuestionMessage,
    TextMessage,
)
from tests.fixtures.whatsapp_payloads import (
    button_reply_message,
    image_message,
    list_reply_message,
    location_message,
    text_message,
)


@pytest.fixture()
def parser(sequential_ids: Callable[[], str]) -> WhatsAppIncomingMessageParser:
    return WhatsAppIncomingMessageParser(id_generator=sequential_ids)


def test_text_message(parser: WhatsAppIncomingMessageParser) -> None:
    payload = {"from": "15551234567", "text": {"body": "Hi"}}
    msg = parser.parse_text_message(payload)
    assert isinstance(msg, TextMessage)
    assert msg.id == "msg-1"
    assert msg.type == MessageType.TEXT
    assert msg.end_user_phone_number == "15551234567"
    assert msg.text == "Hi"
    assert msg.payload is payload


def test_button_reply_becomes_question(parser: WhatsAppIncomingMessageParser) -> None:
    payload = {
        "from": "15550001111",
        "interactive": {"button_reply": {"id": "opt_1", "title": "Yes"}},
    }
    msg = parser.parse_interactive_button_message(payload)
    assert isinstance(msg, QuestionMessage)
    assert msg.type == MessageType.QUESTION
    assert msg.option_id == "opt_1"
    assert msg.option_text == "Yes"
    assert msg.end_user_phone_number == "15550001111"
    assert msg.payload is payload


def test_location_passes_through(parser: WhatsAppIncomingMessageParser) -> None:
    payload = location_message(latitude=1.0, longitude=2.0, name="Office")
    msg = parser.parse_location_message(payload)
    assert isinstance(msg, LocationMessage)
    assert msg.type == MessageType.LOCATION
    assert msg.location is payload["location"]
    assert msg.location == {"latitude": 1.0, "longitude": 2.0, "name": "Office"}
    assert msg.end_user_phone_number == "15551234567"


def test_image_uses_image_discriminator(parser: WhatsAppIncomingMessageParser) -> None:
    payload = {"from": "15551234567", "id": "media_42"}
    msg = parser.parse_image_message(payload)
    assert isinstance(msg, ImageMessage)
    assert msg.image_id == "media_42"
    assert msg.type == MessageType.IMAGE
    assert msg.type != MessageType.LOCATION
    assert msg.payload is payload


def test_payload_is_not_modified(parser: WhatsAppIncomingMessageParser) -> None:
    payload = image_message()
    snapshot = {**payload, "image": dict(payload["image"])}
    msg = parser.parse_image_message(payload)
    assert msg.payload == snapshot


def test_sequential_calls_get_distinct_ids(parser: WhatsAppIncomingMessageParser) -> None:
    first = parser.parse_text_message(text_message())
    second = parser.parse_text_message(text_message())
    assert first.id != second.id
    assert (first.id, second.id) == ("msg-1", "msg-2")


def test_messages_are_frozen(parser: WhatsAppIncomingMessageParser) -> None:
    msg = parser.parse_text_message(text_message())
    with pytest.raises(ValidationError):
        msg.text = "changed"  # type: ignore[misc]


def test_serializes_with_camel_case(parser: WhatsAppIncomingMessageParser) -> None:
    msg = parser.parse_interactive_button_message(button_reply_message())
    data = msg.model_dump(mode="json", by_alias=True)
    assert data["endUserPhoneNumber"] == "15551234567"
    assert data["optionId"] == "opt_1"
    assert data["optionText"] == "Yes"
    assert data["type"] == "question"


def test_missing_text_body(parser: WhatsAppIncomingMessageParser) -> None:
    with pytest.raises(MalformedPayloadError) as exc:
        parser.parse_text_message({"from": "1", "text": {}})
    assert exc.value.field_path == "text.body"


def test_missing_sender(parser: WhatsAppIncomingMessageParser) -> None:
    with pytest.raises(MalformedPayloadError) as exc:
        parser.parse_text_message({"text": {"body": "Hi"}})
    assert exc.value.field_path == "from"


def test_list_reply_is_not_a_button_reply(parser: WhatsAppIncomingMessageParser) -> None:
    with pytest.raises(MalformedPayloadError) as exc:
        parser.parse_interactive_button_message(list_reply_message())
    assert exc.value.field_path == "interactive.button_reply"


def test_location_requires_coordinates(parser: WhatsAppIncomingMessageParser) -> None:
    with pytest.raises(MalformedPayloadError) as exc:
        parser.parse_location_message({"from": "1", "location": {"latitude": 1.0}})
    assert exc.value.field_path == "location.longitude"


def test_image_requires_media_id(parser: WhatsAppIncomingMessageParser) -> None:
    with pytest.raises(MalformedPayloadError) as exc:
        parser.parse_image_message({"from": "1"})
    assert exc.value.field_path == "id"


def test_malformed_error_does_not_consume_id(parser: WhatsAppIncomingMessageParser) -> None:
    with pytest.raises(MalformedPayloadError):
        parser.parse_text_message({"from": "1"})
    assert parser.parse_text_message(text_message()).id == "msg-1"


def test_type_tags_are_enum_members(parser: WhatsAppIncomingMessageParser) -> None:
    messages = [
        parser.parse_text_message(text_message()),
        parser.parse_interactive_button_message(button_reply_message()),
        parser.parse_location_message(location_message()),
        parser.parse_image_message(image_message()),
    ]
    assert [m.type for m in messages] == [
        MessageType.TEXT,
        MessageType.QUESTION,
        MessageType.LOCATION,
        MessageType.IMAGE,
    ]
    assert all(isinstance(m.type, MessageType) for m in messages)


def test_unread_fields_stay_on_raw_payload(parser: WhatsAppIncomingMessageParser) -> None:
    payload = text_message()
    msg = parser.parse_text_message(payload)
    assert "timestamp" not in msg.model_dump()
    assert msg.payload["timestamp"] == "1700000000"
