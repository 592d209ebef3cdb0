import pytest

from app.adapters.base import IncomingMessageParser
from app.adapters.registry import ParserRegistry
from app.adapters.whatsapp import WhatsAppIncomingMessageParser
from app.types import TextMessage


class DummyParser(IncomingMessageParser):
    def parse_text_message(self, payload):  # type: ignore[no-untyped-def]
        return TextMessage(
            id=self.get_message_id(),
            end_user_phone_number=payload["from"],
            text="dummy",
            payload=payload,
        )

    def parse_interactive_button_message(self, payload):  # type: ignore[no-untyped-def]
        raise NotImplementedError

    def parse_location_message(self, payload):  # type: ignore[no-untyped-def]
        raise NotImplementedError

    def parse_image_message(self, payload):  # type: ignore[no-untyped-def]
        raise NotImplementedError


@pytest.fixture()
def isolated_registry(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(ParserRegistry, "_registry", dict(ParserRegistry._registry))


def test_registry_get_and_register(isolated_registry: None) -> None:
    # whatsapp is pre-registered
    parser = ParserRegistry.get("whatsapp")
    assert isinstance(parser, WhatsAppIncomingMessageParser)

    # register custom
    ParserRegistry.register("dummy", DummyParser)
    d = ParserRegistry.get("dummy", id_generator=lambda: "fixed")
    assert isinstance(d, DummyParser)
    msg = d.parse({"from": "+1", "type": "text"})
    assert msg.id == "fixed"
    assert msg.text == "dummy"
    assert ParserRegistry.providers() == ["dummy", "whatsapp"]


def test_registered_parser_does_not_leak() -> None:
    assert ParserRegistry.providers() == ["whatsapp"]
    with pytest.raises(KeyError):
        ParserRegistry.get("dummy")


def test_registry_unknown() -> None:
    with pytest.raises(KeyError):
        ParserRegistry.get("missing")


def test_default_ids_are_unique() -> None:
    parser = ParserRegistry.get("whatsapp")
    assert parser.get_message_id() != parser.get_message_id()
