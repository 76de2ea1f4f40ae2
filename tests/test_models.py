"""Tests for decoding webhook updates and API entries into models."""

from __future__ import annotations

import pytest

from models.definition import Definition
from models.message import IncomingMessage
from utils.errors import MalformedPayloadError
from tests.conftest import make_update


def test_incoming_message_from_update() -> None:
    message = IncomingMessage.from_update(make_update("/help", first_name="Bob"))
    assert message == IncomingMessage(chat_id=1001, message_id=42, sender_first_name="Bob", text="/help")


def test_incoming_message_defaults_missing_text_and_sender() -> None:
    update = make_update(None)
    del update["message"]["from"]

    message = IncomingMessage.from_update(update)

    assert message.text == ""
    assert message.sender_first_name == ""


@pytest.mark.parametrize(
    "update",
    [
        [],
        {"update_id": 1},
        {"update_id": 1, "edited_message": {"message_id": 1, "chat": {"id": 1}}},
        {"message": {"message_id": 1, "chat": {}}},
        {"message": {"chat": {"id": 1}}},
        {"message": {"message_id": "1", "chat": {"id": 1}}},
        {"message": {"message_id": 1, "chat": {"id": True}}},
        {"message": {"message_id": False, "chat": {"id": 1}}},
    ],
)
def test_incoming_message_rejects_malformed_updates(update) -> None:
    with pytest.raises(MalformedPayloadError):
        IncomingMessage.from_update(update)


def test_definition_from_api_ignores_extra_fields() -> None:
    entry = {"word": "w", "definition": "d", "example": "e", "thumbs_up": 10, "defid": 1}
    assert Definition.from_api(entry) == Definition(word="w", definition="d", example="e")


def test_definition_from_api_requires_word_and_definition() -> None:
    with pytest.raises(MalformedPayloadError):
        Definition.from_api({"word": "w"})
    with pytest.raises(MalformedPayloadError):
        Definition.from_api("w")


def test_definition_has_example() -> None:
    assert Definition(word="w", definition="d", example="e").has_example()
    assert not Definition(word="w", definition="d", example="").has_example()
    assert not Definition(word="w", definition="d").has_example()
