"""Shared fakes for the Telegram and Urban Dictionary collaborators."""

from __future__ import annotations

from typing import Any

import pytest

from models.definition import Definition


class FakeBot:
    """Records the Bot API calls made through TelegramService."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, dict[str, Any]]] = []

    async def send_chat_action(self, **kwargs: Any) -> bool:
        self.calls.append(("send_chat_action", kwargs))
        return True

    async def send_message(self, **kwargs: Any) -> None:
        self.calls.append(("send_message", kwargs))

    async def set_webhook(self, **kwargs: Any) -> bool:
        self.calls.append(("set_webhook", kwargs))
        return True

    def sent_texts(self) -> list[str]:
        return [kwargs["text"] for name, kwargs in self.calls if name == "send_message"]


class StubDictionaryClient:
    """Returns canned definitions and remembers the looked-up terms."""

    def __init__(self, definitions: list[Definition] | None = None) -> None:
        self.definitions = definitions or []
        self.terms: list[str] = []
        self.random_calls = 0

    async def define(self, term: str) -> list[Definition]:
        self.terms.append(term)
        return self.definitions

    async def random(self) -> list[Definition]:
        self.random_calls += 1
        return self.definitions


def make_update(text: str | None, first_name: str = "Alice") -> dict[str, Any]:
    message: dict[str, Any] = {
        "message_id": 42,
        "chat": {"id": 1001, "type": "private"},
        "from": {"id": 7, "is_bot": False, "first_name": first_name},
        "date": 1436700000,
    }
    if text is not None:
        message["text"] = text
    return {"update_id": 1, "message": message}


@pytest.fixture
def fake_bot() -> FakeBot:
    return FakeBot()


@pytest.fixture
def two_definitions() -> list[Definition]:
    return [
        Definition(word="handsome", definition="Good looking.", example="He is handsome."),
        Definition(word="handsome", definition="A generous amount.", example=""),
    ]
