"""
models/message.py
-----------------
Domain models for the messages flowing through the bot.
"""

from dataclasses import dataclass
from typing import Any

from utils.errors import MalformedPayloadError


def _is_int(value: Any) -> bool:
    # JSON true/false decode to bool, which subclasses int
    return isinstance(value, int) and not isinstance(value, bool)


@dataclass
class IncomingMessage:
    """
    A single message received through the webhook.

    Attributes:
        chat_id: Telegram chat the message was posted in.
        message_id: ID of the message, used to thread the reply.
        sender_first_name: First name of the sender (may be empty).
        text: Raw message text (empty for non-text messages).
    """
    chat_id: int
    message_id: int
    sender_first_name: str = ""
    text: str = ""

    @classmethod
    def from_update(cls, update: Any) -> "IncomingMessage":
        """
        Build a message from a decoded Telegram update.

        Raises:
            MalformedPayloadError: if the update has no message,
                or the message lacks ``chat.id`` or ``message_id``.
        """
        if not isinstance(update, dict):
            raise MalformedPayloadError("Update must be a JSON object")

        message = update.get("message")
        if not isinstance(message, dict):
            raise MalformedPayloadError("Update contains no message")

        chat = message.get("chat")
        if not isinstance(chat, dict) or not _is_int(chat.get("id")):
            raise MalformedPayloadError("Message has no chat.id")

        message_id = message.get("message_id")
        if not _is_int(message_id):
            raise MalformedPayloadError("Message has no message_id")

        sender = message.get("from")
        first_name = sender.get("first_name") if isinstance(sender, dict) else None
        text = message.get("text")

        return cls(
            chat_id=chat["id"],
            message_id=message_id,
            sender_first_name=first_name if isinstance(first_name, str) else "",
            text=text if isinstance(text, str) else "",
        )


@dataclass
class OutboundMessage:
    """A reply (or one fragment of a reply) to be sent back to the chat."""
    chat_id: int
    reply_to_message_id: int
    text: str

    def __str__(self) -> str:
        return f"chat={self.chat_id} reply_to={self.reply_to_message_id} len={len(self.text)}"
