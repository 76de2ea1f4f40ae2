"""
handlers/update_handler.py
--------------------------
Handles a single webhook update end to end:
receive → parse → lookup → format → chunk → send.
"""

from typing import Any

from handlers.replies import HELP_TEXT, greeting_text
from models.message import IncomingMessage, OutboundMessage
from services.command_parser import is_known_command, normalize_command, parse_command
from services.dictionary_service import DictionaryService
from services.telegram_service import TelegramService
from utils.chunker import split_message
from utils.logger import get_logger

logger = get_logger(__name__)


async def build_reply(message: IncomingMessage, dictionary: DictionaryService) -> str:
    """
    Compute the reply text for a message.

    Returns an empty string for unknown commands and plain text.
    """
    parsed = parse_command(message.text)
    if not is_known_command(parsed.command):
        logger.debug(f"Chat {message.chat_id}: ignoring '{parsed.command}'")
        return ""

    command = normalize_command(parsed.command)

    if command == "/help":
        return HELP_TEXT
    if command == "/define" and parsed.has_query():
        logger.info(f"Chat {message.chat_id}: define '{parsed.query}' #{parsed.definition_index}")
        return await dictionary.get_definition(parsed.query, parsed.definition_index)
    if command in ("/define", "/start"):
        return greeting_text(message.sender_first_name)
    # /random
    logger.info(f"Chat {message.chat_id}: random definition")
    return await dictionary.get_random_definition()


async def handle_update(
    update: Any,
    dictionary: DictionaryService,
    telegram: TelegramService,
) -> list[OutboundMessage]:
    """
    Respond to one decoded webhook update.

    Raises:
        MalformedPayloadError: if the update carries no usable message.
        DictionaryApiError / telegram.error.TelegramError: on API failures.

    Returns:
        The messages that were sent, in order.
    """
    message = IncomingMessage.from_update(update)
    reply = await build_reply(message, dictionary)

    sent = []
    for fragment in split_message(reply):
        outbound = OutboundMessage(
            chat_id=message.chat_id,
            reply_to_message_id=message.message_id,
            text=fragment,
        )
        await telegram.send(outbound)
        sent.append(outbound)

    if len(sent) > 1:
        logger.info(f"Chat {message.chat_id}: reply split into {len(sent)} messages")
    return sent
