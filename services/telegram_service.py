"""
services/telegram_service.py
----------------------------
Outbound calls to the Telegram Bot API.
Failures surface as telegram.error.TelegramError and abort the invocation.
"""

from telegram import Bot, LinkPreviewOptions, ReplyParameters
from telegram.constants import ChatAction

from models.message import OutboundMessage
from utils.logger import get_logger

logger = get_logger(__name__)


class TelegramService:
    """Sends replies through an injected ``telegram.Bot``."""

    def __init__(self, bot: Bot):
        self.bot = bot

    async def send_typing(self, chat_id: int) -> None:
        await self.bot.send_chat_action(chat_id=chat_id, action=ChatAction.TYPING)

    async def send(self, outbound: OutboundMessage) -> None:
        """Show the typing indicator, then post the message as a reply."""
        await self.send_typing(outbound.chat_id)
        await self.bot.send_message(
            chat_id=outbound.chat_id,
            text=outbound.text,
            reply_parameters=ReplyParameters(message_id=outbound.reply_to_message_id),
            link_preview_options=LinkPreviewOptions(is_disabled=True),
        )
        logger.debug(f"Sent message {outbound}")

    async def set_webhook(self, url: str) -> bool:
        """Register ``url`` to receive updates via an outgoing webhook."""
        result = await self.bot.set_webhook(url=url)
        logger.info(f"Webhook set to {url}")
        return result
