"""
main.py
-------
Entry point for the UrbanBot Telegram bot.

Commands:
    respond      Handle one webhook update (JSON from a file or stdin).
    set-webhook  Register the URL Telegram should push updates to.
    serve        Listen for webhook POSTs from Telegram and answer them.
    poll         Long-poll Telegram locally, handling updates the same way.
"""

import asyncio
import json
import sys
from typing import Any, Optional

import typer
from telegram import Bot, Update
from telegram.error import TelegramError
from telegram.ext import Application, ContextTypes, MessageHandler, filters

from config import (
    TELEGRAM_BOT_TOKEN,
    WEBHOOK_LISTEN,
    WEBHOOK_PATH,
    WEBHOOK_PORT,
    WEBHOOK_SECRET_TOKEN,
    WEBHOOK_URL,
)
from handlers.update_handler import handle_update
from services.dictionary_service import DictionaryService, UrbanDictionaryClient, build_http_client
from services.telegram_service import TelegramService
from utils.errors import MalformedPayloadError, UrbanBotError
from utils.logger import get_logger

logger = get_logger(__name__)

app = typer.Typer(no_args_is_help=True, help="Urban Dictionary Telegram bot.")

TokenOption = typer.Option(
    None, "--token", help="Bot token (defaults to TELEGRAM_BOT_TOKEN)."
)


def _resolve_token(token: Optional[str]) -> str:
    token = token or TELEGRAM_BOT_TOKEN
    if token == "":
        raise typer.BadParameter("TELEGRAM_BOT_TOKEN is not set and --token was not given")
    return token


def _read_payload(source: str) -> Any:
    """Decode the update JSON from a file path, or stdin for '-'."""
    try:
        if source == "-":
            data = sys.stdin.read()
        else:
            with open(source, encoding="utf-8") as f:
                data = f.read()
    except OSError as e:
        raise MalformedPayloadError(f"Cannot read update: {e}") from e
    try:
        return json.loads(data)
    except ValueError as e:
        raise MalformedPayloadError(f"Update is not valid JSON: {e}") from e


async def _dispatch(update: Any, bot: Bot) -> None:
    async with build_http_client() as http:
        dictionary = DictionaryService(UrbanDictionaryClient(http))
        await handle_update(update, dictionary, TelegramService(bot))


async def _respond(update: Any, token: str) -> None:
    async with Bot(token) as bot:
        await _dispatch(update, bot)


async def _set_webhook(url: str, token: str) -> None:
    async with Bot(token) as bot:
        await TelegramService(bot).set_webhook(url)


async def _on_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Application callback: route the raw update through the webhook path."""
    try:
        await _dispatch(update.to_dict(), context.bot)
    except (UrbanBotError, TelegramError) as e:
        logger.error(f"Failed to handle update {update.update_id}: {e}")


@app.command()
def respond(
    payload: str = typer.Argument("-", help="Path to the update JSON, or '-' for stdin."),
    token: Optional[str] = TokenOption,
) -> None:
    """Handle a single webhook update."""
    token = _resolve_token(token)
    try:
        asyncio.run(_respond(_read_payload(payload), token))
    except (UrbanBotError, TelegramError) as e:
        logger.error(f"Failed to handle update: {e}")
        raise typer.Exit(code=1)


@app.command("set-webhook")
def set_webhook(
    url: str = typer.Argument(..., help="HTTPS URL that receives updates."),
    token: Optional[str] = TokenOption,
) -> None:
    """Register the webhook URL with Telegram."""
    token = _resolve_token(token)
    try:
        asyncio.run(_set_webhook(url, token))
    except TelegramError as e:
        logger.error(f"Failed to set webhook: {e}")
        raise typer.Exit(code=1)


def build_application(token: str) -> Application:
    """Application shared by `poll` and `serve`: every command goes to `_on_command`."""
    application = Application.builder().token(token).build()
    application.add_handler(MessageHandler(filters.COMMAND, _on_command))
    return application


@app.command()
def serve(
    webhook_url: str = typer.Option(
        WEBHOOK_URL, "--webhook-url", help="Public HTTPS URL Telegram posts updates to."
    ),
    listen: str = typer.Option(WEBHOOK_LISTEN, "--listen", help="Address to bind."),
    port: int = typer.Option(WEBHOOK_PORT, "--port", help="Port to bind."),
    url_path: str = typer.Option(WEBHOOK_PATH, "--url-path", help="Path the listener answers on."),
    token: Optional[str] = TokenOption,
) -> None:
    """Listen for webhook POSTs and answer each update."""
    token = _resolve_token(token)
    if webhook_url == "":
        raise typer.BadParameter("WEBHOOK_URL is not set and --webhook-url was not given")

    logger.info(f"Starting webhook listener on {listen}:{port}/{url_path}")
    application = build_application(token)
    application.run_webhook(
        listen=listen,
        port=port,
        url_path=url_path,
        webhook_url=webhook_url,
        secret_token=WEBHOOK_SECRET_TOKEN or None,
        allowed_updates=["message"],
    )
    logger.info("UrbanBot stopped.")


@app.command()
def poll(token: Optional[str] = TokenOption) -> None:
    """Run the bot with long polling (local development)."""
    token = _resolve_token(token)

    logger.info("Starting Telegram bot...")
    application = build_application(token)

    logger.info("🚀 UrbanBot is polling! Press Ctrl+C to stop.")
    application.run_polling(drop_pending_updates=True, allowed_updates=["message"])
    logger.info("UrbanBot stopped.")


if __name__ == "__main__":
    app()
