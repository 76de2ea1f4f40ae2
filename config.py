"""
config.py
---------
Central configuration module. Loads all environment variables
from the .env file and exposes them as typed constants.
"""

import os
from dotenv import load_dotenv

load_dotenv()


# ── Telegram ──────────────────────────────────────────────
TELEGRAM_BOT_TOKEN: str = os.getenv("TELEGRAM_BOT_TOKEN", "")
BOT_USERNAME: str = os.getenv("BOT_USERNAME", "urbanbot").lstrip("@").lower()

# Webhook listener used by `serve`
WEBHOOK_URL: str = os.getenv("WEBHOOK_URL", "")
WEBHOOK_LISTEN: str = os.getenv("WEBHOOK_LISTEN", "0.0.0.0")
WEBHOOK_PORT: int = int(os.getenv("WEBHOOK_PORT", "8443"))
WEBHOOK_PATH: str = os.getenv("WEBHOOK_PATH", "")
WEBHOOK_SECRET_TOKEN: str = os.getenv("WEBHOOK_SECRET_TOKEN", "")

# Telegram rejects messages longer than this
MESSAGE_MAX_LENGTH: int = 4096
MESSAGE_CHUNK_LENGTH: int = 4090

# ── Urban Dictionary ──────────────────────────────────────
URBAN_DICTIONARY_API_URL: str = os.getenv(
    "URBAN_DICTIONARY_API_URL", "http://api.urbandictionary.com/v0/"
)
HTTP_TIMEOUT_SECONDS: float = float(os.getenv("HTTP_TIMEOUT_SECONDS", "10"))

# ── Logging ───────────────────────────────────────────────
LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()
