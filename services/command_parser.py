"""
services/command_parser.py
--------------------------
Turns raw message text into a ParsedCommand.

Supported formats:
    /define handsome       → command="/define", query="handsome", index=1
    /define handsome *2    → command="/define", query="handsome", index=2
    /HELP@urbanbot         → command="/help@urbanbot" (see normalize_command)
"""

import re

from config import BOT_USERNAME
from models.definition import ParsedCommand

# Rightmost "*" followed only by ASCII digits (and whitespace) up to the end
_DEFINITION_MARKER = re.compile(r"\s*\*\s*([0-9]+)\s*$")

COMMANDS = frozenset({"/help", "/define", "/start", "/random"})


def parse_command(text: str) -> ParsedCommand:
    """
    Split message text into command, query and definition index.

    The command is the first whitespace-delimited token, lower-cased.
    A trailing ``*<digits>`` marker selects the definition; it is only
    honored when it is the rightmost ``*`` and its value is positive.
    """
    parts = text.strip().split(maxsplit=1)
    if not parts:
        return ParsedCommand(command="")

    command = parts[0].lower()
    query = parts[1].strip() if len(parts) > 1 else ""
    definition_index = 1

    marker = _DEFINITION_MARKER.search(query)
    if marker:
        index = int(marker.group(1))
        if index > 0:
            definition_index = index
            query = query[:marker.start()].strip()

    return ParsedCommand(command=command, query=query, definition_index=definition_index)


def normalize_command(command: str, bot_username: str = BOT_USERNAME) -> str:
    """Strip the ``@<bot_username>`` suffix Telegram adds in group chats."""
    suffix = "@" + bot_username.lower()
    if command.endswith(suffix):
        return command[: -len(suffix)]
    return command


def is_known_command(command: str) -> bool:
    return normalize_command(command) in COMMANDS
