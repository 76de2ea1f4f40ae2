"""
utils/errors.py
---------------
Exceptions raised while handling a single update.
Any of them aborts the current invocation; nothing is retried.
"""


class UrbanBotError(Exception):
    """Base class for all bot errors."""


class MalformedPayloadError(UrbanBotError):
    """An inbound update or an API response is missing required fields."""


class DictionaryApiError(UrbanBotError):
    """The Urban Dictionary API could not be reached or answered with an error."""
