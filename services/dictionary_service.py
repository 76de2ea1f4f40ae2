"""
services/dictionary_service.py
------------------------------
Urban Dictionary lookups and reply formatting.
"""

from typing import Optional

import httpx

from config import HTTP_TIMEOUT_SECONDS, URBAN_DICTIONARY_API_URL
from models.definition import Definition
from utils.errors import DictionaryApiError, MalformedPayloadError
from utils.logger import get_logger

logger = get_logger(__name__)

NOT_FOUND_PHRASE = (
    "😢 I'm sad coz I can't find definition for your query. "
    "Try to rephrase or look for something else."
)


def build_http_client(
    base_url: str = URBAN_DICTIONARY_API_URL,
    timeout: float = HTTP_TIMEOUT_SECONDS,
) -> httpx.AsyncClient:
    """Create the HTTP client used for a single invocation."""
    return httpx.AsyncClient(
        base_url=base_url,
        timeout=httpx.Timeout(timeout),
        follow_redirects=True,
        headers={"Accept": "application/json"},
    )


class UrbanDictionaryClient:
    """Thin wrapper over the Urban Dictionary v0 API."""

    def __init__(self, http: httpx.AsyncClient):
        self.http = http

    async def define(self, term: str) -> list[Definition]:
        """Look up all definitions for a term."""
        return await self._request("define", params={"term": term})

    async def random(self) -> list[Definition]:
        """Fetch a page of random definitions."""
        return await self._request("random")

    async def _request(self, path: str, params: Optional[dict] = None) -> list[Definition]:
        try:
            response = await self.http.get(path, params=params)
            response.raise_for_status()
        except httpx.HTTPError as e:
            raise DictionaryApiError(f"Urban Dictionary request '{path}' failed: {e}") from e

        try:
            payload = response.json()
        except ValueError as e:
            raise MalformedPayloadError("Urban Dictionary returned invalid JSON") from e

        entries = payload.get("list") if isinstance(payload, dict) else None
        if not isinstance(entries, list):
            raise MalformedPayloadError("Urban Dictionary response has no 'list' field")

        definitions = [Definition.from_api(entry) for entry in entries]
        logger.debug(f"Urban Dictionary '{path}' returned {len(definitions)} definitions")
        return definitions


def format_definition(found: Definition, total: int, with_footer: bool = True) -> str:
    """
    Render a definition as reply text.

    Args:
        found: The selected definition.
        total: Number of definitions the lookup returned.
        with_footer: Append "Found N definitions." when there are several.
    """
    text = "Phrase: " + found.word
    if total > 1:
        text += f" (found {total} definitions)"

    text += "\n\n" + found.definition

    if found.has_example():
        text += "\n\nExample:\n" + found.example

    if with_footer and total > 1:
        text += f"\n\nFound {total} definitions."

    return text


class DictionaryService:
    """Selects and formats definitions for the bot commands."""

    def __init__(self, client: UrbanDictionaryClient):
        self.client = client

    async def get_definition(self, query: str, index: int = 1) -> str:
        """Return the ``index``-th (1-based) definition of ``query``, or the not-found phrase."""
        definitions = await self.client.define(query)
        if index < 1 or index > len(definitions):
            logger.info(f"No definition #{index} for '{query}' ({len(definitions)} found)")
            return NOT_FOUND_PHRASE
        return format_definition(definitions[index - 1], len(definitions))

    async def get_random_definition(self) -> str:
        """Return the first random definition, or the not-found phrase."""
        definitions = await self.client.random()
        if not definitions:
            return NOT_FOUND_PHRASE
        return format_definition(definitions[0], len(definitions), with_footer=False)
