"""
models/definition.py
--------------------
Domain models for parsed commands and dictionary entries.
"""

from dataclasses import dataclass
from typing import Any, Optional

from utils.errors import MalformedPayloadError


@dataclass
class ParsedCommand:
    """
    A command extracted from message text.

    Attributes:
        command: Lower-cased command token, e.g. ``/define``.
        query: Text following the command, without the ``*N`` marker.
        definition_index: 1-based index of the requested definition.
    """
    command: str
    query: str = ""
    definition_index: int = 1

    def has_query(self) -> bool:
        """Returns True if the command carries query text."""
        return self.query != ""


@dataclass
class Definition:
    """A single Urban Dictionary entry."""
    word: str
    definition: str
    example: Optional[str] = None

    @classmethod
    def from_api(cls, entry: Any) -> "Definition":
        """
        Build a definition from one item of the API ``list`` field.

        Raises:
            MalformedPayloadError: if ``word`` or ``definition`` is missing.
        """
        if not isinstance(entry, dict):
            raise MalformedPayloadError("Definition entry must be a JSON object")

        word = entry.get("word")
        definition = entry.get("definition")
        if not isinstance(word, str) or not isinstance(definition, str):
            raise MalformedPayloadError("Definition entry lacks word or definition")

        example = entry.get("example")
        return cls(
            word=word,
            definition=definition,
            example=example if isinstance(example, str) else None,
        )

    def has_example(self) -> bool:
        return self.example is not None and self.example != ""
