"""
utils/chunker.py
----------------
Splits replies that exceed Telegram's message length limit.
"""

from config import MESSAGE_CHUNK_LENGTH, MESSAGE_MAX_LENGTH

ELLIPSIS = "..."


def split_message(
    text: str,
    max_length: int = MESSAGE_MAX_LENGTH,
    chunk_length: int = MESSAGE_CHUNK_LENGTH,
) -> list[str]:
    """
    Split text into ordered fragments ready to be sent.

    Args:
        text: The full reply text.
        max_length: Texts up to this length are sent as a single message.
        chunk_length: Payload size of each fragment for longer texts.

    Returns:
        An empty list for empty text, ``[text]`` when it fits, otherwise
        fragments of ``chunk_length`` characters where the first ends with
        "...", the last starts with "..." and interior ones have both.
    """
    if text == "":
        return []
    if len(text) <= max_length:
        return [text]

    chunks = [text[i:i + chunk_length] for i in range(0, len(text), chunk_length)]
    last = len(chunks) - 1

    fragments = []
    for index, chunk in enumerate(chunks):
        if index == 0:
            fragments.append(chunk + ELLIPSIS)
        elif index == last:
            fragments.append(ELLIPSIS + chunk)
        else:
            fragments.append(ELLIPSIS + chunk + ELLIPSIS)
    return fragments
