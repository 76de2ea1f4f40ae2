"""Tests for splitting over-long replies into marked fragments."""

from __future__ import annotations

from utils.chunker import split_message


def test_split_message_keeps_short_text_whole() -> None:
    assert split_message("hello") == ["hello"]
    assert split_message("x" * 4096) == ["x" * 4096]


def test_split_message_returns_nothing_for_empty_text() -> None:
    assert split_message("") == []


def test_split_message_marks_three_fragments() -> None:
    """A 9000 character reply becomes three ordered fragments."""

    text = "a" * 4090 + "b" * 4090 + "c" * 820
    fragments = split_message(text)

    assert len(fragments) == 3
    assert fragments[0] == "a" * 4090 + "..."
    assert fragments[1] == "..." + "b" * 4090 + "..."
    assert fragments[2] == "..." + "c" * 820
    assert all(len(f.strip(".")) <= 4090 for f in fragments)


def test_split_message_two_fragments_just_over_limit() -> None:
    fragments = split_message("z" * 4097)
    assert fragments == ["z" * 4090 + "...", "..." + "z" * 7]


def test_split_message_preserves_content_in_order() -> None:
    text = "".join(str(i % 10) for i in range(12000))
    fragments = split_message(text)

    payload = fragments[0][:-3] + "".join(f[3:-3] for f in fragments[1:-1]) + fragments[-1][3:]
    assert payload == text
