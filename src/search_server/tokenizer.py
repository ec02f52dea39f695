"""Whitespace tokenizer and the word validity check shared by ingestion and querying."""

from __future__ import annotations

from collections.abc import Iterable


def split_into_words(text: str) -> list[str]:
    """
    Splits text on the space character.

    Runs of spaces collapse and leading/trailing spaces produce no empty tokens.
    Only ' ' is a separator: tabs and other control characters stay inside the
    word so that `is_valid_word` can reject it.
    """
    return [word for word in text.split(" ") if word]


def is_valid_word(word: str) -> bool:
    """A valid word contains no control characters (code points 0x00-0x1F)."""
    return not any(ord(char) < 0x20 for char in word)


def make_unique_non_empty_strings(strings: Iterable[str]) -> frozenset[str]:
    return frozenset(string for string in strings if string)
