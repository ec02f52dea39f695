"""Parsing raw query text into plus, minus and stop words."""

from __future__ import annotations

import logging
from collections.abc import Set
from dataclasses import dataclass, field

from search_server.errors import InvalidQueryWordError
from search_server.tokenizer import is_valid_word, split_into_words

logger = logging.getLogger(__name__)

MINUS_PREFIX = "-"


@dataclass(frozen=True)
class QueryWord:
    data: str
    is_minus: bool
    is_stop: bool


@dataclass(frozen=True)
class Query:
    """
    A parsed query. Every query word lands in exactly one of the three sets.

    Attributes:
        plus_words: Required words, without prefix.
        minus_words: Forbidden words, with the leading '-' stripped.
        stop_words: Query words that are stop words, kept as typed (including any '-').
    """

    plus_words: frozenset[str] = field(default_factory=frozenset)
    minus_words: frozenset[str] = field(default_factory=frozenset)
    stop_words: frozenset[str] = field(default_factory=frozenset)

    def is_stop_only(self) -> bool:
        """True when the query has stop words but no plus or minus words."""
        return not self.plus_words and not self.minus_words and bool(self.stop_words)


class QueryParser:
    def __init__(self, stop_words: Set[str]):
        self.stop_words = stop_words

    def is_stop_word(self, word: str) -> bool:
        return word in self.stop_words

    def parse_query_word(self, text: str) -> QueryWord:
        is_minus = text.startswith(MINUS_PREFIX)
        if is_minus:
            text = text[len(MINUS_PREFIX):]
        if not text or text.startswith(MINUS_PREFIX) or not is_valid_word(text):
            raise InvalidQueryWordError(f"Invalid query word {text!r}.")
        return QueryWord(text, is_minus, self.is_stop_word(text))

    def parse(self, text: str) -> Query:
        plus_words: set[str] = set()
        minus_words: set[str] = set()
        stop_words: set[str] = set()
        for word in split_into_words(text):
            query_word = self.parse_query_word(word)
            if query_word.is_stop:
                stop_words.add(word)
            elif query_word.is_minus:
                minus_words.add(query_word.data)
            else:
                plus_words.add(query_word.data)
        query = Query(frozenset(plus_words), frozenset(minus_words), frozenset(stop_words))
        logger.debug(
            "Parsed query %r: %d plus, %d minus, %d stop words",
            text,
            len(query.plus_words),
            len(query.minus_words),
            len(query.stop_words),
        )
        return query
