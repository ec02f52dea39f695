"""
In-memory full-text search server.

Usage:
    from search_server.document import DocumentStatus
    from search_server.server import SearchServer

    server = SearchServer("и в на")
    server.add_document(1, "пушистый кот пушистый хвост", DocumentStatus.ACTIVE, [7, 2, 7])
    for document in server.find_top_documents("пушистый -пёс"):
        print(document)
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Sequence

from search_server.config import SearchConfig
from search_server.document import Document, DocumentStatus, compute_average_rating
from search_server.errors import EmptyQueryError, InvalidQueryError, InvalidWordError
from search_server.index import InvertedIndex
from search_server.query import QueryParser
from search_server.ranking import DocumentPredicate, find_all_documents, select_top_documents, status_predicate
from search_server.store import DocumentStore
from search_server.tokenizer import is_valid_word, make_unique_non_empty_strings, split_into_words

logger = logging.getLogger(__name__)


class SearchServer:
    """
    Inverted-index search over documents added one at a time.

    Args:
        stop_words: Words excluded from indexing and from plus/minus query words,
            either as one space-separated string or as an iterable of words.
        config: Ranking parameters; defaults to `SearchConfig()`.

    Raises:
        InvalidWordError: If a stop word contains control characters.
    """

    def __init__(self, stop_words: str | Iterable[str] = (), config: SearchConfig | None = None):
        if isinstance(stop_words, str):
            stop_words = split_into_words(stop_words)
        stop_words = list(stop_words)
        for word in stop_words:
            if not is_valid_word(word):
                raise InvalidWordError(f"Invalid stop word {word!r}.")
        self.stop_words: frozenset[str] = make_unique_non_empty_strings(stop_words)
        self.config = config or SearchConfig()
        self._documents = DocumentStore()
        self._index = InvertedIndex()
        self._query_parser = QueryParser(self.stop_words)

    def __len__(self) -> int:
        return self.get_document_count()

    def __iter__(self) -> Iterator[int]:
        return iter(self._documents)

    def is_stop_word(self, word: str) -> bool:
        return word in self.stop_words

    def split_into_words_no_stop(self, text: str) -> list[str]:
        """Words of the text without stop words; any invalid word, stop word or not, is an error."""
        words = []
        for word in split_into_words(text):
            if not is_valid_word(word):
                raise InvalidWordError(f"Invalid word {word!r} in document.")
            if not self.is_stop_word(word):
                words.append(word)
        return words

    def add_document(
        self,
        document_id: int,
        document: str,
        status: DocumentStatus = DocumentStatus.ACTIVE,
        ratings: Sequence[int] = (),
    ) -> None:
        """
        Indexes a document. Nothing is stored if any check fails.

        Raises:
            DuplicateDocumentError: If the id was added before.
            InvalidDocumentIdError: If the id is negative.
            InvalidWordError: If a word of the text contains control characters.
        """
        self._documents.check_new_id(document_id)
        words = self.split_into_words_no_stop(document)
        rating = compute_average_rating(ratings)

        self._index.add_document(document_id, words)
        self._documents.add(document_id, rating, status)
        logger.debug("Added document %d (%d words, rating %d, %s)", document_id, len(words), rating, status.name)

    def find_top_documents(
        self,
        raw_query: str,
        document_filter: DocumentStatus | DocumentPredicate | None = None,
    ) -> list[Document]:
        """
        Top documents for the query, best first.

        Args:
            raw_query: Space-separated words; a leading '-' marks a minus word.
            document_filter: None keeps documents with the configured default status,
                a DocumentStatus keeps documents with exactly that status, and a
                callable (document_id, status, rating) -> bool keeps those it accepts.

        Raises:
            InvalidQueryError: If the query text contains control characters.
            EmptyQueryError: If the query text is empty.
            InvalidQueryWordError: If a query word is malformed.
        """
        if not is_valid_word(raw_query):
            raise InvalidQueryError(f"Invalid query text {raw_query!r}.")
        if not raw_query:
            raise EmptyQueryError("Query text is empty.")

        if document_filter is None:
            document_filter = self.config.default_status
        if isinstance(document_filter, DocumentStatus):
            document_predicate = status_predicate(document_filter)
        else:
            document_predicate = document_filter

        query = self._query_parser.parse(raw_query)
        if query.is_stop_only():
            return []

        matched = find_all_documents(query, self._index, self._documents, document_predicate)
        result = select_top_documents(matched, self.config.max_result_document_count, self.config.relevance_epsilon)
        logger.debug("Query %r matched %d documents, returning %d", raw_query, len(matched), len(result))
        return result

    def get_document_count(self) -> int:
        return len(self._documents)

    def get_document_id(self, index: int) -> int:
        """
        Id of the document added at position `index` (0-based).

        Raises:
            DocumentIndexError: If index is outside [0, document count).
        """
        return self._documents.id_at(index)

    def match_document(self, raw_query: str, document_id: int) -> tuple[list[str], DocumentStatus]:
        """
        Plus words of the query found in the document, in lexicographic order,
        and the document's status.

        The word list is empty if any minus word occurs in the document. A query
        made only of stop words matches nothing and reports the default status.

        Raises:
            UnknownDocumentError: If no document has this id.
            InvalidQueryWordError: If a query word is malformed.
        """
        document_data = self._documents.get(document_id)

        query = self._query_parser.parse(raw_query)
        if query.is_stop_only():
            return [], self.config.default_status

        if any(self._index.contains(word, document_id) for word in query.minus_words):
            return [], document_data.status

        matched_words = [word for word in sorted(query.plus_words) if self._index.contains(word, document_id)]
        return matched_words, document_data.status
