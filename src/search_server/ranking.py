"""
TF-IDF ranking of documents against a parsed query.

Relevance of a document is the sum over the query's plus words of
    tf(word, document) * ln(N / df(word))
Documents containing any minus word are dropped, the caller's predicate filters
the rest, and the survivors are sorted by relevance (ties within epsilon go to
the higher rating) and cut to the top k.
"""

from __future__ import annotations

from collections.abc import Callable
from functools import cmp_to_key

from search_server.config import EPSILON
from search_server.document import Document, DocumentStatus
from search_server.index import InvertedIndex
from search_server.query import Query
from search_server.store import DocumentStore

DocumentPredicate = Callable[[int, DocumentStatus, int], bool]


def status_predicate(status: DocumentStatus) -> DocumentPredicate:
    """Predicate accepting only documents with exactly this status."""

    def predicate(document_id: int, document_status: DocumentStatus, rating: int) -> bool:
        return document_status == status

    return predicate


def find_all_documents(
    query: Query,
    index: InvertedIndex,
    documents: DocumentStore,
    document_predicate: DocumentPredicate,
) -> list[Document]:
    """
    Scores every document hit by a plus word, in ascending id order.

    Args:
        query: Parsed query.
        index: Inverted index to read postings from.
        documents: Store holding rating and status of every indexed document.
        document_predicate: Called as (id, status, rating); False drops the document.

    Returns:
        Unsorted result entries, one per surviving document.
    """
    idf = index.inverse_document_frequency(sorted(query.plus_words), len(documents))

    document_to_relevance: dict[int, float] = {}
    for word, inverse_document_freq in idf.items():
        for document_id, term_freq in index.postings(word).items():
            document_data = documents.get(document_id)
            if document_predicate(document_id, document_data.status, document_data.rating):
                document_to_relevance[document_id] = (
                    document_to_relevance.get(document_id, 0.0) + term_freq * inverse_document_freq
                )

    for word in query.minus_words:
        for document_id in index.postings(word):
            document_to_relevance.pop(document_id, None)

    return [
        Document(document_id, relevance, documents.get(document_id).rating)
        for document_id, relevance in sorted(document_to_relevance.items())
    ]


def compare_documents(lhs: Document, rhs: Document, epsilon: float = EPSILON) -> int:
    """Orders by descending relevance, then descending rating when relevances are within epsilon."""
    if abs(lhs.relevance - rhs.relevance) < epsilon:
        return rhs.rating - lhs.rating
    return -1 if lhs.relevance > rhs.relevance else 1


def select_top_documents(documents: list[Document], top_k: int, epsilon: float = EPSILON) -> list[Document]:
    """Sorts with `compare_documents` (stable for full ties) and keeps the first top_k."""
    ranked = sorted(documents, key=cmp_to_key(lambda lhs, rhs: compare_documents(lhs, rhs, epsilon)))
    return ranked[:top_k]
