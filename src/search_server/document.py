"""Document status, stored document data and ranked result entries."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum


class DocumentStatus(Enum):
    ACTIVE = "ACTIVE"
    IRRELEVANT = "IRRELEVANT"
    EXCLUDED = "EXCLUDED"
    REMOVED = "REMOVED"


@dataclass(frozen=True)
class DocumentData:
    rating: int
    status: DocumentStatus


@dataclass(frozen=True)
class Document:
    """
    A single ranked search result.

    Attributes:
        id (int): Caller-supplied document id.
        relevance (float): Sum of TF-IDF over the query's plus words.
        rating (int): Average rating stored at ingestion.
    """

    id: int
    relevance: float = 0.0
    rating: int = 0

    def __str__(self) -> str:
        return f"{{ document_id = {self.id}, relevance = {self.relevance:.6f}, rating = {self.rating} }}"


def compute_average_rating(ratings: Sequence[int]) -> int:
    """
    Integer mean of the ratings, truncated toward zero.

    Floor division would round (-1 + 0) / 2 down to -1; truncation gives 0.
    Returns 0 for an empty sequence.
    """
    if not ratings:
        return 0
    total = sum(ratings)
    quotient = abs(total) // len(ratings)
    return quotient if total >= 0 else -quotient


def format_match_result(document_id: int, words: Sequence[str], status: DocumentStatus) -> str:
    matched = "".join(f" {word}" for word in words)
    return f"{{ document_id = {document_id}, status = {status.name}, words ={matched}}}"
