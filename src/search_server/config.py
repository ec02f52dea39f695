"""Ranking parameters."""

from __future__ import annotations

from dataclasses import dataclass

from search_server.document import DocumentStatus

MAX_RESULT_DOCUMENT_COUNT = 5
EPSILON = 1e-6


@dataclass(frozen=True)
class SearchConfig:
    """
    Ranking parameters for a SearchServer.

    Attributes:
        max_result_document_count: Number of results kept after sorting.
        relevance_epsilon: Relevances closer than this are ranked by rating instead.
        default_status: Status matched when find_top_documents gets no filter.
    """

    max_result_document_count: int = MAX_RESULT_DOCUMENT_COUNT
    relevance_epsilon: float = EPSILON
    default_status: DocumentStatus = DocumentStatus.ACTIVE

    def __post_init__(self) -> None:
        if self.max_result_document_count <= 0:
            raise ValueError("max_result_document_count must be positive.")
        if self.relevance_epsilon < 0:
            raise ValueError("relevance_epsilon must be non-negative.")
