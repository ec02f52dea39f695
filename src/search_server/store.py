"""Per-document metadata in insertion order."""

from __future__ import annotations

from collections.abc import Iterator

from search_server.document import DocumentData, DocumentStatus
from search_server.errors import (
    DocumentIndexError,
    DuplicateDocumentError,
    InvalidDocumentIdError,
    UnknownDocumentError,
)


class DocumentStore:
    """
    Rating and status of every added document, plus the order ids were added in.

    Ids are supplied by the caller; the store only checks that they are
    non-negative and unused.
    """

    def __init__(self) -> None:
        self._documents: dict[int, DocumentData] = {}
        self._ids: list[int] = []

    def __len__(self) -> int:
        return len(self._documents)

    def __contains__(self, document_id: object) -> bool:
        return document_id in self._documents

    def __iter__(self) -> Iterator[int]:
        return iter(self._ids)

    def check_new_id(self, document_id: int) -> None:
        if document_id in self._documents:
            raise DuplicateDocumentError(f"Document id {document_id} already exists.")
        if document_id < 0:
            raise InvalidDocumentIdError(f"Document id {document_id} is negative.")

    def add(self, document_id: int, rating: int, status: DocumentStatus) -> None:
        self.check_new_id(document_id)
        self._documents[document_id] = DocumentData(rating, status)
        self._ids.append(document_id)

    def get(self, document_id: int) -> DocumentData:
        try:
            return self._documents[document_id]
        except KeyError:
            raise UnknownDocumentError(document_id) from None

    def id_at(self, ordinal: int) -> int:
        """Id of the document added at 0-based position `ordinal`."""
        if not 0 <= ordinal < len(self._ids):
            raise DocumentIndexError(f"Document ordinal {ordinal} is out of range [0, {len(self._ids)}).")
        return self._ids[ordinal]
