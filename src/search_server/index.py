"""Inverted index mapping each word to the documents containing it and their term frequencies."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Iterator, Mapping

import numpy as np


class InvertedIndex:
    """
    Word -> {document id -> term frequency} postings, built one document at a time.

    Term frequency of a word in a document is its occurrence count divided by the
    number of non-stop words in that document. Postings are append-only: a document
    is indexed exactly once and never updated afterwards.
    """

    def __init__(self) -> None:
        self._word_to_document_freqs: dict[str, dict[int, float]] = {}

    def __contains__(self, word: object) -> bool:
        return word in self._word_to_document_freqs

    def __len__(self) -> int:
        return len(self._word_to_document_freqs)

    def __iter__(self) -> Iterator[str]:
        return iter(self._word_to_document_freqs)

    def add_document(self, document_id: int, words: list[str]) -> None:
        """
        Adds the postings of one document.

        Args:
            document_id: Id of the document, unique across the index.
            words: Non-stop words of the document in order, repeats included.
                An empty list adds no postings.
        """
        if not words:
            return
        word_count = len(words)
        for word, count in Counter(words).items():
            self._word_to_document_freqs.setdefault(word, {})[document_id] = count / word_count

    def postings(self, word: str) -> Mapping[int, float]:
        """Document id -> term frequency for a word; empty for unknown words."""
        return self._word_to_document_freqs.get(word, {})

    def contains(self, word: str, document_id: int) -> bool:
        return document_id in self.postings(word)

    def document_frequency(self, word: str) -> int:
        """Number of documents containing the word."""
        return len(self.postings(word))

    def inverse_document_frequency(self, words: Iterable[str], document_count: int) -> dict[str, float]:
        """
        IDF for the given words that occur in the index:
            idf(t) = ln(N / df(t))

        Words absent from the index are left out of the result rather than scored.
        """
        present = [word for word in words if word in self._word_to_document_freqs]
        if not present:
            return {}
        df_values = np.array([self.document_frequency(word) for word in present], dtype=float)
        idf = np.log(document_count / df_values)
        return {word: float(idf_value) for word, idf_value in zip(present, idf)}
