"""Exception types raised by the search server."""


class SearchServerError(Exception):
    """Base class for every error raised by the search server."""


class DuplicateDocumentError(SearchServerError, ValueError):
    """A document with this id has already been added."""


class InvalidDocumentIdError(SearchServerError, ValueError):
    """Document ids must be non-negative."""


class InvalidWordError(SearchServerError, ValueError):
    """A word contains control characters."""


class InvalidQueryWordError(InvalidWordError):
    """A query word is a bare '-', starts with '--' or contains control characters."""


class InvalidQueryError(SearchServerError, ValueError):
    """The raw query text cannot be searched."""


class EmptyQueryError(InvalidQueryError):
    pass


class UnknownDocumentError(SearchServerError, KeyError):
    """No document with this id has been added."""


class DocumentIndexError(SearchServerError, IndexError):
    """Ordinal outside [0, document count)."""
