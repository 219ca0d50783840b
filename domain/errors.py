"""Exceptions raised by the DocumentHub domain."""
from __future__ import annotations


class DocumentHubError(Exception):
    """Base class for all catalog errors."""


class InvalidFacetValueError(DocumentHubError, ValueError):
    """A facet constraint or document attribute is outside its vocabulary."""

    def __init__(self, facet: str, value: object, reason: str | None = None) -> None:
        self.facet = facet
        self.value = value
        super().__init__(reason or f"Invalid value {value!r} for facet '{facet}'")


class InvalidDocumentError(DocumentHubError, ValueError):
    """An upload is missing its title or its attachment."""


class DuplicateDocumentError(DocumentHubError):
    """A document id is already present in the collection."""

    def __init__(self, document_id: str) -> None:
        self.document_id = document_id
        super().__init__(f"Document '{document_id}' already exists")


class UnsupportedLocaleError(DocumentHubError, ValueError):
    """A locale code the catalog has no dictionaries for."""


__all__ = [
    "DocumentHubError",
    "InvalidFacetValueError",
    "InvalidDocumentError",
    "DuplicateDocumentError",
    "UnsupportedLocaleError",
]
