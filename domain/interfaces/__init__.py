"""Abstract interfaces for the DocumentHub system."""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Sequence

from domain.entities import Document, FacetCategory, Locale


class DocumentRepository(ABC):
    """Source of the current document collection. Append-only."""

    @abstractmethod
    def add(self, document: Document) -> None:
        """Store a document record."""

    @abstractmethod
    def list(self) -> Sequence[Document]:
        """Return a snapshot of all stored documents in insertion order."""

    @abstractmethod
    def get(self, document_id: str) -> Document | None:
        """Retrieve a document by id."""


class Translator(ABC):
    """Renders raw catalog values in a display locale.

    Both lookups are total: a value without a known rendering is returned
    unchanged.
    """

    @abstractmethod
    def translate(self, category: FacetCategory, value: str, locale: Locale) -> str:
        """Return the display label of a facet value."""

    @abstractmethod
    def translate_title(self, title: str, locale: Locale) -> str:
        """Return the display rendering of a document title."""


__all__ = [
    "DocumentRepository",
    "Translator",
]
