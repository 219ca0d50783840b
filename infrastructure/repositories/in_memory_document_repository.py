"""Append-only document collection held in process memory."""
from __future__ import annotations

import threading
from typing import Iterable

from domain.entities import Document
from domain.errors import DuplicateDocumentError
from domain.interfaces import DocumentRepository


class InMemoryDocumentRepository(DocumentRepository):
    """Keeps documents in insertion order and hands out immutable snapshots."""

    def __init__(self, documents: Iterable[Document] = ()) -> None:
        self._lock = threading.Lock()
        self._documents: list[Document] = []
        self._by_id: dict[str, Document] = {}
        for document in documents:
            self.add(document)

    def add(self, document: Document) -> None:
        with self._lock:
            if document.id in self._by_id:
                raise DuplicateDocumentError(document.id)
            self._documents.append(document)
            self._by_id[document.id] = document

    def list(self) -> tuple[Document, ...]:
        with self._lock:
            return tuple(self._documents)

    def get(self, document_id: str) -> Document | None:
        with self._lock:
            return self._by_id.get(document_id)

    def __len__(self) -> int:
        with self._lock:
            return len(self._documents)


__all__ = ["InMemoryDocumentRepository"]
