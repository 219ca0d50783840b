"""Use case for adding an uploaded document to the catalog."""
from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Callable
from uuid import uuid4

from domain.entities import Attachment, Document, DocumentDraft, Vocabulary
from domain.errors import InvalidDocumentError, InvalidFacetValueError
from domain.interfaces import DocumentRepository

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _new_document_id() -> str:
    return f"doc_{uuid4().hex}"


def validate_draft(draft: DocumentDraft, vocabulary: Vocabulary | None = None) -> Attachment:
    """Check an upload and return its attachment."""
    if not draft.title or not draft.title.strip():
        raise InvalidDocumentError("Please provide a title and select a file.")
    if draft.attachment is None or not draft.attachment.data:
        raise InvalidDocumentError("Please provide a title and select a file.")
    if isinstance(draft.year, bool) or not isinstance(draft.year, int):
        raise InvalidFacetValueError("year", draft.year, f"Year must be an integer, got {draft.year!r}")
    if vocabulary is not None:
        for facet in ("department", "ministry", "doc_type", "status"):
            value = getattr(draft, facet)
            if value not in vocabulary.values_for(facet):
                raise InvalidFacetValueError(facet, value)
    return draft.attachment


def _creation_time(clock: Clock) -> datetime:
    created_at = clock()
    if created_at.tzinfo is None or created_at.utcoffset() is None:
        raise InvalidDocumentError(f"Creation time must be timezone-aware, got {created_at!r}")
    return created_at.astimezone(timezone.utc)


def add_document(
    draft: DocumentDraft,
    *,
    document_repository: DocumentRepository,
    vocabulary: Vocabulary | None = None,
    clock: Clock | None = None,
) -> Document:
    """Catalog an upload, assigning its id and creation timestamp."""

    attachment = validate_draft(draft, vocabulary)
    document = Document(
        id=_new_document_id(),
        title=draft.title.strip(),
        attachment=attachment,
        department=draft.department,
        ministry=draft.ministry,
        doc_type=draft.doc_type,
        year=draft.year,
        status=draft.status,
        created_at=_creation_time(clock or _utcnow),
    )
    document_repository.add(document)
    logger.info(
        "Catalogued document %s %r (%s, %d bytes)",
        document.id,
        document.title,
        document.attachment.filename,
        document.attachment.size,
    )
    return document


__all__ = ["add_document", "validate_draft"]
