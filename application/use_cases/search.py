"""Use case that filters and ranks the catalog for one query."""
from __future__ import annotations

import logging

from application.use_cases.filter_documents import filter_documents, validate_criteria
from application.use_cases.rank_documents import score_documents
from domain.entities import FilterCriteria, Locale, ScoredDocument, Vocabulary
from domain.interfaces import DocumentRepository, Translator

logger = logging.getLogger(__name__)


def search_documents(
    criteria: FilterCriteria,
    *,
    locale: Locale,
    document_repository: DocumentRepository,
    translator: Translator,
    vocabulary: Vocabulary | None = None,
) -> list[ScoredDocument]:
    """Search the current collection with facet constraints and free text."""

    if vocabulary is not None:
        validate_criteria(criteria, vocabulary)

    documents = document_repository.list()
    filtered = filter_documents(documents, criteria)
    results = score_documents(
        filtered,
        criteria.search_text,
        locale,
        translator.translate,
        translator.translate_title,
    )
    logger.info(
        "Search query=%r locale=%s facets=%s: %d of %d documents (%d after facets)",
        criteria.search_text,
        locale.value,
        criteria.facet_constraints(),
        len(results),
        len(documents),
        len(filtered),
    )
    return results


__all__ = ["search_documents"]
