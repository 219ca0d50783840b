"""Relevance ranker over localized title, document type and department."""
from __future__ import annotations

from typing import Callable, Iterable

from domain.entities import Document, FacetCategory, Locale, ScoredDocument

TranslateFn = Callable[[FacetCategory, str, Locale], str]
TranslateTitleFn = Callable[[str, Locale], str]

TITLE_WEIGHT = 3
DOC_TYPE_WEIGHT = 2
DEPARTMENT_WEIGHT = 1


def _rendered(raw: str, rendered: str | None) -> str:
    # identity fallback when the lookup has nothing for this value
    return rendered if rendered else raw


def relevance_score(
    document: Document,
    query: str,
    locale: Locale,
    translate: TranslateFn,
    translate_title: TranslateTitleFn,
) -> int:
    """Score one document against ``query`` as the user sees it in ``locale``."""

    needle = query.strip().lower()
    if not needle:
        return 0

    title = _rendered(document.title, translate_title(document.title, locale)).lower()
    doc_type = _rendered(document.doc_type, translate(FacetCategory.DOC_TYPES, document.doc_type, locale)).lower()
    department = _rendered(
        document.department, translate(FacetCategory.DEPARTMENTS, document.department, locale)
    ).lower()

    score = 0
    if needle in title:
        score += TITLE_WEIGHT
    if needle in doc_type:
        score += DOC_TYPE_WEIGHT
    if needle in department:
        score += DEPARTMENT_WEIGHT
    return score


def score_documents(
    documents: Iterable[Document],
    search_text: str,
    locale: Locale,
    translate: TranslateFn,
    translate_title: TranslateTitleFn,
) -> list[ScoredDocument]:
    """Order documents for display and attach their scores.

    An empty query falls back to newest-first ordering with every score at
    zero. Otherwise documents scoring zero are dropped and the rest are
    sorted by score; ties keep their input order.
    """

    query = (search_text or "").strip()
    if not query:
        newest_first = sorted(documents, key=lambda document: document.created_at, reverse=True)
        return [ScoredDocument(document=document) for document in newest_first]

    scored = [
        ScoredDocument(
            document=document,
            score=relevance_score(document, query, locale, translate, translate_title),
        )
        for document in documents
    ]
    matches = [item for item in scored if item.score > 0]
    return sorted(matches, key=lambda item: item.score, reverse=True)


def rank_documents(
    documents: Iterable[Document],
    search_text: str,
    locale: Locale,
    translate: TranslateFn,
    translate_title: TranslateTitleFn,
) -> list[Document]:
    """Return the documents in result order without their scores."""
    return [item.document for item in score_documents(documents, search_text, locale, translate, translate_title)]


__all__ = [
    "TranslateFn",
    "TranslateTitleFn",
    "relevance_score",
    "score_documents",
    "rank_documents",
]
