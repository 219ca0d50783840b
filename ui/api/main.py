"""FastAPI layer that exposes catalog, upload and search operations."""
from __future__ import annotations

import base64
import binascii
import logging
from datetime import datetime

from fastapi import FastAPI, HTTPException, Query as FastAPIQuery
from pydantic import BaseModel

from application.use_cases.ingest_documents import add_document
from application.use_cases.rank_documents import score_documents
from application.use_cases.search import search_documents
from domain.entities import Attachment, Document, DocumentDraft, FacetCategory, FilterCriteria, Locale
from domain.errors import DuplicateDocumentError
from infrastructure.config import Container, ContainerConfig, build_default_container
from ui.logging_utils import setup_logging

logger = logging.getLogger(__name__)


class AttachmentPayload(BaseModel):
    filename: str
    content_type: str = "application/octet-stream"
    content_base64: str


class DocumentPayload(BaseModel):
    title: str
    department: str
    ministry: str
    doc_type: str
    year: int
    status: str
    attachment: AttachmentPayload


class DocumentView(BaseModel):
    id: str
    title: str
    department: str
    ministry: str
    doc_type: str
    year: int
    status: str
    created_at: datetime
    filename: str
    raw: dict[str, str]
    score: int = 0


class SearchResponse(BaseModel):
    query: str
    locale: str
    total: int
    results: list[DocumentView]


class FacetOption(BaseModel):
    value: str
    label: str


class VocabularyResponse(BaseModel):
    locale: str
    departments: list[FacetOption]
    ministries: list[FacetOption]
    doc_types: list[FacetOption]
    statuses: list[FacetOption]
    years: list[int]


def create_app(container: Container | None = None) -> FastAPI:
    container = container or build_default_container(ContainerConfig.from_env())
    translator = container.translator
    app = FastAPI(title="DocumentHub API")

    def resolve_locale(locale: str | None) -> Locale:
        if not locale:
            return container.default_locale
        try:
            return Locale.parse(locale)
        except ValueError as exc:
            raise HTTPException(status_code=422, detail=str(exc)) from exc

    def render(document: Document, locale: Locale, score: int = 0) -> DocumentView:
        return DocumentView(
            id=document.id,
            title=translator.translate_title(document.title, locale),
            department=translator.translate(FacetCategory.DEPARTMENTS, document.department, locale),
            ministry=translator.translate(FacetCategory.MINISTRIES, document.ministry, locale),
            doc_type=translator.translate(FacetCategory.DOC_TYPES, document.doc_type, locale),
            year=document.year,
            status=translator.translate(FacetCategory.STATUSES, document.status, locale),
            created_at=document.created_at,
            filename=document.attachment.filename,
            raw={
                "title": document.title,
                "department": document.department,
                "ministry": document.ministry,
                "doc_type": document.doc_type,
                "status": document.status,
            },
            score=score,
        )

    def options(category: FacetCategory, values: tuple[str, ...], locale: Locale) -> list[FacetOption]:
        return [FacetOption(value=value, label=translator.translate(category, value, locale)) for value in values]

    @app.get("/documents", response_model=list[DocumentView])
    def documents_endpoint(locale: str | None = None) -> list[DocumentView]:
        active = resolve_locale(locale)
        ordered = score_documents(
            container.document_repository.list(), "", active, translator.translate, translator.translate_title
        )
        return [render(item.document, active) for item in ordered]

    @app.post("/documents", response_model=DocumentView, status_code=201)
    def upload_endpoint(payload: DocumentPayload, locale: str | None = None) -> DocumentView:
        active = resolve_locale(locale)
        try:
            data = base64.b64decode(payload.attachment.content_base64, validate=True)
        except binascii.Error as exc:
            raise HTTPException(status_code=422, detail=f"Attachment is not valid base64: {exc}") from exc
        draft = DocumentDraft(
            title=payload.title,
            attachment=Attachment(
                filename=payload.attachment.filename,
                content_type=payload.attachment.content_type,
                data=data,
            ),
            department=payload.department,
            ministry=payload.ministry,
            doc_type=payload.doc_type,
            year=payload.year,
            status=payload.status,
        )
        try:
            document = add_document(
                draft,
                document_repository=container.document_repository,
                vocabulary=container.vocabulary,
            )
        except DuplicateDocumentError as exc:
            raise HTTPException(status_code=409, detail=str(exc)) from exc
        except ValueError as exc:
            logger.warning("Rejected upload %r: %s", payload.title, exc)
            raise HTTPException(status_code=422, detail=str(exc)) from exc
        return render(document, active)

    @app.get("/search", response_model=SearchResponse)
    def search_endpoint(
        q: str = FastAPIQuery("", description="Free-text query"),
        department: str | None = None,
        ministry: str | None = None,
        doc_type: str | None = None,
        year: str | None = None,
        status: str | None = None,
        locale: str | None = None,
    ) -> SearchResponse:
        active = resolve_locale(locale)
        criteria = FilterCriteria(
            search_text=q,
            department=department,
            ministry=ministry,
            doc_type=doc_type,
            year=year,
            status=status,
        )
        try:
            results = search_documents(
                criteria,
                locale=active,
                document_repository=container.document_repository,
                translator=translator,
                vocabulary=container.vocabulary,
            )
        except ValueError as exc:
            raise HTTPException(status_code=422, detail=str(exc)) from exc
        return SearchResponse(
            query=q,
            locale=active.value,
            total=len(results),
            results=[render(item.document, active, item.score) for item in results],
        )

    @app.get("/vocabulary", response_model=VocabularyResponse)
    def vocabulary_endpoint(locale: str | None = None) -> VocabularyResponse:
        active = resolve_locale(locale)
        vocabulary = container.vocabulary
        return VocabularyResponse(
            locale=active.value,
            departments=options(FacetCategory.DEPARTMENTS, vocabulary.departments, active),
            ministries=options(FacetCategory.MINISTRIES, vocabulary.ministries, active),
            doc_types=options(FacetCategory.DOC_TYPES, vocabulary.doc_types, active),
            statuses=options(FacetCategory.STATUSES, vocabulary.statuses, active),
            years=list(vocabulary.years),
        )

    return app


setup_logging()
app = create_app()
